"""
Keyword-driven classifiers and free-text field extractors.

Every function here is total: empty input gives the empty/default result and
nothing raises. Keyword tests are plain substring checks against the
lower-cased text, so a keyword can fire inside a longer word ("ui" in "build");
that trade-off is accepted in exchange for predictable, explainable output.
"""

import re
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from cvparser.core.schemas import DEFAULT_DEPARTMENT, DEFAULT_STATUS
from cvparser.core.sections import extract_section
from cvparser.core.vocabularies import (
    CERTIFICATION_SIGNALS,
    DEPARTMENT_KEYWORDS,
    EDUCATION_HEADERS,
    EXPERIENCE_HEADERS,
    LANGUAGE_KEYWORDS,
    SKILLS_KEYWORDS,
    STATUS_KEYWORDS,
    STREET_TYPES,
)

MAX_SKILLS = 10
MAX_CERTIFICATIONS = 5
SUMMARY_LIMIT = 200
ROLE_GUESS_LIMIT = 50
ELLIPSIS = "..."

YEARS_OF_EXPERIENCE_RE = re.compile(r"(\d+)\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE)
# "... as Senior Data Engineer at Acme" -> "Senior Data Engineer"
ROLE_RE = re.compile(r"(?:as\s+)?([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)(?:\s+(?:at|in|for)\s+)")
CERT_STRIP_RE = re.compile(r"[^\w\s-]|_")
# House number, up to four words, a street type, then the rest of the line
ADDRESS_RE = re.compile(
    r"\b\d{1,6}[^\S\n]+(?:[\w.'#-]+[^\S\n]+){0,4}?(?:" + "|".join(STREET_TYPES) + r")\b[^\n|;]*",
    re.IGNORECASE,
)


def truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


# ----------------------------------------------------------------------------
# Vocabulary classifiers (scan the lower-cased text)
# ----------------------------------------------------------------------------

def department_scores(scan_lower: str, table: Mapping[str, Sequence[str]] = DEPARTMENT_KEYWORDS) -> Dict[str, int]:
    """Number of distinct keywords present per department (presence, not occurrences)."""
    return {dept: sum(1 for k in keywords if k in scan_lower) for dept, keywords in table.items()}


def classify_department(scan_lower: str, table: Mapping[str, Sequence[str]] = DEPARTMENT_KEYWORDS) -> str:
    # Strictly-greater comparison: on a tie the department declared first keeps the lead.
    best, best_score = DEFAULT_DEPARTMENT, 0
    for dept, score in department_scores(scan_lower, table).items():
        if score > best_score:
            best, best_score = dept, score
    return best


def classify_status(scan_lower: str, table: Sequence[Tuple[str, Sequence[str]]] = STATUS_KEYWORDS) -> str:
    for status, keywords in table:
        if any(k in scan_lower for k in keywords):
            return status
    return DEFAULT_STATUS


def extract_skills(scan_lower: str, vocabulary: Sequence[str] = SKILLS_KEYWORDS, limit: int = MAX_SKILLS) -> List[str]:
    """Vocabulary entries found in the text, in vocabulary order, capped at `limit`."""
    found = [skill for skill in dict.fromkeys(vocabulary) if skill.lower() in scan_lower]
    return found[:limit]


def extract_languages(scan_lower: str, vocabulary: Sequence[str] = LANGUAGE_KEYWORDS) -> List[str]:
    return [lang.capitalize() for lang in vocabulary if lang in scan_lower]


# ----------------------------------------------------------------------------
# Line and pattern based extractors
# ----------------------------------------------------------------------------

def extract_certifications(
    lines: Sequence[str],
    signals: Sequence[str] = CERTIFICATION_SIGNALS,
    limit: int = MAX_CERTIFICATIONS,
) -> List[str]:
    """Lines mentioning a certification signal, punctuation stripped, in document order."""
    certs: List[str] = []
    for line in lines:
        if not any(s in line.lower() for s in signals):
            continue
        cleaned = CERT_STRIP_RE.sub("", line).strip()
        if 3 < len(cleaned) < 100:
            certs.append(cleaned)
            if len(certs) >= limit:
                break
    return certs


def extract_address(text: str) -> str:
    m = ADDRESS_RE.search(text or "")
    return m.group(0).strip() if m else ""


def extract_experience(text: str) -> str:
    """
    "N years of experience" when stated outright, otherwise the opening of the
    experience section. Empty when neither exists.
    """
    m = YEARS_OF_EXPERIENCE_RE.search(text or "")
    if m:
        return m.group(0)
    return truncate(extract_section(text, EXPERIENCE_HEADERS), SUMMARY_LIMIT)


def infer_role(experience: Optional[str]) -> str:
    """Job title from the experience text, or its first 50 chars as a coarse guess."""
    if not experience:
        return ""
    m = ROLE_RE.search(experience)
    if m and m.group(1):
        return m.group(1)
    return truncate(experience, ROLE_GUESS_LIMIT)


def extract_education(text: str) -> str:
    return truncate(extract_section(text, EDUCATION_HEADERS), SUMMARY_LIMIT)
