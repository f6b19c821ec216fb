import re
from typing import Sequence

from cvparser.core.schemas import UNKNOWN_NAME

NAME_SCAN_LINES = 10
NON_NAME_CHARS_RE = re.compile(r"[^A-Za-z\s]")
NAME_TOKEN_RE = re.compile(r"^[A-Z][a-z]+$")


def _looks_like_name(line: str) -> str:
    """Return the cleaned line if it reads as 2-4 capitalized words, else ''."""
    cleaned = NON_NAME_CHARS_RE.sub("", line).strip()
    words = cleaned.split()
    if 2 <= len(words) <= 4 and all(NAME_TOKEN_RE.match(w) for w in words):
        return " ".join(words)
    return ""


def name_from_email(email: str) -> str:
    """'jane.doe@x.com' -> 'Jane Doe'; only the first two segments are used."""
    if not email:
        return ""
    local = email.split("@", 1)[0]
    parts = [p[:1].upper() + p[1:].lower() for p in re.split(r"[._]", local) if p]
    return " ".join(parts[:2])


def resolve_name(lines: Sequence[str], email: str = "") -> str:
    """
    Candidate name, by precedence:
    1) first of the top lines shaped like "Jane Doe" (all-caps headers,
       single words and lines with digits are rejected)
    2) a name derived from the email local part
    3) "Unknown"
    """
    for line in lines[:NAME_SCAN_LINES]:
        name = _looks_like_name(line)
        if name:
            return name
    return name_from_email(email) or UNKNOWN_NAME
