"""
Profile assembly: runs every extractor once over the text and applies the
documented defaults so that each CandidateProfile field is always populated.
"""

import logging
from typing import List, Optional, Union

from cvparser.core.classifiers import (
    classify_department,
    classify_status,
    extract_address,
    extract_certifications,
    extract_education,
    extract_experience,
    extract_languages,
    extract_skills,
    infer_role,
)
from cvparser.core.document_loader import DocumentFormat, coerce_format, load_text_async
from cvparser.core.name_resolver import resolve_name
from cvparser.core.patterns import extract_email, extract_linkedin, extract_phone, extract_portfolio
from cvparser.core.schemas import NOT_SPECIFIED, UNKNOWN_NAME, CandidateProfile
from cvparser.core.text_normalization import normalize

logger = logging.getLogger(__name__)


def build_profile(text: Optional[str]) -> CandidateProfile:
    """Extract a CandidateProfile from plain resume text. Never raises."""
    text = text or ""
    view = normalize(text)

    email = extract_email(text)
    skills = tuple(extract_skills(view.scan_lower))
    experience = extract_experience(text)

    profile = CandidateProfile(
        name=resolve_name(view.lines, email),
        email=email,
        phone=extract_phone(text),
        department=classify_department(view.scan_lower),
        skills=skills,
        experience=experience or NOT_SPECIFIED,
        education=extract_education(text),
        raw_text=text,
        role=infer_role(experience) or NOT_SPECIFIED,
        skills_summary=", ".join(skills) or NOT_SPECIFIED,
        status=classify_status(view.scan_lower),
        address=extract_address(text),
        linkedin=extract_linkedin(text),
        portfolio=extract_portfolio(text),
        certifications=tuple(extract_certifications(view.lines)),
        languages=tuple(extract_languages(view.scan_lower)),
    )
    logger.debug(
        "Built profile: name=%r department=%s status=%s skills=%d certifications=%d",
        profile.name, profile.department, profile.status, len(profile.skills), len(profile.certifications),
    )
    return profile


async def parse_resume(data: bytes, fmt: Union[DocumentFormat, str], filename: str = "") -> CandidateProfile:
    """
    Two stages: convert the document to text (off the event loop), then build
    the profile. An unsupported format is rejected before any conversion.
    """
    doc_format = coerce_format(fmt)
    text = await load_text_async(data, doc_format, filename)
    return build_profile(text)


def profile_warnings(profile: CandidateProfile) -> List[str]:
    """Notes for the fields a reviewer most likely needs to fill in by hand."""
    warnings: List[str] = []
    if not profile.email:
        warnings.append("Could not extract email. User clarification needed.")
    if profile.name == UNKNOWN_NAME:
        warnings.append("Could not extract candidate name. User clarification needed.")
    if not profile.phone:
        warnings.append("Could not extract phone number.")
    if not profile.skills:
        warnings.append("No known skills found.")
    return warnings
