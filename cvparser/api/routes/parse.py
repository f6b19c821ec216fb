import logging
from typing import Optional

from fastapi import APIRouter, UploadFile, File, HTTPException

from cvparser.config import get_settings
from cvparser.core.document_loader import DocumentFormat
from cvparser.core.errors import UnsupportedFormatError
from cvparser.core.profile_builder import build_profile, parse_resume, profile_warnings
from cvparser.core.schemas import ParseResponse, TextParseRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

PDF_CONTENT_TYPES = {"application/pdf"}
WORD_CONTENT_TYPES = {
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/msword",
}


def detect_format(filename: str, content_type: str) -> Optional[DocumentFormat]:
    """Map an upload's file name / MIME type to a format tag, or None if unknown."""
    filename = (filename or "").lower()
    content_type = (content_type or "").lower()
    if filename.endswith(".pdf") or content_type in PDF_CONTENT_TYPES:
        return DocumentFormat.PDF
    if filename.endswith((".docx", ".doc")) or content_type in WORD_CONTENT_TYPES:
        return DocumentFormat.WORD_PROCESSOR
    return None


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse Resume",
    description="Extract a candidate profile from a resume file (PDF or Word). Unreadable documents degrade to a mostly-default profile instead of failing.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "candidateProfile": {
                            "name": "John Smith",
                            "email": "john.smith@mail.com",
                            "phone": "+15551234567",
                            "department": "Engineering",
                            "skills": ["react", "python", "docker"],
                            "experience": "5 years of experience",
                            "education": "",
                            "role": "5 years of experience",
                            "skillsSummary": "react, python, docker",
                            "status": "Pending",
                            "availability": "Available",
                        },
                        "sourceFormat": "pdf",
                        "warnings": [],
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Unsupported file format"},
    }
)
async def parse_upload(
    file: UploadFile = File(..., description="Resume file (PDF or Word format)")
):
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")

    max_mb = get_settings().max_upload_mb
    if len(raw) > max_mb * 1024 * 1024:
        raise HTTPException(status_code=413, detail=f"File size must not exceed {max_mb:g} MB.")

    fmt = detect_format(file.filename, file.content_type)
    if fmt is None:
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported file format: {file.content_type}. Please upload PDF or Word documents.",
        )

    try:
        profile = await parse_resume(raw, fmt, filename=file.filename or "")
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=415, detail=str(e))

    return ParseResponse(candidate_profile=profile, source_format=fmt.value, warnings=profile_warnings(profile))


@router.post(
    "/parse/text",
    response_model=ParseResponse,
    summary="Parse Resume Text",
    description="Extract a candidate profile from resume text that was already converted to plain text.",
)
def parse_text(body: TextParseRequest):
    profile = build_profile(body.text)
    return ParseResponse(candidate_profile=profile, source_format="text", warnings=profile_warnings(profile))
