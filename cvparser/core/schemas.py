from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Tuple


SourceFormat = Literal["pdf", "word-processor", "text"]

NOT_SPECIFIED = "Not specified"
DEFAULT_DEPARTMENT = "General"
DEFAULT_STATUS = "Pending"
DEFAULT_AVAILABILITY = "Available"
UNKNOWN_NAME = "Unknown"


class CandidateProfile(BaseModel):
    """
    Flat candidate record produced once per parse call.

    Every field always carries a value: "nothing found" is an explicit default,
    never a missing key or None. Serialized with camelCase keys (rawText,
    skillsSummary) for the listing/persistence side.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str = UNKNOWN_NAME
    email: str = ""
    phone: str = ""
    department: str = DEFAULT_DEPARTMENT
    skills: Tuple[str, ...] = Field(default=(), description="At most 10, in vocabulary order")
    experience: str = NOT_SPECIFIED
    education: str = Field(default="", description="At most 200 chars plus '...' when truncated")
    raw_text: str = Field(default="", description="Verbatim extracted text")
    role: str = NOT_SPECIFIED
    skills_summary: str = NOT_SPECIFIED
    status: str = DEFAULT_STATUS
    address: str = ""
    linkedin: str = ""
    portfolio: str = ""
    certifications: Tuple[str, ...] = Field(default=(), description="At most 5, in document order")
    languages: Tuple[str, ...] = ()
    availability: str = DEFAULT_AVAILABILITY
    salary: str = ""
    notes: str = ""


class TextParseRequest(BaseModel):
    text: str = Field(..., description="Plain resume text, already extracted")


class ParseResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    candidate_profile: CandidateProfile
    source_format: SourceFormat
    warnings: List[str] = Field(default_factory=list)
