"""
Document-to-text conversion for the two supported upload formats.

The loader never fails on a readable-but-empty or corrupt document: it returns a
short diagnostic text instead, which the rest of the pipeline treats like any
other resume text (it simply matches almost nothing). Only an unknown format
tag is an error.
"""

import logging
import re
import sys
from enum import Enum
from io import BytesIO
from itertools import groupby
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import pdfplumber
from docx import Document
from fastapi.concurrency import run_in_threadpool

from cvparser.config import get_settings
from cvparser.core.errors import UnsupportedFormatError

logger = logging.getLogger(__name__)


class DocumentFormat(str, Enum):
    PDF = "pdf"
    WORD_PROCESSOR = "word-processor"


def coerce_format(fmt: Union[DocumentFormat, str]) -> DocumentFormat:
    try:
        return DocumentFormat(fmt)
    except ValueError:
        logger.info("Rejected document with unsupported format tag %r", fmt)
        raise UnsupportedFormatError(fmt) from None


# ----------------------------------------------------------------------------
# PDF
# ----------------------------------------------------------------------------

GLUED_TOKEN_LEN = 18
SINGLE_LETTER_ALLOWANCE = 10
_LETTER_RUN_RE = re.compile(r"[A-Za-z]+")


def _line_key(word: Dict[str, Any], line_height: float) -> int:
    return round(word["top"] / line_height)


def _page_text(page: Any, x_tolerance: float, line_height: float = 3) -> str:
    """Words of one page, bucketed into lines by vertical position and read left to right."""
    words = page.extract_words(
        x_tolerance=x_tolerance,
        y_tolerance=2,
        keep_blank_chars=False,
        use_text_flow=True,
    ) or []
    ordered = sorted(words, key=lambda w: (_line_key(w, line_height), w["x0"]))
    return "\n".join(
        " ".join(w["text"] for w in line)
        for _, line in groupby(ordered, key=lambda w: _line_key(w, line_height))
    )


def _fragmentation_score(text: str) -> int:
    """
    How badly a tolerance split or merged words; 0 is clean.

    Overlong letter runs mean words were glued together, a pile of one-letter
    runs means they were torn apart.
    """
    runs = _LETTER_RUN_RE.findall(text)
    if not runs:
        return sys.maxsize
    glued = sum(len(r) >= GLUED_TOKEN_LEN for r in runs)
    singles = sum(len(r) == 1 for r in runs)
    return 10 * glued + 3 * max(0, singles - SINGLE_LETTER_ALLOWANCE)


def _best_page_text(page: Any, x_tolerances: Sequence[float]) -> Tuple[str, float]:
    """Try each tolerance in order and keep the cleanest text; the first one wins a tie."""
    attempts = [(_page_text(page, xt), xt) for xt in x_tolerances]
    return min(attempts, key=lambda attempt: _fragmentation_score(attempt[0]))


def extract_pdf_text(pdf_bytes: bytes, x_tolerances: Optional[Sequence[float]] = None) -> str:
    """Text layer of every page with text, pages separated by a newline."""
    if x_tolerances is None:
        x_tolerances = get_settings().pdf_x_tolerances

    pages: List[str] = []
    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        for number, page in enumerate(pdf.pages, start=1):
            text, used = _best_page_text(page, x_tolerances)
            if not text:
                logger.debug("PDF page %d has no text layer", number)
                continue
            logger.debug("PDF page %d read with x_tolerance=%s (%d chars)", number, used, len(text))
            pages.append(text)
    return "\n".join(pages)


# ----------------------------------------------------------------------------
# Word processor
# ----------------------------------------------------------------------------

def extract_docx_text(docx_bytes: bytes) -> str:
    """Non-empty paragraph texts in document order, one per line."""
    doc = Document(BytesIO(docx_bytes))
    return "\n".join(p.text.strip() for p in doc.paragraphs if (p.text or "").strip())


# ----------------------------------------------------------------------------
# Entry points
# ----------------------------------------------------------------------------

def _file_size_mb(data: bytes) -> str:
    return f"{len(data) / 1024 / 1024:.2f}"


def diagnostic_text(fmt: DocumentFormat, filename: str, data: bytes) -> str:
    # Worded so that it hits none of the keyword vocabularies.
    if fmt is DocumentFormat.PDF:
        return (
            f"Unable to extract text from PDF: {filename}\n"
            "Please ensure the PDF contains selectable text or try uploading a .docx file instead.\n"
            f"File size: {_file_size_mb(data)} MB"
        )
    return (
        f"Unable to extract text from document: {filename}\n"
        "Please ensure the file is a valid .docx document or try uploading a PDF instead.\n"
        f"File size: {_file_size_mb(data)} MB"
    )


def load_text(data: bytes, fmt: Union[DocumentFormat, str], filename: str = "") -> str:
    """
    Convert document bytes to plain text.

    Raises UnsupportedFormatError for an unknown format tag. Any failure while
    reading a supported format degrades to diagnostic text.
    """
    doc_format = coerce_format(fmt)
    try:
        if doc_format is DocumentFormat.PDF:
            text = extract_pdf_text(data)
        else:
            text = extract_docx_text(data)
    except Exception as e:
        logger.warning("Text extraction failed for %s (%s): %s", filename or "<upload>", doc_format.value, e)
        return diagnostic_text(doc_format, filename, data)

    if not text.strip():
        logger.warning("No extractable text in %s (%s)", filename or "<upload>", doc_format.value)
        return diagnostic_text(doc_format, filename, data)
    return text


async def load_text_async(data: bytes, fmt: Union[DocumentFormat, str], filename: str = "") -> str:
    """Awaitable form of load_text; the blocking conversion runs in the thread pool."""
    doc_format = coerce_format(fmt)
    return await run_in_threadpool(load_text, data, doc_format, filename)
