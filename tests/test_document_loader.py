"""Tests for document-to-text conversion and the two-stage parse entry point."""

import asyncio
from io import BytesIO

import pytest
from docx import Document

from cvparser.core import document_loader
from cvparser.core.document_loader import DocumentFormat, load_text, load_text_async
from cvparser.core.errors import UnsupportedFormatError
from cvparser.core.profile_builder import parse_resume


def _docx_bytes(*paragraphs: str) -> bytes:
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


def test_docx_paragraphs_become_lines():
    data = _docx_bytes("Jane Doe", "", "jane.doe@example.com", "Skills: Python, Docker")
    assert load_text(data, DocumentFormat.WORD_PROCESSOR) == "Jane Doe\njane.doe@example.com\nSkills: Python, Docker"


def test_format_tag_accepted_as_string():
    data = _docx_bytes("Jane Doe")
    assert load_text(data, "word-processor") == "Jane Doe"


def test_unsupported_format_raises():
    with pytest.raises(UnsupportedFormatError):
        load_text(b"{\\rtf1}", "rtf")


def test_corrupt_pdf_degrades_to_diagnostic_text():
    text = load_text(b"this is not a pdf", DocumentFormat.PDF, "cv.pdf")
    assert text.startswith("Unable to extract text from PDF: cv.pdf")
    assert "File size: 0.00 MB" in text


def test_corrupt_docx_degrades_to_diagnostic_text():
    text = load_text(b"PK\x03\x04 broken", DocumentFormat.WORD_PROCESSOR, "cv.doc")
    assert text.startswith("Unable to extract text from document: cv.doc")


def test_empty_docx_degrades_to_diagnostic_text():
    text = load_text(_docx_bytes(), DocumentFormat.WORD_PROCESSOR, "blank.docx")
    assert "blank.docx" in text


def test_load_text_async_matches_sync():
    data = _docx_bytes("Jane Doe", "jane.doe@example.com")
    assert asyncio.run(load_text_async(data, DocumentFormat.WORD_PROCESSOR)) == load_text(data, DocumentFormat.WORD_PROCESSOR)


def test_parse_resume_end_to_end():
    data = _docx_bytes(
        "John Smith",
        "john.smith@mail.com",
        "+1 555-123-4567",
        "5 years of experience",
        "Python, React, Docker",
    )
    profile = asyncio.run(parse_resume(data, DocumentFormat.WORD_PROCESSOR, "cv.docx"))

    assert profile.name == "John Smith"
    assert profile.phone == "+15551234567"
    assert profile.department == "Engineering"


def test_parse_resume_unreadable_pdf_still_returns_profile():
    profile = asyncio.run(parse_resume(b"%PDF-garbage", "pdf", "scan.pdf"))
    assert profile.name == "Unknown"
    assert profile.department == "General"
    assert profile.raw_text.startswith("Unable to extract text from PDF: scan.pdf")


def test_parse_resume_unsupported_format():
    with pytest.raises(UnsupportedFormatError):
        asyncio.run(parse_resume(b"data", "odt"))


class FakePage:
    """Stands in for a pdfplumber page: words depend on the x_tolerance asked for."""

    def __init__(self, words_by_tolerance):
        self.words_by_tolerance = words_by_tolerance
        self.calls = []

    def extract_words(self, x_tolerance, **kwargs):
        self.calls.append(x_tolerance)
        return [dict(w) for w in self.words_by_tolerance.get(x_tolerance, [])]


class FakePdf:
    def __init__(self, pages):
        self.pages = pages

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def _word(text, top, x0):
    return {"text": text, "top": top, "x0": x0}


def test_page_words_grouped_into_lines_left_to_right():
    words = [
        _word("Doe", 12.9, 50),
        _word("jane.doe@example.com", 100.0, 5),
        _word("Jane", 12.0, 5),
    ]
    page = FakePage({2: words})
    assert document_loader._page_text(page, 2) == "Jane Doe\njane.doe@example.com"


def test_page_without_words_is_empty():
    assert document_loader._page_text(FakePage({}), 2) == ""


def test_best_tolerance_avoids_torn_and_glued_words():
    torn = [_word(ch, 10, i) for i, ch in enumerate("JaneDoeEngineer")]
    clean = [_word("Jane", 10, 0), _word("Doe", 10, 10), _word("Engineer", 10, 20)]
    glued = [_word("JaneDoeSeniorEngineer", 10, 0)]
    page = FakePage({1.5: torn, 2: clean, 2.5: clean, 3: glued})

    text, used = document_loader._best_page_text(page, [1.5, 2, 2.5, 3])

    assert text == "Jane Doe Engineer"
    assert used == 2
    assert page.calls == [1.5, 2, 2.5, 3]


def test_pdf_pages_without_text_are_skipped(monkeypatch):
    first = FakePage({2: [_word("Jane", 10, 0), _word("Doe", 10, 10)]})
    blank = FakePage({})
    last = FakePage({2: [_word("Skills:", 10, 0), _word("Python", 10, 40)]})
    monkeypatch.setattr(document_loader.pdfplumber, "open", lambda _: FakePdf([first, blank, last]))

    assert document_loader.extract_pdf_text(b"%PDF", x_tolerances=[2]) == "Jane Doe\nSkills: Python"
