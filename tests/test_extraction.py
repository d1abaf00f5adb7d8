"""Tests for PDF / Word text extraction."""

from docsmith.core.extraction import TextExtractor, decode_run
from docsmith.core.schema import UploadedFile
from tests.fakes.fake_s3 import FakeStorage
from tests.fakes.sample_files import make_docx, make_pdf


def test_decode_run_percent_encoded():
    assert decode_run("Hello%20World") == "Hello World"


def test_decode_run_keeps_plain_text():
    assert decode_run("Safety") == "Safety"


def test_decode_run_falls_back_on_invalid_utf8():
    assert decode_run("caf%E9") == "caf%E9"


def test_extract_pdf_joins_runs_across_pages():
    pdf_bytes = make_pdf([["Hello world"], ["Second page"]])

    text = TextExtractor().extract(pdf_bytes, "report.PDF")

    assert text == "Hello world Second page"


def test_extract_docx_raw_text():
    docx_bytes = make_docx(["First paragraph", "Second paragraph"])

    text = TextExtractor().extract(docx_bytes, "notes.docx")

    assert text == "First paragraph\nSecond paragraph"


def test_extract_unsupported_extension_returns_empty():
    assert TextExtractor().extract(b"col1,col2", "data.csv") == ""


async def test_extract_all_skips_broken_files():
    storage = FakeStorage({
        "uploads/1-a.pdf": make_pdf([["Alpha"]]),
        "uploads/2-b.docx": b"not a zip archive",
        "uploads/3-c.docx": make_docx(["Gamma"]),
    })
    files = [
        UploadedFile(key="uploads/1-a.pdf", name="a.pdf"),
        UploadedFile(key="uploads/2-b.docx", name="b.docx"),
        UploadedFile(key="uploads/3-c.docx", name="c.docx"),
    ]

    text = await TextExtractor().extract_all(storage, files)

    assert text.startswith("Alpha")
    assert "Gamma" in text


def test_extract_docx_includes_table_cells_in_order():
    docx_bytes = make_docx(["Intro"], table=[["Helmet required", "Zone B"], ["", "Gloves"]])

    text = TextExtractor().extract(docx_bytes, "checklist.docx")

    assert text == "Intro\nHelmet required\nZone B\nGloves"
