"""TextExtractor – plain text out of uploaded documents
-------------------------------------------------------
• .pdf         – pdfplumber, walks page → word runs, joined by single spaces
• .docx / .doc – python-docx raw text of paragraphs and table cells, formatting discarded
• anything else yields an empty string (not an error)

Public API
~~~~~~~~~~
    extract(file_bytes: bytes, file_name: str) -> str
    extract_all(storage, files)                -> str
"""
from __future__ import annotations

import asyncio
import logging
from io import BytesIO
from pathlib import Path
from typing import Iterable, List
from urllib.parse import unquote

import pdfplumber
from docx import Document as DocxDocument
from docx.table import Table

from docsmith.core.schema import UploadedFile

__all__ = ["TextExtractor", "decode_run"]

logger = logging.getLogger(__name__)

WORD_EXT = {".docx", ".doc"}


def decode_run(raw: str) -> str:
    """Percent-decode a text run, keeping the raw text when it is not valid UTF-8."""
    try:
        return unquote(raw, errors="strict")
    except UnicodeDecodeError:
        return raw


class TextExtractor:
    """Convert stored PDF / Word files to plain text."""

    def extract(self, file_bytes: bytes, file_name: str) -> str:
        ext = Path(file_name).suffix.lower()
        match ext:
            case ".pdf":
                return self._parse_pdf(file_bytes)
            case ".docx" | ".doc":
                return self._parse_docx(file_bytes)
            case _:
                logger.info("Skipping %s: unsupported extension %r", file_name, ext)
                return ""

    async def extract_all(self, storage, files: Iterable[UploadedFile]) -> str:
        """Download and extract every file; a file that fails to parse is skipped."""
        texts: List[str] = []
        for file in files:
            file_bytes = await asyncio.to_thread(storage.get_bytes, file.key)
            try:
                text = self.extract(file_bytes, file.name)
            except Exception as err:
                logger.warning("Text extraction failed for %s (%s): %s", file.name, file.key, err)
                continue
            if text:
                texts.append(text)
        return "\n\n".join(texts)

    # ---- format-specific parsers -------------------------------------

    def _parse_pdf(self, file_bytes: bytes) -> str:
        runs: List[str] = []
        with pdfplumber.open(BytesIO(file_bytes)) as pdf:
            for page in pdf.pages:
                for word in page.extract_words():
                    runs.append(decode_run(word["text"]))
        return " ".join(runs)

    def _parse_docx(self, file_bytes: bytes) -> str:
        doc = DocxDocument(BytesIO(file_bytes))
        lines: List[str] = []
        # body order: paragraphs and tables interleaved as in the document
        for block in doc.iter_inner_content():
            if isinstance(block, Table):
                lines.extend(cell.text.strip() for row in block.rows for cell in row.cells)
            else:
                lines.append(block.text.strip())
        return "\n".join(line for line in lines if line)
