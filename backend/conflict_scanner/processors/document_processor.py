"""
Conflict Scanner
Document Processor - text extraction from uploaded intake documents
"""
import io
import logging
import re
from pathlib import Path
from typing import List

import fitz  # PyMuPDF
from docx import Document

from conflict_scanner.core.errors import DocumentExtractionError
from conflict_scanner.core.logging import preview

logger = logging.getLogger(__name__)

PLAIN_TEXT_SUFFIXES = (".txt", ".rtf")

_NON_PRINTABLE = re.compile(r"[^\x20-\x7E\n\r\t]")
_WHITESPACE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Replace non-printable characters with spaces and collapse whitespace."""
    text = _NON_PRINTABLE.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def _decode(content: bytes) -> str:
    return content.decode("utf-8", errors="ignore")


def docx_to_text(content: bytes) -> str:
    """Paragraph text followed by tab-joined table rows."""
    try:
        doc = Document(io.BytesIO(content))
    except Exception as e:
        logger.error("python-docx error: %s", e)
        raise DocumentExtractionError("Failed to parse .docx file", details=str(e)) from e

    parts: List[str] = []
    for p in doc.paragraphs:
        if p.text:
            parts.append(p.text)
    # tables (party blocks, signature grids)
    for t in doc.tables:
        for row in t.rows:
            row_text = "\t".join(cell.text.strip() for cell in row.cells)
            if row_text.strip():
                parts.append(row_text)
    return "\n".join(parts)


def pdf_to_text(content: bytes) -> str:
    """Native text layer of every page, joined with blank lines."""
    try:
        with fitz.open(stream=content, filetype="pdf") as doc:
            pages = [page.get_text() for page in doc]
    except Exception as e:
        logger.error("PDF parse error: %s", e)
        raise DocumentExtractionError(
            "Failed to parse PDF. Please try uploading a .docx or .txt file instead.",
            details=str(e),
        ) from e
    return "\n\n".join(pages).strip()


def extract_text(filename: str, content: bytes) -> str:
    """
    Extract readable text from an uploaded file, choosing the parser by extension.

    Args:
        filename: Original filename (extension decides the parser)
        content: Raw file bytes

    Returns:
        Extracted text (may be short or empty for unreadable files)
    """
    suffix = Path(filename or "").suffix.lower()

    if suffix == ".docx":
        text = docx_to_text(content)
    elif suffix == ".pdf":
        text = pdf_to_text(content)
    elif suffix in PLAIN_TEXT_SUFFIXES:
        text = _decode(content)
    else:
        text = clean_text(_decode(content))

    logger.debug("Extracted %d chars from %s: %s", len(text), filename, preview(text))
    return text
