"""
Module: extraction.extractor

Purpose:
    Read a worksheet document and return its text as one string. PDF text
    comes from PyMuPDF, DOCX text from python-docx, plain text is decoded
    as UTF-8. Failures raise typed errors whose message ends with the
    supported-format guide so they can be shown to the user as-is.

Key Functions:
    - extract_text(): Path -> text

Key Classes:
    - ExtractionError and subclasses: UnsupportedFormatError,
      EmptyDocumentError, DocumentDecodeError

Dependencies:
    - fitz (PyMuPDF): PDF text extraction
    - docx (python-docx): DOCX paragraphs and tables

Used By:
    - extraction.importer
    - cli
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import List

import docx
import fitz
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table
from docx.text.paragraph import Paragraph

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")

FORMAT_GUIDE = (
    "Please ensure your file follows this format:\n"
    "\n"
    "1. What is the capital of France?\n"
    "A) London\n"
    "B) Paris\n"
    "C) Berlin\n"
    "D) Madrid\n"
    "\n"
    "2. What is 2 + 2?\n"
    "A) 3\n"
    "B) 4\n"
    "C) 5\n"
    "D) 6\n"
    "\n"
    "Answer Key: 1. B 2. B\n"
    "\n"
    "Note: PDF files must contain selectable text, not scanned images."
)


class ExtractionError(Exception):
    """Error reading text from a worksheet document."""
    kind = "extraction-error"

    def __init__(self, message: str, path: Path | str = ""):
        self.path = str(path)
        self.reason = message
        super().__init__(f"{message}\n\n{FORMAT_GUIDE}")


class UnsupportedFormatError(ExtractionError):
    """File extension is not .pdf, .docx or .txt."""
    kind = "unsupported-format"


class EmptyDocumentError(ExtractionError):
    """Document has no selectable text (e.g. a scanned PDF)."""
    kind = "empty-or-non-selectable-text"


class DocumentDecodeError(ExtractionError):
    """Document could not be opened or decoded."""
    kind = "decode-error"


def extract_text(path: Path | str) -> str:
    """
    Extract the text of a worksheet document.

    Args:
        path: .pdf, .docx or .txt file

    Returns:
        Document text; PDF pages and DOCX blocks are separated by newlines

    Raises:
        UnsupportedFormatError: Unknown extension
        DocumentDecodeError: Missing, corrupt or undecodable file
        EmptyDocumentError: No text found

    Example:
        >>> text = extract_text(Path("worksheet.pdf"))
        >>> text.splitlines()[0]
        '1. What is the capital of France?'
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(
            f"Unsupported file format '{suffix or path.name}'. "
            f"Please use {', '.join(SUPPORTED_EXTENSIONS)} files.",
            path,
        )
    if not path.is_file():
        raise DocumentDecodeError(f"File not found: {path}", path)

    if suffix == ".pdf":
        text = _read_pdf(path)
    elif suffix == ".docx":
        text = _read_docx(path)
    else:
        text = _read_txt(path)

    if not text.strip():
        if suffix == ".pdf":
            message = "No text found in PDF. The PDF may contain scanned images rather than selectable text."
        else:
            message = f"No text found in {path.name}."
        raise EmptyDocumentError(message, path)

    logger.debug(f"Extracted {len(text)} characters from {path.name}")
    return text


# ─────────────────────────────────────────────────────────────────────────────
# Readers
# ─────────────────────────────────────────────────────────────────────────────

def _read_pdf(path: Path) -> str:
    try:
        with fitz.open(path) as doc:
            pages = [page.get_text("text") for page in doc]
    except (RuntimeError, ValueError) as e:
        raise DocumentDecodeError(f"Failed to parse PDF: {e}", path) from e
    logger.debug(f"Read {len(pages)} pages from {path.name}")
    return "\n".join(pages)


def _read_docx(path: Path) -> str:
    try:
        document = docx.Document(str(path))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
        raise DocumentDecodeError(
            "Failed to parse DOCX file. Please ensure it's a valid .docx file.", path
        ) from e

    blocks: List[str] = []
    # Body order, so tables stay between the paragraphs around them
    for element in document.element.body:
        if element.tag.endswith("}p"):
            text = Paragraph(element, document).text
            if text.strip():
                blocks.append(text)
        elif element.tag.endswith("}tbl"):
            for row in Table(element, document).rows:
                for cell in row.cells:
                    if cell.text.strip():
                        blocks.append(cell.text.strip())
    return "\n".join(blocks)


def _read_txt(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentDecodeError(f"Text file is not valid UTF-8: {e}", path) from e
    except OSError as e:
        raise DocumentDecodeError(f"Failed to read text file: {e}", path) from e
