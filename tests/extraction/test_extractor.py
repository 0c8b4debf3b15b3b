"""Unit tests for document text extraction."""

import docx
import fitz
import pytest

from worksheet_toolkit.extraction.extractor import (
    FORMAT_GUIDE,
    DocumentDecodeError,
    EmptyDocumentError,
    ExtractionError,
    UnsupportedFormatError,
    extract_text,
)


def _create_pdf(path, pages):
    """Write a PDF with one text block per page."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text, fontsize=11)
    doc.save(path)
    doc.close()


class TestExtractPdf:
    """Tests for PDF extraction."""

    def test_extracts_text_from_all_pages(self, tmp_path):
        # Arrange
        pdf_path = tmp_path / "worksheet.pdf"
        _create_pdf(pdf_path, ["1. Capital of France?\nA) London\nB) Paris", "2. What is 2+2?"])

        # Act
        text = extract_text(pdf_path)

        # Assert
        assert "1. Capital of France?" in text
        assert "B) Paris" in text
        assert "2. What is 2+2?" in text
        assert text.index("Paris") < text.index("2+2")

    def test_pdf_without_text_raises_empty(self, tmp_path):
        pdf_path = tmp_path / "scanned.pdf"
        _create_pdf(pdf_path, [""])

        with pytest.raises(EmptyDocumentError) as exc_info:
            extract_text(pdf_path)

        assert exc_info.value.kind == "empty-or-non-selectable-text"
        assert "scanned images" in str(exc_info.value)

    def test_corrupt_pdf_raises_decode_error(self, tmp_path):
        pdf_path = tmp_path / "broken.pdf"
        pdf_path.write_bytes(b"this is not a pdf")

        with pytest.raises(DocumentDecodeError) as exc_info:
            extract_text(pdf_path)

        assert exc_info.value.__cause__ is not None


class TestExtractDocx:
    """Tests for DOCX extraction."""

    def test_extracts_paragraphs_and_table_cells_in_order(self, tmp_path):
        # Arrange
        docx_path = tmp_path / "worksheet.docx"
        document = docx.Document()
        document.add_paragraph("1. Match the words")
        table = document.add_table(rows=1, cols=2)
        table.cell(0, 0).text = "cat - animal"
        table.cell(0, 1).text = "rose - flower"
        document.add_paragraph("2. Capital of France? A) London B) Paris")
        document.save(docx_path)

        # Act
        lines = extract_text(docx_path).splitlines()

        # Assert
        assert lines == [
            "1. Match the words",
            "cat - animal",
            "rose - flower",
            "2. Capital of France? A) London B) Paris",
        ]

    def test_invalid_docx_raises_decode_error(self, tmp_path):
        docx_path = tmp_path / "broken.docx"
        docx_path.write_bytes(b"plain bytes")

        with pytest.raises(DocumentDecodeError, match="valid .docx"):
            extract_text(docx_path)

    def test_empty_docx_raises_empty(self, tmp_path):
        docx_path = tmp_path / "empty.docx"
        docx.Document().save(docx_path)

        with pytest.raises(EmptyDocumentError):
            extract_text(docx_path)


class TestExtractTxt:
    """Tests for plain-text extraction."""

    def test_reads_utf8_with_bom(self, tmp_path):
        txt_path = tmp_path / "worksheet.txt"
        txt_path.write_bytes("\ufeff1. Café?".encode("utf-8"))

        assert extract_text(txt_path) == "1. Café?"

    def test_non_utf8_raises_decode_error(self, tmp_path):
        txt_path = tmp_path / "latin1.txt"
        txt_path.write_bytes(b"\xff\xfe caf\xe9")

        with pytest.raises(DocumentDecodeError) as exc_info:
            extract_text(txt_path)

        assert exc_info.value.kind == "decode-error"


class TestErrors:
    """Tests for error typing and messages."""

    def test_unsupported_extension(self, tmp_path):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            extract_text(tmp_path / "worksheet.rtf")

        assert exc_info.value.kind == "unsupported-format"
        assert ".pdf, .docx, .txt" in str(exc_info.value)

    def test_missing_file_raises_decode_error(self, tmp_path):
        with pytest.raises(DocumentDecodeError, match="File not found"):
            extract_text(tmp_path / "missing.pdf")

    def test_messages_end_with_format_guide(self, tmp_path):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(tmp_path / "worksheet.odt")

        assert str(exc_info.value).endswith(FORMAT_GUIDE)
        assert exc_info.value.path.endswith("worksheet.odt")
