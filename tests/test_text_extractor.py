"""Tests for document text extraction."""

import pytest

from docsummarizer.core.exceptions import InvalidInputError
from docsummarizer.services.text_extractor import extract_text, get_file_type


class TestGetFileType:
    """Tests for get_file_type."""

    @pytest.mark.parametrize(
        "mime_type,file_name,expected",
        [
            ("application/pdf", "a.bin", "pdf"),
            ("text/plain; charset=utf-8", "a", "txt"),
            (
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                "a",
                "docx",
            ),
            ("application/octet-stream", "Report.PDF", "pdf"),
            (None, "notes.txt", "txt"),
            ("image/png", "image.png", None),
        ],
    )
    def test_resolution(self, mime_type, file_name, expected):
        assert get_file_type(mime_type, file_name) == expected


class TestExtractText:
    """Tests for extract_text."""

    def test_plain_text(self):
        extracted = extract_text(b"Hello   world\n\nagain", "a.txt", "text/plain")

        assert extracted.text == "Hello world again"
        assert extracted.file_type == "txt"
        assert extracted.word_count == 3

    def test_non_utf8_text(self):
        extracted = extract_text("café au lait".encode("cp1252"), "a.txt", "text/plain")
        assert extracted.text == "café au lait"

    def test_unsupported_type(self):
        with pytest.raises(InvalidInputError) as exc_info:
            extract_text(b"data", "a.png", "image/png")

        assert exc_info.value.status_code == 400

    def test_corrupt_pdf(self):
        with pytest.raises(InvalidInputError) as exc_info:
            extract_text(b"this is not a pdf", "a.pdf", "application/pdf")

        assert exc_info.value.category == "Extraction failed"
