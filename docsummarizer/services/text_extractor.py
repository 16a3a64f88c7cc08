"""Text extraction from uploaded PDF, DOCX and TXT documents."""

import io
import logging
from pathlib import Path
from typing import Dict, Optional

from docx import Document
from pypdf import PdfReader

from docsummarizer.core.exceptions import InvalidInputError
from docsummarizer.models.summary import ExtractedText
from docsummarizer.services.text_normalizer import clean_text, count_words

logger = logging.getLogger(__name__)

MIME_TYPES: Dict[str, str] = {
    "application/pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "text/plain": "txt",
}

EXTENSIONS: Dict[str, str] = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".txt": "txt",
}

SUPPORTED_FORMATS = [
    {
        "type": "PDF",
        "mimeType": "application/pdf",
        "extension": ".pdf",
        "description": "Portable Document Format",
    },
    {
        "type": "DOCX",
        "mimeType": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "extension": ".docx",
        "description": "Microsoft Word Document",
    },
    {
        "type": "TXT",
        "mimeType": "text/plain",
        "extension": ".txt",
        "description": "Plain Text File",
    },
]


def get_file_type(mime_type: Optional[str], file_name: str = "") -> Optional[str]:
    """Resolve pdf/docx/txt from the MIME type, falling back to the extension."""
    if mime_type:
        file_type = MIME_TYPES.get(mime_type.split(";")[0].strip().lower())
        if file_type:
            return file_type
    return EXTENSIONS.get(Path(file_name).suffix.lower())


def _extract_pdf(content: bytes) -> str:
    reader = PdfReader(io.BytesIO(content))
    text_parts = []
    for page in reader.pages:
        page_text = page.extract_text()
        if page_text:
            text_parts.append(page_text)
    return "\n".join(text_parts)


def _extract_docx(content: bytes) -> str:
    doc = Document(io.BytesIO(content))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())


def _extract_txt(content: bytes) -> str:
    for encoding in ["utf-8", "cp1252"]:
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            continue

    logger.info("Decoding text file as latin-1")
    return content.decode("latin-1")


_EXTRACTORS = {
    "pdf": _extract_pdf,
    "docx": _extract_docx,
    "txt": _extract_txt,
}


def extract_text(content: bytes, file_name: str, mime_type: Optional[str]) -> ExtractedText:
    """Extract and clean text from an uploaded document.

    Args:
        content: Raw file bytes.
        file_name: Original file name.
        mime_type: Declared content type.

    Returns:
        Cleaned text with its word count.

    Raises:
        InvalidInputError: If the file type is unsupported or unreadable.
    """
    file_type = get_file_type(mime_type, file_name)
    if file_type is None:
        raise InvalidInputError(
            "Invalid file type. Only PDF, DOCX, and TXT files are allowed.",
            category="Invalid file type",
        )

    try:
        raw_text = _EXTRACTORS[file_type](content)
    except Exception as e:
        logger.exception(f"Failed to extract text from '{file_name}'")
        raise InvalidInputError(
            f"Failed to extract text: {e}", category="Extraction failed"
        ) from e

    text = clean_text(raw_text)
    return ExtractedText(
        text=text,
        file_name=file_name,
        file_type=file_type,
        word_count=count_words(text),
    )
