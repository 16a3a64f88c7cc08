"""Document upload API routes."""

import logging
from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends, File, UploadFile
from pydantic import BaseModel

from docsummarizer.core.config import Settings, get_settings
from docsummarizer.core.exceptions import InvalidInputError
from docsummarizer.models.summary import ExtractedText
from docsummarizer.services.text_extractor import SUPPORTED_FORMATS, extract_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


class UploadResponse(BaseModel):
    """Upload response envelope."""

    success: bool = True
    data: ExtractedText
    message: str = "Text extracted successfully"


@router.post("", response_model=UploadResponse)
async def upload_document(
    document: Annotated[UploadFile, File(description="PDF, DOCX or TXT document")],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UploadResponse:
    """Upload a document and extract its text."""
    content = await document.read()
    file_name = document.filename or "document"

    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise InvalidInputError(
            f"File size must be less than {settings.max_upload_size_mb}MB",
            category="File too large",
        )

    extracted = extract_text(content, file_name, document.content_type)

    if not extracted.text:
        raise InvalidInputError(
            "The uploaded document appears to be empty or contains no readable text",
            category="No text found",
        )

    if extracted.word_count < settings.min_word_count:
        raise InvalidInputError(
            f"Document must contain at least {settings.min_word_count} words for summarization",
            category="Document too short",
        )

    logger.info(
        f"Extracted {extracted.word_count} words from '{file_name}' ({extracted.file_type})"
    )
    return UploadResponse(data=extracted)


@router.get("/supported-formats")
async def supported_formats(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Dict[str, Any]:
    """List supported file formats."""
    return {
        "supportedFormats": SUPPORTED_FORMATS,
        "maxFileSize": f"{settings.max_upload_size_mb}MB",
        "minWordCount": settings.min_word_count,
    }
