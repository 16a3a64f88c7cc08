"""Summarization API routes."""

import logging
from typing import Annotated, Any, Dict, List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from docsummarizer.core.config import Settings, get_settings
from docsummarizer.core.exceptions import InvalidInputError
from docsummarizer.models.provider import ProviderInfo
from docsummarizer.models.summary import SummaryRequest, SummaryResult
from docsummarizer.services.provider_registry import ProviderRegistry, get_provider_registry
from docsummarizer.services.summarizer import DocumentSummarizer, get_summarizer
from docsummarizer.services.text_normalizer import count_words

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/summarize", tags=["summarize"])


class SummarizeBody(BaseModel):
    """Summarization request body."""

    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = None
    file_name: Optional[str] = Field(default=None, alias="fileName")


class SummarizeResponse(BaseModel):
    """Summarization response envelope."""

    success: bool = True
    data: SummaryResult
    message: str = "Summary generated successfully"


class ProvidersResponse(BaseModel):
    """Active and available providers."""

    model_config = ConfigDict(populate_by_name=True)

    current_provider: ProviderInfo = Field(..., alias="currentProvider")
    is_connected: bool = Field(..., alias="isConnected")
    available_providers: List[ProviderInfo] = Field(..., alias="availableProviders")
    requirements: Dict[str, Any]


class HealthResponse(BaseModel):
    """Summarization service health."""

    status: str
    message: str
    model: str
    provider: str


def validate_summary_input(body: SummarizeBody, settings: Settings) -> SummaryRequest:
    """Check a request body and build a trimmed SummaryRequest.

    Raises:
        InvalidInputError: If text or file name is missing, or the word
            count is outside the configured limits.
    """
    if not body.text or not body.text.strip():
        raise InvalidInputError("Text content is required and must be a string")

    if not body.file_name or not body.file_name.strip():
        raise InvalidInputError("File name is required and must be a string")

    word_count = count_words(body.text)
    if word_count < settings.min_word_count:
        raise InvalidInputError(
            f"Text must contain at least {settings.min_word_count} words for summarization",
            category="Text too short",
        )
    if word_count > settings.max_word_count:
        raise InvalidInputError(
            f"Text must contain less than {settings.max_word_count:,} words for processing",
            category="Text too long",
        )

    return SummaryRequest(text=body.text.strip(), file_name=body.file_name.strip())


def _requirements(settings: Settings) -> Dict[str, Any]:
    return {
        "minWordCount": settings.min_word_count,
        "maxWordCount": settings.max_word_count,
        "supportedFormats": ["Plain text extracted from documents"],
    }


@router.post("", response_model=SummarizeResponse)
async def summarize_document(
    body: SummarizeBody,
    settings: Annotated[Settings, Depends(get_settings)],
    summarizer: Annotated[DocumentSummarizer, Depends(get_summarizer)],
) -> SummarizeResponse:
    """Generate a summary and key insights from document text."""
    request = validate_summary_input(body, settings)

    logger.info(
        f"Summarization requested for '{request.file_name}', "
        f"document length: {len(request.text)} chars"
    )

    result = await summarizer.summarize(request)
    return SummarizeResponse(data=result)


@router.get("/providers", response_model=ProvidersResponse)
async def get_providers(
    settings: Annotated[Settings, Depends(get_settings)],
    registry: Annotated[ProviderRegistry, Depends(get_provider_registry)],
    summarizer: Annotated[DocumentSummarizer, Depends(get_summarizer)],
) -> ProvidersResponse:
    """Describe the active provider and the supported ones."""
    return ProvidersResponse(
        current_provider=summarizer.get_provider_info(),
        is_connected=await summarizer.test_connection(),
        available_providers=registry.list_available(),
        requirements=_requirements(settings),
    )


@router.post("/test")
async def test_provider_connection(
    summarizer: Annotated[DocumentSummarizer, Depends(get_summarizer)],
) -> JSONResponse:
    """Test the active provider connection."""
    provider = summarizer.get_provider_info()
    is_connected = await summarizer.test_connection()

    if is_connected:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={
                "success": True,
                "message": f"{provider.name} connection successful",
                "provider": provider.model_dump(exclude_none=True),
            },
        )

    logger.warning(f"{provider.name} connection test failed")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "success": False,
            "message": f"{provider.name} connection failed",
            "provider": provider.model_dump(exclude_none=True),
        },
    )


@router.get("/health", response_model=HealthResponse)
async def summarize_health(
    summarizer: Annotated[DocumentSummarizer, Depends(get_summarizer)],
) -> HealthResponse:
    """Check summarization service health."""
    provider = summarizer.get_provider_info()
    is_connected = await summarizer.test_connection()

    return HealthResponse(
        status="OK" if is_connected else "ERROR",
        message=(
            f"{provider.name} service is running"
            if is_connected
            else f"{provider.name} service is unavailable"
        ),
        model=provider.model,
        provider=provider.name,
    )


@router.get("/limits")
async def get_limits(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Dict[str, Any]:
    """Processing limits and requirements."""
    return {
        "limits": {
            "minWordCount": settings.min_word_count,
            "maxWordCount": settings.max_word_count,
            "maxFileSize": f"{settings.max_upload_size_mb}MB",
            "supportedFormats": ["PDF", "DOCX", "TXT"],
            "processingTimeout": settings.llm_timeout_seconds * 1000,
        },
        "requirements": {
            "textRequired": True,
            "fileNameRequired": True,
        },
    }
