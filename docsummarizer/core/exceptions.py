"""Custom exceptions and exception handlers."""

from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


class SummarizerError(Exception):
    """Base exception for the summarizer."""

    category = "Summarization failed"

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(SummarizerError):
    """No usable provider is configured."""

    category = "Configuration error"

    def __init__(self, message: str):
        super().__init__(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class InvalidInputError(SummarizerError):
    """Request input rejected before reaching the pipeline."""

    category = "Invalid input"

    def __init__(self, message: str, category: Optional[str] = None):
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)
        if category:
            self.category = category


class ProviderHttpError(SummarizerError):
    """Upstream provider call returned a non-success response."""

    category = "Provider error"
    default_status = status.HTTP_502_BAD_GATEWAY

    def __init__(
        self,
        provider: str,
        message: str,
        upstream_status: Optional[int] = None,
    ):
        self.provider = provider
        self.upstream_message = message
        self.upstream_status = upstream_status
        super().__init__(f"{provider} API error: {message}", status_code=self.default_status)


class ProviderAuthError(ProviderHttpError):
    """Upstream rejected the configured credential."""

    category = "Configuration error"
    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR


class ProviderQuotaError(ProviderHttpError):
    """Upstream quota or billing limit exhausted."""

    category = "Service unavailable"
    default_status = status.HTTP_503_SERVICE_UNAVAILABLE


class ProviderRateLimitError(ProviderHttpError):
    """Upstream throttled the request."""

    category = "Rate limit exceeded"
    default_status = status.HTTP_429_TOO_MANY_REQUESTS


class EmptyResponseError(SummarizerError):
    """Provider answered successfully but returned no text."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(
            f"No response received from {provider}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def classify_provider_error(
    provider: str,
    message: str,
    upstream_status: Optional[int] = None,
) -> ProviderHttpError:
    """Build the error kind matching an upstream failure signal.

    Args:
        provider: Display name of the provider that failed.
        message: Upstream error message.
        upstream_status: HTTP status returned by the provider, if known.

    Returns:
        A ProviderHttpError or one of its quota/rate-limit/auth variants.
    """
    lowered = (message or "").lower()

    if upstream_status == 429 and "quota" not in lowered:
        error_cls = ProviderRateLimitError
    elif "quota" in lowered or "billing" in lowered:
        error_cls = ProviderQuotaError
    elif "rate limit" in lowered:
        error_cls = ProviderRateLimitError
    elif upstream_status in (401, 403) or "api key" in lowered:
        error_cls = ProviderAuthError
    else:
        error_cls = ProviderHttpError

    return error_cls(provider, message or "Unknown error", upstream_status)


async def summarizer_exception_handler(
    request: Request, exc: SummarizerError
) -> JSONResponse:
    """Handle SummarizerError exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.category,
            "message": exc.message,
            "type": type(exc).__name__,
        },
    )
