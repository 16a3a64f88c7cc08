"""Pydantic models package."""

from docsummarizer.models.provider import ProviderConfig, ProviderInfo, ProviderKind
from docsummarizer.models.summary import (
    ExtractedText,
    ParsedInsightSet,
    SummaryRequest,
    SummaryResult,
    WordCount,
)

__all__ = [
    # Provider models
    "ProviderConfig",
    "ProviderInfo",
    "ProviderKind",
    # Summary models
    "SummaryRequest",
    "ParsedInsightSet",
    "SummaryResult",
    "WordCount",
    "ExtractedText",
]
