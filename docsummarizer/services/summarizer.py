"""Summarization Orchestrator - provider call, parsing and metrics."""

import logging
import math
import time
from typing import Callable, Optional

from docsummarizer.models.provider import ProviderConfig, ProviderInfo
from docsummarizer.models.summary import SummaryRequest, SummaryResult, WordCount
from docsummarizer.services.llm_client import BaseProviderAdapter, create_adapter
from docsummarizer.services.prompt_builder import build_prompt
from docsummarizer.services.provider_registry import ProviderRegistry, get_provider_registry
from docsummarizer.services.response_parser import parse_response
from docsummarizer.services.text_normalizer import count_words

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[ProviderConfig], BaseProviderAdapter]


def compute_reduction(original: int, summary: int) -> int:
    """Percentage decrease from original to summary word count.

    Rounds half up; an empty original yields 0.
    """
    if original <= 0:
        return 0
    return int(math.floor(100 * (original - summary) / original + 0.5))


class DocumentSummarizer:
    """Runs one summarization request against the active provider."""

    def __init__(
        self,
        registry: Optional[ProviderRegistry] = None,
        adapter_factory: AdapterFactory = create_adapter,
    ):
        self.registry = registry or get_provider_registry()
        self.adapter_factory = adapter_factory

    def _get_adapter(self) -> BaseProviderAdapter:
        return self.adapter_factory(self.registry.resolve_active_provider())

    async def summarize(self, request: SummaryRequest) -> SummaryResult:
        """Summarize a document.

        Args:
            request: Pre-validated document text and file name.

        Returns:
            Summary, key insights, word counts and processing time.

        Raises:
            ConfigurationError: If no provider is configured.
            ProviderHttpError: If the provider call fails.
            EmptyResponseError: If the provider returns no text.
        """
        adapter = self._get_adapter()
        logger.info(
            f"Summarizing '{request.file_name}' with {adapter.name}/{adapter.config.model}"
        )

        start_time = time.time()
        prompt = build_prompt(request.text, request.file_name)
        try:
            raw_text = await adapter.generate(prompt)
        finally:
            await adapter.aclose()
        parsed = parse_response(raw_text)

        original_words = count_words(request.text)
        summary_words = count_words(parsed.summary)
        processing_time_ms = int((time.time() - start_time) * 1000)

        logger.info(
            f"Summary generated in {processing_time_ms}ms: "
            f"{original_words} -> {summary_words} words, "
            f"{len(parsed.key_insights)} insights"
        )

        return SummaryResult(
            summary=parsed.summary,
            key_insights=parsed.key_insights,
            word_count=WordCount(
                original=original_words,
                summary=summary_words,
                reduction=compute_reduction(original_words, summary_words),
            ),
            processing_time_ms=processing_time_ms,
        )

    def get_provider_info(self) -> ProviderInfo:
        """Name and model of the active provider."""
        config = self.registry.resolve_active_provider()
        return ProviderInfo(name=config.name, model=config.model)

    async def test_connection(self) -> bool:
        """Check the active provider is reachable.

        Raises:
            ConfigurationError: If no provider is configured.
        """
        adapter = self._get_adapter()
        try:
            return await adapter.test_connection()
        finally:
            await adapter.aclose()


def get_summarizer() -> DocumentSummarizer:
    """Get summarizer instance."""
    return DocumentSummarizer()
