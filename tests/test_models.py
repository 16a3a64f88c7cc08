"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from docsummarizer.models.provider import ProviderConfig, ProviderKind
from docsummarizer.models.summary import (
    ExtractedText,
    ParsedInsightSet,
    SummaryRequest,
    SummaryResult,
    WordCount,
)


class TestSummaryModels:
    """Tests for summary models."""

    def test_request_accepts_alias_and_field_name(self):
        by_alias = SummaryRequest.model_validate({"text": "t", "fileName": "a.txt"})
        by_name = SummaryRequest(text="t", file_name="a.txt")

        assert by_alias == by_name

    def test_result_serializes_wire_names(self):
        result = SummaryResult(
            summary="S",
            key_insights=["a"],
            word_count=WordCount(original=10, summary=2, reduction=80),
            processing_time_ms=12,
        )

        assert result.model_dump(by_alias=True) == {
            "summary": "S",
            "keyInsights": ["a"],
            "wordCount": {"original": 10, "summary": 2, "reduction": 80},
            "processingTime": 12,
        }

    def test_parsed_insights_default_empty(self):
        assert ParsedInsightSet(summary="S").key_insights == []

    def test_extracted_text_wire_names(self):
        extracted = ExtractedText(text="t", file_name="a.pdf", file_type="pdf", word_count=1)
        assert set(extracted.model_dump(by_alias=True)) == {
            "text",
            "fileName",
            "fileType",
            "wordCount",
        }


class TestProviderConfig:
    """Tests for ProviderConfig."""

    def test_is_immutable(self):
        config = ProviderConfig(kind=ProviderKind.OPENAI, name="OpenAI", model="gpt-4o-mini")

        with pytest.raises(ValidationError):
            config.model = "other"

    def test_has_credentials(self):
        base = {"kind": ProviderKind.GEMINI, "name": "Google Gemini", "model": "m"}

        assert ProviderConfig(**base, api_key="key").has_credentials
        assert not ProviderConfig(**base, api_key="").has_credentials
        assert not ProviderConfig(**base, api_key="  ").has_credentials
