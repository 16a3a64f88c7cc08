"""Pytest configuration and fixtures."""

import json
from typing import Callable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from docsummarizer.core.config import Settings
from docsummarizer.models.provider import ProviderConfig, ProviderKind

ARTICLE_SENTENCE = "The quarterly report shows steady growth across all sales regions. "


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build Settings isolated from the process environment and .env file."""

    def _make(**overrides) -> Settings:
        values = {
            "gemini_api_key": None,
            "openai_api_key": None,
            "claude_api_key": None,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def article_text() -> str:
    """A 500-word article."""
    return (ARTICLE_SENTENCE * 50).strip()


@pytest.fixture
def canonical_insights() -> list:
    return [
        "Revenue grew in every region",
        "Costs stayed flat",
        "Hiring doubled in engineering",
        "Customer churn fell",
        "Guidance was raised for next year",
    ]


@pytest.fixture
def canonical_response(canonical_insights) -> str:
    """Strict JSON response as a compliant model would return it."""
    return json.dumps(
        {
            "summary": "The company grew steadily in all regions this quarter.",
            "keyInsights": canonical_insights,
        }
    )


@pytest.fixture
def gemini_config() -> ProviderConfig:
    return ProviderConfig(
        kind=ProviderKind.GEMINI,
        name="Google Gemini",
        model="gemini-2.0-flash",
        api_key="gemini-test-key",
        base_url="https://gemini.test/v1beta",
        max_tokens=1000,
        temperature=0.3,
    )


@pytest.fixture
def openai_config() -> ProviderConfig:
    return ProviderConfig(
        kind=ProviderKind.OPENAI,
        name="OpenAI",
        model="gpt-4o-mini",
        api_key="openai-test-key",
        max_tokens=1000,
        temperature=0.3,
    )


@pytest.fixture
def claude_config() -> ProviderConfig:
    return ProviderConfig(
        kind=ProviderKind.CLAUDE,
        name="Anthropic Claude",
        model="claude-3-haiku-20240307",
        api_key="claude-test-key",
    )


@pytest.fixture
def stub_adapter() -> Callable[..., MagicMock]:
    """Factory for a provider adapter stub returning fixed text."""

    def _make(
        config: ProviderConfig,
        response: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> MagicMock:
        adapter = MagicMock()
        adapter.config = config
        adapter.name = config.name
        if error is not None:
            adapter.generate = AsyncMock(side_effect=error)
        else:
            adapter.generate = AsyncMock(return_value=response)
        adapter.test_connection = AsyncMock(return_value=True)
        adapter.aclose = AsyncMock()
        return adapter

    return _make
