"""Provider Registry - resolves the active LLM backend from settings."""

import logging
from typing import Dict, List, Optional

from docsummarizer.core.config import Settings, get_settings
from docsummarizer.core.exceptions import ConfigurationError
from docsummarizer.models.provider import ProviderConfig, ProviderInfo, ProviderKind

logger = logging.getLogger(__name__)

# Resolution order, independent of how providers are declared.
PROVIDER_PRIORITY: List[ProviderKind] = [
    ProviderKind.GEMINI,
    ProviderKind.OPENAI,
    ProviderKind.CLAUDE,
]

PROVIDER_DESCRIPTIONS: Dict[ProviderKind, str] = {
    ProviderKind.GEMINI: "Google Gemini models for text generation",
    ProviderKind.OPENAI: "OpenAI GPT models for text generation",
    ProviderKind.CLAUDE: "Anthropic Claude models for text generation",
}


class ProviderRegistry:
    """Holds per-backend configuration and picks the active provider."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def get_providers(self) -> Dict[ProviderKind, ProviderConfig]:
        """Build the configuration of every known backend.

        Returns:
            Mapping of provider kind to its (possibly credential-less) config.
        """
        s = self.settings
        shared = {
            "max_tokens": s.llm_max_tokens,
            "temperature": s.llm_temperature,
            "timeout_seconds": s.llm_timeout_seconds,
        }

        return {
            ProviderKind.OPENAI: ProviderConfig(
                kind=ProviderKind.OPENAI,
                name="OpenAI",
                model=s.openai_model,
                api_key=s.openai_api_key or "",
                base_url=s.openai_base_url,
                **shared,
            ),
            ProviderKind.GEMINI: ProviderConfig(
                kind=ProviderKind.GEMINI,
                name="Google Gemini",
                model=s.gemini_model,
                api_key=s.gemini_api_key or "",
                base_url=s.gemini_base_url,
                **shared,
            ),
            ProviderKind.CLAUDE: ProviderConfig(
                kind=ProviderKind.CLAUDE,
                name="Anthropic Claude",
                model=s.claude_model,
                api_key=s.claude_api_key or "",
                **shared,
            ),
        }

    def resolve_active_provider(self) -> ProviderConfig:
        """Return the highest-priority provider that has a credential.

        Raises:
            ConfigurationError: If no provider has an API key.
        """
        providers = self.get_providers()

        for kind in PROVIDER_PRIORITY:
            config = providers[kind]
            if config.has_credentials:
                logger.debug(f"Resolved active provider: {config.name}/{config.model}")
                return config

        raise ConfigurationError(
            "No AI provider API key configured. Please add OPENAI_API_KEY, "
            "GEMINI_API_KEY, or CLAUDE_API_KEY to your environment variables."
        )

    def list_available(self) -> List[ProviderInfo]:
        """Describe every supported provider in priority order."""
        providers = self.get_providers()
        return [
            ProviderInfo(
                name=providers[kind].name,
                model=providers[kind].model,
                description=PROVIDER_DESCRIPTIONS[kind],
            )
            for kind in PROVIDER_PRIORITY
        ]


def get_provider_registry() -> ProviderRegistry:
    """Get a registry bound to the current settings."""
    return ProviderRegistry(get_settings())
