"""Provider adapters for OpenAI, Gemini and Claude."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type

import anthropic
import httpx
import openai

from docsummarizer.core.exceptions import (
    ConfigurationError,
    EmptyResponseError,
    ProviderHttpError,
    classify_provider_error,
)
from docsummarizer.models.provider import ProviderConfig, ProviderKind
from docsummarizer.models.summary import SummaryRequest
from docsummarizer.services.prompt_builder import SYSTEM_PROMPT, build_prompt

logger = logging.getLogger(__name__)


class BaseProviderAdapter(ABC):
    """Abstract base class for provider adapters.

    Adapters translate a prompt into one backend's wire protocol and return
    the raw response text. Upstream failures are raised as ProviderHttpError
    (or its quota/rate-limit/auth variants) and missing text as
    EmptyResponseError.
    """

    def __init__(self, config: ProviderConfig):
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Send the prompt to the backend.

        Args:
            prompt: Fully built user prompt.

        Returns:
            Raw response text.
        """
        pass

    @abstractmethod
    async def test_connection(self) -> bool:
        """Issue a read-only call to check the backend is reachable."""
        pass

    async def aclose(self) -> None:
        """Release network resources held by the adapter."""
        pass

    async def summarize(self, request: SummaryRequest) -> str:
        """Build the summarization prompt for a request and send it."""
        return await self.generate(build_prompt(request.text, request.file_name))


class OpenAIAdapter(BaseProviderAdapter):
    """OpenAI chat-completions adapter."""

    def __init__(self, config: ProviderConfig, client: Optional[Any] = None):
        super().__init__(config)
        self._owns_client = client is None
        self.client = client or openai.AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )

    async def generate(self, prompt: str) -> str:
        try:
            completion = await self.client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
            )
        except openai.APIStatusError as e:
            logger.error(f"OpenAI API error ({e.status_code}): {e.message}")
            raise classify_provider_error(self.name, e.message, e.status_code) from e
        except openai.APIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise classify_provider_error(self.name, str(e)) from e

        content = None
        if completion.choices:
            content = completion.choices[0].message.content
        if not content:
            raise EmptyResponseError(self.name)

        return content

    async def test_connection(self) -> bool:
        try:
            await self.client.models.list()
            return True
        except openai.OpenAIError as e:
            logger.warning(f"OpenAI connection test failed: {e}")
            return False

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.close()


class GeminiAdapter(BaseProviderAdapter):
    """Gemini generateContent adapter over the REST API."""

    def __init__(
        self,
        config: ProviderConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(config)
        if not config.base_url:
            raise ConfigurationError("Gemini base URL is not configured")
        self.base_url = config.base_url.rstrip("/")
        self.http_client = http_client

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or "Unknown error"
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return "Unknown error"

    @staticmethod
    def _extract_text(data: Dict[str, Any]) -> Optional[str]:
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        params = {"key": self.config.api_key}
        if self.http_client is not None:
            return await self.http_client.request(method, url, params=params, **kwargs)
        async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
            return await client.request(method, url, params=params, **kwargs)

    async def generate(self, prompt: str) -> str:
        url = f"{self.base_url}/models/{self.config.model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.config.temperature,
                "maxOutputTokens": self.config.max_tokens,
            },
        }

        try:
            response = await self._request("POST", url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed: {e}")
            raise ProviderHttpError(self.name, str(e) or type(e).__name__) from e

        if not response.is_success:
            message = self._error_message(response)
            logger.error(f"Gemini API error ({response.status_code}): {message}")
            raise classify_provider_error(self.name, message, response.status_code)

        try:
            data = response.json()
        except ValueError:
            raise EmptyResponseError(self.name)

        text = self._extract_text(data) if isinstance(data, dict) else None
        if not text:
            raise EmptyResponseError(self.name)

        return text

    async def test_connection(self) -> bool:
        url = f"{self.base_url}/models"
        try:
            response = await self._request("GET", url)
        except httpx.HTTPError as e:
            logger.warning(f"Gemini connection test failed: {e}")
            return False

        return response.is_success


class ClaudeAdapter(BaseProviderAdapter):
    """Anthropic messages adapter."""

    def __init__(self, config: ProviderConfig, client: Optional[Any] = None):
        super().__init__(config)
        self._owns_client = client is None
        self.client = client or anthropic.AsyncAnthropic(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )

    async def generate(self, prompt: str) -> str:
        try:
            response = await self.client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            logger.error(f"Anthropic API error ({e.status_code}): {e.message}")
            raise classify_provider_error(self.name, e.message, e.status_code) from e
        except anthropic.APIError as e:
            logger.error(f"Anthropic request failed: {e}")
            raise classify_provider_error(self.name, str(e)) from e

        text = None
        if response.content:
            text = getattr(response.content[0], "text", None)
        if not text:
            raise EmptyResponseError(self.name)

        return text

    async def test_connection(self) -> bool:
        try:
            await self.client.models.list()
            return True
        except anthropic.AnthropicError as e:
            logger.warning(f"Anthropic connection test failed: {e}")
            return False

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.close()


ADAPTERS: Dict[ProviderKind, Type[BaseProviderAdapter]] = {
    ProviderKind.OPENAI: OpenAIAdapter,
    ProviderKind.GEMINI: GeminiAdapter,
    ProviderKind.CLAUDE: ClaudeAdapter,
}


def create_adapter(config: ProviderConfig) -> BaseProviderAdapter:
    """Create the adapter matching a provider config.

    Raises:
        ConfigurationError: If the provider has no adapter or no credential.
    """
    adapter_cls = ADAPTERS.get(config.kind)
    if adapter_cls is None:
        raise ConfigurationError(f"Unsupported AI provider: {config.name}")
    if not config.has_credentials:
        raise ConfigurationError(f"{config.name} API key not configured")

    logger.info(f"Created provider adapter: {config.name}/{config.model}")
    return adapter_cls(config)
