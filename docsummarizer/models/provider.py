"""Provider-related Pydantic models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderKind(str, Enum):
    """Supported LLM backends."""

    GEMINI = "gemini"
    OPENAI = "openai"
    CLAUDE = "claude"


class ProviderConfig(BaseModel):
    """Resolved configuration for one LLM backend."""

    model_config = ConfigDict(frozen=True)

    kind: ProviderKind = Field(..., description="Backend variant")
    name: str = Field(..., description="Display name, e.g. 'Google Gemini'")
    model: str = Field(..., description="Model identifier sent upstream")
    api_key: str = Field(default="", repr=False)
    base_url: Optional[str] = Field(default=None, description="Override API base URL")
    max_tokens: int = Field(default=1000, gt=0)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    timeout_seconds: int = Field(default=60, gt=0)

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


class ProviderInfo(BaseModel):
    """Public description of a provider (no credentials)."""

    name: str
    model: str
    description: Optional[str] = None
