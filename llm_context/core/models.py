"""Core data models for providers, models and knowledge bases."""

import json
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

ProviderType = Literal["openai", "gemini", "azure-openai", "anthropic", "ollama", "lmstudio"]

KnowledgeItemType = Literal["file", "url", "note", "sitemap", "directory"]


class ModelType(str, Enum):
    """Capability tag describing what a model can do."""

    VISION = "vision"
    EMBEDDING = "embedding"
    REASONING = "reasoning"


class Model(BaseModel):
    """A model offered by a provider."""

    id: str
    provider: str
    name: str = ""
    group: str = ""
    type: list[ModelType] | None = None

    def same_as(self, other: "Model | None") -> bool:
        """True when both refer to the same (model id, provider id) pair."""
        return other is not None and other.id == self.id and other.provider == self.provider


def get_model_name(model: Model | None) -> str:
    """Display name of a model, falling back to its id."""
    if model is None:
        return ""
    return model.name or model.id or ""


def get_model_uniq_id(model: Model | None) -> str:
    """Stable identity string for a (model id, provider id) pair.

    Returns an empty string for a missing model or a model without id.
    """
    if model is None or not model.id:
        return ""
    return json.dumps({"id": model.id, "provider": model.provider}, separators=(",", ":"))


class Provider(BaseModel):
    """A configured remote model vendor endpoint plus credentials.

    ``api_key`` may hold several keys separated by commas.
    """

    id: str
    type: ProviderType = "openai"
    name: str = ""
    api_key: str = ""
    api_host: str = ""
    api_version: str | None = None
    enabled: bool = True
    is_system: bool = False
    models: list[Model] = Field(default_factory=list)

    @property
    def is_azure(self) -> bool:
        return self.id == "azure-openai" or self.type == "azure-openai"

    @property
    def requires_api_key(self) -> bool:
        """Local runtimes accept requests without a key."""
        return self.id not in ("ollama", "lmstudio") and self.type not in ("ollama", "lmstudio")

    def with_overrides(
        self,
        api_key: str | None = None,
        api_host: str | None = None,
    ) -> "Provider":
        """Return a transient copy using the given key/host instead of the stored ones."""
        update: dict[str, Any] = {}
        if api_key is not None:
            update["api_key"] = api_key
        if api_host is not None:
            update["api_host"] = api_host
        return self.model_copy(update=update)


class Assistant(BaseModel):
    """An assistant configuration bound to a model."""

    id: str
    name: str = ""
    model: Model | None = None


class KnowledgeItem(BaseModel):
    """An item ingested into a knowledge base."""

    id: str
    unique_id: str | None = None
    type: KnowledgeItemType = "file"


class KnowledgeBase(BaseModel):
    """A searchable corpus bound to an embedding model."""

    id: str
    name: str = ""
    model: Model
    dimensions: int | None = None
    chunk_size: int | None = None
    chunk_overlap: int | None = None
    document_count: int | None = None
    items: list[KnowledgeItem] = Field(default_factory=list)


class ConnectionParams(BaseModel):
    """Effective connection and chunking parameters for a knowledge base."""

    id: str
    model: str
    dimensions: int | None = None
    api_key: str
    api_version: str | None = None
    base_url: str
    chunk_size: int | None = None
    chunk_overlap: int | None = None


class ErrorDetail(BaseModel):
    """Diagnostic detail captured from a failed check."""

    message: str
    type: str = "Exception"
    provider: str | None = None
    status_code: int | None = None

    @classmethod
    def from_exception(cls, exc: BaseException, provider: str | None = None) -> "ErrorDetail":
        """Capture an exception as displayable detail."""
        message = getattr(exc, "detail", None) or str(exc) or exc.__class__.__name__
        return cls(
            message=message,
            type=exc.__class__.__name__,
            provider=getattr(exc, "provider", None) or provider,
            status_code=getattr(exc, "status_code", None),
        )


class CheckResult(BaseModel):
    """Outcome of a single credential check."""

    valid: bool
    error: ErrorDetail | None = None
