"""Core abstractions and models."""

from llm_context.core.exceptions import (
    APIHostError,
    APIKeyError,
    ConfigurationError,
    ConnectivityError,
    LLMContextError,
    NoModelSelectedError,
    ProviderNotFoundError,
    RateLimitError,
    SearchError,
    TimeoutError,
)
from llm_context.core.models import (
    Assistant,
    CheckResult,
    ConnectionParams,
    ErrorDetail,
    KnowledgeBase,
    KnowledgeItem,
    Model,
    ModelType,
    Provider,
    get_model_name,
    get_model_uniq_id,
)

__all__ = [
    # Exceptions
    "LLMContextError",
    "ConfigurationError",
    "ProviderNotFoundError",
    "NoModelSelectedError",
    "APIKeyError",
    "APIHostError",
    "ConnectivityError",
    "RateLimitError",
    "TimeoutError",
    "SearchError",
    # Models
    "Model",
    "ModelType",
    "Provider",
    "Assistant",
    "KnowledgeBase",
    "KnowledgeItem",
    "ConnectionParams",
    "ErrorDetail",
    "CheckResult",
    "get_model_name",
    "get_model_uniq_id",
]
