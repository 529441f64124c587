"""LLM Context - credentials and retrieved knowledge for model calls."""

from llm_context.capabilities import merged_types, update_model_types
from llm_context.config import Settings, get_settings
from llm_context.core import (
    APIHostError,
    APIKeyError,
    CheckResult,
    ConfigurationError,
    ConnectionParams,
    ConnectivityError,
    ErrorDetail,
    KnowledgeBase,
    KnowledgeItem,
    LLMContextError,
    Model,
    ModelType,
    NoModelSelectedError,
    Provider,
    ProviderNotFoundError,
    RateLimitError,
    SearchError,
    TimeoutError,
)
from llm_context.embeddings import EmbeddingParamsResolver, get_knowledge_base_params
from llm_context.providers import (
    CredentialSet,
    CredentialValidator,
    MultiKeyValidationCoordinator,
    ProviderStore,
    apply_valid_keys,
    check_api,
)
from llm_context.retrieval import (
    FileRegistry,
    KnowledgeSearchBackend,
    Reference,
    RetrievalCoordinator,
    get_knowledge_references,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Config
    "Settings",
    "get_settings",
    # Models
    "Model",
    "ModelType",
    "Provider",
    "KnowledgeBase",
    "KnowledgeItem",
    "ConnectionParams",
    "CheckResult",
    "ErrorDetail",
    "Reference",
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
    # Capabilities
    "merged_types",
    "update_model_types",
    # Providers
    "ProviderStore",
    "CredentialSet",
    "CredentialValidator",
    "check_api",
    "MultiKeyValidationCoordinator",
    "apply_valid_keys",
    # Embeddings
    "EmbeddingParamsResolver",
    "get_knowledge_base_params",
    # Retrieval
    "KnowledgeSearchBackend",
    "FileRegistry",
    "RetrievalCoordinator",
    "get_knowledge_references",
]
