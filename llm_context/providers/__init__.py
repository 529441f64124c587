"""Provider configuration and credential validation."""

from llm_context.providers.credentials import (
    CredentialSet,
    KeyRotator,
    format_api_keys,
    key_rotator,
    mask_key,
)
from llm_context.providers.hosts import endpoint_preview, format_api_host, provider_base_url
from llm_context.providers.multi_key import (
    KeyCheckOutcome,
    MultiKeyCheckResult,
    MultiKeyValidationCoordinator,
    apply_valid_keys,
)
from llm_context.providers.probe import OpenAIProbeClient, ProbeClient
from llm_context.providers.store import ProviderStore
from llm_context.providers.validator import CredentialValidator, check_api

__all__ = [
    # Credentials
    "CredentialSet",
    "KeyRotator",
    "key_rotator",
    "format_api_keys",
    "mask_key",
    # Hosts
    "format_api_host",
    "endpoint_preview",
    "provider_base_url",
    # Store
    "ProviderStore",
    # Validation
    "ProbeClient",
    "OpenAIProbeClient",
    "CredentialValidator",
    "check_api",
    "MultiKeyValidationCoordinator",
    "MultiKeyCheckResult",
    "KeyCheckOutcome",
    "apply_valid_keys",
]
