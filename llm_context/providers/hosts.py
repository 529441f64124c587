"""API host normalization shared by credential checks and real calls."""

import logging

from llm_context.core.models import Provider

logger = logging.getLogger(__name__)

# A host ending with this character is taken as the full endpoint.
VERBATIM_SUFFIX = "#"
DEFAULT_VERSION_PATH = "/v1/"
GEMINI_OPENAI_PATH = "/v1beta/openai/"


def format_api_host(host: str) -> str:
    """Base URL the OpenAI-compatible client should use for ``host``.

    Examples:
        >>> format_api_host("https://api.openai.com")
        'https://api.openai.com/v1/'
        >>> format_api_host("https://proxy.example.com/api/")
        'https://proxy.example.com/api/'
        >>> format_api_host("https://proxy.example.com/custom/chat#")
        'https://proxy.example.com/custom/chat'
    """
    if is_verbatim_host(host):
        return host[: -len(VERBATIM_SUFFIX)]
    if host.endswith("/"):
        return host
    return f"{host}{DEFAULT_VERSION_PATH}"


def is_verbatim_host(host: str) -> bool:
    return host.endswith(VERBATIM_SUFFIX)


def endpoint_preview(host: str, operation: str = "chat/completions") -> str:
    """Full URL a request for ``operation`` will be sent to."""
    if is_verbatim_host(host):
        return host[: -len(VERBATIM_SUFFIX)]
    return format_api_host(host) + operation


def provider_base_url(provider: Provider) -> str:
    """Base URL for a provider, routing Gemini through its OpenAI-compatible surface."""
    if provider.type == "gemini":
        base_url = provider.api_host.rstrip("/") + GEMINI_OPENAI_PATH
    else:
        base_url = format_api_host(provider.api_host)
    logger.debug(f"Base URL for provider {provider.id}: {base_url}")
    return base_url
