"""Minimal model-reachability probes used by credential checks."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx
import openai
from openai import AsyncAzureOpenAI, AsyncOpenAI
from openai.types import CreateEmbeddingResponse
from openai.types.chat import ChatCompletion
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from llm_context.capabilities import has_type
from llm_context.config import Settings, get_settings
from llm_context.core import (
    ConnectivityError,
    LLMContextError,
    Model,
    ModelType,
    Provider,
    RateLimitError,
    TimeoutError,
)
from llm_context.providers.hosts import endpoint_preview, is_verbatim_host, provider_base_url

logger = logging.getLogger(__name__)


class ProbeClient(ABC):
    """Abstract base class for reachability probes.

    A probe issues exactly one lightweight request against the provider's
    endpoint with the provider's current key and host.
    """

    @abstractmethod
    async def probe(self, provider: Provider, model: Model) -> bool:
        """Check that ``model`` answers with the given provider connection.

        Args:
            provider: Provider view carrying the key and host to test
            model: Model to address

        Returns:
            True if the endpoint returned a usable response, False otherwise

        Raises:
            ConnectivityError: If the request fails or is rejected
        """
        pass


class OpenAIProbeClient(ProbeClient):
    """Probe for OpenAI-compatible, Gemini and Azure OpenAI providers.

    Embedding models are probed with a one-word embedding request, every
    other model with a one-token chat completion. A host ending in ``#`` is
    the full endpoint, so the request is posted to it as-is.

    Args:
        settings: Settings for timeout and placeholder key
        http_client: Optional shared ``httpx.AsyncClient``; it is left open after each probe
    """

    PROBE_TEXT = "hi"

    def __init__(
        self, settings: Settings | None = None, http_client: httpx.AsyncClient | None = None
    ) -> None:
        self.settings = settings or get_settings()
        self.http_client = http_client

    def _create_client(self, provider: Provider) -> AsyncOpenAI:
        api_key = provider.api_key or self.settings.placeholder_api_key
        if provider.is_azure:
            return AsyncAzureOpenAI(
                api_key=api_key,
                api_version=provider.api_version,
                azure_endpoint=provider.api_host,
                timeout=self.settings.probe_timeout,
                max_retries=0,
                http_client=self.http_client,
            )
        return AsyncOpenAI(
            api_key=api_key,
            base_url=provider_base_url(provider),
            timeout=self.settings.probe_timeout,
            max_retries=0,
            http_client=self.http_client,
        )

    @staticmethod
    def _verbatim_endpoint(provider: Provider, operation: str) -> str | None:
        if provider.is_azure or provider.type == "gemini" or not is_verbatim_host(provider.api_host):
            return None
        return endpoint_preview(provider.api_host, operation)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((RateLimitError, TimeoutError)),
        reraise=True,
    )
    async def probe(self, provider: Provider, model: Model) -> bool:
        """Send one minimal request for ``model`` to ``provider``.

        Rate-limit and timeout failures are retried with exponential backoff
        before being raised.
        """
        client = self._create_client(provider)
        try:
            if has_type(model, ModelType.EMBEDDING):
                body = {"model": model.id, "input": self.PROBE_TEXT}
                endpoint = self._verbatim_endpoint(provider, "embeddings")
                if endpoint:
                    response = await client.post(endpoint, cast_to=CreateEmbeddingResponse, body=body)
                else:
                    response = await client.embeddings.create(**body)
                return bool(response.data)

            body = {
                "model": model.id,
                "messages": [{"role": "user", "content": self.PROBE_TEXT}],
                "max_tokens": 1,
                "stream": False,
            }
            endpoint = self._verbatim_endpoint(provider, "chat/completions")
            if endpoint:
                response = await client.post(endpoint, cast_to=ChatCompletion, body=body)
            else:
                response = await client.chat.completions.create(**body)
            return bool(response.choices and response.choices[0].message)

        except Exception as e:
            raise map_transport_error(e, provider.id, self.settings.probe_timeout) from e
        finally:
            if self.http_client is None:
                await client.close()


def map_transport_error(exc: Exception, provider: str, timeout: int | None = None) -> LLMContextError:
    """Translate an SDK/transport exception into the library's exception hierarchy."""
    if isinstance(exc, LLMContextError):
        return exc
    if isinstance(exc, (openai.APITimeoutError, httpx.TimeoutException)):
        return TimeoutError(f"Request timed out after {timeout}s: {exc}", provider=provider)
    if isinstance(exc, openai.RateLimitError):
        retry_after = _retry_after(exc)
        return RateLimitError(str(exc), provider=provider, retry_after=retry_after)
    if isinstance(exc, openai.APIStatusError):
        return ConnectivityError(
            f"Request rejected: {exc.message}", provider=provider, status_code=exc.status_code
        )
    if "rate_limit" in str(exc).lower():
        return RateLimitError(str(exc), provider=provider)
    return ConnectivityError(f"Request failed: {exc}", provider=provider)


def _retry_after(exc: Any) -> int | None:
    try:
        value = exc.response.headers.get("retry-after")
        return int(value) if value is not None else None
    except (AttributeError, ValueError, TypeError):
        return None
