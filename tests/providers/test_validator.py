"""Tests for single-key credential validation."""

import pytest

from llm_context.core import ConnectivityError, Model, Provider
from llm_context.providers import CredentialValidator, ProbeClient, check_api


class FakeProbe(ProbeClient):
    """Probe that accepts a fixed set of keys and records every call."""

    def __init__(self, valid_keys: set[str] | None = None, error: Exception | None = None) -> None:
        self.valid_keys = valid_keys or set()
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    async def probe(self, provider: Provider, model: Model) -> bool:
        self.calls.append((provider.api_key, provider.api_host, model.id))
        if self.error is not None:
            raise self.error
        if provider.api_key not in self.valid_keys:
            raise ConnectivityError("Incorrect API key provided", provider=provider.id, status_code=401)
        return True


@pytest.mark.asyncio
async def test_valid_key(openai_provider, chat_model):
    probe = FakeProbe({"sk-test-key-0001"})

    result = await CredentialValidator(probe).check(openai_provider, chat_model)

    assert result.valid
    assert result.error is None
    assert probe.calls == [("sk-test-key-0001", "https://api.openai.com", "gpt-4o-mini")]


@pytest.mark.asyncio
async def test_overrides_are_probed_without_mutating_provider(openai_provider, chat_model):
    probe = FakeProbe({"sk-new"})

    result = await CredentialValidator(probe).check(
        openai_provider, chat_model, api_key="sk-new", api_host="https://proxy.test/"
    )

    assert result.valid
    assert probe.calls == [("sk-new", "https://proxy.test/", "gpt-4o-mini")]
    assert openai_provider.api_key == "sk-test-key-0001"
    assert openai_provider.api_host == "https://api.openai.com"


@pytest.mark.asyncio
async def test_rejected_key_is_reported_not_raised(openai_provider, chat_model):
    result = await CredentialValidator(FakeProbe()).check(openai_provider, chat_model)

    assert not result.valid
    assert result.error.message == "Incorrect API key provided"
    assert result.error.status_code == 401
    assert result.error.provider == "openai"


@pytest.mark.asyncio
async def test_unexpected_exception_is_captured(openai_provider, chat_model):
    probe = FakeProbe(error=RuntimeError("socket closed"))

    result = await CredentialValidator(probe).check(openai_provider, chat_model)

    assert not result.valid
    assert result.error.type == "RuntimeError"
    assert result.error.message == "socket closed"


@pytest.mark.asyncio
async def test_empty_response_is_invalid(openai_provider, chat_model):
    class EmptyProbe(ProbeClient):
        async def probe(self, provider, model):
            return False

    result = await CredentialValidator(EmptyProbe()).check(openai_provider, chat_model)

    assert not result.valid
    assert result.error is not None


@pytest.mark.asyncio
async def test_no_model_selected(openai_provider):
    """Configuration errors are reported before any network attempt."""
    probe = FakeProbe({"sk-test-key-0001"})

    result = await CredentialValidator(probe).check(openai_provider, None)

    assert not result.valid
    assert result.error.type == "NoModelSelectedError"
    assert "No model selected for check" in result.error.message
    assert probe.calls == []


@pytest.mark.asyncio
async def test_missing_key(openai_provider, chat_model):
    probe = FakeProbe()

    result = await CredentialValidator(probe).check(openai_provider, chat_model, api_key="  ")

    assert result.error.type == "APIKeyError"
    assert probe.calls == []


@pytest.mark.asyncio
async def test_keyless_local_provider(chat_model):
    probe = FakeProbe({""})
    provider = Provider(id="ollama", type="ollama", api_host="http://localhost:11434")

    result = await CredentialValidator(probe).check(provider, chat_model)

    assert result.valid


@pytest.mark.asyncio
async def test_missing_host(openai_provider, chat_model):
    probe = FakeProbe({"sk-test-key-0001"})

    result = await CredentialValidator(probe).check(openai_provider, chat_model, api_host="")

    assert result.error.type == "APIHostError"
    assert probe.calls == []


@pytest.mark.asyncio
async def test_azure_requires_api_version(chat_model):
    probe = FakeProbe({"azure-key"})
    provider = Provider(
        id="azure-openai", type="azure-openai", api_key="azure-key", api_host="https://x.azure.com"
    )

    result = await CredentialValidator(probe).check(provider, chat_model)

    assert result.error.type == "ConfigurationError"
    assert probe.calls == []

    result = await CredentialValidator(probe).check(
        provider.model_copy(update={"api_version": "2024-02-01"}), chat_model
    )
    assert result.valid


@pytest.mark.asyncio
async def test_check_api(openai_provider, chat_model):
    view = openai_provider.with_overrides(api_key="sk-typed")

    result = await check_api(view, chat_model, probe=FakeProbe({"sk-typed"}))

    assert result.valid
