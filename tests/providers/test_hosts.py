"""Tests for API host normalization."""

import pytest

from llm_context.core import Provider
from llm_context.providers.hosts import endpoint_preview, format_api_host, provider_base_url


@pytest.mark.parametrize(
    "host, expected",
    [
        ("https://api.openai.com", "https://api.openai.com/v1/"),
        ("https://proxy.test/api/", "https://proxy.test/api/"),
        ("https://proxy.test/custom/chat#", "https://proxy.test/custom/chat"),
    ],
)
def test_format_api_host(host, expected):
    assert format_api_host(host) == expected


def test_endpoint_preview():
    assert endpoint_preview("https://api.openai.com") == "https://api.openai.com/v1/chat/completions"
    assert endpoint_preview("https://proxy.test/api/") == "https://proxy.test/api/chat/completions"
    assert endpoint_preview("https://proxy.test/custom/chat#") == "https://proxy.test/custom/chat"
    assert (
        endpoint_preview("https://api.openai.com", "embeddings")
        == "https://api.openai.com/v1/embeddings"
    )


def test_gemini_base_url_uses_openai_compat_surface():
    provider = Provider(
        id="gemini", type="gemini", api_host="https://generativelanguage.googleapis.com/"
    )

    assert provider_base_url(provider) == "https://generativelanguage.googleapis.com/v1beta/openai/"


def test_non_gemini_base_url(openai_provider):
    assert provider_base_url(openai_provider) == "https://api.openai.com/v1/"
