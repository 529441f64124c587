"""Pytest configuration and fixtures."""

import os

import pytest

from llm_context.config import Settings, reset_settings
from llm_context.core import Assistant, KnowledgeBase, KnowledgeItem, Model, ModelType, Provider
from llm_context.providers import ProviderStore, key_rotator


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep LLM_CONTEXT_* variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("LLM_CONTEXT_"):
            monkeypatch.delenv(name)
    reset_settings()
    key_rotator.reset()
    yield
    reset_settings()
    key_rotator.reset()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def chat_model():
    return Model(id="gpt-4o-mini", provider="openai", name="GPT-4o mini")


@pytest.fixture
def embedding_model():
    return Model(id="text-embedding-3-small", provider="openai", type=[ModelType.EMBEDDING])


@pytest.fixture
def openai_provider(chat_model, embedding_model):
    return Provider(
        id="openai",
        type="openai",
        name="OpenAI",
        api_key="sk-test-key-0001",
        api_host="https://api.openai.com",
        models=[chat_model, embedding_model],
    )


@pytest.fixture
def gemini_provider():
    return Provider(
        id="gemini",
        type="gemini",
        api_key="AIza-test",
        api_host="https://generativelanguage.googleapis.com",
        models=[Model(id="text-embedding-004", provider="gemini")],
    )


@pytest.fixture
def store(openai_provider, gemini_provider, chat_model):
    return ProviderStore(
        providers=[openai_provider, gemini_provider],
        assistants=[
            Assistant(id="default", name="Default", model=chat_model),
            Assistant(id="other", name="Other", model=Model(id="gemini-2.0-flash", provider="gemini")),
        ],
        default_model=chat_model,
    )


@pytest.fixture
def knowledge_base(embedding_model):
    return KnowledgeBase(
        id="kb-1",
        name="Docs",
        model=embedding_model,
        chunk_overlap=50,
        items=[
            KnowledgeItem(id="1", unique_id="loader-url", type="url"),
            KnowledgeItem(id="2", unique_id="loader-file", type="file"),
            KnowledgeItem(id="3", unique_id="loader-note", type="note"),
        ],
    )
