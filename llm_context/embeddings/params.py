"""Effective connection and chunking parameters for a knowledge base."""

import logging
from collections.abc import Callable

from llm_context.config import Settings, get_settings
from llm_context.core import ConnectionParams, KnowledgeBase
from llm_context.embeddings.limits import get_embedding_max_context
from llm_context.providers.credentials import KeyRotator, key_rotator
from llm_context.providers.hosts import provider_base_url
from llm_context.providers.store import ProviderStore

logger = logging.getLogger(__name__)


def resolve_chunk_size(
    chunk_size: int | None,
    max_context: int | None,
    threshold: int = 1024,
) -> int | None:
    """Clamp a configured chunk size to the embedding model's context ceiling.

    Args:
        chunk_size: Configured chunk size; 0 and None mean "not configured"
        max_context: Context ceiling of the embedding model, if known
        threshold: Ceilings below this become the chunk size when none is configured

    Returns:
        The chunk size to use, or None to leave it to the splitter's default
    """
    if not max_context:
        return chunk_size or None
    if chunk_size and chunk_size > max_context:
        return max_context
    if not chunk_size and max_context < threshold:
        return max_context
    return chunk_size or None


class EmbeddingParamsResolver:
    """Derives connection and chunking parameters for a knowledge base's embedding model.

    Pure derivation: no network calls. The only failure is a missing owning
    provider, which propagates as ``ProviderNotFoundError``.
    """

    def __init__(
        self,
        store: ProviderStore,
        settings: Settings | None = None,
        rotator: KeyRotator | None = None,
        max_context: Callable[[str], int | None] = get_embedding_max_context,
    ) -> None:
        self.store = store
        self.settings = settings or get_settings()
        self.rotator = rotator or key_rotator
        self.max_context = max_context

    def resolve(self, base: KnowledgeBase) -> ConnectionParams:
        """Resolve ``base`` into the parameters used by search and ingestion."""
        provider = self.store.get_provider_by_model(base.model)

        max_context = self.max_context(base.model.id)
        chunk_size = resolve_chunk_size(
            base.chunk_size, max_context, self.settings.chunk_size_threshold
        )
        if chunk_size != base.chunk_size:
            logger.debug(
                f"Chunk size for knowledge base {base.id} resolved to {chunk_size} "
                f"(configured {base.chunk_size}, model ceiling {max_context})"
            )

        return ConnectionParams(
            id=base.id,
            model=base.model.id,
            dimensions=base.dimensions,
            api_key=self.rotator.next_key(provider) or self.settings.placeholder_api_key,
            api_version=provider.api_version,
            base_url=provider_base_url(provider),
            chunk_size=chunk_size,
            chunk_overlap=base.chunk_overlap,
        )


def get_knowledge_base_params(
    base: KnowledgeBase,
    store: ProviderStore,
    settings: Settings | None = None,
) -> ConnectionParams:
    """Resolve ``base`` with the default key rotator and context table."""
    return EmbeddingParamsResolver(store, settings=settings).resolve(base)
