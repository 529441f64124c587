"""Knowledge retrieval for prompt augmentation."""

import asyncio
import json
import logging

from llm_context.config import Settings, get_settings
from llm_context.core import KnowledgeBase, SearchError
from llm_context.embeddings.params import EmbeddingParamsResolver
from llm_context.providers.store import ProviderStore
from llm_context.retrieval.base import FileRegistry, KnowledgeSearchBackend
from llm_context.retrieval.models import Reference, ResolvedHit, RetrievalHit, SearchQuery
from llm_context.retrieval.sources import get_file_from_url, get_knowledge_source_url

logger = logging.getLogger(__name__)


def serialize_references(references: list[Reference]) -> str:
    """Render references as a fenced JSON block for direct inclusion in a prompt."""
    payload = [ref.model_dump(by_alias=True, exclude_none=True) for ref in references]
    return f"```json\n{json.dumps(payload, indent=2, ensure_ascii=False)}\n```"


class RetrievalCoordinator:
    """Turns a user message into a bounded, numbered reference block.

    Pipeline:
        1. resolve the knowledge base's connection parameters
        2. search (any failure here is fatal and raised as ``SearchError``)
        3. resolve each hit's local file concurrently (misses become None)
        4. keep the first ``document_count`` hits in backend order
        5. number them 1..n and attach the originating item's type
        6. build each source display string
        7. serialize as a fenced JSON block

    Example:
        >>> coordinator = RetrievalCoordinator(store, search_backend, file_registry)
        >>> block = await coordinator.retrieve(base, "How do I reset my password?")
    """

    def __init__(
        self,
        store: ProviderStore,
        search_backend: KnowledgeSearchBackend,
        file_registry: FileRegistry,
        settings: Settings | None = None,
        params_resolver: EmbeddingParamsResolver | None = None,
    ) -> None:
        self.store = store
        self.search_backend = search_backend
        self.file_registry = file_registry
        self.settings = settings or get_settings()
        self.params_resolver = params_resolver or EmbeddingParamsResolver(
            store, settings=self.settings
        )

    async def search(self, base: KnowledgeBase, message: str) -> list[RetrievalHit]:
        """Run the knowledge-base search for ``message``.

        Raises:
            ProviderNotFoundError: If the embedding model's provider is missing
            SearchError: If the search backend fails
        """
        params = self.params_resolver.resolve(base)
        query = SearchQuery(search=message, base=params)

        try:
            hits = await self.search_backend.search(query)
        except Exception as e:
            raise SearchError(
                f"Knowledge base {base.id} search failed: {e}", provider=base.model.provider
            ) from e

        logger.debug(f"Knowledge base {base.id} returned {len(hits)} hits")
        return hits

    async def resolve_hits(self, hits: list[RetrievalHit]) -> list[ResolvedHit]:
        """Attach the ingested file each hit points to, preserving hit order."""
        files = await asyncio.gather(
            *(
                get_file_from_url(hit.metadata.source, self.file_registry, self.settings)
                for hit in hits
            )
        )
        return [ResolvedHit(hit=hit, file=file) for hit, file in zip(hits, files)]

    def build_references(self, base: KnowledgeBase, resolved: list[ResolvedHit]) -> list[Reference]:
        """Truncate to the document budget and number the survivors from 1."""
        document_count = max(base.document_count or self.settings.default_document_count, 0)
        item_types = {item.unique_id: item.type for item in base.items if item.unique_id}

        references = []
        for index, item in enumerate(resolved[:document_count]):
            references.append(
                Reference(
                    id=index + 1,
                    content=item.hit.page_content,
                    source_url=get_knowledge_source_url(item, self.settings.file_url_scheme),
                    type=item_types.get(item.hit.metadata.unique_loader_id),
                )
            )
        return references

    async def get_references(self, base: KnowledgeBase, message: str) -> list[Reference]:
        """Search and build the references for ``message`` without serializing."""
        hits = await self.search(base, message)
        resolved = await self.resolve_hits(hits)
        references = self.build_references(base, resolved)
        logger.info(
            f"Knowledge base {base.id}: {len(references)} references from {len(hits)} hits"
        )
        return references

    async def retrieve(self, base: KnowledgeBase, message: str) -> str:
        """Reference block for ``message``, ready for prompt injection."""
        return serialize_references(await self.get_references(base, message))


async def get_knowledge_references(
    base: KnowledgeBase,
    message: str,
    *,
    store: ProviderStore,
    search_backend: KnowledgeSearchBackend,
    file_registry: FileRegistry,
    settings: Settings | None = None,
) -> str:
    """Serialized reference block for ``message`` searched in ``base``."""
    coordinator = RetrievalCoordinator(store, search_backend, file_registry, settings=settings)
    return await coordinator.retrieve(base, message)
