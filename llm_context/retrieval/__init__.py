"""Retrieval module for llm-context."""

from llm_context.retrieval.base import FileRegistry, KnowledgeSearchBackend
from llm_context.retrieval.coordinator import (
    RetrievalCoordinator,
    get_knowledge_references,
    serialize_references,
)
from llm_context.retrieval.models import (
    FileRecord,
    HitMetadata,
    Reference,
    ResolvedHit,
    RetrievalHit,
    SearchQuery,
)
from llm_context.retrieval.sources import (
    file_id_from_source,
    get_file_from_url,
    get_knowledge_source_url,
)

__all__ = [
    "KnowledgeSearchBackend",
    "FileRegistry",
    "RetrievalCoordinator",
    "get_knowledge_references",
    "serialize_references",
    "FileRecord",
    "HitMetadata",
    "Reference",
    "ResolvedHit",
    "RetrievalHit",
    "SearchQuery",
    "file_id_from_source",
    "get_file_from_url",
    "get_knowledge_source_url",
]
