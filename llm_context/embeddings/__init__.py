"""Embedding model limits and knowledge-base connection parameters."""

from llm_context.embeddings.limits import EMBEDDING_MODELS, get_embedding_max_context
from llm_context.embeddings.params import (
    EmbeddingParamsResolver,
    get_knowledge_base_params,
    resolve_chunk_size,
)

__all__ = [
    "EMBEDDING_MODELS",
    "get_embedding_max_context",
    "EmbeddingParamsResolver",
    "get_knowledge_base_params",
    "resolve_chunk_size",
]
