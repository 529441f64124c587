"""Known context limits of embedding models."""

# Max input tokens per embedding request, keyed by model id.
EMBEDDING_MODELS: dict[str, int] = {
    "BAAI/bge-m3": 8000,
    "Pro/BAAI/bge-m3": 8000,
    "BAAI/bge-large-zh-v1.5": 512,
    "BAAI/bge-large-en-v1.5": 512,
    "netease-youdao/bce-embedding-base_v1": 512,
    "tao-8k": 8192,
    "embedding-v1": 384,
    "bge-large-zh": 512,
    "bge-large-en": 512,
    "Doubao-embedding": 4095,
    "Doubao-embedding-large": 4095,
    "text-embedding-v2": 2048,
    "text-embedding-v3": 8192,
    "text-embedding-3-small": 8191,
    "text-embedding-3-large": 8191,
    "text-embedding-ada-002": 8191,
    "embedding-2": 1024,
    "embedding-3": 8192,
    "hunyuan-embedding": 1024,
    "jina-embeddings-v2-base-zh": 8191,
    "jina-embeddings-v2-base-en": 8191,
    "jina-embeddings-v3": 8191,
    "jina-clip-v2": 8192,
    "text-embedding-004": 2048,
    "embed-english-v3.0": 512,
    "embed-multilingual-v3.0": 512,
    "voyage-3": 32000,
    "voyage-3-lite": 32000,
    "mistral-embed": 8000,
    "nomic-embed-text": 8192,
    "mxbai-embed-large": 512,
}

_BY_LOWER_ID = {model_id.lower(): limit for model_id, limit in EMBEDDING_MODELS.items()}


def get_embedding_max_context(model_id: str) -> int | None:
    """Context ceiling of an embedding model, or None if unknown.

    Exact ids (case-insensitive) win; otherwise the longest known id
    contained in ``model_id`` is used, so provider prefixes and tags such as
    ``Pro/`` or ``:latest`` still match.
    """
    if not model_id:
        return None
    needle = model_id.lower()
    if needle in _BY_LOWER_ID:
        return _BY_LOWER_ID[needle]

    matches = [known for known in _BY_LOWER_ID if known in needle]
    if not matches:
        return None
    return _BY_LOWER_ID[max(matches, key=len)]
