"""Model capability tags forced by identifier patterns and merged with user choices."""

import logging
import re
from typing import TYPE_CHECKING

from pydantic import BaseModel

from llm_context.core.models import Assistant, Model, ModelType

if TYPE_CHECKING:
    from llm_context.providers.store import ProviderStore

logger = logging.getLogger(__name__)

_VISION_ALLOWED = [
    "llava",
    "moondream",
    "minicpm",
    r"gemini-1\.5",
    r"gemini-2\.0",
    "gemini-exp",
    "claude-3",
    "vision",
    "glm-4v",
    "qwen-vl",
    "qwen2-vl",
    r"qwen2\.5-vl",
    "internvl2",
    "grok-vision-beta",
    "pixtral",
    r"gpt-4(?:-[\w-]+)",
    r"gpt-4o(?:-[\w-]+)?",
    r"chatgpt-4o(?:-[\w-]+)?",
    r"o1(?:-[\w-]+)?",
    r"deepseek-vl(?:[\w-]+)?",
]

_VISION_EXCLUDED = [
    r"gpt-4-\d+-preview",
    "gpt-4-turbo-preview",
    "gpt-4-32k",
    r"gpt-4-\d+",
]

VISION_REGEX = re.compile(
    rf"\b(?!(?:{'|'.join(_VISION_EXCLUDED)})\b)({'|'.join(_VISION_ALLOWED)})\b",
    re.IGNORECASE,
)
EMBEDDING_REGEX = re.compile(
    r"(?:^text-|embed|bge-|e5-|LLM2Vec|retrieval|uae-|gte-|jina-clip|jina-embeddings)",
    re.IGNORECASE,
)
REASONING_REGEX = re.compile(
    r"^(o\d+(?:-[\w-]+)?|.*\b(?:reasoner|thinking)\b.*|.*-[rR]\d+.*)$",
    re.IGNORECASE,
)

# Evaluated independently; order only fixes presentation.
CAPABILITY_RULES: list[tuple[ModelType, re.Pattern[str]]] = [
    (ModelType.VISION, VISION_REGEX),
    (ModelType.EMBEDDING, EMBEDDING_REGEX),
    (ModelType.REASONING, REASONING_REGEX),
]


def forced_types(model: Model) -> set[ModelType]:
    """Tags implied by the model identifier. Recomputed on every call, never stored."""
    return {tag for tag, pattern in CAPABILITY_RULES if pattern.search(model.id)}


def is_type_locked(model: Model, tag: ModelType) -> bool:
    """True when ``tag`` is forced by the identifier and cannot be removed by the user."""
    return tag in forced_types(model)


def merged_types(model: Model) -> set[ModelType]:
    """Union of forced tags and the user's previously selected tags."""
    return forced_types(model) | set(model.type or [])


def has_type(model: Model, tag: ModelType) -> bool:
    return tag in merged_types(model)


def apply_user_selection(model: Model, types: list[ModelType] | set[ModelType]) -> Model:
    """Return a copy of ``model`` carrying the user's selection.

    Forced tags are re-added, so deselecting one has no effect.
    """
    selected = set(types) | forced_types(model)
    ordered = [tag for tag, _ in CAPABILITY_RULES if tag in selected]
    return model.model_copy(update={"type": ordered})


class ModelUpdate(BaseModel):
    """Snapshot of every copy of a model written by one update."""

    model: Model
    assistants: list[Assistant]
    default_model: Model | None = None


def update_model_types(
    model: Model,
    types: list[ModelType] | set[ModelType],
    *,
    provider_store: "ProviderStore",
) -> ModelUpdate:
    """Change a model's capability tags in the provider list, every assistant and the default model.

    All new values are computed first and then committed in a single store
    write, so no reader observes a partially updated state.

    Args:
        model: Model being edited (identified by id and provider id)
        types: Tags the user selected
        provider_store: Store holding providers, assistants and the default model

    Returns:
        The values that were committed

    Raises:
        ProviderNotFoundError: If the owning provider is not in the store
    """
    updated = apply_user_selection(model, types)
    provider = provider_store.get_provider(model.provider)

    models = [updated if m.id == model.id else m for m in provider.models]
    new_provider = provider.model_copy(update={"models": models})

    assistants = [
        a.model_copy(update={"model": updated}) if updated.same_as(a.model) else a
        for a in provider_store.assistants
    ]

    default_model = provider_store.default_model
    if updated.same_as(default_model):
        default_model = default_model.model_copy(update={"type": updated.type})

    provider_store.commit_model_update(new_provider, assistants, default_model)

    logger.debug(
        f"Updated capability tags of {model.id}@{model.provider} to "
        f"{[t.value for t in updated.type or []]}"
    )
    return ModelUpdate(model=updated, assistants=assistants, default_model=default_model)
