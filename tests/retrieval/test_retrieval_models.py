"""Tests for retrieval data models."""

import pytest
from pydantic import ValidationError

from llm_context.retrieval import HitMetadata, Reference, RetrievalHit


def test_hit_accepts_camel_case_payload():
    hit = RetrievalHit.model_validate(
        {
            "pageContent": "text",
            "metadata": {"source": "https://e.com", "uniqueLoaderId": "l-1", "chunkIndex": 3},
        }
    )

    assert hit.page_content == "text"
    assert hit.metadata.unique_loader_id == "l-1"
    assert hit.metadata.model_extra == {"chunkIndex": 3}


def test_hit_defaults():
    hit = RetrievalHit(page_content="text")

    assert hit.metadata == HitMetadata()
    assert hit.metadata.source == ""
    assert hit.score is None


def test_hit_str_preview():
    text = str(RetrievalHit(page_content="x" * 150, metadata={"source": "doc"}))

    assert "source=doc" in text
    assert "..." in text


def test_reference_serializes_with_aliases():
    ref = Reference(id=1, content="c", source_url="https://e.com")

    assert ref.model_dump(by_alias=True, exclude_none=True) == {
        "id": 1,
        "content": "c",
        "sourceUrl": "https://e.com",
    }


def test_reference_ids_start_at_one():
    with pytest.raises(ValidationError):
        Reference(id=0, content="c", source_url="s")
