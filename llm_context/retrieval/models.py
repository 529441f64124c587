"""Data models for knowledge-base search and reference building."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from llm_context.core.models import ConnectionParams, KnowledgeItemType


class HitMetadata(BaseModel):
    """Metadata attached to a search hit by the ingestion loader.

    Attributes:
        source: Where the chunk came from: a remote URL or a local file path
        unique_loader_id: Identifier of the knowledge item that produced the chunk
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    source: str = ""
    unique_loader_id: Optional[str] = Field(None, alias="uniqueLoaderId")


class RetrievalHit(BaseModel):
    """A chunk returned by the knowledge-base search, in backend rank order.

    Backends may return camelCase payloads (``pageContent``, ``uniqueLoaderId``);
    both spellings are accepted.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "pageContent": "The quick brown fox jumps over the lazy dog.",
                "metadata": {
                    "source": "https://example.com/fox",
                    "uniqueLoaderId": "item-001",
                },
                "score": 0.87,
            }
        },
    )

    page_content: str = Field(..., alias="pageContent", description="The text content of the chunk")
    metadata: HitMetadata = Field(default_factory=HitMetadata)
    score: Optional[float] = Field(None, description="Similarity reported by the backend")

    def __str__(self) -> str:
        """Human-readable string representation."""
        preview = self.page_content[:100] + "..." if len(self.page_content) > 100 else self.page_content
        return f"RetrievalHit(source={self.metadata.source}, content='{preview}')"


class FileRecord(BaseModel):
    """A locally ingested file known to the file registry.

    Attributes:
        id: File identifier, the stem of the stored file name
        name: Internal storage name (``<id><ext>``)
        origin_name: Name of the file as the user added it
    """

    id: str
    name: str
    origin_name: str
    path: str = ""
    ext: str = ""
    size: int | None = None


class ResolvedHit(BaseModel):
    """A hit together with the local file its source points to, if any."""

    hit: RetrievalHit
    file: Optional[FileRecord] = None


class SearchQuery(BaseModel):
    """Request sent to the knowledge-base search."""

    search: str
    base: ConnectionParams


class Reference(BaseModel):
    """A numbered snippet injected into the prompt.

    Serialized as ``{"id", "content", "sourceUrl", "type"?}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1)
    content: str
    source_url: str = Field(..., alias="sourceUrl")
    type: Optional[KnowledgeItemType] = None
