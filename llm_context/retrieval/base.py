"""Interfaces of the collaborators used by the retrieval pipeline."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from llm_context.retrieval.models import FileRecord, RetrievalHit, SearchQuery


class KnowledgeSearchBackend(ABC):
    """Abstract base class for knowledge-base similarity search.

    Implementations embed the query with the connection parameters carried
    by the request and return hits ranked by relevance. The retrieval
    pipeline trusts this order and never re-ranks.

    Example:
        >>> class MySearch(KnowledgeSearchBackend):
        ...     async def search(self, query: SearchQuery) -> list[RetrievalHit]:
        ...         # Implementation here
        ...         return hits
        ...
        >>> backend = MySearch()
        >>> hits = await backend.search(SearchQuery(search="What is RAG?", base=params))
    """

    @abstractmethod
    async def search(self, query: SearchQuery) -> list[RetrievalHit]:
        """Search the knowledge base described by ``query.base``.

        Args:
            query: Search text and resolved connection parameters

        Returns:
            List of RetrievalHit objects, most relevant first

        Raises:
            Exception: Any failure; the pipeline treats it as fatal
        """
        pass

    async def close(self) -> None:
        """Clean up resources and close connections."""
        pass

    async def __aenter__(self) -> "KnowledgeSearchBackend":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


class FileRegistry(ABC):
    """Registry of files ingested into the application's data directory."""

    @abstractmethod
    async def get_file(self, file_id: str) -> Optional[FileRecord]:
        """Look up a file by id.

        Args:
            file_id: Identifier recovered from the stored file name

        Returns:
            The FileRecord if found, None otherwise
        """
        pass
