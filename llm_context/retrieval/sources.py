"""Resolution of a hit's source to a remote URL or a locally ingested file."""

import logging
from typing import Optional

from llm_context.config import Settings, get_settings
from llm_context.retrieval.base import FileRegistry
from llm_context.retrieval.models import FileRecord, ResolvedHit

logger = logging.getLogger(__name__)

# Ingested files are stored as <app data>/Data/Files/<id><ext>
_FILES_DIR_SEPARATORS = ("/Data/Files/", "\\Data\\Files\\")


def is_remote_source(source: str) -> bool:
    return source.startswith("http")


def file_id_from_source(source: str, app_data_marker: str) -> Optional[str]:
    """Recover the stored file id from a local file path.

    Both path-separator conventions are tried. Returns None when the path
    does not point into the application's files directory.

    Examples:
        >>> file_id_from_source("/home/u/.config/CherryStudio/Data/Files/abc.pdf", "CherryStudio")
        'abc'
        >>> file_id_from_source("C:\\\\Users\\\\u\\\\CherryStudio\\\\Data\\\\Files\\\\abc.pdf", "CherryStudio")
        'abc'
    """
    if not source or app_data_marker not in source:
        return None

    file_name = ""
    for separator in _FILES_DIR_SEPARATORS:
        if separator in source:
            file_name = source.split(separator, 1)[1]

    file_id = file_name.split(".")[0]
    return file_id or None


async def get_file_from_url(
    source: str,
    registry: FileRegistry,
    settings: Settings | None = None,
) -> Optional[FileRecord]:
    """Find the ingested file a hit's source refers to.

    Lookup misses and registry failures both yield None.
    """
    settings = settings or get_settings()
    file_id = file_id_from_source(source, settings.app_data_marker)
    if file_id is None:
        return None

    try:
        file = await registry.get_file(file_id)
    except Exception as e:
        logger.warning(f"File lookup failed for {file_id}: {e}")
        return None

    if file is None:
        logger.debug(f"No ingested file with id {file_id}")
    return file


def get_knowledge_source_url(resolved: ResolvedHit, file_url_scheme: str = "http://file/") -> str:
    """Display string for a hit's source.

    Remote URLs are returned verbatim; a resolved local file becomes a
    markdown link to the local file server; anything else falls back to
    the raw source string.
    """
    source = resolved.hit.metadata.source
    if is_remote_source(source):
        return source
    if resolved.file is not None:
        return f"[{resolved.file.origin_name}]({file_url_scheme}{resolved.file.name})"
    return source
