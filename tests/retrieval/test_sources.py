"""Tests for hit source resolution."""

import pytest

from llm_context.retrieval import (
    FileRecord,
    FileRegistry,
    ResolvedHit,
    RetrievalHit,
    file_id_from_source,
    get_file_from_url,
    get_knowledge_source_url,
)

POSIX_SOURCE = "/Users/me/Library/Application Support/CherryStudio/Data/Files/f-001.pdf"
WINDOWS_SOURCE = "C:\\Users\\me\\AppData\\Roaming\\CherryStudio\\Data\\Files\\f-002.docx"


class MockFileRegistry(FileRegistry):
    """In-memory registry recording lookups."""

    def __init__(self, files: list[FileRecord] | None = None) -> None:
        self.files = {f.id: f for f in files or []}
        self.lookups: list[str] = []

    async def get_file(self, file_id: str) -> FileRecord | None:
        self.lookups.append(file_id)
        return self.files.get(file_id)


class FailingFileRegistry(FileRegistry):
    async def get_file(self, file_id: str) -> FileRecord | None:
        raise OSError("database locked")


def make_hit(source: str) -> RetrievalHit:
    return RetrievalHit(page_content="text", metadata={"source": source})


def test_file_id_from_posix_path():
    assert file_id_from_source(POSIX_SOURCE, "CherryStudio") == "f-001"


def test_file_id_from_windows_path():
    assert file_id_from_source(WINDOWS_SOURCE, "CherryStudio") == "f-002"


@pytest.mark.parametrize(
    "source",
    [
        "",
        "/tmp/Data/Files/f-001.pdf",  # outside the app data directory
        "/home/me/CherryStudio/notes/f-001.pdf",  # no files directory
        "/home/me/CherryStudio/Data/Files/",
    ],
)
def test_file_id_misses(source):
    assert file_id_from_source(source, "CherryStudio") is None


@pytest.mark.asyncio
async def test_get_file_from_url_found(settings):
    record = FileRecord(id="f-001", name="f-001.pdf", origin_name="Handbook.pdf")
    registry = MockFileRegistry([record])

    assert await get_file_from_url(POSIX_SOURCE, registry, settings) == record
    assert registry.lookups == ["f-001"]


@pytest.mark.asyncio
async def test_get_file_from_url_remote_source_skips_lookup(settings):
    registry = MockFileRegistry()

    assert await get_file_from_url("https://example.com/a.pdf", registry, settings) is None
    assert registry.lookups == []


@pytest.mark.asyncio
async def test_get_file_from_url_registry_miss(settings):
    assert await get_file_from_url(POSIX_SOURCE, MockFileRegistry(), settings) is None


@pytest.mark.asyncio
async def test_get_file_from_url_registry_failure_is_a_miss(settings, caplog):
    assert await get_file_from_url(POSIX_SOURCE, FailingFileRegistry(), settings) is None
    assert "database locked" in caplog.text


def test_source_url_prefers_remote_url():
    """A remote source is used verbatim even when a file was resolved."""
    record = FileRecord(id="f-001", name="f-001.pdf", origin_name="Handbook.pdf")
    resolved = ResolvedHit(hit=make_hit("https://example.com/page"), file=record)

    assert get_knowledge_source_url(resolved) == "https://example.com/page"
    assert get_knowledge_source_url(ResolvedHit(hit=make_hit("http://intranet/doc"))) == "http://intranet/doc"


def test_source_url_links_local_file():
    record = FileRecord(id="f-001", name="f-001.pdf", origin_name="Handbook.pdf")
    resolved = ResolvedHit(hit=make_hit(POSIX_SOURCE), file=record)

    assert get_knowledge_source_url(resolved) == "[Handbook.pdf](http://file/f-001.pdf)"


def test_source_url_falls_back_to_raw_source():
    assert get_knowledge_source_url(ResolvedHit(hit=make_hit(POSIX_SOURCE))) == POSIX_SOURCE
