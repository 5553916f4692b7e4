from __future__ import annotations

import asyncio

import pytest

from persistence.disk_store import DiskJsonDocumentStore
from persistence.errors import DocumentNotFoundError, DocumentWriteError, InvalidDocumentError
from persistence.paths import document_path, is_valid_doc_id
from persistence.repositories import AsyncDiskDocumentRepository


def test_async_disk_document_repository_roundtrip(tmp_path):
    async def _run():
        repo = AsyncDiskDocumentRepository(tmp_path / "data")

        await repo.save_document("1", b'{"hello": "world", "n": [1, 2]}')
        raw = await repo.get_document("1")
        assert raw == b'{\n  "hello": "world",\n  "n": [\n    1,\n    2\n  ]\n}\n'

        with pytest.raises(DocumentNotFoundError) as exc:
            await repo.get_document("2")
        assert "2.json" in exc.value.message

        with pytest.raises(InvalidDocumentError):
            await repo.save_document("1", b"nope")
        assert await repo.get_document("1") == raw

    asyncio.run(_run())


def test_concurrent_writes_leave_one_complete_document(tmp_path):
    async def _run():
        repo = AsyncDiskDocumentRepository(tmp_path)
        bodies = [f'{{"writer": {i}}}'.encode() for i in range(10)]
        await asyncio.gather(*(repo.save_document("3", b) for b in bodies))
        # Which writer wins is not defined; the result must be one of them, intact.
        return await repo.get_document("3")

    raw = asyncio.run(_run())
    assert raw in {f'{{\n  "writer": {i}\n}}\n'.encode() for i in range(10)}
    assert not list(tmp_path.glob("*.tmp"))


def test_store_preserves_key_order_and_unicode(tmp_path):
    store = DiskJsonDocumentStore(tmp_path)
    store.write("4", '{"b": 1, "a": "café"}'.encode("utf-8"))
    assert store.read("4").decode("utf-8") == '{\n  "b": 1,\n  "a": "café"\n}\n'


def test_store_read_error_is_reported_as_not_found(tmp_path):
    store = DiskJsonDocumentStore(tmp_path)
    (tmp_path / "5.json").mkdir()
    with pytest.raises(DocumentNotFoundError):
        store.read("5")


def test_store_write_error(tmp_path):
    store = DiskJsonDocumentStore(tmp_path)
    (tmp_path / "6.json").mkdir()
    with pytest.raises(DocumentWriteError) as exc:
        store.write("6", b"{}")
    assert exc.value.status_code == 500
    assert not list(tmp_path.glob("*.tmp"))


def test_store_creates_missing_data_dir(tmp_path):
    data_dir = tmp_path / "nested" / "data"
    DiskJsonDocumentStore(data_dir).write("1", b"[]")
    assert (data_dir / "1.json").read_text(encoding="utf-8") == "[]\n"


def test_document_ids_must_be_ascii_digits(tmp_path):
    assert is_valid_doc_id("0042")
    for bad in ("", "4a", "../1", "1\n", "١٢"):
        assert not is_valid_doc_id(bad)
        with pytest.raises(ValueError):
            document_path(tmp_path, bad)


def test_store_write_serialization_failure_is_a_write_error(tmp_path, monkeypatch):
    import json_store

    def _boom(payload, *, indent=2):
        raise ValueError("cannot serialize")

    monkeypatch.setattr(json_store, "dump_json", _boom)
    store = DiskJsonDocumentStore(tmp_path)
    with pytest.raises(DocumentWriteError):
        store.write("7", b"{}")
    assert not list(tmp_path.glob("*.tmp"))
