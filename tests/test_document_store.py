"""Tests for the SQL-backed document store."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from portfolio_cms.data.db import get_database_url
from portfolio_cms.data.store import OrderBy, SqlDocumentStore
from portfolio_cms.errors import StoreUnavailable

if TYPE_CHECKING:
    from conftest import TickingClock


@pytest.mark.asyncio
async def test_add_then_get(store: SqlDocumentStore) -> None:
    doc_id = await store.add("notes", {"title": "First", "count": 1})
    snapshot = await store.get("notes", doc_id)
    assert snapshot is not None
    assert snapshot.id == doc_id
    assert snapshot.data == {"title": "First", "count": 1}
    assert snapshot.to_dict() == {"title": "First", "count": 1, "id": doc_id}


@pytest.mark.asyncio
async def test_add_assigns_unique_ids_and_ignores_id_field(store: SqlDocumentStore) -> None:
    first = await store.add("notes", {"id": "ignored", "title": "a"})
    second = await store.add("notes", {"title": "b"})
    assert first != second
    assert first != "ignored"
    snapshot = await store.get("notes", first)
    assert snapshot is not None
    assert "id" not in snapshot.data


@pytest.mark.asyncio
async def test_get_missing_returns_none(store: SqlDocumentStore) -> None:
    assert await store.get("notes", "missing") is None


@pytest.mark.asyncio
async def test_collections_are_isolated(store: SqlDocumentStore) -> None:
    await store.set("a", "same", {"v": 1})
    await store.set("b", "same", {"v": 2})
    a = await store.get("a", "same")
    b = await store.get("b", "same")
    assert a is not None and a.data == {"v": 1}
    assert b is not None and b.data == {"v": 2}
    assert len(await store.query("a")) == 1


@pytest.mark.asyncio
async def test_set_merge_keeps_other_fields(store: SqlDocumentStore) -> None:
    await store.set("profile", "main", {"name": "Ana", "title": "Dev"})
    await store.set("profile", "main", {"title": "Lead"}, merge=True)
    snapshot = await store.get("profile", "main")
    assert snapshot is not None
    assert snapshot.data == {"name": "Ana", "title": "Lead"}


@pytest.mark.asyncio
async def test_set_without_merge_replaces_document(store: SqlDocumentStore) -> None:
    await store.set("profile", "main", {"name": "Ana", "title": "Dev"})
    await store.set("profile", "main", {"title": "Lead"})
    snapshot = await store.get("profile", "main")
    assert snapshot is not None
    assert snapshot.data == {"title": "Lead"}


@pytest.mark.asyncio
async def test_set_merge_creates_missing_document(store: SqlDocumentStore) -> None:
    await store.set("profile", "main", {"name": "Ana"}, merge=True)
    snapshot = await store.get("profile", "main")
    assert snapshot is not None
    assert snapshot.data == {"name": "Ana"}


@pytest.mark.asyncio
async def test_delete_is_idempotent(store: SqlDocumentStore) -> None:
    doc_id = await store.add("notes", {"title": "x"})
    await store.delete("notes", doc_id)
    await store.delete("notes", doc_id)
    assert await store.get("notes", doc_id) is None


@pytest.mark.asyncio
async def test_query_filters_by_equality(store: SqlDocumentStore) -> None:
    await store.add("posts", {"slug": "a", "is_published": True, "views": 3})
    await store.add("posts", {"slug": "b", "is_published": False, "views": 3})
    await store.add("posts", {"slug": "c", "is_published": True, "views": 5})

    published = await store.query("posts", where={"is_published": True})
    assert [s.data["slug"] for s in published] == ["a", "c"]

    by_slug = await store.query("posts", where={"slug": "b"})
    assert [s.data["slug"] for s in by_slug] == ["b"]

    both = await store.query("posts", where={"is_published": True, "views": 5})
    assert [s.data["slug"] for s in both] == ["c"]


@pytest.mark.asyncio
async def test_query_orders_and_limits(store: SqlDocumentStore) -> None:
    for name, order in [("c", 3), ("a", 1), ("b", 2)]:
        await store.add("skills", {"name": name, "order": order})

    ascending = await store.query("skills", order_by=[OrderBy("order")])
    assert [s.data["name"] for s in ascending] == ["a", "b", "c"]

    descending = await store.query("skills", order_by=[OrderBy("order", descending=True)], limit=2)
    assert [s.data["name"] for s in descending] == ["c", "b"]


@pytest.mark.asyncio
async def test_query_missing_order_field_sorts_last(store: SqlDocumentStore) -> None:
    await store.add("skills", {"name": "none"})
    await store.add("skills", {"name": "two", "order": 2})
    await store.add("skills", {"name": "null", "order": None})
    await store.add("skills", {"name": "one", "order": 1})

    ascending = await store.query("skills", order_by=[OrderBy("order")])
    assert [s.data["name"] for s in ascending] == ["one", "two", "none", "null"]

    descending = await store.query("skills", order_by=[OrderBy("order", descending=True)])
    assert [s.data["name"] for s in descending] == ["two", "one", "none", "null"]


@pytest.mark.asyncio
async def test_query_ties_keep_insertion_order(store: SqlDocumentStore) -> None:
    for name in ["first", "second", "third"]:
        await store.add("skills", {"name": name, "order": 1})
    result = await store.query("skills", order_by=[OrderBy("order")])
    assert [s.data["name"] for s in result] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_query_limit_without_order(store: SqlDocumentStore) -> None:
    for i in range(3):
        await store.add("notes", {"i": i})
    result = await store.query("notes", limit=1)
    assert [s.data["i"] for s in result] == [0]


@pytest.mark.asyncio
async def test_server_timestamp_uses_clock(store: SqlDocumentStore, clock: TickingClock) -> None:
    first = store.server_timestamp()
    second = store.server_timestamp()
    assert second > first
    assert second == clock.now
    assert first.tzinfo is not None


@pytest.mark.asyncio
async def test_missing_schema_raises_store_unavailable(tmp_path: Path) -> None:
    doc_store = SqlDocumentStore.from_url(f"sqlite+aiosqlite:///{(tmp_path / 'empty.db').as_posix()}")
    try:
        with pytest.raises(StoreUnavailable) as exc_info:
            await doc_store.get("skills", "x")
        assert exc_info.value.details["operation"] == "get"
        assert exc_info.value.details["collection"] == "skills"
        assert exc_info.value.details["doc_id"] == "x"
    finally:
        await doc_store.close()


@pytest.mark.asyncio
async def test_unreachable_database_raises_store_unavailable(tmp_path: Path) -> None:
    bad_path = tmp_path / "missing-dir" / "nested" / "db.sqlite"
    doc_store = SqlDocumentStore.from_url(f"sqlite+aiosqlite:///{bad_path.as_posix()}")
    try:
        with pytest.raises(StoreUnavailable):
            await doc_store.create_schema()
    finally:
        await doc_store.close()


def test_database_url_defaults_to_aiosqlite(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DB_URL", raising=False)
    url = get_database_url()
    assert url.startswith("sqlite+aiosqlite:///")
    assert url.endswith("portfolio.db")


def test_database_url_upgrades_sync_sqlite(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DB_URL", f"sqlite:///{(tmp_path / 'x.db').as_posix()}")
    assert get_database_url().startswith("sqlite+aiosqlite:///")


def test_database_url_keeps_explicit_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_URL", "postgresql+psycopg://user:pw@localhost/portfolio")
    assert get_database_url() == "postgresql+psycopg://user:pw@localhost/portfolio"


@pytest.mark.asyncio
async def test_concurrent_merge_sets_on_missing_document(store: SqlDocumentStore) -> None:
    await asyncio.gather(
        store.set("profile", "main", {"name": "A", "title": "Dev"}, merge=True),
        store.set("profile", "main", {"name": "B", "bio": "Hi"}, merge=True),
    )
    documents = await store.query("profile")
    assert [d.id for d in documents] == ["main"]
    assert documents[0].data["name"] in {"A", "B"}


@pytest.mark.asyncio
async def test_set_retries_lost_insert_race_as_update(
    store: SqlDocumentStore, monkeypatch: pytest.MonkeyPatch
) -> None:
    await store.set("profile", "main", {"name": "A", "title": "Dev"})
    real_find = SqlDocumentStore._find
    misses = []

    async def find_missing_once(session, collection, doc_id):
        # First lookup behaves as if another writer had not committed yet.
        if not misses:
            misses.append(doc_id)
            return None
        return await real_find(session, collection, doc_id)

    monkeypatch.setattr(SqlDocumentStore, "_find", staticmethod(find_missing_once))

    await store.set("profile", "main", {"name": "B"}, merge=True)

    snapshot = await store.get("profile", "main")
    assert snapshot is not None
    assert snapshot.data == {"name": "B", "title": "Dev"}
    assert misses == ["main"]
