"""Unit tests for the database-backed document store."""

import uuid
from datetime import datetime
from unittest.mock import AsyncMock

import asyncpg
import pytest

from monoid_docs.core.database import DatabaseManager, DocumentStore
from monoid_docs.core.errors import DocumentStoreError

ORG_ID = "11111111-1111-1111-1111-111111111111"
REPO_ID = "33333333-3333-3333-3333-333333333333"


class FakeConnection:
    """Records queries and returns canned rows."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.queries = []

    async def fetch(self, query, *args):
        self.queries.append((query, args))
        if self.error:
            raise self.error
        return self.rows

    async def fetchrow(self, query, *args):
        self.queries.append((query, args))
        if self.error:
            raise self.error
        return self.rows[0] if self.rows else None


class FakeAcquire:
    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, *exc):
        return False


class FakePool:
    def __init__(self, conn):
        self.conn = conn

    def acquire(self):
        return FakeAcquire(self.conn)


def document_row(slug="overview", **overrides):
    row = {
        "id": uuid.uuid4(),
        "organization_id": uuid.UUID(ORG_ID),
        "slug": slug,
        "title": slug.title(),
        "description": None,
        "content": None,
        "is_published": True,
        "order_index": None,
        "repo_id": None,
        "created_at": datetime(2024, 1, 1),
    }
    row.update(overrides)
    return row


def manager_with(conn) -> DatabaseManager:
    manager = DatabaseManager("postgresql://localhost/test")
    manager.pool = FakePool(conn)
    manager._inject_pool()
    return manager


class TestDatabaseManager:
    """Test queries issued through the store facade."""

    def test_implements_document_store(self):
        assert isinstance(DatabaseManager("postgresql://localhost/test"), DocumentStore)

    @pytest.mark.asyncio
    async def test_find_organization(self):
        conn = FakeConnection(
            rows=[{"id": uuid.UUID(ORG_ID), "name": "Monoid", "slug": "monoidyc"}]
        )

        org = await manager_with(conn).find_organization_by_slug("monoidyc")

        assert org.id == ORG_ID
        assert org.name == "Monoid"
        assert conn.queries[0][1] == ("monoidyc",)

    @pytest.mark.asyncio
    async def test_find_organization_missing(self):
        assert await manager_with(FakeConnection()).find_organization_by_slug("x") is None

    @pytest.mark.asyncio
    async def test_list_published_orders_and_normalizes(self):
        conn = FakeConnection(rows=[document_row()])

        docs = await manager_with(conn).list_published_documents(ORG_ID)

        query, args = conn.queries[0]
        assert "is_published = true" in query
        assert "ORDER BY order_index ASC, created_at DESC" in query
        assert args == (uuid.UUID(ORG_ID),)
        assert docs[0].organization_id == ORG_ID
        assert docs[0].content == ""
        assert docs[0].order_index == 0

    @pytest.mark.asyncio
    async def test_search_escapes_and_caps(self):
        conn = FakeConnection(rows=[document_row(content="100% coverage")])

        docs = await manager_with(conn).search_published_documents(ORG_ID, "100%_", 50)

        query, args = conn.queries[0]
        assert "ILIKE $2" in query
        assert args[1] == "%100\\%\\_%"
        assert args[2] == 10
        assert docs[0].content == "100% coverage"

    @pytest.mark.asyncio
    async def test_resolve_repos_single_query(self):
        conn = FakeConnection(
            rows=[{"id": uuid.UUID(REPO_ID), "name": "engine", "owner": "monoid"}]
        )

        repos = await manager_with(conn).resolve_repos([REPO_ID, REPO_ID])

        assert len(conn.queries) == 1
        assert conn.queries[0][1] == ([uuid.UUID(REPO_ID)],)
        assert repos[REPO_ID].label == "monoid/engine"

    @pytest.mark.asyncio
    async def test_resolve_repos_empty_skips_query(self):
        conn = FakeConnection()
        assert await manager_with(conn).resolve_repos([]) == {}
        assert conn.queries == []

    @pytest.mark.asyncio
    async def test_driver_errors_become_store_errors(self):
        conn = FakeConnection(error=asyncpg.InterfaceError("pool is closed"))

        with pytest.raises(DocumentStoreError) as exc_info:
            await manager_with(conn).list_published_documents(ORG_ID)

        assert "list documents" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_invalid_organization_id(self):
        with pytest.raises(DocumentStoreError):
            await manager_with(FakeConnection()).list_published_documents("not-a-uuid")

    @pytest.mark.asyncio
    async def test_uninitialized_pool(self):
        manager = DatabaseManager("postgresql://localhost/test")

        with pytest.raises(DocumentStoreError) as exc_info:
            await manager.get_published_document(ORG_ID, "overview")

        assert "not initialized" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_blob_path(self):
        manager = DatabaseManager("postgresql://localhost/test")
        manager.blobs = AsyncMock()
        manager.blobs.download_text.return_value = "# Body"

        body = await manager.get_document_blob(ORG_ID, "overview")

        assert body == "# Body"
        manager.blobs.download_text.assert_awaited_once_with(f"{ORG_ID}/overview.md")

    @pytest.mark.asyncio
    async def test_health_without_pool(self):
        assert await DatabaseManager("postgresql://localhost/test").is_healthy() is False
