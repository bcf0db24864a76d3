"""Unit tests for blob storage and query helpers."""

import httpx
import pytest

from monoid_docs.core.database.utils import contains_pattern, escape_like, parse_uuid
from monoid_docs.core.errors import DocumentStoreError
from monoid_docs.core.services.storage import BlobStorageClient


def client_for(handler, **kwargs) -> BlobStorageClient:
    return BlobStorageClient(
        "https://storage.example.com/",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestBlobStorageClient:
    """Test object downloads."""

    def test_object_url(self):
        client = BlobStorageClient("https://storage.example.com/", bucket="docs")
        assert client.object_url("org-1/getting started.md") == (
            "https://storage.example.com/storage/v1/object/docs/org-1/getting%20started.md"
        )

    @pytest.mark.asyncio
    async def test_download_text(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, content="# Stored body".encode("utf-8"))

        client = client_for(handler, api_key="secret")
        body = await client.download_text("org-1/overview.md")

        assert body == "# Stored body"
        assert seen[0].url.path == "/storage/v1/object/docs/org-1/overview.md"
        assert seen[0].headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404])
    async def test_missing_object_is_none(self, status):
        client = client_for(lambda request: httpx.Response(status))
        assert await client.download_text("org-1/missing.md") is None

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        client = client_for(lambda request: httpx.Response(500))

        with pytest.raises(DocumentStoreError) as exc_info:
            await client.download_text("org-1/overview.md")

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(DocumentStoreError):
            await client_for(handler).download_text("org-1/overview.md")

    @pytest.mark.asyncio
    async def test_disabled_without_url(self):
        client = BlobStorageClient(None)
        assert not client.enabled
        assert await client.download_text("org-1/overview.md") is None


class TestQueryHelpers:
    """Test LIKE pattern construction."""

    def test_escape_like_metacharacters(self):
        assert escape_like("100%_done") == "100\\%\\_done"
        assert escape_like("a\\b") == "a\\\\b"

    def test_plain_text_unchanged(self):
        assert escape_like("getting started") == "getting started"

    def test_contains_pattern(self):
        assert contains_pattern("50%") == "%50\\%%"
        assert contains_pattern("") == "%%"

    def test_parse_uuid_rejects_garbage(self):
        with pytest.raises(DocumentStoreError):
            parse_uuid("not-a-uuid")
