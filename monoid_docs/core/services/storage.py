"""HTTP client for the document blob storage bucket."""

import logging
from urllib.parse import quote

import httpx

from monoid_docs.core.errors import DocumentStoreError

logger = logging.getLogger(__name__)

# Object storage answers 400 or 404 for a missing object depending on version
MISSING_OBJECT_STATUSES = (400, 404)


class BlobStorageClient:
    """Fetches markdown bodies stored as objects in a storage bucket.

    Objects are downloaded from ``{base_url}/storage/v1/object/{bucket}/{path}``.
    When no ``base_url`` is configured every lookup reports the object as
    absent, so documents fall back to their inline content.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        bucket: str = "docs",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.api_key = api_key
        self.bucket = bucket
        self.timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return self.base_url is not None

    def object_url(self, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/{self.bucket}/{quote(path)}"

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}", "apikey": self.api_key}

    async def download_text(self, path: str) -> str | None:
        """Download an object as UTF-8 text.

        Returns:
            The object body, or None when storage is disabled or the object
            does not exist.

        Raises:
            DocumentStoreError: On transport failures or unexpected statuses.
        """
        if not self.enabled:
            return None

        url = self.object_url(path)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, headers=self._headers())
        except httpx.TimeoutException:
            raise DocumentStoreError(f"Request timeout: {url}")
        except httpx.HTTPError as e:
            raise DocumentStoreError(f"Blob request failed: {e}")

        if response.status_code in MISSING_OBJECT_STATUSES:
            logger.debug(f"No blob stored at {path}")
            return None

        if response.status_code >= 400:
            raise DocumentStoreError(
                f"Blob storage returned HTTP {response.status_code} for {path}",
                status_code=response.status_code,
            )

        return response.content.decode("utf-8", errors="replace")
