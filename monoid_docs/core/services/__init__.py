"""External service integrations."""

from monoid_docs.core.services.storage import BlobStorageClient

__all__ = ["BlobStorageClient"]
