"""Monoid Docs core module.

- database/: read-only PostgreSQL access to organizations, documents, repos
- services/: external integrations (blob storage)
- logging.py: structured logging setup
"""

from monoid_docs.core.database import DatabaseManager, DocumentStore
from monoid_docs.core.errors import DocumentStoreError
from monoid_docs.core.services import BlobStorageClient

__all__ = [
    "DatabaseManager",
    "DocumentStore",
    "DocumentStoreError",
    "BlobStorageClient",
]
