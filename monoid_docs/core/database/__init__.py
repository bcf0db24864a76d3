"""Database access for Monoid Docs.

- connection.py: Connection management, health checks, store facade
- base.py: DocumentStore interface consumed by the MCP tools
- models/: Entity queries (organizations, documents, repos)
- search/: Substring search over published documents
"""

from monoid_docs.core.database.base import DocumentStore
from monoid_docs.core.database.connection import DatabaseManager

__all__ = ["DatabaseManager", "DocumentStore"]
