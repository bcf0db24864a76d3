"""Database model operations - read queries organized by entity."""

from monoid_docs.core.database.models.documents import DocumentManager
from monoid_docs.core.database.models.organizations import OrganizationManager
from monoid_docs.core.database.models.repos import RepositoryManager

__all__ = ["OrganizationManager", "DocumentManager", "RepositoryManager"]
