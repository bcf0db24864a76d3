"""Organization resolution strategies for the two deployment variants."""

from abc import ABC, abstractmethod
from typing import Any

from monoid_docs.core.database.base import DocumentStore
from monoid_docs.models.domain.documents import Organization

ORG_SLUG_ARGUMENT = "org_slug"


class OrganizationResolver(ABC):
    """Decides which organization a tool call targets."""

    #: Whether the organization is fixed for the whole endpoint
    pinned: bool = False

    @abstractmethod
    async def resolve(self, arguments: dict[str, Any]) -> Organization | None:
        """Return the target organization, or None when it does not exist."""

    @abstractmethod
    def not_found_message(self, arguments: dict[str, Any]) -> str:
        """Readable explanation returned when ``resolve`` finds nothing."""

    @abstractmethod
    def get_doc_hint(self, organization: Organization) -> str:
        """Argument phrasing used when pointing the caller at ``get_doc``."""


class PinnedOrganizationResolver(OrganizationResolver):
    """Organization fixed by the endpoint, e.g. a URL path segment."""

    pinned = True

    def __init__(self, organization: Organization):
        self.organization = organization

    async def resolve(self, arguments: dict[str, Any]) -> Organization | None:
        return self.organization

    def not_found_message(self, arguments: dict[str, Any]) -> str:
        return f'Organization "{self.organization.slug}" not found'

    def get_doc_hint(self, organization: Organization) -> str:
        return "the doc slug"


class ArgumentOrganizationResolver(OrganizationResolver):
    """Organization named by the ``org_slug`` argument of each tool call."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def resolve(self, arguments: dict[str, Any]) -> Organization | None:
        slug = arguments.get(ORG_SLUG_ARGUMENT)
        if not isinstance(slug, str) or not slug:
            return None
        return await self.store.find_organization_by_slug(slug)

    def not_found_message(self, arguments: dict[str, Any]) -> str:
        return f'Organization "{arguments.get(ORG_SLUG_ARGUMENT)}" not found'

    def get_doc_hint(self, organization: Organization) -> str:
        return f'{ORG_SLUG_ARGUMENT}="{organization.slug}" and the doc slug'
