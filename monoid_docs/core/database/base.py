"""Read-only document store interface consumed by the MCP tools."""

from typing import Protocol, runtime_checkable

from monoid_docs.models.domain.documents import Document, Organization, Repository


@runtime_checkable
class DocumentStore(Protocol):
    """Narrow query surface the tool handlers depend on.

    Every method is a single-shot operation that raises
    ``DocumentStoreError`` on failure and never mutates data.
    """

    async def find_organization_by_slug(self, slug: str) -> Organization | None: ...

    async def list_published_documents(self, organization_id: str) -> list[Document]: ...

    async def get_published_document(
        self, organization_id: str, slug: str
    ) -> Document | None: ...

    async def get_document_blob(self, organization_id: str, slug: str) -> str | None: ...

    async def search_published_documents(
        self, organization_id: str, query: str, limit: int = 10
    ) -> list[Document]: ...

    async def resolve_repos(self, repo_ids: list[str]) -> dict[str, Repository]: ...
