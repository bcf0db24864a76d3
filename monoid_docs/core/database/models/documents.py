"""Published document queries."""

from monoid_docs.core.database.utils import format_uuid, parse_uuid, store_operation
from monoid_docs.models.domain.documents import Document

# Columns shared by every document query; content is only loaded when needed
DOCUMENT_COLUMNS = (
    "id, organization_id, slug, title, description, is_published, "
    "order_index, repo_id, created_at"
)

# Explicit order key first, newest first within the same key
DOCUMENT_ORDER = "ORDER BY order_index ASC, created_at DESC"


def row_to_document(row) -> Document:
    """Build a Document from an asyncpg record."""
    return Document(
        id=format_uuid(row["id"]),
        organization_id=format_uuid(row["organization_id"]),
        slug=row["slug"],
        title=row["title"],
        description=row["description"],
        content=row.get("content"),
        is_published=row["is_published"],
        order_index=row["order_index"] or 0,
        repo_id=format_uuid(row["repo_id"]),
        created_at=row["created_at"],
    )


class DocumentManager:
    """Manages read-only document database operations."""

    def __init__(self):
        self.pool = None

    @store_operation("list documents")
    async def list_published(self, organization_id: str) -> list[Document]:
        """All published documents of an organization, in display order."""
        async with self.pool.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {DOCUMENT_COLUMNS}
                FROM org_docs
                WHERE organization_id = $1
                    AND is_published = true
                {DOCUMENT_ORDER}
                """,
                parse_uuid(organization_id),
            )

        return [row_to_document(row) for row in rows]

    @store_operation("get document")
    async def get_published(self, organization_id: str, slug: str) -> Document | None:
        """A single published document by slug, with its inline content."""
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(
                f"""
                SELECT {DOCUMENT_COLUMNS}, content
                FROM org_docs
                WHERE organization_id = $1
                    AND slug = $2
                    AND is_published = true
                """,
                parse_uuid(organization_id),
                slug,
            )

        return row_to_document(row) if row is not None else None
