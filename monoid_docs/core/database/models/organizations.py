"""Organization lookups."""

from monoid_docs.core.database.utils import format_uuid, store_operation
from monoid_docs.models.domain.documents import Organization


class OrganizationManager:
    """Manages organization-related database operations."""

    def __init__(self):
        self.pool = None

    @store_operation("find organization")
    async def find_by_slug(self, slug: str) -> Organization | None:
        """Resolve an organization by its unique slug."""
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(
                """
                SELECT id, name, slug
                FROM organizations
                WHERE slug = $1
                """,
                slug,
            )

        if row is None:
            return None

        return Organization(id=format_uuid(row["id"]), name=row["name"], slug=row["slug"])
