"""Repository reference lookups."""

from monoid_docs.core.database.utils import format_uuid, parse_uuid, store_operation
from monoid_docs.models.domain.documents import Repository


class RepositoryManager:
    """Manages repository-related database operations."""

    def __init__(self):
        self.pool = None

    @store_operation("resolve repositories")
    async def resolve(self, repo_ids: list[str]) -> dict[str, Repository]:
        """Resolve many repository ids in a single query."""
        unique_ids = list(dict.fromkeys(repo_ids))
        if not unique_ids:
            return {}

        async with self.pool.acquire() as conn:
            rows = await conn.fetch(
                """
                SELECT id, name, owner
                FROM repos
                WHERE id = ANY($1::uuid[])
                """,
                [parse_uuid(repo_id) for repo_id in unique_ids],
            )

        return {
            format_uuid(row["id"]): Repository(
                id=format_uuid(row["id"]), name=row["name"], owner=row["owner"]
            )
            for row in rows
        }
