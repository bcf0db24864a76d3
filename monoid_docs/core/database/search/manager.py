"""Search operations manager."""

from monoid_docs.core.database.models.documents import (
    DOCUMENT_COLUMNS,
    DOCUMENT_ORDER,
    row_to_document,
)
from monoid_docs.core.database.utils import (
    LIKE_ESCAPE,
    contains_pattern,
    parse_uuid,
    store_operation,
)
from monoid_docs.models.domain.documents import Document

MAX_SEARCH_RESULTS = 10


class SearchManager:
    """Manages substring search over published documents."""

    def __init__(self):
        self.pool = None

    @store_operation("search documents")
    async def search_published(
        self, organization_id: str, query: str, limit: int = MAX_SEARCH_RESULTS
    ) -> list[Document]:
        """Case-insensitive substring match over title, content and description.

        The query is escaped and bound as a parameter, so pattern
        metacharacters in user input match literally.
        """
        limit = max(1, min(limit, MAX_SEARCH_RESULTS))

        async with self.pool.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {DOCUMENT_COLUMNS}, content
                FROM org_docs
                WHERE organization_id = $1
                    AND is_published = true
                    AND (
                        title ILIKE $2 ESCAPE '{LIKE_ESCAPE}'
                        OR content ILIKE $2 ESCAPE '{LIKE_ESCAPE}'
                        OR description ILIKE $2 ESCAPE '{LIKE_ESCAPE}'
                    )
                {DOCUMENT_ORDER}
                LIMIT $3
                """,
                parse_uuid(organization_id),
                contains_pattern(query),
                limit,
            )

        return [row_to_document(row) for row in rows]
