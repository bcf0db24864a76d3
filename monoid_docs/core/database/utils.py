"""Database utility functions shared by the entity managers."""

import logging
import uuid
from functools import wraps
from typing import Any, Callable, TypeVar

import asyncpg

from monoid_docs.core.errors import DocumentStoreError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

LIKE_ESCAPE = "\\"


def format_uuid(uuid_value) -> str:
    """Consistently format UUID to string.

    Example:
        >>> format_uuid(uuid.UUID("a1b2c3d4-e5f6-7890-abcd-ef1234567890"))
        'a1b2c3d4-e5f6-7890-abcd-ef1234567890'
    """
    return str(uuid_value) if uuid_value is not None else None


def parse_uuid(uuid_str: str) -> uuid.UUID:
    """Consistently parse string to UUID object.

    Raises:
        DocumentStoreError: If the value is not a valid UUID
    """
    try:
        return uuid.UUID(str(uuid_str))
    except ValueError:
        raise DocumentStoreError(f"Invalid identifier: {uuid_str!r}")


def escape_like(value: str) -> str:
    """Escape LIKE/ILIKE pattern metacharacters so ``value`` matches literally.

    Example:
        >>> escape_like("100%_done")
        '100\\\\%\\\\_done'
    """
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(query: str) -> str:
    """Build a substring ILIKE pattern for a raw user query."""
    return f"%{escape_like(query)}%"


def store_operation(operation_name: str) -> Callable[[F], F]:
    """Decorator translating driver failures into DocumentStoreError.

    Usage:
        @store_operation("list documents")
        async def list_published_documents(self, organization_id: str):
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            if self.pool is None:
                raise DocumentStoreError(
                    f"Failed to {operation_name}: database is not initialized"
                )
            try:
                return await func(self, *args, **kwargs)
            except DocumentStoreError:
                raise
            except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
                logger.error(f"Failed to {operation_name}: {e}", exc_info=True)
                raise DocumentStoreError(f"Failed to {operation_name}: {e}")

        return wrapper

    return decorator
