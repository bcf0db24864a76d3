"""Search operations."""

from monoid_docs.core.database.search.manager import SearchManager

__all__ = ["SearchManager"]
