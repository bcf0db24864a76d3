"""Command-line interface for Monoid Docs."""

from monoid_docs import __version__

__all__ = ["__version__"]
