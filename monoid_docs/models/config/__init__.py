"""Configuration models for Monoid Docs."""

from monoid_docs.models.config.server import *

__all__ = ["ServerConfig"]
