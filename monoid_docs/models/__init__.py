"""Centralized model definitions for Monoid Docs.

This package contains all Pydantic models organized by domain:
- api/: JSON-RPC envelope, tool and system response models
- domain/: Organization, document and repository models
- config/: Configuration models
"""

from monoid_docs.models.api.mcp import *
from monoid_docs.models.api.system import *
from monoid_docs.models.config.server import *
from monoid_docs.models.domain.documents import *

__all__ = [
    # API models
    "JSONRPCRequest",
    "JSONRPCError",
    "JSONRPCResponse",
    "InitializeParams",
    "CallToolParams",
    "ToolDefinition",
    "TextContent",
    "ToolResult",
    "HealthResponse",
    # Domain models
    "Organization",
    "Repository",
    "Document",
    # Config models
    "ServerConfig",
]
