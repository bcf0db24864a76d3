"""MCP server for Monoid organization documentation.

This package implements the Model Context Protocol JSON-RPC surface:
a protocol engine, an immutable tool registry, a dispatcher that turns
tool failures into readable results, and the documentation tools.
"""

from monoid_docs.mcp_server.config import Config
from monoid_docs.mcp_server.dispatcher import ToolDispatcher
from monoid_docs.mcp_server.engine import ProtocolEngine
from monoid_docs.mcp_server.resolvers import (
    ArgumentOrganizationResolver,
    OrganizationResolver,
    PinnedOrganizationResolver,
)
from monoid_docs.mcp_server.tools import MULTI_TENANT_TOOLS, PINNED_TOOLS

__all__ = [
    "Config",
    "ProtocolEngine",
    "ToolDispatcher",
    "OrganizationResolver",
    "PinnedOrganizationResolver",
    "ArgumentOrganizationResolver",
    "PINNED_TOOLS",
    "MULTI_TENANT_TOOLS",
]
