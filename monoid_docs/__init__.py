"""
Monoid Docs: MCP documentation server for published organization docs.

Exposes an organization's published documentation to MCP-compatible
clients as a small set of JSON-RPC callable tools (list, fetch, search).
"""

__version__ = "1.0.0"
