"""stdio MCP server for a single organization's documentation.

Serves the same tool registry and dispatcher as the HTTP endpoint, over the
MCP SDK stdio transport, for desktop clients that launch servers locally.
"""

import asyncio
import logging

import mcp.server.stdio
import mcp.types as types
from mcp.server import Server

from monoid_docs.core.database import DatabaseManager
from monoid_docs.mcp_server.config import Config
from monoid_docs.mcp_server.dispatcher import ToolDispatcher
from monoid_docs.mcp_server.registry import ToolRegistry
from monoid_docs.mcp_server.resolvers import PinnedOrganizationResolver
from monoid_docs.mcp_server.tools import PINNED_TOOLS
from monoid_docs.models.api.mcp import ToolResult
from monoid_docs.models.config import ServerConfig

logger = logging.getLogger(__name__)


class OrganizationNotFoundError(Exception):
    """Raised when the organization to serve does not exist."""


def tool_definitions_to_sdk(registry: ToolRegistry = PINNED_TOOLS) -> list[types.Tool]:
    """Registry definitions as MCP SDK tool models."""
    return [
        types.Tool(
            name=tool.definition.name,
            description=tool.definition.description,
            input_schema=tool.definition.to_dict()["inputSchema"],
        )
        for tool in registry
    ]


def to_sdk_result(result: ToolResult) -> types.CallToolResult:
    """Convert a dispatcher result, keeping the error flag."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        is_error=result.is_error,
    )


def build_server(dispatcher: ToolDispatcher, config: Config | None = None) -> Server:
    """Create an SDK server whose tool handlers delegate to ``dispatcher``."""
    config = config or Config()

    async def handle_list_tools(ctx, params) -> types.ListToolsResult:
        """List available MCP tools."""
        return types.ListToolsResult(tools=tool_definitions_to_sdk(dispatcher.registry))

    async def handle_call_tool(
        ctx, params: types.CallToolRequestParams
    ) -> types.CallToolResult:
        """Handle MCP tool calls."""
        result = await dispatcher.dispatch(params.name, params.arguments or {})
        return to_sdk_result(result)

    return Server(
        config.server_name,
        version=config.server_version,
        on_list_tools=handle_list_tools,
        on_call_tool=handle_call_tool,
    )


async def main(org_slug: str, server_config: ServerConfig | None = None):
    """Serve ``org_slug`` documentation over stdio until the client disconnects."""
    server_config = server_config or ServerConfig.load_from_file()
    config = Config.from_server_config(server_config).for_organization(org_slug)

    db = DatabaseManager.from_config(server_config)
    await db.initialize()

    try:
        organization = await db.find_organization_by_slug(org_slug)
        if organization is None:
            raise OrganizationNotFoundError(f'Organization "{org_slug}" not found')

        logger.info(f"Starting stdio MCP server for {organization.name}")

        dispatcher = ToolDispatcher(
            PINNED_TOOLS,
            db,
            PinnedOrganizationResolver(organization),
            search_limit=config.search_limit,
        )
        server = build_server(dispatcher, config)

        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )
    finally:
        await db.close()


def run(org_slug: str, server_config: ServerConfig | None = None):
    """Synchronous entry point used by the CLI."""
    asyncio.run(main(org_slug, server_config))
