"""Routes ``tools/call`` requests to registry handlers."""

import logging
from typing import Any

from monoid_docs.core.database.base import DocumentStore
from monoid_docs.core.errors import DocumentStoreError
from monoid_docs.mcp_server.registry import ToolRegistry
from monoid_docs.mcp_server.resolvers import OrganizationResolver
from monoid_docs.mcp_server.tools import MAX_SEARCH_RESULTS, ToolContext
from monoid_docs.models.api.mcp import ToolResult

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Invokes tools by name and reports every failure as a tool result.

    Unknown tools, bad arguments, missing organizations and handler
    exceptions all come back as readable text, so a calling model can
    recover without the JSON-RPC request failing.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        store: DocumentStore,
        resolver: OrganizationResolver,
        search_limit: int = MAX_SEARCH_RESULTS,
    ):
        self.registry = registry
        self.store = store
        self.resolver = resolver
        self.search_limit = search_limit

    async def dispatch(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        tool = self.registry.get(name)
        if tool is None:
            logger.warning(f"Unknown tool requested: {name}")
            return ToolResult.error(f"Unknown tool: {name}")

        problems = tool.definition.argument_errors(arguments)
        if problems:
            return ToolResult.error(f"Invalid arguments for {name}: {'; '.join(problems)}")

        try:
            organization = await self.resolver.resolve(arguments)
            if organization is None:
                return ToolResult.from_text(self.resolver.not_found_message(arguments))

            ctx = ToolContext(
                store=self.store,
                organization=organization,
                resolver=self.resolver,
                search_limit=self.search_limit,
            )
            result = await tool.handler(ctx, arguments)
            logger.info(f"Tool {name} completed for organization {organization.slug}")
            return result

        except DocumentStoreError as e:
            logger.error(f"Tool {name} store failure: {e.message}")
            return ToolResult.error(f"Error: {e.message}")

        except Exception as e:
            logger.error(f"Tool execution failed: {e}", exc_info=True)
            return ToolResult.error(f"Error: Tool execution failed - {str(e)}")
