"""Error handling for the MCP HTTP transport."""

import logging
from functools import wraps
from typing import Any, Callable, TypeVar

from fastapi import HTTPException
from fastapi.responses import JSONResponse

from monoid_docs.mcp_server.protocol import (
    INTERNAL_ERROR,
    PARSE_ERROR,
    error_response,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def jsonrpc_error(code: int, message: str | None = None, status_code: int = 400) -> JSONResponse:
    """HTTP response carrying a JSON-RPC error with a null id."""
    return JSONResponse(status_code=status_code, content=error_response(None, code, message))


def parse_error() -> JSONResponse:
    return jsonrpc_error(PARSE_ERROR, status_code=400)


def handle_transport_errors(operation_name: str) -> Callable[[F], F]:
    """Decorator converting unexpected endpoint failures into JSON-RPC errors.

    Args:
        operation_name: Name of the operation for logging (e.g., "handle MCP request")

    Usage:
        @router.post("/mcp")
        @handle_transport_errors("handle MCP request")
        async def handle_mcp(request: Request):
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                logger.error(f"Failed to {operation_name}: {e}", exc_info=True)
                return jsonrpc_error(INTERNAL_ERROR, status_code=500)

        return wrapper

    return decorator
