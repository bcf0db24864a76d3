"""JSON-RPC 2.0 protocol engine for the MCP documentation server.

Routes:
  initialize                 → protocol version, capabilities, server info
  notifications/initialized  → notification (no response)
  tools/list                 → registry catalogue
  tools/call                 → dispatcher
  ping                       → empty result

A request body is either a single request object or a batch array. Batch
elements are handled concurrently and independently; notifications are
dropped from the output, so a batch response can be shorter than the
request or empty.
"""

import asyncio
import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from monoid_docs.mcp_server.config import Config
from monoid_docs.mcp_server.dispatcher import ToolDispatcher
from monoid_docs.mcp_server.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    ProtocolError,
    error_response,
    success_response,
)
from monoid_docs.mcp_server.registry import ToolRegistry
from monoid_docs.models.api.mcp import (
    JSONRPC_VERSION,
    CallToolParams,
    InitializeParams,
    JSONRPCRequest,
)

logger = logging.getLogger(__name__)

NOTIFICATION_PREFIX = "notifications/"

# params are narrowed to a model per method right after routing
PARAMS_MODELS: dict[str, type[BaseModel]] = {
    "initialize": InitializeParams,
    "tools/call": CallToolParams,
}

Response = dict[str, Any]


def _echo_id(message: dict[str, Any]) -> Any:
    """The request id when it is a legal JSON-RPC id, else None."""
    request_id = message.get("id")
    if isinstance(request_id, bool) or not isinstance(
        request_id, (str, int, float, type(None))
    ):
        return None
    return request_id


def parse_params(method: str, raw_params: Any) -> BaseModel | None:
    """Validate ``params`` against the model registered for ``method``."""
    model = PARAMS_MODELS.get(method)
    if model is None:
        return None
    if raw_params is None:
        raw_params = {}
    if not isinstance(raw_params, dict):
        raise ProtocolError(INVALID_PARAMS, f"Invalid params for {method}: expected an object")
    try:
        return model.model_validate(raw_params)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'params'}: {err['msg']}"
            for err in e.errors()
        )
        raise ProtocolError(INVALID_PARAMS, f"Invalid params for {method}: {details}")


class ProtocolEngine:
    """Validates JSON-RPC envelopes and routes them to handlers.

    The engine never raises for a malformed or failing request; every
    problem is turned into a JSON-RPC error object for that request alone.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        dispatcher: ToolDispatcher,
        config: Config | None = None,
    ):
        self.registry = registry
        self.dispatcher = dispatcher
        self.config = config or Config()
        self._routes = {
            "initialize": self._handle_initialize,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
            "ping": self._handle_ping,
        }

    async def handle(self, body: Any) -> Response | list[Response] | None:
        """Handle a parsed request body.

        Returns:
            A response object, a list of responses for a batch (possibly
            empty), or None when a single notification needs no response.
        """
        if isinstance(body, list):
            return await self.handle_batch(body)
        return await self.handle_message(body)

    async def handle_batch(self, messages: list[Any]) -> Response | list[Response]:
        if not messages:
            return error_response(None, INVALID_REQUEST)

        results = await asyncio.gather(
            *(self.handle_message(message) for message in messages)
        )
        responses = [result for result in results if result is not None]
        logger.debug(
            f"Batch of {len(messages)} produced {len(responses)} response(s)"
        )
        return responses

    async def handle_message(self, message: Any) -> Response | None:
        """Handle one request object; None means no response is sent."""
        if not isinstance(message, dict):
            return error_response(None, INVALID_REQUEST)

        request_id = _echo_id(message)

        if message.get("jsonrpc") != JSONRPC_VERSION:
            return error_response(request_id, INVALID_REQUEST)

        try:
            request = JSONRPCRequest.model_validate(message)
        except ValidationError:
            return error_response(request_id, INVALID_REQUEST)

        try:
            result = await self.route(request)
        except ProtocolError as e:
            if self._is_notification(request):
                return None
            return error_response(request_id, e.code, e.message)
        except Exception as e:
            logger.error(f"Unhandled error routing {request.method}: {e}", exc_info=True)
            if self._is_notification(request):
                return None
            return error_response(request_id, INTERNAL_ERROR)

        if result is None:
            return None
        return success_response(request_id, result)

    async def route(self, request: JSONRPCRequest) -> dict[str, Any] | None:
        """Run the handler for ``request.method``.

        Returns the result payload, or None for notifications.
        """
        if self._is_notification(request):
            logger.debug(f"Notification received: {request.method}")
            return None

        handler = self._routes.get(request.method)
        if handler is None:
            raise ProtocolError(METHOD_NOT_FOUND, f"Method not found: {request.method}")

        params = parse_params(request.method, request.params)
        return await handler(params)

    @staticmethod
    def _is_notification(request: JSONRPCRequest) -> bool:
        return request.method.startswith(NOTIFICATION_PREFIX)

    # ── handlers ─────────────────────────────────────────────────

    async def _handle_initialize(self, params: InitializeParams) -> dict[str, Any]:
        client = (params.client_info or {}).get("name", "?")
        logger.info(
            f"Client initialize: {client} protocol={params.protocol_version or '?'}"
        )
        return {
            "protocolVersion": self.config.protocol_version,
            "capabilities": {"tools": {}},
            "serverInfo": self.config.server_info,
        }

    async def _handle_tools_list(self, params: None) -> dict[str, Any]:
        return {"tools": self.registry.definitions()}

    async def _handle_tools_call(self, params: CallToolParams) -> dict[str, Any]:
        result = await self.dispatcher.dispatch(params.name, params.arguments)
        return result.to_dict()

    async def _handle_ping(self, params: None) -> dict[str, Any]:
        return {}
