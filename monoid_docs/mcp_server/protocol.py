"""JSON-RPC 2.0 error codes and response builders."""

from typing import Any

from monoid_docs.models.api.mcp import JSONRPCError, JSONRPCResponse, RequestId

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

ERROR_MESSAGES = {
    PARSE_ERROR: "Parse error",
    INVALID_REQUEST: "Invalid Request",
    METHOD_NOT_FOUND: "Method not found",
    INVALID_PARAMS: "Invalid params",
    INTERNAL_ERROR: "Internal error",
}


class ProtocolError(Exception):
    """A JSON-RPC protocol-level failure for a single request."""

    def __init__(self, code: int, message: str | None = None):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "Server error")
        super().__init__(self.message)


def success_response(request_id: RequestId, result: dict[str, Any]) -> dict[str, Any]:
    return JSONRPCResponse(id=request_id, result=result).to_dict()


def error_response(
    request_id: RequestId, code: int, message: str | None = None
) -> dict[str, Any]:
    error = JSONRPCError(code=code, message=message or ERROR_MESSAGES[code])
    return JSONRPCResponse(id=request_id, error=error).to_dict()
