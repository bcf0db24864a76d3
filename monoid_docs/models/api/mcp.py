"""JSON-RPC envelope and MCP tool models."""

import copy
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

JSONRPC_VERSION = "2.0"

# JSON-RPC ids are echoed verbatim and never generated by the server
RequestId = str | int | float | None


class JSONRPCRequest(BaseModel):
    """Incoming JSON-RPC 2.0 request or notification."""

    model_config = ConfigDict(extra="allow")

    jsonrpc: Literal["2.0"]
    method: str
    id: RequestId = None
    params: dict[str, Any] | list[Any] | None = None


class JSONRPCError(BaseModel):
    """JSON-RPC error object."""

    code: int
    message: str
    data: Any | None = None


class JSONRPCResponse(BaseModel):
    """Outgoing JSON-RPC 2.0 response carrying either a result or an error."""

    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    result: dict[str, Any] | None = None
    error: JSONRPCError | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with exactly one of ``result`` or ``error``."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result if self.result is not None else {}
        return payload


class InitializeParams(BaseModel):
    """Parameters of ``initialize``; informational only."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    protocol_version: str | None = Field(default=None, alias="protocolVersion")
    client_info: dict[str, Any] | None = Field(default=None, alias="clientInfo")
    capabilities: dict[str, Any] | None = None


class CallToolParams(BaseModel):
    """Parameters of ``tools/call``."""

    name: str = Field(..., min_length=1)
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def default_arguments(cls, v):
        return v if v is not None else {}


class ToolDefinition(BaseModel):
    """A named tool with its JSON-Schema input contract."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")

    @property
    def required_arguments(self) -> tuple[str, ...]:
        return tuple(self.input_schema.get("required", ()))

    def argument_errors(self, arguments: dict[str, Any]) -> list[str]:
        """Check ``arguments`` against the required fields of the schema.

        Returns a list of human-readable problems; empty when valid.
        """
        problems = []
        properties = self.input_schema.get("properties", {})
        for field in self.required_arguments:
            value = arguments.get(field)
            if value is None:
                problems.append(f"missing required argument '{field}'")
            elif properties.get(field, {}).get("type") == "string" and not isinstance(
                value, str
            ):
                problems.append(f"argument '{field}' must be a string")
        return problems

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self.model_dump(by_alias=True))


class TextContent(BaseModel):
    """Text content block of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Uniform tool output envelope."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(cls, text: str, is_error: bool = False) -> "ToolResult":
        return cls(content=[TextContent(text=text)], is_error=is_error)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls.from_text(text, is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "content": [block.model_dump() for block in self.content]
        }
        if self.is_error:
            payload["isError"] = True
        return payload


__all__ = [
    "JSONRPC_VERSION",
    "RequestId",
    "JSONRPCRequest",
    "JSONRPCError",
    "JSONRPCResponse",
    "InitializeParams",
    "CallToolParams",
    "ToolDefinition",
    "TextContent",
    "ToolResult",
]
