"""MCP endpoints: multi-tenant and organization-pinned variants."""

import json
import logging
import math
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from monoid_docs.api.error_handlers import (
    handle_transport_errors,
    jsonrpc_error,
    parse_error,
)
from monoid_docs.core.database.base import DocumentStore
from monoid_docs.core.logging import get_logger
from monoid_docs.mcp_server.config import Config
from monoid_docs.mcp_server.dispatcher import ToolDispatcher
from monoid_docs.mcp_server.engine import ProtocolEngine
from monoid_docs.mcp_server.protocol import INVALID_PARAMS
from monoid_docs.mcp_server.registry import ToolRegistry
from monoid_docs.mcp_server.resolvers import (
    ArgumentOrganizationResolver,
    OrganizationResolver,
    PinnedOrganizationResolver,
)
from monoid_docs.mcp_server.tools import MULTI_TENANT_TOOLS, PINNED_TOOLS
from monoid_docs.models.domain.documents import Organization

logger = logging.getLogger(__name__)
request_log = get_logger("monoid_docs.api.requests")
router = APIRouter()

MCP_ENDPOINT = "/api/mcp"
USAGE = "Connect using MCP Inspector or any MCP-compatible client via POST"
PROTOCOL = "MCP JSON-RPC 2.0"


def get_store(request: Request) -> DocumentStore:
    """Dependency to get the document store."""
    return request.app.state.store


def get_mcp_config(request: Request) -> Config:
    """Dependency to get the MCP server identity."""
    return request.app.state.mcp_config


def build_server_descriptor(
    config: Config,
    registry: ToolRegistry,
    endpoint: str,
    organization: Organization | None = None,
) -> dict[str, Any]:
    """Server descriptor returned by GET on an MCP endpoint."""
    subject = organization.name if organization else "Monoid organization"
    descriptor: dict[str, Any] = {
        "name": config.server_name,
        "version": config.server_version,
        "description": f"MCP server for {subject} documentation",
    }
    if organization is not None:
        descriptor["organization"] = {"name": organization.name, "slug": organization.slug}
    descriptor.update(
        tools=registry.names,
        usage=USAGE,
        endpoint=endpoint,
        protocol=PROTOCOL,
    )
    return descriptor


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {token}")
    return value


def parse_body(raw_body: bytes) -> Any:
    """Decode a request body as strict JSON.

    NaN, Infinity and numbers overflowing a float are rejected, since they
    could never be written back in a response.
    """
    return json.loads(
        raw_body, parse_constant=_reject_constant, parse_float=_finite_float
    )


def to_http_response(payload: Any) -> Response:
    """Map an engine result to HTTP; nothing left to send becomes 204."""
    if payload is None or payload == []:
        return Response(status_code=204)
    return JSONResponse(content=payload)


async def run_engine(
    request: Request,
    registry: ToolRegistry,
    resolver: OrganizationResolver,
    store: DocumentStore,
    config: Config,
) -> Response:
    """Parse the body and hand it to a protocol engine for this request."""
    raw_body = await request.body()
    try:
        body = parse_body(raw_body)
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors too
        logger.warning("Rejected MCP request with unparseable body")
        return parse_error()

    engine = ProtocolEngine(
        registry,
        ToolDispatcher(registry, store, resolver, search_limit=config.search_limit),
        config,
    )
    payload = await engine.handle(body)

    log = request_log.bind(server=config.server_name)
    if isinstance(body, list):
        responses = len(payload) if isinstance(payload, list) else 1
        log.info("MCP batch", size=len(body), responses=responses)
    elif isinstance(body, dict):
        log.info("MCP request", method=body.get("method"))

    return to_http_response(payload)


# ===================
# Multi-tenant endpoint: organization passed as a tool argument
# ===================


@router.get("/mcp")
@handle_transport_errors("describe MCP server")
async def describe_server(config: Config = Depends(get_mcp_config)):
    """Return server info."""
    return build_server_descriptor(config, MULTI_TENANT_TOOLS, MCP_ENDPOINT)


@router.post("/mcp")
@handle_transport_errors("handle MCP request")
async def handle_mcp(
    request: Request,
    store: DocumentStore = Depends(get_store),
    config: Config = Depends(get_mcp_config),
):
    """MCP JSON-RPC entry point; tools take an ``org_slug`` argument."""
    return await run_engine(
        request, MULTI_TENANT_TOOLS, ArgumentOrganizationResolver(store), store, config
    )


# ===================
# Organization-pinned endpoint: organization fixed by the URL
# ===================


@router.get("/mcp/{org_slug}")
@handle_transport_errors("describe organization MCP server")
async def describe_org_server(
    org_slug: str,
    store: DocumentStore = Depends(get_store),
    config: Config = Depends(get_mcp_config),
):
    """Return server info for one organization."""
    organization = await store.find_organization_by_slug(org_slug)
    if organization is None:
        return JSONResponse(
            status_code=404, content={"error": f'Organization "{org_slug}" not found'}
        )

    return build_server_descriptor(
        config.for_organization(organization.slug),
        PINNED_TOOLS,
        f"{MCP_ENDPOINT}/{organization.slug}",
        organization,
    )


@router.post("/mcp/{org_slug}")
@handle_transport_errors("handle organization MCP request")
async def handle_org_mcp(
    org_slug: str,
    request: Request,
    store: DocumentStore = Depends(get_store),
    config: Config = Depends(get_mcp_config),
):
    """MCP JSON-RPC entry point scoped to the organization in the path."""
    organization = await store.find_organization_by_slug(org_slug)
    if organization is None:
        return jsonrpc_error(
            INVALID_PARAMS, f'Organization "{org_slug}" not found', status_code=404
        )

    return await run_engine(
        request,
        PINNED_TOOLS,
        PinnedOrganizationResolver(organization),
        store,
        config.for_organization(organization.slug),
    )
