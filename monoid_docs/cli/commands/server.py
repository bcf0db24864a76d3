"""Server commands for the Monoid Docs CLI."""

import click

from monoid_docs.cli.config import get_config, get_mcp_url
from monoid_docs.cli.utils import echo_info
from monoid_docs.core.logging import setup_logging


@click.command()
@click.option("--host", help="Interface to bind (defaults to configured host)")
@click.option("--port", type=int, help="Port to bind (defaults to configured port)")
@click.option("--reload", is_flag=True, help="Reload on code changes (development)")
def serve(host, port, reload):
    """Run the HTTP MCP server.

    Serves the multi-tenant endpoint at /api/mcp and organization-pinned
    endpoints at /api/mcp/<org-slug>.

    Examples:
        monoid-docs serve                       # Use configured host/port
        monoid-docs serve --port 9000           # Override the port
    """
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port

    setup_logging(config.log_level, config.log_file)
    echo_info(f"MCP endpoint: http://{host}:{port}/api/mcp")

    uvicorn.run(
        "monoid_docs.api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=config.log_level.lower(),
    )


@click.command()
@click.option("--org", "org_slug", required=True, help="Organization slug to serve")
def stdio(org_slug):
    """Run an MCP server over stdio for one organization.

    Intended to be launched by desktop MCP clients. Logs go to stderr.

    Examples:
        monoid-docs stdio --org monoidyc
    """
    from monoid_docs.mcp_server.main import OrganizationNotFoundError, run

    config = get_config()
    setup_logging(config.log_level, config.log_file)

    try:
        run(org_slug, config)
    except OrganizationNotFoundError as e:
        # stdout belongs to the protocol stream
        click.echo(str(e), err=True)
        raise SystemExit(1)


@click.command()
@click.option("--org", "org_slug", help="Print the endpoint pinned to this organization")
def url(org_slug):
    """Print the MCP endpoint URL for client configuration."""
    click.echo(get_mcp_url(org_slug))
