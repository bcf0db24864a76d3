"""Tool catalogue commands for the Monoid Docs CLI."""

import json

import click

from monoid_docs.cli.utils import print_table
from monoid_docs.mcp_server.tools import MULTI_TENANT_TOOLS, PINNED_TOOLS


@click.command()
@click.option(
    "--pinned",
    is_flag=True,
    help="Show the catalogue of organization-pinned endpoints",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def tools(pinned, output_format):
    """List the tools exposed to MCP clients.

    Examples:
        monoid-docs tools                  # Multi-tenant catalogue
        monoid-docs tools --pinned         # Catalogue for /api/mcp/<org-slug>
        monoid-docs tools --format json    # Exact tools/list payload
    """
    registry = PINNED_TOOLS if pinned else MULTI_TENANT_TOOLS

    if output_format == "json":
        click.echo(json.dumps({"tools": registry.definitions()}, indent=2))
        return

    rows = [
        {
            "name": tool.name,
            "required": ", ".join(tool.definition.required_arguments) or "-",
            "description": tool.definition.description,
        }
        for tool in registry
    ]
    print_table(rows, title="Tools", columns=["name", "required", "description"])
