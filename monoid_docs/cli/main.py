"""Main CLI entry point for Monoid Docs."""

import click
from rich.console import Console

from .config import get_config, set_config

console = Console()


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.pass_context
def cli(ctx, version):
    """Monoid Docs - MCP server for organization documentation.

    Exposes published documentation as list/fetch/search tools to any
    MCP-compatible client, over HTTP or stdio.

    Examples:
        monoid-docs -v                          # Show version
        monoid-docs serve                       # Start the HTTP server
        monoid-docs stdio --org monoidyc        # Serve one org over stdio
        monoid-docs tools --pinned              # Show the tool catalogue
        monoid-docs config show                 # Show configuration
    """
    if version:
        from . import __version__

        console.print(f"Monoid Docs v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)

    config = get_config()
    ctx.obj["config"] = config
    set_config(config)


def register_commands():
    """Register all command groups."""
    from .commands.config import config
    from .commands.server import serve, stdio, url
    from .commands.tools import tools

    for command in (serve, stdio, url, tools, config):
        cli.add_command(command)


# Register commands when module is imported
register_commands()


if __name__ == "__main__":
    cli()
