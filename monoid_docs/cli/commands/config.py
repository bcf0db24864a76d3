"""Configuration commands for the Monoid Docs CLI."""

from pathlib import Path

import click

from monoid_docs.cli.config import get_config
from monoid_docs.cli.utils import echo_success, print_settings
from monoid_docs.models.config.server import DEFAULT_CONFIG_PATH


@click.group()
def config():
    """Inspect and write Monoid Docs configuration.

    Examples:
        monoid-docs config show          # Show effective configuration
        monoid-docs config init          # Write defaults to the config file
    """
    pass


@config.command()
def show():
    """Show the effective configuration (secrets masked)."""
    print_settings(get_config().model_dump())


@config.command()
@click.option(
    "--path",
    "config_path",
    type=click.Path(path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Where to write the configuration file",
)
def init(config_path):
    """Write the effective configuration to a YAML file."""
    get_config().save_to_file(config_path)
    echo_success(f"Configuration written to {config_path}")
