"""Version command - show mcprovider version."""

import click
from ... import __version__


@click.command()
def version():
    """Show mcprovider version."""
    click.echo(f"mcprovider version {__version__}")
