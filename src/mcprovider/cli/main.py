"""Main CLI entry point for mcprovider."""

import click
from .commands.apply import apply
from .commands.destroy import destroy
from .commands.import_resource import import_resource
from .commands.plan import plan
from .commands.render import render
from .commands.schema import schema
from .commands.validate import validate
from .commands.version import version as version_command
from .. import __version__
from ..utils.logging import get_logger

logger = get_logger("cli.main")


@click.group()
@click.version_option(version=__version__, prog_name="mcprovider", message="%(prog)s version %(version)s")
def cli():
    """mcprovider - declarative MediaConvert presets, job templates and queues."""
    pass


cli.add_command(schema)
cli.add_command(validate)
cli.add_command(render)
cli.add_command(plan)
cli.add_command(apply)
cli.add_command(import_resource)
cli.add_command(destroy)
cli.add_command(version_command)
