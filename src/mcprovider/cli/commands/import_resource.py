"""Import command - adopt an existing MediaConvert resource into state."""

import sys
import click
from ...catalog import describe
from ...client.context import OperationContext
from ...resources import controller_for
from ...state import StateStore
from ...utils.errors import McProviderError, NotFoundError
from ...utils.logging import get_logger
from ..utils import build_client_factory, format_error

logger = get_logger("cli.import")


@click.command(name="import")
@click.argument('kind')
@click.argument('name')
@click.option('--state', 'state_path', type=click.Path(), help='State file (default .mcprovider/state.json)')
@click.option('--config', 'config_path', type=click.Path(), help='Provider config file')
def import_resource(kind, name, state_path, config_path):
    """Import the existing resource NAME of KIND into state."""
    try:
        schema = describe(kind)
        address = f"{schema.kind}.{name}"
        store = StateStore(state_path).load()
        if address in store:
            raise McProviderError(f"{address} is already managed in {store.path}")
        factory, provider = build_client_factory(config_path)
        controller = controller_for(schema.kind, factory, provider.retry)
        state = controller.import_resource(name, OperationContext(provider.operation_timeout))
        store.put(address, state)
        store.save()
    except NotFoundError as e:
        click.echo(format_error(str(e), f"Check the name and region of the {kind} you are importing."), err=True)
        sys.exit(1)
    except McProviderError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Import failed: {e}"), err=True)
        sys.exit(1)

    click.echo(f"Imported {address}")
