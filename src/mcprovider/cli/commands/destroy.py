"""Destroy command - delete every managed resource declared in a document."""

import sys
import click
from ...client.context import OperationContext
from ...graph.dependency_graph import DependencyGraph
from ...resources import controller_for
from ...state import StateStore
from ...utils.errors import McProviderError
from ...utils.logging import get_logger
from ..utils import build_client_factory, format_error, read_document

logger = get_logger("cli.destroy")


@click.command()
@click.argument('document', type=click.Path(exists=False))
@click.option('--state', 'state_path', type=click.Path(), help='State file (default .mcprovider/state.json)')
@click.option('--config', 'config_path', type=click.Path(), help='Provider config file')
@click.option('--timeout', type=float, help='Seconds allowed per resource operation')
def destroy(document, state_path, config_path, timeout):
    """Delete the resources of DOCUMENT, dependents first."""
    deleted = 0
    try:
        loaded = read_document(document)
        graph = DependencyGraph()
        graph.build_from_document(loaded)
        store = StateStore(state_path).load()
        targets = [address for address in graph.destroy_order() if address in store]
        if not targets:
            click.echo("Nothing to destroy.")
            return
        factory, provider = build_client_factory(config_path)
        for address in targets:
            prior = store.get(address)
            controller = controller_for(prior.kind, factory, provider.retry)
            context = OperationContext(timeout if timeout is not None else provider.operation_timeout)
            controller.delete(prior, context)
            store.remove(address)
            store.save()
            deleted += 1
            click.echo(f"{address}: deleted")
    except FileNotFoundError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except McProviderError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Destroy failed: {e}"), err=True)
        sys.exit(1)

    click.echo(f"Destroy complete: {deleted} resource(s) deleted.")
