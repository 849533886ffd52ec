"""Plan command - compare a resource document with recorded state."""

import json
import sys
import click
from ...graph.dependency_graph import DependencyGraph
from ...plan import plan_document
from ...state import StateStore
from ...utils.errors import McProviderError
from ...utils.logging import get_logger
from ..utils import format_error, format_plan, read_document

logger = get_logger("cli.plan")


@click.command()
@click.argument('document', type=click.Path(exists=False))
@click.option('--state', 'state_path', type=click.Path(), help='State file (default .mcprovider/state.json)')
@click.option('--json', 'as_json', is_flag=True, help='Output planned changes as JSON')
def plan(document, state_path, as_json):
    """Show what apply would do for DOCUMENT."""
    try:
        loaded = read_document(document)
        graph = DependencyGraph()
        graph.build_from_document(loaded)
        store = StateStore(state_path).load()
        changes = {change.address: change for change in plan_document(loaded, store.as_dict())}
        ordered = [changes[address] for address in graph.apply_order()]
        ordered += [change for address, change in sorted(changes.items()) if address not in graph.graph]
    except FileNotFoundError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except McProviderError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Plan failed: {e}"), err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([change.model_dump() for change in ordered], indent=2))
    else:
        click.echo(format_plan(ordered))
