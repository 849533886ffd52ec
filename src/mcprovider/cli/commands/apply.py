"""Apply command - create, update, replace and delete resources to match a document."""

import sys
import click
from ...client.context import OperationContext
from ...graph.dependency_graph import DependencyGraph
from ...plan import PlanAction, plan_document
from ...resources import ResourceData, controller_for
from ...state import StateStore
from ...utils.errors import McProviderError
from ...utils.logging import get_logger
from ..utils import build_client_factory, format_error, format_plan, read_document

logger = get_logger("cli.apply")


def _apply_change(change, spec, store, factory, provider, timeout):
    kind = spec.kind if spec is not None else store.get(change.address).kind
    controller = controller_for(kind, factory, provider.retry)
    context = OperationContext(timeout if timeout is not None else provider.operation_timeout)
    prior = store.get(change.address)

    if change.action == PlanAction.CREATE:
        state = controller.create(ResourceData(kind=kind, attributes=spec.config), context)
    elif change.action == PlanAction.UPDATE:
        state = controller.update(prior, spec.config, context)
    elif change.action == PlanAction.REPLACE:
        controller.delete(prior, context)
        store.remove(change.address)
        store.save()
        state = controller.create(ResourceData(kind=kind, attributes=spec.config), context)
    elif change.action == PlanAction.DELETE:
        state = controller.delete(prior, context)
    else:
        return
    store.put(change.address, state)
    store.save()
    click.echo(f"{change.address}: {change.action.lower()} complete")


@click.command()
@click.argument('document', type=click.Path(exists=False))
@click.option('--state', 'state_path', type=click.Path(), help='State file (default .mcprovider/state.json)')
@click.option('--config', 'config_path', type=click.Path(), help='Provider config file')
@click.option('--timeout', type=float, help='Seconds allowed per resource operation')
def apply(document, state_path, config_path, timeout):
    """Apply DOCUMENT: dependencies first, removed resources last."""
    try:
        loaded = read_document(document)
        graph = DependencyGraph()
        graph.build_from_document(loaded)
        store = StateStore(state_path).load()
        changes = {change.address: change for change in plan_document(loaded, store.as_dict())}
        ordered = [changes[address] for address in graph.apply_order()]
        # Job templates go before the queues and presets they may reference.
        removed = sorted(
            (change for address, change in changes.items() if address not in graph.graph),
            key=lambda change: (change.kind != "job_template", change.address),
        )
        pending = [change for change in ordered + removed if change.action != PlanAction.NO_OP]
        click.echo(format_plan(ordered + removed))
        if not pending:
            click.echo("No changes.")
            return
        factory, provider = build_client_factory(config_path)
        for change in pending:
            _apply_change(change, loaded.get(change.address), store, factory, provider, timeout)
    except FileNotFoundError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except McProviderError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Apply failed: {e}"), err=True)
        sys.exit(1)

    click.echo(f"Apply complete: {len(pending)} change(s).")
