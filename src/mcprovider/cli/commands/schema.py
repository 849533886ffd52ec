"""Schema command - describe the catalog for one resource kind."""

import json
import sys
import click
from ...catalog import describe
from ...catalog.nodes import Attribute, Block, Collection
from ...utils.errors import McProviderError
from ..utils import format_error


def _describe_node(node) -> str:
    flags = [name for name in ("required", "computed", "force_new") if getattr(node, name)]
    parts = [node.kind.value]
    if isinstance(node, Attribute) and node.enum:
        parts.append(f"enum {node.enum}")
    if isinstance(node, Collection):
        parts.append(f"of {node.element.value}")
    if isinstance(node, Block):
        parts.append(f"-> {node.sdk_type} ({node.shape})")
    if node.default is not None:
        parts.append(f"default {node.default}")
    return " ".join(parts + [f"[{', '.join(flags)}]" if flags else ""]).rstrip()


@click.command()
@click.argument('kind')
@click.option('--json', 'as_json', is_flag=True, help='Output the catalog as JSON')
def schema(kind, as_json):
    """Show the attributes accepted for a resource KIND (preset, job_template, queue)."""
    try:
        resource_schema = describe(kind)
    except McProviderError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(resource_schema.to_dict(), indent=2))
        return

    click.echo(f"{resource_schema.kind} ({resource_schema.sdk_type})")
    for path, node in resource_schema.root.walk():
        indent = "  " * (path.count(".") + 1)
        click.echo(f"{indent}{node.key}: {_describe_node(node)}")
