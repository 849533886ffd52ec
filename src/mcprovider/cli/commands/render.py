"""Render command - show the MediaConvert request a resource expands to."""

import json
import sys
import click
from ...catalog import apply_defaults
from ...translate import expand_resource
from ...utils.errors import McProviderError
from ...utils.logging import get_logger
from ..utils import format_error, read_document

logger = get_logger("cli.render")


@click.command()
@click.argument('document', type=click.Path(exists=False))
@click.option('--address', '-a', help='Only render this resource (kind.name)')
def render(document, address):
    """Print the SDK create request for each resource in DOCUMENT."""
    try:
        loaded = read_document(document)
        specs = loaded.resources
        if address:
            spec = loaded.get(address)
            if spec is None:
                raise McProviderError(
                    f"No resource '{address}' in {document}. Declared: {', '.join(loaded.addresses)}"
                )
            specs = [spec]
        rendered = {
            spec.address: expand_resource(spec.kind, apply_defaults(spec.kind, spec.config))
            for spec in specs
        }
    except FileNotFoundError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except McProviderError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Render failed: {e}"), err=True)
        sys.exit(1)

    click.echo(json.dumps(rendered, indent=2, sort_keys=True))
