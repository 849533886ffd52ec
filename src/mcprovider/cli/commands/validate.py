"""Validate command - check a resource document against the catalog."""

import sys
import click
from ...utils.errors import McProviderError
from ...utils.logging import get_logger
from ..utils import format_error, read_document

logger = get_logger("cli.validate")


@click.command()
@click.argument('document', type=click.Path(exists=False))
def validate(document):
    """Validate every resource declared in DOCUMENT."""
    try:
        loaded = read_document(document)
    except FileNotFoundError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except McProviderError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Validation failed: {e}"), err=True)
        sys.exit(1)

    click.echo(f"Valid: {len(loaded.resources)} resource(s)")
    for address in loaded.addresses:
        click.echo(f"  {address}")
