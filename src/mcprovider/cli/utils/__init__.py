"""CLI utilities package."""

from typing import Iterable, Optional, Tuple

from ...client.session import ClientFactory
from ...config import ProviderConfig, load_provider_config
from ...ingest.document_loader import load_document
from ...ingest.models import ResourceDocument
from ...plan import PlannedChange
from ...utils.logging import get_logger
from .file_resolver import resolve_file_path

logger = get_logger("cli.utils")

PLAN_SYMBOLS = {
    "CREATE": "+",
    "UPDATE": "~",
    "REPLACE": "-/+",
    "DELETE": "-",
    "NO_OP": "=",
}


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.

    Args:
        message: Error message
        suggestion: Optional suggestion or help text

    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def read_document(document_path: str) -> ResourceDocument:
    """
    Resolve and load a resource document.

    Raises:
        FileNotFoundError: If the path does not name a file
        DocumentLoadError: If the document is invalid
    """
    return load_document(str(resolve_file_path(document_path)))


def build_client_factory(config_path: Optional[str] = None) -> Tuple[ClientFactory, ProviderConfig]:
    """Load provider configuration and the client factory built from it."""
    config = load_provider_config(config_path)
    return ClientFactory(config), config


def format_plan(changes: Iterable[PlannedChange]) -> str:
    """Render planned changes one per line, with the paths behind updates and replacements."""
    lines = []
    counts = {}
    for change in changes:
        counts[change.action] = counts.get(change.action, 0) + 1
        lines.append(f"{PLAN_SYMBOLS[change.action]:>3} {change.address} ({change.action})")
        replace = set(change.replace_paths)
        for path in change.changed_paths:
            marker = " (forces replacement)" if path in replace else ""
            lines.append(f"      {path}{marker}")
    summary = ", ".join(f"{counts.get(action, 0)} to {action.lower().replace('_', '-')}"
                        for action in ("CREATE", "UPDATE", "REPLACE", "DELETE"))
    lines.append(f"Plan: {summary}.")
    return "\n".join(lines)


__all__ = ["build_client_factory", "format_error", "format_plan", "read_document", "resolve_file_path"]
