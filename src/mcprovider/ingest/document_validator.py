"""Validate resource document structure and resource configurations."""

from typing import Any, Dict, List

from ..catalog import KINDS, check, coerce, describe
from ..utils.errors import DocumentLoadError, ValidationError
from ..utils.logging import get_logger

logger = get_logger("ingest.document_validator")


def validate_document_structure(data: Any) -> None:
    """
    Validate the top-level shape of a resource document.

    Raises:
        DocumentLoadError: If the document is not ``{resources: [{kind, config}, ...]}``
    """
    if not isinstance(data, dict):
        raise DocumentLoadError(
            "Resource document must be a mapping with a 'resources' list. "
            "Example: resources: [{kind: preset, config: {name: my-preset, settings: {...}}}]"
        )
    unknown = sorted(set(data) - {"resources"})
    if unknown:
        raise DocumentLoadError(f"Unknown top-level keys in resource document: {', '.join(unknown)}")
    resources = data.get("resources")
    if resources is None:
        logger.warning("Resource document has no 'resources' key, treating it as empty")
        return
    if not isinstance(resources, list):
        raise DocumentLoadError("'resources' must be a list")
    for i, entry in enumerate(resources):
        if not isinstance(entry, dict):
            raise DocumentLoadError(f"resources[{i}] must be a mapping with 'kind' and 'config'")
        missing = [key for key in ("kind", "config") if key not in entry]
        if missing:
            raise DocumentLoadError(f"resources[{i}] missing required fields: {', '.join(missing)}")
        extra = sorted(set(entry) - {"kind", "config"})
        if extra:
            raise DocumentLoadError(f"resources[{i}] has unknown fields: {', '.join(extra)}")
        if not isinstance(entry["config"], dict):
            raise DocumentLoadError(f"resources[{i}].config must be a mapping")
        try:
            describe(entry["kind"])
        except ValidationError:
            raise DocumentLoadError(
                f"resources[{i}] has unknown kind '{entry['kind']}'. Supported kinds: {', '.join(KINDS)}"
            )


def normalize_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """Resolve kind aliases and accept single mappings in place of one-element block lists."""
    schema = describe(entry["kind"])
    return {"kind": schema.kind, "config": coerce(schema, entry["config"])}


def validate_resources(entries: List[Dict[str, Any]]) -> None:
    """
    Check every resource configuration against the catalog and reject duplicate addresses.

    Raises:
        DocumentLoadError: Listing every problem found, prefixed with the resource address
    """
    problems = []
    seen = set()
    for i, entry in enumerate(entries):
        name = entry["config"].get("name") or ""
        address = f"{entry['kind']}.{name}" if name else f"resources[{i}]"
        if name and address in seen:
            problems.append(f"{address}: declared more than once")
        seen.add(address)
        for error in check(entry["kind"], entry["config"]):
            problems.append(f"{address}: {error}")
    if problems:
        raise DocumentLoadError("Invalid resource document:\n  " + "\n  ".join(problems))
