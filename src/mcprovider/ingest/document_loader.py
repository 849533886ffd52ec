"""Load resource documents from YAML or JSON files."""

import json
from pathlib import Path
from typing import Any

import yaml

from .document_validator import normalize_entry, validate_document_structure, validate_resources
from .models import ResourceDocument, ResourceSpec
from ..utils.errors import DocumentLoadError
from ..utils.logging import get_logger

logger = get_logger("ingest.document_loader")


def _parse(path: Path, text: str) -> Any:
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentLoadError(f"Invalid JSON in resource document {path}: {e}")
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"Invalid YAML in resource document {path}: {e}")


def parse_document(data: Any, source: str = None) -> ResourceDocument:
    """
    Build a validated ResourceDocument from already-parsed data.

    Raises:
        DocumentLoadError: If the structure or any resource configuration is invalid
    """
    validate_document_structure(data)
    entries = [normalize_entry(entry) for entry in (data.get("resources") or [])]
    validate_resources(entries)
    return ResourceDocument(resources=[ResourceSpec(**entry) for entry in entries], source=source)


def load_document(document_path: str) -> ResourceDocument:
    """
    Load and validate a resource document.

    Args:
        document_path: Path to a .yaml, .yml or .json file

    Returns:
        ResourceDocument with kinds resolved and block shorthands expanded

    Raises:
        DocumentLoadError: If the file cannot be read or is invalid
    """
    path = Path(document_path)

    if not path.exists():
        raise DocumentLoadError(
            f"Resource document not found: {document_path}. "
            "Please check the file path and ensure the file exists."
        )
    if not path.is_file():
        raise DocumentLoadError(f"Path is not a file: {document_path}.")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(
            f"Error reading resource document: {e}. "
            "Please check file permissions and try again."
        )

    document = parse_document(_parse(path, text), source=str(path))
    logger.info(f"Loaded {len(document.resources)} resource(s) from {document_path}")
    return document
