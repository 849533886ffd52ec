"""Lookup of resource descriptors by kind or alias."""

from typing import Dict, Union

from . import job_template, preset, queue
from .nodes import Block, ResourceSchema
from ..utils.errors import ValidationError

SCHEMAS: Dict[str, ResourceSchema] = {
    "preset": preset.build(),
    "job_template": job_template.build(),
    "queue": queue.build(),
}

KINDS = tuple(SCHEMAS)

_ALIASES: Dict[str, str] = {
    alias: schema.kind for schema in SCHEMAS.values() for alias in schema.aliases
}


def describe(kind: Union[str, ResourceSchema]) -> ResourceSchema:
    """
    Return the descriptor for a resource kind.

    Args:
        kind: Kind name (``preset``), alias (``aws_media_convert_preset``) or a descriptor

    Returns:
        ResourceSchema for the kind

    Raises:
        ValidationError: If the kind is unknown
    """
    if isinstance(kind, ResourceSchema):
        return kind
    schema = SCHEMAS.get(_ALIASES.get(kind, kind))
    if schema is None:
        raise ValidationError(
            f"unknown resource kind '{kind}' (expected one of: {', '.join(KINDS)})"
        )
    return schema


def _index_sdk_types() -> Dict[str, Block]:
    index: Dict[str, Block] = {}
    for schema in SCHEMAS.values():
        blocks = dict(schema.types)
        blocks[schema.sdk_type] = schema.root
        for sdk_type, block in blocks.items():
            existing = index.get(sdk_type)
            if existing is not None and list(existing.children) != list(block.children):
                raise ValueError(f"conflicting definitions for SDK type {sdk_type}")
            index.setdefault(sdk_type, block)
    return index


SDK_TYPES: Dict[str, Block] = _index_sdk_types()
