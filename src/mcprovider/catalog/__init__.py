"""Schema catalog: per-kind descriptors, enum registry and validation."""

from .diff import AttributeChange, diff, requires_replacement
from .nodes import Attribute, Block, Collection, FieldKind, Node, ResourceSchema, StringMap
from .registry import KINDS, SCHEMAS, SDK_TYPES, describe
from .validator import apply_defaults, check, coerce, normalize, validate

__all__ = [
    "Attribute",
    "AttributeChange",
    "Block",
    "Collection",
    "FieldKind",
    "KINDS",
    "Node",
    "ResourceSchema",
    "SCHEMAS",
    "SDK_TYPES",
    "StringMap",
    "apply_defaults",
    "check",
    "coerce",
    "describe",
    "diff",
    "normalize",
    "requires_replacement",
    "validate",
]
