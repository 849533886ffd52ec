"""Leaf-by-leaf comparison of two configurations of the same kind."""

from dataclasses import dataclass
from typing import Any, List, Mapping

from .nodes import Block
from .registry import describe
from .validator import SchemaRef, normalize


@dataclass
class AttributeChange:
    """One differing path between prior state and desired configuration."""
    path: str
    force_new: bool
    before: Any = None
    after: Any = None


def _diff_item(block: Block, before: Mapping, after: Mapping, path: str,
               force_new: bool, changes: List[AttributeChange]) -> None:
    for key, child in block.children.items():
        if child.computed:
            continue
        child_path = f"{path}.{key}" if path else key
        replace = force_new or child.force_new
        old, new = before.get(key), after.get(key)
        if isinstance(child, Block):
            if len(old) != len(new):
                changes.append(AttributeChange(child_path, replace, old, new))
                continue
            for i, (old_item, new_item) in enumerate(zip(old, new)):
                _diff_item(child, old_item, new_item, f"{child_path}.{i}", replace, changes)
        elif old != new:
            changes.append(AttributeChange(child_path, replace, old, new))


def diff(kind: SchemaRef, prior: Mapping[str, Any], desired: Mapping[str, Any]) -> List[AttributeChange]:
    """
    Compare prior attributes with a desired configuration.

    Both sides are normalised first, so an unset attribute and its zero value
    compare equal. Computed attributes are ignored. A change below a force-new
    node is reported with ``force_new=True``.
    """
    schema = describe(kind)
    changes: List[AttributeChange] = []
    _diff_item(schema.root, normalize(schema, prior), normalize(schema, desired), "", False, changes)
    return changes


def requires_replacement(changes: List[AttributeChange]) -> bool:
    return any(change.force_new for change in changes)
