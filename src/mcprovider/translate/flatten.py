"""Flatten: MediaConvert response objects -> configuration tree."""

from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..catalog import SDK_TYPES, describe
from ..catalog.nodes import Attribute, Block, Collection, FieldKind, Node, StringMap
from ..utils.errors import InternalError
from ..utils.logging import get_logger

logger = get_logger("translate.flatten")


def _flatten_value(node: Node, value: Any) -> Any:
    if isinstance(node, Attribute):
        if value is None:
            return node.zero()
        if node.kind == FieldKind.FLOAT:
            return float(value)
        return value
    if isinstance(node, Collection):
        items = list(value or [])
        if node.kind == FieldKind.SET:
            return sorted(set(items))
        return items
    if isinstance(node, StringMap):
        return dict(value or {})
    return _flatten_block(node, value)


def _flatten_block(block: Block, value: Any) -> List[Dict[str, Any]]:
    if value is None:
        return []
    if block.shape == "object":
        # Empty object for a block with required members: cleared by an update.
        if not value and any(child.required for child in block.children.values()):
            return []
        return [flatten_object(block, value)]
    if block.shape == "array":
        return [flatten_object(block, item) for item in value]
    items = []
    for name in sorted(value):
        item = flatten_object(block, value[name])
        item[block.map_key] = name
        items.append(item)
    return items


def flatten_object(block: Block, obj: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Translate one SDK object into a configuration block.

    Every attribute is materialised, absent ones as their zero value;
    absent nested objects become empty lists.
    """
    if obj is None:
        obj = {}
    if not isinstance(obj, Mapping):
        raise InternalError(f"expected an object for {block.sdk_type}, got {type(obj).__name__}")
    skipped = set()
    if block.discriminator:
        literal = obj.get(block.children[block.discriminator].response_name) or ""
        if literal:
            allowed = block.allowed_variants(literal)
            skipped = {key for key in block.variant_keys() if key not in allowed}
    result: Dict[str, Any] = {}
    for key, child in block.children.items():
        if key in skipped:
            result[key] = []
            continue
        result[key] = _flatten_value(child, obj.get(child.response_name))
    return result


def flattener_for(sdk_type: str) -> Callable[[Mapping[str, Any]], Dict[str, Any]]:
    """
    Return the flattener for an SDK type.

    Raises:
        KeyError: If no catalog block reads that SDK type
    """
    try:
        block = SDK_TYPES[sdk_type]
    except KeyError:
        raise KeyError(f"No flattener for SDK type: {sdk_type}") from None
    return partial(flatten_object, block)


def flatten_resource(kind, obj: Mapping[str, Any]) -> Dict[str, Any]:
    """State attributes for a resource read from the service, computed ones included."""
    schema = describe(kind)
    attributes = flatten_object(schema.root, obj)
    logger.debug(f"Flattened {schema.kind} '{attributes.get('name', '')}'")
    return attributes
