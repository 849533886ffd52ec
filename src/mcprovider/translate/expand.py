"""Expand: configuration tree -> MediaConvert request objects.

Unset values never reach the request. A string is written only when
non-empty, a number or boolean only when not ``None`` (zero is dropped
for integers whose accepted range starts above zero), a collection only
when non-empty. A block that is absent or an empty list is omitted; a
present but empty block (``[{}]``) becomes an explicit empty object.
"""

from functools import partial
from typing import Any, Callable, Dict, Mapping, Optional

from ..catalog import SDK_TYPES, describe
from ..catalog.validator import is_unset
from ..catalog.nodes import Attribute, Block, Collection, FieldKind, Node, StringMap
from ..utils.errors import InternalError
from ..utils.logging import get_logger

logger = get_logger("translate.expand")

_OMIT = object()


def _expand_attribute(node: Attribute, value: Any) -> Any:
    if value is None:
        return _OMIT
    if node.kind == FieldKind.STRING:
        return value if value else _OMIT
    if node.kind == FieldKind.INTEGER and node.omit_zero and value == 0:
        return _OMIT
    if node.kind == FieldKind.FLOAT:
        return float(value)
    return value


def _expand_value(node: Node, value: Any, path: str) -> Any:
    if isinstance(node, Attribute):
        return _expand_attribute(node, value)
    if isinstance(node, Collection):
        if not value:
            return _OMIT
        if node.kind == FieldKind.SET:
            return sorted(set(value))
        return list(value)
    if isinstance(node, StringMap):
        return dict(value) if value else _OMIT
    if not value:
        return _OMIT
    if node.shape == "object":
        return expand_object(node, value[0], f"{path}.0")
    if node.shape == "array":
        return [expand_object(node, item, f"{path}.{i}") for i, item in enumerate(value)]
    result = {}
    for i, item in enumerate(value):
        entry = expand_object(node, item, f"{path}.{i}")
        result[item[node.map_key]] = {k: v for k, v in entry.items() if k != node.children[node.map_key].sdk_name}
    return result


def expand_object(block: Block, item: Any, path: str = "") -> Dict[str, Any]:
    """
    Translate one configuration block into its SDK object.

    For sum-type blocks only the sub-blocks the discriminator selects are
    translated. With an empty discriminator whichever variant is present
    is used.

    Raises:
        InternalError: If the value is not a mapping (validation was skipped)
    """
    if item is None:
        item = {}
    if not isinstance(item, Mapping):
        raise InternalError(f"{path or block.key}: expected a mapping for {block.sdk_type}")
    skipped = set()
    if block.discriminator:
        literal = item.get(block.discriminator) or ""
        if literal:
            allowed = block.allowed_variants(literal)
            skipped = {key for key in block.variant_keys() if key not in allowed}
    result: Dict[str, Any] = {}
    for key, child in block.children.items():
        if child.computed or key in skipped:
            continue
        child_path = f"{path}.{key}" if path else key
        value = _expand_value(child, item.get(key), child_path)
        if value is not _OMIT:
            result[child.sdk_name] = value
    return result


def _expand_blocks(block: Block, value: Any) -> Optional[Any]:
    """Translate a list of blocks (or one mapping); ``None`` when nothing is configured."""
    if value is not None and not isinstance(value, (list, tuple)):
        return expand_object(block, value)
    result = _expand_value(block, list(value or []), block.key)
    return None if result is _OMIT else result


def expander_for(sdk_type: str) -> Callable[[Any], Optional[Any]]:
    """
    Return the expander for an SDK type (``"H264Settings"``).

    The expander takes the configuration list of blocks (usually zero or
    one element) and returns the SDK object, or ``None`` for an empty list.
    A single mapping is accepted as well.

    Raises:
        KeyError: If no catalog block produces that SDK type
    """
    try:
        block = SDK_TYPES[sdk_type]
    except KeyError:
        raise KeyError(f"No expander for SDK type: {sdk_type}") from None
    return partial(_expand_blocks, block)


def expand_resource(kind, config: Mapping[str, Any]) -> Dict[str, Any]:
    """Top-level request parameters for a resource (computed attributes excluded)."""
    schema = describe(kind)
    params = expand_object(schema.root, config)
    logger.debug(f"Expanded {schema.kind} configuration into {sorted(params)}")
    return params


def _cleared(node: Node) -> Any:
    if isinstance(node, Attribute):
        return "" if node.kind == FieldKind.STRING else node.zero()
    if isinstance(node, Block):
        return [] if node.shape == "array" else {}
    return node.zero()


def expand_update(kind, config: Mapping[str, Any], prior: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Update request parameters for a resource.

    Update calls keep whatever a request leaves out, so a top-level member
    that is set in ``prior`` but no longer configured is sent in its cleared
    form: ``""`` for strings, zero for numbers, an empty object or array for
    blocks. Without ``prior`` every unconfigured member is cleared.
    """
    schema = describe(kind)
    params = expand_object(schema.root, config)
    for key, child in schema.root.children.items():
        if child.computed or child.sdk_name in params:
            continue
        if prior is None or not is_unset(child, prior.get(key)):
            params[child.sdk_name] = _cleared(child)
    logger.debug(f"Expanded {schema.kind} update into {sorted(params)}")
    return params
