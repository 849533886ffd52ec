"""Configuration validation, defaulting and normalisation against the catalog."""

import copy
from typing import Any, Dict, List, Mapping, Optional, Union

from . import enums
from .nodes import Attribute, Block, Collection, FieldKind, Node, ResourceSchema, StringMap
from .registry import describe
from ..utils.errors import FieldError, ValidationError
from ..utils.logging import get_logger

logger = get_logger("catalog.validator")

SchemaRef = Union[str, ResourceSchema]


def _join(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)


def is_unset(node: Node, value: Any) -> bool:
    """True when ``value`` stands for "not configured" on ``node``.

    Booleans are only unset when ``None``; ``False`` is a real value.
    """
    if value is None:
        return True
    if isinstance(node, Attribute):
        if node.kind == FieldKind.BOOLEAN or isinstance(value, bool):
            return False
        if node.kind == FieldKind.INTEGER and not isinstance(value, int):
            return False
        return value == node.zero()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def _describe_range(minimum, maximum) -> str:
    if minimum is not None and maximum is not None:
        return f"must be between {minimum} and {maximum}"
    if minimum is not None:
        return f"must be at least {minimum}"
    return f"must be at most {maximum}"


def _check_scalar(kind: FieldKind, value: Any) -> Optional[str]:
    if kind == FieldKind.STRING and not isinstance(value, str):
        return f"expected a string, got {type(value).__name__}"
    if kind == FieldKind.INTEGER and (isinstance(value, bool) or not isinstance(value, int)):
        return f"expected an integer, got {type(value).__name__}"
    if kind == FieldKind.FLOAT and (isinstance(value, bool) or not isinstance(value, (int, float))):
        return f"expected a number, got {type(value).__name__}"
    if kind == FieldKind.BOOLEAN and not isinstance(value, bool):
        return f"expected a boolean, got {type(value).__name__}"
    return None


def _check_enum(category: str, value: str, path: str, errors: List[FieldError]) -> None:
    if not enums.contains(category, value):
        accepted = ", ".join(sorted(enums.values(category)))
        errors.append(FieldError(path, f"invalid value {value!r} for {category}, expected one of: {accepted}"))


def _check_bounds(minimum, maximum, value, path: str, errors: List[FieldError]) -> None:
    if minimum is None and maximum is None:
        return
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        errors.append(FieldError(path, f"{_describe_range(minimum, maximum)}, got {value}"))


def _check_attribute(node: Attribute, value: Any, path: str, errors: List[FieldError]) -> None:
    problem = _check_scalar(node.kind, value)
    if problem:
        errors.append(FieldError(path, problem))
        return
    if node.kind == FieldKind.STRING:
        if node.enum:
            _check_enum(node.enum, value, path, errors)
        if node.min_length is not None and len(value) < node.min_length:
            errors.append(FieldError(path, f"must be at least {node.min_length} characters"))
        if node.max_length is not None and len(value) > node.max_length:
            errors.append(FieldError(path, f"must be at most {node.max_length} characters"))
        if node.pattern is not None and not node.pattern.search(value):
            errors.append(FieldError(path, f"does not match pattern {node.pattern.pattern}"))
    elif node.kind in (FieldKind.INTEGER, FieldKind.FLOAT):
        _check_bounds(node.minimum, node.maximum, value, path, errors)


def _check_collection(node: Collection, value: Any, path: str, errors: List[FieldError]) -> None:
    if not isinstance(value, (list, tuple, set, frozenset)):
        errors.append(FieldError(path, f"expected a list, got {type(value).__name__}"))
        return
    for i, item in enumerate(value):
        item_path = _join(path, i)
        problem = _check_scalar(node.element, item)
        if problem:
            errors.append(FieldError(item_path, problem))
            continue
        if node.enum:
            _check_enum(node.enum, item, item_path, errors)
        if node.element in (FieldKind.INTEGER, FieldKind.FLOAT):
            _check_bounds(node.minimum, node.maximum, item, item_path, errors)


def _check_string_map(value: Any, path: str, errors: List[FieldError]) -> None:
    if not isinstance(value, Mapping):
        errors.append(FieldError(path, f"expected a mapping, got {type(value).__name__}"))
        return
    for k, v in value.items():
        if not isinstance(k, str) or not isinstance(v, str):
            errors.append(FieldError(_join(path, k), "keys and values must be strings"))


def _check_variants(block: Block, value: Mapping, path: str, errors: List[FieldError]) -> None:
    literal = value.get(block.discriminator) or ""
    present = [
        key for key in block.variant_keys()
        if not is_unset(block.children[key], value.get(key))
    ]
    if not literal:
        if len(present) > 1:
            errors.append(FieldError(path, f"only one of [{', '.join(present)}] may be set"))
        return
    disc = block.children[block.discriminator]
    if not isinstance(literal, str) or not enums.contains(disc.enum, literal):
        return
    allowed = block.allowed_variants(literal)
    for key in present:
        if key not in allowed:
            hint = f" (use {', '.join(allowed)})" if allowed else ""
            errors.append(FieldError(
                _join(path, key),
                f"not allowed when {block.discriminator} is {literal}{hint}",
            ))


def _check_block_item(block: Block, value: Any, path: str, errors: List[FieldError]) -> None:
    if not isinstance(value, Mapping):
        errors.append(FieldError(path, f"expected a mapping, got {type(value).__name__}"))
        return
    for key in value:
        if key not in block.children:
            errors.append(FieldError(_join(path, key), "unknown attribute"))
    for key, child in block.children.items():
        _check_node(child, value.get(key), _join(path, key), errors)
    if block.discriminator:
        _check_variants(block, value, path, errors)


def _check_block(node: Block, value: Any, path: str, errors: List[FieldError]) -> None:
    if not isinstance(value, (list, tuple)):
        errors.append(FieldError(path, f"expected a list of blocks, got {type(value).__name__}"))
        return
    if len(value) < node.min_items:
        errors.append(FieldError(path, f"at least {node.min_items} block(s) required, got {len(value)}"))
    if node.max_items is not None and len(value) > node.max_items:
        errors.append(FieldError(path, f"at most {node.max_items} block(s) allowed, got {len(value)}"))
    seen = set()
    for i, item in enumerate(value):
        item_path = _join(path, i)
        _check_block_item(node, item, item_path, errors)
        if node.map_key and isinstance(item, Mapping):
            key_value = item.get(node.map_key)
            if key_value in seen:
                errors.append(FieldError(_join(item_path, node.map_key), f"duplicate key {key_value!r}"))
            seen.add(key_value)


def _check_node(node: Node, value: Any, path: str, errors: List[FieldError]) -> None:
    if node.computed:
        if not is_unset(node, value):
            errors.append(FieldError(path, "is computed by the service and cannot be set"))
        return
    if is_unset(node, value):
        if node.required:
            errors.append(FieldError(path, "is required"))
        return
    if isinstance(node, Attribute):
        _check_attribute(node, value, path, errors)
    elif isinstance(node, Collection):
        _check_collection(node, value, path, errors)
    elif isinstance(node, StringMap):
        _check_string_map(value, path, errors)
    elif isinstance(node, Block):
        _check_block(node, value, path, errors)


def check(kind: SchemaRef, config: Any) -> List[FieldError]:
    """Collect every violation in ``config``; an empty list means valid."""
    schema = describe(kind)
    errors: List[FieldError] = []
    _check_block_item(schema.root, config, "", errors)
    return errors


def validate(kind: SchemaRef, config: Any) -> None:
    """
    Validate a resource configuration.

    Args:
        kind: Resource kind or descriptor
        config: Configuration tree (blocks as lists of mappings)

    Raises:
        ValidationError: With one FieldError per violation
    """
    schema = describe(kind)
    errors = check(schema, config)
    if errors:
        logger.debug(f"{schema.kind} configuration has {len(errors)} error(s)")
        raise ValidationError(errors, schema.kind)


def _defaults_block(block: Block, value: Dict[str, Any]) -> None:
    for key, child in block.children.items():
        current = value.get(key)
        if isinstance(child, Attribute):
            if current is None and child.default is not None:
                value[key] = child.default
        elif isinstance(child, Block) and isinstance(current, list):
            for item in current:
                if isinstance(item, dict):
                    _defaults_block(child, item)


def apply_defaults(kind: SchemaRef, config: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``config`` with catalog defaults filled in for every present block."""
    schema = describe(kind)
    result = copy.deepcopy(dict(config))
    _defaults_block(schema.root, result)
    return result


def _selected(block: Block, value: Mapping) -> Optional[tuple]:
    """Variant keys kept for a sum-type block, or None when every key is kept."""
    if not block.discriminator:
        return None
    literal = value.get(block.discriminator) or ""
    if not literal:
        return None
    return block.allowed_variants(literal)


def _normalize_item(block: Block, value: Optional[Mapping]) -> Dict[str, Any]:
    value = value or {}
    keep = _selected(block, value)
    variants = set(block.variant_keys())
    result: Dict[str, Any] = {}
    for key, child in block.children.items():
        if keep is not None and key in variants and key not in keep:
            result[key] = []
        else:
            result[key] = normalize_value(child, value.get(key))
    return result


def normalize_value(node: Node, value: Any) -> Any:
    """Zero-filled, canonical form of one configuration value."""
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
    items = [_normalize_item(node, item) for item in value or []]
    if node.map_key:
        items.sort(key=lambda item: item[node.map_key])
    return items


def normalize(kind: SchemaRef, config: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Canonical form used for comparisons: defaults applied, every absent
    attribute zero-filled, sets sorted and keyed blocks ordered by key.
    """
    schema = describe(kind)
    return _normalize_item(schema.root, apply_defaults(schema, config))


def _coerce_item(block: Block, value: Any) -> Any:
    if not isinstance(value, Mapping):
        return value
    result = dict(value)
    for key, child in block.children.items():
        if not isinstance(child, Block) or key not in result:
            continue
        current = result[key]
        if isinstance(current, Mapping):
            current = [current]
        if isinstance(current, list):
            result[key] = [_coerce_item(child, item) for item in current]
    return result


def coerce(kind: SchemaRef, config: Any) -> Any:
    """Accept a single mapping wherever a block list is expected (``settings: {...}``)."""
    schema = describe(kind)
    return _coerce_item(schema.root, config)
