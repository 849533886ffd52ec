"""Schema node types and the builder helpers used to declare resource schemas."""

import re
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from . import enums


class FieldKind(str, Enum):
    """Semantic kind of a schema node."""
    STRING = "String"
    INTEGER = "Integer"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    LIST = "List"
    SET = "Set"
    MAP = "Map"
    BLOCK = "Block"


SCALAR_KINDS = (FieldKind.STRING, FieldKind.INTEGER, FieldKind.FLOAT, FieldKind.BOOLEAN)

_ZERO = {
    FieldKind.STRING: "",
    FieldKind.INTEGER: 0,
    FieldKind.FLOAT: 0.0,
    FieldKind.BOOLEAN: False,
}


def sdk_field_name(key: str) -> str:
    """Derive the SDK member name from a snake_case key (``qvbr_settings`` -> ``QvbrSettings``)."""
    return "".join(part.capitalize() for part in key.split("_"))


class Node:
    """Common fields of every schema node."""

    kind: FieldKind

    def __init__(
        self,
        key: str,
        kind: FieldKind,
        required: bool = False,
        computed: bool = False,
        force_new: bool = False,
        default: Any = None,
        sdk: Optional[str] = None,
        read_from: Optional[str] = None,
        description: str = "",
    ):
        if required and computed:
            raise ValueError(f"{key}: a node cannot be both required and computed")
        self.key = key
        self.kind = kind
        self.required = required
        self.computed = computed
        self.force_new = force_new
        self.default = default
        self.sdk = sdk
        self.read_from = read_from
        self.description = description

    @property
    def sdk_name(self) -> str:
        """Member name used in SDK requests."""
        return self.sdk or sdk_field_name(self.key)

    @property
    def response_name(self) -> str:
        """Member name used in SDK responses."""
        return self.read_from or self.sdk_name

    def zero(self) -> Any:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"key": self.key, "kind": self.kind.value, "sdk_name": self.sdk_name}
        for flag in ("required", "computed", "force_new"):
            if getattr(self, flag):
                data[flag] = True
        if self.default is not None:
            data["default"] = self.default
        if self.description:
            data["description"] = self.description
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r}, {self.kind.value})"


class Attribute(Node):
    """Scalar leaf: String, Integer, Float or Boolean."""

    def __init__(
        self,
        key: str,
        kind: FieldKind,
        enum: Optional[str] = None,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        pattern: Optional[str] = None,
        **kwargs,
    ):
        if kind not in SCALAR_KINDS:
            raise ValueError(f"{key}: attribute kind must be scalar, got {kind}")
        super().__init__(key, kind, **kwargs)
        if enum is not None:
            if kind != FieldKind.STRING:
                raise ValueError(f"{key}: only string attributes can be enum-valued")
            if enum not in enums.ENUMS:
                raise ValueError(f"{key}: unknown enum category {enum}")
            if self.default is not None and self.default not in enums.values(enum):
                raise ValueError(f"{key}: default {self.default!r} is not a {enum} value")
        self.enum = enum
        self.minimum = minimum
        self.maximum = maximum
        self.min_length = min_length
        self.max_length = max_length
        self.pattern = re.compile(pattern) if pattern else None

    @property
    def omit_zero(self) -> bool:
        """Zero is outside the accepted range, so it stands for "not set"."""
        return self.kind == FieldKind.INTEGER and self.minimum is not None and self.minimum > 0

    def zero(self) -> Any:
        return _ZERO[self.kind]

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.enum:
            data["enum"] = self.enum
            data["values"] = list(enums.ENUMS[self.enum])
        for name in ("minimum", "maximum", "min_length", "max_length"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        if self.pattern is not None:
            data["pattern"] = self.pattern.pattern
        return data


class Collection(Node):
    """List or Set of scalars."""

    def __init__(
        self,
        key: str,
        kind: FieldKind,
        element: FieldKind,
        enum: Optional[str] = None,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        **kwargs,
    ):
        if kind not in (FieldKind.LIST, FieldKind.SET):
            raise ValueError(f"{key}: collection kind must be List or Set")
        if element not in SCALAR_KINDS:
            raise ValueError(f"{key}: collection elements must be scalar")
        if enum is not None and enum not in enums.ENUMS:
            raise ValueError(f"{key}: unknown enum category {enum}")
        super().__init__(key, kind, **kwargs)
        self.element = element
        self.enum = enum
        self.minimum = minimum
        self.maximum = maximum

    def zero(self) -> List[Any]:
        return []

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["element"] = self.element.value
        if self.enum:
            data["enum"] = self.enum
        if self.minimum is not None:
            data["minimum"] = self.minimum
        if self.maximum is not None:
            data["maximum"] = self.maximum
        return data


class StringMap(Node):
    """Map of string to string."""

    def __init__(self, key: str, **kwargs):
        super().__init__(key, FieldKind.MAP, **kwargs)

    def zero(self) -> Dict[str, str]:
        return {}


class Block(Node):
    """Nested block holding child nodes.

    On the configuration side a block is always a list of mappings. On the
    SDK side it is a single object (``max_items=1``), an array (``many``)
    or an object keyed by one of the children (``map_key``).

    A block with a ``discriminator`` is a sum type: ``variants`` maps each
    discriminator literal to the sibling sub-blocks it permits.
    """

    def __init__(
        self,
        key: str,
        children: Tuple[Node, ...],
        sdk_type: Optional[str] = None,
        min_items: int = 0,
        max_items: Optional[int] = 1,
        many: bool = False,
        map_key: Optional[str] = None,
        discriminator: Optional[str] = None,
        variants: Optional[Dict[str, Tuple[str, ...]]] = None,
        **kwargs,
    ):
        super().__init__(key, FieldKind.BLOCK, **kwargs)
        self.children: Dict[str, Node] = {}
        for child in children:
            if child.key in self.children:
                raise ValueError(f"{key}: duplicate child {child.key}")
            self.children[child.key] = child
        self.sdk_type = sdk_type or sdk_field_name(key)
        self.many = many or map_key is not None
        if self.many and max_items == 1:
            max_items = None
        self.min_items = min_items
        self.max_items = max_items
        self.map_key = map_key
        self.discriminator = discriminator
        self.variants = dict(variants or {})
        if self.required and self.min_items < 1:
            self.min_items = 1
        self._check_map_key()
        self._check_variants()

    def _check_map_key(self) -> None:
        if self.map_key is None:
            return
        child = self.children.get(self.map_key)
        if not isinstance(child, Attribute) or child.kind != FieldKind.STRING or not child.required:
            raise ValueError(f"{self.key}: map key {self.map_key} must be a required string child")

    def _check_variants(self) -> None:
        if self.discriminator is None:
            if self.variants:
                raise ValueError(f"{self.key}: variants declared without a discriminator")
            return
        disc = self.children.get(self.discriminator)
        if not isinstance(disc, Attribute) or disc.enum is None:
            raise ValueError(f"{self.key}: discriminator {self.discriminator} must be an enum attribute")
        accepted = enums.values(disc.enum)
        for literal, keys in self.variants.items():
            if literal not in accepted:
                raise ValueError(f"{self.key}: variant literal {literal} is not a {disc.enum} value")
            for variant in keys:
                if not isinstance(self.children.get(variant), Block):
                    raise ValueError(f"{self.key}: variant {variant} is not a child block")

    @property
    def shape(self) -> str:
        """SDK-side shape: ``object``, ``array`` or ``map``."""
        if self.map_key is not None:
            return "map"
        if self.many:
            return "array"
        return "object"

    def variant_keys(self) -> Tuple[str, ...]:
        """Every sibling sub-block that belongs to the sum type, in declaration order."""
        named = {key for keys in self.variants.values() for key in keys}
        return tuple(key for key in self.children if key in named)

    def allowed_variants(self, literal: str) -> Tuple[str, ...]:
        return self.variants.get(literal, ())

    def zero(self) -> List[Any]:
        return []

    def walk(self, prefix: str = "") -> Iterator[Tuple[str, Node]]:
        """Yield ``(path, node)`` for every descendant, depth first."""
        for key, child in self.children.items():
            path = f"{prefix}.{key}" if prefix else key
            yield path, child
            if isinstance(child, Block):
                yield from child.walk(path)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["sdk_type"] = self.sdk_type
        data["shape"] = self.shape
        if self.min_items:
            data["min_items"] = self.min_items
        if self.max_items is not None:
            data["max_items"] = self.max_items
        if self.map_key:
            data["map_key"] = self.map_key
        if self.discriminator:
            data["discriminator"] = self.discriminator
            data["variants"] = {literal: list(keys) for literal, keys in self.variants.items()}
        data["children"] = [child.to_dict() for child in self.children.values()]
        return data


class ResourceSchema:
    """Descriptor for one resource kind: a rooted tree of schema nodes."""

    id_attribute = "name"

    def __init__(self, kind: str, sdk_type: str, root: Block, aliases: Tuple[str, ...] = ()):
        self.kind = kind
        self.sdk_type = sdk_type
        self.root = root
        self.aliases = aliases
        self.types: Dict[str, Block] = {}
        self._register(root)

    def _register(self, block: Block) -> None:
        for child in block.children.values():
            if not isinstance(child, Block):
                continue
            existing = self.types.get(child.sdk_type)
            if existing is None:
                self.types[child.sdk_type] = child
            elif list(existing.children) != list(child.children):
                raise ValueError(f"{self.kind}: conflicting definitions for SDK type {child.sdk_type}")
            self._register(child)

    @property
    def attributes(self) -> Dict[str, Node]:
        return self.root.children

    def node_at(self, path: str) -> Node:
        """Resolve a dotted path, ignoring list indices (``settings.0.name``)."""
        node: Node = self.root
        for segment in path.split("."):
            if segment.isdigit():
                continue
            if not isinstance(node, Block) or segment not in node.children:
                raise KeyError(path)
            node = node.children[segment]
        return node

    def force_new_paths(self) -> List[str]:
        return [path for path, node in self.root.walk() if node.force_new]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "sdk_type": self.sdk_type,
            "id_attribute": self.id_attribute,
            "attributes": [child.to_dict() for child in self.root.children.values()],
        }


def string(key: str, enum: Optional[str] = None, **kwargs) -> Attribute:
    return Attribute(key, FieldKind.STRING, enum=enum, **kwargs)


def integer(key: str, minimum: Optional[int] = None, maximum: Optional[int] = None, **kwargs) -> Attribute:
    return Attribute(key, FieldKind.INTEGER, minimum=minimum, maximum=maximum, **kwargs)


def number(key: str, minimum: Optional[float] = None, maximum: Optional[float] = None, **kwargs) -> Attribute:
    return Attribute(key, FieldKind.FLOAT, minimum=minimum, maximum=maximum, **kwargs)


def boolean(key: str, **kwargs) -> Attribute:
    return Attribute(key, FieldKind.BOOLEAN, **kwargs)


def int_set(key: str, minimum: Optional[int] = None, **kwargs) -> Collection:
    return Collection(key, FieldKind.SET, FieldKind.INTEGER, minimum=minimum, **kwargs)


def int_list(key: str, minimum: Optional[int] = None, maximum: Optional[int] = None, **kwargs) -> Collection:
    return Collection(key, FieldKind.LIST, FieldKind.INTEGER, minimum=minimum, maximum=maximum, **kwargs)


def string_set(key: str, enum: Optional[str] = None, **kwargs) -> Collection:
    return Collection(key, FieldKind.SET, FieldKind.STRING, enum=enum, **kwargs)


def block(key: str, *children: Node, **kwargs) -> Block:
    return Block(key, children, **kwargs)


def tags() -> StringMap:
    return StringMap("tags", description="Resource tags")
