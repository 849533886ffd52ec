"""Translation between configuration trees and MediaConvert SDK objects."""

from .expand import expand_object, expand_resource, expand_update, expander_for
from .flatten import flatten_object, flatten_resource, flattener_for

__all__ = [
    "expand_object",
    "expand_resource",
    "expand_update",
    "expander_for",
    "flatten_object",
    "flatten_resource",
    "flattener_for",
]
