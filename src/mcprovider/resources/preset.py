"""Preset controller."""

from .base import ResourceController


class PresetController(ResourceController):
    kind = "preset"
    noun = "Preset"
    response_key = "Preset"
