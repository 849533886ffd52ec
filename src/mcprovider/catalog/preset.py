"""Preset descriptor."""

from .nodes import ResourceSchema, block, string, tags
from .shared import audio_description, caption_description_preset, container_settings, video_description


def build() -> ResourceSchema:
    root = block(
        "preset",
        string("arn", computed=True, description="ARN assigned by the service"),
        string("category", description="Optional category used to group presets"),
        string("description"),
        string("name", required=True, force_new=True, description="Preset name, unique per account and region"),
        block(
            "settings",
            audio_description(),
            caption_description_preset(),
            container_settings(),
            video_description(),
            sdk_type="PresetSettings",
            required=True,
            description="Encoding settings applied to outputs that reference this preset",
        ),
        tags(),
        string("type", computed=True, description="SYSTEM or CUSTOM"),
        sdk_type="Preset",
    )
    return ResourceSchema("preset", "Preset", root, aliases=("aws_media_convert_preset", "presets"))
