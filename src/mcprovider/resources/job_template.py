"""Job template controller."""

from typing import Any, List, Mapping

from .base import ResourceController
from ..utils.errors import FieldError


class JobTemplateController(ResourceController):
    kind = "job_template"
    noun = "JobTemplate"
    response_key = "JobTemplate"

    def check(self, config: Mapping[str, Any]) -> List[FieldError]:
        """An output either names a preset or describes at least one stream itself."""
        errors = []
        for s, settings in enumerate(config.get("settings") or []):
            for g, group in enumerate(settings.get("output_group") or []):
                for o, output in enumerate(group.get("output") or []):
                    if output.get("preset"):
                        continue
                    if not any(output.get(key) for key in ("audio_description", "caption_description", "video_description")):
                        errors.append(FieldError(
                            f"settings.{s}.output_group.{g}.output.{o}",
                            "set preset or at least one of audio_description, caption_description, video_description",
                        ))
        return errors
