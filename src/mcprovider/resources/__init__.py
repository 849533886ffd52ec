"""Resource controllers for presets, job templates and queues."""

from typing import Any, Callable, Dict, Optional, Type

from .base import ResourceController
from .job_template import JobTemplateController
from .models import ResourceData
from .preset import PresetController
from .queue import QueueController
from ..catalog import describe
from ..client.context import OperationContext
from ..config.models import RetryPolicy

CONTROLLERS: Dict[str, Type[ResourceController]] = {
    "preset": PresetController,
    "job_template": JobTemplateController,
    "queue": QueueController,
}

__all__ = [
    "CONTROLLERS",
    "JobTemplateController",
    "OperationContext",
    "PresetController",
    "QueueController",
    "ResourceController",
    "ResourceData",
    "controller_for",
]


def controller_for(kind: str, client_factory: Callable[[], Any],
                   retry: Optional[RetryPolicy] = None) -> ResourceController:
    """
    Build the controller for a kind or alias.

    Raises:
        ValidationError: If the kind is unknown
    """
    schema = describe(kind)
    return CONTROLLERS[schema.kind](client_factory, retry)
