"""Queue controller."""

from typing import Any, List, Mapping

from .base import ResourceController
from ..utils.errors import FieldError


class QueueController(ResourceController):
    kind = "queue"
    noun = "Queue"
    response_key = "Queue"
    # Pricing plan is fixed at creation; tags go through TagResource.
    update_excludes = ("Tags", "PricingPlan")

    def check(self, config: Mapping[str, Any]) -> List[FieldError]:
        if config.get("pricing_plan") == "RESERVED" and not config.get("reservation_plan_settings"):
            return [FieldError("reservation_plan_settings", "is required when pricing_plan is RESERVED")]
        return []
