"""Plan computation honouring force-new attributes."""

from .diff import PlanAction, PlannedChange, plan_document, plan_resource

__all__ = ["PlanAction", "PlannedChange", "plan_document", "plan_resource"]
