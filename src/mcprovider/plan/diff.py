"""Plan actions for declared resources against recorded state."""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..catalog import apply_defaults, describe, diff, validate
from ..resources.models import ResourceData
from ..utils.logging import get_logger

logger = get_logger("plan.diff")


class PlanAction(str, Enum):
    """What applying a document does to one resource."""
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    REPLACE = "REPLACE"
    DELETE = "DELETE"
    NO_OP = "NO_OP"


class PlannedChange(BaseModel):
    """Planned action for a single resource address."""
    address: str = Field(..., description="Resource address (kind.name)")
    kind: str = Field(..., description="Resource kind")
    name: str = Field("", description="Resource name")
    action: PlanAction = Field(..., description="Planned action")
    changed_paths: List[str] = Field(default_factory=list, description="Attribute paths that differ")
    replace_paths: List[str] = Field(default_factory=list, description="Changed paths that force replacement")

    model_config = ConfigDict(use_enum_values=True)


def plan_resource(
    kind: str,
    prior: Optional[ResourceData],
    desired: Optional[Mapping[str, Any]],
    address: Optional[str] = None,
) -> PlannedChange:
    """
    Decide the action for one resource.

    Args:
        kind: Resource kind
        prior: Recorded state, or None / empty id when the resource does not exist
        desired: Desired configuration, or None when the resource is no longer declared
        address: Address used in the result (defaults to ``kind.name``)

    Raises:
        ValidationError: If the desired configuration is invalid
    """
    schema = describe(kind)
    exists = prior is not None and bool(prior.id)
    name = (desired or {}).get("name") or (prior.id if prior is not None else "")
    address = address or f"{schema.kind}.{name}"

    if desired is None:
        action = PlanAction.DELETE if exists else PlanAction.NO_OP
        return PlannedChange(address=address, kind=schema.kind, name=name, action=action)

    validate(schema, desired)
    if not exists:
        return PlannedChange(address=address, kind=schema.kind, name=name, action=PlanAction.CREATE)

    changes = diff(schema, prior.attributes, apply_defaults(schema, desired))
    changed = [change.path for change in changes]
    replace = [change.path for change in changes if change.force_new]
    if replace:
        action = PlanAction.REPLACE
    elif changed:
        action = PlanAction.UPDATE
    else:
        action = PlanAction.NO_OP
    logger.debug(f"{address}: {action.value} ({len(changed)} changed path(s))")
    return PlannedChange(
        address=address, kind=schema.kind, name=name, action=action,
        changed_paths=changed, replace_paths=replace,
    )


def plan_document(document, state: Mapping[str, ResourceData]) -> List[PlannedChange]:
    """
    Plan every resource in a document, plus deletions of recorded resources
    the document no longer declares.

    Args:
        document: ResourceDocument
        state: Recorded state keyed by address
    """
    changes: List[PlannedChange] = []
    declared = set()
    for spec in document.resources:
        declared.add(spec.address)
        changes.append(plan_resource(spec.kind, state.get(spec.address), spec.config, spec.address))
    for address in sorted(set(state) - declared):
        recorded = state[address]
        changes.append(plan_resource(recorded.kind, recorded, None, address))

    summary: Dict[str, int] = {}
    for change in changes:
        summary[change.action] = summary.get(change.action, 0) + 1
    logger.info(f"Plan: {', '.join(f'{count} {action}' for action, count in sorted(summary.items())) or 'no resources'}")
    return changes
