"""Generic create/read/update/delete/import against MediaConvert."""

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .models import ResourceData
from ..catalog import apply_defaults, describe, diff, validate
from ..client.context import OperationContext
from ..client.retry import call_with_retry
from ..config.models import RetryPolicy
from ..translate import expand_resource, expand_update, flatten_resource
from ..utils.errors import FieldError, NotFoundError, ValidationError
from ..utils.logging import get_logger

logger = get_logger("resources.base")


class ResourceController:
    """
    Lifecycle handler for one resource kind.

    Subclasses set ``kind``, ``noun`` and ``response_key``. The controller
    holds no client: ``client_factory`` is called once per operation, so
    one controller can serve concurrent operations on different resources.
    """

    kind: str = ""
    noun: str = ""
    response_key: str = ""
    # Request members update_* does not accept.
    update_excludes: Tuple[str, ...] = ("Tags",)

    def __init__(self, client_factory: Callable[[], Any], retry: Optional[RetryPolicy] = None):
        self.client_factory = client_factory
        self.retry = retry or RetryPolicy()
        self.schema = describe(self.kind)
        self.logger = get_logger(f"resources.{self.kind}")

    def check(self, config: Mapping[str, Any]) -> List[FieldError]:
        """Cross-field rules the catalog cannot express; empty by default."""
        return []

    def prepare(self, config: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate a desired configuration and fill in catalog defaults.

        Raises:
            ValidationError: With every violation found
        """
        validate(self.schema, config)
        extra = self.check(config)
        if extra:
            raise ValidationError(extra, self.kind)
        return apply_defaults(self.schema, config)

    def _call(self, client: Any, method: str, context: OperationContext, identifier: str, **params) -> Dict[str, Any]:
        operation = "".join(part.capitalize() for part in method.split("_"))
        self.logger.debug(f"{operation} {identifier}: {params}")
        return call_with_retry(
            lambda: getattr(client, method)(**params),
            self.retry,
            context,
            operation=operation,
            kind=self.kind,
            identifier=identifier,
        )

    def _transition(self, name: str, before: str, after: str) -> None:
        self.logger.info(f"{self.kind} '{name}': {before} -> {after}")

    def create(self, data: ResourceData, context: Optional[OperationContext] = None) -> ResourceData:
        """Create the resource and return its state as read back from the service."""
        context = context or OperationContext()
        config = self.prepare(data.attributes)
        name = config["name"]
        params = expand_resource(self.schema, config)
        self._transition(name, "absent", "creating")
        response = self._call(self.client_factory(), f"create_{self.kind}", context, name, **params)
        created = response.get(self.response_key) or {}
        new_id = created.get("Name") or name
        self._transition(new_id, "creating", "present")
        return self.read(ResourceData(kind=self.kind, id=new_id, attributes=config), context)

    def _read_tags(self, client: Any, arn: str, context: OperationContext, name: str) -> Dict[str, str]:
        response = self._call(client, "list_tags_for_resource", context, name, Arn=arn)
        return dict((response.get("ResourceTags") or {}).get("Tags") or {})

    def read(self, data: ResourceData, context: Optional[OperationContext] = None) -> ResourceData:
        """
        Refresh state from the service.

        A resource that no longer exists comes back with an empty ``id``.
        """
        if not data.id:
            return data
        context = context or OperationContext()
        client = self.client_factory()
        try:
            response = self._call(client, f"get_{self.kind}", context, data.id, Name=data.id)
        except NotFoundError:
            self.logger.warning(f"{self.kind} '{data.id}' not found, treating as absent")
            return ResourceData(kind=self.kind, id="", attributes=data.attributes)
        attributes = flatten_resource(self.schema, response.get(self.response_key) or {})
        if attributes.get("arn"):
            attributes["tags"] = self._read_tags(client, attributes["arn"], context, data.id)
        return ResourceData(kind=self.kind, id=attributes.get("name") or data.id, attributes=attributes)

    def _reconcile_tags(self, client: Any, arn: str, before: Mapping[str, str], after: Mapping[str, str],
                        context: OperationContext, name: str) -> None:
        removed = sorted(key for key in before if key not in after)
        changed = {key: value for key, value in after.items() if before.get(key) != value}
        if removed:
            self._call(client, "untag_resource", context, name, Arn=arn, TagKeys=removed)
        if changed:
            self._call(client, "tag_resource", context, name, Arn=arn, Tags=changed)
        if removed or changed:
            self.logger.debug(f"Reconciled tags on {self.kind} '{name}': -{removed} +{sorted(changed)}")

    def update(self, prior: ResourceData, desired: Mapping[str, Any],
               context: Optional[OperationContext] = None) -> ResourceData:
        """
        Update in place.

        Raises:
            ValidationError: If a force-new attribute differs from the prior state
            NotFoundError: If the resource disappeared remotely
        """
        context = context or OperationContext()
        config = self.prepare(desired)
        forced = [change.path for change in diff(self.schema, prior.attributes, config) if change.force_new]
        if forced:
            raise ValidationError(
                [FieldError(path, "cannot be changed in place, the resource must be replaced") for path in forced],
                self.kind,
            )
        name = prior.id or config["name"]
        params = {
            key: value for key, value in expand_update(self.schema, config, prior.attributes).items()
            if key not in self.update_excludes
        }
        params["Name"] = name
        client = self.client_factory()
        self._transition(name, "present", "updating")
        try:
            response = self._call(client, f"update_{self.kind}", context, name, **params)
        except NotFoundError:
            self.logger.warning(f"{self.kind} '{name}' disappeared before update")
            raise
        arn = (response.get(self.response_key) or {}).get("Arn") or prior.attributes.get("arn")
        if arn:
            self._reconcile_tags(client, arn, prior.attributes.get("tags") or {},
                                 config.get("tags") or {}, context, name)
        self._transition(name, "updating", "present")
        return self.read(ResourceData(kind=self.kind, id=name, attributes=config), context)

    def delete(self, data: ResourceData, context: Optional[OperationContext] = None) -> ResourceData:
        """Delete the resource; deleting something already gone succeeds."""
        if not data.id:
            return ResourceData(kind=self.kind)
        context = context or OperationContext()
        self._transition(data.id, "present", "deleting")
        try:
            self._call(self.client_factory(), f"delete_{self.kind}", context, data.id, Name=data.id)
        except NotFoundError:
            self.logger.warning(f"{self.kind} '{data.id}' already deleted")
        self._transition(data.id, "deleting", "absent")
        return ResourceData(kind=self.kind)

    def import_resource(self, identifier: str, context: Optional[OperationContext] = None) -> ResourceData:
        """
        Adopt an existing remote resource by name.

        Raises:
            NotFoundError: If nothing with that name exists
        """
        state = self.read(ResourceData(kind=self.kind, id=identifier), context)
        if not state.id:
            raise NotFoundError(
                "resource does not exist", kind=self.kind, operation=f"Get{self.noun}", identifier=identifier,
            )
        self.logger.info(f"Imported {self.kind} '{identifier}'")
        return state
