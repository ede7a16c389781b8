"""Reading status conditions from unstructured Kubernetes objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Mapping, Protocol

from kcmutils.kube import NotFoundError

__all__ = [
    "Condition",
    "GroupVersionResource",
    "ResourceNotFoundError",
    "ResourceConditions",
    "conditions_from_unstructured",
    "get_resource_conditions",
    "obj_kind_name",
]


@dataclass
class Condition:
    """A single status condition."""

    type: str = ""
    status: str = ""
    observed_generation: int = 0
    last_transition_time: datetime | None = None
    reason: str = ""
    message: str = ""


@dataclass(frozen=True)
class GroupVersionResource:
    """Identifies a resource collection in the API."""

    group: str
    version: str
    resource: str


class ResourceNotFoundError(Exception):
    """No object of the resource was found."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(
            f"no {resource} found, ignoring since object must be deleted or not yet created"
        )


@dataclass
class ResourceConditions:
    """Conditions collected from the objects of a resource."""

    kind: str
    name: str
    conditions: list[Condition] = field(default_factory=list)


class _DynamicClient(Protocol):
    def list(
        self, gvr: GroupVersionResource, namespace: str, label_selector: str
    ) -> Iterable[Mapping[str, Any]]: ...


def obj_kind_name(obj: Mapping[str, Any]) -> tuple[str, str]:
    """Return the kind and name of an unstructured object."""
    kind = obj.get("kind") or ""
    name = (obj.get("metadata") or {}).get("name") or ""
    return kind, name


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _condition_from_map(data: Mapping[str, Any]) -> Condition:
    generation = data.get("observedGeneration", 0)
    if generation is None:
        generation = 0
    if isinstance(generation, bool) or not isinstance(generation, int):
        raise ValueError(
            f"field 'observedGeneration' must be an integer, got {type(generation).__name__}"
        )
    raw_time = _string_field(data, "lastTransitionTime")
    transition = None
    if raw_time:
        text = raw_time[:-1] + "+00:00" if raw_time.endswith("Z") else raw_time
        transition = datetime.fromisoformat(text)
    return Condition(
        type=_string_field(data, "type"),
        status=_string_field(data, "status"),
        observed_generation=generation,
        last_transition_time=transition,
        reason=_string_field(data, "reason"),
        message=_string_field(data, "message"),
    )


def conditions_from_unstructured(obj: Mapping[str, Any]) -> list[Condition]:
    """Return ``status.conditions`` of an object, each message prefixed by its name.

    Raises ValueError when the conditions are missing or malformed.
    """
    kind, name = obj_kind_name(obj)
    status = obj.get("status")
    raw = status.get("conditions") if isinstance(status, Mapping) else None
    if not isinstance(raw, list):
        raise ValueError(f"no status conditions found for {kind}: {name}")

    conditions = []
    for item in raw:
        if not isinstance(item, Mapping):
            raise ValueError(
                f"expected {kind}: {name} condition to be a mapping, got: {type(item).__name__}"
            )
        try:
            condition = _condition_from_map(item)
        except ValueError as exc:
            raise ValueError(f"failed to convert condition map to Condition: {exc}") from exc
        condition.message = f"{name}: {condition.message}" if condition.message else name
        conditions.append(condition)
    return conditions


def get_resource_conditions(
    namespace: str,
    dynamic_client: _DynamicClient,
    gvr: GroupVersionResource,
    label_selector: str,
) -> ResourceConditions:
    """Collect the conditions of every object matching a label selector.

    Raises ResourceNotFoundError when nothing matches, so callers can stop
    reconciling instead of retrying.
    """
    try:
        items = list(dynamic_client.list(gvr, namespace, label_selector))
    except NotFoundError as exc:
        raise ResourceNotFoundError(gvr.resource) from exc
    except Exception as exc:
        raise RuntimeError(f"failed to list {gvr.resource}: {exc}") from exc

    if not items:
        raise ResourceNotFoundError(gvr.resource)

    kind, name = obj_kind_name(items[0])
    conditions: list[Condition] = []
    for item in items:
        try:
            conditions.extend(conditions_from_unstructured(item))
        except ValueError as exc:
            raise ValueError(f"failed to get conditions: {exc}") from exc

    return ResourceConditions(kind=kind, name=name, conditions=conditions)