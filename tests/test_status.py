from datetime import datetime, timezone

import pytest

from kcmutils.kube import NotFoundError
from kcmutils.status import (
    Condition,
    GroupVersionResource,
    ResourceNotFoundError,
    conditions_from_unstructured,
    get_resource_conditions,
    obj_kind_name,
)

GVR = GroupVersionResource("cluster.x-k8s.io", "v1beta1", "clusters")


def _cluster(name, conditions):
    return {
        "kind": "Cluster",
        "metadata": {"name": name},
        "status": {"conditions": conditions},
    }


class FakeDynamicClient:
    def __init__(self, items=None, error=None):
        self.items = items or []
        self.error = error
        self.calls = []

    def list(self, gvr, namespace, label_selector):
        self.calls.append((gvr, namespace, label_selector))
        if self.error:
            raise self.error
        return self.items


def test_obj_kind_name():
    assert obj_kind_name(_cluster("c1", [])) == ("Cluster", "c1")


def test_conditions_message_prefixed_with_name():
    obj = _cluster(
        "c1",
        [
            {"type": "Ready", "status": "True", "message": "all good"},
            {"type": "Other", "status": "False"},
        ],
    )
    conditions = conditions_from_unstructured(obj)
    assert [c.type for c in conditions] == ["Ready", "Other"]
    assert conditions[0].message == "c1: all good"
    assert conditions[1].message == "c1"
    assert conditions[1].status == "False"


def test_conditions_parse_fields():
    obj = _cluster(
        "c1",
        [
            {
                "type": "Ready",
                "status": "True",
                "observedGeneration": 3,
                "lastTransitionTime": "2024-01-02T03:04:05Z",
                "reason": "Done",
            }
        ],
    )
    (condition,) = conditions_from_unstructured(obj)
    assert condition.observed_generation == 3
    assert condition.reason == "Done"
    assert condition.last_transition_time == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_missing_conditions():
    with pytest.raises(ValueError, match="no status conditions found for Cluster: c1"):
        conditions_from_unstructured({"kind": "Cluster", "metadata": {"name": "c1"}})


def test_non_mapping_condition():
    with pytest.raises(ValueError, match="condition to be a mapping"):
        conditions_from_unstructured(_cluster("c1", ["oops"]))


def test_bad_condition_field():
    with pytest.raises(ValueError, match="failed to convert condition map"):
        conditions_from_unstructured(_cluster("c1", [{"type": 5}]))


def test_get_resource_conditions_collects_all():
    items = [
        _cluster("first", [{"type": "Ready", "status": "True"}]),
        _cluster("second", [{"type": "Ready", "status": "False", "message": "m"}]),
    ]
    client = FakeDynamicClient(items)
    result = get_resource_conditions("ns", client, GVR, "app=x")
    assert client.calls == [(GVR, "ns", "app=x")]
    assert (result.kind, result.name) == ("Cluster", "first")
    assert [c.message for c in result.conditions] == ["first", "second: m"]
    assert all(isinstance(c, Condition) for c in result.conditions)


def test_get_resource_conditions_empty():
    with pytest.raises(ResourceNotFoundError) as info:
        get_resource_conditions("ns", FakeDynamicClient([]), GVR, "")
    assert info.value.resource == GVR.resource
    assert str(info.value) == (
        f"no {GVR.resource} found, ignoring since object must be deleted or not yet created"
    )


def test_get_resource_conditions_not_found():
    client = FakeDynamicClient(error=NotFoundError("missing"))
    with pytest.raises(ResourceNotFoundError):
        get_resource_conditions("ns", client, GVR, "")


def test_get_resource_conditions_list_failure():
    client = FakeDynamicClient(error=ConnectionError("down"))
    with pytest.raises(RuntimeError, match=f"failed to list {GVR.resource}"):
        get_resource_conditions("ns", client, GVR, "")


def test_get_resource_conditions_bad_item():
    client = FakeDynamicClient([{"kind": "Cluster", "metadata": {"name": "x"}}])
    with pytest.raises(ValueError, match="failed to get conditions"):
        get_resource_conditions("ns", client, GVR, "")