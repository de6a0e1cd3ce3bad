import pytest

from xstatefulset.apply import XStatefulSetApplyConfiguration, for_kind, x_stateful_set
from xstatefulset.apply_spec import XStatefulSetSpecApplyConfiguration
from xstatefulset.apply_status import XStatefulSetStatusApplyConfiguration
from xstatefulset.types import SCHEME_GROUP_VERSION, GroupVersion


def test_constructor_sets_identity():
    cfg = x_stateful_set("web", "ns1")
    assert cfg.name == "web"
    assert cfg.namespace == "ns1"
    assert cfg.kind == "XStatefulSet"
    assert cfg.api_version == "apps.x-k8s.io/v1"


def test_to_dict_of_constructed():
    d = x_stateful_set("web", "ns1").to_dict()
    assert d == {
        "apiVersion": "apps.x-k8s.io/v1",
        "kind": "XStatefulSet",
        "metadata": {"name": "web", "namespace": "ns1"},
    }


def test_empty_configuration_renders_empty():
    assert XStatefulSetApplyConfiguration().to_dict() == {}


def test_chaining_returns_same_object():
    cfg = XStatefulSetApplyConfiguration()
    result = (
        cfg.with_generate_name("web-")
        .with_uid("uid-1")
        .with_resource_version("7")
        .with_generation(3)
        .with_deletion_grace_period_seconds(30)
    )
    assert result is cfg
    meta = cfg.to_dict()["metadata"]
    assert meta["generateName"] == "web-"
    assert meta["uid"] == "uid-1"
    assert meta["resourceVersion"] == "7"
    assert meta["generation"] == 3
    assert meta["deletionGracePeriodSeconds"] == 30


def test_last_call_wins_for_scalars():
    cfg = x_stateful_set("a", "ns").with_name("b").with_kind("Other")
    assert cfg.name == "b"
    assert cfg.to_dict()["kind"] == "Other"


def test_timestamps_rendered():
    cfg = XStatefulSetApplyConfiguration().with_creation_timestamp("t1").with_deletion_timestamp("t2")
    meta = cfg.to_dict()["metadata"]
    assert meta["creationTimestamp"] == "t1"
    assert meta["deletionTimestamp"] == "t2"


def test_labels_merge_and_overwrite():
    cfg = XStatefulSetApplyConfiguration()
    cfg.with_labels({"a": "1", "b": "2"}).with_labels({"b": "3"})
    assert cfg.labels == {"a": "1", "b": "3"}


def test_empty_labels_leave_field_unset():
    cfg = XStatefulSetApplyConfiguration().with_labels({})
    assert cfg.labels is None
    assert "metadata" not in cfg.to_dict()


def test_annotations_merge():
    cfg = XStatefulSetApplyConfiguration()
    cfg.with_annotations({"x": "1"}).with_annotations({"y": "2"})
    assert cfg.to_dict()["metadata"]["annotations"] == {"x": "1", "y": "2"}


def test_labels_copied_from_input():
    entries = {"a": "1"}
    cfg = XStatefulSetApplyConfiguration().with_labels(entries)
    entries["a"] = "changed"
    assert cfg.labels == {"a": "1"}


def test_finalizers_append_across_calls():
    cfg = XStatefulSetApplyConfiguration().with_finalizers("f1").with_finalizers("f2", "f3")
    assert cfg.finalizers == ["f1", "f2", "f3"]
    assert cfg.to_dict()["metadata"]["finalizers"] == ["f1", "f2", "f3"]


def test_owner_references_append():
    ref1 = {"name": "owner1"}
    ref2 = {"name": "owner2"}
    cfg = XStatefulSetApplyConfiguration().with_owner_references(ref1).with_owner_references(ref2)
    assert cfg.to_dict()["metadata"]["ownerReferences"] == [ref1, ref2]


def test_owner_reference_none_rejected():
    cfg = XStatefulSetApplyConfiguration()
    with pytest.raises(ValueError):
        cfg.with_owner_references({"name": "o"}, None)
    assert cfg.owner_references == []


def test_spec_and_status_rendered():
    spec = XStatefulSetSpecApplyConfiguration().with_replicas(3)
    status = XStatefulSetStatusApplyConfiguration().with_ready_replicas(2)
    d = x_stateful_set("web", "ns").with_spec(spec).with_status(status).to_dict()
    assert d["spec"] == spec.to_dict()
    assert d["status"] == status.to_dict()
    assert d["spec"]["replicas"] == 3


def test_spec_can_be_cleared():
    cfg = XStatefulSetApplyConfiguration().with_spec(XStatefulSetSpecApplyConfiguration())
    cfg.with_spec(None)
    assert "spec" not in cfg.to_dict()


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("XStatefulSet", XStatefulSetApplyConfiguration),
        ("XStatefulSetSpec", XStatefulSetSpecApplyConfiguration),
        ("XStatefulSetStatus", XStatefulSetStatusApplyConfiguration),
    ],
)
def test_for_kind_known(kind, expected):
    result = for_kind(SCHEME_GROUP_VERSION.with_kind(kind))
    assert type(result) is expected
    assert result.to_dict() == {}


def test_for_kind_unknown_kind():
    assert for_kind(SCHEME_GROUP_VERSION.with_kind("Deployment")) is None


def test_for_kind_other_group():
    other = GroupVersion("apps", "v1").with_kind("XStatefulSet")
    assert for_kind(other) is None


def test_for_kind_returns_fresh_instances():
    gvk = SCHEME_GROUP_VERSION.with_kind("XStatefulSet")
    first = for_kind(gvk)
    first.with_name("x")
    assert for_kind(gvk).name is None