import pytest

from xstatefulset.types import (
    AlreadyExistsError,
    GroupVersion,
    LabelSelector,
    LabelSelectorRequirement,
    NotFoundError,
    ObjectMeta,
    Ordinals,
    RetentionPolicy,
    RollingUpdateStrategy,
    StatefulSetCondition,
    UpdateStrategy,
    XStatefulSet,
    XStatefulSetList,
    XStatefulSetSpec,
    XStatefulSetStatus,
    resource,
)


def _full_set():
    return XStatefulSet(
        metadata=ObjectMeta(
            name="web",
            namespace="ns",
            labels={"app": "web"},
            annotations={"note": "x"},
            generation=3,
            finalizers=["f1"],
        ),
        spec=XStatefulSetSpec(
            replicas=3,
            selector=LabelSelector(
                match_labels={"app": "web"},
                match_expressions=[LabelSelectorRequirement("tier", "In", ["a", "b"])],
            ),
            template={"metadata": {"labels": {"app": "web"}}},
            volume_claim_templates=[{"metadata": {"name": "data"}}],
            service_name="web-svc",
            pod_management_policy="Parallel",
            update_strategy=UpdateStrategy(
                type="RollingUpdate",
                rolling_update=RollingUpdateStrategy(partition=1, max_unavailable="50%"),
            ),
            revision_history_limit=10,
            min_ready_seconds=5,
            persistent_volume_claim_retention_policy=RetentionPolicy("Delete", "Retain"),
            ordinals=Ordinals(start=2),
        ),
        status=XStatefulSetStatus(
            observed_generation=3,
            replicas=3,
            ready_replicas=2,
            current_replicas=1,
            updated_replicas=2,
            current_revision="web-1",
            update_revision="web-2",
            collision_count=1,
            conditions=[StatefulSetCondition("Ready", "True", reason="ok")],
            available_replicas=2,
            selector="app=web",
        ),
    )


def test_group_version_string_and_kind():
    gv = GroupVersion("apps.x-k8s.io", "v1")
    assert str(gv) == "apps.x-k8s.io/v1"
    kind = gv.with_kind("XStatefulSet")
    assert (kind.group, kind.version, kind.kind) == ("apps.x-k8s.io", "v1", "XStatefulSet")


def test_with_resource_group_resource():
    gvr = GroupVersion("apps.x-k8s.io", "v1").with_resource("xstatefulsets")
    assert gvr.resource == "xstatefulsets"
    assert gvr.group_resource() == resource("xstatefulsets")


def test_resource_qualifies_with_group():
    gr = resource("xstatefulset")
    assert gr.group == "apps.x-k8s.io"
    assert str(gr) == "xstatefulset.apps.x-k8s.io"


def test_not_found_error_message():
    err = NotFoundError(resource("xstatefulset"), "web")
    assert isinstance(err, LookupError)
    assert str(err) == 'xstatefulset.apps.x-k8s.io "web" not found'
    assert err.name == "web"


def test_already_exists_error_message():
    err = AlreadyExistsError(resource("xstatefulset"), "web")
    assert "already exists" in str(err)
    assert err.name == "web"


def test_selector_match_labels():
    sel = LabelSelector(match_labels={"app": "web"})
    assert sel.matches({"app": "web", "extra": "1"})
    assert not sel.matches({"app": "db"})
    assert not sel.matches({})


@pytest.mark.parametrize(
    "operator,values,labels,expected",
    [
        ("In", ["a", "b"], {"tier": "a"}, True),
        ("In", ["a", "b"], {"tier": "c"}, False),
        ("In", ["a"], {}, False),
        ("NotIn", ["a"], {"tier": "b"}, True),
        ("NotIn", ["a"], {"tier": "a"}, False),
        ("NotIn", ["a"], {}, True),
        ("Exists", [], {"tier": "x"}, True),
        ("Exists", [], {}, False),
        ("DoesNotExist", [], {}, True),
        ("DoesNotExist", [], {"tier": "x"}, False),
    ],
)
def test_selector_expressions(operator, values, labels, expected):
    sel = LabelSelector(match_expressions=[LabelSelectorRequirement("tier", operator, values)])
    assert sel.matches(labels) is expected


@pytest.mark.parametrize(
    "requirement",
    [
        LabelSelectorRequirement("k", "In", []),
        LabelSelectorRequirement("k", "NotIn", []),
        LabelSelectorRequirement("k", "Exists", ["v"]),
        LabelSelectorRequirement("k", "Bogus", ["v"]),
    ],
)
def test_invalid_selector_raises(requirement):
    with pytest.raises(ValueError):
        LabelSelector(match_expressions=[requirement]).matches({"k": "v"})


def test_empty_selector():
    assert LabelSelector().is_empty()
    assert LabelSelector().matches({"a": "b"})
    assert not LabelSelector(match_labels={"a": "b"}).is_empty()


def test_default_set_identity():
    obj = XStatefulSet()
    data = obj.to_dict()
    assert data["apiVersion"] == "apps.x-k8s.io/v1"
    assert data["kind"] == "XStatefulSet"
    assert data["spec"]["selector"] is None
    assert "replicas" not in data["spec"]
    assert data["status"]["replicas"] == 0
    assert data["status"]["availableReplicas"] == 0


def test_to_dict_uses_wire_names():
    data = _full_set().to_dict()
    spec = data["spec"]
    assert spec["serviceName"] == "web-svc"
    assert spec["podManagementPolicy"] == "Parallel"
    assert spec["updateStrategy"]["rollingUpdate"]["maxUnavailable"] == "50%"
    assert spec["persistentVolumeClaimRetentionPolicy"] == {
        "whenDeleted": "Delete",
        "whenScaled": "Retain",
    }
    assert spec["selector"]["matchExpressions"][0]["values"] == ["a", "b"]
    assert data["status"]["updateRevision"] == "web-2"
    assert data["metadata"]["labels"] == {"app": "web"}


def test_round_trip_object():
    obj = _full_set()
    assert XStatefulSet.from_dict(obj.to_dict()) == obj


def test_round_trip_dict():
    data = _full_set().to_dict()
    assert XStatefulSet.from_dict(data).to_dict() == data


def test_from_dict_tolerates_missing_sections():
    obj = XStatefulSet.from_dict({"metadata": {"name": "a"}})
    assert obj.metadata.name == "a"
    assert obj.spec.replicas is None
    assert obj.status.conditions == []


def test_list_defaults():
    lst = XStatefulSetList(items=[_full_set()])
    assert lst.kind == "XStatefulSetList"
    assert lst.api_version == XStatefulSet().api_version
    assert lst.items[0].metadata.name == "web"