"""Resource model for the XStatefulSet API (group ``apps.x-k8s.io``, version ``v1``)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional, Union

GROUP_NAME = "apps.x-k8s.io"
VERSION = "v1"

CONTROLLER_REVISION_HASH_LABEL_KEY = "controller-revision-hash"
STATEFUL_SET_REVISION_LABEL = CONTROLLER_REVISION_HASH_LABEL_KEY
STATEFUL_SET_POD_NAME_LABEL = "xstatefulset.x-k8s.io/pod-name"
POD_INDEX_LABEL = "apps.x-k8s.io/pod-index"

ORDERED_READY_POD_MANAGEMENT = "OrderedReady"
PARALLEL_POD_MANAGEMENT = "Parallel"

ROLLING_UPDATE_STRATEGY_TYPE = "RollingUpdate"
ON_DELETE_STRATEGY_TYPE = "OnDelete"

RETAIN_RETENTION_POLICY = "Retain"
DELETE_RETENTION_POLICY = "Delete"

OPERATOR_IN = "In"
OPERATOR_NOT_IN = "NotIn"
OPERATOR_EXISTS = "Exists"
OPERATOR_DOES_NOT_EXIST = "DoesNotExist"


class _GroupResource(NamedTuple):
    group: str
    resource: str

    def __str__(self) -> str:
        return f"{self.resource}.{self.group}" if self.group else self.resource


class _GroupVersionResource(NamedTuple):
    group: str
    version: str
    resource: str

    def group_resource(self) -> _GroupResource:
        return _GroupResource(self.group, self.resource)


class _GroupVersionKind(NamedTuple):
    group: str
    version: str
    kind: str


class NotFoundError(LookupError):
    """Raised when a named object does not exist."""

    def __init__(self, resource: Any, name: str) -> None:
        super().__init__(f'{resource} "{name}" not found')
        self.resource = resource
        self.name = name


class AlreadyExistsError(Exception):
    """Raised when creating an object whose name is already taken."""

    def __init__(self, resource: Any, name: str) -> None:
        super().__init__(f'{resource} "{name}" already exists')
        self.resource = resource
        self.name = name


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def with_resource(self, resource: str) -> _GroupVersionResource:
        return _GroupVersionResource(self.group, self.version, resource)

    def with_kind(self, kind: str) -> _GroupVersionKind:
        return _GroupVersionKind(self.group, self.version, kind)

    def __str__(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version


SCHEME_GROUP_VERSION = GroupVersion(GROUP_NAME, VERSION)
API_VERSION = str(SCHEME_GROUP_VERSION)


def resource(resource: str) -> _GroupResource:
    """Qualify an unqualified resource name with this API group."""
    return SCHEME_GROUP_VERSION.with_resource(resource).group_resource()


@dataclass
class LabelSelectorRequirement:
    key: str
    operator: str
    values: list[str] = field(default_factory=list)

    def _validate(self) -> None:
        if self.operator in (OPERATOR_IN, OPERATOR_NOT_IN):
            if not self.values:
                raise ValueError(
                    f"values for operator {self.operator!r} on key {self.key!r} can't be empty"
                )
        elif self.operator in (OPERATOR_EXISTS, OPERATOR_DOES_NOT_EXIST):
            if self.values:
                raise ValueError(
                    f"values for operator {self.operator!r} on key {self.key!r} must be empty"
                )
        else:
            raise ValueError(f"{self.operator!r} is not a valid label selector operator")

    def _matches(self, labels: Mapping[str, str]) -> bool:
        present = self.key in labels
        if self.operator == OPERATOR_IN:
            return present and labels[self.key] in self.values
        if self.operator == OPERATOR_NOT_IN:
            return not present or labels[self.key] not in self.values
        if self.operator == OPERATOR_EXISTS:
            return present
        return not present

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"key": self.key, "operator": self.operator}
        if self.values:
            out["values"] = list(self.values)
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> LabelSelectorRequirement:
        return cls(
            key=data.get("key", ""),
            operator=data.get("operator", ""),
            values=list(data.get("values") or []),
        )


@dataclass
class LabelSelector:
    """A label query: exact label matches plus set-based requirements."""

    match_labels: dict[str, str] = field(default_factory=dict)
    match_expressions: list[LabelSelectorRequirement] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.match_labels and not self.match_expressions

    def matches(self, labels: Mapping[str, str]) -> bool:
        """Whether the labels satisfy the selector; raise ValueError if it is invalid."""
        for requirement in self.match_expressions:
            requirement._validate()
        if any(labels.get(k) != v or k not in labels for k, v in self.match_labels.items()):
            return False
        return all(req._matches(labels) for req in self.match_expressions)

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.match_labels:
            out["matchLabels"] = dict(self.match_labels)
        if self.match_expressions:
            out["matchExpressions"] = [r._to_dict() for r in self.match_expressions]
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> LabelSelector:
        return cls(
            match_labels=dict(data.get("matchLabels") or {}),
            match_expressions=[
                LabelSelectorRequirement._from_dict(r) for r in data.get("matchExpressions") or []
            ],
        )


_META_FIELDS = (
    ("name", "name"),
    ("generate_name", "generateName"),
    ("namespace", "namespace"),
    ("uid", "uid"),
    ("resource_version", "resourceVersion"),
    ("generation", "generation"),
    ("creation_timestamp", "creationTimestamp"),
    ("deletion_timestamp", "deletionTimestamp"),
    ("deletion_grace_period_seconds", "deletionGracePeriodSeconds"),
    ("labels", "labels"),
    ("annotations", "annotations"),
    ("owner_references", "ownerReferences"),
    ("finalizers", "finalizers"),
    ("managed_fields", "managedFields"),
)


@dataclass
class ObjectMeta:
    name: str = ""
    generate_name: str = ""
    namespace: str = ""
    uid: str = ""
    resource_version: str = ""
    generation: int = 0
    creation_timestamp: Optional[str] = None
    deletion_timestamp: Optional[str] = None
    deletion_grace_period_seconds: Optional[int] = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    owner_references: list[dict[str, Any]] = field(default_factory=list)
    finalizers: list[str] = field(default_factory=list)
    managed_fields: Optional[list[dict[str, Any]]] = None

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for attr, key in _META_FIELDS:
            value = getattr(self, attr)
            if value:
                out[key] = value.copy() if isinstance(value, (dict, list)) else value
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> ObjectMeta:
        meta = cls()
        for attr, key in _META_FIELDS:
            if data.get(key) is not None:
                value = data[key]
                setattr(meta, attr, value.copy() if isinstance(value, (dict, list)) else value)
        return meta


@dataclass
class RollingUpdateStrategy:
    partition: Optional[int] = None
    max_unavailable: Optional[Union[int, str]] = None

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.partition is not None:
            out["partition"] = self.partition
        if self.max_unavailable is not None:
            out["maxUnavailable"] = self.max_unavailable
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> RollingUpdateStrategy:
        return cls(partition=data.get("partition"), max_unavailable=data.get("maxUnavailable"))


@dataclass
class UpdateStrategy:
    type: str = ""
    rolling_update: Optional[RollingUpdateStrategy] = None

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.type:
            out["type"] = self.type
        if self.rolling_update is not None:
            out["rollingUpdate"] = self.rolling_update._to_dict()
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> UpdateStrategy:
        rolling = data.get("rollingUpdate")
        return cls(
            type=data.get("type", ""),
            rolling_update=None if rolling is None else RollingUpdateStrategy._from_dict(rolling),
        )


@dataclass
class RetentionPolicy:
    """What happens to volume claims when the set is deleted or scaled down."""

    when_deleted: str = ""
    when_scaled: str = ""

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.when_deleted:
            out["whenDeleted"] = self.when_deleted
        if self.when_scaled:
            out["whenScaled"] = self.when_scaled
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> RetentionPolicy:
        return cls(when_deleted=data.get("whenDeleted", ""), when_scaled=data.get("whenScaled", ""))


@dataclass
class Ordinals:
    start: int = 0

    def _to_dict(self) -> dict[str, Any]:
        return {"start": self.start}

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> Ordinals:
        return cls(start=data.get("start", 0))


@dataclass
class StatefulSetCondition:
    type: str
    status: str
    last_transition_time: Optional[str] = None
    reason: str = ""
    message: str = ""

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type, "status": self.status}
        if self.last_transition_time:
            out["lastTransitionTime"] = self.last_transition_time
        if self.reason:
            out["reason"] = self.reason
        if self.message:
            out["message"] = self.message
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> StatefulSetCondition:
        return cls(
            type=data.get("type", ""),
            status=data.get("status", ""),
            last_transition_time=data.get("lastTransitionTime"),
            reason=data.get("reason", ""),
            message=data.get("message", ""),
        )


@dataclass
class XStatefulSetSpec:
    """Desired identities of the pods in the set."""

    replicas: Optional[int] = None
    selector: Optional[LabelSelector] = None
    template: dict[str, Any] = field(default_factory=dict)
    volume_claim_templates: list[dict[str, Any]] = field(default_factory=list)
    service_name: str = ""
    pod_management_policy: str = ""
    update_strategy: UpdateStrategy = field(default_factory=UpdateStrategy)
    revision_history_limit: Optional[int] = None
    min_ready_seconds: int = 0
    persistent_volume_claim_retention_policy: Optional[RetentionPolicy] = None
    ordinals: Optional[Ordinals] = None

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.replicas is not None:
            out["replicas"] = self.replicas
        out["selector"] = None if self.selector is None else self.selector._to_dict()
        out["template"] = dict(self.template)
        if self.volume_claim_templates:
            out["volumeClaimTemplates"] = list(self.volume_claim_templates)
        out["serviceName"] = self.service_name
        if self.pod_management_policy:
            out["podManagementPolicy"] = self.pod_management_policy
        out["updateStrategy"] = self.update_strategy._to_dict()
        if self.revision_history_limit is not None:
            out["revisionHistoryLimit"] = self.revision_history_limit
        if self.min_ready_seconds:
            out["minReadySeconds"] = self.min_ready_seconds
        if self.persistent_volume_claim_retention_policy is not None:
            out["persistentVolumeClaimRetentionPolicy"] = (
                self.persistent_volume_claim_retention_policy._to_dict()
            )
        if self.ordinals is not None:
            out["ordinals"] = self.ordinals._to_dict()
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> XStatefulSetSpec:
        selector = data.get("selector")
        policy = data.get("persistentVolumeClaimRetentionPolicy")
        ordinals = data.get("ordinals")
        return cls(
            replicas=data.get("replicas"),
            selector=None if selector is None else LabelSelector._from_dict(selector),
            template=dict(data.get("template") or {}),
            volume_claim_templates=list(data.get("volumeClaimTemplates") or []),
            service_name=data.get("serviceName", ""),
            pod_management_policy=data.get("podManagementPolicy", ""),
            update_strategy=UpdateStrategy._from_dict(data.get("updateStrategy") or {}),
            revision_history_limit=data.get("revisionHistoryLimit"),
            min_ready_seconds=data.get("minReadySeconds", 0),
            persistent_volume_claim_retention_policy=(
                None if policy is None else RetentionPolicy._from_dict(policy)
            ),
            ordinals=None if ordinals is None else Ordinals._from_dict(ordinals),
        )


_STATUS_OPTIONAL = (
    ("observed_generation", "observedGeneration"),
    ("ready_replicas", "readyReplicas"),
    ("current_replicas", "currentReplicas"),
    ("updated_replicas", "updatedReplicas"),
    ("current_revision", "currentRevision"),
    ("update_revision", "updateRevision"),
)


@dataclass
class XStatefulSetStatus:
    """Observed state of the pods in the set."""

    observed_generation: int = 0
    replicas: int = 0
    ready_replicas: int = 0
    current_replicas: int = 0
    updated_replicas: int = 0
    current_revision: str = ""
    update_revision: str = ""
    collision_count: Optional[int] = None
    conditions: list[StatefulSetCondition] = field(default_factory=list)
    available_replicas: int = 0
    selector: str = ""

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"replicas": self.replicas}
        for attr, key in _STATUS_OPTIONAL:
            value = getattr(self, attr)
            if value:
                out[key] = value
        if self.collision_count is not None:
            out["collisionCount"] = self.collision_count
        if self.conditions:
            out["conditions"] = [c._to_dict() for c in self.conditions]
        out["availableReplicas"] = self.available_replicas
        if self.selector:
            out["selector"] = self.selector
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> XStatefulSetStatus:
        status = cls(
            replicas=data.get("replicas", 0),
            collision_count=data.get("collisionCount"),
            conditions=[StatefulSetCondition._from_dict(c) for c in data.get("conditions") or []],
            available_replicas=data.get("availableReplicas", 0),
            selector=data.get("selector", ""),
        )
        for attr, key in _STATUS_OPTIONAL:
            if key in data:
                setattr(status, attr, data[key])
        return status


@dataclass
class XStatefulSet:
    """A set of pods with stable network and storage identities."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: XStatefulSetSpec = field(default_factory=XStatefulSetSpec)
    status: XStatefulSetStatus = field(default_factory=XStatefulSetStatus)
    api_version: str = API_VERSION
    kind: str = "XStatefulSet"

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.api_version:
            out["apiVersion"] = self.api_version
        if self.kind:
            out["kind"] = self.kind
        out["metadata"] = self.metadata._to_dict()
        out["spec"] = self.spec._to_dict()
        out["status"] = self.status._to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> XStatefulSet:
        return cls(
            metadata=ObjectMeta._from_dict(data.get("metadata") or {}),
            spec=XStatefulSetSpec._from_dict(data.get("spec") or {}),
            status=XStatefulSetStatus._from_dict(data.get("status") or {}),
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
        )


@dataclass
class XStatefulSetList:
    """A collection of XStatefulSets."""

    items: list[XStatefulSet] = field(default_factory=list)
    resource_version: str = ""
    continue_token: str = ""
    api_version: str = API_VERSION
    kind: str = "XStatefulSetList"


KNOWN_TYPES = {"XStatefulSet": XStatefulSet, "XStatefulSetList": XStatefulSetList}