"""Declarative apply configuration for a whole XStatefulSet."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from xstatefulset.apply_spec import XStatefulSetSpecApplyConfiguration
from xstatefulset.apply_status import XStatefulSetStatusApplyConfiguration
from xstatefulset.types import API_VERSION, SCHEME_GROUP_VERSION

KIND = "XStatefulSet"

_META_KEYS = (
    ("name", "name"),
    ("generate_name", "generateName"),
    ("namespace", "namespace"),
    ("uid", "uid"),
    ("resource_version", "resourceVersion"),
    ("generation", "generation"),
    ("creation_timestamp", "creationTimestamp"),
    ("deletion_timestamp", "deletionTimestamp"),
    ("deletion_grace_period_seconds", "deletionGracePeriodSeconds"),
)


def _render(value: Any) -> Any:
    for name in ("to_dict", "_to_dict"):
        method = getattr(value, name, None)
        if callable(method):
            return method()
    if isinstance(value, Mapping):
        return dict(value)
    return value


@dataclass
class XStatefulSetApplyConfiguration:
    """Fields of an XStatefulSet to apply; unset fields are ``None``.

    Every ``with_*`` method sets its field and returns the configuration so
    that calls can be chained.
    """

    kind: Optional[str] = None
    api_version: Optional[str] = None
    name: Optional[str] = None
    generate_name: Optional[str] = None
    namespace: Optional[str] = None
    uid: Optional[str] = None
    resource_version: Optional[str] = None
    generation: Optional[int] = None
    creation_timestamp: Optional[str] = None
    deletion_timestamp: Optional[str] = None
    deletion_grace_period_seconds: Optional[int] = None
    labels: Optional[dict[str, str]] = None
    annotations: Optional[dict[str, str]] = None
    owner_references: list[Any] = field(default_factory=list)
    finalizers: list[str] = field(default_factory=list)
    spec: Optional[XStatefulSetSpecApplyConfiguration] = None
    status: Optional[XStatefulSetStatusApplyConfiguration] = None

    def with_kind(self, value: str) -> XStatefulSetApplyConfiguration:
        self.kind = value
        return self

    def with_api_version(self, value: str) -> XStatefulSetApplyConfiguration:
        self.api_version = value
        return self

    def with_name(self, value: str) -> XStatefulSetApplyConfiguration:
        self.name = value
        return self

    def with_generate_name(self, value: str) -> XStatefulSetApplyConfiguration:
        self.generate_name = value
        return self

    def with_namespace(self, value: str) -> XStatefulSetApplyConfiguration:
        self.namespace = value
        return self

    def with_uid(self, value: str) -> XStatefulSetApplyConfiguration:
        self.uid = value
        return self

    def with_resource_version(self, value: str) -> XStatefulSetApplyConfiguration:
        self.resource_version = value
        return self

    def with_generation(self, value: int) -> XStatefulSetApplyConfiguration:
        self.generation = value
        return self

    def with_creation_timestamp(self, value: str) -> XStatefulSetApplyConfiguration:
        self.creation_timestamp = value
        return self

    def with_deletion_timestamp(self, value: str) -> XStatefulSetApplyConfiguration:
        self.deletion_timestamp = value
        return self

    def with_deletion_grace_period_seconds(self, value: int) -> XStatefulSetApplyConfiguration:
        self.deletion_grace_period_seconds = value
        return self

    def with_labels(self, entries: Mapping[str, str]) -> XStatefulSetApplyConfiguration:
        """Merge entries into the labels, overwriting keys already present."""
        if self.labels is None and entries:
            self.labels = {}
        if entries:
            self.labels.update(entries)
        return self

    def with_annotations(self, entries: Mapping[str, str]) -> XStatefulSetApplyConfiguration:
        """Merge entries into the annotations, overwriting keys already present."""
        if self.annotations is None and entries:
            self.annotations = {}
        if entries:
            self.annotations.update(entries)
        return self

    def with_owner_references(self, *args: Any) -> XStatefulSetApplyConfiguration:
        """Append owner references; ``None`` among them is rejected."""
        if any(value is None for value in args):
            raise ValueError("nil value passed to WithOwnerReferences")
        self.owner_references.extend(args)
        return self

    def with_finalizers(self, *args: str) -> XStatefulSetApplyConfiguration:
        self.finalizers.extend(args)
        return self

    def with_spec(
        self, value: Optional[XStatefulSetSpecApplyConfiguration]
    ) -> XStatefulSetApplyConfiguration:
        self.spec = value
        return self

    def with_status(
        self, value: Optional[XStatefulSetStatusApplyConfiguration]
    ) -> XStatefulSetApplyConfiguration:
        self.status = value
        return self

    def _metadata(self) -> dict[str, Any]:
        meta: dict[str, Any] = {
            key: getattr(self, attr)
            for attr, key in _META_KEYS
            if getattr(self, attr) is not None
        }
        if self.labels is not None:
            meta["labels"] = dict(self.labels)
        if self.annotations is not None:
            meta["annotations"] = dict(self.annotations)
        if self.owner_references:
            meta["ownerReferences"] = [_render(r) for r in self.owner_references]
        if self.finalizers:
            meta["finalizers"] = list(self.finalizers)
        return meta

    def to_dict(self) -> dict[str, Any]:
        """The wire form, leaving out every field that was not set."""
        out: dict[str, Any] = {}
        if self.api_version is not None:
            out["apiVersion"] = self.api_version
        if self.kind is not None:
            out["kind"] = self.kind
        metadata = self._metadata()
        if metadata:
            out["metadata"] = metadata
        if self.spec is not None:
            out["spec"] = _render(self.spec)
        if self.status is not None:
            out["status"] = _render(self.status)
        return out


def x_stateful_set(name: str, namespace: str) -> XStatefulSetApplyConfiguration:
    """A configuration for the named XStatefulSet with its kind and API version set."""
    return (
        XStatefulSetApplyConfiguration()
        .with_name(name)
        .with_namespace(namespace)
        .with_kind(KIND)
        .with_api_version(API_VERSION)
    )


_FOR_KIND = {
    SCHEME_GROUP_VERSION.with_kind("XStatefulSet"): XStatefulSetApplyConfiguration,
    SCHEME_GROUP_VERSION.with_kind("XStatefulSetSpec"): XStatefulSetSpecApplyConfiguration,
    SCHEME_GROUP_VERSION.with_kind("XStatefulSetStatus"): XStatefulSetStatusApplyConfiguration,
}


def for_kind(
    kind: tuple[str, str, str],
) -> Union[
    XStatefulSetApplyConfiguration,
    XStatefulSetSpecApplyConfiguration,
    XStatefulSetStatusApplyConfiguration,
    None,
]:
    """An empty apply configuration for the group/version/kind, or None if there is none."""
    factory = _FOR_KIND.get(tuple(kind))
    return None if factory is None else factory()