"""An in-memory XStatefulSet client that records every request it serves."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from xstatefulset.apply import XStatefulSetApplyConfiguration
from xstatefulset.types import (
    SCHEME_GROUP_VERSION,
    AlreadyExistsError,
    NotFoundError,
    XStatefulSet,
    XStatefulSetList,
)

RESOURCE = SCHEME_GROUP_VERSION.with_resource("xstatefulsets")
KIND = SCHEME_GROUP_VERSION.with_kind("XStatefulSet")
SCALE_SUBRESOURCE = "scale"
STATUS_SUBRESOURCE = "status"


@dataclass
class Scale:
    """The scale subresource of an XStatefulSet."""

    name: str = ""
    namespace: str = ""
    replicas: int = 0
    status_replicas: int = 0
    selector: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": "autoscaling/v1",
            "kind": "Scale",
            "metadata": {"name": self.name, "namespace": self.namespace},
            "spec": {"replicas": self.replicas},
            "status": {"replicas": self.status_replicas, "selector": self.selector},
        }


@dataclass
class Action:
    """One request made through the client."""

    verb: str
    resource: Any
    namespace: str
    name: str = ""
    subresource: str = ""
    obj: Any = None


def _merge(base: dict[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for key, value in patch.items():
        current = out.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            out[key] = _merge(current, value)
        else:
            out[key] = copy.deepcopy(value)
    return out


class FakeClientset:
    """Holds XStatefulSets in memory and records the actions made on them."""

    def __init__(self, *objects: XStatefulSet) -> None:
        self._store: dict[tuple[str, str], XStatefulSet] = {}
        self.actions: list[Action] = []
        for obj in objects:
            key = (obj.metadata.namespace, obj.metadata.name)
            self._store[key] = copy.deepcopy(obj)

    def xstatefulsets(self, namespace: str) -> FakeXStatefulSets:
        return FakeXStatefulSets(self, namespace)

    def clear_actions(self) -> None:
        self.actions.clear()


class FakeXStatefulSets:
    """Operations on the XStatefulSets of one namespace of a FakeClientset."""

    def __init__(self, clientset: FakeClientset, namespace: str) -> None:
        self._clientset = clientset
        self.namespace = namespace

    @property
    def _store(self) -> dict[tuple[str, str], XStatefulSet]:
        return self._clientset._store

    def _record(self, verb: str, name: str = "", subresource: str = "", obj: Any = None) -> None:
        self._clientset.actions.append(
            Action(
                verb=verb,
                resource=RESOURCE,
                namespace=self.namespace,
                name=name,
                subresource=subresource,
                obj=copy.deepcopy(obj),
            )
        )

    def _prepare(self, obj: XStatefulSet) -> XStatefulSet:
        obj = copy.deepcopy(obj)
        if not obj.metadata.name:
            raise ValueError("object has no name")
        if not obj.metadata.namespace:
            obj.metadata.namespace = self.namespace
        elif self.namespace and obj.metadata.namespace != self.namespace:
            raise ValueError(
                f"request namespace {self.namespace!r} does not match "
                f"object namespace {obj.metadata.namespace!r}"
            )
        return obj

    def _existing(self, name: str) -> XStatefulSet:
        try:
            return self._store[(self.namespace, name)]
        except KeyError:
            raise NotFoundError(RESOURCE.group_resource(), name) from None

    def create(self, obj: XStatefulSet) -> XStatefulSet:
        """Store a new object; raise AlreadyExistsError if the name is taken."""
        self._record("create", obj.metadata.name, obj=obj)
        stored = self._prepare(obj)
        key = (stored.metadata.namespace, stored.metadata.name)
        if key in self._store:
            raise AlreadyExistsError(RESOURCE.group_resource(), stored.metadata.name)
        self._store[key] = stored
        return copy.deepcopy(stored)

    def update(self, obj: XStatefulSet) -> XStatefulSet:
        """Replace a stored object; raise NotFoundError if it is absent."""
        self._record("update", obj.metadata.name, obj=obj)
        stored = self._prepare(obj)
        key = (stored.metadata.namespace, stored.metadata.name)
        if key not in self._store:
            raise NotFoundError(RESOURCE.group_resource(), stored.metadata.name)
        self._store[key] = stored
        return copy.deepcopy(stored)

    def update_status(self, obj: XStatefulSet) -> XStatefulSet:
        """Replace only the status of a stored object."""
        self._record("update", obj.metadata.name, STATUS_SUBRESOURCE, obj)
        incoming = self._prepare(obj)
        current = self._existing(incoming.metadata.name)
        current.status = incoming.status
        return copy.deepcopy(current)

    def delete(self, name: str) -> None:
        self._record("delete", name)
        self._existing(name)
        del self._store[(self.namespace, name)]

    def delete_collection(self) -> None:
        """Delete every object in the namespace (all objects for ``""``)."""
        self._record("delete-collection")
        for key in [k for k in self._store if not self.namespace or k[0] == self.namespace]:
            del self._store[key]

    def get(self, name: str) -> XStatefulSet:
        self._record("get", name)
        return copy.deepcopy(self._existing(name))

    def list(self) -> XStatefulSetList:
        self._record("list")
        items = [
            copy.deepcopy(obj)
            for (ns, _), obj in self._store.items()
            if not self.namespace or ns == self.namespace
        ]
        return XStatefulSetList(items=items)

    def apply(self, config: Optional[XStatefulSetApplyConfiguration]) -> XStatefulSet:
        """Merge the configuration into the named object, creating it if absent."""
        if config is None:
            raise ValueError("xStatefulSet provided to Apply must not be nil")
        if config.name is None:
            raise ValueError("xStatefulSet.Name must be provided to Apply")
        patch = config.to_dict()
        self._record("patch", config.name, obj=patch)
        current = self._store.get((self.namespace, config.name))
        base = (current or XStatefulSet()).to_dict()
        merged = XStatefulSet.from_dict(_merge(base, patch))
        stored = self._prepare(merged)
        self._store[(stored.metadata.namespace, stored.metadata.name)] = stored
        return copy.deepcopy(stored)

    def get_scale(self, name: str) -> Scale:
        self._record("get", name, SCALE_SUBRESOURCE)
        obj = self._existing(name)
        return Scale(
            name=obj.metadata.name,
            namespace=obj.metadata.namespace,
            replicas=obj.spec.replicas or 0,
            status_replicas=obj.status.replicas,
            selector=obj.status.selector,
        )

    def _set_replicas(self, name: str, scale: Scale) -> Scale:
        obj = self._existing(name)
        obj.spec.replicas = scale.replicas
        return Scale(
            name=obj.metadata.name,
            namespace=obj.metadata.namespace,
            replicas=scale.replicas,
            status_replicas=obj.status.replicas,
            selector=obj.status.selector,
        )

    def update_scale(self, name: str, scale: Scale) -> Scale:
        """Set the desired replicas of the named object from ``scale``."""
        self._record("update", name, SCALE_SUBRESOURCE, scale)
        return self._set_replicas(name, scale)

    def apply_scale(self, name: str, scale: Optional[Scale]) -> Scale:
        if scale is None:
            raise ValueError("scale provided to ApplyScale must not be nil")
        self._record("patch", name, SCALE_SUBRESOURCE, scale.to_dict())
        return self._set_replicas(name, scale)