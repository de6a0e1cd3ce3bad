"""In-memory listing and lookup of XStatefulSets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from xstatefulset.types import LabelSelector, NotFoundError, XStatefulSet, resource

_RESOURCE = resource("xstatefulset")


@dataclass
class Pod:
    """The parts of a pod that matter for finding its XStatefulSets."""

    name: str
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)


def _selected(objects: Iterable[XStatefulSet], selector: Optional[LabelSelector]) -> list[XStatefulSet]:
    if selector is None:
        return list(objects)
    return [obj for obj in objects if selector.matches(obj.metadata.labels)]


class XStatefulSetLister:
    """Lists XStatefulSets held in a store keyed by namespace and name.

    Objects handed out are shared with the store and must be treated as
    read-only.
    """

    def __init__(self, objects: Iterable[XStatefulSet] = ()) -> None:
        self._store: dict[tuple[str, str], XStatefulSet] = {}
        for obj in objects:
            self.add(obj)

    @staticmethod
    def _key(obj: XStatefulSet) -> tuple[str, str]:
        return (obj.metadata.namespace, obj.metadata.name)

    def add(self, obj: XStatefulSet) -> None:
        """Add an object, replacing any with the same namespace and name."""
        self._store[self._key(obj)] = obj

    def remove(self, obj: XStatefulSet) -> None:
        """Remove an object; removing one that is absent does nothing."""
        self._store.pop(self._key(obj), None)

    def list(self, selector: Optional[LabelSelector] = None) -> list[XStatefulSet]:
        """All objects whose labels match ``selector``; ``None`` matches all."""
        return _selected(self._store.values(), selector)

    def namespaced(self, namespace: str) -> XStatefulSetNamespaceLister:
        return XStatefulSetNamespaceLister(self, namespace)

    def _in_namespace(self, namespace: str) -> list[XStatefulSet]:
        if not namespace:
            return list(self._store.values())
        return [obj for (ns, _), obj in self._store.items() if ns == namespace]

    def get_pod_stateful_sets(self, pod: Pod) -> list[XStatefulSet]:
        """XStatefulSets in the pod's namespace whose selector matches the pod.

        Raises LookupError when the pod has no labels or nothing matches.
        """
        if not pod.labels:
            raise LookupError(
                f"no StatefulSets found for pod {pod.name} because it has no labels"
            )
        matched = []
        for obj in self.namespaced(pod.namespace).list():
            if obj.metadata.namespace != pod.namespace:
                continue
            selector = obj.spec.selector
            # A missing or empty selector matches nothing, not everything.
            if selector is None or selector.is_empty():
                continue
            try:
                if not selector.matches(pod.labels):
                    continue
            except ValueError:
                continue
            matched.append(obj)
        if not matched:
            raise LookupError(
                f"could not find StatefulSet for pod {pod.name} in namespace "
                f"{pod.namespace} with labels: {pod.labels}"
            )
        return matched


class XStatefulSetNamespaceLister:
    """Lists and gets XStatefulSets in one namespace; ``""`` means all."""

    def __init__(self, lister: XStatefulSetLister, namespace: str) -> None:
        self._lister = lister
        self.namespace = namespace

    def list(self, selector: Optional[LabelSelector] = None) -> list[XStatefulSet]:
        return _selected(self._lister._in_namespace(self.namespace), selector)

    def get(self, name: str) -> XStatefulSet:
        """The object with this name; raise NotFoundError if there is none."""
        try:
            return self._lister._store[(self.namespace, name)]
        except KeyError:
            raise NotFoundError(_RESOURCE, name) from None