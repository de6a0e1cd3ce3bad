"""Declarative apply configuration for an XStatefulSet status."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional


def _render(value: Any) -> Any:
    to_dict = getattr(value, "_to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, Mapping):
        return dict(value)
    return value


@dataclass
class XStatefulSetStatusApplyConfiguration:
    """Fields of an XStatefulSet status to apply; unset fields are ``None``.

    Every ``with_*`` method sets its field and returns the configuration so
    that calls can be chained.
    """

    observed_generation: Optional[int] = None
    replicas: Optional[int] = None
    ready_replicas: Optional[int] = None
    current_replicas: Optional[int] = None
    updated_replicas: Optional[int] = None
    current_revision: Optional[str] = None
    update_revision: Optional[str] = None
    collision_count: Optional[int] = None
    conditions: list[Any] = field(default_factory=list)
    available_replicas: Optional[int] = None
    selector: Optional[str] = None

    def with_observed_generation(self, value: int) -> XStatefulSetStatusApplyConfiguration:
        self.observed_generation = value
        return self

    def with_replicas(self, value: int) -> XStatefulSetStatusApplyConfiguration:
        self.replicas = value
        return self

    def with_ready_replicas(self, value: int) -> XStatefulSetStatusApplyConfiguration:
        self.ready_replicas = value
        return self

    def with_current_replicas(self, value: int) -> XStatefulSetStatusApplyConfiguration:
        self.current_replicas = value
        return self

    def with_updated_replicas(self, value: int) -> XStatefulSetStatusApplyConfiguration:
        self.updated_replicas = value
        return self

    def with_current_revision(self, value: str) -> XStatefulSetStatusApplyConfiguration:
        self.current_revision = value
        return self

    def with_update_revision(self, value: str) -> XStatefulSetStatusApplyConfiguration:
        self.update_revision = value
        return self

    def with_collision_count(self, value: int) -> XStatefulSetStatusApplyConfiguration:
        self.collision_count = value
        return self

    def with_conditions(self, *args: Any) -> XStatefulSetStatusApplyConfiguration:
        """Append conditions; ``None`` among them is rejected."""
        if any(value is None for value in args):
            raise ValueError("nil value passed to WithConditions")
        self.conditions.extend(args)
        return self

    def with_available_replicas(self, value: int) -> XStatefulSetStatusApplyConfiguration:
        self.available_replicas = value
        return self

    def with_selector(self, value: str) -> XStatefulSetStatusApplyConfiguration:
        self.selector = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """The wire form, leaving out every field that was not set."""
        fields = (
            ("observedGeneration", self.observed_generation),
            ("replicas", self.replicas),
            ("readyReplicas", self.ready_replicas),
            ("currentReplicas", self.current_replicas),
            ("updatedReplicas", self.updated_replicas),
            ("currentRevision", self.current_revision),
            ("updateRevision", self.update_revision),
            ("collisionCount", self.collision_count),
            ("availableReplicas", self.available_replicas),
            ("selector", self.selector),
        )
        out: dict[str, Any] = {key: value for key, value in fields if value is not None}
        if self.conditions:
            out["conditions"] = [_render(c) for c in self.conditions]
        return out