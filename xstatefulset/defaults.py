"""Default values applied to an XStatefulSet before it is stored."""

from __future__ import annotations

from xstatefulset.types import (
    ORDERED_READY_POD_MANAGEMENT,
    RETAIN_RETENTION_POLICY,
    ROLLING_UPDATE_STRATEGY_TYPE,
    RetentionPolicy,
    RollingUpdateStrategy,
    XStatefulSet,
)

DEFAULT_REPLICAS = 1
DEFAULT_REVISION_HISTORY_LIMIT = 10
DEFAULT_PARTITION = 0
DEFAULT_MAX_UNAVAILABLE = 1


def set_defaults(obj: XStatefulSet, max_unavailable_enabled: bool = False) -> None:
    """Fill in unset fields of ``obj.spec`` in place.

    ``max_unavailable_enabled`` stands for the ``MaxUnavailableStatefulSet``
    feature gate: when on, a rolling update without ``maxUnavailable`` gets 1.
    """
    spec = obj.spec

    if not spec.pod_management_policy:
        spec.pod_management_policy = ORDERED_READY_POD_MANAGEMENT

    strategy = spec.update_strategy
    if not strategy.type:
        strategy.type = ROLLING_UPDATE_STRATEGY_TYPE
        if strategy.rolling_update is None:
            strategy.rolling_update = RollingUpdateStrategy()

    rolling = strategy.rolling_update
    if strategy.type == ROLLING_UPDATE_STRATEGY_TYPE and rolling is not None:
        if rolling.partition is None:
            rolling.partition = DEFAULT_PARTITION
        if max_unavailable_enabled and rolling.max_unavailable is None:
            rolling.max_unavailable = DEFAULT_MAX_UNAVAILABLE

    if spec.persistent_volume_claim_retention_policy is None:
        spec.persistent_volume_claim_retention_policy = RetentionPolicy()
    policy = spec.persistent_volume_claim_retention_policy
    if not policy.when_deleted:
        policy.when_deleted = RETAIN_RETENTION_POLICY
    if not policy.when_scaled:
        policy.when_scaled = RETAIN_RETENTION_POLICY

    if spec.replicas is None:
        spec.replicas = DEFAULT_REPLICAS
    if spec.revision_history_limit is None:
        spec.revision_history_limit = DEFAULT_REVISION_HISTORY_LIMIT