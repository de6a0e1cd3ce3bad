# xstatefulset

A pure-Python model of the `XStatefulSet` custom resource (group
`apps.x-k8s.io`, version `v1`), with the pieces needed to work with it in
memory: defaulting, chainable apply configurations, a lister and a fake
client that records what is done through it.

## Modules

- `xstatefulset.types`: the resource itself (`XStatefulSet`,
  `XStatefulSetSpec`, `XStatefulSetStatus`, `XStatefulSetList`) and its parts
  (`ObjectMeta`, `UpdateStrategy`, `RollingUpdateStrategy`,
  `RetentionPolicy`, `Ordinals`, `StatefulSetCondition`), label selectors
  (`LabelSelector`, `LabelSelectorRequirement`), `GroupVersion` and
  `resource()`, and the `NotFoundError` and `AlreadyExistsError` exceptions.
  `XStatefulSet.to_dict()` and `XStatefulSet.from_dict()` convert to and from
  the camel-case wire form.
- `xstatefulset.defaults`: `set_defaults(obj, max_unavailable_enabled=False)`
  fills in unset fields in place: pod management policy `OrderedReady`, a
  `RollingUpdate` strategy with partition 0 (and `maxUnavailable` 1 when
  `max_unavailable_enabled` is true), `Retain` for both PVC retention
  settings, 1 replica and a revision history limit of 10.
- `xstatefulset.apply_spec` and `xstatefulset.apply_status`:
  `XStatefulSetSpecApplyConfiguration` and
  `XStatefulSetStatusApplyConfiguration`, whose `with_*` methods set a field
  and return the configuration. `to_dict()` leaves out unset fields.
- `xstatefulset.apply`: `XStatefulSetApplyConfiguration` for a whole object,
  `x_stateful_set(name, namespace)` which presets name, namespace, kind and
  API version, and `for_kind(kind)` which returns an empty configuration for
  a known group/version/kind or `None`.
- `xstatefulset.lister`: `XStatefulSetLister` (`add`, `remove`, `list`,
  `namespaced`, `get_pod_stateful_sets`) and `XStatefulSetNamespaceLister`
  (`list`, `get`). `get_pod_stateful_sets(pod)` takes a `Pod` and returns the
  sets in its namespace whose non-empty selector matches its labels; it
  raises `LookupError` when the pod has no labels or nothing matches.
- `xstatefulset.client`: `FakeClientset`, an in-memory store whose
  `xstatefulsets(namespace)` gives a `FakeXStatefulSets` with `create`,
  `update`, `update_status`, `delete`, `delete_collection`, `get`, `list`,
  `apply`, `get_scale`, `update_scale` and `apply_scale`. Every call is
  appended to `FakeClientset.actions` as an `Action`; `Scale` models the
  scale subresource.

## Installation

```
pip install .
```

Only the Python standard library is needed. Python 3.10 or later is
required.

## Example

```python
from xstatefulset.types import XStatefulSet, ObjectMeta, LabelSelector
from xstatefulset.defaults import set_defaults
from xstatefulset.apply import x_stateful_set
from xstatefulset.apply_spec import XStatefulSetSpecApplyConfiguration
from xstatefulset.client import FakeClientset

sts = XStatefulSet(metadata=ObjectMeta(name="web", namespace="default"))
sts.spec.selector = LabelSelector(match_labels={"app": "web"})
set_defaults(sts)
print(sts.spec.replicas)  # 1

client = FakeClientset(sts)
config = x_stateful_set("web", "default").with_spec(
    XStatefulSetSpecApplyConfiguration().with_replicas(3)
)
updated = client.xstatefulsets("default").apply(config)
print(updated.spec.replicas)  # 3
print([action.verb for action in client.actions])  # ['patch']
```

## What this package does not do

It does not talk to a cluster. There is no real API client, no watch or
informer machinery that keeps a cache in sync, no controller that
reconciles pods, and no admission webhook or command to run. The lister and
the fake client keep their objects in memory only.

## Running the tests

```
pip install .[test]
pytest
```