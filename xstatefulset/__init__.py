"""XStatefulSet resource model, defaulting, apply configurations, lister and in-memory fake client."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "defaults",
    "apply_spec",
    "apply_status",
    "lister",
    "apply",
    "client",
]