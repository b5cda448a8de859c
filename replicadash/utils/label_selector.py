"""Label selector helpers shared by service and pod matching."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def matches(
    selector: Mapping[str, str] | None,
    candidate_labels: Mapping[str, str] | None,
) -> bool:
    """Return True when every selector pair is present in candidate_labels.

    An empty selector matches nothing, so a service without a selector is
    never treated as targeting every pod.

    Args:
        selector: Required label key/value pairs.
        candidate_labels: Labels (or selector) of the object being tested.

    Returns:
        True if candidate_labels contains all of selector.
    """
    if not selector:
        return False
    labels = candidate_labels or {}
    for key, value in selector.items():
        if key not in labels or labels[key] != value:
            return False
    return True


def get_replica_set_selector(replica_set: dict[str, Any]) -> dict[str, str]:
    """Extract the equality selector of a ReplicationController or ReplicaSet.

    ReplicationControllers carry a plain map under spec.selector; apps/v1
    ReplicaSets nest it under spec.selector.matchLabels. matchExpressions are
    not evaluated, so any selector carrying them yields an empty selector and
    matches nothing.
    """
    selector = replica_set.get("spec", {}).get("selector") or {}
    if selector.get("matchExpressions"):
        return {}
    match_labels = selector.get("matchLabels")
    if isinstance(match_labels, dict):
        return match_labels
    if "matchExpressions" in selector:
        return {}
    return selector
