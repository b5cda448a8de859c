"""Pod status parser for replica set controller - aggregates pod phases."""

from __future__ import annotations

from typing import Any

from replicadash.constants.enums import PodPhase
from replicadash.models.core.replica_set_info import ReplicaSetPodInfo
from replicadash.utils.label_selector import get_replica_set_selector, matches


class PodStatusParser:
    """Counts live pods of a replica set by lifecycle phase."""

    def __init__(self) -> None:
        """Initialize pod status parser."""
        pass

    def parse_pod_info(
        self, replica_set: dict[str, Any], pods: list[dict[str, Any]]
    ) -> ReplicaSetPodInfo:
        """Build ReplicaSetPodInfo for a replica set.

        Desired and current counts are read as declared on the replica set.
        Running, waiting and failed come from scanning pods that share the
        namespace and match the selector. Succeeded and Unknown pods are not
        counted.

        Args:
            replica_set: Raw replica set dictionary from API
            pods: Raw pod dictionaries from all namespaces

        Returns:
            ReplicaSetPodInfo object.
        """
        namespace = replica_set.get("metadata", {}).get("namespace")
        selector = get_replica_set_selector(replica_set)

        running = waiting = failed = 0
        for pod in pods:
            metadata = pod.get("metadata", {})
            if metadata.get("namespace") != namespace:
                continue
            if not matches(selector, metadata.get("labels")):
                continue

            phase = pod.get("status", {}).get("phase")
            if phase == PodPhase.RUNNING.value:
                running += 1
            elif phase == PodPhase.PENDING.value:
                waiting += 1
            elif phase == PodPhase.FAILED.value:
                failed += 1

        return ReplicaSetPodInfo(
            current=replica_set.get("status", {}).get("replicas") or 0,
            desired=replica_set.get("spec", {}).get("replicas") or 0,
            running=running,
            waiting=waiting,
            failed=failed,
        )
