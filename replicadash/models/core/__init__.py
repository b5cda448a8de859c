"""Core cluster view models."""

from replicadash.models.core.replica_set_info import (
    EndpointInfo,
    ReplicaSetInfo,
    ReplicaSetList,
    ReplicaSetPodInfo,
    ServicePortInfo,
)

__all__ = [
    "EndpointInfo",
    "ReplicaSetInfo",
    "ReplicaSetList",
    "ReplicaSetPodInfo",
    "ServicePortInfo",
]
