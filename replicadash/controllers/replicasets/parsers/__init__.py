"""Parsers for replica set controller."""

from replicadash.controllers.replicasets.parsers.endpoint_parser import EndpointParser
from replicadash.controllers.replicasets.parsers.pod_status_parser import (
    PodStatusParser,
)
from replicadash.controllers.replicasets.parsers.replica_set_parser import (
    ReplicaSetParser,
    get_matching_services,
)

__all__ = [
    "EndpointParser",
    "PodStatusParser",
    "ReplicaSetParser",
    "get_matching_services",
]
