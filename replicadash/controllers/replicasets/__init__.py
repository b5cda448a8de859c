"""Init file for replica set module."""

from replicadash.controllers.replicasets.fetchers import (
    ResourceFetcher,
    ResourceFetchError,
)
from replicadash.controllers.replicasets.parsers import (
    EndpointParser,
    PodStatusParser,
    ReplicaSetParser,
)

__all__ = [
    "EndpointParser",
    "PodStatusParser",
    "ReplicaSetParser",
    "ResourceFetchError",
    "ResourceFetcher",
]
