"""Replica set parser - joins replica sets, services and pods into list rows."""

from __future__ import annotations

import logging
from typing import Any

from replicadash.constants.values import DESCRIPTION_ANNOTATION_KEY
from replicadash.controllers.replicasets.parsers.endpoint_parser import EndpointParser
from replicadash.controllers.replicasets.parsers.pod_status_parser import (
    PodStatusParser,
)
from replicadash.models.core.replica_set_info import ReplicaSetInfo, ReplicaSetList
from replicadash.utils.label_selector import get_replica_set_selector, matches

logger = logging.getLogger(__name__)


def get_matching_services(
    services: list[dict[str, Any]], replica_set: dict[str, Any]
) -> list[dict[str, Any]]:
    """Return services that target the same pods (or a subset) as replica_set."""
    namespace = replica_set.get("metadata", {}).get("namespace")
    selector = get_replica_set_selector(replica_set)
    return [
        service
        for service in services
        if service.get("metadata", {}).get("namespace") == namespace
        and matches(service.get("spec", {}).get("selector"), selector)
    ]


class ReplicaSetParser:
    """Assembles ReplicaSetInfo rows from raw API objects."""

    def __init__(self) -> None:
        """Initialize replica set parser."""
        self._endpoint_parser = EndpointParser()
        self._pod_status_parser = PodStatusParser()

    @staticmethod
    def get_container_images(replica_set: dict[str, Any]) -> list[str]:
        """Images of every container in the pod template, in template order."""
        containers = (
            replica_set.get("spec", {})
            .get("template", {})
            .get("spec", {})
            .get("containers")
            or []
        )
        return [container.get("image", "") for container in containers]

    def parse_replica_set(
        self,
        replica_set: dict[str, Any],
        services: list[dict[str, Any]],
        pods: list[dict[str, Any]],
    ) -> ReplicaSetInfo:
        """Build one ReplicaSetInfo row for a raw replica set."""
        metadata = replica_set.get("metadata", {})
        annotations = metadata.get("annotations") or {}

        matching_services = get_matching_services(services, replica_set)
        internal_endpoints, external_endpoints = self._endpoint_parser.parse_endpoints(
            matching_services
        )

        return ReplicaSetInfo(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            description=annotations.get(DESCRIPTION_ANNOTATION_KEY, ""),
            labels=metadata.get("labels") or {},
            pods=self._pod_status_parser.parse_pod_info(replica_set, pods),
            container_images=self.get_container_images(replica_set),
            creation_time=metadata.get("creationTimestamp"),
            internal_endpoints=internal_endpoints,
            external_endpoints=external_endpoints,
        )

    def build_replica_set_list(
        self,
        replica_sets: list[dict[str, Any]],
        services: list[dict[str, Any]],
        pods: list[dict[str, Any]],
    ) -> ReplicaSetList:
        """Join replica sets with their services and pods.

        Args:
            replica_sets: Raw replica set dictionaries, in listing order
            services: Raw service dictionaries from all namespaces
            pods: Raw pod dictionaries from all namespaces

        Returns:
            ReplicaSetList with one row per replica set.
        """
        rows = [
            self.parse_replica_set(replica_set, services, pods)
            for replica_set in replica_sets
        ]
        logger.debug(
            "Built %d replica set rows from %d services and %d pods",
            len(rows),
            len(services),
            len(pods),
        )
        return ReplicaSetList(replica_sets=rows)
