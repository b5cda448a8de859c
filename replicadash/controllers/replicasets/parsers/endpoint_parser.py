"""Endpoint parser for replica set controller - derives service endpoints."""

from __future__ import annotations

from typing import Any

from replicadash.constants.values import DEFAULT_PORT_PROTOCOL
from replicadash.models.core.replica_set_info import EndpointInfo, ServicePortInfo


class EndpointParser:
    """Parses service data into internal and external endpoints."""

    def __init__(self) -> None:
        """Initialize endpoint parser."""
        pass

    @staticmethod
    def parse_ports(service: dict[str, Any]) -> list[ServicePortInfo]:
        """Parse spec.ports of a service, keeping declaration order."""
        return [
            ServicePortInfo(
                port=port.get("port", 0),
                protocol=port.get("protocol") or DEFAULT_PORT_PROTOCOL,
            )
            for port in service.get("spec", {}).get("ports") or []
        ]

    def get_internal_endpoint(self, service: dict[str, Any]) -> EndpointInfo:
        """Build the cluster-local endpoint of a service."""
        metadata = service.get("metadata", {})
        return EndpointInfo(
            host=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            ports=self.parse_ports(service),
        )

    def get_external_endpoints(self, service: dict[str, Any]) -> list[EndpointInfo]:
        """Build one endpoint per load balancer ingress entry of a service."""
        ingress = (
            service.get("status", {}).get("loadBalancer", {}).get("ingress") or []
        )
        ports = self.parse_ports(service)
        return [
            EndpointInfo(host=entry.get("ip") or entry.get("hostname", ""), ports=ports)
            for entry in ingress
        ]

    def parse_endpoints(
        self, services: list[dict[str, Any]]
    ) -> tuple[list[EndpointInfo], list[EndpointInfo]]:
        """Derive endpoints from services targeting a replica set.

        Args:
            services: Matching services, in listing order

        Returns:
            Tuple of (internal endpoints, external endpoints).
        """
        internal_endpoints: list[EndpointInfo] = []
        external_endpoints: list[EndpointInfo] = []
        for service in services:
            internal_endpoints.append(self.get_internal_endpoint(service))
            external_endpoints.extend(self.get_external_endpoints(service))
        return internal_endpoints, external_endpoints
