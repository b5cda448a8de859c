"""Resource fetcher for replica set controller - lists raw objects from cluster."""

from __future__ import annotations

import json
import logging
from typing import Any

from replicadash.constants.enums import ReplicaSetKind
from replicadash.constants.timeouts import CLUSTER_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class ResourceFetchError(RuntimeError):
    """Raised when kubectl returns output that is not a resource list."""


class ResourceFetcher:
    """Fetches replica sets, services and pods across all namespaces."""

    def __init__(
        self,
        run_kubectl_func: Any,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
            request_timeout: Value passed to kubectl --request-timeout
        """
        self._run_kubectl = run_kubectl_func
        self.request_timeout = request_timeout

    def _build_list_args(self, resource: str) -> tuple[str, ...]:
        """Build an all-namespaces list query for a resource."""
        return (
            "get",
            resource,
            "--all-namespaces",
            "-o",
            "json",
            f"--request-timeout={self.request_timeout}",
        )

    async def fetch_items(self, resource: str) -> list[dict[str, Any]]:
        """List every object of a resource type.

        Errors from the kubectl runner are not caught.

        Args:
            resource: kubectl resource name, e.g. "pods"

        Returns:
            Raw items of the list response.

        Raises:
            ResourceFetchError: If the output is not a JSON list response.
        """
        output = await self._run_kubectl(self._build_list_args(resource))
        if not output:
            return []

        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise ResourceFetchError(
                f"Malformed {resource} list response: {exc}"
            ) from exc

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise ResourceFetchError(f"Malformed {resource} list response: no items")

        logger.debug("Fetched %d %s", len(items), resource)
        return items

    async def fetch_replica_sets(
        self, kind: ReplicaSetKind = ReplicaSetKind.REPLICATION_CONTROLLERS
    ) -> list[dict[str, Any]]:
        """Fetch raw replica set controllers."""
        return await self.fetch_items(ReplicaSetKind(kind).value)

    async def fetch_services(self) -> list[dict[str, Any]]:
        """Fetch raw services."""
        return await self.fetch_items("services")

    async def fetch_pods(self) -> list[dict[str, Any]]:
        """Fetch raw pods."""
        return await self.fetch_items("pods")
