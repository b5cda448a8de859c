"""Replica set controller for dashboard list data.

Lists replica sets, services and pods through kubectl and joins them into
ReplicaSetList rows.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
from typing import Any

from replicadash.constants.timeouts import CLUSTER_CHECK_TIMEOUT
from replicadash.controllers.base import BaseController
from replicadash.controllers.replicasets.fetchers import ResourceFetcher
from replicadash.controllers.replicasets.parsers import ReplicaSetParser
from replicadash.models.core.replica_set_info import ReplicaSetList
from replicadash.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class ReplicaSetController(BaseController):
    """Replica set list operations.

    Every call takes a fresh snapshot of the three collections; nothing is
    cached between calls.
    """

    def __init__(
        self,
        context: str | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        """Initialize the replica set controller.

        Args:
            context: Optional Kubernetes context name. Overrides settings.context.
            settings: Optional application settings.
        """
        self.settings = settings or AppSettings()
        self.context = context or self.settings.context

        self._resource_fetcher = ResourceFetcher(
            self._run_kubectl,
            request_timeout=self.settings.request_timeout,
        )
        self._replica_set_parser = ReplicaSetParser()

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int | None = None,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        effective_timeout = (
            timeout if timeout is not None else self.settings.command_timeout_seconds
        )
        result = subprocess.run(
            cmd, capture_output=True, text=True, timeout=effective_timeout
        )
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise RuntimeError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    async def check_connection(self) -> bool:
        """Check if the API server answers a version probe."""
        try:
            await asyncio.to_thread(
                self._run_kubectl_sync,
                ("version", "-o", "json", f"--request-timeout={CLUSTER_CHECK_TIMEOUT}s"),
                CLUSTER_CHECK_TIMEOUT + 5,
            )
        except (OSError, RuntimeError, subprocess.TimeoutExpired) as exc:
            logger.warning("Cluster connection check failed: %s", exc)
            return False
        return True

    async def get_replica_set_list(self) -> ReplicaSetList:
        """Return all replica sets in the cluster with services and pod counts.

        Fetch failures propagate unchanged; no partial list is returned.
        """
        logger.info("Getting list of all replica sets in the cluster")

        replica_sets = await self._resource_fetcher.fetch_replica_sets(
            self.settings.replica_set_kind
        )
        services = await self._resource_fetcher.fetch_services()
        pods = await self._resource_fetcher.fetch_pods()

        return self._replica_set_parser.build_replica_set_list(
            replica_sets, services, pods
        )

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch the replica set list as a serialized document.

        Returns:
            Dictionary with a single "replicaSets" key.
        """
        replica_set_list = await self.get_replica_set_list()
        return replica_set_list.to_document()
