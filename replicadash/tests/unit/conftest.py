"""Shared fixtures for raw Kubernetes objects."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


def _replica_set(
    name: str,
    namespace: str = "default",
    selector: dict[str, str] | None = None,
    *,
    labels: dict[str, str] | None = None,
    annotations: dict[str, str] | None = None,
    images: list[str] | None = None,
    desired: int | None = 1,
    current: int | None = 1,
    creation_timestamp: str = "2024-01-01T00:00:00Z",
) -> dict[str, Any]:
    spec: dict[str, Any] = {
        "selector": selector,
        "template": {
            "spec": {
                "containers": [
                    {"name": f"c{index}", "image": image}
                    for index, image in enumerate(images or [])
                ]
            }
        },
    }
    if desired is not None:
        spec["replicas"] = desired
    status: dict[str, Any] = {}
    if current is not None:
        status["replicas"] = current
    metadata: dict[str, Any] = {
        "name": name,
        "namespace": namespace,
        "labels": labels or {},
        "creationTimestamp": creation_timestamp,
    }
    if annotations is not None:
        metadata["annotations"] = annotations
    return {"metadata": metadata, "spec": spec, "status": status}


def _service(
    name: str,
    namespace: str = "default",
    selector: dict[str, str] | None = None,
    *,
    ports: list[dict[str, Any]] | None = None,
    ingress: list[dict[str, str]] | None = None,
) -> dict[str, Any]:
    service: dict[str, Any] = {
        "metadata": {"name": name, "namespace": namespace},
        "spec": {"selector": selector, "ports": ports or []},
        "status": {},
    }
    if ingress is not None:
        service["status"] = {"loadBalancer": {"ingress": ingress}}
    return service


def _pod(
    name: str,
    namespace: str = "default",
    labels: dict[str, str] | None = None,
    phase: str | None = "Running",
) -> dict[str, Any]:
    status = {"phase": phase} if phase is not None else {}
    return {
        "metadata": {"name": name, "namespace": namespace, "labels": labels or {}},
        "status": status,
    }


@pytest.fixture
def make_replica_set() -> Callable[..., dict[str, Any]]:
    """Factory for raw ReplicationController dictionaries."""
    return _replica_set


@pytest.fixture
def make_service() -> Callable[..., dict[str, Any]]:
    """Factory for raw Service dictionaries."""
    return _service


@pytest.fixture
def make_pod() -> Callable[..., dict[str, Any]]:
    """Factory for raw Pod dictionaries."""
    return _pod
