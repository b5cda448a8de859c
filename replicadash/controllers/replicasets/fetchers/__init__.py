"""Fetchers for replica set controller."""

from replicadash.controllers.replicasets.fetchers.resource_fetcher import (
    ResourceFetcher,
    ResourceFetchError,
)

__all__ = ["ResourceFetchError", "ResourceFetcher"]
