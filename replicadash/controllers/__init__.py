"""Controllers module for replicadash.

This module provides controllers for fetching and joining Kubernetes
replica set data.
"""

from __future__ import annotations

# Base classes
from replicadash.controllers.base import BaseController

# Replica set domain
from replicadash.controllers.replicasets.controller import ReplicaSetController

__all__ = [
    "BaseController",
    "ReplicaSetController",
]
