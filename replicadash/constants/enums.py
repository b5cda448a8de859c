"""All enum definitions for replicadash.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Status Enums
# =============================================================================


class PodPhase(Enum):
    """Pod lifecycle phase values from Kubernetes API."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


# =============================================================================
# Resource Enums
# =============================================================================


class ReplicaSetKind(str, Enum):
    """kubectl resource names that can be listed as replica sets."""

    REPLICATION_CONTROLLERS = "replicationcontrollers"
    REPLICA_SETS = "replicasets"


# =============================================================================
# Output Enums
# =============================================================================


class OutputFormat(str, Enum):
    """Render formats for replica set lists."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
