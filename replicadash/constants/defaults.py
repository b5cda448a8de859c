"""Default values for settings.

All default values used in AppSettings model.
"""

from typing import Final

from replicadash.constants.enums import OutputFormat, ReplicaSetKind
from replicadash.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)

# ============================================================================
# Cluster defaults
# ============================================================================

REQUEST_TIMEOUT_DEFAULT: Final = CLUSTER_REQUEST_TIMEOUT
COMMAND_TIMEOUT_SECONDS_DEFAULT: Final = KUBECTL_COMMAND_TIMEOUT
REPLICA_SET_KIND_DEFAULT: Final = ReplicaSetKind.REPLICATION_CONTROLLERS

# ============================================================================
# Output defaults
# ============================================================================

OUTPUT_FORMAT_DEFAULT: Final = OutputFormat.TABLE

__all__ = [
    "COMMAND_TIMEOUT_SECONDS_DEFAULT",
    "OUTPUT_FORMAT_DEFAULT",
    "REPLICA_SET_KIND_DEFAULT",
    "REQUEST_TIMEOUT_DEFAULT",
]
