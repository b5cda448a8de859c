"""Constants module for replicadash.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values
- defaults.py: Default values for settings
"""

from replicadash.constants.defaults import (
    COMMAND_TIMEOUT_SECONDS_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
    REPLICA_SET_KIND_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
)
from replicadash.constants.enums import OutputFormat, PodPhase, ReplicaSetKind
from replicadash.constants.timeouts import (
    CLUSTER_CHECK_TIMEOUT,
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from replicadash.constants.values import (
    APP_TITLE,
    DEFAULT_PORT_PROTOCOL,
    DESCRIPTION_ANNOTATION_KEY,
)

__all__ = [
    "APP_TITLE",
    "CLUSTER_CHECK_TIMEOUT",
    "CLUSTER_REQUEST_TIMEOUT",
    "COMMAND_TIMEOUT_SECONDS_DEFAULT",
    "DEFAULT_PORT_PROTOCOL",
    "DESCRIPTION_ANNOTATION_KEY",
    "KUBECTL_COMMAND_TIMEOUT",
    "OUTPUT_FORMAT_DEFAULT",
    "REPLICA_SET_KIND_DEFAULT",
    "REQUEST_TIMEOUT_DEFAULT",
    "OutputFormat",
    "PodPhase",
    "ReplicaSetKind",
]
