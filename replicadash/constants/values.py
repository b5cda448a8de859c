"""Scalar constants for replicadash.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "replicadash"

# ============================================================================
# Kubernetes API
# ============================================================================

# Annotation holding the human readable description of a replica set.
DESCRIPTION_ANNOTATION_KEY: Final = "description"

DEFAULT_PORT_PROTOCOL: Final = "TCP"

__all__ = [
    "APP_TITLE",
    "DEFAULT_PORT_PROTOCOL",
    "DESCRIPTION_ANNOTATION_KEY",
]
