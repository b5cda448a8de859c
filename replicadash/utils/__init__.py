"""Utility functions for replicadash."""

from replicadash.utils.label_selector import get_replica_set_selector, matches
from replicadash.utils.report_generator import (
    render,
    render_json,
    render_table,
    render_yaml,
)

__all__ = [
    # Selectors
    "get_replica_set_selector",
    "matches",
    # Rendering
    "render",
    "render_json",
    "render_table",
    "render_yaml",
]
