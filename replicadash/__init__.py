"""replicadash - replica set overview for Kubernetes dashboards."""

__version__ = "0.1.0"
