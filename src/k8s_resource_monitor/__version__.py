"""Version information for k8s_resource_monitor."""

__version__ = "0.1.0"
