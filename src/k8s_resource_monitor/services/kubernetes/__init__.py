"""Kubernetes service module.

Provides the resource managers used by the refresh loop.
"""

from k8s_resource_monitor.services.kubernetes.resource_manager import ResourceManager

__all__ = ["ResourceManager"]
