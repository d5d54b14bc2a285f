"""Logging configuration for k8s_resource_monitor."""

from k8s_resource_monitor.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
