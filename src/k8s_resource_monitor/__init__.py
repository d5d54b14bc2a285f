"""k8s_resource_monitor - kubectl-style resource tables with polling refresh."""

from k8s_resource_monitor.__version__ import __version__

__all__ = ["__version__"]
