"""kubeutil - Kubernetes cluster resource utilization summaries."""

__version__ = "0.1.0"
