"""Simulate round-robin, shortest-job-first and priority CPU scheduling on a workload."""

__version__ = "0.1.0"
__all__ = ["__version__"]