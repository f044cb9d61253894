"""
Gateways Package - Domain Layer

Interfaces for the external metrics backends. Implementations live in the
infrastructure layer.
"""

from .metric_source import IMetricSource

__all__ = ["IMetricSource"]
