"""
Domain Layer Package

Check value objects, aggregation rules and the metric source contract,
free of any framework or transport concern.
"""

# Re-export submodules
from umpire.domain import entities, gateways, services

__all__ = ["entities", "gateways", "services"]
