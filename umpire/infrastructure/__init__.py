"""
Infrastructure Layer Package

Implementations of the domain interfaces that talk to external systems,
here the metrics backends.
"""

from umpire.infrastructure import gateways

__all__ = ["gateways"]
