"""
Gateways Package - Infrastructure Layer

HTTP implementations of the domain metric source interface.
"""

from .graphite_gateway import GraphiteGateway
from .librato_gateway import LibratoGateway

__all__ = ["GraphiteGateway", "LibratoGateway"]
