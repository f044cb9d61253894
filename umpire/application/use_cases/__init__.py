"""
Use Cases Package - Application Layer

Use cases orchestrate domain entities and gateways to serve one request.
"""

from .check_use_cases import EvaluateCheckUseCase

__all__ = ["EvaluateCheckUseCase"]
