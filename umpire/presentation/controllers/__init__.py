"""
Controllers Package - Presentation Layer

FastAPI routers translating HTTP requests into use case calls and use case
results into HTTP responses.
"""

from .check_controller import router as check_router
from .system_controller import router as system_router

__all__ = ["check_router", "system_router"]
