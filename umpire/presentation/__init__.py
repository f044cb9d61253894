"""
Presentation Layer Package

HTTP routers, the Basic-auth guard, request logging middleware and the
exception handlers that render errors as JSON.
"""

from umpire.presentation import controllers

__all__ = ["controllers"]
