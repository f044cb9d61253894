"""
Application Layer Package

Use cases and DTOs sitting between the HTTP controllers and the domain.
"""

# Re-export submodules
from umpire.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
