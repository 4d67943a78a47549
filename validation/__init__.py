"""
Validation Framework for Geo-Spatial Scene Projection.

This module provides consistency checks over readings and projected outputs.
"""

from validation.consistency import (
    ConsistencyChecker,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "ConsistencyChecker",
    "ValidationError",
    "ValidationResult",
]
