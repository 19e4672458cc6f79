"""
Core infrastructure for pyoneway.

Shared abstractions used by the oneway analysis submodule.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
"""

from pyoneway.core.result import Result
from pyoneway.core.exceptions import (
    PyOnewayError,
    ValidationError,
    DimensionError,
    NumericalError,
    DegenerateDesignError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyOnewayError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DegenerateDesignError",
]
