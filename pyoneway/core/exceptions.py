"""
Exception hierarchy for pyoneway.

All exceptions inherit from PyOnewayError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyOnewayError(Exception):
    """Base exception for all pyoneway errors."""
    pass


class ValidationError(PyOnewayError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: malformed or
    non-numeric responses, unresolvable column references, empty groups.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a factor and its response vector have different lengths,
    or when an input is not one-dimensional.
    """
    pass


class NumericalError(PyOnewayError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateDesignError(NumericalError):
    """
    The design leaves no degrees of freedom for a mean square.

    Raised at the point of division when a degrees-of-freedom term is zero
    or negative, or when the residual mean square is zero so that the F or
    t statistic is undefined.

    Attributes:
        df_within: Among-group degrees of freedom (levels - 1), if known
        df_between: Residual degrees of freedom (N - levels), if known
    """

    def __init__(
        self,
        message: str,
        df_within: int | None = None,
        df_between: int | None = None,
    ):
        super().__init__(message)
        self.df_within = df_within
        self.df_between = df_between
