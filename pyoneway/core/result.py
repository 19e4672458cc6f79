"""
Generic result container for all pyoneway computations.

The Result class provides a standardized envelope that every stage of the
analysis (oneway fit, ANOVA summary, LSD comparisons) uses, so timing,
warnings and call descriptions are handled the same way everywhere.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (call description, method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The stage-specific parameter payload type

    Attributes:
        params: Stage-specific parameters (sums of squares, p-values, ...)
        info: Structured metadata (call description, method)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=OnewayParams(...),
        ...     info={'call': "oneway(coag ~ diet)"},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
