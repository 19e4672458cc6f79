"""
Common data types for one-way ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container with no methods.

Naming note: "within" and "between" follow the historical labelling of this
package, which is the reverse of textbook usage. ``ss_within``/``df_within``
hold the among-group term (levels - 1 df) and ``ss_between``/``df_between``
hold the residual term (N - levels df). The arithmetic and the row each pair
lands in are what matter; the names are kept for compatibility.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class OnewayParams:
    """
    Parameter payload for the sum-of-squares decomposition.

    Produced by oneway(), oneway_factor() and oneway_formula().
    """
    groups: tuple[str, ...]
    data: dict[str, NDArray[np.floating[Any]]]    # label -> observations
    df_within: int                                 # levels - 1 (among groups)
    df_between: int                                # N - levels (residual)
    ss_within: float                               # among-group SS
    ss_between: float                              # residual SS
    means: dict[str, float]
    sizes: dict[str, int]
    n_total: int
    n_levels: int


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of the ANOVA table."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float | None    # None for Total row
    f_value: float | None    # None for Within Group and Total rows
    p_value: float | None    # None for Within Group and Total rows


@dataclass(frozen=True)
class AnovaSummaryParams:
    """Parameter payload for the ANOVA table and F test."""
    table: tuple[AnovaTableRow, ...]
    groups: tuple[str, ...]
    means: dict[str, float]
    sizes: dict[str, int]
    n_total: int
    n_levels: int
    df_within: int
    df_between: int
    df_total: int
    ss_within: float
    ss_between: float
    ss_total: float
    ms_within: float
    ms_between: float                  # residual mean square used by LSD
    f_value: float
    p_value: float
    grand_mean: float
    eta_squared: float


@dataclass(frozen=True)
class LSDComparison:
    """One pairwise comparison from Fisher's LSD procedure."""
    group1: str
    group2: str
    diff: float          # mean(group1) - mean(group2)
    se: float
    t_value: float
    p_value: float


@dataclass(frozen=True)
class LSDParams:
    """
    Parameter payload for Fisher's LSD.

    ``p_values`` is a k x k matrix indexed by ``groups`` on both axes with
    only the lower triangle populated; the diagonal and upper triangle are NaN.
    """
    groups: tuple[str, ...]
    p_values: NDArray[np.floating[Any]]
    comparisons: tuple[LSDComparison, ...]
    p_adjust: str
    mse: float
    df_error: int
