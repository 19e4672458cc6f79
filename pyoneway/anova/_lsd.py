"""
Fisher's Least Significant Difference (LSD) pairwise comparisons.

Every pair of group means is compared with a two-sided t test that uses the
residual mean square from the ANOVA as the pooled variance:

    SE = sqrt(MSE * (1/n_i + 1/n_j)),   t = (m_i - m_j) / SE,   df = N - k

P-values are rounded to 4 decimal places and laid out as a lower-triangular
table, the way pairwise comparison tables are conventionally printed.
"""

import numpy as np
from scipy import stats as sp_stats

from pyoneway.core.exceptions import DegenerateDesignError, ValidationError
from pyoneway.anova._common import AnovaSummaryParams, LSDComparison, LSDParams

# Only the unadjusted procedure is implemented
VALID_ADJUST_METHODS = ("none",)

P_VALUE_DECIMALS = 4


def adjust_p_values(p: np.ndarray, method: str) -> np.ndarray:
    """
    Apply a multiple-comparison adjustment to a vector of p-values.

    Args:
        p: 1D array of raw p-values
        method: One of VALID_ADJUST_METHODS

    Returns:
        Adjusted p-values, same length as input
    """
    if method not in VALID_ADJUST_METHODS:
        raise ValidationError(
            f"p_adjust must be one of {VALID_ADJUST_METHODS}, got {method!r}"
        )
    return np.asarray(p, dtype=np.float64).copy()


def fisher_lsd(
    summary: AnovaSummaryParams,
    *,
    p_adjust: str = 'none',
) -> LSDParams:
    """
    Pairwise LSD comparisons for every pair of group levels.

    Args:
        summary: ANOVA summary supplying means, sizes, MSE and residual df
        p_adjust: Multiple-comparison adjustment, only 'none' is supported

    Returns:
        LSDParams with the lower-triangular p-value table and per-pair rows

    Raises:
        ValidationError: Unknown adjustment method
        DegenerateDesignError: Residual df not positive or zero standard error
    """
    if p_adjust not in VALID_ADJUST_METHODS:
        raise ValidationError(
            f"p_adjust must be one of {VALID_ADJUST_METHODS}, got {p_adjust!r}"
        )

    df_error = summary.df_between
    mse = summary.ms_between
    if df_error <= 0:
        raise DegenerateDesignError(
            f"residual df = {df_error}; t statistics are undefined",
            df_within=summary.df_within,
            df_between=df_error,
        )

    levels = summary.groups
    k = len(levels)

    pairs: list[tuple[int, int]] = []
    diffs: list[float] = []
    ses: list[float] = []
    t_values: list[float] = []

    # Lower triangle, row-major: (1,0), (2,0), (2,1), ...
    for i in range(1, k):
        for j in range(i):
            g_i, g_j = levels[i], levels[j]
            diff = summary.means[g_i] - summary.means[g_j]
            se = float(np.sqrt(
                mse * (1.0 / summary.sizes[g_i] + 1.0 / summary.sizes[g_j])
            ))
            if se == 0:
                raise DegenerateDesignError(
                    f"standard error for {g_i!r} vs {g_j!r} is zero",
                    df_within=summary.df_within,
                    df_between=df_error,
                )
            pairs.append((i, j))
            diffs.append(diff)
            ses.append(se)
            t_values.append(diff / se)

    raw = 2.0 * sp_stats.t.sf(np.abs(np.asarray(t_values)), df_error)
    adjusted = np.round(adjust_p_values(raw, p_adjust), P_VALUE_DECIMALS)

    p_matrix = np.full((k, k), np.nan)
    comparisons: list[LSDComparison] = []
    for (i, j), diff, se, t_val, p_val in zip(pairs, diffs, ses, t_values, adjusted):
        p_matrix[i, j] = p_val
        comparisons.append(LSDComparison(
            group1=levels[i],
            group2=levels[j],
            diff=diff,
            se=se,
            t_value=t_val,
            p_value=float(p_val),
        ))

    return LSDParams(
        groups=levels,
        p_values=p_matrix,
        comparisons=tuple(comparisons),
        p_adjust=p_adjust,
        mse=mse,
        df_error=df_error,
    )
