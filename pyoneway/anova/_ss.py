"""
Sums of squares and F test for one-way ANOVA.

The decomposition uses the classical computing formulas, applied to the
observations after subtracting the grand mean:

    sums = sum(x^2)                      over all observations
    g    = sum_k (sum of group k)^2 / n_k
    h    = (sum of all x)^2 / N

    among-group SS  = g - h     (labelled "within")
    residual SS     = sums - g  (labelled "between")

See _common for why the labels run opposite to textbook usage.
"""

import numpy as np
from scipy import stats as sp_stats

from pyoneway.core.exceptions import DegenerateDesignError
from pyoneway.anova._common import (
    AnovaSummaryParams,
    AnovaTableRow,
    OnewayParams,
)
from pyoneway.anova.design import OnewayDesign

TABLE_ROWS = ("Among Group", "Within Group", "Total")


def oneway_sums_of_squares(design: OnewayDesign) -> OnewayParams:
    """
    Decompose the total variation of a grouping.

    Args:
        design: Validated grouping

    Returns:
        OnewayParams with SS, df, group means and sizes
    """
    groups = design.groups
    all_y = np.concatenate(list(groups.values()))

    n_levels = len(groups)
    n_total = int(all_y.shape[0])

    # Both sums of squares are invariant under a common shift
    shift = float(np.mean(all_y))
    centred = [x - shift for x in groups.values()]
    all_c = all_y - shift

    sums = float(np.sum(all_c ** 2))
    g = float(sum(np.sum(x) ** 2 / len(x) for x in centred))
    h = float(np.sum(all_c) ** 2 / n_total)

    return OnewayParams(
        groups=design.labels,
        data=dict(groups),
        df_within=n_levels - 1,
        df_between=n_total - n_levels,
        ss_within=g - h,
        ss_between=sums - g,
        means={label: float(np.mean(x)) for label, x in groups.items()},
        sizes={label: int(len(x)) for label, x in groups.items()},
        n_total=n_total,
        n_levels=n_levels,
    )


def anova_table(params: OnewayParams) -> AnovaSummaryParams:
    """
    Build the ANOVA table and F test from a sum-of-squares decomposition.

    Raises:
        DegenerateDesignError: If either df is not positive, or the residual
            mean square is zero (F undefined)
    """
    df_within = params.df_within
    df_between = params.df_between

    if df_within <= 0 or df_between <= 0:
        raise DegenerateDesignError(
            f"cannot form mean squares: among-group df = {df_within}, "
            f"residual df = {df_between} (both must be positive)",
            df_within=df_within,
            df_between=df_between,
        )

    ss_total = params.ss_within + params.ss_between
    df_total = df_within + df_between

    ms_within = params.ss_within / df_within
    ms_between = params.ss_between / df_between

    if ms_between <= 0:
        raise DegenerateDesignError(
            f"residual mean square is {ms_between}; F statistic is undefined",
            df_within=df_within,
            df_between=df_between,
        )

    f_value = ms_within / ms_between
    p_value = float(sp_stats.f.sf(f_value, df_within, df_between))

    table = (
        AnovaTableRow(
            term=TABLE_ROWS[0],
            df=df_within,
            sum_sq=params.ss_within,
            mean_sq=ms_within,
            f_value=f_value,
            p_value=p_value,
        ),
        AnovaTableRow(
            term=TABLE_ROWS[1],
            df=df_between,
            sum_sq=params.ss_between,
            mean_sq=ms_between,
            f_value=None,
            p_value=None,
        ),
        AnovaTableRow(
            term=TABLE_ROWS[2],
            df=df_total,
            sum_sq=ss_total,
            mean_sq=None,
            f_value=None,
            p_value=None,
        ),
    )

    grand_mean = sum(
        params.means[label] * params.sizes[label] for label in params.groups
    ) / params.n_total

    return AnovaSummaryParams(
        table=table,
        groups=params.groups,
        means=dict(params.means),
        sizes=dict(params.sizes),
        n_total=params.n_total,
        n_levels=params.n_levels,
        df_within=df_within,
        df_between=df_between,
        df_total=df_total,
        ss_within=params.ss_within,
        ss_between=params.ss_between,
        ss_total=ss_total,
        ms_within=ms_within,
        ms_between=ms_between,
        f_value=f_value,
        p_value=p_value,
        grand_mean=float(grand_mean),
        eta_squared=params.ss_within / ss_total if ss_total > 0 else 0.0,
    )
