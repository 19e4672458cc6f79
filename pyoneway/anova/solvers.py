"""
One-way ANOVA entry points.

Public API:
    oneway(groups) -> OnewaySolution
    oneway_factor(factor, y) -> OnewaySolution
    oneway_formula(formula, data) -> OnewaySolution
    anova_summary(result) -> AnovaSummarySolution
    lsmeans(summary, ...) -> LSMeansSolution
"""

import time
import warnings
from typing import Any

from pyoneway.core.exceptions import ValidationError
from pyoneway.core.result import Result
from pyoneway.anova._formula import parse_formula
from pyoneway.anova._lsd import fisher_lsd
from pyoneway.anova._ss import anova_table, oneway_sums_of_squares
from pyoneway.anova.design import OnewayDesign
from pyoneway.anova.solution import (
    AnovaSummarySolution,
    LSMeansSolution,
    OnewaySolution,
)


def oneway(groups: Any) -> OnewaySolution:
    """
    One-way analysis of variance on already-grouped responses.

    Args:
        groups: Mapping {label: 1D numeric}, or a sequence of 1D numeric
            sequences (labelled "1".."k" by position)

    Returns:
        OnewaySolution with sums of squares, df, group means and sizes

    Examples:
        >>> result = oneway({'A': [62, 60, 63, 59], 'B': [63, 67, 71, 64]})
        >>> print(result.summary())
        >>> result.anova_summary().f_value
    """
    t0 = time.perf_counter()
    design = OnewayDesign.from_groups(groups)
    return _fit(design, call="oneway(groups)", t0=t0)


def oneway_factor(factor: Any, y: Any) -> OnewaySolution:
    """
    One-way analysis of variance from a factor and a response vector.

    Args:
        factor: Group label for each observation (1D)
        y: Response for each observation (1D numeric, same length)

    Returns:
        OnewaySolution

    Examples:
        >>> from pyoneway.anova.datasets import coagulation
        >>> oneway_factor(coagulation['diet'], coagulation['coag'])
    """
    t0 = time.perf_counter()
    design = OnewayDesign.from_factor(factor, y)
    return _fit(design, call="oneway_factor(factor, y)", t0=t0)


def oneway_formula(formula: str, data: Any) -> OnewaySolution:
    """
    One-way analysis of variance from a ``response ~ factor`` formula.

    Args:
        formula: e.g. ``"coag ~ diet"``
        data: Dict of columns or pandas DataFrame holding both columns

    Returns:
        OnewaySolution

    Examples:
        >>> from pyoneway.anova.datasets import coagulation
        >>> result = oneway_formula("coag ~ diet", coagulation)
        >>> print(result.anova_summary().summary())
    """
    t0 = time.perf_counter()
    design = OnewayDesign.from_formula(formula, data)
    response, factor = parse_formula(formula)
    return _fit(design, call=f"oneway({response} ~ {factor})", t0=t0)


def anova_summary(result: OnewaySolution) -> AnovaSummarySolution:
    """
    ANOVA table and F test for a one-way decomposition.

    The F statistic is (among-group mean square) / (residual mean square),
    tested against F(levels - 1, N - levels).

    Args:
        result: Output of oneway(), oneway_factor() or oneway_formula()

    Returns:
        AnovaSummarySolution with the 3-row table, mean squares, F and p

    Raises:
        DegenerateDesignError: If a df is zero (e.g. one observation per
            group) or the residual mean square is zero

    Examples:
        >>> summary = anova_summary(oneway_formula("coag ~ diet", data))
        >>> summary.p_value < 0.001
    """
    t0 = time.perf_counter()

    params = anova_table(result._result.params)

    elapsed = time.perf_counter() - t0

    res = Result(
        params=params,
        info={'call': result.call, 'design_source': result.info.get('design_source')},
        timing={'total_seconds': elapsed},
        backend_name='cpu',
    )
    return AnovaSummarySolution(_result=res)


def lsmeans(
    summary: AnovaSummarySolution,
    *,
    p_adjust: str = 'none',
    alpha: float = 0.05,
) -> LSMeansSolution:
    """
    Fisher's Least Significant Difference pairwise comparisons.

    Compares every pair of group means with a t test on the pooled residual
    mean square. The procedure is only protected against inflated type I
    error when the omnibus F test is significant; a UserWarning is issued
    (and recorded on the result) when it is not.

    Args:
        summary: Output of anova_summary()
        p_adjust: Multiple-comparison adjustment. Only 'none' is supported.
        alpha: Significance level of the omnibus F test used for the
            protection warning

    Raises:
        ValidationError: If alpha is not in (0, 1) or p_adjust is unknown

    Returns:
        LSMeansSolution with the pairwise p-value table

    Examples:
        >>> lsd = lsmeans(anova_summary(result))
        >>> lsd.p_value_for('A', 'B')
        >>> print(lsd.summary())
    """
    if not 0 < alpha < 1:
        raise ValidationError(f"alpha: must be in (0, 1), got {alpha}")

    t0 = time.perf_counter()

    lsd_params = fisher_lsd(summary._result.params, p_adjust=p_adjust)

    notes: list[str] = []
    if not summary.p_value < alpha:
        msg = (
            f"omnibus F test is not significant (p = {summary.p_value:.4g} "
            f">= {alpha}); LSD comparisons are unprotected"
        )
        warnings.warn(msg, UserWarning, stacklevel=2)
        notes.append(msg)

    elapsed = time.perf_counter() - t0

    res = Result(
        params=lsd_params,
        info={'call': f"lsmeans({summary.call})", 'alpha': alpha},
        timing={'total_seconds': elapsed},
        backend_name='cpu',
        warnings=tuple(notes),
    )
    return LSMeansSolution(_result=res)


# =====================================================================
# Internal helpers
# =====================================================================


def _fit(design: OnewayDesign, *, call: str, t0: float) -> OnewaySolution:
    """Run the decomposition and wrap it in a solution."""
    params = oneway_sums_of_squares(design)

    elapsed = time.perf_counter() - t0

    result = Result(
        params=params,
        info={'call': call, 'design_source': design.source},
        timing={'total_seconds': elapsed},
        backend_name='cpu',
    )
    return OnewaySolution(_result=result)
