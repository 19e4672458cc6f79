"""
User-facing one-way ANOVA solution types.

Each solution wraps a Result[Params] and provides convenient accessors and
formatted summary output (matching R conventions for aov tables and
pairwise p-value tables).
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyoneway.core.result import Result
from pyoneway.anova._common import (
    AnovaSummaryParams,
    AnovaTableRow,
    LSDComparison,
    LSDParams,
    OnewayParams,
)

SIGNIF_CODES = "Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1"


# =====================================================================
# OnewaySolution  (sum-of-squares decomposition)
# =====================================================================


@dataclass
class OnewaySolution:
    """
    User-facing result of the sum-of-squares decomposition.

    Produced by oneway(), oneway_factor() and oneway_formula().
    """
    _result: Result[OnewayParams]

    @property
    def groups(self) -> tuple[str, ...]:
        return self._result.params.groups

    @property
    def data(self) -> dict[str, NDArray]:
        """Raw observations per group, keyed by label."""
        return self._result.params.data

    @property
    def df(self) -> tuple[int, int]:
        """(within, between) degrees of freedom."""
        p = self._result.params
        return (p.df_within, p.df_between)

    @property
    def ss(self) -> tuple[float, float]:
        """(within, between) sums of squares."""
        p = self._result.params
        return (p.ss_within, p.ss_between)

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def ss_within(self) -> float:
        return self._result.params.ss_within

    @property
    def ss_between(self) -> float:
        return self._result.params.ss_between

    @property
    def means(self) -> dict[str, float]:
        return self._result.params.means

    @property
    def sizes(self) -> dict[str, int]:
        return self._result.params.sizes

    @property
    def n_total(self) -> int:
        return self._result.params.n_total

    @property
    def n_levels(self) -> int:
        return self._result.params.n_levels

    @property
    def call(self) -> str:
        return self._result.info['call']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def anova_summary(self) -> 'AnovaSummarySolution':
        """Build the ANOVA table for this decomposition."""
        from pyoneway.anova.solvers import anova_summary
        return anova_summary(self)

    def plot(self, **kwargs: Any) -> Any:
        """Boxplot of the groups. See plotting.plot_oneway for arguments."""
        from pyoneway.anova.plotting import plot_oneway
        return plot_oneway(self, **kwargs)

    def summary(self) -> str:
        """Short R-style description of the decomposition."""
        lines = [
            self.call,
            "",
            f"Within SS: {_num(self.ss_within)} on {self.df_within} "
            f"degrees of freedom.",
            f"Between SS: {_num(self.ss_between)} on {self.df_between} "
            f"degrees of freedom.",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"OnewaySolution(levels={self.n_levels}, n={self.n_total}, "
            f"groups={list(self.groups)})"
        )


# =====================================================================
# AnovaSummarySolution  (ANOVA table + F test)
# =====================================================================


@dataclass
class AnovaSummarySolution:
    """
    User-facing ANOVA table with F test.

    Produced by anova_summary().
    """
    _result: Result[AnovaSummaryParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table rows: Among Group, Within Group, Total."""
        return self._result.params.table

    @property
    def groups(self) -> tuple[str, ...]:
        return self._result.params.groups

    @property
    def means(self) -> dict[str, float]:
        return self._result.params.means

    @property
    def sizes(self) -> dict[str, int]:
        return self._result.params.sizes

    @property
    def n_total(self) -> int:
        return self._result.params.n_total

    @property
    def n_levels(self) -> int:
        return self._result.params.n_levels

    @property
    def ss_total(self) -> float:
        return self._result.params.ss_total

    @property
    def df_total(self) -> int:
        return self._result.params.df_total

    @property
    def ms(self) -> tuple[float, float]:
        """(within, between) mean squares."""
        p = self._result.params
        return (p.ms_within, p.ms_between)

    @property
    def ms_within(self) -> float:
        return self._result.params.ms_within

    @property
    def ms_between(self) -> float:
        return self._result.params.ms_between

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

    @property
    def call(self) -> str:
        return self._result.info['call']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def lsmeans(self, **kwargs: Any) -> 'LSMeansSolution':
        """Fisher's LSD comparisons. See solvers.lsmeans for arguments."""
        from pyoneway.anova.solvers import lsmeans
        return lsmeans(self, **kwargs)

    def summary(self) -> str:
        """Generate R-style ANOVA summary with group means."""
        lines = [
            "Call:",
            f"\t{self.call}",
            "",
            "Means:",
            *_format_named_row(self.groups, [self.means[g] for g in self.groups]),
            "",
            "Analysis of Variance Table",
            "=" * 72,
            f"{'Source':<16} {'Df':>6} {'Sum Sq':>12} {'Mean Sq':>12} "
            f"{'F value':>10} {'Pr(>F)':>11}",
            "-" * 72,
        ]

        for row in self.table:
            mean_sq = f"{row.mean_sq:>12.4f}" if row.mean_sq is not None else " " * 12
            line = f"{row.term:<16} {row.df:>6} {row.sum_sq:>12.4f} {mean_sq}"
            if row.f_value is not None:
                sig = _significance_stars(row.p_value)
                line += f" {row.f_value:>10.4f} {_format_p(row.p_value):>11} {sig}"
            lines.append(line.rstrip())

        lines.append("-" * 72)
        lines.append(SIGNIF_CODES)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSummarySolution(F={self.f_value:.4f}, "
            f"p={self.p_value:.4e}, df=({self._result.params.df_within}, "
            f"{self._result.params.df_between}))"
        )


# =====================================================================
# LSMeansSolution  (Fisher's LSD)
# =====================================================================


@dataclass
class LSMeansSolution:
    """
    User-facing result for Fisher's LSD pairwise comparisons.

    Produced by lsmeans().
    """
    _result: Result[LSDParams]

    @property
    def groups(self) -> tuple[str, ...]:
        return self._result.params.groups

    @property
    def p_values(self) -> NDArray:
        """Lower-triangular k x k p-value table (NaN elsewhere)."""
        return self._result.params.p_values

    @property
    def comparisons(self) -> tuple[LSDComparison, ...]:
        return self._result.params.comparisons

    @property
    def p_adjust(self) -> str:
        return self._result.params.p_adjust

    @property
    def mse(self) -> float:
        return self._result.params.mse

    @property
    def df_error(self) -> int:
        return self._result.params.df_error

    @property
    def call(self) -> str:
        return self._result.info['call']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def p_value_for(self, group1: str, group2: str) -> float | None:
        """
        P-value comparing two group means, in either order.

        Returns None when both labels name the same group.

        Raises:
            KeyError: If either label is not a group level
        """
        index = {g: i for i, g in enumerate(self.groups)}
        for g in (group1, group2):
            if g not in index:
                raise KeyError(
                    f"No group {g!r}. Available: {list(self.groups)}"
                )
        i, j = index[group1], index[group2]
        if i == j:
            return None
        if i < j:
            i, j = j, i
        return float(self.p_values[i, j])

    def p_value_matrix(self) -> NDArray:
        """Full symmetric k x k p-value matrix with a NaN diagonal."""
        lower = self.p_values
        full = lower.copy()
        upper = np.triu_indices_from(full, k=1)
        full[upper] = lower.T[upper]
        return full

    def summary(self) -> str:
        """Generate R-style pairwise p-value table."""
        rows = self.groups[1:]
        cols = self.groups[:-1]
        body = self.p_values[1:, :-1]

        cells = [
            ["-" if np.isnan(v) else f"{v:.4f}" for v in body_row]
            for body_row in body
        ]
        label_width = max(len(r) for r in rows)
        col_widths = [
            max(len(c), *(len(cells[r][ci]) for r in range(len(rows))))
            for ci, c in enumerate(cols)
        ]

        lines = [
            "Call:",
            f"\t{self.call}",
            "",
            "Fisher's LSD Table",
            "",
            f"P value adjustment method: {self.p_adjust}",
            "",
            "P-Values:",
            " " * label_width + "".join(
                f" {c:>{w}}" for c, w in zip(cols, col_widths)
            ),
        ]
        for r, label in enumerate(rows):
            lines.append(
                f"{label:<{label_width}}" + "".join(
                    f" {cells[r][ci]:>{w}}" for ci, w in enumerate(col_widths)
                )
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LSMeansSolution(levels={len(self.groups)}, "
            f"n_comparisons={len(self.comparisons)}, p_adjust={self.p_adjust!r})"
        )


# =====================================================================
# Helpers
# =====================================================================


def _significance_stars(p: float | None) -> str:
    """Return significance stars for a p-value."""
    if p is None or np.isnan(p):
        return ""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""


def _format_p(p: float) -> str:
    """R's format.pval: tiny p-values print as an upper bound."""
    eps = np.finfo(np.float64).eps
    if p < eps:
        return f"<{eps:.1e}"
    return f"{p:.4e}"


def _num(x: float) -> str:
    """Seven significant digits, as R prints numbers by default."""
    return f"{x:.7g}"


def _format_named_row(names: tuple[str, ...], values: list[float]) -> list[str]:
    """Named-vector layout: labels over right-aligned values."""
    formatted = [_num(v) for v in values]
    widths = [max(len(n), len(v)) for n, v in zip(names, formatted)]
    header = " ".join(f"{n:>{w}}" for n, w in zip(names, widths))
    values_line = " ".join(f"{v:>{w}}" for v, w in zip(formatted, widths))
    return [header, values_line]
