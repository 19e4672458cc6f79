"""
One-way Analysis of Variance.

Public API:
    oneway(groups) -> OnewaySolution                  # {label: values}
    oneway_factor(factor, y) -> OnewaySolution        # parallel vectors
    oneway_formula(formula, data) -> OnewaySolution   # "response ~ factor"
    anova_summary(result) -> AnovaSummarySolution     # ANOVA table + F test
    lsmeans(summary, ...) -> LSMeansSolution          # Fisher's LSD
    plot_oneway(result, ...) -> matplotlib Axes       # boxplot
"""

from pyoneway.anova.solvers import (
    anova_summary,
    lsmeans,
    oneway,
    oneway_factor,
    oneway_formula,
)
from pyoneway.anova.solution import (
    AnovaSummarySolution,
    LSMeansSolution,
    OnewaySolution,
)
from pyoneway.anova.design import OnewayDesign
from pyoneway.anova.plotting import plot_oneway

__all__ = [
    "anova_summary",
    "lsmeans",
    "oneway",
    "oneway_factor",
    "oneway_formula",
    "plot_oneway",
    "OnewayDesign",
    "OnewaySolution",
    "AnovaSummarySolution",
    "LSMeansSolution",
]
