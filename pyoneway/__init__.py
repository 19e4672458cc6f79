"""
pyoneway: one-way analysis of variance for Python.

Sums-of-squares decomposition, ANOVA table with F test, Fisher's LSD
pairwise comparisons and boxplots for single-factor designs, with output
laid out the way R prints it.

Submodules:
    anova: Design adapters, ANOVA, LSD, plotting, reference data
    core: Result envelope, exceptions, validation
"""

__version__ = "0.1.0"

from pyoneway import anova
from pyoneway.anova import (
    anova_summary,
    lsmeans,
    oneway,
    oneway_factor,
    oneway_formula,
    plot_oneway,
)

__all__ = [
    "__version__",
    "anova",
    "anova_summary",
    "lsmeans",
    "oneway",
    "oneway_factor",
    "oneway_formula",
    "plot_oneway",
]
