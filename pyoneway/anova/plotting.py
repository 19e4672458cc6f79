"""
Boxplot of the groups in a one-way design.

Rendering is delegated entirely to matplotlib, which is an optional
dependency imported on first use.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from pyoneway.core.exceptions import ValidationError

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from pyoneway.anova.solution import OnewaySolution


def plot_oneway(
    result: OnewaySolution,
    *,
    names: list[str] | None = None,
    xlab: str = "Grouping variable",
    ylab: str = "Response variable",
    title: str | None = None,
    ax: Axes | None = None,
    **boxplot_kwargs: Any,
) -> Axes:
    """
    Draw one box per group.

    Args:
        result: Output of oneway(), oneway_factor() or oneway_formula()
        names: Category-axis labels; defaults to the group labels
        xlab: Category-axis title
        ylab: Response-axis title
        title: Plot title; defaults to the call that produced ``result``
        ax: Axes to draw on; a new figure is created when omitted
        **boxplot_kwargs: Passed through to ``Axes.boxplot``

    Returns:
        The matplotlib Axes that was drawn on
    """
    groups = result.groups
    if names is None:
        names = list(groups)
    elif len(names) != len(groups):
        raise ValidationError(
            f"names: expected {len(groups)} labels, got {len(names)}"
        )

    if ax is None:
        import matplotlib.pyplot as plt
        _, ax = plt.subplots()

    positions = list(range(1, len(groups) + 1))
    ax.boxplot(
        [result.data[g] for g in groups],
        positions=positions,
        **boxplot_kwargs,
    )
    ax.set_xticks(positions)
    ax.set_xticklabels(names)
    ax.set_xlabel(xlab)
    ax.set_ylabel(ylab)
    ax.set_title(result.call if title is None else title)
    return ax
