"""
One-way ANOVA design object.

Wraps the validated grouping (label -> observations) that every later stage
consumes. Factory methods handle the three accepted input shapes; there is
deliberately no single entry point that sniffs the input shape.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyoneway.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
)
from pyoneway.core.exceptions import ValidationError, DimensionError
from pyoneway.anova._formula import parse_formula


@dataclass(frozen=True)
class OnewayDesign:
    """
    Validated grouping for one-way ANOVA.

    Created via factory methods, not directly.

    Invariants:
        - at least two groups
        - labels are unique strings, in a stable order
        - every group holds at least one finite observation
        - group arrays are private float64 copies, read-only
    """
    groups: dict[str, NDArray[np.floating[Any]]]
    n: int
    source: str   # 'groups', 'factor', 'formula'

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self.groups.keys())

    @property
    def n_levels(self) -> int:
        return len(self.groups)

    @staticmethod
    def from_groups(groups: Any) -> 'OnewayDesign':
        """
        Create design from already-grouped responses.

        Args:
            groups: Mapping {label: 1D numeric}. A plain sequence of 1D
                numeric sequences is also accepted; its groups are then
                labelled "1", "2", ..., "k" by position.

        Returns:
            OnewayDesign
        """
        if isinstance(groups, Mapping):
            items = [(str(label), values) for label, values in groups.items()]
        else:
            items = [(str(i + 1), values) for i, values in enumerate(groups)]

        validated: dict[str, NDArray] = {}
        for label, values in items:
            if label in validated:
                raise ValidationError(f"groups: duplicate label {label!r}")
            arr = check_array(values, f"groups[{label!r}]")
            check_1d(arr, f"groups[{label!r}]")
            check_finite(arr, f"groups[{label!r}]")
            validated[label] = arr

        return _build(validated, source='groups')

    @staticmethod
    def from_factor(factor: Any, y: Any) -> 'OnewayDesign':
        """
        Create design from a factor and a parallel response vector.

        Levels are ordered the way np.unique sorts them (numerically for
        numeric factors, lexically for strings) and then stringified.

        Args:
            factor: Group label for each observation (1D)
            y: Response for each observation (1D numeric, same length)

        Returns:
            OnewayDesign
        """
        groups = _split(factor, y, factor_name='factor', y_name='y')
        return _build(groups, source='factor')

    @staticmethod
    def from_formula(formula: str, data: Any) -> 'OnewayDesign':
        """
        Create design from a ``response ~ factor`` formula over a table.

        Args:
            formula: e.g. ``"coag ~ diet"``
            data: Column table supporting ``name in data`` and
                ``data[name]``: a dict of columns or a pandas DataFrame

        Returns:
            OnewayDesign
        """
        response, factor = parse_formula(formula)

        for name in (response, factor):
            if name not in data:
                raise ValidationError(
                    f"data: column {name!r} not found. "
                    f"Available: {list(data.keys())}"
                )

        groups = _split(
            data[factor], data[response],
            factor_name=factor, y_name=response,
        )
        return _build(groups, source='formula')


def _split(
    factor: Any,
    y: Any,
    *,
    factor_name: str,
    y_name: str,
) -> dict[str, NDArray]:
    """Partition y by the distinct values of factor."""
    y_arr = check_array(y, y_name)
    check_1d(y_arr, y_name)
    check_finite(y_arr, y_name)

    factor_arr = np.asarray(factor)
    if factor_arr.ndim != 1:
        raise DimensionError(
            f"{factor_name}: expected 1D, got {factor_arr.ndim}D"
        )
    check_consistent_length(factor_arr, y_arr, names=(factor_name, y_name))

    if factor_arr.dtype == object:
        n_missing = sum(1 for v in factor_arr if v is None)
    elif np.issubdtype(factor_arr.dtype, np.floating):
        n_missing = int(np.sum(np.isnan(factor_arr)))
    else:
        n_missing = 0
    if n_missing:
        raise ValidationError(
            f"{factor_name}: {n_missing} missing group labels"
        )

    try:
        levels, inverse = np.unique(factor_arr, return_inverse=True)
    except TypeError as e:
        raise ValidationError(
            f"{factor_name}: group labels cannot be ordered: {e}"
        ) from e
    inverse = inverse.ravel()

    groups: dict[str, NDArray] = {}
    for i, level in enumerate(levels):
        label = str(level)
        if label in groups:
            raise ValidationError(
                f"{factor_name}: distinct levels share the label {label!r}"
            )
        groups[label] = y_arr[inverse == i]
    return groups


def _build(groups: dict[str, NDArray], *, source: str) -> OnewayDesign:
    """Apply the invariants shared by every factory."""
    for label, arr in groups.items():
        if len(arr) == 0:
            raise ValidationError(f"group {label!r} has 0 observations")

    if len(groups) < 2:
        raise ValidationError(
            f"groups: need at least 2 groups, got {len(groups)}"
        )

    # Private read-only copies; callers keep their buffers
    owned: dict[str, NDArray] = {}
    for label, arr in groups.items():
        copy = np.array(arr, dtype=np.float64, copy=True)
        copy.setflags(write=False)
        owned[label] = copy

    return OnewayDesign(
        groups=owned,
        n=int(sum(len(arr) for arr in groups.values())),
        source=source,
    )
