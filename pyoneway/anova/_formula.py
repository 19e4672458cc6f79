"""
Parsing of one-way model formulas.

Only the single-factor form ``response ~ factor`` is understood. Anything
with operators on either side (``a + b``, ``a:b``, ``a * b``, ``a | b``) is a
multi-term model and is rejected.
"""

import re

from pyoneway.core.exceptions import ValidationError

_FORMULA_RE = re.compile(r"^\s*([^~+*:|]+?)\s*~\s*([^~+*:|]+?)\s*$")


def parse_formula(formula: str) -> tuple[str, str]:
    """
    Split a ``response ~ factor`` formula into its two column names.

    Args:
        formula: Formula string, e.g. ``"coag ~ diet"``

    Returns:
        (response_name, factor_name)

    Raises:
        ValidationError: If the formula is not a single-factor formula
    """
    if not isinstance(formula, str):
        raise ValidationError(
            f"formula: expected a string like 'response ~ factor', "
            f"got {type(formula).__name__}"
        )

    match = _FORMULA_RE.match(formula)
    if match is None:
        raise ValidationError(
            f"formula: expected the form 'response ~ factor', got {formula!r}"
        )

    response, factor = match.group(1), match.group(2)
    if response == factor:
        raise ValidationError(
            f"formula: response and factor must differ, got {response!r} on both sides"
        )
    return response, factor
