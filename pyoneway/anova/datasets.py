"""
Reference datasets for one-way ANOVA validation and examples.
"""

import numpy as np

# Blood coagulation times by diet.
# 24 animals randomly assigned to 4 diets; coagulation time in seconds.
# Source: Box, Hunter & Hunter, "Statistics for Experimenters", Wiley, 1978.
coagulation = {
    'coag': np.array([
        62.0, 60.0, 63.0, 59.0,
        63.0, 67.0, 71.0, 64.0, 65.0, 66.0,
        68.0, 66.0, 71.0, 67.0, 68.0, 68.0,
        56.0, 62.0, 60.0, 61.0, 63.0, 64.0, 63.0, 59.0,
    ]),
    'diet': np.array(
        ['A'] * 4 + ['B'] * 6 + ['C'] * 6 + ['D'] * 8
    ),
}


def coagulation_groups() -> dict[str, np.ndarray]:
    """Coagulation times split by diet, {diet: times}."""
    coag, diet = coagulation['coag'], coagulation['diet']
    return {level: coag[diet == level] for level in ('A', 'B', 'C', 'D')}
