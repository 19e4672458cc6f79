"""
pytest configuration and shared fixtures.

Provides reusable one-way datasets: the coagulation reference data,
seeded balanced / unbalanced designs and degenerate designs.
"""

import numpy as np
import pytest

from pyoneway.anova.datasets import coagulation, coagulation_groups


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def coag_data():
    """Coagulation data as a {column: array} table."""
    return {'coag': coagulation['coag'].copy(), 'diet': coagulation['diet'].copy()}


@pytest.fixture
def coag_groups():
    """Coagulation times split by diet."""
    return coagulation_groups()


@pytest.fixture
def oneway_balanced():
    """3-group balanced design (n=10 each), clear group differences."""
    rng = np.random.default_rng(42)
    n_per_group = 10
    y = np.concatenate([
        rng.normal(10.0, 2.0, n_per_group),
        rng.normal(15.0, 2.0, n_per_group),
        rng.normal(20.0, 2.0, n_per_group),
    ])
    group = np.array(['A'] * n_per_group + ['B'] * n_per_group + ['C'] * n_per_group)
    return y, group


@pytest.fixture
def oneway_unbalanced():
    """3-group unbalanced design (n=5, 10, 15)."""
    rng = np.random.default_rng(123)
    y = np.concatenate([
        rng.normal(10.0, 2.0, 5),
        rng.normal(15.0, 2.0, 10),
        rng.normal(20.0, 2.0, 15),
    ])
    group = np.array(['A'] * 5 + ['B'] * 10 + ['C'] * 15)
    return y, group


@pytest.fixture
def oneway_no_effect():
    """3-group design where all groups share a population mean."""
    rng = np.random.default_rng(99)
    n_per = 15
    y = rng.normal(10.0, 2.0, n_per * 3)
    group = np.array(['A'] * n_per + ['B'] * n_per + ['C'] * n_per)
    return y, group


@pytest.fixture
def one_obs_per_group():
    """Every group has a single observation, so residual df = 0."""
    return {'A': [1.0], 'B': [2.0], 'C': [4.0]}
