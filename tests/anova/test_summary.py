"""
Tests for the ANOVA table and F test.

Validates:
    - Coagulation F ≈ 13.57 on (3, 20) df, p < 0.001
    - Agreement with scipy.stats.f_oneway
    - Table structure (rows, absent cells)
    - Idempotence
    - DegenerateDesignError for zero df / zero residual variance
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pyoneway.core.exceptions import DegenerateDesignError, NumericalError
from pyoneway.anova import anova_summary, oneway, oneway_factor


class TestCoagulationTable:

    def test_f_statistic(self, coag_groups):
        summary = anova_summary(oneway(coag_groups))
        np.testing.assert_allclose(summary.f_value, 76.0 / 5.6, rtol=1e-10)
        assert round(summary.f_value, 2) == 13.57

    def test_p_value(self, coag_groups):
        summary = anova_summary(oneway(coag_groups))
        assert summary.p_value < 0.001
        np.testing.assert_allclose(
            summary.p_value, sp_stats.f.sf(76.0 / 5.6, 3, 20), rtol=1e-10
        )

    def test_mean_squares(self, coag_groups):
        summary = anova_summary(oneway(coag_groups))
        np.testing.assert_allclose(summary.ms, (76.0, 5.6), rtol=1e-10)

    def test_totals(self, coag_groups):
        summary = anova_summary(oneway(coag_groups))
        np.testing.assert_allclose(summary.ss_total, 340.0, rtol=1e-10)
        assert summary.df_total == 23

    def test_grand_mean_and_eta_squared(self, coag_groups):
        summary = anova_summary(oneway(coag_groups))
        np.testing.assert_allclose(summary.grand_mean, 64.0, rtol=1e-12)
        np.testing.assert_allclose(summary.eta_squared, 228.0 / 340.0, rtol=1e-10)


class TestTableStructure:

    def test_rows(self, coag_groups):
        table = anova_summary(oneway(coag_groups)).table
        assert [row.term for row in table] == ['Among Group', 'Within Group', 'Total']

    def test_row_values(self, coag_groups):
        table = anova_summary(oneway(coag_groups)).table
        among, within, total = table
        assert (among.df, within.df, total.df) == (3, 20, 23)
        np.testing.assert_allclose(
            [among.sum_sq, within.sum_sq, total.sum_sq], [228.0, 112.0, 340.0]
        )
        np.testing.assert_allclose([among.mean_sq, within.mean_sq], [76.0, 5.6])

    def test_absent_cells(self, coag_groups):
        among, within, total = anova_summary(oneway(coag_groups)).table
        assert among.f_value is not None and among.p_value is not None
        assert within.f_value is None and within.p_value is None
        assert total.mean_sq is None
        assert total.f_value is None and total.p_value is None

    def test_f_is_ms_ratio(self, oneway_unbalanced):
        y, group = oneway_unbalanced
        summary = anova_summary(oneway_factor(group, y))
        expected = summary.table[0].mean_sq / summary.table[1].mean_sq
        np.testing.assert_allclose(summary.f_value, expected, rtol=1e-12)


class TestAgainstScipy:

    @pytest.mark.parametrize(
        "fixture", ["oneway_balanced", "oneway_unbalanced", "oneway_no_effect"]
    )
    def test_matches_f_oneway(self, fixture, request):
        y, group = request.getfixturevalue(fixture)
        summary = anova_summary(oneway_factor(group, y))
        samples = [y[group == g] for g in ('A', 'B', 'C')]
        f_ref, p_ref = sp_stats.f_oneway(*samples)
        np.testing.assert_allclose(summary.f_value, f_ref, rtol=1e-8)
        np.testing.assert_allclose(summary.p_value, p_ref, rtol=1e-6)

    def test_no_effect_not_significant(self, oneway_no_effect):
        y, group = oneway_no_effect
        summary = anova_summary(oneway_factor(group, y))
        assert summary.p_value > 0.01


class TestLargeOffset:

    @pytest.fixture
    def shifted(self):
        return {
            'A': np.array([1.0, 2.0, 3.0, 4.0]) + 1e9,
            'B': np.array([2.0, 3.0, 5.0, 6.0]) + 1e9,
        }

    def test_sums_of_squares(self, shifted):
        result = oneway(shifted)
        np.testing.assert_allclose(result.ss_within, 4.5, rtol=1e-8)
        np.testing.assert_allclose(result.ss_between, 15.0, rtol=1e-8)

    def test_matches_f_oneway(self, shifted):
        summary = anova_summary(oneway(shifted))
        f_ref, p_ref = sp_stats.f_oneway(*shifted.values())
        np.testing.assert_allclose(summary.f_value, 1.8, rtol=1e-8)
        np.testing.assert_allclose(summary.f_value, f_ref, rtol=1e-8)
        np.testing.assert_allclose(summary.p_value, p_ref, rtol=1e-6)

    def test_means_not_shifted(self, shifted):
        result = oneway(shifted)
        assert result.means['A'] == pytest.approx(1e9 + 2.5)
        assert result.means['B'] == pytest.approx(1e9 + 4.0)


class TestIdempotence:

    def test_same_output_twice(self, coag_groups):
        result = oneway(coag_groups)
        first = anova_summary(result)
        second = anova_summary(result)
        assert first.table == second.table
        assert first.f_value == second.f_value
        assert first.p_value == second.p_value

    def test_method_matches_function(self, coag_groups):
        result = oneway(coag_groups)
        assert result.anova_summary().table == anova_summary(result).table

    def test_call_propagated(self, coag_data):
        from pyoneway.anova import oneway_formula
        summary = anova_summary(oneway_formula("coag ~ diet", coag_data))
        assert summary.call == "oneway(coag ~ diet)"


class TestDegenerateDesign:

    def test_one_observation_per_group(self, one_obs_per_group):
        result = oneway(one_obs_per_group)
        with pytest.raises(DegenerateDesignError, match="residual df = 0") as exc:
            anova_summary(result)
        assert exc.value.df_within == 2
        assert exc.value.df_between == 0

    def test_is_numerical_error(self, one_obs_per_group):
        with pytest.raises(NumericalError):
            anova_summary(oneway(one_obs_per_group))

    def test_zero_residual_variance(self):
        result = oneway({'A': [1.0, 1.0, 1.0], 'B': [2.0, 2.0]})
        with pytest.raises(DegenerateDesignError, match="residual mean square"):
            anova_summary(result)
