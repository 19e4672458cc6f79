"""
Tests for OnewayDesign (the grouped-data adapter).

Validates:
    - Mapping input used as-is, unlabeled sequences get "1".."k"
    - Factor/response splitting, level ordering
    - Formula input equals a manual split
    - InvalidInput cases: length mismatch, missing column, empty group,
      non-numeric / non-finite responses, single group
"""

import numpy as np
import pytest

from pyoneway.core.exceptions import DimensionError, ValidationError
from pyoneway.anova.design import OnewayDesign


class TestFromGroups:

    def test_mapping_preserves_order_and_values(self):
        design = OnewayDesign.from_groups({'b': [1, 2], 'a': [3.0, 4.0, 5.0]})
        assert design.labels == ('b', 'a')
        np.testing.assert_array_equal(design.groups['a'], [3.0, 4.0, 5.0])
        assert design.n == 5
        assert design.n_levels == 2
        assert design.source == 'groups'

    def test_values_become_float(self):
        design = OnewayDesign.from_groups({'x': [1, 2], 'y': [3, 4]})
        assert np.issubdtype(design.groups['x'].dtype, np.floating)

    def test_unlabeled_sequences_numbered(self):
        design = OnewayDesign.from_groups([[1.0, 2.0], [3.0], [4.0, 5.0]])
        assert design.labels == ('1', '2', '3')

    def test_non_string_labels_stringified(self):
        design = OnewayDesign.from_groups({1: [1.0, 2.0], 2: [3.0, 4.0]})
        assert design.labels == ('1', '2')

    def test_duplicate_labels_after_stringify(self):
        with pytest.raises(ValidationError, match="duplicate"):
            OnewayDesign.from_groups({1: [1.0], '1': [2.0]})

    def test_empty_group_rejected(self):
        with pytest.raises(ValidationError, match="0 observations"):
            OnewayDesign.from_groups({'A': [1.0, 2.0], 'B': []})

    def test_single_group_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 groups"):
            OnewayDesign.from_groups({'A': [1.0, 2.0, 3.0]})

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            OnewayDesign.from_groups({'A': ['x', 'y'], 'B': [1.0]})

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            OnewayDesign.from_groups({'A': [1.0, np.nan], 'B': [1.0]})

    def test_2d_group_rejected(self):
        with pytest.raises(DimensionError):
            OnewayDesign.from_groups({'A': [[1.0, 2.0]], 'B': [1.0]})


class TestFromFactor:

    def test_split_by_level(self):
        factor = ['b', 'a', 'b', 'a', 'c']
        y = [1.0, 2.0, 3.0, 4.0, 5.0]
        design = OnewayDesign.from_factor(factor, y)
        assert design.labels == ('a', 'b', 'c')
        np.testing.assert_array_equal(design.groups['a'], [2.0, 4.0])
        np.testing.assert_array_equal(design.groups['b'], [1.0, 3.0])
        np.testing.assert_array_equal(design.groups['c'], [5.0])
        assert design.source == 'factor'

    def test_numeric_levels_sorted_numerically(self):
        design = OnewayDesign.from_factor([10, 2, 10, 2], [1.0, 2.0, 3.0, 4.0])
        assert design.labels == ('2', '10')

    def test_matches_coagulation_split(self, coag_data, coag_groups):
        design = OnewayDesign.from_factor(coag_data['diet'], coag_data['coag'])
        assert design.labels == tuple(coag_groups)
        for label, values in coag_groups.items():
            np.testing.assert_array_equal(design.groups[label], values)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            OnewayDesign.from_factor(['a', 'b', 'a'], [1.0, 2.0])

    def test_length_mismatch_is_validation_error(self):
        with pytest.raises(ValidationError):
            OnewayDesign.from_factor(['a', 'b'], [1.0, 2.0, 3.0])

    def test_missing_labels_rejected(self):
        with pytest.raises(ValidationError, match="missing group labels"):
            OnewayDesign.from_factor(
                np.array(['a', None, 'b'], dtype=object), [1.0, 2.0, 3.0],
            )

    def test_nan_numeric_labels_rejected(self):
        with pytest.raises(ValidationError, match="missing group labels"):
            OnewayDesign.from_factor([1.0, np.nan, 2.0], [1.0, 2.0, 3.0])

    def test_single_level_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 groups"):
            OnewayDesign.from_factor(['a', 'a', 'a'], [1.0, 2.0, 3.0])

    def test_2d_factor_rejected(self):
        with pytest.raises(DimensionError):
            OnewayDesign.from_factor([['a', 'b']], [1.0, 2.0])


class TestFromFormula:

    def test_equals_manual_split(self, coag_data):
        from_formula = OnewayDesign.from_formula("coag ~ diet", coag_data)
        manual = OnewayDesign.from_factor(coag_data['diet'], coag_data['coag'])
        assert from_formula.labels == manual.labels
        for label in manual.labels:
            np.testing.assert_array_equal(
                from_formula.groups[label], manual.groups[label]
            )
        assert from_formula.source == 'formula'

    def test_whitespace_tolerant(self, coag_data):
        design = OnewayDesign.from_formula("  coag~diet ", coag_data)
        assert design.n == 24

    def test_pandas_dataframe(self, coag_data):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame(coag_data)
        design = OnewayDesign.from_formula("coag ~ diet", df)
        assert design.labels == ('A', 'B', 'C', 'D')
        assert design.n == 24

    def test_missing_response_column(self, coag_data):
        with pytest.raises(ValidationError, match="'time' not found"):
            OnewayDesign.from_formula("time ~ diet", coag_data)

    def test_missing_factor_column(self, coag_data):
        with pytest.raises(ValidationError, match="'treatment' not found"):
            OnewayDesign.from_formula("coag ~ treatment", coag_data)

    def test_error_names_the_column(self):
        data = {'y': [1.0, 2.0, 3.0], 'g': ['a', 'b']}
        with pytest.raises(DimensionError, match="g=2"):
            OnewayDesign.from_formula("y ~ g", data)
