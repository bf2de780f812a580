"""Tests for the Weights cost model."""

import dataclasses
import math

import numpy as np
import pytest

from softbisim.core import Weights, FIELD_NAMES, InvalidWeightsError


class TestWeights:
    """Tests for Weights construction and validation."""

    def test_balanced_defaults(self):
        """Balanced weights cost 1.0 per edit and nothing per match."""
        weights = Weights.balanced()
        assert weights.match == 0.0
        assert weights.replace == 1.0
        assert weights.insert == 1.0
        assert weights.delete == 1.0
        assert weights.transposition == 1.0

    def test_nine_coefficients_in_order(self):
        """Field order is fixed and includes the reserved operations."""
        assert FIELD_NAMES == (
            'match', 'replace', 'insert', 'delete', 'transposition',
            'merge', 'split', 'case_change', 'phonetic_change',
        )

    @pytest.mark.parametrize('bad', [-0.1, math.nan, math.inf, -math.inf])
    def test_rejects_invalid_coefficients(self, bad):
        """Negative and non-finite coefficients are rejected at construction."""
        with pytest.raises(InvalidWeightsError):
            Weights(replace=bad)

    def test_rejects_non_numeric(self):
        with pytest.raises(InvalidWeightsError):
            Weights(insert="cheap")

    @pytest.mark.parametrize('bad', ["0.5", True, False, np.bool_(True)])
    def test_rejects_strings_and_booleans(self, bad):
        """Numeric-looking strings and booleans are not coefficients."""
        with pytest.raises(InvalidWeightsError, match="must be a number"):
            Weights(delete=bad)

    def test_from_dict_rejects_quoted_numbers(self):
        data = Weights.balanced().to_dict()
        data['replace'] = "0.5"
        with pytest.raises(InvalidWeightsError):
            Weights.from_dict(data)

    def test_invalid_weights_error_is_value_error(self):
        assert issubclass(InvalidWeightsError, ValueError)

    def test_coerces_ints_to_float(self):
        weights = Weights(replace=2)
        assert isinstance(weights.replace, float)
        assert weights.replace == 2.0

    def test_frozen(self):
        """Weights are immutable values."""
        weights = Weights.balanced()
        with pytest.raises(dataclasses.FrozenInstanceError):
            weights.match = 0.5

    def test_dict_round_trip(self):
        weights = Weights(match=0.1, replace=0.2, insert=0.3, delete=0.4,
                          transposition=0.5, merge=0.6, split=0.7,
                          case_change=0.8, phonetic_change=0.9)
        assert Weights.from_dict(weights.to_dict()) == weights

    def test_from_dict_missing_keys(self):
        data = Weights.balanced().to_dict()
        del data['merge']
        with pytest.raises(InvalidWeightsError, match="Missing"):
            Weights.from_dict(data)

    def test_from_dict_unknown_keys(self):
        data = Weights.balanced().to_dict()
        data['swap'] = 1.0
        with pytest.raises(InvalidWeightsError, match="Unknown"):
            Weights.from_dict(data)

    def test_array_follows_field_order(self):
        weights = Weights(match=0.25, case_change=0.75)
        array = weights.to_array()
        assert array.shape == (9,)
        assert array[FIELD_NAMES.index('match')] == 0.25
        assert array[FIELD_NAMES.index('case_change')] == 0.75
        assert Weights.from_array(array) == weights

    def test_from_array_wrong_shape(self):
        with pytest.raises(InvalidWeightsError):
            Weights.from_array([0.1, 0.2])

    def test_random_in_unit_interval(self):
        """Random weights draw every coefficient from [0, 1)."""
        rng = np.random.default_rng(7)
        for _ in range(20):
            values = Weights.random(rng).to_array()
            assert np.all(values >= 0.0)
            assert np.all(values < 1.0)

    def test_random_is_seedable(self):
        first = Weights.random(np.random.default_rng(3))
        second = Weights.random(np.random.default_rng(3))
        assert first == second
