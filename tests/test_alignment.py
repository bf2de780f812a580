"""
Tests for bigram extraction and the weighted alignment.
"""

import types

import pytest

from softbisim.core import (
    Weights,
    compute_bigrams,
    iter_bigrams,
    bigram_count,
    alignment_cost,
    soft_bisim_distance,
    WeightedAlignment,
)


def full_matrix_cost(source, target, weights):
    """Straightforward (m+1)x(n+1) version of the recurrence."""
    m, n = len(source), len(target)
    d = [[0.0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        d[i][0] = i * weights.delete
    for j in range(n + 1):
        d[0][j] = j * weights.insert
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if source[i - 1] == target[j - 1]:
                d[i][j] = d[i - 1][j - 1] + weights.match
                continue
            cost = weights.replace
            if source[i - 1].lower() == target[j - 1].lower():
                cost = weights.case_change
            d[i][j] = min(d[i - 1][j] + weights.delete,
                          d[i][j - 1] + weights.insert,
                          d[i - 1][j - 1] + cost)
            if (i > 1 and j > 1 and source[i - 1] == target[j - 2]
                    and source[i - 2] == target[j - 1]):
                d[i][j] = min(d[i][j], d[i - 2][j - 2] + weights.transposition)
    return d[m][n]


SKEWED = Weights(match=0.1, replace=0.7, insert=0.4, delete=0.4,
                 transposition=0.3, case_change=0.2)

NAME_PAIRS = [
    ("Schwarz", "Schwartz"),
    ("Juan", "Huan"),
    ("Шварц", "Swarz"),
    ("Kowalczyk", "Kovalchik"),
    ("Margaret", "Margarethe"),
    ("xyx", "yxy"),
]


class TestBigrams:
    """Tests for bigram extraction."""

    def test_sliding_window(self):
        assert compute_bigrams("abcd") == ["ab", "bc", "cd"]

    def test_short_inputs_have_no_bigrams(self):
        """Empty and single-character names yield an empty sequence."""
        assert compute_bigrams("") == []
        assert compute_bigrams("a") == []

    def test_code_points_not_bytes(self):
        """Multi-byte scripts are windowed per character."""
        assert compute_bigrams("Шварц") == ["Шв", "ва", "ар", "рц"]
        assert compute_bigrams("דוד") == ["דו", "וד"]

    def test_count(self):
        assert bigram_count("abcd") == 3
        assert bigram_count("a") == 0
        assert bigram_count("") == 0

    def test_iter_is_lazy(self):
        bigrams = iter_bigrams("abc")
        assert isinstance(bigrams, types.GeneratorType)
        assert list(bigrams) == ["ab", "bc"]


class TestAlignmentCost:
    """Tests for the weighted bigram recurrence."""

    def test_identical_sequences_cost_only_matches(self):
        """Every position is an exact match."""
        bigrams = compute_bigrams("abcdef")
        weights = Weights(match=0.3)
        assert alignment_cost(bigrams, bigrams, weights) == pytest.approx(5 * 0.3)

    def test_identical_with_free_match_is_zero(self):
        bigrams = compute_bigrams("margaret")
        assert alignment_cost(bigrams, bigrams, Weights.balanced()) == 0.0

    def test_empty_source_costs_insertions(self):
        weights = Weights(insert=0.7, delete=0.4)
        assert alignment_cost([], ["ab", "bc"], weights) == pytest.approx(1.4)

    def test_empty_target_costs_deletions(self):
        weights = Weights(insert=0.7, delete=0.4)
        assert alignment_cost(["ab", "bc"], [], weights) == pytest.approx(0.8)

    def test_both_empty(self):
        assert alignment_cost([], [], Weights.balanced()) == 0.0

    def test_case_change_cost(self):
        """Bigrams differing only in case use the case-change cost."""
        weights = Weights(replace=1.0, case_change=0.25)
        assert alignment_cost(["Ab"], ["ab"], weights) == pytest.approx(0.25)
        assert alignment_cost(["Ab"], ["xy"], weights) == pytest.approx(1.0)

    def test_substitution_vs_insert_delete(self):
        """Expensive replacement falls back to delete + insert."""
        weights = Weights(replace=5.0, insert=1.0, delete=1.0)
        assert alignment_cost(["ab"], ["cd"], weights) == pytest.approx(2.0)

    def test_swapped_bigrams_use_transposition(self):
        weights = Weights(transposition=0.5)
        assert alignment_cost(["ab", "cd"], ["cd", "ab"], weights) == pytest.approx(0.5)

    def test_transposition_only_when_cheaper(self):
        """Two substitutions win when transposition costs more."""
        weights = Weights(transposition=5.0)
        assert alignment_cost(["ab", "cd"], ["cd", "ab"], weights) == pytest.approx(2.0)

    def test_abcd_abdc_has_no_swapped_bigrams(self):
        """A character swap changes bigrams rather than swapping them."""
        weights = Weights(match=0.0, replace=1.0, insert=1.0, delete=1.0, transposition=1.0)
        source = compute_bigrams("abcd")
        target = compute_bigrams("abdc")
        assert target == ["ab", "bd", "dc"]
        assert alignment_cost(source, target, weights) == pytest.approx(2.0)

    @pytest.mark.parametrize('name1,name2', NAME_PAIRS)
    def test_rolling_rows_match_full_matrix(self, name1, name2):
        a, b = compute_bigrams(name1), compute_bigrams(name2)
        assert alignment_cost(a, b, SKEWED) == pytest.approx(full_matrix_cost(a, b, SKEWED))

    def test_merge_and_split_do_not_change_result(self):
        """Reserved operations are accepted but not used."""
        a, b = compute_bigrams("margaret"), compute_bigrams("margarethe")
        base = alignment_cost(a, b, Weights(merge=0.0, split=0.0, phonetic_change=0.0))
        other = alignment_cost(a, b, Weights(merge=9.0, split=9.0, phonetic_change=9.0))
        assert base == other


class TestSoftBisimDistance:
    """Tests for distance on raw names."""

    @pytest.mark.parametrize('name1,name2', NAME_PAIRS)
    def test_symmetric(self, name1, name2):
        """Distance is symmetric when insert and delete cost the same."""
        assert soft_bisim_distance(name1, name2, SKEWED) == pytest.approx(
            soft_bisim_distance(name2, name1, SKEWED)
        )

    @pytest.mark.parametrize('field', ['replace', 'insert', 'delete', 'transposition', 'match'])
    @pytest.mark.parametrize('name1,name2', NAME_PAIRS)
    def test_raising_a_cost_never_lowers_distance(self, field, name1, name2):
        base = SKEWED.to_dict()
        raised = dict(base, **{field: base[field] + 0.5})
        assert soft_bisim_distance(name1, name2, SKEWED) <= soft_bisim_distance(
            name1, name2, Weights.from_dict(raised)
        ) + 1e-12

    def test_identity(self):
        for name, _ in NAME_PAIRS:
            assert soft_bisim_distance(name, name, Weights.balanced()) == 0.0

    def test_transposed_names(self):
        """'xyx' and 'yxy' are a single swap of bigrams 'xy' and 'yx'."""
        assert soft_bisim_distance("xyx", "yxy", Weights(transposition=0.5)) == pytest.approx(0.5)
        assert soft_bisim_distance("xyx", "yxy", Weights(transposition=5.0)) == pytest.approx(2.0)

    def test_single_character_names_are_degenerate(self):
        """Single characters have no bigrams, so any two are at distance zero."""
        assert soft_bisim_distance("a", "z", Weights.balanced()) == 0.0

    def test_same_german_spelling_variants(self):
        assert soft_bisim_distance("Schwarz", "Schwartz", Weights.balanced()) == 0.0

    def test_weighted_alignment_override(self):
        aligner = WeightedAlignment(Weights(transposition=0.5))
        assert aligner.distance("xyx", "yxy") == pytest.approx(0.5)
        assert aligner.distance("xyx", "yxy", Weights(transposition=5.0)) == pytest.approx(2.0)
