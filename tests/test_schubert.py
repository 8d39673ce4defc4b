"""
Tests for the closure enumerator of PyNilHecke.
"""

import pytest
import numpy as np

from pynilhecke import InvalidStrand, OddPolynomial, SchubertSet, parse_polynomial, schubert_polynomials
from pynilhecke.schubert import DEFAULT_CLOSURE_OPTIONS, closure_step


def test_generator_seed_rank_two():
    """Seed x_1 in rank 2 reaches 1 after one round and then stays put."""
    seed = parse_polynomial("1 1")
    result = schubert_polynomials(2, seed)

    assert isinstance(result, SchubertSet)
    assert result.degree == 1
    assert set(result.polynomials) == {seed, parse_polynomial("1")}

    again = schubert_polynomials(2, seed, degree=2)
    assert again.polynomials == result.polynomials


def test_square_seed_rank_two():
    seed = parse_polynomial("1 2")
    result = schubert_polynomials(2, seed)

    expected = {
        seed,
        parse_polynomial("1 1 / -1 0 1"),
        parse_polynomial("1 1 / 1 0 1"),
        parse_polynomial("2"),
    }
    assert result.degree == 2
    assert set(result.polynomials) == expected
    assert result.round_sizes() == [1, 3, 4]
    assert np.array_equal(result.degree_counts(), np.array([1, 2, 1]))


def test_fixed_point_after_degree_rounds():
    seed = parse_polynomial("1 2 1")
    result = schubert_polynomials(3, seed)
    extra = schubert_polynomials(3, seed, degree=result.degree + 1)
    assert result.degree == 3
    assert extra.polynomials == result.polynomials
    assert all(not poly.is_zero() for poly in result)


def test_include_zero_option():
    seed = parse_polynomial("1 1")
    result = schubert_polynomials(2, seed, degree=2, options={'include_zero': True})
    assert OddPolynomial() in result
    assert len(result) == 3
    # The defaults are left untouched
    assert DEFAULT_CLOSURE_OPTIONS['include_zero'] is False


def test_d_strands_option():
    seed = parse_polynomial("1 0 1")
    default = schubert_polynomials(3, seed)
    assert default._meta['d_strands'] == (3,)

    wider = schubert_polynomials(3, seed, options={'d_strands': [2, 3]})
    assert wider._meta['d_strands'] == (2, 3)
    # pd_2(x_2) = -1 only shows up when strand 2 is included
    assert parse_polynomial("-1") in wider
    assert parse_polynomial("-1") not in default


def test_zero_rounds_returns_seed():
    seed = parse_polynomial("1 3 1")
    result = schubert_polynomials(3, seed, degree=0)
    assert set(result.polynomials) == {seed}
    assert result.round_sizes() == [1]


def test_closure_step():
    seed = parse_polynomial("1 2")
    new = closure_step({seed}, 2, (2,))
    assert new == {parse_polynomial("1 1 / -1 0 1"), parse_polynomial("1 1 / 1 0 1")}


def test_sorted_order():
    result = schubert_polynomials(2, parse_polynomial("1 2"))
    ordered = result.sorted()
    assert ordered[0] == parse_polynomial("1 2")
    assert ordered[-1] == parse_polynomial("2")
    assert [p.degree() for p in ordered] == [2, 1, 1, 0]
    assert list(result) == ordered


def test_repr():
    result = schubert_polynomials(2, parse_polynomial("1 1"))
    text = repr(result)
    assert text.startswith("SchubertSet: 2 polynomials (n=2, 1 rounds)")
    assert "x_1^1" in text


def test_verbose(capsys):
    schubert_polynomials(2, parse_polynomial("1 1"), verbose=True)
    captured = capsys.readouterr()
    assert "Enumerating closure of x_1^1 for n=2 (1 rounds)" in captured.out
    assert "Found 2 distinct polynomials" in captured.out


class TestValidation:
    """Invalid parameters are rejected before enumeration."""

    @pytest.mark.parametrize("n", [0, 1, -3])
    def test_rank_too_small(self, n):
        with pytest.raises(InvalidStrand, match="invalid value for n"):
            schubert_polynomials(n, parse_polynomial("1 1"))

    def test_bad_d_strand(self):
        with pytest.raises(InvalidStrand):
            schubert_polynomials(3, parse_polynomial("1 1"), options={'d_strands': [1]})

    def test_negative_rounds(self):
        with pytest.raises(ValueError):
            schubert_polynomials(2, parse_polynomial("1 1"), degree=-1)


def test_numpy_rank_and_strands():
    seed = parse_polynomial("1 0 1")
    result = schubert_polynomials(np.int64(3), seed, options={'d_strands': np.array([2, 3])})
    assert result.n == 3
    assert result._meta['d_strands'] == (2, 3)
    assert set(result.polynomials) == set(schubert_polynomials(3, seed, options={'d_strands': [2, 3]}).polynomials)
