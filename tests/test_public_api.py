"""
Test the public API and import functionality of PyNilHecke.

This ensures that all public functions and classes are properly exposed
and work as documented.
"""

import pytest


class TestImports:
    """Test that all public API elements can be imported correctly."""

    def test_main_imports(self):
        """Test importing main classes and functions."""
        from pynilhecke import (
            OddMonomial,
            OddPolynomial,
            ps,
            pb,
            pd,
            apply_word,
            parse_polynomial,
            schubert_polynomials,
            SchubertSet,
        )

        assert OddMonomial is not None
        assert OddPolynomial is not None
        assert ps is not None
        assert pb is not None
        assert pd is not None
        assert apply_word is not None
        assert parse_polynomial is not None
        assert schubert_polynomials is not None
        assert SchubertSet is not None

    def test_error_imports(self):
        from pynilhecke import NilHeckeError, ParseError, InvalidStrand

        assert issubclass(ParseError, NilHeckeError)
        assert issubclass(InvalidStrand, NilHeckeError)
        assert issubclass(ParseError, ValueError)
        assert issubclass(InvalidStrand, ValueError)

    def test_star_import(self):
        """Test that __all__ is defined and lists the key names."""
        import pynilhecke

        assert hasattr(pynilhecke, '__all__')
        for name in ("OddPolynomial", "parse_polynomial", "schubert_polynomials", "InvalidStrand"):
            assert name in pynilhecke.__all__
            assert hasattr(pynilhecke, name)

    def test_version(self):
        import pynilhecke

        assert pynilhecke.__version__ == "0.1.0"

    def test_visualization_not_in_main_imports(self):
        import pynilhecke

        assert 'plot_closure_growth' not in pynilhecke.__all__
        assert not hasattr(pynilhecke, 'plot_closure_growth')


class TestDocumentedWorkflow:
    """Test the workflow shown in the example script."""

    def test_workflow(self):
        from pynilhecke import OddMonomial, apply_word, parse_polynomial, schubert_polynomials

        x1 = OddMonomial.x(1).as_polynomial()
        x2 = OddMonomial.x(2).as_polynomial()
        assert str(x1 * x2) == "x_1^1 x_2^1"
        assert str(x2 * x1) == "-x_1^1 x_2^1"

        p = parse_polynomial("1 2 1 / -3 0 1 1")
        for word in ("s1", "s2", "b1", "d2", "s1 s2"):
            result = apply_word(p, word)
            assert result.is_zero() or result.degree() == p.degree() - len(word.split())

        result = schubert_polynomials(3, parse_polynomial("1 2 1"))
        assert result.degree == 3
        assert len(result) >= 1
