"""
Divided-difference operators for PyNilHecke.

This module implements the three operator families acting on the odd
polynomial ring:

- ``ps`` (family S): boundary at x_n and x_{n+1}, twisted by ``ss``
- ``pb`` (family B): boundary at x_n, twisted by ``sb``
- ``pd`` (family D): boundary +x_{n-1} / -x_n, twisted by ``sd``

Each operator is defined on a monomial by peeling off its lowest generator
(Leibniz rule)::

    F(x_p * g) = c(p) * g + T(x_p) * F(g)

and extended linearly to polynomials.
"""

from typing import Callable, Dict, List, Tuple

from pynilhecke.polynomial import OddMonomial, OddPolynomial
from pynilhecke.utils import InvalidStrand, ParseError, check_strand


def _boundary_s(pos: int, n: int) -> int:
    return 1 if pos == n - 1 or pos == n else 0


def _boundary_b(pos: int, n: int) -> int:
    return 1 if pos == n - 1 else 0


def _boundary_d(pos: int, n: int) -> int:
    if pos == n - 2:
        return 1
    if pos == n - 1:
        return -1
    return 0


# family -> (boundary coefficient, generator transform)
FAMILIES: Dict[str, Tuple[Callable[[int, int], int], Callable[[OddMonomial, int], OddMonomial]]] = {
    's': (_boundary_s, OddMonomial.ss),
    'b': (_boundary_b, OddMonomial.sb),
    'd': (_boundary_d, OddMonomial.sd),
}


def apply_monomial(family: str, monomial: OddMonomial, n: int) -> OddPolynomial:
    """Apply one operator family to a single monomial.

    Args:
        family: 's', 'b' or 'd'
        monomial: The monomial to act on
        n: Strand index

    Returns:
        The resulting polynomial

    Raises:
        InvalidStrand: If n is below the family minimum
    """
    n = check_strand(family, n)
    boundary, transform = FAMILIES[family]

    # Walk the Leibniz peel once, remembering each boundary term and twisted
    # generator, then fold back from the innermost step.
    steps: List[Tuple[OddMonomial, OddMonomial]] = []
    powers = list(monomial.powers)
    while True:
        pos = next((i for i, p in enumerate(powers) if p != 0), None)
        if pos is None:
            break
        powers[pos] -= 1
        g = OddMonomial(monomial.coefficient, powers)
        twisted = transform(OddMonomial.x(pos + 1), n)
        steps.append((g.scale(boundary(pos, n)), twisted))

    result = OddPolynomial()
    for boundary_term, twisted in reversed(steps):
        result = OddPolynomial.from_monomial(boundary_term) + twisted * result
    return result


def apply_operator(family: str, poly: OddPolynomial, n: int) -> OddPolynomial:
    """Apply an operator family to every term of a polynomial and sum."""
    n = check_strand(family, n)
    result = OddPolynomial()
    for term in poly.terms:
        result = result + apply_monomial(family, term, n)
    return result


def ps(poly: OddPolynomial, n: int) -> OddPolynomial:
    """Family S operator on strand n (n >= 1)."""
    return apply_operator('s', poly, n)


def pb(poly: OddPolynomial, n: int) -> OddPolynomial:
    """Family B operator on strand n (n >= 1)."""
    return apply_operator('b', poly, n)


def pd(poly: OddPolynomial, n: int) -> OddPolynomial:
    """Family D operator on strand n (n >= 2)."""
    return apply_operator('d', poly, n)


def parse_word(word: str) -> List[Tuple[str, int]]:
    """Split an operator word such as "s1 d3 b2" into (family, strand) pairs.

    Raises:
        InvalidStrand: On an unknown family symbol or a strand below the minimum
        ParseError: If a strand number is not an integer
    """
    ops: List[Tuple[str, int]] = []
    for token in word.split():
        family = token[0]
        if family not in FAMILIES:
            raise InvalidStrand(f"unknown operator symbol {family}")
        try:
            n = int(token[1:])
        except ValueError as e:
            raise ParseError(f"invalid operator number in {token!r}") from e
        ops.append((family, check_strand(family, n)))
    return ops


def apply_word(poly: OddPolynomial, word: str) -> OddPolynomial:
    """Apply an operator word to a polynomial, rightmost operator first."""
    for family, n in reversed(parse_word(word)):
        poly = apply_operator(family, poly, n)
    return poly
