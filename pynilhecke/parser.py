"""
Reading odd polynomials from text.

Two syntaxes are accepted:

- the numeric input form, terms separated by ``/`` and each term given as
  whitespace-separated integers, coefficient first, then the exponents of
  x_1, x_2, ...::

      3 1 0 2 / -1 0 1      ->  3x_1^1 x_3^2 - x_2^1

- the display form produced by ``str(poly)``, recognised by the presence of
  ``x_``::

      3x_1^1 x_3^2 - x_2^1 + 5
"""

import re
from typing import List

from pynilhecke.polynomial import OddMonomial, OddPolynomial
from pynilhecke.utils import ParseError

TERM_SEPARATOR = '/'

_GENERATOR = re.compile(r'x_(\d+)(?:\^(\d+))?')
_DISPLAY_TERM = re.compile(r'^(\d*)\s*((?:x_\d+(?:\^\d+)?\s*)*)$')
_SIGNED = re.compile(r'^[+-]?[0-9]+$')
_UNSIGNED = re.compile(r'^\+?[0-9]+$')


def _parse_int(token: str, what: str, pattern=_SIGNED) -> int:
    if pattern.match(token) is None:
        raise ParseError(f"invalid {what}: {token!r}")
    return int(token)


def parse_numeric(text: str) -> OddPolynomial:
    """Parse the slash-separated numeric form."""
    monomials: List[OddMonomial] = []
    for term in text.split(TERM_SEPARATOR):
        tokens = term.split()
        if not tokens:
            raise ParseError("empty term")
        coefficient = _parse_int(tokens[0], "coefficient")
        powers = [_parse_int(tok, "power", _UNSIGNED) for tok in tokens[1:]]
        monomials.append(OddMonomial(coefficient, powers))
    return OddPolynomial(monomials)


def _parse_display_term(body: str, sign: int) -> OddMonomial:
    match = _DISPLAY_TERM.match(body.strip())
    if match is None or not (match.group(1) or match.group(2)):
        raise ParseError(f"invalid term: {body.strip()!r}")
    coefficient = int(match.group(1)) if match.group(1) else 1

    powers: List[int] = []
    for index, power in _GENERATOR.findall(match.group(2)):
        i = int(index)
        if i < 1:
            raise ParseError(f"invalid generator: x_{index}")
        if len(powers) < i:
            powers.extend([0] * (i - len(powers)))
        powers[i - 1] += int(power) if power else 1
    return OddMonomial(sign * coefficient, powers)


def parse_display(text: str) -> OddPolynomial:
    """Parse the form produced by ``str(OddPolynomial)``."""
    stripped = text.strip()
    sign = 1
    if stripped.startswith('-'):
        sign = -1
        stripped = stripped[1:]

    # Split on binary +/- keeping the operators
    pieces = re.split(r'\s*([+-])\s*', stripped)
    monomials = [_parse_display_term(pieces[0], sign)]
    for op, body in zip(pieces[1::2], pieces[2::2]):
        monomials.append(_parse_display_term(body, -1 if op == '-' else 1))
    return OddPolynomial(monomials)


def parse_polynomial(text: str) -> OddPolynomial:
    """Read a polynomial from text in either supported syntax.

    Args:
        text: The polynomial text

    Returns:
        The parsed polynomial

    Raises:
        ParseError: If a coefficient or exponent is malformed or a term is empty
    """
    if 'x_' in text:
        return parse_display(text)
    return parse_numeric(text)
