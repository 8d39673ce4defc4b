"""
Polynomial representation module for PyNilHecke.

This module provides the monomials and polynomials of the odd polynomial
ring. Generators x_1, x_2, ... are odd: multiplying two monomials picks up a
sign from every odd-exponent generator of the right factor that crosses an
odd number of generators of the left factor.
"""

import numpy as np
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from pynilhecke.utils import check_strand, pad_powers, trim_powers


class OddMonomial:
    """A signed integer coefficient times a product of odd generators."""

    __slots__ = ('coefficient', 'powers')

    def __init__(self, coefficient: int, powers: Sequence[int] = ()):
        """Initialize a monomial.

        Args:
            coefficient: Signed integer coefficient
            powers: Exponents of x_1, x_2, ... in ascending order
        """
        self.coefficient = int(coefficient)
        self.powers = tuple(int(p) for p in powers)

    @classmethod
    def x(cls, i: int) -> "OddMonomial":
        """Return the generator x_i (1-based) with coefficient 1."""
        if i < 1:
            raise ValueError(f"Generator index must be at least 1, got {i}")
        return cls(1, (0,) * (i - 1) + (1,))

    def is_zero(self) -> bool:
        return self.coefficient == 0

    def support(self) -> Tuple[int, ...]:
        """The power vector without trailing zeros."""
        return trim_powers(self.powers)

    def degree(self) -> int:
        """Get the total degree of the monomial."""
        return sum(self.powers)

    def scale(self, factor: int) -> "OddMonomial":
        return OddMonomial(self.coefficient * factor, self.powers)

    def __neg__(self) -> "OddMonomial":
        return self.scale(-1)

    def _key(self) -> Tuple[int, Tuple[int, ...]]:
        # All zero monomials are the same element
        if self.is_zero():
            return (0, ())
        return (self.coefficient, self.support())

    def __eq__(self, other):
        if not isinstance(other, OddMonomial):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self) -> str:
        return f"OddMonomial({self.coefficient}, {list(self.powers)})"

    def __str__(self) -> str:
        body = self.unsigned_str()
        if self.coefficient < 0:
            return f"-{body}"
        return body

    def unsigned_str(self) -> str:
        """Format the monomial without its sign."""
        if self.is_zero():
            return "0"
        magnitude = abs(self.coefficient)
        support = self.support()
        if not support:
            return str(magnitude)

        coef_str = "" if magnitude == 1 else str(magnitude)
        var_strs = [f"x_{i + 1}^{p}" for i, p in enumerate(support) if p != 0]
        return coef_str + " ".join(var_strs)

    def __mul__(self, other: "OddMonomial") -> "OddMonomial":
        """Multiply two monomials, keeping track of the odd sign.

        The running count starts at the number of generators x_2, x_3, ...
        of the left factor. Walking the right factor from x_1 upwards, an odd
        power meeting an odd count flips the sign; afterwards the left
        factor's power of the next generator leaves the count.
        """
        if not isinstance(other, OddMonomial):
            return NotImplemented
        own = pad_powers(self.powers, len(other.powers))
        powers = list(own)
        coefficient = self.coefficient * other.coefficient
        remaining = sum(self.powers[1:])

        for i, power in enumerate(other.powers):
            powers[i] += power
            if remaining % 2 != 0 and power % 2 != 0:
                coefficient = -coefficient
            if remaining > 0:
                remaining -= own[i + 1]

        return OddMonomial(coefficient, powers)

    # Elementary generator transforms

    def ss(self, n: int) -> "OddMonomial":
        """Swap x_n and x_{n+1}, negating when their exponents sum to odd."""
        n = check_strand('s', n)
        powers = pad_powers(self.powers, n + 1)
        coefficient = self.coefficient
        if (powers[n - 1] + powers[n]) % 2 != 0:
            coefficient = -coefficient
        powers[n - 1], powers[n] = powers[n], powers[n - 1]
        return OddMonomial(coefficient, powers)

    def sb(self, n: int) -> "OddMonomial":
        """Negate when the exponent of x_n is odd."""
        n = check_strand('b', n)
        powers = pad_powers(self.powers, n)
        coefficient = self.coefficient
        if powers[n - 1] % 2 != 0:
            coefficient = -coefficient
        return OddMonomial(coefficient, powers)

    def sd(self, n: int) -> "OddMonomial":
        """Swap x_{n-1} and x_n without a sign change."""
        n = check_strand('d', n)
        powers = pad_powers(self.powers, n + 1)
        powers[n - 2], powers[n - 1] = powers[n - 1], powers[n - 2]
        return OddMonomial(self.coefficient, powers)

    # Divided-difference operators

    def ps(self, n: int) -> "OddPolynomial":
        from pynilhecke.operators import apply_monomial
        return apply_monomial('s', self, n)

    def pb(self, n: int) -> "OddPolynomial":
        from pynilhecke.operators import apply_monomial
        return apply_monomial('b', self, n)

    def pd(self, n: int) -> "OddPolynomial":
        from pynilhecke.operators import apply_monomial
        return apply_monomial('d', self, n)

    def as_polynomial(self) -> "OddPolynomial":
        """Convert this monomial to a polynomial."""
        return OddPolynomial.from_monomial(self)


class OddPolynomial:
    """A sum of odd monomials with pairwise distinct supports.

    Terms are kept in insertion order, which is the display order. Equality
    and hashing ignore that order.
    """

    def __init__(self, terms: Optional[Sequence[OddMonomial]] = None):
        """Initialize a polynomial, merging the given terms in order."""
        self._terms: Dict[Tuple[int, ...], int] = {}
        for term in terms or ():
            self.add_monomial(term)

    @classmethod
    def from_monomial(cls, monomial: OddMonomial) -> "OddPolynomial":
        return cls([monomial])

    @classmethod
    def parse(cls, text: str) -> "OddPolynomial":
        """Read a polynomial from text (see pynilhecke.parser)."""
        from pynilhecke.parser import parse_polynomial
        return parse_polynomial(text)

    def add_monomial(self, monomial: OddMonomial) -> None:
        """Merge a monomial into this polynomial in place.

        A term with the same support absorbs the coefficient and is removed
        if it cancels; otherwise the monomial is appended.
        """
        if monomial.is_zero():
            return
        key = monomial.support()
        if key in self._terms:
            coefficient = self._terms[key] + monomial.coefficient
            if coefficient == 0:
                del self._terms[key]
            else:
                self._terms[key] = coefficient
        else:
            self._terms[key] = monomial.coefficient

    def copy(self) -> "OddPolynomial":
        result = OddPolynomial()
        result._terms = dict(self._terms)
        return result

    @property
    def terms(self) -> List[OddMonomial]:
        return [OddMonomial(c, s) for s, c in self._terms.items()]

    def __iter__(self) -> Iterator[OddMonomial]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __bool__(self) -> bool:
        return bool(self._terms)

    def is_zero(self) -> bool:
        return not self._terms

    def coefficient(self, powers: Sequence[int]) -> int:
        """Get the coefficient of the term with the given powers (0 if absent)."""
        return self._terms.get(trim_powers(powers), 0)

    def degree(self) -> int:
        """Get the maximum total degree of any term (0 for the zero polynomial)."""
        return max((sum(s) for s in self._terms), default=0)

    def is_homogeneous(self) -> bool:
        return len({sum(s) for s in self._terms}) <= 1

    def n_generators(self) -> int:
        """Index of the highest generator occurring in the polynomial."""
        return max((len(s) for s in self._terms), default=0)

    def exponent_matrix(self, n_vars: Optional[int] = None) -> np.ndarray:
        """Stack the term powers into an integer matrix.

        Args:
            n_vars: Number of columns (default: highest generator index)

        Returns:
            Array of shape (number of terms, n_vars)
        """
        width = self.n_generators() if n_vars is None else n_vars
        matrix = np.zeros((len(self._terms), width), dtype=np.int64)
        for row, support in enumerate(self._terms):
            if len(support) > width:
                raise ValueError(f"Term needs {len(support)} columns, only {width} requested")
            matrix[row, :len(support)] = support
        return matrix

    def canonical_key(self) -> Tuple[Tuple[Tuple[int, ...], int], ...]:
        """Terms as sorted (support, coefficient) pairs."""
        return tuple(sorted(self._terms.items()))

    def __eq__(self, other):
        if not isinstance(other, OddPolynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self):
        return hash(frozenset(self._terms.items()))

    def __repr__(self) -> str:
        return f"OddPolynomial({self})"

    def __str__(self) -> str:
        if not self._terms:
            return "0"

        parts: List[str] = []
        for i, term in enumerate(self.terms):
            if i == 0:
                parts.append(str(term))
            elif term.coefficient < 0:
                parts.append(f" - {term.unsigned_str()}")
            else:
                parts.append(f" + {term.unsigned_str()}")
        return "".join(parts)

    def to_input_string(self) -> str:
        """Format in the slash-separated numeric input syntax."""
        if not self._terms:
            return "0"
        return " / ".join(
            " ".join(str(v) for v in (c,) + s) for s, c in self._terms.items()
        )

    def __add__(self, other: "OddPolynomial") -> "OddPolynomial":
        if isinstance(other, OddMonomial):
            other = OddPolynomial.from_monomial(other)
        if not isinstance(other, OddPolynomial):
            return NotImplemented
        result = self.copy()
        for term in other.terms:
            result.add_monomial(term)
        return result

    def __neg__(self) -> "OddPolynomial":
        result = OddPolynomial()
        result._terms = {s: -c for s, c in self._terms.items()}
        return result

    def __sub__(self, other: "OddPolynomial") -> "OddPolynomial":
        if isinstance(other, OddMonomial):
            other = OddPolynomial.from_monomial(other)
        if not isinstance(other, OddPolynomial):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: "OddPolynomial") -> "OddPolynomial":
        """Multiply term by term through the signed monomial product."""
        if isinstance(other, OddMonomial):
            other = OddPolynomial.from_monomial(other)
        if not isinstance(other, OddPolynomial):
            return NotImplemented
        result = OddPolynomial()
        right_terms = other.terms
        for term1 in self.terms:
            for term2 in right_terms:
                result.add_monomial(term1 * term2)
        return result

    def __rmul__(self, other: OddMonomial) -> "OddPolynomial":
        """Handle multiplication when the monomial is on the left."""
        if isinstance(other, OddMonomial):
            return OddPolynomial.from_monomial(other) * self
        return NotImplemented

    def __radd__(self, other: OddMonomial) -> "OddPolynomial":
        if isinstance(other, OddMonomial):
            return OddPolynomial.from_monomial(other) + self
        return NotImplemented

    def ps(self, n: int) -> "OddPolynomial":
        from pynilhecke.operators import ps
        return ps(self, n)

    def pb(self, n: int) -> "OddPolynomial":
        from pynilhecke.operators import pb
        return pb(self, n)

    def pd(self, n: int) -> "OddPolynomial":
        from pynilhecke.operators import pd
        return pd(self, n)
