"""
PyNilHecke: A pure Python library for the odd nilHecke polynomial ring.

This library provides odd (anti-commuting) polynomials, the divided-difference
operators acting on them, and the closure that enumerates every polynomial
reachable from a seed for a given rank.
"""

__version__ = "0.1.0"

# Import from polynomial module
from pynilhecke.polynomial import (
    OddMonomial,
    OddPolynomial,
)

# Import from operators module
from pynilhecke.operators import (
    ps,
    pb,
    pd,
    apply_word,
)

# Import from other modules as needed
from pynilhecke.parser import parse_polynomial
from pynilhecke.schubert import schubert_polynomials, SchubertSet
from pynilhecke.utils import NilHeckeError, ParseError, InvalidStrand

# Note: plotting depends on matplotlib. To keep core imports lightweight we
# do not import pynilhecke.visualization here; import it directly when needed.

__all__ = [
    "OddMonomial",
    "OddPolynomial",
    "ps",
    "pb",
    "pd",
    "apply_word",
    "parse_polynomial",
    "schubert_polynomials",
    "SchubertSet",
    "NilHeckeError",
    "ParseError",
    "InvalidStrand",
]
