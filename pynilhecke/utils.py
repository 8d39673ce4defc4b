"""
Utility functions for PyNilHecke.

This module provides the exception types and the small validation helpers
used across the library.
"""

import operator
from typing import Sequence, Tuple


class NilHeckeError(Exception):
    """Base class for all errors raised by pynilhecke."""


class ParseError(NilHeckeError, ValueError):
    """Raised when a polynomial cannot be read from text."""


class InvalidStrand(NilHeckeError, ValueError):
    """Raised when a strand index or rank is below the allowed minimum."""


def _as_index(n, message: str) -> int:
    """Convert any integer type (numpy included) to a plain int."""
    if isinstance(n, bool):
        raise InvalidStrand(message)
    try:
        return operator.index(n)
    except TypeError as e:
        raise InvalidStrand(message) from e


# Smallest strand each operator family accepts
MIN_STRAND = {
    's': 1,
    'b': 1,
    'd': 2,
}


def check_strand(family: str, n: int) -> int:
    """Validate a strand index for an operator family.

    Args:
        family: One of 's', 'b' or 'd'
        n: Strand index

    Returns:
        The strand index as a plain int

    Raises:
        InvalidStrand: If the family is unknown or n is below its minimum
    """
    if family not in MIN_STRAND:
        raise InvalidStrand(f"unknown operator symbol {family}")
    n = _as_index(n, f"{family}{n} is not a valid operator")
    if n < MIN_STRAND[family]:
        raise InvalidStrand(f"{family}{n} is not a valid operator")
    return n


def check_rank(n: int) -> int:
    """Validate the rank passed to the closure enumerator."""
    n = _as_index(n, f"invalid value for n: {n}")
    if n < 2:
        raise InvalidStrand(f"invalid value for n: {n}")
    return n


def trim_powers(powers: Sequence[int]) -> Tuple[int, ...]:
    """Strip trailing zero exponents, giving the canonical support."""
    end = len(powers)
    while end > 0 and powers[end - 1] == 0:
        end -= 1
    return tuple(powers[:end])


def pad_powers(powers: Sequence[int], length: int) -> list:
    """Return the powers as a list zero-padded to at least `length` entries."""
    padded = list(powers)
    if len(padded) < length:
        padded.extend([0] * (length - len(padded)))
    return padded
