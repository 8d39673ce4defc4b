"""
Closure enumeration module for PyNilHecke.

This module provides the breadth-first closure that collects every
polynomial reachable from a seed under the divided-difference operators of
a given rank (the "Schubert polynomials" of that rank).
"""

import time
import numpy as np
from tqdm.auto import tqdm
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Set

from pynilhecke.operators import pd, ps
from pynilhecke.polynomial import OddPolynomial
from pynilhecke.utils import check_rank, check_strand

DEFAULT_CLOSURE_OPTIONS: Dict[str, Any] = {
    'include_zero': False,  # collect the zero polynomial as well
    # Strands for the D family; None means (n,). pd_1 is undefined, so D
    # cannot share the ps range 1..n-1; pd_n is the extra rank-n generator.
    'd_strands': None,
}


class SchubertSet:
    """Class representing the result of a closure run."""

    def __init__(self, polynomials: Set[OddPolynomial], n: int, seed: OddPolynomial, degree: int):
        """Initialize a closure result.

        Args:
            polynomials: The distinct polynomials collected
            n: Rank the closure was computed for
            seed: The starting polynomial
            degree: Number of rounds that were run
        """
        self.polynomials: FrozenSet[OddPolynomial] = frozenset(polynomials)
        self.n = n
        self.seed = seed
        self.degree = degree
        self._meta: Dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self.polynomials)

    def __iter__(self) -> Iterator[OddPolynomial]:
        return iter(self.sorted())

    def __contains__(self, poly: OddPolynomial) -> bool:
        return poly in self.polynomials

    def __repr__(self) -> str:
        header = f"SchubertSet: {len(self)} polynomials (n={self.n}, {self.degree} rounds)"
        if 'closure_time' in self._meta:
            header += f"\n  Closure time: {self._meta['closure_time']:.2f} seconds"
        lines = [str(poly) for poly in self.sorted()]
        return header + ("\n  " + "\n  ".join(lines) if lines else "")

    def sorted(self) -> List[OddPolynomial]:
        """Polynomials ordered by degree (highest first), then by their terms."""
        return sorted(self.polynomials, key=lambda p: (-p.degree(), p.canonical_key()))

    def degree_counts(self) -> np.ndarray:
        """Number of collected polynomials of each degree, indexed by degree."""
        degrees = [poly.degree() for poly in self.polynomials if not poly.is_zero()]
        return np.bincount(np.array(degrees, dtype=np.int64), minlength=self.degree + 1)

    def round_sizes(self) -> List[int]:
        """Size of the set after each round, starting with the seed alone."""
        return list(self._meta.get('round_sizes', []))


def closure_step(polys: Set[OddPolynomial], n: int, d_strands) -> Set[OddPolynomial]:
    """Apply every generating operator once to every polynomial in `polys`."""
    new: Set[OddPolynomial] = set()
    for poly in polys:
        for k in range(1, n):
            new.add(ps(poly, k))
        for k in d_strands:
            new.add(pd(poly, k))
    return new


def schubert_polynomials(n: int,
                         seed: OddPolynomial,
                         degree: Optional[int] = None,
                         verbose: bool = False,
                         options: Optional[Dict[str, Any]] = None) -> SchubertSet:
    """Collect the polynomials reachable from a seed in rank n.

    Every round applies ps_k for 1 <= k < n and pd on the D strands to each
    polynomial collected so far, then merges the results in.

    Args:
        n: Rank (at least 2)
        seed: Starting polynomial
        degree: Number of rounds (default: total degree of the seed)
        verbose: Whether to print progress information
        options: Optional dictionary overriding DEFAULT_CLOSURE_OPTIONS

    Returns:
        A SchubertSet with the distinct polynomials and the number of rounds

    Raises:
        InvalidStrand: If n < 2 or a requested D strand is below its minimum
    """
    n = check_rank(n)
    opts = {**DEFAULT_CLOSURE_OPTIONS, **(options or {})}
    d_strands = (n,) if opts['d_strands'] is None else opts['d_strands']
    d_strands = tuple(check_strand('d', k) for k in d_strands)
    if degree is None:
        degree = seed.degree()
    if degree < 0:
        raise ValueError(f"Number of rounds must be non-negative, got {degree}")

    start_time = time.time()
    schuberts: Set[OddPolynomial] = {seed}
    round_sizes = [len(schuberts)]

    if verbose:
        print(f"Enumerating closure of {seed} for n={n} ({degree} rounds)...")
        pbar = tqdm(total=degree)

    for _ in range(degree):
        new = closure_step(schuberts, n, d_strands)
        if not opts['include_zero']:
            new.discard(OddPolynomial())
        schuberts.update(new)
        round_sizes.append(len(schuberts))
        if verbose:
            pbar.update(1)

    if verbose:
        pbar.close()

    result = SchubertSet(schuberts, n, seed, degree)
    result._meta['round_sizes'] = round_sizes
    result._meta['closure_time'] = time.time() - start_time
    result._meta['d_strands'] = d_strands

    if verbose:
        print(f"Found {len(result)} distinct polynomials in {result._meta['closure_time']:.2f}s.")

    return result
