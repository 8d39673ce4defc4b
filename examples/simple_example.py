"""
Simple example demonstrating the basic usage of PyNilHecke.

This example:
- multiplies two odd generators in both orders to show the sign rule
- applies a few divided-difference operators
- enumerates the closure of the seed x_1^2 x_2 for rank 3
"""

import sys
import os
import time
import matplotlib.pyplot as plt

# Add the parent directory to the path so we can import pynilhecke
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pynilhecke import OddMonomial, OddPolynomial, apply_word, parse_polynomial, schubert_polynomials
from pynilhecke.visualization import plot_closure_growth, plot_degree_distribution


def main():
    """Run the simple example."""
    print("PyNilHecke Simple Example")
    print("=========================")

    x1 = OddMonomial.x(1).as_polynomial()
    x2 = OddMonomial.x(2).as_polynomial()
    print(f"x_1 * x_2 = {x1 * x2}")
    print(f"x_2 * x_1 = {x2 * x1}")

    p = parse_polynomial("1 2 1 / -3 0 1 1")
    print(f"\np = {p}")
    for word in ("s1", "s2", "b1", "d2", "s1 s2"):
        print(f"{word}(p) = {apply_word(p, word)}")

    seed = parse_polynomial("1 2 1")
    print(f"\nEnumerating the closure of {seed} for n=3...")
    start_time = time.time()
    result = schubert_polynomials(3, seed, verbose=True)
    print(f"Closure completed in {time.time() - start_time:.3f} seconds")
    print(result)

    plot_closure_growth(result)
    plot_degree_distribution(result)
    plt.show()


if __name__ == "__main__":
    main()
