"""
Visualization module for PyNilHecke.

This module provides functions to plot closure runs and the exponent
patterns of odd polynomials.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Tuple

from pynilhecke.polynomial import OddPolynomial
from pynilhecke.schubert import SchubertSet


def plot_closure_growth(result: SchubertSet,
                        title: Optional[str] = None,
                        figsize: Tuple[int, int] = (8, 6)) -> plt.Figure:
    """Plot the size of the closure set after each round.

    Args:
        result: A SchubertSet returned by schubert_polynomials
        title: Plot title (default: auto-generated)
        figsize: Figure size

    Returns:
        The created matplotlib figure
    """
    sizes = result.round_sizes()
    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(range(len(sizes)), sizes, 'o-')

    ax.set_xlabel('Round')
    ax.set_ylabel('Distinct polynomials')
    if title is None:
        title = f'Closure growth (n={result.n})'
    ax.set_title(title)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig


def plot_degree_distribution(result: SchubertSet,
                             title: Optional[str] = None,
                             figsize: Tuple[int, int] = (8, 6)) -> plt.Figure:
    """Bar chart of how many collected polynomials have each degree."""
    counts = result.degree_counts()
    fig, ax = plt.subplots(figsize=figsize)
    ax.bar(np.arange(len(counts)), counts, color='tab:blue', alpha=0.8)

    ax.set_xlabel('Degree')
    ax.set_ylabel('Number of polynomials')
    if title is None:
        title = f'Degree distribution (n={result.n}, {len(result)} polynomials)'
    ax.set_title(title)
    ax.grid(True, axis='y', alpha=0.3)

    plt.tight_layout()
    return fig


def plot_exponent_heatmap(poly: OddPolynomial,
                          n_vars: Optional[int] = None,
                          title: Optional[str] = None,
                          figsize: Tuple[int, int] = (8, 6)) -> plt.Figure:
    """Show the exponent matrix of a polynomial, one row per term.

    Args:
        poly: The polynomial to display
        n_vars: Number of generator columns (default: highest generator used)
        title: Plot title (default: the polynomial itself)
        figsize: Figure size

    Returns:
        The created matplotlib figure
    """
    matrix = poly.exponent_matrix(n_vars)
    fig, ax = plt.subplots(figsize=figsize)
    image = ax.imshow(matrix, cmap='viridis', aspect='auto')

    cbar = plt.colorbar(image, ax=ax)
    cbar.set_label('Exponent')
    ax.set_xticks(np.arange(matrix.shape[1]))
    ax.set_xticklabels([f'x_{i + 1}' for i in range(matrix.shape[1])])
    ax.set_yticks(np.arange(matrix.shape[0]))
    ax.set_yticklabels([str(term.coefficient) for term in poly.terms])
    ax.set_ylabel('Coefficient')
    ax.set_title(title if title is not None else str(poly))

    plt.tight_layout()
    return fig
