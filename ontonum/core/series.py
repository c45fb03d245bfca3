"""
Convergent series behind the irrational constants.

The nested formulas are evaluated from the innermost term outwards in a
loop, so no call depth grows with the number of terms:

    pi(n) = 2 + n / (2n + 1) * pi(n + 1),   pi(max) = 2 * max + 1
    e(n)  = 1 + x / n * e(n + 1),           e(max)  = 1
"""

from typing import Optional

from .config import NumericConfig
from .errors import InvalidArgument


def _terms(terms: Optional[int]) -> int:
    if terms is None:
        return NumericConfig.get_series_terms()
    if isinstance(terms, bool) or not isinstance(terms, int) or terms < 1:
        raise InvalidArgument(f"terms must be a positive integer, got {terms!r}")
    return terms


def pi_series(terms: Optional[int] = None) -> float:
    """
    Estimate pi with the nested form of the Euler series.

    Args:
        terms: Nesting depth (defaults to NumericConfig series terms)
    """
    terms = _terms(terms)
    acc = 2.0 * terms + 1.0
    for n in range(terms - 1, 0, -1):
        acc = 2.0 + n / (2.0 * n + 1.0) * acc
    return acc


def e_series(terms: Optional[int] = None, x: float = 1.0) -> float:
    """Estimate exp(x) with the nested (Horner) form of the Taylor series."""
    terms = _terms(terms)
    acc = 1.0
    for n in range(terms - 1, 0, -1):
        acc = 1.0 + x / n * acc
    return acc


def zeta_partial(s: float, terms: Optional[int] = None, start: int = 1) -> float:
    """Partial sum of the Riemann zeta series, sum of t**-s for t in [start, terms]."""
    terms = _terms(terms)
    if start < 1:
        raise InvalidArgument(f"start must be at least 1, got {start}")
    return sum(float(t) ** -s for t in range(start, terms + 1))
