"""
Prime generation utilities.

Responsibility: the Sieve of Eratosthenes over [2, bound). No formatting,
no configuration.
"""

import operator
from math import isqrt
from typing import List

import numpy as np


class InvalidArgument(ValueError):
    """Raised when a sieve bound has no candidates, i.e. bound <= 1."""


def check_bound(bound) -> int:
    """Coerce bound to an int, rejecting bound <= 1 with InvalidArgument."""
    bound = operator.index(bound)
    if bound <= 1:
        raise InvalidArgument(f"bound must be greater than 1, got {bound}")
    return bound


def composite_flags(bound: int) -> np.ndarray:
    """
    Return the marked array for [0, bound) after striking.

    flags[i] is True iff i is composite, for every i in [2, bound).
    Indices 0 and 1 are never struck.

    Parameters
    ----------
    bound : int
        Upper bound (exclusive), must be > 1.

    Returns
    -------
    np.ndarray
        Boolean array of length bound.
    """
    bound = check_bound(bound)
    marked = np.zeros(bound, dtype=bool)
    for i in range(2, isqrt(bound) + 1):
        if not marked[i]:
            marked[i*i::i] = True
    return marked


def compute_primes(bound: int) -> List[int]:
    """
    Return all primes strictly less than bound, in ascending order.

    Uses Sieve of Eratosthenes. Primes up to isqrt(bound) are collected
    while striking; everything above is read straight off the marked array.

    Parameters
    ----------
    bound : int
        Upper bound (exclusive), must be > 1.

    Returns
    -------
    list of int
        Primes in [2, bound).

    Raises
    ------
    InvalidArgument
        If bound <= 1.
    """
    bound = check_bound(bound)
    marked = np.zeros(bound, dtype=bool)
    limit = isqrt(bound)

    primes = []
    for i in range(2, limit + 1):
        if marked[i]:
            continue
        primes.append(i)
        marked[i*i::i] = True

    # limit itself was classified above
    tail = np.nonzero(~marked[limit + 1:])[0] + (limit + 1)
    primes.extend(tail.tolist())
    return primes


def prime_count(bound: int) -> int:
    """Number of primes below bound."""
    return len(compute_primes(bound))
