"""
Packed bit-set sieve.

Same contract as primes.compute_primes, but the marked array holds one
bit per number instead of one byte.

Memory for the marked array:
- bound=10^8: 100MB -> 12.5MB
- bound=10^9: 1GB -> 125MB
"""

from math import isqrt
from typing import List

from bitarray import bitarray
from bitarray.util import zeros

from .primes import check_bound


def composite_bits(bound: int) -> bitarray:
    """
    Packed marked array for [0, bound).

    bits[i] is 1 iff i is composite, for every i in [2, bound).
    """
    bound = check_bound(bound)
    marked = zeros(bound)
    for i in range(2, isqrt(bound) + 1):
        if not marked[i]:
            marked[i*i::i] = True
    return marked


def compute_primes_packed(bound: int) -> List[int]:
    """
    Return all primes strictly less than bound, in ascending order.

    Raises
    ------
    InvalidArgument
        If bound <= 1.
    """
    bound = check_bound(bound)
    marked = zeros(bound)
    limit = isqrt(bound)

    primes = []
    for i in range(2, limit + 1):
        if marked[i]:
            continue
        primes.append(i)
        marked[i*i::i] = True

    primes.extend(marked.search(0, limit + 1))
    return primes
