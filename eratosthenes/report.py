"""
Output formatting.

Responsibility: the one line printed by the run script. Free text, not a
machine-readable format.
"""

from typing import Sequence


def format_report(bound: int, primes: Sequence[int]) -> str:
    """
    Render the prime listing for a bound.

    >>> format_report(10, [2, 3, 5, 7])
    'All primes to 10: [2, 3, 5, 7], len = 4'
    """
    listing = ", ".join(str(p) for p in primes)
    return f"All primes to {bound}: [{listing}], len = {len(primes)}"
