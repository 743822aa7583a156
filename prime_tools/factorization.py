"""
Factorization utilities.

Responsibility: prime factor counts from a precomputed prime list.
This file must not generate primes itself; pair it with primes_below.
"""

import operator
from typing import Dict, Iterable


class InsufficientPrimesError(ValueError):
    """Prime list does not reach sqrt of the leftover quotient."""

    def __init__(self, x: int, leftover: int, largest: int):
        self.x = x
        self.leftover = leftover
        self.largest = largest
        super().__init__(
            f"Cannot factor {x}: leftover {leftover} may be composite, "
            f"largest listed prime is {largest}"
        )


def prime_factor_counts(x: int, primes: Iterable[int],
                        strict: bool = False) -> Dict[int, int]:
    """
    Map each prime factor of x to its multiplicity.

    Expected to be used together with primes_below: the list must hold
    every prime up to sqrt(x). Whatever is left after dividing out the
    listed primes is recorded as one more prime factor, so a prime x
    beyond the list's reach still gives {x: 1}.

    Parameters
    ----------
    x : int
        Integer to factor (x >= 1).
    primes : iterable of int
        Ascending primes, e.g. the output of primes_below.
    strict : bool
        If True, raise InsufficientPrimesError when the list is too short
        to prove the leftover prime. Otherwise the list is trusted.
        The check only compares the leftover with the square of the
        largest listed prime, so it assumes consecutive primes starting
        at 2, as primes_below returns. A list with gaps can still pass a
        composite leftover: prime_factor_counts(25, [2, 7], strict=True)
        gives {25: 1}.

    Returns
    -------
    dict
        {prime: count}. Empty for x = 1.
    """
    x = operator.index(x)
    if x < 1:
        raise ValueError(f"Cannot factor {x}: expected x >= 1")

    counts: Dict[int, int] = {}
    remaining = x
    largest = 0

    for p in primes:
        if remaining == 1:
            break
        p = int(p)
        largest = p
        while remaining % p == 0:
            counts[p] = counts.get(p, 0) + 1
            remaining //= p

    if remaining > 1:
        if strict and largest * largest < remaining:
            raise InsufficientPrimesError(x, remaining, largest)
        counts[remaining] = counts.get(remaining, 0) + 1

    return counts
