"""
Prime generation utilities.

Responsibility: prime generation only. No factorization, no primality tests.
"""

import operator

import numpy as np

# Largest bound that still fits every 32-bit prime below it.
MAX_BOUND = 2**32


def _check_bound(x: int) -> int:
    x = operator.index(x)
    if x < 0 or x > MAX_BOUND:
        raise ValueError(f"Bound {x} outside [0, {MAX_BOUND}]")
    return x


def prime_flags_below(x: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    x : int
        Upper bound (exclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length x.
    """
    x = _check_bound(x)
    flags = np.ones(x, dtype=bool)
    flags[:2] = False
    p = 2
    while p * p < x:
        if flags[p]:
            flags[p*p::p] = False
        p += 1
    return flags


def primes_below(x: int) -> np.ndarray:
    """
    Return array of all primes < x, ascending.

    Parameters
    ----------
    x : int
        Upper bound (exclusive). x <= 2 gives an empty array.

    Returns
    -------
    np.ndarray
        uint32 array of primes.
    """
    if _check_bound(x) <= 2:
        return np.empty(0, dtype=np.uint32)
    flags = prime_flags_below(x)
    return np.nonzero(flags)[0].astype(np.uint32)
