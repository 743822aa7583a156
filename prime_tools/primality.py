"""
Primality tests for 32-bit and 64-bit unsigned integers.

The 32-bit test is plain trial division, compiled with numba so that
millions of checks finish in a few seconds. Trial division up to sqrt(n)
is hopeless across the 64-bit range, so the 64-bit test uses a
deterministic Miller-Rabin instead: the first twelve primes as witnesses
are exact for every n < 3.3e24.
"""

import operator

import numpy as np
from numba import njit, prange

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

# Miller-Rabin witnesses, also used for the trial-division prefilter
WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def _check_width(n, limit: int) -> int:
    n = operator.index(n)
    if n < 0 or n > limit:
        raise ValueError(f"{n} outside [0, {limit}]")
    return n


# ========== 32-bit ==========

@njit
def _trial_division(n: int) -> bool:
    """Trial division by 2 and the odd integers up to isqrt(n)."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    d = 3
    while d * d <= n:
        if n % d == 0:
            return False
        d += 2
    return True


@njit(parallel=True)
def _trial_division_batch(values: np.ndarray) -> np.ndarray:
    n = len(values)
    result = np.zeros(n, dtype=np.bool_)
    for i in prange(n):
        result[i] = _trial_division(values[i])
    return result


def is_prime_u32(n: int) -> bool:
    """
    Return True iff n is prime, for 0 <= n <= 2**32 - 1.

    Raises
    ------
    ValueError
        If n is outside the 32-bit unsigned range.
    """
    return bool(_trial_division(_check_width(n, U32_MAX)))


def is_prime_u32_array(values: np.ndarray) -> np.ndarray:
    """
    Element-wise is_prime_u32 over an integer array.

    Parameters
    ----------
    values : array_like
        Integers in [0, 2**32 - 1], any shape.

    Returns
    -------
    np.ndarray
        Boolean array with the same shape as values.
    """
    arr = np.asarray(values)
    if arr.size == 0:
        return np.zeros(arr.shape, dtype=bool)
    if arr.dtype.kind not in 'iu':
        raise ValueError(f"Expected an integer array, got dtype {arr.dtype}")
    if arr.min() < 0 or arr.max() > U32_MAX:
        raise ValueError(f"Values outside [0, {U32_MAX}]")

    flat = arr.astype(np.int64).ravel()
    return _trial_division_batch(flat).reshape(arr.shape)


# ========== 64-bit ==========

def is_prime_u64(n: int) -> bool:
    """
    Return True iff n is prime, for 0 <= n <= 2**64 - 1.

    Deterministic Miller-Rabin over WITNESSES. Python ints keep the
    modular products exact, so nothing overflows near 2**64.

    Raises
    ------
    ValueError
        If n is outside the 64-bit unsigned range.
    """
    n = _check_width(n, U64_MAX)
    if n < 2:
        return False
    for p in WITNESSES:
        if n % p == 0:
            return n == p

    # n - 1 = d * 2^s with d odd
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in WITNESSES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True
