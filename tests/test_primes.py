"""
Tests for the Eratosthenes sieve (primes_below, prime_flags_below).
"""

import numpy as np
import pytest

from prime_tools.primes import primes_below, prime_flags_below, MAX_BOUND


# Known small primes for testing
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


def is_prime_naive(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d for d in range(2, n))


class TestPrimesBelow:
    """primes_below(x) gives exactly the primes p with 2 <= p < x."""

    @pytest.mark.parametrize("x, expected", [
        (10, [2, 3, 5, 7]),
        (11, [2, 3, 5, 7]),
        (12, [2, 3, 5, 7, 11]),
        (3, [2]),
        (4, [2, 3]),
        (50, SMALL_PRIMES),
    ])
    def test_known_values(self, x, expected):
        """Small bounds match hand-computed lists; the bound is exclusive."""
        assert primes_below(x).tolist() == expected

    @pytest.mark.parametrize("x", [0, 1, 2])
    def test_small_bounds_empty(self, x):
        """x <= 2 yields an empty array."""
        result = primes_below(x)
        assert len(result) == 0
        assert result.dtype == np.uint32

    def test_strictly_ascending(self):
        """Output is strictly ascending, hence duplicate-free."""
        primes = primes_below(10000)
        assert np.all(np.diff(primes.astype(np.int64)) > 0)

    def test_every_element_prime_and_in_range(self):
        """Every element is prime and lies in [2, x)."""
        x = 2000
        for p in primes_below(x):
            assert 2 <= p < x
            assert is_prime_naive(int(p)), f"{p} should be prime"

    def test_complete(self):
        """Every prime below x appears."""
        x = 2000
        expected = [n for n in range(x) if is_prime_naive(n)]
        assert primes_below(x).tolist() == expected

    def test_prime_counts(self):
        """pi(10^k) for small k."""
        assert len(primes_below(100)) == 25
        assert len(primes_below(10**4)) == 1229
        assert len(primes_below(10**6)) == 78498

    def test_dtype(self):
        assert primes_below(100).dtype == np.uint32

    def test_idempotent(self):
        """Repeated calls return identical arrays."""
        assert np.array_equal(primes_below(5000), primes_below(5000))


class TestPrimeFlagsBelow:
    """Boolean marker array from the sieve."""

    def test_length_is_bound(self):
        assert len(prime_flags_below(100)) == 100

    def test_known_primes_and_composites(self):
        flags = prime_flags_below(100)

        for p in SMALL_PRIMES:
            assert flags[p], f"{p} should be prime"

        for n in SMALL_COMPOSITES:
            assert not flags[n], f"{n} should not be prime"

        assert not flags[0]
        assert not flags[1]

    def test_square_of_prime_cleared(self):
        """p*p just below the bound is still marked composite."""
        flags = prime_flags_below(50)
        assert not flags[49]

    def test_consistent_with_primes_below(self):
        flags = prime_flags_below(1000)
        assert np.array_equal(np.nonzero(flags)[0], primes_below(1000))

    @pytest.mark.parametrize("x", [0, 1])
    def test_tiny_bounds(self, x):
        flags = prime_flags_below(x)
        assert len(flags) == x
        assert not flags.any()


class TestBoundValidation:
    """Bounds outside [0, 2**32] are rejected."""

    def test_negative_bound(self):
        with pytest.raises(ValueError):
            primes_below(-1)

    def test_bound_too_large(self):
        with pytest.raises(ValueError):
            prime_flags_below(MAX_BOUND + 1)

    @pytest.mark.parametrize("x", [10.5, 10.9, "12"])
    def test_non_integer_bound(self, x):
        """Floats and strings are rejected, not truncated."""
        with pytest.raises(TypeError):
            primes_below(x)
        with pytest.raises(TypeError):
            prime_flags_below(x)

    def test_numpy_integer_bound(self):
        assert primes_below(np.int64(12)).tolist() == [2, 3, 5, 7, 11]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
