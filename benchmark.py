#!/usr/bin/env python3
"""
Benchmark and cross-check the prime utilities.

1. Sieve below a bound, report prime count and first prime
2. 32-bit primality throughput, cross-checked against the sieve
3. 64-bit primality throughput on random values
4. Factor random values with the sieve output and verify the products

Usage:
    python benchmark.py
    python benchmark.py --config config/custom.yaml
    python benchmark.py --sieve-bound 1e7 --checks 1e6
"""

import argparse
import sys
import time

import numpy as np
import yaml

from prime_tools.primes import primes_below, prime_flags_below
from prime_tools.factorization import prime_factor_counts
from prime_tools.primality import (
    U32_MAX, U64_MAX, is_prime_u32_array, is_prime_u64
)


def run_sieve(bound: int) -> np.ndarray:
    """Sieve below bound and print the headline numbers."""
    print(f"Sieving primes below {bound:,}...", end=" ", flush=True)
    t0 = time.time()
    primes = primes_below(bound)
    print(f"{time.time() - t0:.1f}s")
    print(f"  primes len = {len(primes):,}")
    if len(primes) > 0:
        print(f"  first prime = {primes[0]}")
    return primes


def run_small_checks(checks: int, bound: int) -> bool:
    """Time is_prime_u32_array over [0, checks) and compare to the sieve."""
    values = np.arange(checks, dtype=np.int64)

    # First call compiles; keep it out of the timing
    is_prime_u32_array(values[:16])

    print(f"Checking {checks:,} values with is_prime_u32_array...", end=" ", flush=True)
    t0 = time.time()
    result = is_prime_u32_array(values)
    elapsed = time.time() - t0
    print(f"{elapsed:.2f}s")
    if elapsed > 0:
        print(f"  {checks / elapsed:,.0f} checks/s")

    overlap = min(checks, bound)
    flags = prime_flags_below(overlap)
    if np.array_equal(result[:overlap], flags):
        print(f"  ✓ Matches sieve on [0, {overlap:,})")
        return True

    mismatches = np.nonzero(result[:overlap] != flags)[0]
    print(f"  ✗ {len(mismatches):,} mismatches, first at {mismatches[0]}")
    return False


def run_large_checks(large_checks: int, rng: np.random.Generator) -> None:
    """Time is_prime_u64 over random 64-bit values."""
    values = rng.integers(0, U64_MAX, size=large_checks, dtype=np.uint64, endpoint=True)

    print(f"Checking {large_checks:,} random 64-bit values with is_prime_u64...",
          end=" ", flush=True)
    t0 = time.time()
    found = sum(1 for v in values if is_prime_u64(int(v)))
    elapsed = time.time() - t0
    print(f"{elapsed:.2f}s")
    print(f"  {found:,} primes found")
    if elapsed > 0:
        print(f"  {large_checks / elapsed:,.0f} checks/s")


def run_factor_checks(samples: int, primes: np.ndarray,
                      rng: np.random.Generator) -> bool:
    """Factor random values covered by the prime list and verify each product."""
    largest = int(primes[-1]) if len(primes) > 0 else 1
    upper = min(largest * largest, U32_MAX)
    values = rng.integers(1, upper, size=samples, endpoint=True)

    print(f"Factoring {samples:,} values up to {upper:,}...", end=" ", flush=True)
    t0 = time.time()
    errors = 0
    for v in values:
        x = int(v)
        counts = prime_factor_counts(x, primes, strict=True)
        product = 1
        for p, k in counts.items():
            product *= p ** k
        if product != x:
            errors += 1
            if errors <= 5:
                print(f"\n  MISMATCH {x}: {counts}")
    print(f"{time.time() - t0:.2f}s")

    if errors == 0:
        print(f"  ✓ All {samples:,} factorizations verified")
    else:
        print(f"  ✗ {errors:,} bad factorizations")
    return errors == 0


def main():
    parser = argparse.ArgumentParser(description='Benchmark prime utilities')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--sieve-bound', type=float, default=None,
                        help='Exclusive sieve bound (overrides config)')
    parser.add_argument('--checks', type=float, default=None,
                        help='Number of 32-bit checks (overrides config)')
    parser.add_argument('--large-checks', type=float, default=None,
                        help='Number of 64-bit checks (overrides config)')
    parser.add_argument('--factor-samples', type=float, default=None,
                        help='Number of values to factor (overrides config)')
    args = parser.parse_args()

    with open(args.config) as f:
        config = yaml.safe_load(f)

    for key in ('sieve_bound', 'checks', 'large_checks', 'factor_samples'):
        override = getattr(args, key)
        if override is not None:
            config[key] = override
        config[key] = int(config[key])

    print("=" * 60)
    print("Prime Tools Benchmark")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  sieve_bound = {config['sieve_bound']:,}")
    print(f"  checks = {config['checks']:,}")
    print(f"  large_checks = {config['large_checks']:,}")
    print(f"  factor_samples = {config['factor_samples']:,}")
    print(f"  seed = {config['seed']}")
    print()

    rng = np.random.default_rng(config['seed'])
    total_start = time.time()

    print("-" * 60)
    primes = run_sieve(config['sieve_bound'])
    print()

    print("-" * 60)
    small_ok = run_small_checks(config['checks'], config['sieve_bound'])
    print()

    print("-" * 60)
    run_large_checks(config['large_checks'], rng)
    print()

    print("-" * 60)
    factor_ok = run_factor_checks(config['factor_samples'], primes, rng)
    print()

    print("=" * 60)
    print(f"Total runtime: {time.time() - total_start:.1f}s")
    if small_ok and factor_ok:
        print("✓ All cross-checks passed!")
    else:
        print("✗ Some cross-checks failed!")
        sys.exit(1)


if __name__ == '__main__':
    main()
