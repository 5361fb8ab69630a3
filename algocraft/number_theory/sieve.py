"""Sieve of Eratosthenes."""

from __future__ import annotations

import math


def simple_sieve(prime_limit: int) -> list[bool]:
    """Return a list of length ``prime_limit + 1`` where entry ``n`` says if ``n`` is prime."""
    if prime_limit < 0:
        raise ValueError("prime limit must not be negative")
    is_prime = [True] * (prime_limit + 1)
    is_prime[:2] = [False] * min(2, prime_limit + 1)
    for num in range(2, math.isqrt(prime_limit) + 1):
        if is_prime[num]:
            multiples = range(num * num, prime_limit + 1, num)
            is_prime[num * num :: num] = [False] * len(multiples)
    return is_prime


def primes_up_to(prime_limit: int) -> list[int]:
    """Return every prime up to ``prime_limit`` inclusive, in ascending order."""
    return [num for num, prime in enumerate(simple_sieve(prime_limit)) if prime]