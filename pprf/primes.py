"""
Odd Prime Enumeration for Accumulator Witnesses

Input index i of the PRF is bound to the i-th odd prime: index 0 to 3,
index 1 to 5, index 2 to 7 and so on. Primes are produced with a sieve
of Eratosthenes sized from the prime number theorem upper bound.
"""

import math
from functools import lru_cache
from typing import Tuple


def _upper_bound(count: int) -> int:
    """
    Upper bound on the value of the (count + 1)-th prime.

    Uses p_n < n (ln n + ln ln n) for n >= 6, and a small fixed bound below.
    """
    n = count + 1  # the prime 2 is skipped
    if n < 6:
        return 15
    return int(n * (math.log(n) + math.log(math.log(n)))) + 1


def _sieve(limit: int) -> bytearray:
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return flags


@lru_cache(maxsize=32)
def odd_primes(count: int) -> Tuple[int, ...]:
    """
    Return the first `count` odd primes.

    Args:
        count: Number of primes to return

    Returns:
        Tuple[int, ...]: (3, 5, 7, 11, ...) of length `count`

    Raises:
        ValueError: If count is negative

    Example:
        >>> odd_primes(5)
        (3, 5, 7, 11, 13)
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if count == 0:
        return ()

    flags = _sieve(_upper_bound(count))
    primes = tuple(i for i in range(3, len(flags), 2) if flags[i])
    return primes[:count]
