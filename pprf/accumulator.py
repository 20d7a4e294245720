"""
RSA Accumulator Core Operations

Modular exponentiation primitives behind the puncturable PRF: folding a
prime into the accumulator and raising the generator to the product of
a set of primes.
"""

from typing import Iterable


def add_member(A: int, p: int, N: int) -> int:
    """
    Add a member (prime p) to the accumulator A.

    The RSA accumulator operation: A^p mod N

    Args:
        A: Current accumulator value
        p: Prime representing the member to add
        N: RSA modulus

    Returns:
        int: New accumulator value after adding member p

    Raises:
        ValueError: If p or N is not positive, or A is negative

    Example:
        >>> N = 209  # 11 * 19
        >>> add_member(4, 13, N) == pow(4, 13, N)
        True
    """
    # A == 0 is a legitimate draw from [0, N)
    if A < 0 or p <= 0 or N <= 0:
        raise ValueError("Accumulator must be non-negative, prime and modulus positive")

    return pow(A, p, N)


def prime_product(primes: Iterable[int]) -> int:
    """
    Multiply a collection of primes together.

    Returns 1 for an empty collection.
    """
    product = 1
    for p in primes:
        if p <= 0:
            raise ValueError("All primes must be positive")
        product *= p
    return product


def accumulate(g: int, primes: Iterable[int], N: int) -> int:
    """
    Raise the generator to the product of all given primes.

    Computes g^(p_1 * p_2 * ... * p_k) mod N with a single modular
    exponentiation, which is the same value as adding each prime in turn
    with add_member().

    Args:
        g: Generator base
        primes: Iterable of primes to include
        N: RSA modulus

    Returns:
        int: Accumulator value over the given primes

    Example:
        >>> accumulate(4, [3, 5, 7], 209) == pow(4, 105, 209)
        True
    """
    if N <= 0:
        raise ValueError("N must be positive")
    if g < 0:
        raise ValueError("Generator g must be non-negative")

    return pow(g, prime_product(primes), N)
