"""
RSA Parameters for the Puncturable PRF

Generates the RSA modulus N and the accumulator generator g that key a
PRF instance. The modulus comes from a freshly generated RSA key whose
private half is discarded straight away.
"""

import logging
import secrets
from typing import Optional, Protocol, Tuple

from cryptography.hazmat.primitives.asymmetric import rsa

from .errors import ParameterGenerationError

logger = logging.getLogger(__name__)

# Smallest key size the `cryptography` RSA generator accepts
MIN_MODULUS_BITS = 1024
PUBLIC_EXPONENT = 65537


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from [0, stop)."""

    def randrange(self, stop: int) -> int:
        ...


def generate_modulus(modulus_size_bits: int) -> int:
    """
    Generate an RSA modulus of the requested size.

    The modulus is the product of two primes of balanced length produced
    by OpenSSL's key generator. The factors are never returned.

    Args:
        modulus_size_bits: Bit length of N

    Returns:
        int: The RSA modulus N

    Raises:
        ParameterGenerationError: If the key generator rejects the size or fails
    """
    if modulus_size_bits < MIN_MODULUS_BITS:
        raise ParameterGenerationError(
            f"Modulus size must be at least {MIN_MODULUS_BITS} bits, got {modulus_size_bits}"
        )

    try:
        private_key = rsa.generate_private_key(
            public_exponent=PUBLIC_EXPONENT,
            key_size=modulus_size_bits,
        )
    except (ValueError, OSError) as e:
        raise ParameterGenerationError(f"RSA modulus generation failed: {e}") from e

    return private_key.public_key().public_numbers().n


def sample_generator(N: int, rng: Optional[RandomSource] = None) -> int:
    """
    Draw the accumulator generator uniformly from [0, N).

    Args:
        N: RSA modulus
        rng: Randomness source, defaults to the OS CSPRNG

    Raises:
        ParameterGenerationError: If the randomness source fails
    """
    if rng is None:
        rng = secrets.SystemRandom()

    try:
        g = rng.randrange(N)
    except Exception as e:
        raise ParameterGenerationError(f"Generator sampling failed: {e}") from e

    if not isinstance(g, int) or isinstance(g, bool):
        raise ParameterGenerationError(
            f"Randomness source returned {type(g).__name__}, expected int"
        )
    if not 0 <= g < N:
        raise ParameterGenerationError("Randomness source returned a value outside [0, N)")
    return g


def generate_params(modulus_size_bits: int, rng: Optional[RandomSource] = None) -> Tuple[int, int]:
    """
    Generate the (N, g) pair keying a PRF instance.

    Returns:
        Tuple[int, int]: (N, g) with g uniform in [0, N)
    """
    N = generate_modulus(modulus_size_bits)
    g = sample_generator(N, rng)
    logger.debug("Generated RSA parameters: modulus_bits=%d", N.bit_length())
    return N, g


def validate_params(N: int, g: int) -> None:
    """
    Validate a (N, g) pair loaded from storage.

    Args:
        N: RSA modulus
        g: Current accumulator generator

    Raises:
        ValueError: If parameters are invalid
    """
    if N <= 1:
        raise ValueError("RSA modulus N must be greater than 1")

    if g < 0:
        raise ValueError("Generator g must be non-negative")

    if g >= N:
        raise ValueError("Generator g must be less than modulus N")
