"""
Puncturable PRF over an RSA Accumulator

Input i of the PRF is bound to the i-th odd prime p_i. The output at x is

    H(g^(P_x) mod N),  P_x = product of p_i for every unpunctured i != x

Puncturing x replaces g with g^(p_x) mod N and records x in the puncture
set. Every other input's exponent loses p_x at the same moment g gains
it, so their outputs do not change, while recovering the old output at x
would require taking a p_x-th root modulo N.

Instances are not thread-safe: eval() may run concurrently with other
eval() calls, but punc() must be serialized by the caller.
"""

import logging
from functools import lru_cache
from typing import Optional, Type, TypeVar

from cryptography.hazmat.primitives import hashes

from .accumulator import accumulate, add_member
from .config import Settings, get_settings
from .errors import InputIndexError, ParameterGenerationError, StateDecodeError
from .hashing import digest, resolve_hash
from .models import PrfState
from .primes import odd_primes
from .puncture_set import PunctureSet
from .rsa_params import RandomSource, generate_params, validate_params

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="PuncturablePrf")


def _to_le_bytes(value: int) -> bytes:
    # zero encodes as a single 0x00 byte
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "little")


@lru_cache(maxsize=None)
def _bind_hash(base: type, algorithm: Type[hashes.HashAlgorithm]) -> type:
    name = f"{base.__name__}[{algorithm.name}]"
    return type(name, (base,), {
        "algorithm": algorithm,
        "_hash_base": base,
        "__module__": base.__module__,
    })


class PuncturablePrf:
    """
    A puncturable PRF using an RSA accumulator.

    The hash applied to the accumulator output is fixed per class through
    the `algorithm` class attribute (SHA-256 by default). Use with_hash()
    to get a class bound to a different algorithm.

    Attributes:
        algorithm: `cryptography` hash class used by eval()
    """

    algorithm: Type[hashes.HashAlgorithm] = hashes.SHA256

    def __init__(self, modulus: int, generator: int, punctures: PunctureSet):
        """
        Build a PRF from existing state. Use generate() for a fresh instance.

        Args:
            modulus: RSA modulus N
            generator: Current accumulator generator g, in [0, N)
            punctures: Puncture bitset R; its length is the input count

        Raises:
            ValueError: If (N, g) are invalid
        """
        validate_params(modulus, generator)
        self._n = modulus
        self._g = generator
        self._r = punctures
        # p_i for input i
        self._primes = odd_primes(len(punctures))

    @classmethod
    def with_hash(cls: Type[P], algorithm: Type[hashes.HashAlgorithm]) -> Type[P]:
        """
        Return a subclass of this PRF bound to another hash algorithm.

        The same class object is returned for repeated calls, and calling
        it on an already bound class rebinds its base instead of stacking.

        Example:
            >>> Sha512Prf = PuncturablePrf.with_hash(hashes.SHA512)
            >>> Sha512Prf.algorithm is hashes.SHA512
            True
        """
        base = cls.__dict__.get("_hash_base", cls)
        if algorithm is base.algorithm:
            return base
        return _bind_hash(base, algorithm)

    @classmethod
    def generate(
        cls: Type[P],
        rng: Optional[RandomSource],
        modulus_size_bits: int,
        punctures: int,
    ) -> P:
        """
        Generate a new PRF with a modulus and puncture bitset of the given sizes.

        Args:
            rng: Source for the generator draw, or None for the OS CSPRNG.
                The RSA primes always come from OpenSSL's CSPRNG.
            modulus_size_bits: Bit length of the RSA modulus
            punctures: Number of inputs the PRF accepts

        Returns:
            PuncturablePrf: A fresh instance with no punctures

        Raises:
            ParameterGenerationError: If modulus generation fails or
                punctures is negative
        """
        if punctures < 0:
            raise ParameterGenerationError("punctures must be non-negative")

        n, g = generate_params(modulus_size_bits, rng)
        prf = cls(n, g, PunctureSet(punctures))
        logger.debug(
            "Generated puncturable PRF: modulus_bits=%d, inputs=%d, hash=%s",
            modulus_size_bits, punctures, cls.algorithm.name,
        )
        return prf

    @classmethod
    def from_settings(
        cls: Type[P],
        settings: Optional[Settings] = None,
        rng: Optional[RandomSource] = None,
    ) -> P:
        """Generate a PRF with the configured modulus size, input count and hash."""
        settings = settings or get_settings()
        prf_cls = cls.with_hash(resolve_hash(settings.hash_algorithm))
        return prf_cls.generate(rng, settings.modulus_bits, settings.punctures)

    @property
    def modulus(self) -> int:
        """RSA modulus N."""
        return self._n

    def _check_index(self, x: int) -> None:
        if not isinstance(x, int) or isinstance(x, bool):
            raise TypeError(f"Input index must be an int, got {type(x).__name__}")
        if not 0 <= x < len(self._r):
            raise InputIndexError(x, len(self._r))

    def eval(self, x: int) -> Optional[bytes]:
        """
        Return the PRF output at x, or None if x has been punctured.

        Raises:
            InputIndexError: If x is outside [0, input_count())
        """
        self._check_index(x)

        # Punctured at x, cannot evaluate output.
        if x in self._r:
            return None

        # Product of all active primes except the x-th.
        active = (p for i, p in enumerate(self._primes) if i != x and i not in self._r)
        y = accumulate(self._g, active, self._n)

        return digest(self.algorithm, _to_le_bytes(y))

    def punc(self, x: int) -> None:
        """
        Puncture the PRF at x. Puncturing an already punctured input does nothing.

        Raises:
            InputIndexError: If x is outside [0, input_count())
        """
        self._check_index(x)

        if x in self._r:
            return

        g = add_member(self._g, self._primes[x], self._n)
        self._g = g
        self._r.add(x)
        logger.debug("Punctured PRF: %d of %d inputs punctured", self.punctured_input_count(), self.input_count())

    def input_count(self) -> int:
        """Number of possible inputs."""
        return len(self._r)

    def punctured_input_count(self) -> int:
        """Number of inputs which have been punctured."""
        return self._r.count()

    def unpunctured_input_count(self) -> int:
        """Number of inputs which can still be evaluated."""
        return self.input_count() - self.punctured_input_count()

    def to_state(self) -> PrfState:
        """
        Snapshot the full state {N, g, R}.

        The snapshot carries the generator and puncture bitset in the
        clear. Store it with the same care as a private key.
        """
        return PrfState(
            modulus=hex(self._n),
            generator=hex(self._g),
            capacity=len(self._r),
            punctured=self._r.to_bytes().hex(),
        )

    @classmethod
    def from_state(cls: Type[P], state: PrfState) -> P:
        """
        Rebuild a PRF from a snapshot taken with to_state().

        Raises:
            StateDecodeError: If the snapshot is inconsistent
        """
        try:
            punctures = PunctureSet.from_bytes(state.punctured_bytes, state.capacity)
            return cls(state.modulus_int, state.generator_int, punctures)
        except ValueError as e:
            raise StateDecodeError(f"Invalid PRF state: {e}") from e

    def to_json(self) -> str:
        return self.to_state().model_dump_json()

    @classmethod
    def from_json(cls: Type[P], data: str) -> P:
        """
        Load a PRF from the JSON produced by to_json().

        Raises:
            StateDecodeError: If the JSON is malformed or the state is inconsistent
        """
        try:
            state = PrfState.model_validate_json(data)
        except ValueError as e:
            raise StateDecodeError(f"Invalid PRF state: {e}") from e
        return cls.from_state(state)

    def __repr__(self) -> str:
        # g and R together reveal which inputs are still evaluable
        return (
            f"{type(self).__name__}(n={self._n:#x}, g=[redacted], r=[redacted], "
            f"hash={self.algorithm.name!r})"
        )
