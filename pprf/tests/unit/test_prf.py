"""
Unit Tests for the Puncturable PRF

Tests evaluation, puncturing, counting queries, index checking and the
redacted representation.
"""

import hashlib
import random

import pytest
from cryptography.hazmat.primitives import hashes

from pprf.errors import InputIndexError, ParameterGenerationError
from pprf.prf import PuncturablePrf
from pprf.puncture_set import PunctureSet

# Arbitrary odd modulus; eval/punc arithmetic does not depend on its factors
N = (1 << 127) - 1
G = 0x1234567890ABCDEF


def le_bytes(value: int) -> bytes:
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "little")


def expected_output(g: int, primes, n: int = N) -> bytes:
    product = 1
    for p in primes:
        product *= p
    return hashlib.sha256(le_bytes(pow(g, product, n))).digest()


@pytest.fixture
def fixed_prf() -> PuncturablePrf:
    """Four inputs with witnesses 3, 5, 7, 11."""
    return PuncturablePrf(N, G, PunctureSet(4))


class TestEval:
    """Test the evaluation algorithm against its closed form."""

    def test_eval_excludes_own_prime(self, fixed_prf):
        assert fixed_prf.eval(0) == expected_output(G, [5, 7, 11])
        assert fixed_prf.eval(1) == expected_output(G, [3, 7, 11])
        assert fixed_prf.eval(3) == expected_output(G, [3, 5, 7])

    def test_eval_after_puncture_uses_new_generator(self, fixed_prf):
        fixed_prf.punc(2)
        g_new = pow(G, 7, N)
        # The punctured prime is excluded from the product
        assert fixed_prf.eval(1) == expected_output(g_new, [3, 11])

    def test_eval_is_deterministic(self, fixed_prf):
        assert fixed_prf.eval(2) == fixed_prf.eval(2)

    def test_eval_outputs_differ_across_inputs(self, prf):
        outputs = {prf.eval(x) for x in range(prf.input_count())}
        assert len(outputs) == prf.input_count()

    def test_eval_does_not_mutate(self, fixed_prf):
        before = fixed_prf.to_state()
        for x in range(4):
            fixed_prf.eval(x)
        assert fixed_prf.to_state() == before

    def test_eval_zero_output_encoding(self):
        """y == 0 is hashed as the single byte 0x00."""
        prf = PuncturablePrf(N, 0, PunctureSet(2))
        assert prf.eval(0) == hashlib.sha256(b"\x00").digest()

    def test_eval_single_input_domain(self):
        """With one input the product is empty and y == g."""
        prf = PuncturablePrf(N, G, PunctureSet(1))
        assert prf.eval(0) == hashlib.sha256(le_bytes(G)).digest()

    def test_eval_output_width(self, fixed_prf):
        assert len(fixed_prf.eval(0)) == 32


class TestPunc:
    """Test the puncture algorithm."""

    def test_puncture_disables_evaluation(self, prf):
        for x in range(prf.input_count()):
            assert prf.eval(x) is not None
            prf.punc(x)
            assert prf.eval(x) is None

    def test_puncture_folds_prime_into_generator(self, fixed_prf):
        fixed_prf.punc(3)
        state = fixed_prf.to_state()
        assert state.generator_int == pow(G, 11, N)
        assert state.punctured_bytes == bytes([0b1000])

    def test_idempotent_puncture(self, prf):
        prf.punc(5)
        once = prf.to_state()
        prf.punc(5)
        assert prf.to_state() == once
        assert prf.punctured_input_count() == 1

    def test_non_interference(self, prf):
        before = {x: prf.eval(x) for x in range(prf.input_count())}
        prf.punc(4)
        for x, y in before.items():
            if x != 4:
                assert prf.eval(x) == y

    def test_puncture_order_does_not_matter(self, base_prf):
        a = PuncturablePrf.from_state(base_prf.to_state())
        b = PuncturablePrf.from_state(base_prf.to_state())
        for x in (1, 7, 3):
            a.punc(x)
        for x in (3, 1, 7):
            b.punc(x)
        assert a.to_state() == b.to_state()

    def test_modified_bitset(self, prf):
        """Clearing R after a puncture yields a spurious output, not the original one."""
        k1 = prf.eval(1)
        prf.punc(1)

        # Simulate a serialization error or a malicious actor resetting R
        prf._r = PunctureSet(prf.input_count())

        k1_p = prf.eval(1)
        assert k1_p is not None
        assert k1_p != k1, "punctured evaluation must not equal unpunctured evaluation"


class TestCounts:
    """Test the counting queries."""

    def test_fresh_counts(self, prf):
        assert prf.input_count() == 16
        assert prf.punctured_input_count() == 0
        assert prf.unpunctured_input_count() == 16

    def test_counting_invariant(self, prf):
        rng = random.Random(99)
        for _ in range(40):
            prf.punc(rng.randrange(prf.input_count()))
            assert prf.punctured_input_count() + prf.unpunctured_input_count() == prf.input_count()
        assert prf.input_count() == 16

    def test_counts_after_punctures(self, prf):
        for x in (0, 2, 2, 15):
            prf.punc(x)
        assert prf.punctured_input_count() == 3
        assert prf.unpunctured_input_count() == 13


class TestIndexChecks:
    """Out-of-range inputs raise InputIndexError."""

    @pytest.mark.parametrize("x", [-1, 4, 100])
    def test_eval_out_of_range(self, fixed_prf, x):
        with pytest.raises(InputIndexError) as exc_info:
            fixed_prf.eval(x)
        assert exc_info.value.index == x
        assert exc_info.value.input_count == 4

    @pytest.mark.parametrize("x", [-1, 4])
    def test_punc_out_of_range(self, fixed_prf, x):
        before = fixed_prf.to_state()
        with pytest.raises(IndexError):
            fixed_prf.punc(x)
        assert fixed_prf.to_state() == before

    @pytest.mark.parametrize("x", [1.0, "1", True, None])
    def test_non_integer_index(self, fixed_prf, x):
        with pytest.raises(TypeError):
            fixed_prf.eval(x)
        with pytest.raises(TypeError):
            fixed_prf.punc(x)

    def test_empty_domain(self):
        prf = PuncturablePrf(N, G, PunctureSet(0))
        assert prf.input_count() == 0
        with pytest.raises(InputIndexError):
            prf.eval(0)


class TestConstruction:

    def test_generate(self):
        prf = PuncturablePrf.generate(random.Random(5), 1024, 8)
        assert prf.modulus.bit_length() == 1024
        assert prf.input_count() == 8
        assert prf.punctured_input_count() == 0

    def test_generate_default_rng(self):
        prf = PuncturablePrf.generate(None, 1024, 2)
        assert prf.eval(0) is not None

    def test_generate_modulus_too_small(self):
        with pytest.raises(ParameterGenerationError):
            PuncturablePrf.generate(random.Random(5), 512, 8)

    def test_generate_negative_punctures(self):
        with pytest.raises(ParameterGenerationError, match="non-negative"):
            PuncturablePrf.generate(None, 1024, -1)

    def test_invalid_generator(self):
        with pytest.raises(ValueError):
            PuncturablePrf(N, N, PunctureSet(4))


class TestHashSelection:

    def test_default_algorithm(self):
        assert PuncturablePrf.algorithm is hashes.SHA256

    def test_with_hash_is_cached_subclass(self):
        sha512_prf = PuncturablePrf.with_hash(hashes.SHA512)
        assert sha512_prf is PuncturablePrf.with_hash(hashes.SHA512)
        assert issubclass(sha512_prf, PuncturablePrf)
        assert sha512_prf.algorithm is hashes.SHA512
        assert PuncturablePrf.algorithm is hashes.SHA256

    def test_with_default_hash_returns_same_class(self):
        assert PuncturablePrf.with_hash(hashes.SHA256) is PuncturablePrf

    def test_rebinding_does_not_stack(self):
        sha512_prf = PuncturablePrf.with_hash(hashes.SHA512)
        sha3_prf = sha512_prf.with_hash(hashes.SHA3_256)

        assert sha3_prf is PuncturablePrf.with_hash(hashes.SHA3_256)
        assert sha3_prf.__name__ == "PuncturablePrf[sha3-256]"
        assert sha512_prf.with_hash(hashes.SHA256) is PuncturablePrf
        assert sha512_prf.with_hash(hashes.SHA512) is sha512_prf
        assert repr(sha3_prf(N, G, PunctureSet(4))).startswith("PuncturablePrf[sha3-256](")

    def test_eval_uses_bound_hash(self, fixed_prf):
        sha512_prf = PuncturablePrf.with_hash(hashes.SHA512)(N, G, PunctureSet(4))
        y = pow(G, 3 * 7 * 11, N)
        assert sha512_prf.eval(1) == hashlib.sha512(le_bytes(y)).digest()
        assert len(sha512_prf.eval(1)) == 64


class TestRepr:
    """The debug representation must not reveal g or R."""

    def test_repr_redacts_sensitive_fields(self, fixed_prf):
        fixed_prf.punc(2)
        text = repr(fixed_prf)
        state = fixed_prf.to_state()

        assert text == f"PuncturablePrf(n={N:#x}, g=[redacted], r=[redacted], hash='sha256')"
        assert state.generator not in text
        assert str(state.generator_int) not in text

    def test_repr_shows_bound_hash(self):
        prf = PuncturablePrf.with_hash(hashes.SHA3_256)(N, G, PunctureSet(4))
        assert repr(prf).startswith("PuncturablePrf[sha3-256](")
        assert "hash='sha3-256'" in repr(prf)
