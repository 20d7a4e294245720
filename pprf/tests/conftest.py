"""
Test Configuration and Fixtures

RSA key generation dominates test time, so one 1024-bit PRF is generated
per session and every test works on its own restored copy.
"""

import random

import pytest

from pprf.prf import PuncturablePrf

TEST_MODULUS_BITS = 1024
TEST_INPUTS = 16


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: tests using 2048-bit or larger moduli")


@pytest.fixture(scope="session")
def base_prf() -> PuncturablePrf:
    """Unpunctured PRF shared by the whole session. Do not mutate."""
    return PuncturablePrf.generate(random.Random(1234), TEST_MODULUS_BITS, TEST_INPUTS)


@pytest.fixture
def prf(base_prf: PuncturablePrf) -> PuncturablePrf:
    """Independent copy of the session PRF."""
    return PuncturablePrf.from_state(base_prf.to_state())


@pytest.fixture
def toy_params():
    """Toy RSA parameters (insecure): N = 11 * 19, g = 2^2 mod N."""
    return 209, 4
