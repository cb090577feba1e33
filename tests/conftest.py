"""Shared pytest fixtures for the Okamoto-Uchiyama test suite."""

import pytest

from okamoto_uchiyama import SeededRandom, generate_key

TEST_BITS = 32  # 16-bit primes keep the suite fast


@pytest.fixture()
def rng():
    return SeededRandom(b"ou-test-suite")


@pytest.fixture(scope="session")
def priv():
    """Provide a small deterministic private key."""
    return generate_key(SeededRandom(b"ou-test-key"), TEST_BITS)


@pytest.fixture(scope="session")
def pub(priv):
    return priv.public_key
