import pytest

from okamoto_uchiyama import (
    RandomSourceFailure, SeededRandom, bytes_be_to_int, gen_prime, int_to_bytes_be,
    is_probable_prime, modinv, randbelow, randbits, read_random, system_random,
)


def test_int_bytes_minimal_encoding():
    assert int_to_bytes_be(0) == b""
    assert int_to_bytes_be(255) == b"\xff"
    assert int_to_bytes_be(256) == b"\x01\x00"
    assert bytes_be_to_int(b"") == 0
    assert bytes_be_to_int(b"\x00\x01\x00") == 256


def test_int_to_bytes_rejects_negative():
    with pytest.raises(ValueError):
        int_to_bytes_be(-5)


def test_seeded_random_is_deterministic():
    a, b = SeededRandom(b"abc"), SeededRandom(b"abc")
    assert a(16) + a(5) == b(21)
    assert SeededRandom(b"abc")(32) != SeededRandom(b"abd")(32)


def test_seeded_random_accepts_str():
    assert SeededRandom("abc")(8) == SeededRandom(b"abc")(8)


def test_system_random_length():
    assert len(system_random(24)) == 24


def test_read_random_wraps_failures():
    def broken(n):
        raise OSError("boom")

    with pytest.raises(RandomSourceFailure):
        read_random(broken, 4)
    with pytest.raises(RandomSourceFailure):
        read_random(lambda n: b"\x00" * (n - 1), 4)
    with pytest.raises(RandomSourceFailure):
        read_random(lambda n: None, 4)


def test_randbits_width():
    rng = SeededRandom(b"bits")
    for _ in range(50):
        assert randbits(rng, 13) < 2 ** 13


def test_randbelow_range():
    rng = SeededRandom(b"below")
    draws = {randbelow(rng, 5) for _ in range(200)}
    assert draws == {0, 1, 2, 3, 4}
    assert randbelow(rng, 1) == 0
    with pytest.raises(ValueError):
        randbelow(rng, 0)


@pytest.mark.parametrize("n", [2, 3, 5, 41, 65537, 2 ** 61 - 1])
def test_known_primes(n):
    assert is_probable_prime(n)


@pytest.mark.parametrize("n", [0, 1, 4, 561, 41 * 43, 65537 * 65539])
def test_known_composites(n):
    assert not is_probable_prime(n)


def test_gen_prime_bit_length():
    p = gen_prime(SeededRandom(b"prime"), 24)
    assert p.bit_length() == 24
    assert p >> 22 == 0b11
    assert is_probable_prime(p)


def test_modinv():
    assert modinv(3, 11) == 4
    assert (modinv(12345, 65537) * 12345) % 65537 == 1
    with pytest.raises(ValueError):
        modinv(6, 9)
