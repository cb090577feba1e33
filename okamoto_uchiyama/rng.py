# okamoto_uchiyama/rng.py
import secrets
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms
from .utils import shake

def system_random(n: int) -> bytes:
    return secrets.token_bytes(n)

class SeededRandom:
    """
    Deterministic byte source: ChaCha20 keystream keyed from a seed.

    Same seed, same byte stream. Meant for tests and reproducible demos,
    never for real keys. Not thread-safe.
    """

    def __init__(self, seed: bytes):
        if isinstance(seed, str):
            seed = seed.encode("utf-8")
        key = shake(32, seed, b"ou-seeded-random")
        nonce = b"\x00" * 16
        self._stream = Cipher(algorithms.ChaCha20(key, nonce), mode=None).encryptor()

    def __call__(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("Cannot read a negative number of bytes")
        return self._stream.update(b"\x00" * n)
