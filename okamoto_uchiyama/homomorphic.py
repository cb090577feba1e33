# okamoto_uchiyama/homomorphic.py
from typing import Iterable
from .errors import CipherTooLarge, MessageTooLarge
from .keys import PublicKey
from .utils import bytes_be_to_int, int_to_bytes_be

def _decode_ciphertext(pub: PublicKey, c: bytes) -> int:
    x = bytes_be_to_int(c)
    if x >= pub.n:
        raise CipherTooLarge()
    return x

def combine_many_int(pub: PublicKey, ciphertexts: Iterable[int]) -> int:
    acc = None
    for c in ciphertexts:
        if c < 0:
            raise ValueError("ciphertext must be non-negative")
        if c >= pub.n:
            raise CipherTooLarge()
        acc = c % pub.n if acc is None else (acc * c) % pub.n
    if acc is None:
        raise ValueError("at least one ciphertext is required")
    return acc

def combine_many(pub: PublicKey, ciphertexts: Iterable[bytes]) -> bytes:
    """Dec(c1 * c2 * ... mod n) = m1 + m2 + ... mod p."""
    values = [_decode_ciphertext(pub, c) for c in ciphertexts]
    return int_to_bytes_be(combine_many_int(pub, values))

def combine_two(pub: PublicKey, c1: bytes, c2: bytes) -> bytes:
    # rejects if either operand is out of range, same as combine_many
    return combine_many(pub, (c1, c2))

def add_plain(pub: PublicKey, ciphertext: bytes, plaintext: bytes) -> bytes:
    """Dec(c * g^m mod n) = Dec(c) + m."""
    c = _decode_ciphertext(pub, ciphertext)
    m = bytes_be_to_int(plaintext)
    if m >= pub.n:
        raise MessageTooLarge()
    return int_to_bytes_be((c * pow(pub.g, m, pub.n)) % pub.n)

def scalar_mul(pub: PublicKey, ciphertext: bytes, k: int) -> bytes:
    """Dec(c^k mod n) = k * Dec(c) mod p."""
    if k < 0:
        raise ValueError("scalar must be non-negative")
    c = _decode_ciphertext(pub, ciphertext)
    return int_to_bytes_be(pow(c, k, pub.n))
