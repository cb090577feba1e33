# okamoto_uchiyama/cipher.py
from typing import Optional
from .errors import CipherTooLarge, InvalidKeyState, MessageTooLarge
from .keys import PrivateKey, PublicKey
from .params import ONE
from .primes import modinv
from .rng import system_random
from .utils import RandFunc, bytes_be_to_int, int_to_bytes_be, randbelow

# -----------------------------
# Encryption
# -----------------------------
def encrypt_int(pub: PublicKey, m: int, randfunc: Optional[RandFunc] = None) -> int:
    if m < 0:
        raise ValueError("plaintext must be non-negative")
    if m >= pub.n:
        raise MessageTooLarge()
    randfunc = randfunc or system_random
    r = randbelow(randfunc, pub.n - ONE) + ONE
    return (pow(pub.g, m, pub.n) * pow(pub.h, r, pub.n)) % pub.n

def encrypt(pub: PublicKey, plaintext: bytes, randfunc: Optional[RandFunc] = None) -> bytes:
    """
    Encrypt a big-endian encoded plaintext under ``pub``.

    Only ``m < n`` is enforced. Decryption recovers ``m mod p``, so callers
    must keep plaintexts below p (about a third of the bit size of n) for
    them to survive the round trip.
    """
    return int_to_bytes_be(encrypt_int(pub, bytes_be_to_int(plaintext), randfunc))

# -----------------------------
# Decryption
# -----------------------------
def _L(x: int, p: int) -> int:
    return (x - ONE) // p

def decrypt_int(priv: PrivateKey, c: int) -> int:
    if c < 0:
        raise ValueError("ciphertext must be non-negative")
    if c >= priv.n:
        raise CipherTooLarge()
    a = pow(c, priv.p - ONE, priv.p_squared)
    l1 = _L(a, priv.p)
    l2 = _L(priv.gd, priv.p)
    try:
        b_inv = modinv(l2, priv.p)
    except ValueError as e:
        raise InvalidKeyState("okamoto-uchiyama: L(gd) is not invertible mod p") from e
    return (l1 * b_inv) % priv.p

def decrypt(priv: PrivateKey, ciphertext: bytes) -> bytes:
    return int_to_bytes_be(decrypt_int(priv, bytes_be_to_int(ciphertext)))
