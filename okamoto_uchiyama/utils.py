# okamoto_uchiyama/utils.py
import hashlib
from typing import Callable
from .errors import RandomSourceFailure

RandFunc = Callable[[int], bytes]

def shake(expand_bytes: int, *chunks: bytes) -> bytes:
    xof = hashlib.shake_256()
    for c in chunks:
        xof.update(len(c).to_bytes(2, 'big'))
        xof.update(c)
    return xof.digest(expand_bytes)

def int_to_bytes_be(n: int) -> bytes:
    if n < 0:
        raise ValueError("Cannot encode a negative integer")
    return n.to_bytes((n.bit_length() + 7) // 8, "big")

def bytes_be_to_int(b: bytes) -> int:
    return int.from_bytes(b, "big")

# -----------------------------
# Random Draws
# -----------------------------
def read_random(randfunc: RandFunc, n: int) -> bytes:
    """Read exactly n bytes from randfunc, turning any failure into RandomSourceFailure."""
    try:
        data = randfunc(n)
    except Exception as e:
        raise RandomSourceFailure(f"okamoto-uchiyama: random source failed: {e}") from e
    if not isinstance(data, (bytes, bytearray)) or len(data) != n:
        raise RandomSourceFailure(f"okamoto-uchiyama: random source returned a short read ({n} bytes requested)")
    return bytes(data)

def randbits(randfunc: RandFunc, bits: int) -> int:
    nbytes = (bits + 7) // 8
    x = bytes_be_to_int(read_random(randfunc, nbytes))
    return x >> (nbytes * 8 - bits)

def randbelow(randfunc: RandFunc, upper: int) -> int:
    """Uniform integer in [0, upper) by rejection sampling."""
    if upper <= 0:
        raise ValueError("upper bound must be positive")
    bits = (upper - 1).bit_length()
    if bits == 0:
        return 0
    while True:
        x = randbits(randfunc, bits)
        if x < upper:
            return x
