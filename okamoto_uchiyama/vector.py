# okamoto_uchiyama/vector.py
import operator
import numpy as np
from typing import Optional, Sequence
from .cipher import decrypt_int, encrypt_int
from .homomorphic import combine_many_int
from .keys import PrivateKey, PublicKey
from .utils import RandFunc

# -----------------------------
# Vector Helpers
# -----------------------------
# Python ints overflow fixed-width dtypes, so every array here is dtype=object.
def _strict_int(x) -> int:
    if isinstance(x, (bool, np.bool_)):
        raise ValueError(f"Expected an integer, got {x!r}")
    try:
        return operator.index(x)
    except TypeError:
        raise ValueError(f"Expected an integer, got {x!r}") from None

_to_int = np.vectorize(_strict_int, otypes=[object])

def _as_int_array(values: Sequence[int]) -> np.ndarray:
    return _to_int(np.asarray(values, dtype=object))

def encrypt_vector(pub: PublicKey, values: Sequence[int], randfunc: Optional[RandFunc] = None) -> np.ndarray:
    arr = _as_int_array(values)
    out = np.empty(arr.shape, dtype=object)
    for idx, m in np.ndenumerate(arr):
        out[idx] = encrypt_int(pub, m, randfunc)
    return out

def decrypt_vector(priv: PrivateKey, ciphertexts: Sequence[int]) -> np.ndarray:
    arr = _as_int_array(ciphertexts)
    out = np.empty(arr.shape, dtype=object)
    for idx, c in np.ndenumerate(arr):
        out[idx] = decrypt_int(priv, c)
    return out

def add_vectors(pub: PublicKey, a: Sequence[int], b: Sequence[int]) -> np.ndarray:
    """Elementwise homomorphic sum of two ciphertext vectors."""
    a = _as_int_array(a)
    b = _as_int_array(b)
    if a.shape != b.shape:
        raise ValueError(f"Ciphertext vectors must have the same shape, got {a.shape} and {b.shape}")
    out = np.empty(a.shape, dtype=object)
    for idx in np.ndindex(a.shape):
        out[idx] = combine_many_int(pub, (a[idx], b[idx]))
    return out

def sum_vector(pub: PublicKey, ciphertexts: Sequence[int]) -> int:
    """Collapse a ciphertext vector into one ciphertext of the total."""
    return combine_many_int(pub, _as_int_array(ciphertexts).ravel().tolist())
