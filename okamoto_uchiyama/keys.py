# okamoto_uchiyama/keys.py
from dataclasses import dataclass, field
from typing import Optional
from .errors import RandomSourceFailure
from .params import ONE, MIN_BITS, OUParams
from .primes import gen_prime
from .rng import system_random
from .utils import RandFunc, randbelow

# -----------------------------
# Keys
# -----------------------------
@dataclass(frozen=True)
class PublicKey:
    n: int  # p^2 * q
    g: int
    h: int  # g^n mod n

    @property
    def bits(self) -> int:
        return self.n.bit_length()

@dataclass(frozen=True)
class PrivateKey(PublicKey):
    gd: int = field(repr=False)  # g^(p-1) mod p^2
    p: int = field(repr=False)
    p_squared: int = field(repr=False)

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(n=self.n, g=self.g, h=self.h)

# -----------------------------
# Key Generation
# -----------------------------
def generate_key(randfunc: Optional[RandFunc] = None, bits: Optional[int] = None, params: OUParams = OUParams()) -> PrivateKey:
    """
    Generate an Okamoto-Uchiyama private key.

    Args:
        randfunc: secure byte source, ``randfunc(k) -> bytes``; defaults to ``secrets.token_bytes``
        bits: total bit length split between p and q; defaults to ``params.bits``

    Raises:
        RandomSourceFailure: randfunc failed, or no valid generator was found
            within ``params.max_generator_draws`` draws
    """
    randfunc = randfunc or system_random
    bits = params.bits if bits is None else bits
    if bits < MIN_BITS:
        raise ValueError(f"key size must be at least {MIN_BITS} bits")

    p = gen_prime(randfunc, bits // 2, params.prime_rounds)
    q = gen_prime(randfunc, bits // 2, params.prime_rounds)
    while q == p:
        q = gen_prime(randfunc, bits // 2, params.prime_rounds)

    p_squared = p * p
    n = p_squared * q

    # g uniform in {2 ... n-1} such that g^(p-1) mod p^2 != 1.
    # L(gd) needs gd = 1 mod p, which fails only when p divides g.
    for _ in range(params.max_generator_draws):
        g = randbelow(randfunc, n - 2) + 2
        gd = pow(g, p - ONE, p_squared)
        if gd != ONE and gd % p == ONE:
            break
    else:
        raise RandomSourceFailure(
            f"okamoto-uchiyama: no generator found after {params.max_generator_draws} draws"
        )

    h = pow(g, n, n)
    return PrivateKey(n=n, g=g, h=h, gd=gd, p=p, p_squared=p_squared)
