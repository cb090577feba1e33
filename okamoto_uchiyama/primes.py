# okamoto_uchiyama/primes.py
import secrets
from .utils import RandFunc, randbits

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

def is_probable_prime(n: int, trials: int = 40) -> bool:
    if n < 2:
        return False
    if n in SMALL_PRIMES:
        return True
    if any(n % p == 0 for p in SMALL_PRIMES):
        return False
    s, d = 0, n - 1
    while d % 2 == 0:
        s += 1
        d //= 2
    for _ in range(trials):
        a = secrets.randbelow(n - 3) + 2
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True

def gen_prime(randfunc: RandFunc, bits: int, trials: int = 40) -> int:
    """Random prime of exactly `bits` bits with the top two bits set."""
    if bits < 2:
        raise ValueError("prime size must be at least 2 bits")
    top = (1 << (bits - 1)) | (1 << (bits - 2))
    while True:
        p = randbits(randfunc, bits)
        p |= top | 1
        if is_probable_prime(p, trials):
            return p

def egcd(a: int, b: int) -> tuple:
    # iterative; the recursive form overflows the stack on large moduli
    x0, x1, y0, y1 = 1, 0, 0, 1
    while b:
        k, a, b = a // b, b, a % b
        x0, x1 = x1, x0 - k * x1
        y0, y1 = y1, y0 - k * y1
    return a, x0, y0

def modinv(a: int, m: int) -> int:
    g, x, _ = egcd(a % m, m)
    if g != 1:
        raise ValueError("Modular inverse does not exist")
    return x % m
