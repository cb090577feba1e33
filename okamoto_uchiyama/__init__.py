# okamoto_uchiyama/__init__.py
from .params import ONE, OUParams, bcolors
from .errors import (
    OkamotoUchiyamaError, RandomSourceFailure,
    MessageTooLarge, CipherTooLarge, InvalidKeyState,
)
from .utils import shake, int_to_bytes_be, bytes_be_to_int, read_random, randbits, randbelow
from .rng import system_random, SeededRandom
from .primes import is_probable_prime, gen_prime, egcd, modinv
from .keys import PublicKey, PrivateKey, generate_key
from .cipher import encrypt, decrypt, encrypt_int, decrypt_int
from .homomorphic import combine_two, combine_many, combine_many_int, add_plain, scalar_mul
from .vector import encrypt_vector, decrypt_vector, add_vectors, sum_vector
