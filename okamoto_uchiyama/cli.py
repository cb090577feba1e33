import sys
import argparse
from .params import OUParams, bcolors
from .rng import SeededRandom, system_random
from .keys import generate_key
from .cipher import encrypt_int, decrypt_int
from .homomorphic import combine_many_int

# -----------------------------
# Commands
# -----------------------------
def _randfunc(seed):
    return SeededRandom(seed.encode("utf-8")) if seed else system_random

def cmd_keygen(bits: int, seed: str = None):
    priv = generate_key(_randfunc(seed), bits)
    print(f"{bcolors.OKCYAN}Okamoto-Uchiyama public key ({priv.bits} bit modulus){bcolors.ENDC}")
    print(f"n = {priv.n}")
    print(f"g = {priv.g}")
    print(f"h = {priv.h}")
    print(f"{bcolors.GREY}p is {priv.p.bit_length()} bits; plaintexts must stay below p{bcolors.ENDC}")
    return priv

def cmd_sum(numbers: list, bits: int, seed: str = None) -> int:
    randfunc = _randfunc(seed)
    priv = generate_key(randfunc, bits)
    cts = [encrypt_int(priv, m, randfunc) for m in numbers]
    for m, c in zip(numbers, cts):
        print(f"Enc({m}) = {c}")
    total = decrypt_int(priv, combine_many_int(priv, cts))
    print(f"{bcolors.OKGREEN}Decrypted sum: {total}{bcolors.ENDC}")
    print(f"{bcolors.GREY}p is {priv.p.bit_length()} bits; sums must stay below p{bcolors.ENDC}")
    if sum(numbers) >= priv.p:
        print(f"{bcolors.WARNING}WARNING: inputs add up to p or more; the decrypted sum is reduced mod p{bcolors.ENDC}")
    return total

def cmd_demo(bits: int, seed: str = None):
    randfunc = _randfunc(seed)
    priv = generate_key(randfunc, bits)
    print(f"{bcolors.OKCYAN}Generated {priv.bits} bit key{bcolors.ENDC}")
    c = encrypt_int(priv, 42, randfunc)
    print(f"Dec(Enc(42)) = {decrypt_int(priv, c)}")
    c5 = encrypt_int(priv, 5, randfunc)
    c7 = encrypt_int(priv, 7, randfunc)
    combined = combine_many_int(priv, (c5, c7))
    print(f"Dec(Enc(5) * Enc(7)) = {decrypt_int(priv, combined)}")

# -----------------------------
# CLI Main
# -----------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ou", description="Okamoto-Uchiyama additively homomorphic encryption")
    subparsers = parser.add_subparsers(dest="command", required=True)

    keygen_parser = subparsers.add_parser("keygen", help="Generate a key and print its public part")
    sum_parser = subparsers.add_parser("sum", help="Encrypt numbers, add them homomorphically, decrypt the total")
    sum_parser.add_argument("numbers", nargs="+", type=int, help="Non-negative integers to add")
    demo_parser = subparsers.add_parser("demo", help="Round trip and homomorphic addition walkthrough")

    for p in (keygen_parser, sum_parser, demo_parser):
        p.add_argument("--bits", type=int, default=OUParams().bits, help="Total key size in bits")
        p.add_argument("--seed", help="Deterministic seed (testing only)")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        match args.command:
            case "keygen":
                cmd_keygen(args.bits, args.seed)
            case "sum":
                cmd_sum(args.numbers, args.bits, args.seed)
            case "demo":
                cmd_demo(args.bits, args.seed)
    except Exception as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        sys.exit(1)

if __name__ == "__main__":
    main()
