from dataclasses import dataclass

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'

ONE = 1
MIN_BITS = 16

@dataclass(frozen=True)
class OUParams:
    bits: int = 2048  # total bit length; p and q get bits // 2 each
    prime_rounds: int = 40  # Miller-Rabin rounds
    max_generator_draws: int = 128  # cap on g rejection sampling
