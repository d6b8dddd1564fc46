"""Blum-Blum-Shub bit source: prime search, bit draws, and ranged integers."""

from src.prng.bbs import INT_DRAW_BITS, BlumBlumShub
from src.prng.primes import (
    PrimeSearchError,
    blum_prime,
    coprime_seed,
    is_probable_prime,
    random_bits,
)

__all__ = [
    "BlumBlumShub",
    "INT_DRAW_BITS",
    "PrimeSearchError",
    "blum_prime",
    "coprime_seed",
    "is_probable_prime",
    "random_bits",
]
