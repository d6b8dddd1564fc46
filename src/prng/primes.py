"""Probable-prime search for Blum-Blum-Shub moduli.

Candidates are drawn from a numpy random Generator so that a seeded
session picks the same primes every time. Primality is decided by trial
division against small primes followed by Miller-Rabin with random bases.
"""

import logging
import math

import numpy as np

log = logging.getLogger(__name__)

SMALL_PRIMES: tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67,
    71, 73, 79, 83, 89, 97,
)
MILLER_RABIN_ROUNDS = 40


class PrimeSearchError(Exception):
    """Raised when no suitable prime or seed is found within the attempt budget."""


def random_bits(bit_length: int, rng: np.random.Generator) -> int:
    """Draw a uniform non-negative integer below 2**bit_length.

    Args:
        bit_length: Number of random bits (>= 1).
        rng: numpy random Generator supplying the bytes.

    Returns:
        Integer in [0, 2**bit_length).
    """
    n_bytes = (bit_length + 7) // 8
    value = int.from_bytes(rng.bytes(n_bytes), "big")
    return value >> (8 * n_bytes - bit_length)


def _random_below(upper: int, rng: np.random.Generator) -> int:
    """Uniform integer in [0, upper) by rejection over random_bits."""
    bits = upper.bit_length()
    while True:
        value = random_bits(bits, rng)
        if value < upper:
            return value


def is_probable_prime(
    candidate: int,
    rng: np.random.Generator,
    rounds: int = MILLER_RABIN_ROUNDS,
) -> bool:
    """Miller-Rabin probable-prime test.

    Args:
        candidate: Integer to test.
        rng: Generator for witness selection.
        rounds: Number of random witnesses. Error probability <= 4**-rounds.

    Returns:
        True if candidate is prime with overwhelming probability.
    """
    if candidate < 2:
        return False
    for p in SMALL_PRIMES:
        if candidate == p:
            return True
        if candidate % p == 0:
            return False

    # candidate - 1 = d * 2**s with d odd
    d = candidate - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = 2 + _random_below(candidate - 3, rng)
        x = pow(a, d, candidate)
        if x == 1 or x == candidate - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, candidate)
            if x == candidate - 1:
                break
        else:
            return False
    return True


def blum_prime(
    bit_length: int,
    rng: np.random.Generator,
    max_attempts: int,
    exclude: int | None = None,
) -> int:
    """Find a probable prime of exactly bit_length bits congruent to 3 mod 4.

    Each attempt draws a fresh candidate with the top bit forced (so the
    bit length is exact) and retries until both constraints hold.

    Args:
        bit_length: Exact bit length of the prime (>= 3).
        rng: numpy random Generator for candidates and witnesses.
        max_attempts: Candidates drawn before giving up.
        exclude: A prime that must not be returned (the other BBS factor).

    Returns:
        Probable prime p with p % 4 == 3 and p.bit_length() == bit_length.

    Raises:
        PrimeSearchError: If no suitable prime is found within max_attempts.
    """
    if bit_length < 3:
        raise ValueError(f"bit_length must be >= 3, got {bit_length}")

    top = 1 << (bit_length - 1)
    for attempt in range(max_attempts):
        candidate = random_bits(bit_length, rng) | top
        if candidate % 4 != 3 or candidate == exclude:
            continue
        if is_probable_prime(candidate, rng):
            log.debug(
                "Found %d-bit Blum prime after %d attempts",
                bit_length,
                attempt + 1,
            )
            return candidate

    raise PrimeSearchError(
        f"No {bit_length}-bit prime congruent to 3 mod 4 found "
        f"after {max_attempts} attempts"
    )


def coprime_seed(
    bit_length: int,
    p: int,
    q: int,
    rng: np.random.Generator,
    max_attempts: int,
) -> int:
    """Draw a seed of at most bit_length bits, not 0 or 1, coprime to p and q.

    Raises:
        PrimeSearchError: If no acceptable seed is found within max_attempts.
    """
    for _ in range(max_attempts):
        seed = random_bits(bit_length, rng)
        if seed in (0, 1):
            continue
        if math.gcd(seed, p) == 1 and math.gcd(seed, q) == 1:
            return seed

    raise PrimeSearchError(
        f"No {bit_length}-bit seed coprime to the modulus found "
        f"after {max_attempts} attempts"
    )
