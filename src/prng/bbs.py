"""Blum-Blum-Shub pseudorandom bit and integer generator.

Bits come from iterating x <- x**2 mod (p*q) with p and q primes congruent
to 3 mod 4 and emitting the least-significant bit of each new state.
Integers are assembled from a fixed 15-bit draw reduced modulo the range
width, which leaves a slight bias toward low values whenever the width
does not divide 2**15. The bias is kept so that a given bit stream always
maps to the same graphs.
"""

import logging
import math

import numpy as np

from src.prng.primes import blum_prime, coprime_seed

log = logging.getLogger(__name__)

INT_DRAW_BITS = 15


class BlumBlumShub:
    """Stateful BBS generator.

    The state advances on every bit draw and is never reset. Two instances
    built from the same (p, q, seed) produce identical streams.
    """

    def __init__(self, p: int, q: int, seed: int) -> None:
        if p % 4 != 3 or q % 4 != 3:
            raise ValueError(
                f"BBS primes must be congruent to 3 mod 4, got p={p}, q={q}"
            )
        modulus = p * q
        state = seed % modulus
        if state in (0, 1) or math.gcd(state, modulus) != 1:
            raise ValueError(
                f"Seed {seed} must be coprime to the modulus and not "
                f"reduce to 0 or 1"
            )
        self._modulus = modulus
        self._state = state

    @classmethod
    def create(
        cls,
        bit_length: int,
        rng: np.random.Generator | None = None,
        max_attempts: int = 100_000,
    ) -> "BlumBlumShub":
        """Build a generator from freshly drawn primes and seed.

        Args:
            bit_length: Bit length of each prime and of the seed.
            rng: Candidate source. Defaults to an OS-entropy Generator.
            max_attempts: Per-search candidate budget.

        Returns:
            A ready BlumBlumShub instance.

        Raises:
            PrimeSearchError: If primes or seed cannot be found in budget.
        """
        if rng is None:
            rng = np.random.default_rng()
        p = blum_prime(bit_length, rng, max_attempts)
        q = blum_prime(bit_length, rng, max_attempts, exclude=p)
        seed = coprime_seed(bit_length, p, q, rng, max_attempts)
        log.info(
            "BBS generator created (bit_length=%d, modulus bits=%d)",
            bit_length,
            (p * q).bit_length(),
        )
        return cls(p, q, seed)

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def state(self) -> int:
        return self._state

    def next_bit(self) -> int:
        """Advance the state by one squaring and return its low bit."""
        self._state = pow(self._state, 2, self._modulus)
        return self._state & 1

    def next_bits(self, k: int) -> int:
        """Draw k bits and assemble them most-significant-first."""
        value = 0
        for _ in range(k):
            value = (value << 1) | self.next_bit()
        return value

    def next_int(self, lo: int, hi: int) -> int:
        """Draw an integer in [lo, hi] inclusive.

        Consumes exactly 15 bits regardless of the range width.
        """
        if lo > hi:
            raise ValueError(f"Empty range: lo ({lo}) > hi ({hi})")
        width = hi - lo + 1
        return lo + self.next_bits(INT_DRAW_BITS) % width
