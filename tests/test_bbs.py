"""Tests for the Blum-Blum-Shub generator and its prime search."""

import math

import numpy as np
import pytest

from src.prng import (
    INT_DRAW_BITS,
    BlumBlumShub,
    PrimeSearchError,
    blum_prime,
    coprime_seed,
    is_probable_prime,
    random_bits,
)

# Both primes are congruent to 3 mod 4.
P = 2_147_483_647  # 2**31 - 1
Q = 4_294_967_291  # largest 32-bit prime
SEED = 123_456_789


class TestPrimality:
    """Miller-Rabin probable-prime test."""

    @pytest.mark.parametrize("p", [2, 3, 5, 97, 101, 7919, P, Q])
    def test_primes_accepted(self, p: int) -> None:
        assert is_probable_prime(p, np.random.default_rng(0))

    @pytest.mark.parametrize(
        "c", [0, 1, 4, 100, 561, 41041, 7919 * 7927, 4_294_967_297]
    )
    def test_composites_rejected(self, c: int) -> None:
        # 561 and 41041 are Carmichael numbers; 2**32 + 1 = 641 * 6700417
        assert not is_probable_prime(c, np.random.default_rng(0))


class TestPrimeSearch:
    """blum_prime and coprime_seed honor their constraints."""

    @pytest.mark.parametrize("bits", [5, 8, 16, 32, 64])
    def test_blum_prime_constraints(self, bits: int) -> None:
        rng = np.random.default_rng(42)
        p = blum_prime(bits, rng, max_attempts=100_000)
        assert p.bit_length() == bits
        assert p % 4 == 3
        assert is_probable_prime(p, rng)

    def test_blum_prime_excludes_other_factor(self) -> None:
        rng = np.random.default_rng(1)
        # 5-bit Blum primes are 19, 23 and 31
        for _ in range(20):
            assert blum_prime(5, rng, 100_000, exclude=19) in (23, 31)

    def test_blum_prime_exhaustion_raises(self) -> None:
        with pytest.raises(PrimeSearchError):
            blum_prime(32, np.random.default_rng(0), max_attempts=0)

    def test_coprime_seed_constraints(self) -> None:
        rng = np.random.default_rng(3)
        seed = coprime_seed(32, P, Q, rng, max_attempts=1000)
        assert seed not in (0, 1)
        assert math.gcd(seed, P) == 1
        assert math.gcd(seed, Q) == 1

    def test_coprime_seed_exhaustion_raises(self) -> None:
        with pytest.raises(PrimeSearchError):
            coprime_seed(32, P, Q, np.random.default_rng(0), max_attempts=0)

    def test_random_bits_range(self) -> None:
        rng = np.random.default_rng(5)
        for bits in (1, 7, 8, 9, 33):
            for _ in range(50):
                assert 0 <= random_bits(bits, rng) < 2**bits


class TestConstruction:
    """Constructor rejects unusable parameters."""

    def test_modulus_and_state(self) -> None:
        bbs = BlumBlumShub(P, Q, SEED)
        assert bbs.modulus == P * Q
        assert bbs.state == SEED

    def test_seed_reduced_mod_modulus(self) -> None:
        bbs = BlumBlumShub(P, Q, SEED + P * Q)
        assert bbs.state == SEED

    def test_rejects_prime_not_3_mod_4(self) -> None:
        with pytest.raises(ValueError, match="3 mod 4"):
            BlumBlumShub(13, Q, SEED)

    @pytest.mark.parametrize("seed", [0, 1, P, 2 * Q])
    def test_rejects_degenerate_seed(self, seed: int) -> None:
        with pytest.raises(ValueError, match="Seed"):
            BlumBlumShub(P, Q, seed)

    def test_create_with_seeded_rng_is_reproducible(self) -> None:
        a = BlumBlumShub.create(32, rng=np.random.default_rng(9))
        b = BlumBlumShub.create(32, rng=np.random.default_rng(9))
        assert a.modulus == b.modulus
        assert a.state == b.state
        assert a.modulus.bit_length() in (63, 64)

    def test_create_without_rng(self) -> None:
        bbs = BlumBlumShub.create(16)
        assert bbs.modulus.bit_length() in (31, 32)
        assert bbs.next_bit() in (0, 1)


class TestBitStream:
    """Bit draws follow x <- x**2 mod n and are deterministic."""

    def test_next_bit_is_low_bit_of_squared_state(self) -> None:
        bbs = BlumBlumShub(P, Q, SEED)
        state = SEED
        for _ in range(100):
            state = pow(state, 2, P * Q)
            assert bbs.next_bit() == state & 1
            assert bbs.state == state

    def test_identical_parameters_identical_streams(self) -> None:
        a = BlumBlumShub(P, Q, SEED)
        b = BlumBlumShub(P, Q, SEED)
        assert [a.next_bit() for _ in range(500)] == [
            b.next_bit() for _ in range(500)
        ]
        assert [a.next_int(0, 1000) for _ in range(200)] == [
            b.next_int(0, 1000) for _ in range(200)
        ]

    def test_different_seeds_diverge(self) -> None:
        a = BlumBlumShub(P, Q, SEED)
        b = BlumBlumShub(P, Q, SEED + 1)
        assert [a.next_bit() for _ in range(256)] != [
            b.next_bit() for _ in range(256)
        ]

    def test_next_bits_msb_first(self) -> None:
        a = BlumBlumShub(P, Q, SEED)
        b = BlumBlumShub(P, Q, SEED)
        bits = [b.next_bit() for _ in range(8)]
        expected = int("".join(str(x) for x in bits), 2)
        assert a.next_bits(8) == expected


class TestNextInt:
    """Ranged integers from a fixed 15-bit draw."""

    def test_consumes_fixed_bit_count(self) -> None:
        a = BlumBlumShub(P, Q, SEED)
        b = BlumBlumShub(P, Q, SEED)
        for lo, hi in [(0, 1), (3, 15), (1, 20), (-5, 5)]:
            expected = lo + b.next_bits(INT_DRAW_BITS) % (hi - lo + 1)
            assert a.next_int(lo, hi) == expected
        assert a.state == b.state

    def test_in_range_for_random_bounds(self) -> None:
        bbs = BlumBlumShub(P, Q, SEED)
        rng = np.random.default_rng(2024)
        for _ in range(10_000):
            lo, hi = sorted(int(x) for x in rng.integers(-1000, 1000, size=2))
            value = bbs.next_int(lo, hi)
            assert lo <= value <= hi

    def test_degenerate_range(self) -> None:
        bbs = BlumBlumShub(P, Q, SEED)
        assert all(bbs.next_int(7, 7) == 7 for _ in range(20))

    def test_empty_range_raises(self) -> None:
        with pytest.raises(ValueError, match="Empty range"):
            BlumBlumShub(P, Q, SEED).next_int(5, 4)

    def test_covers_small_range(self) -> None:
        bbs = BlumBlumShub(P, Q, SEED)
        seen = {bbs.next_int(1, 6) for _ in range(500)}
        assert seen == {1, 2, 3, 4, 5, 6}
