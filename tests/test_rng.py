"""Tests for the random sources (infra/rng.py)."""

from __future__ import annotations

import pytest

from seedconv.infra.rng import CryptographicRandom, DeterministicRandom, make_random


class TestDeterministicRandom:
    def test_same_seed_same_stream(self) -> None:
        a = DeterministicRandom("test")
        b = DeterministicRandom("test")
        assert a.random_bytes(32) == b.random_bytes(32)
        assert a.random_int(1, 6) == b.random_int(1, 6)

    def test_different_seed_different_stream(self) -> None:
        assert DeterministicRandom("a").random_bytes(32) != DeterministicRandom("b").random_bytes(32)

    def test_int_range_inclusive(self) -> None:
        rng = DeterministicRandom("range")
        values = {rng.random_int(0, 3) for _ in range(200)}
        assert values == {0, 1, 2, 3}


class TestCryptographicRandom:
    @pytest.mark.parametrize("n", [0, 1, 16, 64])
    def test_length(self, n: int) -> None:
        assert len(CryptographicRandom().random_bytes(n)) == n

    def test_int_range(self) -> None:
        rng = CryptographicRandom()
        assert all(1 <= rng.random_int(1, 9) <= 9 for _ in range(100))


class TestMakeRandom:
    def test_none_is_cryptographic(self) -> None:
        assert isinstance(make_random(None), CryptographicRandom)

    def test_seed_is_deterministic(self) -> None:
        assert isinstance(make_random("seed"), DeterministicRandom)
