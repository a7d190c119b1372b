"""Infrastructure: random sources for the conversion stage.

Both generators satisfy :class:`~seedconv.core.protocols.RandomGenerator`.
The deterministic one exists for reproducible test vectors and must
never be used to create real seeds.
"""

from __future__ import annotations

import hashlib
import random
import secrets

from seedconv.core.protocols import RandomGenerator


class DeterministicRandom:
    """Reproducible generator seeded from the SHA-256 digest of a string."""

    def __init__(self, seed: str) -> None:
        digest = hashlib.sha256(seed.encode("utf-8")).digest()
        self._random = random.Random(int.from_bytes(digest, "big"))

    def random_bytes(self, n: int) -> bytes:
        return self._random.randbytes(n)

    def random_int(self, low: int, high: int) -> int:
        return self._random.randint(low, high)


class CryptographicRandom:
    """Generator backed by the operating system CSPRNG."""

    def random_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def random_int(self, low: int, high: int) -> int:
        return low + secrets.randbelow(high - low + 1)


def make_random(seed: str | None) -> RandomGenerator:
    """Return a deterministic generator for *seed*, or a cryptographic one."""
    if seed is None:
        return CryptographicRandom()
    return DeterministicRandom(seed)
