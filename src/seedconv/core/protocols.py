"""Protocols (interfaces) consumed by the core layer.

These define the contracts of the external collaborators — the UR
codec, the random generators and the standard-input reader.  Core code
depends ONLY on these protocols — never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from seedconv.core.models import URObject


class URCodec(Protocol):
    """Contract for Uniform Resource encoding backends.

    Implementations must map all backend-specific exceptions to
    :class:`~seedconv.exceptions.SeedconvError` subclasses.
    """

    def decode(self, parts: Sequence[str]) -> URObject:
        """Decode one or more UR parts into a single :class:`URObject`.

        A single-part UR is passed as a one-element sequence.

        Raises
        ------
        URDecodeError
            When the parts do not form a complete, valid UR.
        """
        ...  # pragma: no cover

    def encode(self, payload: bytes, ur_type: str, max_part_length: int) -> list[str]:
        """Segment *payload* into textual UR parts no longer than *max_part_length*."""
        ...  # pragma: no cover


class RandomGenerator(Protocol):
    """Contract for the random sources drawn on by the conversion stage."""

    def random_bytes(self, n: int) -> bytes:
        ...  # pragma: no cover

    def random_int(self, low: int, high: int) -> int:
        """Return an integer in the inclusive range ``[low, high]``."""
        ...  # pragma: no cover


InputReader = Callable[[], list[str]]
"""Returns newline-delimited records read until end-of-stream."""

RandomFactory = Callable[[str | None], RandomGenerator]
"""Builds a deterministic generator for a seed, or a cryptographic one for ``None``."""
