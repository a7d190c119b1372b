"""Infrastructure layer — external collaborators.

This layer wraps the UR library, the random sources and standard input.
Every raw third-party exception must be caught here and re-raised as a
:class:`~seedconv.exceptions.SeedconvError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from seedconv.infra.rng import CryptographicRandom, DeterministicRandom, make_random
from seedconv.infra.stdin_reader import read_lines
from seedconv.infra.ur_codec import FoundationURCodec

__all__: list[str] = [
    "CryptographicRandom",
    "DeterministicRandom",
    "FoundationURCodec",
    "make_random",
    "read_lines",
]
