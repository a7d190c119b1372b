"""Core layer — parameter resolution and cross-format validation.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or stdin I/O (stdin arrives via an injected reader).
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from seedconv.core.models import (
    FormatIdentity,
    FormatKey,
    GroupDescriptor,
    IntsRange,
    RawParameters,
    ResolvedConfiguration,
    RngMode,
    SLIP39Groups,
    URObject,
)
from seedconv.core.pipeline import ValidationPipeline
from seedconv.core.protocols import RandomGenerator, URCodec

__all__: list[str] = [
    "FormatIdentity",
    "FormatKey",
    "GroupDescriptor",
    "IntsRange",
    "RandomGenerator",
    "RawParameters",
    "ResolvedConfiguration",
    "RngMode",
    "SLIP39Groups",
    "URCodec",
    "URObject",
    "ValidationPipeline",
]
