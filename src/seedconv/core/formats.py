"""Format catalog — name → :class:`FormatIdentity` lookup.

Every lookup builds a fresh identity; ``ints`` and ``slip39`` start
from their documented defaults (range ``[1, 9]``; one ``1-of-1`` group
with threshold 1), which later pipeline steps may override with
:func:`dataclasses.replace`.
"""

from __future__ import annotations

from seedconv import config
from seedconv.core.models import (
    FormatIdentity,
    FormatKey,
    GroupDescriptor,
    IntsRange,
    SLIP39Groups,
)

INPUT_FORMAT_NAMES: tuple[str, ...] = tuple(key.value for key in FormatKey)
"""Names accepted by ``--in`` (besides ``ur``)."""

OUTPUT_FORMAT_NAMES: tuple[str, ...] = tuple(
    key.value for key in FormatKey if key is not FormatKey.RANDOM
)
"""Names accepted by ``--out``; ``random`` is an input-only format."""


def default_ints_range() -> IntsRange:
    return IntsRange(low=config.DEFAULT_INTS_LOW, high=config.DEFAULT_INTS_HIGH)


def default_slip39_groups() -> SLIP39Groups:
    return SLIP39Groups(
        groups_threshold=config.DEFAULT_GROUPS_THRESHOLD,
        groups=(GroupDescriptor(threshold=1, count=1),),
    )


def make_format(key: FormatKey) -> FormatIdentity:
    """Build a :class:`FormatIdentity` for *key* with its default state."""
    if key is FormatKey.INTS:
        return FormatIdentity(key, ints=default_ints_range())
    if key is FormatKey.SLIP39:
        return FormatIdentity(key, slip39=default_slip39_groups())
    return FormatIdentity(key)


def lookup(name: str) -> FormatIdentity | None:
    """Resolve *name* exactly (case-sensitive); ``None`` when unknown."""
    try:
        key = FormatKey(name)
    except ValueError:
        return None
    return make_format(key)


def lookup_output(name: str) -> FormatIdentity | None:
    """Like :func:`lookup`, restricted to :data:`OUTPUT_FORMAT_NAMES`."""
    if name not in OUTPUT_FORMAT_NAMES:
        return None
    return lookup(name)


# ---------------------------------------------------------------------------
# Category tests
# ---------------------------------------------------------------------------

def is_random(fmt: FormatIdentity) -> bool:
    return fmt.key is FormatKey.RANDOM


def is_hex(fmt: FormatIdentity) -> bool:
    return fmt.key is FormatKey.HEX


def is_bc32(fmt: FormatIdentity) -> bool:
    return fmt.key is FormatKey.BC32


def is_bip39(fmt: FormatIdentity) -> bool:
    return fmt.key is FormatKey.BIP39


def is_slip39(fmt: FormatIdentity) -> bool:
    return fmt.key is FormatKey.SLIP39


def is_ints(fmt: FormatIdentity) -> bool:
    return fmt.key is FormatKey.INTS
