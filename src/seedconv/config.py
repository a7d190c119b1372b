"""Defaults and limits shared by the validation pipeline.

Plain module-level constants — no files, no environment lookups.
Changing a limit here changes it everywhere it is enforced.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Count
# ---------------------------------------------------------------------------

DEFAULT_COUNT: int = 16
MIN_COUNT: int = 1
MAX_COUNT: int = 64

# ---------------------------------------------------------------------------
# ints output
# ---------------------------------------------------------------------------

DEFAULT_INTS_LOW: int = 1
DEFAULT_INTS_HIGH: int = 9
INTS_MIN: int = 0
INTS_MAX: int = 255

# ---------------------------------------------------------------------------
# Mnemonic seed lengths (bytes, always even)
# ---------------------------------------------------------------------------

BIP39_MIN_SEED_LENGTH: int = 12
BIP39_MAX_SEED_LENGTH: int = 32

SLIP39_MIN_SEED_LENGTH: int = 16
SLIP39_MAX_SEED_LENGTH: int = 32

# ---------------------------------------------------------------------------
# SLIP39 groups
# ---------------------------------------------------------------------------

MAX_GROUPS: int = 16
"""Upper bound on the number of ``--group`` specifiers."""

MAX_GROUP_MEMBERS: int = 16
"""Upper bound on ``N`` in an ``M-of-N`` group specifier."""

DEFAULT_GROUPS_THRESHOLD: int = 1

# ---------------------------------------------------------------------------
# Uniform Resources
# ---------------------------------------------------------------------------

UR_INPUT_NAME: str = "ur"
"""The ``--in`` value that selects UR-decoded input."""

DEFAULT_MAX_PART_LENGTH: int = 2500

UR_TYPE_SEED: str = "crypto-seed"
UR_TYPE_BIP39: str = "crypto-bip39"
UR_TYPE_SLIP39: str = "crypto-slip39"
