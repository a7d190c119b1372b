"""Domain models for seedconv.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and a few derived properties.  They carry
zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from seedconv.exceptions import CombinationError

if TYPE_CHECKING:
    from seedconv.core.protocols import RandomGenerator


# ---------------------------------------------------------------------------
# Raw, uninterpreted CLI input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RawParameters:
    """Every CLI-supplied value, exactly as typed, prior to interpretation.

    ``None`` (or an empty string) means the option was not given.
    """

    count: str | None = None
    input_format_name: str | None = None
    output_format_name: str | None = None
    ints_low: str | None = None
    ints_high: str | None = None

    group_specs: tuple[str, ...] = ()
    """``--group`` values in command-line order; the position is the group index."""

    groups_threshold: str | None = None
    deterministic_seed: str | None = None

    is_ur_output: bool = False
    max_part_length: str | None = None
    """Optional argument of ``--ur``; only meaningful when *is_ur_output*."""

    positional_args: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------

class FormatKey(Enum):
    """The closed set of seed representations, keyed by their CLI name."""

    RANDOM = "random"
    HEX = "hex"
    BITS = "bits"
    CARDS = "cards"
    DICE = "dice"
    BASE6 = "base6"
    BASE10 = "base10"
    INTS = "ints"
    BIP39 = "bip39"
    SLIP39 = "slip39"
    BC32 = "bc32"


@dataclass(frozen=True, slots=True)
class GroupDescriptor:
    """One ``M-of-N`` share group: *threshold* of *count* shares recover it."""

    threshold: int
    count: int

    def __str__(self) -> str:
        return f"{self.threshold}-of-{self.count}"


@dataclass(frozen=True, slots=True)
class IntsRange:
    """Inclusive bounds of the integers emitted by the ``ints`` format."""

    low: int
    high: int


@dataclass(frozen=True, slots=True)
class SLIP39Groups:
    """Group-of-groups layout used by the ``slip39`` format."""

    groups_threshold: int
    groups: tuple[GroupDescriptor, ...]


@dataclass(frozen=True, slots=True)
class FormatIdentity:
    """A resolved format together with its format-specific state.

    Only ``ints`` carries :attr:`ints` and only ``slip39`` carries
    :attr:`slip39`; every other format carries neither.
    """

    key: FormatKey
    ints: IntsRange | None = None
    slip39: SLIP39Groups | None = None

    def __post_init__(self) -> None:
        if (self.ints is not None) != (self.key is FormatKey.INTS):
            raise ValueError(f"ints range is only valid for the ints format, not {self.key.value}")
        if (self.slip39 is not None) != (self.key is FormatKey.SLIP39):
            raise ValueError(f"SLIP39 groups are only valid for the slip39 format, not {self.key.value}")

    @property
    def name(self) -> str:
        return self.key.value

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Collaborator values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class URObject:
    """A decoded Uniform Resource: its declared type and CBOR payload."""

    type: str
    payload: bytes


@dataclass(frozen=True, slots=True)
class RngMode:
    """Which random source the conversion stage draws from."""

    seed: str | None = None
    """Seed of the deterministic generator; ``None`` selects the OS CSPRNG."""

    @property
    def is_deterministic(self) -> bool:
        return self.seed is not None

    @property
    def kind(self) -> str:
        return "deterministic" if self.is_deterministic else "cryptographic"


# ---------------------------------------------------------------------------
# Final result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolvedConfiguration:
    """The validated configuration handed to the conversion stage.

    Built exactly once, at the end of a successful pipeline run.
    """

    input_format: FormatIdentity
    output_format: FormatIdentity
    count: int
    rng_mode: RngMode
    rng: RandomGenerator = field(compare=False, repr=False)

    input: tuple[str, ...]
    """Effective input arguments (positional or read from stdin)."""

    is_ur_input: bool
    ur_input: URObject | None
    is_ur_output: bool
    max_part_length: int | None
    """Largest UR part length; set only when :attr:`is_ur_output`."""

    @property
    def ur_input_type(self) -> str | None:
        return self.ur_input.type if self.ur_input is not None else None

    def get_one_argument(self) -> str:
        """Return the single input argument.

        Raises
        ------
        CombinationError
            When the input does not consist of exactly one argument.
        """
        if len(self.input) != 1:
            raise CombinationError(
                "Only one argument accepted.",
                hint=f"Got {len(self.input)} arguments for {self.input_format} input.",
            )
        return self.input[0]

    def get_combined_arguments(self) -> str:
        """Join every input argument with single spaces."""
        return " ".join(self.input)

    def get_multiple_arguments(self) -> tuple[str, ...]:
        return self.input
