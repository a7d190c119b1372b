"""Static CLI flag schema.

The parser in :mod:`seedconv.cli.app` is built from :data:`OPTION_TABLE`;
nothing in the core reads it.  Sections mirror the help layout: general
options first, then the ints, SLIP39 and deterministic-RNG groups.
"""

from __future__ import annotations

from dataclasses import dataclass

from seedconv import config
from seedconv.core.formats import INPUT_FORMAT_NAMES, OUTPUT_FORMAT_NAMES


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One command-line flag as handed to ``add_argument``."""

    flags: tuple[str, ...]
    dest: str
    metavar: str
    help: str
    section: str | None = None
    """Help section title; ``None`` for the general options."""

    repeatable: bool = False
    optional_value: bool = False
    """The flag may appear without its value (``--ur``)."""


SECTION_INTS = "ints Input and Output Options"
SECTION_SLIP39 = "SLIP39 Output Options"
SECTION_DETERMINISTIC = "Deterministic Random Numbers"

OPTION_TABLE: tuple[OptionSpec, ...] = (
    OptionSpec(
        flags=("-i", "--in"),
        dest="input_format",
        metavar="FORMAT",
        help="The input format (default: random). One of: "
        + ", ".join((*INPUT_FORMAT_NAMES, config.UR_INPUT_NAME)),
    ),
    OptionSpec(
        flags=("-o", "--out"),
        dest="output_format",
        metavar="FORMAT",
        help="The output format (default: hex). One of: " + ", ".join(OUTPUT_FORMAT_NAMES),
    ),
    OptionSpec(
        flags=("-c", "--count"),
        dest="count",
        metavar=f"{config.MIN_COUNT}-{config.MAX_COUNT}",
        help=f"The number of output units (default: {config.DEFAULT_COUNT})",
    ),
    OptionSpec(
        flags=("-u", "--ur"),
        dest="ur",
        metavar="MAX_PART_LENGTH",
        help="Encode output as a Uniform Resource (UR). If necessary the UR will "
        "be segmented into parts no larger than MAX_PART_LENGTH, given attached "
        f"as --ur=MAX_PART_LENGTH or -uMAX_PART_LENGTH (default: {config.DEFAULT_MAX_PART_LENGTH}).",
        optional_value=True,
    ),
    OptionSpec(
        flags=("-l", "--low"),
        dest="low",
        metavar=f"{config.INTS_MIN}-{config.INTS_MAX - 1}",
        help=f"The lowest int returned (default: {config.DEFAULT_INTS_LOW})",
        section=SECTION_INTS,
    ),
    OptionSpec(
        flags=("--high",),
        dest="high",
        metavar=f"{config.INTS_MIN + 1}-{config.INTS_MAX}",
        help=f"The highest int returned (default: {config.DEFAULT_INTS_HIGH}). "
        "Requires low < high.",
        section=SECTION_INTS,
    ),
    OptionSpec(
        flags=("-t", "--group-threshold"),
        dest="group_threshold",
        metavar=f"1-{config.MAX_GROUPS}",
        help="The number of groups that must meet their threshold "
        f"(default: {config.DEFAULT_GROUPS_THRESHOLD}). Must be <= the number "
        "of group specifications.",
        section=SECTION_SLIP39,
    ),
    OptionSpec(
        flags=("-g", "--group"),
        dest="groups",
        metavar="M-of-N",
        help="The group specification (default: 1-of-1). May appear more than once.",
        section=SECTION_SLIP39,
        repeatable=True,
    ),
    OptionSpec(
        flags=("-d", "--deterministic"),
        dest="deterministic",
        metavar="SEED",
        help="Use a deterministic random number generator with the given seed.",
        section=SECTION_DETERMINISTIC,
    ),
)
