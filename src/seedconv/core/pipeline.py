"""Validation pipeline — raw CLI input → :class:`ResolvedConfiguration`.

The steps run in a fixed order over one private, mutable resolution
record.  The first step that fails raises a
:class:`~seedconv.exceptions.SeedconvError` subclass and nothing after
it runs; the record is then discarded, so no partially-valid
configuration ever escapes.

Pipeline order (enforced by :meth:`ValidationPipeline.run`):

1.  **Count** — parse ``--count`` (default 16), require 1–64.
2.  **RNG mode** — deterministic when ``--deterministic`` is given.
3.  **Input format** — random by default; ``ur`` defers to step 4.
4.  **Input** — positional args or stdin; UR input picks the real format.
5.  **Count for input** — hex and bc32 input reject ``--count``.
6.  **Output format** — hex by default.
7.  **Output for input** — the compatibility matrix.
8.  **ints** — ``--low``/``--high`` only with ints output.
9.  **BIP39** — even seed length in 12–32.
10. **SLIP39** — even seed length in 16–32, groups and group threshold.
11. **UR output** — ``--ur`` only for hex, bip39 and slip39 output.

Guarantees
----------
* No ``print()`` and no process exit; stdin is read only through the
  injected reader, and only in step 4.
* Only :class:`~seedconv.exceptions.SeedconvError` subclasses escape.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from seedconv import config
from seedconv.core import formats
from seedconv.core.compatibility import check_compatibility
from seedconv.core.group_spec import parse_group_spec
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
from seedconv.core.protocols import InputReader, RandomFactory, RandomGenerator, URCodec
from seedconv.exceptions import (
    CombinationError,
    GrammarError,
    InputAbsentError,
    RangeError,
    SeedconvError,
    UnknownNameError,
    URDecodeError,
)

logger = logging.getLogger(__name__)

UR_TYPE_FORMATS: dict[str, FormatKey] = {
    config.UR_TYPE_SEED: FormatKey.HEX,
    config.UR_TYPE_BIP39: FormatKey.BIP39,
    config.UR_TYPE_SLIP39: FormatKey.SLIP39,
}
"""Declared UR type → the input format its payload is converted from."""

UR_OUTPUT_FORMATS: frozenset[FormatKey] = frozenset(
    {FormatKey.HEX, FormatKey.BIP39, FormatKey.SLIP39}
)

_INT_RE: re.Pattern[str] = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_int(text: str, *, option: str) -> int:
    """Parse a decimal integer option value.

    Raises
    ------
    GrammarError
        If *text* is not a plain (optionally signed) decimal integer.
    """
    if _INT_RE.fullmatch(text) is None:
        raise GrammarError(
            f'{option} must be an integer, got "{text}".',
            option=option,
            value=text,
        )
    return int(text)


# ---------------------------------------------------------------------------
# Resolution record
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Resolution:
    """Fields resolved so far; owned by a single :meth:`run` call."""

    count: int = config.DEFAULT_COUNT
    rng_mode: RngMode = field(default_factory=RngMode)
    rng: RandomGenerator | None = None
    input_format: FormatIdentity | None = None
    output_format: FormatIdentity | None = None
    input: tuple[str, ...] = ()
    is_ur_input: bool = False
    ur_input: URObject | None = None
    is_ur_output: bool = False
    max_part_length: int | None = None

    def require_input_format(self) -> FormatIdentity:
        if self.input_format is None:
            raise RuntimeError("input format read before it was resolved")
        return self.input_format

    def require_output_format(self) -> FormatIdentity:
        if self.output_format is None:
            raise RuntimeError("output format read before it was resolved")
        return self.output_format

    def freeze(self) -> ResolvedConfiguration:
        if self.input_format is None or self.output_format is None or self.rng is None:
            raise RuntimeError("validation finished with unresolved fields")
        return ResolvedConfiguration(
            input_format=self.input_format,
            output_format=self.output_format,
            count=self.count,
            rng_mode=self.rng_mode,
            rng=self.rng,
            input=self.input,
            is_ur_input=self.is_ur_input,
            ur_input=self.ur_input,
            is_ur_output=self.is_ur_output,
            max_part_length=self.max_part_length,
        )


_Step = Callable[[RawParameters, _Resolution], None]


class ValidationPipeline:
    """Resolve and cross-check raw parameters in a fixed order.

    Parameters
    ----------
    ur_codec:
        Any object satisfying the :class:`URCodec` protocol; used to
        decode ``--in ur`` input.
    input_reader:
        Called when a non-random input format has no positional
        arguments; returns the records read from standard input.
    random_factory:
        Builds the random generator for a deterministic seed (or the
        cryptographic one for ``None``).
    """

    def __init__(
        self,
        ur_codec: URCodec,
        input_reader: InputReader,
        random_factory: RandomFactory,
    ) -> None:
        self._ur_codec: URCodec = ur_codec
        self._input_reader: InputReader = input_reader
        self._random_factory: RandomFactory = random_factory

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def steps(self) -> tuple[_Step, ...]:
        return (
            self._validate_count,
            self._validate_deterministic,
            self._validate_input_format,
            self._validate_input,
            self._validate_count_for_input_format,
            self._validate_output_format,
            self._validate_output_for_input,
            self._validate_ints_specific,
            self._validate_bip39_specific,
            self._validate_slip39_specific,
            self._validate_ur,
        )

    def run(self, raw: RawParameters) -> ResolvedConfiguration:
        """Validate *raw* and return the resolved configuration.

        Raises
        ------
        SeedconvError
            The first violated rule; no configuration is produced.
        """
        state = _Resolution()
        for step in self.steps:
            step(raw, state)
        resolved = state.freeze()
        logger.debug("Resolved configuration: %r", resolved)
        return resolved

    # ------------------------------------------------------------------
    # 1-2. Count and random source
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_count(raw: RawParameters, state: _Resolution) -> None:
        if raw.count:
            state.count = parse_int(raw.count, option="--count")
        else:
            state.count = config.DEFAULT_COUNT

        if not (config.MIN_COUNT <= state.count <= config.MAX_COUNT):
            raise RangeError(
                f"COUNT must be in [{config.MIN_COUNT}-{config.MAX_COUNT}].",
                option="--count",
                value=raw.count,
            )
        logger.debug("count=%d", state.count)

    def _validate_deterministic(self, raw: RawParameters, state: _Resolution) -> None:
        seed = raw.deterministic_seed or None
        state.rng_mode = RngMode(seed=seed)
        state.rng = self._random_factory(seed)
        logger.debug("rng=%s", state.rng_mode.kind)

    # ------------------------------------------------------------------
    # 3-5. Input
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_input_format(raw: RawParameters, state: _Resolution) -> None:
        name = raw.input_format_name
        if not name:
            state.input_format = formats.make_format(FormatKey.RANDOM)
        elif name == config.UR_INPUT_NAME:
            # The real format is known only once the UR is decoded.
            state.is_ur_input = True
        else:
            fmt = formats.lookup(name)
            if fmt is None:
                raise UnknownNameError(
                    f"Unknown input format: {name}",
                    option="--in",
                    value=name,
                    hint="Choose one of: "
                    + ", ".join((*formats.INPUT_FORMAT_NAMES, config.UR_INPUT_NAME)),
                )
            state.input_format = fmt
        logger.debug("input format=%s ur=%s", state.input_format, state.is_ur_input)

    def _validate_input(self, raw: RawParameters, state: _Resolution) -> None:
        if state.input_format is not None and formats.is_random(state.input_format):
            if raw.positional_args:
                raise CombinationError(
                    "Do not provide arguments when using the random (default) input format.",
                    hint="Pass --in with the format of your input.",
                )
            return

        if raw.positional_args:
            state.input = tuple(raw.positional_args)
        else:
            logger.debug("No positional arguments; reading standard input")
            state.input = tuple(self._input_reader())

        if not state.input:
            raise InputAbsentError(
                "No input provided.",
                hint="Pass the input as arguments or pipe it on standard input.",
            )

        if state.is_ur_input:
            ur = self._decode_ur(state.input)
            key = UR_TYPE_FORMATS.get(ur.type)
            if key is None:
                raise UnknownNameError(
                    f"Unknown UR type: {ur.type}",
                    option="--in",
                    value=ur.type,
                    hint="Supported UR types: " + ", ".join(UR_TYPE_FORMATS),
                )
            state.ur_input = ur
            state.input_format = formats.make_format(key)
            logger.debug("UR type %s selects input format %s", ur.type, key.value)

    def _decode_ur(self, parts: tuple[str, ...]) -> URObject:
        """Call the codec and ensure only our exceptions escape."""
        try:
            return self._ur_codec.decode(parts)
        except SeedconvError:
            raise
        except Exception as exc:
            raise URDecodeError(
                f"Could not decode UR input: {exc}",
                option="--in",
            ) from exc

    @staticmethod
    def _validate_count_for_input_format(raw: RawParameters, state: _Resolution) -> None:
        fmt = state.input_format
        if fmt is None or not raw.count:
            return
        if formats.is_hex(fmt) or formats.is_bc32(fmt):
            label = "hex" if formats.is_hex(fmt) else "BC32"
            raise CombinationError(
                f"The --count option is not available for {label} input.",
                option="--count",
                value=raw.count,
                hint=f"The length of {label} input determines the count.",
            )

    # ------------------------------------------------------------------
    # 6-7. Output
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_output_format(raw: RawParameters, state: _Resolution) -> None:
        name = raw.output_format_name
        if not name:
            state.output_format = formats.make_format(FormatKey.HEX)
        else:
            fmt = formats.lookup_output(name)
            if fmt is None:
                raise UnknownNameError(
                    f"Unknown output format: {name}",
                    option="--out",
                    value=name,
                    hint="Choose one of: " + ", ".join(formats.OUTPUT_FORMAT_NAMES),
                )
            state.output_format = fmt
        logger.debug("output format=%s", state.output_format)

    @staticmethod
    def _validate_output_for_input(raw: RawParameters, state: _Resolution) -> None:
        check_compatibility(
            state.require_input_format(),
            state.require_output_format(),
            is_ur_input=state.is_ur_input,
        )

    # ------------------------------------------------------------------
    # 8-10. Format-specific options
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_ints_specific(raw: RawParameters, state: _Resolution) -> None:
        fmt = state.require_output_format()

        if not formats.is_ints(fmt):
            if raw.ints_low:
                raise CombinationError(
                    'Option --low can only be used with the "ints" output format.',
                    option="--low",
                    value=raw.ints_low,
                )
            if raw.ints_high:
                raise CombinationError(
                    'Option --high can only be used with the "ints" output format.',
                    option="--high",
                    value=raw.ints_high,
                )
            return

        defaults = fmt.ints or formats.default_ints_range()
        low = parse_int(raw.ints_low, option="--low") if raw.ints_low else defaults.low
        high = parse_int(raw.ints_high, option="--high") if raw.ints_high else defaults.high
        if not (config.INTS_MIN <= low < high <= config.INTS_MAX):
            raise RangeError(
                f"--low and --high must specify a range in "
                f"[{config.INTS_MIN}-{config.INTS_MAX}].",
                option="--low" if raw.ints_low else "--high",
                value=f"{low}-{high}",
                hint="--low must be strictly less than --high.",
            )
        state.output_format = dataclasses.replace(fmt, ints=IntsRange(low=low, high=high))
        logger.debug("ints range=[%d, %d]", low, high)

    @staticmethod
    def _validate_bip39_specific(raw: RawParameters, state: _Resolution) -> None:
        if not formats.is_bip39(state.require_output_format()):
            return
        if not is_seed_length_valid(
            state.count, config.BIP39_MIN_SEED_LENGTH, config.BIP39_MAX_SEED_LENGTH
        ):
            raise RangeError(
                f"For BIP39 COUNT must be in "
                f"[{config.BIP39_MIN_SEED_LENGTH}-{config.BIP39_MAX_SEED_LENGTH}] and even.",
                option="--count",
                value=raw.count,
            )

    @staticmethod
    def _validate_slip39_specific(raw: RawParameters, state: _Resolution) -> None:
        fmt = state.require_output_format()

        if not formats.is_slip39(fmt):
            if raw.group_specs:
                raise CombinationError(
                    'Option --group can only be used with the "slip39" output format.',
                    option="--group",
                    value=raw.group_specs[0],
                )
            if raw.groups_threshold:
                raise CombinationError(
                    'Option --group-threshold can only be used with the "slip39" output format.',
                    option="--group-threshold",
                    value=raw.groups_threshold,
                )
            return

        if not is_seed_length_valid(
            state.count, config.SLIP39_MIN_SEED_LENGTH, config.SLIP39_MAX_SEED_LENGTH
        ):
            raise RangeError(
                f"For SLIP39 COUNT must be in "
                f"[{config.SLIP39_MIN_SEED_LENGTH}-{config.SLIP39_MAX_SEED_LENGTH}] and even.",
                option="--count",
                value=raw.count,
            )

        if len(raw.group_specs) > config.MAX_GROUPS:
            raise RangeError(
                f"There must be no more than {config.MAX_GROUPS} groups.",
                option="--group",
                value=str(len(raw.group_specs)),
            )

        groups: tuple[GroupDescriptor, ...]
        if not raw.group_specs:
            groups = formats.default_slip39_groups().groups
        else:
            groups = tuple(parse_group_spec(spec) for spec in raw.group_specs)

        if raw.groups_threshold:
            groups_threshold = parse_int(raw.groups_threshold, option="--group-threshold")
        else:
            groups_threshold = config.DEFAULT_GROUPS_THRESHOLD
        if not (0 < groups_threshold <= len(groups)):
            raise RangeError(
                "Group threshold must be <= the number of groups.",
                option="--group-threshold",
                value=raw.groups_threshold,
                hint=f"{len(groups)} group(s) were specified; "
                "the threshold must be between 1 and that number.",
            )

        state.output_format = dataclasses.replace(
            fmt,
            slip39=SLIP39Groups(groups_threshold=groups_threshold, groups=groups),
        )
        logger.debug(
            "slip39 groups=%s threshold=%d",
            ", ".join(str(g) for g in groups),
            groups_threshold,
        )

    # ------------------------------------------------------------------
    # 11. UR output
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_ur(raw: RawParameters, state: _Resolution) -> None:
        if not raw.is_ur_output:
            return

        if state.is_ur_input:
            raise CombinationError(
                "The --ur option may not be combined with the --in ur input method.",
                option="--ur",
            )

        state.is_ur_output = True
        if raw.max_part_length:
            state.max_part_length = parse_int(raw.max_part_length, option="--ur")
        else:
            state.max_part_length = config.DEFAULT_MAX_PART_LENGTH
        if state.max_part_length < 1:
            raise RangeError(
                "MAX_PART_LENGTH must be a positive integer.",
                option="--ur",
                value=raw.max_part_length,
            )

        output_format = state.require_output_format()
        if output_format.key not in UR_OUTPUT_FORMATS:
            raise CombinationError(
                "The --ur option is only available for hex, BIP39 and SLIP39 output.",
                option="--ur",
                value=output_format.name,
            )
        logger.debug("ur output max part length=%d", state.max_part_length)


def is_seed_length_valid(count: int, minimum: int, maximum: int) -> bool:
    """Return ``True`` for an even *count* within ``[minimum, maximum]``."""
    return minimum <= count <= maximum and count % 2 == 0
