"""Input/output format compatibility matrix.

Rules are evaluated in order and the first match wins; later rules are
strictly narrower than earlier ones.  A pair that matches no rule is
incompatible.

Rules
-----
1. Any input works with ``hex`` output.
2. Any input works with ``bc32`` output.
3. ``random`` input works with any output.
4. ``hex`` input works with any output.
5. ``bc32`` input works with any output.
6. UR-decoded ``bip39`` input works with ``bip39`` output.
7. UR-decoded ``slip39`` input works with ``slip39`` output.
"""

from __future__ import annotations

from collections.abc import Callable

from seedconv.core import formats
from seedconv.core.models import FormatIdentity
from seedconv.exceptions import CompatibilityError

_Rule = Callable[[FormatIdentity, FormatIdentity, bool], bool]

COMPATIBILITY_RULES: tuple[tuple[str, _Rule], ...] = (
    ("any input to hex output", lambda i, o, ur: formats.is_hex(o)),
    ("any input to bc32 output", lambda i, o, ur: formats.is_bc32(o)),
    ("random input to any output", lambda i, o, ur: formats.is_random(i)),
    ("hex input to any output", lambda i, o, ur: formats.is_hex(i)),
    ("bc32 input to any output", lambda i, o, ur: formats.is_bc32(i)),
    (
        "UR bip39 input to bip39 output",
        lambda i, o, ur: ur and formats.is_bip39(i) and formats.is_bip39(o),
    ),
    (
        "UR slip39 input to slip39 output",
        lambda i, o, ur: ur and formats.is_slip39(i) and formats.is_slip39(o),
    ),
)


def matching_rule(
    input_format: FormatIdentity,
    output_format: FormatIdentity,
    *,
    is_ur_input: bool = False,
) -> str | None:
    """Return the description of the first rule allowing the pair, if any."""
    for description, rule in COMPATIBILITY_RULES:
        if rule(input_format, output_format, is_ur_input):
            return description
    return None


def is_compatible(
    input_format: FormatIdentity,
    output_format: FormatIdentity,
    *,
    is_ur_input: bool = False,
) -> bool:
    return matching_rule(input_format, output_format, is_ur_input=is_ur_input) is not None


def check_compatibility(
    input_format: FormatIdentity,
    output_format: FormatIdentity,
    *,
    is_ur_input: bool = False,
) -> None:
    """Raise :class:`CompatibilityError` unless the pair is allowed."""
    if is_compatible(input_format, output_format, is_ur_input=is_ur_input):
        return
    raise CompatibilityError(
        f"Input format {input_format.name} cannot be used "
        f"with output format {output_format.name}",
        input_name=input_format.name,
        output_name=output_format.name,
        hint="Convert via hex or bc32, which accept and produce every format.",
    )
