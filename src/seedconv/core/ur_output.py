"""UR output assembly — a thin pass-through to the UR encoder.

Segmentation is the codec's job; this module only validates the part
length it is handed and joins the parts for presentation.
"""

from __future__ import annotations

from collections.abc import Sequence

from seedconv.core.protocols import URCodec
from seedconv.exceptions import RangeError


def assemble_ur_output(
    codec: URCodec,
    payload: bytes,
    ur_type: str,
    max_part_length: int,
) -> tuple[str, ...]:
    """Encode *payload* as one or more UR parts of at most *max_part_length*.

    Raises
    ------
    RangeError
        If *max_part_length* is not positive.
    """
    if max_part_length < 1:
        raise RangeError(
            "MAX_PART_LENGTH must be a positive integer.",
            option="--ur",
            value=str(max_part_length),
        )
    return tuple(codec.encode(payload, ur_type, max_part_length))


def join_ur_parts(parts: Sequence[str]) -> str:
    """Join UR parts one per line."""
    return "\n".join(parts)
