"""``foundation-ur-py`` backed implementation of :class:`~seedconv.core.protocols.URCodec`.

This module is the **only** place in the codebase that imports ``ur``.
All library exceptions are caught here and re-raised as typed
:class:`~seedconv.exceptions.SeedconvError` subclasses — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from seedconv.core.models import URObject
from seedconv.exceptions import EnvironmentError, URDecodeError


def _import_ur() -> tuple[Any, Any, Any]:
    """Import the UR classes lazily; raise ``EnvironmentError`` when absent."""
    try:
        from ur.ur import UR
        from ur.ur_decoder import URDecoder
        from ur.ur_encoder import UREncoder
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "foundation-ur-py is not installed. Install with: pip install 'seedconv[ur]'",
        ) from exc
    return UR, URDecoder, UREncoder


class FoundationURCodec:
    """Concrete :class:`URCodec` backed by ``foundation-ur-py``.

    Usage::

        codec = FoundationURCodec()
        ur = codec.decode(["ur:crypto-seed/..."])
        parts = codec.encode(ur.payload, ur.type, 2500)

    Satisfies the :class:`~seedconv.core.protocols.URCodec` protocol
    structurally — no explicit inheritance required.
    """

    def decode(self, parts: Sequence[str]) -> URObject:
        """Feed every part to a fountain decoder and return the result.

        Raises
        ------
        URDecodeError
            When a part is malformed, the parts are inconsistent, or
            more parts are needed to complete the message.
        """
        _, URDecoder, _ = _import_ur()

        decoder = URDecoder()
        try:
            for part in parts:
                decoder.receive_part(part.strip().lower())
        except Exception as exc:
            raise URDecodeError(f"Invalid UR part: {exc}", option="--in") from exc

        if not decoder.is_complete():
            raise URDecodeError(
                "Incomplete UR: more parts are required.",
                option="--in",
                hint=f"Received {len(parts)} part(s); pass every part as an argument.",
            )
        if not decoder.is_success():
            raise URDecodeError(f"Invalid UR: {decoder.result}", option="--in")

        ur = decoder.result
        return URObject(type=str(ur.type), payload=bytes(ur.cbor))

    def encode(self, payload: bytes, ur_type: str, max_part_length: int) -> list[str]:
        """Split *payload* into as many parts as the fountain encoder needs."""
        UR, _, UREncoder = _import_ur()

        encoder = UREncoder(UR(ur_type, payload), max_part_length)
        parts: list[str] = []
        while not encoder.is_complete():
            parts.append(encoder.next_part())
        return parts
