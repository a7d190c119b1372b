"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Parameters validated and the configuration was reported."""

GENERAL_ERROR: int = 1
"""A known SeedconvError outside validation was caught (e.g. missing library)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

VALIDATION_ERROR: int = 64
"""A parameter failed validation.  Matches ``EX_USAGE`` from sysexits.h."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
