"""Custom exception hierarchy for seedconv.

Every validation failure maps to exactly one subclass of
:class:`SeedconvError`.  The core layer raises these and never exits the
process; the CLI error boundary renders the message (plus an optional
hint) and chooses the exit code.

Raw third-party exceptions (e.g. from the UR library) must NEVER
propagate beyond the infrastructure layer — they are caught there and
re-raised as a typed subclass defined here.

Hierarchy
---------
SeedconvError
├── GrammarError
│   └── GroupSpecGrammarError
├── RangeError
│   ├── GroupSpecRangeError
│   └── UnsupportedGroupError
├── CombinationError
├── CompatibilityError
├── UnknownNameError
├── InputAbsentError
├── URDecodeError
└── EnvironmentError
"""

from __future__ import annotations


class SeedconvError(Exception):
    """Base exception for all seedconv errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class ValidationError(SeedconvError):
    """Common parent of the errors raised while validating parameters.

    Carries the offending option name and raw value when they are known,
    so callers can inspect the failure without parsing the message.
    """

    def __init__(
        self,
        message: str,
        *,
        option: str | None = None,
        value: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.option: str | None = option
        self.value: str | None = value


# --- Malformed text --------------------------------------------------------

class GrammarError(ValidationError):
    """Raised when numeric or structured option text cannot be parsed."""


class GroupSpecGrammarError(GrammarError):
    """Raised when a ``--group`` value is not of the form ``M-of-N``."""


# --- Numeric bounds --------------------------------------------------------

class RangeError(ValidationError):
    """Raised when a parsed value lies outside its required bounds."""


class GroupSpecRangeError(RangeError):
    """Raised when a group specifier violates ``1 <= M <= N <= 16``."""


class UnsupportedGroupError(RangeError):
    """Raised for ``1-of-N`` group specifiers with ``N > 1``."""


# --- Option combinations ---------------------------------------------------

class CombinationError(ValidationError):
    """Raised when options are mutually exclusive or applied to the wrong format."""


class CompatibilityError(ValidationError):
    """Raised when the input format cannot be converted to the output format."""

    def __init__(
        self,
        message: str,
        *,
        input_name: str,
        output_name: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.input_name: str = input_name
        self.output_name: str = output_name


# --- Names and input -------------------------------------------------------

class UnknownNameError(ValidationError):
    """Raised for an unrecognised format name or UR type."""


class InputAbsentError(ValidationError):
    """Raised when a non-random input format receives no input at all."""


class URDecodeError(ValidationError):
    """Raised when the input cannot be decoded as a Uniform Resource."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SeedconvError):
    """Raised when a required optional library is not available."""
