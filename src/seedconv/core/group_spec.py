"""Parser for SLIP39 ``M-of-N`` group specifiers.

Three failure modes are kept apart so the user learns *what* is wrong:

1. **Grammar** — the text is not ``<threshold>-of-<count>``.
2. **Range** — the numbers violate ``1 <= M <= N <= 16``.
3. **Unsupported** — ``1-of-N`` with ``N > 1``.
"""

from __future__ import annotations

import re

from seedconv import config
from seedconv.core.models import GroupDescriptor
from seedconv.exceptions import (
    GroupSpecGrammarError,
    GroupSpecRangeError,
    UnsupportedGroupError,
)

_GROUP_SPEC_RE: re.Pattern[str] = re.compile(r"([0-9]+)-of-([0-9]+)")


def parse_group_spec(spec: str) -> GroupDescriptor:
    """Parse *spec* into a :class:`GroupDescriptor`.

    Raises
    ------
    GroupSpecGrammarError
        If *spec* does not match ``<threshold>-of-<count>``.
    GroupSpecRangeError
        If the values fall outside ``0 < threshold <= count <= 16``.
    UnsupportedGroupError
        For a threshold of 1 in a group of more than one share.
    """
    match = _GROUP_SPEC_RE.fullmatch(spec)
    if match is None:
        raise GroupSpecGrammarError(
            f'Could not parse group specifier: "{spec}"',
            option="--group",
            value=spec,
            hint="Use the form M-of-N, e.g. 2-of-3.",
        )

    threshold = int(match.group(1))
    count = int(match.group(2))

    if not (0 < threshold <= count <= config.MAX_GROUP_MEMBERS):
        raise GroupSpecRangeError(
            f'Invalid group specifier "{spec}": '
            f"1 <= M <= N <= {config.MAX_GROUP_MEMBERS}",
            option="--group",
            value=spec,
        )

    if count > 1 and threshold == 1:
        raise UnsupportedGroupError(
            f'Invalid group specifier "{spec}": '
            "1-of-N groups where N > 1 are not supported.",
            option="--group",
            value=spec,
            hint="Use 1-of-1, or a threshold of at least 2.",
        )

    return GroupDescriptor(threshold=threshold, count=count)
