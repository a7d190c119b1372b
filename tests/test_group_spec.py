"""Tests for the ``M-of-N`` group specifier parser (core/group_spec.py).

Coverage:
* Well-formed specifiers.
* Grammar errors name the offending text verbatim.
* Range errors and the unsupported ``1-of-N`` case stay distinct.
"""

from __future__ import annotations

import pytest

from seedconv.core.group_spec import parse_group_spec
from seedconv.core.models import GroupDescriptor
from seedconv.exceptions import (
    GroupSpecGrammarError,
    GroupSpecRangeError,
    UnsupportedGroupError,
)


class TestValidSpecs:
    @pytest.mark.parametrize(
        ("spec", "threshold", "count"),
        [
            ("2-of-3", 2, 3),
            ("1-of-1", 1, 1),
            ("16-of-16", 16, 16),
            ("2-of-16", 2, 16),
            ("02-of-03", 2, 3),
        ],
    )
    def test_parses(self, spec: str, threshold: int, count: int) -> None:
        assert parse_group_spec(spec) == GroupDescriptor(threshold=threshold, count=count)


class TestGrammar:
    @pytest.mark.parametrize(
        "spec",
        ["foo", "", "2of3", "2-of-", "-of-3", "2-OF-3", "2-of-3x", " 2-of-3", "-2-of-3", "2.0-of-3"],
    )
    def test_rejected(self, spec: str) -> None:
        with pytest.raises(GroupSpecGrammarError) as exc_info:
            parse_group_spec(spec)
        assert f'"{spec}"' in str(exc_info.value)
        assert exc_info.value.value == spec
        assert exc_info.value.option == "--group"


class TestRange:
    @pytest.mark.parametrize("spec", ["5-of-3", "0-of-0", "0-of-3", "17-of-17", "2-of-17"])
    def test_out_of_range(self, spec: str) -> None:
        with pytest.raises(GroupSpecRangeError, match="1 <= M <= N <= 16"):
            parse_group_spec(spec)

    @pytest.mark.parametrize("spec", ["1-of-2", "1-of-5", "1-of-16"])
    def test_one_of_many_unsupported(self, spec: str) -> None:
        with pytest.raises(UnsupportedGroupError, match="not supported"):
            parse_group_spec(spec)

    def test_range_checked_before_one_of_many(self) -> None:
        with pytest.raises(GroupSpecRangeError):
            parse_group_spec("1-of-17")
