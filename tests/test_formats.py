"""Tests for the format catalog (core/formats.py)."""

from __future__ import annotations

import pytest

from seedconv.core import formats
from seedconv.core.models import FormatKey, GroupDescriptor, IntsRange


class TestLookup:
    @pytest.mark.parametrize(
        "name",
        ["random", "hex", "bits", "cards", "dice", "base6", "base10", "ints", "bip39", "slip39", "bc32"],
    )
    def test_every_name_resolves(self, name: str) -> None:
        fmt = formats.lookup(name)
        assert fmt is not None
        assert fmt.name == name

    @pytest.mark.parametrize("name", ["HEX", "Hex", "ur", "base16", "", " hex"])
    def test_unknown_or_wrong_case_is_none(self, name: str) -> None:
        assert formats.lookup(name) is None

    def test_ints_default_range(self) -> None:
        fmt = formats.lookup("ints")
        assert fmt is not None
        assert fmt.ints == IntsRange(low=1, high=9)

    def test_slip39_default_groups(self) -> None:
        fmt = formats.lookup("slip39")
        assert fmt is not None
        assert fmt.slip39 is not None
        assert fmt.slip39.groups_threshold == 1
        assert fmt.slip39.groups == (GroupDescriptor(threshold=1, count=1),)

    def test_lookups_are_independent(self) -> None:
        a = formats.lookup("slip39")
        b = formats.lookup("slip39")
        assert a == b
        assert a is not b


class TestLookupOutput:
    def test_random_is_input_only(self) -> None:
        assert formats.lookup_output("random") is None
        assert "random" not in formats.OUTPUT_FORMAT_NAMES
        assert "random" in formats.INPUT_FORMAT_NAMES

    def test_hex_is_output(self) -> None:
        fmt = formats.lookup_output("hex")
        assert fmt is not None
        assert fmt.key is FormatKey.HEX


class TestCategories:
    def test_category_tests(self) -> None:
        assert formats.is_random(formats.make_format(FormatKey.RANDOM))
        assert formats.is_hex(formats.make_format(FormatKey.HEX))
        assert formats.is_bc32(formats.make_format(FormatKey.BC32))
        assert formats.is_bip39(formats.make_format(FormatKey.BIP39))
        assert formats.is_slip39(formats.make_format(FormatKey.SLIP39))
        assert formats.is_ints(formats.make_format(FormatKey.INTS))

    def test_categories_are_exclusive(self) -> None:
        cards = formats.make_format(FormatKey.CARDS)
        assert not any(
            check(cards)
            for check in (
                formats.is_random,
                formats.is_hex,
                formats.is_bc32,
                formats.is_bip39,
                formats.is_slip39,
                formats.is_ints,
            )
        )
