"""Tests for the format compatibility matrix (core/compatibility.py)."""

from __future__ import annotations

import pytest

from seedconv.core.compatibility import (
    check_compatibility,
    is_compatible,
    matching_rule,
)
from seedconv.core.formats import make_format
from seedconv.core.models import FormatIdentity, FormatKey
from seedconv.exceptions import CompatibilityError

ALL_KEYS = list(FormatKey)
OUTPUT_KEYS = [key for key in FormatKey if key is not FormatKey.RANDOM]


def _fmt(key: FormatKey) -> FormatIdentity:
    return make_format(key)


class TestUniversalRules:
    @pytest.mark.parametrize("key", ALL_KEYS)
    def test_any_input_to_hex(self, key: FormatKey) -> None:
        assert is_compatible(_fmt(key), _fmt(FormatKey.HEX))

    @pytest.mark.parametrize("key", ALL_KEYS)
    def test_any_input_to_bc32(self, key: FormatKey) -> None:
        assert is_compatible(_fmt(key), _fmt(FormatKey.BC32))

    @pytest.mark.parametrize("key", OUTPUT_KEYS)
    def test_random_to_any(self, key: FormatKey) -> None:
        assert is_compatible(_fmt(FormatKey.RANDOM), _fmt(key))

    @pytest.mark.parametrize("key", OUTPUT_KEYS)
    def test_hex_to_any(self, key: FormatKey) -> None:
        assert is_compatible(_fmt(FormatKey.HEX), _fmt(key))

    @pytest.mark.parametrize("key", OUTPUT_KEYS)
    def test_bc32_to_any(self, key: FormatKey) -> None:
        assert is_compatible(_fmt(FormatKey.BC32), _fmt(key))


class TestURRules:
    def test_ur_bip39_to_bip39(self) -> None:
        bip39 = _fmt(FormatKey.BIP39)
        assert is_compatible(bip39, bip39, is_ur_input=True)

    def test_ur_slip39_to_slip39(self) -> None:
        slip39 = _fmt(FormatKey.SLIP39)
        assert is_compatible(slip39, slip39, is_ur_input=True)

    def test_ur_bip39_to_slip39_rejected(self) -> None:
        assert not is_compatible(
            _fmt(FormatKey.BIP39), _fmt(FormatKey.SLIP39), is_ur_input=True
        )

    def test_ur_bip39_to_cards_rejected(self) -> None:
        assert not is_compatible(
            _fmt(FormatKey.BIP39), _fmt(FormatKey.CARDS), is_ur_input=True
        )

    def test_non_ur_bip39_to_bip39_rejected(self) -> None:
        bip39 = _fmt(FormatKey.BIP39)
        assert not is_compatible(bip39, bip39, is_ur_input=False)


class TestPrecedence:
    def test_first_matching_rule_wins(self) -> None:
        rule = matching_rule(_fmt(FormatKey.RANDOM), _fmt(FormatKey.HEX))
        assert rule == "any input to hex output"

    def test_random_rule_for_non_universal_output(self) -> None:
        rule = matching_rule(_fmt(FormatKey.RANDOM), _fmt(FormatKey.DICE))
        assert rule == "random input to any output"

    def test_no_rule(self) -> None:
        assert matching_rule(_fmt(FormatKey.CARDS), _fmt(FormatKey.DICE)) is None


class TestCheckCompatibility:
    def test_ok_returns_none(self) -> None:
        assert check_compatibility(_fmt(FormatKey.HEX), _fmt(FormatKey.BIP39)) is None

    def test_cards_to_dice_names_both(self) -> None:
        with pytest.raises(CompatibilityError) as exc_info:
            check_compatibility(_fmt(FormatKey.CARDS), _fmt(FormatKey.DICE))
        message = str(exc_info.value)
        assert "cards" in message
        assert "dice" in message
        assert exc_info.value.input_name == "cards"
        assert exc_info.value.output_name == "dice"

    @pytest.mark.parametrize(
        ("src", "dst"),
        [
            (FormatKey.BITS, FormatKey.INTS),
            (FormatKey.DICE, FormatKey.BIP39),
            (FormatKey.BIP39, FormatKey.SLIP39),
            (FormatKey.SLIP39, FormatKey.BASE6),
            (FormatKey.INTS, FormatKey.BASE10),
        ],
    )
    def test_incompatible_pairs(self, src: FormatKey, dst: FormatKey) -> None:
        with pytest.raises(CompatibilityError):
            check_compatibility(_fmt(src), _fmt(dst))
