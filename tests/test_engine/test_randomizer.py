"""Tests for the seeded randomizer and its math helpers."""

from __future__ import annotations

import pytest

from gummygrid.engine.errors import EmptyChoiceSet, WeightLengthMismatch
from gummygrid.engine.randomizer import Randomizer, inverse_bias, normalize_weights
from gummygrid.utils.math_helpers import (
    binary_find_index,
    decimal_places,
    format_number,
    next_power_of_ten,
    round_half_up,
    to_int32,
)
from tests.conftest import JARVIS_HASH


def _seeded(seed: str = "jarvis", salt: int = 0) -> Randomizer:
    rand = Randomizer(salt)
    rand.set_seed(seed)
    return rand


# ---------------------------------------------------------------------------
# Math helpers
# ---------------------------------------------------------------------------

class TestMathHelpers:
    def test_to_int32_wraps(self):
        assert to_int32(2**31) == -(2**31)
        assert to_int32(2**32 + 5) == 5
        assert to_int32(-1) == -1

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-2.5) == -2
        assert round_half_up(12.4999) == 12

    def test_decimal_places(self):
        assert decimal_places(3.0) == 0
        assert decimal_places(7) == 0
        assert decimal_places(0.25) == 2
        assert decimal_places(0.125) == 3
        assert decimal_places(1e-7) == 3

    def test_next_power_of_ten(self):
        assert next_power_of_ten(1) == 1
        assert next_power_of_ten(5) == 10
        assert next_power_of_ten(10) == 10
        assert next_power_of_ten(11) == 100

    def test_binary_find_index(self):
        values = [2, 4, 6]
        assert binary_find_index(values, 4) == 1
        assert binary_find_index(values, 1) == 0
        assert binary_find_index(values, 5) == 2
        assert binary_find_index(values, 7) == 3

    def test_format_number(self):
        assert format_number(10.0) == "10"
        assert format_number(3) == "3"
        assert format_number(2.5) == "2.5"
        assert format_number(-0.25) == "-0.25"


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------

class TestSeeding:
    def test_constructor_folds_salt(self):
        assert Randomizer().hash == 0
        assert Randomizer(7).hash == 7

    def test_known_hashes(self):
        assert _seeded("a").hash == 97 * 31
        assert _seeded("a", salt=5).hash == 97 * 31 + 5
        assert _seeded("jarvis").hash == JARVIS_HASH

    def test_seed_uses_utf16_code_units(self):
        # U+1F600 is the surrogate pair D83D DE00
        expected = (0xD83D * 31 + 0xDE00) * 31
        assert _seeded("\U0001F600").hash == expected

    def test_set_seed_resets_chain(self):
        rand = _seeded("jarvis")
        first = [rand.number(0, 100) for _ in range(10)]
        rand.set_seed("jarvis")
        assert [rand.number(0, 100) for _ in range(10)] == first
        assert rand.seed == "jarvis"

    def test_empty_seed(self):
        assert _seeded("").hash == 0


# ---------------------------------------------------------------------------
# Draws
# ---------------------------------------------------------------------------

class TestNumber:
    def test_known_sequence(self):
        rand = _seeded("a")
        # |3007| % 10 -> 7, then bump by 3007 % 999 + 1 -> hash 93228
        assert rand.number(0, 9) == 7
        assert rand.hash == 93228
        assert rand.number(0, 9) == 8

    def test_range_inclusive(self):
        rand = _seeded("range")
        values = {rand.number(3, 6) for _ in range(500)}
        assert values == {3, 4, 5, 6}

    def test_degenerate_range(self):
        rand = _seeded("one")
        assert all(rand.number(4, 4) == 4 for _ in range(20))

    def test_same_seed_same_sequence(self):
        a, b = _seeded("same"), _seeded("same")
        assert [a.number(0, 1000) for _ in range(50)] == [b.number(0, 1000) for _ in range(50)]

    def test_salt_changes_sequence(self):
        a, b = _seeded("same"), _seeded("same", salt=1)
        assert [a.number(0, 1000) for _ in range(20)] != [b.number(0, 1000) for _ in range(20)]


class TestBoolean:
    def test_inverse_bias(self):
        assert inverse_bias(0.3) == pytest.approx(0.7)
        assert inverse_bias(0) == 1
        assert inverse_bias(3) == 7
        assert inverse_bias(25) == 75
        assert inverse_bias(1) == 0

    def test_certain_outcomes(self):
        rand = _seeded("bias")
        assert all(rand.boolean(1) for _ in range(50))
        assert not any(rand.boolean(0) for _ in range(50))

    def test_fair_coin_yields_both(self):
        rand = _seeded("coin")
        assert {rand.boolean() for _ in range(100)} == {True, False}


class TestChoice:
    def test_normalize_weights(self):
        assert normalize_weights([0.5, 0.5]) == [5, 5]
        assert normalize_weights([0.25, 0.75]) == [25, 75]
        assert normalize_weights([20, 40]) == [2, 4]
        assert normalize_weights([100, 0]) == [1, 0]
        assert normalize_weights([0.125, 1]) == [13, 100]
        assert normalize_weights([0, 0]) == [0, 0]

    def test_zero_weight_never_chosen(self):
        rand = _seeded("zero")
        picks = {rand.choice(["a", "b", "c"], [1, 0, 1]) for _ in range(300)}
        assert picks == {"a", "c"}

    def test_index_refers_to_caller_sequence(self):
        rand = _seeded("index")
        indices = {rand.get_choice_index(["a", "b", "c"], [0, 0, 3]) for _ in range(20)}
        assert indices == {2}

    def test_weighted_frequencies(self):
        counts = [0, 0, 0]
        rand = Randomizer()
        for i in range(2000):
            rand.set_seed(f"user-{i}")
            counts[rand.get_choice_index(["a", "b", "c"], [1, 1, 2])] += 1
        assert 0.35 < counts[2] / 2000 < 0.65
        assert counts[0] > 200
        assert counts[1] > 200

    def test_unweighted_choice_covers_items(self):
        rand = _seeded("items")
        assert {rand.choice("xyz") for _ in range(200)} == {"x", "y", "z"}

    def test_single_item_consumes_no_draw(self):
        rand = _seeded("single")
        before = rand.hash
        assert rand.choice(["only"]) == "only"
        assert rand.choice(["only"], [5]) == "only"
        assert rand.hash == before

    def test_empty_sequence(self):
        with pytest.raises(EmptyChoiceSet):
            _seeded().choice([])

    def test_all_zero_weights(self):
        with pytest.raises(EmptyChoiceSet):
            _seeded().choice(["a", "b"], [0, 0])

    def test_weight_length_mismatch(self):
        with pytest.raises(WeightLengthMismatch):
            _seeded().choice(["a", "b"], [1])

    def test_weight_length_checked_before_single_item_shortcut(self):
        with pytest.raises(WeightLengthMismatch):
            _seeded().choice(["a"], [1, 2])

    def test_capability_aliases(self):
        a, b = _seeded("alias"), _seeded("alias")
        assert a.next_int(0, 50) == b.number(0, 50)
        assert a.next_bool(0.5) == b.boolean(0.5)
        assert a.choose_index([1, 2, 3]) == b.get_choice_index([1, 2, 3])
