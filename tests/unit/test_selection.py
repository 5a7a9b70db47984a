"""
Unit tests for SelectionEngine.
"""

import pytest
from yambo.modules.dice.dice_set import DiceSet
from yambo.modules.dice.selection import SelectionEngine


@pytest.fixture
def dice():
    return DiceSet([3, 5, 3, 1, 3])


@pytest.fixture
def selection(dice):
    return SelectionEngine(dice)


class TestToggleHeld:
    """Test single die toggling."""

    def test_toggle_flips_one_die(self, selection, dice):
        """Test that toggling holds exactly that die."""
        assert selection.toggle_held(1) is True
        assert [d.held for d in dice] == [False, True, False, False, False]

    def test_toggle_twice_releases(self, selection, dice):
        """Test that a second toggle releases the die."""
        selection.toggle_held(1)
        assert selection.toggle_held(1) is False
        assert not dice.is_held(1)


class TestToggleHeldByValue:
    """Test select-all-of-value gestures."""

    def test_holds_every_matching_die(self, selection, dice):
        """Test that all dice showing the value get held."""
        matched = selection.toggle_held_by_value(3, True)
        assert matched == [0, 2, 4]
        assert selection.filter_by_held(True) == [0, 2, 4]

    def test_overwrites_instead_of_toggling(self, selection, dice):
        """Test that already held dice stay held (no per-die toggle)."""
        dice.set_held(2, True)
        selection.toggle_held_by_value(3, True)
        assert dice.is_held(0) and dice.is_held(2) and dice.is_held(4)

    def test_release_by_value(self, selection, dice):
        """Test that the bulk gesture can release every matching die."""
        dice.set_held(0, True)
        dice.set_held(3, True)
        selection.toggle_held_by_value(3, False)
        assert selection.filter_by_held(True) == [3]

    def test_no_match_is_noop(self, selection, dice):
        """Test that a value shown by no die changes nothing."""
        dice.set_held(1, True)
        assert selection.toggle_held_by_value(6, True) == []
        assert selection.filter_by_held(True) == [1]

    @pytest.mark.parametrize('values', [
        [1, 2, 3, 4, 5],
        [6, 6, 6, 6, 6],
        [2, 2, 2, 5, 5],
        [1, 1, 2, 2, 6],
        [4, 1, 4, 1, 4],
    ])
    def test_selection_matches_value_indices(self, values):
        """Test that hold-by-value then filter returns exactly the value's indices."""
        for face in range(1, 7):
            selection = SelectionEngine(DiceSet(values))
            selection.toggle_held_by_value(face, True)
            expected = [i for i, v in enumerate(values) if v == face]
            assert selection.filter_by_held(True) == expected


class TestFilterByHeld:
    """Test filtering dice by held state."""

    def test_preserves_index_order(self, selection, dice):
        """Test that indices come back in order."""
        dice.set_held(4, True)
        dice.set_held(0, True)
        assert selection.filter_by_held(True) == [0, 4]
        assert selection.filter_by_held(False) == [1, 2, 3]

    def test_helpers(self, selection, dice):
        """Test held/unheld shortcuts and release_all."""
        selection.toggle_held(2)
        assert selection.held_indices() == [2]
        assert selection.unheld_indices() == [0, 1, 3, 4]

        selection.release_all()
        assert selection.held_indices() == []
