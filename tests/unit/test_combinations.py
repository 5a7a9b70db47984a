"""
Unit tests for CombinationEvaluator.
"""

import itertools
import random

import pytest
from yambo.modules.dice.dice_set import DiceSet
from yambo.modules.dice.combinations import Combination, CombinationEvaluator


def evaluate(values):
    return CombinationEvaluator(DiceSet(values))


# Every sorted hand of five six-sided dice (252 hands)
ALL_HANDS = list(itertools.combinations_with_replacement(range(1, 7), 5))


class TestCounting:
    """Test totals and counts."""

    def test_total(self):
        """Test the sum of all dice."""
        assert evaluate([1, 1, 2, 2, 6]).total() == 12
        assert evaluate([6, 6, 6, 6, 6]).total() == 30

    def test_unrolled_dice_count_as_zero(self):
        """Test totals before the first roll."""
        evaluator = evaluate([0, 0, 0, 0, 0])
        assert evaluator.total() == 0
        assert evaluator.counts() == [0, 0, 0, 0, 0, 0]
        assert evaluator.combinations() == []

    def test_count_of(self):
        """Test counting one face."""
        evaluator = evaluate([4, 1, 4, 1, 4])
        assert evaluator.count_of(4) == 3
        assert evaluator.count_of(1) == 2
        assert evaluator.count_of(6) == 0

    def test_counts(self):
        """Test counts for faces 1..6."""
        assert evaluate([2, 2, 2, 5, 5]).counts() == [0, 3, 0, 0, 2, 0]

    @pytest.mark.parametrize('hand', ALL_HANDS)
    def test_counts_sum_to_five(self, hand):
        """Test that counts always add up to the number of dice."""
        assert sum(evaluate(list(hand)).counts()) == 5

    def test_values_passthrough(self):
        """Test value getters."""
        evaluator = evaluate([3, 1, 4, 1, 5])
        assert evaluator.all_values() == [3, 1, 4, 1, 5]
        assert evaluator.value_at(2) == 4

    def test_evaluator_does_not_mutate(self):
        """Test that evaluation leaves the dice untouched."""
        dice = DiceSet([2, 2, 2, 5, 5])
        dice.set_held(1, True)
        evaluator = CombinationEvaluator(dice)
        evaluator.combinations()
        evaluator.total()
        assert dice.values() == [2, 2, 2, 5, 5]
        assert [d.held for d in dice] == [False, True, False, False, False]


class TestScenarios:
    """Test the reference hands."""

    def test_street_low(self):
        """Test [1,2,3,4,5]."""
        evaluator = evaluate([1, 2, 3, 4, 5])
        assert evaluator.is_street()
        assert not evaluator.is_full_house()
        assert not evaluator.is_yam()

    def test_yam(self):
        """Test [6,6,6,6,6]."""
        evaluator = evaluate([6, 6, 6, 6, 6])
        assert evaluator.is_yam()
        assert evaluator.is_four_of_a_kind()
        assert evaluator.is_full_house()

    def test_full_house(self):
        """Test [2,2,2,5,5]."""
        evaluator = evaluate([2, 2, 2, 5, 5])
        assert evaluator.is_three_of_a_kind()
        assert evaluator.is_full_house()
        assert not evaluator.is_four_of_a_kind()

    def test_nothing(self):
        """Test [1,1,2,2,6]."""
        evaluator = evaluate([1, 1, 2, 2, 6])
        assert not evaluator.is_three_of_a_kind()
        assert not evaluator.is_four_of_a_kind()
        assert not evaluator.is_full_house()
        assert not evaluator.is_street()
        assert not evaluator.is_yam()
        assert evaluator.total() == 12


class TestStreet:
    """Test street detection."""

    @pytest.mark.parametrize('values', [
        [1, 2, 3, 4, 5],
        [2, 3, 4, 5, 6],
        [5, 3, 6, 2, 4],
        [4, 1, 5, 3, 2],
    ])
    def test_streets(self, values):
        """Test that both runs are streets in any order."""
        assert evaluate(values).is_street()

    @pytest.mark.parametrize('values', [
        [1, 2, 3, 4, 6],
        [1, 3, 4, 5, 6],
        [2, 3, 4, 5, 5],
        [0, 2, 3, 4, 5],
    ])
    def test_not_streets(self, values):
        """Test near misses."""
        assert not evaluate(values).is_street()

    def test_exactly_two_streets_exist(self):
        """Test that only the two distinct runs qualify among all hands."""
        streets = [hand for hand in ALL_HANDS if evaluate(list(hand)).is_street()]
        assert streets == [(1, 2, 3, 4, 5), (2, 3, 4, 5, 6)]


class TestKinds:
    """Test n-of-a-kind and full house rules."""

    def test_four_of_a_kind_is_three_of_a_kind(self):
        """Test that four of a kind also counts as three of a kind."""
        evaluator = evaluate([3, 3, 3, 3, 1])
        assert evaluator.is_four_of_a_kind()
        assert evaluator.is_three_of_a_kind()
        assert not evaluator.is_full_house()
        assert not evaluator.is_yam()

    def test_two_pairs_is_not_full_house(self):
        """Test two pairs."""
        assert not evaluate([4, 4, 2, 2, 6]).is_full_house()

    @pytest.mark.parametrize('hand', ALL_HANDS)
    def test_thresholds_are_monotonic(self, hand):
        """Test yam => four => three, and yam => full house."""
        evaluator = evaluate(list(hand))
        if evaluator.is_yam():
            assert evaluator.is_four_of_a_kind()
            assert evaluator.is_full_house()
        if evaluator.is_four_of_a_kind():
            assert evaluator.is_three_of_a_kind()

    def test_random_hands_in_any_order(self):
        """Test that combinations don't depend on die order."""
        rng = random.Random(7)
        for _ in range(200):
            values = [rng.randint(1, 6) for _ in range(5)]
            shuffled = values[:]
            rng.shuffle(shuffled)
            assert evaluate(values).combinations() == evaluate(shuffled).combinations()


class TestCombinationList:
    """Test combinations() reporting."""

    def test_order_and_content(self):
        """Test that the list follows Combination order."""
        assert evaluate([6, 6, 6, 6, 6]).combinations() == [
            Combination.THREE_OF_A_KIND,
            Combination.FOUR_OF_A_KIND,
            Combination.FULL_HOUSE,
            Combination.YAM,
        ]
        assert evaluate([2, 3, 4, 5, 6]).combinations() == [Combination.STREET]

    def test_str(self):
        """Test string form used in event payloads."""
        assert str(Combination.FULL_HOUSE) == 'full_house'
