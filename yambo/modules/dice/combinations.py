"""
Scoring combination detection over the five current face values.

Every check is a pure function of DiceSet.values(); nothing here mutates
the dice.
"""

from enum import Enum
from typing import List

from .dice_set import DiceSet, DICE_COUNT, FACES


class Combination(Enum):
    """Named patterns over the five dice, in the order they are reported."""

    THREE_OF_A_KIND = "three_of_a_kind"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    STREET = "street"
    YAM = "yam"

    def __str__(self) -> str:
        return self.value


class CombinationEvaluator:
    """
    Reads combinations from a DiceSet.

    N-of-a-kind checks are "at least N": a Yam is also a four and a three of
    a kind. A full house is a three plus a pair, or a Yam.

    Example:
        >>> evaluator = CombinationEvaluator(DiceSet([2, 2, 2, 5, 5]))
        >>> evaluator.counts()
        [0, 3, 0, 0, 2, 0]
        >>> [str(c) for c in evaluator.combinations()]
        ['three_of_a_kind', 'full_house']
    """

    def __init__(self, dice: DiceSet):
        self.dice = dice

    def value_at(self, index: int) -> int:
        return self.dice.value_at(index)

    def all_values(self) -> List[int]:
        return self.dice.values()

    def total(self) -> int:
        """Sum of all five face values (unrolled dice count as 0)."""
        return sum(self.dice.values())

    def count_of(self, face: int) -> int:
        """Number of dice currently showing `face`."""
        return self.dice.values().count(face)

    def counts(self) -> List[int]:
        """How many dice show each face, for faces 1..6."""
        values = self.dice.values()
        return [values.count(face) for face in FACES]

    def _has_n_of_a_kind(self, n: int) -> bool:
        return max(self.counts()) >= n

    def is_three_of_a_kind(self) -> bool:
        return self._has_n_of_a_kind(3)

    def is_four_of_a_kind(self) -> bool:
        return self._has_n_of_a_kind(4)

    def is_full_house(self) -> bool:
        """
        Three of one face and two of another, or all five the same.

        Five of a kind is deliberately accepted as a full house.
        """
        counts = self.counts()
        return (3 in counts and 2 in counts) or DICE_COUNT in counts

    def is_street(self) -> bool:
        """
        Five dice in sequence: 1-2-3-4-5 or 2-3-4-5-6.

        With exactly five dice, needing 2, 3, 4 and 5 plus either 1 or 6
        leaves no room for a duplicate, so no distinctness check is needed.
        """
        count_of = self.count_of
        return (
            count_of(2) > 0 and count_of(3) > 0 and count_of(4) > 0 and count_of(5) > 0
            and (count_of(1) > 0 or count_of(6) > 0)
        )

    def is_yam(self) -> bool:
        """All five dice show the same face."""
        return self._has_n_of_a_kind(DICE_COUNT)

    def combinations(self) -> List[Combination]:
        """Every combination the current dice satisfy, in Combination order."""
        checks = {
            Combination.THREE_OF_A_KIND: self.is_three_of_a_kind,
            Combination.FOUR_OF_A_KIND: self.is_four_of_a_kind,
            Combination.FULL_HOUSE: self.is_full_house,
            Combination.STREET: self.is_street,
            Combination.YAM: self.is_yam,
        }
        return [combination for combination, check in checks.items() if check()]
