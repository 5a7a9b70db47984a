"""
Hold/select logic for the dice between rolls.
"""

import logging
from typing import List

from .dice_set import DiceSet

logger = logging.getLogger(__name__)


class SelectionEngine:
    """
    Toggles the held flag of dice in a DiceSet.

    Held dice are kept out of the next roll. Selecting "all dice of this
    value" is a bulk overwrite so every same-valued die ends up in the same
    state after a single gesture.
    """

    def __init__(self, dice: DiceSet):
        self.dice = dice

    def toggle_held(self, index: int) -> bool:
        """
        Flip the held flag of exactly one die.

        Returns:
            The die's new held state
        """
        held = not self.dice.is_held(index)
        self.dice.set_held(index, held)
        logger.debug(f"Die {index} {'held' if held else 'released'}")
        return held

    def toggle_held_by_value(self, face_value: int, new_held: bool) -> List[int]:
        """
        Set held = new_held on every die showing face_value.

        Dice are overwritten whatever their current held state. A face value
        shown by no die is a no-op.

        Returns:
            Indices of the dice that matched, in index order
        """
        matched = [die.index for die in self.dice if die.value == face_value]
        for index in matched:
            self.dice.set_held(index, new_held)
        if matched:
            logger.debug(f"Dice {matched} showing {face_value} {'held' if new_held else 'released'}")
        return matched

    def filter_by_held(self, held: bool) -> List[int]:
        """Indices whose held flag equals `held`, in index order."""
        return [die.index for die in self.dice if die.held == held]

    def held_indices(self) -> List[int]:
        return self.filter_by_held(True)

    def unheld_indices(self) -> List[int]:
        return self.filter_by_held(False)

    def release_all(self) -> None:
        for die in self.dice:
            self.dice.set_held(die.index, False)
