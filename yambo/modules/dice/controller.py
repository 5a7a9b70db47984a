"""
Dice controller.

Drives a DicePanel from roll-button and die-click gestures and tells the
surrounding game about the outcome. Every collaborator (turn gate, sound,
score sheet, message log, player options) is passed in at construction;
the panel itself knows none of them.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List

from . import DicePanel
from .combinations import Combination
from .roller import RollRequest

logger = logging.getLogger(__name__)


class SoundEffect(str, Enum):
    """Effects the controller asks the audio player for."""

    JUGGLE_DICE = "juggledice"
    ROLL_DICE = "rolldice"
    SELECT_DIE = "selectdice"
    DESELECT_DIE = "deselectdice"


class TurnGate(ABC):
    """Decides whether a roll gesture is a legal turn action right now."""

    @abstractmethod
    def is_valid_turn(self) -> bool:
        """May the player start rolling (button pressed)?"""

    @abstractmethod
    def handle_turn(self) -> bool:
        """Consume a roll for the current turn (button released). False refuses it."""


class AudioPlayer(ABC):

    @abstractmethod
    def play(self, effect: SoundEffect, loop: bool = False) -> None:
        pass

    @abstractmethod
    def stop(self) -> None:
        pass

    @abstractmethod
    def play_combinations(self, combinations: List[Combination]) -> None:
        """Announce the combinations showing after a roll."""


class ScoreSheet(ABC):

    @abstractmethod
    def add_scores(self, final: bool) -> None:
        """Refresh the candidate scores from the current dice."""


class MessageLog(ABC):

    @abstractmethod
    def add_message(self, message: str, is_timed: bool = False,
                    is_error: bool = False, is_newline: bool = False) -> None:
        pass


class RollOptions(ABC):
    """Player preferences used when rolling."""

    @property
    @abstractmethod
    def selected_style(self) -> Any:
        """Dice look chosen by the player (opaque)."""

    @abstractmethod
    def juggle_time(self) -> float:
        """Seconds the dice rattle after the roll button is released."""


def format_dice_values(values: List[int]) -> str:
    """
    Log line appended after a roll.

    >>> format_dice_values([1, 2, 3, 4, 5])
    ' (1 : 2 : 3 : 4 : 5)'
    """
    return ' (' + ' : '.join(str(v) for v in values) + ')'


class DiceController:
    """
    Roll button and die click handling for one player's dice panel.

    Pressing the roll button sets the unheld dice juggling; releasing it (or
    leaving the button while pressed) rolls them for real, after which the
    score sheet, message log and audio are updated.

    Attributes:
        button_active: The roll button is pressed (dice juggling)
        button_disabled: A released roll is still settling
    """

    def __init__(self, panel: DicePanel, turn_gate: TurnGate, audio: AudioPlayer,
                 score_sheet: ScoreSheet, message_log: MessageLog, options: RollOptions):
        self.panel = panel
        self.turn_gate = turn_gate
        self.audio = audio
        self.score_sheet = score_sheet
        self.message_log = message_log
        self.options = options

        self.button_active = False
        self.button_disabled = False
        self._pressed = False

    def press_roll(self) -> bool:
        """
        Roll button pressed: start juggling the unheld dice.

        Returns:
            Whether the turn gate allowed it
        """
        if self.button_disabled or not self.turn_gate.is_valid_turn():
            return False

        self._pressed = True
        self.button_active = True
        self.panel.roll(RollRequest(style=self.options.selected_style, keep_juggling=True))
        self.audio.play(SoundEffect.JUGGLE_DICE, loop=True)
        return True

    def release_roll(self) -> bool:
        """
        Roll button released: roll the unheld dice and report once they settle.

        Returns:
            Whether the turn gate accepted the roll
        """
        self._pressed = False

        if not self.turn_gate.handle_turn():
            logger.info("Roll refused by turn gate")
            if self.button_active:
                # Juggling dice fall back to their previous faces
                self.panel.cancel_rolling()
                self.audio.stop()
                self.button_active = False
            return False

        self.button_disabled = True
        self.audio.stop()
        self.panel.roll(
            RollRequest(style=self.options.selected_style, juggle_timeout=self.options.juggle_time()),
            on_done=self._roll_finished
        )
        return True

    def leave_roll(self) -> bool:
        """Pointer left the roll button: counts as a release only while pressed."""
        if not self._pressed:
            return False
        return self.release_roll()

    def _roll_finished(self) -> None:
        values = self.panel.get_dice_values()
        logger.info(f"Rolled {values}")

        self.score_sheet.add_scores(False)
        self.message_log.add_message(format_dice_values(values), is_timed=False,
                                     is_error=False, is_newline=True)
        self.button_disabled = False
        self.button_active = False
        self.audio.play_combinations(self.panel.combinations())
        self.audio.play(SoundEffect.ROLL_DICE)

    def click_die(self, index: int, multi_select: bool = False) -> List[int]:
        """
        Hold or release a die.

        With the multi-select modifier (ctrl/cmd), every die showing the
        clicked die's value takes the clicked die's new state.

        Returns:
            Indices whose held state was set
        """
        will_hold = not self.panel.is_held(index)

        if multi_select:
            # The clicked die always matches its own value
            changed = self.panel.select_by_value(self.panel.get_die_value(index), will_hold)
        else:
            self.panel.toggle_held(index)
            changed = [index]

        self.audio.play(SoundEffect.SELECT_DIE if will_hold else SoundEffect.DESELECT_DIE)
        return changed
