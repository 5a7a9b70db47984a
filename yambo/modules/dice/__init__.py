"""
Dice Module - the five dice of a Yam game.

Provides:
- Dice state (face values, held flags)
- Holding single dice or every die of one value
- Rolling the unheld dice through a pluggable die roller
- Combination detection (three/four of a kind, full house, street, Yam)
- Optional event publication for score sheets, logs and sound players

Usage:
    panel = DicePanel(InstantDieRoller(seed=42), event_bus=bus)

    def on_rolled(event):
        print(event.data['values'], event.data['combinations'])

    bus.subscribe('dice.rolled', on_rolled)

    panel.roll()
    panel.toggle_held(0)
    panel.roll(RollRequest(juggle_timeout=0.8), on_done=lambda: print(panel.get_dice_total()))
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from yambo.core.config import Config
from yambo.core.event_bus import EventBus
from yambo.core.models import Event

from .combinations import Combination, CombinationEvaluator
from .dice_set import DiceSet, Die, DICE_COUNT, coerce_face
from .events import dice_event_types
from .roll_adapters import DieRoller, InstantDieRoller, JugglingDieRoller
from .roller import CompletionLatch, RollCoordinator, RollRequest
from .selection import SelectionEngine

logger = logging.getLogger(__name__)


class DicePanel:
    """
    Facade over one DiceSet and the components that act on it.

    The panel never decides whether an action is allowed; callers consult
    their turn gate first. It holds a reference to its DiceSet, which the
    session may pass in and keep owning.

    Attributes:
        dice: The DiceSet being played
        selection: Hold/select engine
        die_roller: Per-die roll primitive shared with the coordinator
        coordinator: Roll dispatcher/joiner
        evaluator: Combination reader
        event_bus: Optional bus dice events are published on
        default_style: Dice look used when a RollRequest leaves style unset
    """

    def __init__(self, die_roller: DieRoller, event_bus: Optional[EventBus] = None,
                 dice: Optional[DiceSet] = None, actor_id: Optional[str] = None,
                 default_style: Optional[str] = None):
        """
        Args:
            die_roller: Per-die roll primitive (renderer or headless roller)
            event_bus: Bus to publish dice events on; event types are registered if missing
            dice: Existing DiceSet to play on (a fresh unrolled set otherwise)
            actor_id: Recorded as the actor of published events
            default_style: Style filled into requests that carry none
        """
        self.dice = dice if dice is not None else DiceSet()
        self.selection = SelectionEngine(self.dice)
        self.die_roller = die_roller
        self.coordinator = RollCoordinator(self.dice, self.selection, die_roller)
        self.evaluator = CombinationEvaluator(self.dice)
        self.event_bus = event_bus
        self.actor_id = actor_id
        self.default_style = default_style

        if event_bus is not None:
            for definition in dice_event_types():
                if not event_bus.is_registered(definition.type):
                    event_bus.register_event_type(definition)

    @classmethod
    def from_config(cls, config: Config, die_roller: Optional[DieRoller] = None,
                    event_bus: Optional[EventBus] = None, **kwargs) -> 'DicePanel':
        """
        Build a panel from configuration.

        Without an explicit die_roller a JugglingDieRoller is created from the
        seed and juggle timings; YAMBO_DICE_STYLE becomes the default style.
        """
        if die_roller is None:
            die_roller = JugglingDieRoller.from_config(config)
        return cls(die_roller, event_bus=event_bus, default_style=config.dice_style, **kwargs)

    def _publish(self, event_type: str, data: dict) -> None:
        if self.event_bus is None:
            return
        result = self.event_bus.publish(Event.create(event_type, data, actor_id=self.actor_id))
        if not result:
            logger.error(f"Could not publish {event_type}: {result.error}")

    # =========================================================================
    # Rolling
    # =========================================================================

    def roll(self, request: Optional[RollRequest] = None,
             on_done: Optional[Callable[[], None]] = None) -> CompletionLatch:
        """
        Roll every die that is not held.

        Publishes dice.roll_started now and dice.rolled once all rolled dice
        have settled, before on_done runs. With every die held, both happen
        immediately.
        """
        request = request or RollRequest()
        if request.style is None and self.default_style is not None:
            request = replace(request, style=self.default_style)
        indices = self.selection.filter_by_held(False)

        def finished() -> None:
            self._publish('dice.rolled', {
                'indices': indices,
                'values': self.get_dice_values(),
                'total': self.get_dice_total(),
                'combinations': [c.value for c in self.combinations()],
            })
            if on_done is not None:
                on_done()

        self._publish('dice.roll_started', {
            'indices': indices,
            'keep_juggling': request.keep_juggling,
        })
        return self.coordinator.roll_unheld(request, finished)

    def stop_rolling(self) -> None:
        """Settle dice left juggling (the roll button was let go)."""
        self.coordinator.stop()

    def cancel_rolling(self) -> None:
        """
        Drop dice left juggling without new faces (the roll was refused).

        The dice keep the values they had before the juggling roll and no
        dice.rolled event is published for it.
        """
        self.die_roller.cancel()

    def reset(self, clear_values: bool = False) -> None:
        self.dice.reset(clear_values=clear_values)
        self._publish('dice.reset', {
            'values': self.get_dice_values(),
            'cleared': clear_values,
        })

    # =========================================================================
    # Holding
    # =========================================================================

    def is_held(self, index: int) -> bool:
        return self.dice.is_held(index)

    def toggle_held(self, index: int) -> bool:
        held = self.selection.toggle_held(index)
        self._publish('dice.hold_changed', {'indices': [index], 'held': held, 'by_value': None})
        return held

    def select_by_value(self, face_value: int, held: bool) -> List[int]:
        """Hold (or release) every die showing face_value. Returns the affected indices."""
        indices = self.selection.toggle_held_by_value(face_value, held)
        if indices:
            self._publish('dice.hold_changed', {'indices': indices, 'held': held, 'by_value': face_value})
        return indices

    def filter_by_held(self, held: bool) -> List[int]:
        return self.selection.filter_by_held(held)

    def held_indices(self) -> List[int]:
        return self.selection.held_indices()

    # =========================================================================
    # Queries
    # =========================================================================

    def get_die_value(self, index: int) -> int:
        return self.evaluator.value_at(index)

    def get_dice_values(self) -> List[int]:
        return self.evaluator.all_values()

    def get_dice_total(self) -> int:
        return self.evaluator.total()

    def get_dice_count(self, face: int) -> int:
        return self.evaluator.count_of(face)

    def get_dice_counts(self) -> List[int]:
        return self.evaluator.counts()

    def is_three_of_a_kind(self) -> bool:
        return self.evaluator.is_three_of_a_kind()

    def is_four_of_a_kind(self) -> bool:
        return self.evaluator.is_four_of_a_kind()

    def is_full_house(self) -> bool:
        return self.evaluator.is_full_house()

    def is_street(self) -> bool:
        return self.evaluator.is_street()

    def is_yam(self) -> bool:
        return self.evaluator.is_yam()

    def combinations(self) -> List[Combination]:
        return self.evaluator.combinations()

    def __repr__(self) -> str:
        return f"DicePanel({self.dice!r})"


__all__ = [
    'DicePanel',
    'DiceSet',
    'Die',
    'DICE_COUNT',
    'coerce_face',
    'SelectionEngine',
    'RollRequest',
    'RollCoordinator',
    'CompletionLatch',
    'DieRoller',
    'InstantDieRoller',
    'JugglingDieRoller',
    'Combination',
    'CombinationEvaluator',
]
