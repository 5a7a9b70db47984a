"""
Rolling the dice that are not held.

The coordinator dispatches one roll per unheld die to a DieRoller and joins
the results with a CompletionLatch: the completion callback fires exactly
once, after every dispatched die has reported, in whatever order (and from
whatever thread) the results arrive.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from .dice_set import DiceSet
from .selection import SelectionEngine
from .roll_adapters import DieRoller

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RollRequest:
    """
    Options passed through to the die roller.

    Attributes:
        style: Opaque look of the dice (color/skin), only meaningful to the renderer
        keep_juggling: Keep the dice rattling until the roller is stopped
        juggle_timeout: Seconds to rattle before settling (None = roller default)
    """
    style: Any = None
    keep_juggling: bool = False
    juggle_timeout: Optional[float] = None


class CompletionLatch:
    """
    Count-down latch over a fixed set of die indices.

    Each die reports once through count_down(); the die that brings the
    count to zero fires on_done. Recording a result and checking for
    completion happen under one lock, so two results landing back-to-back
    can neither double-fire nor miss the completion. A repeated report from
    an already counted die updates its value without counting again.
    """

    def __init__(self, indices: Iterable[int], on_done: Optional[Callable[[], None]] = None):
        self.expected = tuple(indices)
        self.results: Dict[int, int] = {}
        self.arrival_order: List[int] = []
        self._on_done = on_done
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._fired = False

        if not self.expected:
            self._fire()

    @property
    def is_complete(self) -> bool:
        return self._done.is_set()

    @property
    def pending(self) -> List[int]:
        """Indices that have not reported yet, in index order."""
        with self._lock:
            return [i for i in self.expected if i not in self.results]

    def count_down(self, index: int, value: int) -> bool:
        """
        Record the settled value of one die.

        Returns:
            True if this report completed the latch
        """
        with self._lock:
            if index not in self.expected:
                logger.warning(f"Ignoring result {value} for die {index}: not part of this roll")
                return False
            if index in self.results:
                self.results[index] = value
                return False
            self.results[index] = value
            self.arrival_order.append(index)
            if self._fired or len(self.results) < len(self.expected):
                return False
            self._fired = True

        self._fire()
        return True

    def values(self) -> List[int]:
        """Collected results in arrival order."""
        with self._lock:
            return [self.results[i] for i in self.arrival_order]

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until complete (for scripts and tests). Returns completion state."""
        return self._done.wait(timeout)

    def _fire(self) -> None:
        self._fired = True
        self._done.set()
        if self._on_done is not None:
            self._on_done()


class RollCoordinator:
    """
    Rolls every die that is not held.

    The coordinator owns no timing: the DieRoller decides when each die
    settles (immediately, after a juggle timeout, or when stopped).
    """

    def __init__(self, dice: DiceSet, selection: SelectionEngine, die_roller: DieRoller):
        self.dice = dice
        self.selection = selection
        self.die_roller = die_roller

    def roll_unheld(self, request: Optional[RollRequest] = None,
                    on_done: Optional[Callable[[], None]] = None) -> CompletionLatch:
        """
        Roll all unheld dice concurrently.

        With no unheld dice, on_done runs immediately (synchronously) and the
        returned latch is already complete.

        Args:
            request: Options passed through to the roller
            on_done: Called once, after every rolled die has reported

        Returns:
            The latch joining this roll's results
        """
        request = request or RollRequest()
        targets = self.selection.filter_by_held(False)
        latch = CompletionLatch(targets, on_done)

        if not targets:
            logger.debug("All dice held, nothing to roll")
            return latch

        logger.debug(f"Rolling dice {targets} (keep_juggling={request.keep_juggling})")
        for index in targets:
            self.die_roller.roll(index, request, self._result_callback(index, latch))
        return latch

    def _result_callback(self, index: int, latch: CompletionLatch) -> Callable[[int], None]:
        def on_value(value: int) -> None:
            self.dice.set_value(index, value)
            logger.debug(f"Die {index} settled on {value}")
            latch.count_down(index, value)

        return on_value

    def stop(self) -> None:
        """Ask the roller to settle any juggling dice."""
        self.die_roller.stop()
