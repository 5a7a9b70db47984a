"""
Die rollers: the per-die roll primitive the coordinator dispatches to.

A renderer normally owns this (it animates the die and reports the face it
lands on). Two headless implementations are provided:

- InstantDieRoller settles every die synchronously, for scripts and tests.
- JugglingDieRoller settles each die from a timer thread after the juggle
  timeout, and keeps "keep_juggling" dice rattling until stop() is called.
"""

import logging
import random
import threading
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, Iterator, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .roller import RollRequest

logger = logging.getLogger(__name__)

OnValue = Callable[[int], None]


class DieRoller(ABC):
    """
    Per-die roll primitive.

    roll() must return without waiting for the die; the settled face (1..6)
    is delivered later, exactly once, through on_value. A die rolled again
    before it settled is replaced: only the newest roll reports.
    """

    @abstractmethod
    def roll(self, index: int, request: 'RollRequest', on_value: OnValue) -> None:
        pass

    def stop(self) -> None:
        """Settle dice left juggling by a keep_juggling request. Default: nothing to stop."""
        pass

    def cancel(self) -> None:
        """Drop dice left juggling without reporting a value. Default: nothing to cancel."""
        pass


class InstantDieRoller(DieRoller):
    """
    Settles each die as soon as it is rolled.

    Faces come from a seeded random.Random, or from a fixed script of faces
    when one is given (useful for reproducing a game). Juggling requests are
    parked until stop() settles them or cancel() drops them.
    """

    def __init__(self, seed: Optional[int] = None, faces: Optional[Iterable[int]] = None):
        self.rng = random.Random(seed)
        self._script: Optional[Iterator[int]] = iter(faces) if faces is not None else None
        self._juggling: Dict[int, OnValue] = {}

    def _next_face(self) -> int:
        if self._script is not None:
            face = next(self._script, None)
            if face is not None:
                return face
        return self.rng.randint(1, 6)

    def roll(self, index: int, request: 'RollRequest', on_value: OnValue) -> None:
        if request.keep_juggling:
            self._juggling[index] = on_value
            return
        self._juggling.pop(index, None)
        on_value(self._next_face())

    def stop(self) -> None:
        juggling, self._juggling = self._juggling, {}
        for index in sorted(juggling):
            juggling[index](self._next_face())

    def cancel(self) -> None:
        if self._juggling:
            logger.debug(f"Cancelling juggling dice {sorted(self._juggling)}")
        self._juggling.clear()


class _RollJob:
    """One in-flight die roll."""

    def __init__(self, index: int, request: 'RollRequest', on_value: OnValue):
        self.index = index
        self.request = request
        self.on_value = on_value
        self.tick_timer: Optional[threading.Timer] = None
        self.settle_timer: Optional[threading.Timer] = None

    def cancel(self) -> None:
        for timer in (self.tick_timer, self.settle_timer):
            if timer is not None:
                timer.cancel()


class JugglingDieRoller(DieRoller):
    """
    Timer-driven die roller.

    While a die rolls, its showing face changes every `tick` seconds (read it
    with showing()). A normal roll settles after request.juggle_timeout
    (or `juggle_time`); a keep_juggling roll rattles until stop(). Results are
    delivered on timer threads.
    """

    def __init__(self, seed: Optional[int] = None, juggle_time: float = 1.2, tick: float = 0.08):
        self.rng = random.Random(seed)
        self.juggle_time = juggle_time
        self.tick = tick
        self._faces: Dict[int, int] = {}
        self._jobs: Dict[int, _RollJob] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config) -> 'JugglingDieRoller':
        return cls(seed=config.seed, juggle_time=config.juggle_time, tick=config.juggle_tick)

    def roll(self, index: int, request: 'RollRequest', on_value: OnValue) -> None:
        job = _RollJob(index, request, on_value)
        with self._lock:
            previous = self._jobs.get(index)
            if previous is not None:
                previous.cancel()
            self._jobs[index] = job
            self._faces[index] = self.rng.randint(1, 6)
            self._schedule_tick(job)

            if not request.keep_juggling:
                timeout = request.juggle_timeout if request.juggle_timeout is not None else self.juggle_time
                settle = threading.Timer(timeout, self._settle, args=(job,))
                settle.daemon = True
                job.settle_timer = settle
                settle.start()

    def _schedule_tick(self, job: _RollJob) -> None:
        timer = threading.Timer(self.tick, self._rattle, args=(job,))
        timer.daemon = True
        job.tick_timer = timer
        timer.start()

    def _rattle(self, job: _RollJob) -> None:
        with self._lock:
            if self._jobs.get(job.index) is not job:
                return
            self._faces[job.index] = self.rng.randint(1, 6)
            self._schedule_tick(job)

    def _settle(self, job: _RollJob) -> None:
        with self._lock:
            if self._jobs.get(job.index) is not job:
                # Replaced by a newer roll of the same die
                return
            del self._jobs[job.index]
            job.cancel()
            value = self.rng.randint(1, 6)
            self._faces[job.index] = value
        job.on_value(value)

    def stop(self) -> None:
        with self._lock:
            juggling = [job for job in self._jobs.values() if job.request.keep_juggling]
        if juggling:
            logger.debug(f"Stopping juggling dice {[job.index for job in juggling]}")
        for job in sorted(juggling, key=lambda j: j.index):
            self._settle(job)

    def showing(self, index: int) -> int:
        """Face currently shown by a die (0 if it never rolled)."""
        with self._lock:
            return self._faces.get(index, 0)

    def rolling(self) -> List[int]:
        """Indices of dice still in flight."""
        with self._lock:
            return sorted(self._jobs)

    def cancel(self) -> None:
        """Drop every in-flight roll without reporting (refused roll, session teardown)."""
        with self._lock:
            if self._jobs:
                logger.debug(f"Cancelling dice {sorted(self._jobs)}")
            for job in self._jobs.values():
                job.cancel()
            self._jobs.clear()
