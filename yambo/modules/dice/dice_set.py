"""
The five dice of a Yam panel.

A DiceSet is created once per game session and mutated in place: face
values by the roll coordinator, held flags by the selection engine.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterator, List

DICE_COUNT = 5
FACES = range(1, 7)
UNROLLED = 0
_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def coerce_face(value: Any) -> int:
    """
    Read a die value the forgiving way, like a form field parsed with parseInt.

    Strings keep their leading integer; anything else that isn't a finite
    number degrades to 0.

    >>> coerce_face('4'), coerce_face('4abc'), coerce_face('3.0'), coerce_face(None), coerce_face('x')
    (4, 4, 3, 0, 0)
    """
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else UNROLLED
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return UNROLLED


@dataclass
class Die:
    """
    One of the five dice.

    Attributes:
        index: Position in the set (0..4), stable for the session
        value: Face value 1..6, or 0 if never rolled
        held: Kept out of the next roll (this is also the selection state)
    """
    index: int
    value: int = UNROLLED
    held: bool = False

    def __post_init__(self):
        self.value = coerce_face(self.value)

    @property
    def is_rolled(self) -> bool:
        return self.value != UNROLLED


class DiceSet:
    """
    Fixed, ordered collection of exactly five Die.

    Indices are asserted, not validated: they are always generated from the
    set itself, so an out-of-range index is a programming error.
    """

    def __init__(self, values: List[Any] = None):
        """
        Args:
            values: Optional initial face values (defaults to all unrolled)
        """
        values = list(values) if values is not None else [UNROLLED] * DICE_COUNT
        assert len(values) == DICE_COUNT, f"A dice set holds exactly {DICE_COUNT} dice"
        self._dice = [Die(index=i, value=v) for i, v in enumerate(values)]

    def __len__(self) -> int:
        return DICE_COUNT

    def __iter__(self) -> Iterator[Die]:
        return iter(self._dice)

    def __getitem__(self, index: int) -> Die:
        self._check(index)
        return self._dice[index]

    def __repr__(self) -> str:
        held = [d.index for d in self._dice if d.held]
        return f"DiceSet(values={self.values()}, held={held})"

    @staticmethod
    def _check(index: int) -> None:
        assert 0 <= index < DICE_COUNT, f"Die index out of range: {index}"

    def values(self) -> List[int]:
        """The five current face values in index order (0 if unrolled)."""
        return [d.value for d in self._dice]

    def value_at(self, index: int) -> int:
        self._check(index)
        return self._dice[index].value

    def set_value(self, index: int, value: Any) -> None:
        self._check(index)
        self._dice[index].value = coerce_face(value)

    def is_held(self, index: int) -> bool:
        self._check(index)
        return self._dice[index].held

    def set_held(self, index: int, held: bool) -> None:
        self._check(index)
        self._dice[index].held = bool(held)

    def reset(self, clear_values: bool = False) -> None:
        """
        Prepare the set for a new turn.

        Releases every hold. Face values are kept unless clear_values is set,
        in which case every die goes back to unrolled.
        """
        for die in self._dice:
            die.held = False
            if clear_values:
                die.value = UNROLLED
