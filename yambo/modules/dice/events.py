"""
Event definitions for the dice module.
"""

from typing import List

from yambo.core.models import EventTypeDefinition

from .combinations import Combination
from .dice_set import DICE_COUNT

MODULE = "dice"

_INDEX_SCHEMA = {"type": "integer", "minimum": 0, "maximum": DICE_COUNT - 1}
_FACE_SCHEMA = {"type": "integer", "minimum": 0, "maximum": 6}
_VALUES_SCHEMA = {
    "type": "array",
    "items": _FACE_SCHEMA,
    "minItems": DICE_COUNT,
    "maxItems": DICE_COUNT,
    "description": "Face values in die index order (0 = unrolled)"
}


def roll_started_event() -> EventTypeDefinition:
    """Published when the unheld dice are dispatched to the roller."""
    return EventTypeDefinition(
        type="dice.roll_started",
        description="Unheld dice were sent rolling",
        module=MODULE,
        data_schema={
            "type": "object",
            "properties": {
                "indices": {
                    "type": "array",
                    "items": _INDEX_SCHEMA,
                    "description": "Dice being rolled"
                },
                "keep_juggling": {
                    "type": "boolean",
                    "description": "Dice keep rattling until stopped"
                }
            },
            "required": ["indices", "keep_juggling"]
        }
    )


def rolled_event() -> EventTypeDefinition:
    """
    Published once every rolled die has settled.

    Carries everything a score sheet, message log or sound player needs.
    """
    return EventTypeDefinition(
        type="dice.rolled",
        description="All rolled dice have settled",
        module=MODULE,
        data_schema={
            "type": "object",
            "properties": {
                "indices": {
                    "type": "array",
                    "items": _INDEX_SCHEMA,
                    "description": "Dice that were rolled"
                },
                "values": _VALUES_SCHEMA,
                "total": {
                    "type": "integer",
                    "minimum": 0,
                    "maximum": 6 * DICE_COUNT
                },
                "combinations": {
                    "type": "array",
                    "items": {"enum": [c.value for c in Combination]}
                }
            },
            "required": ["indices", "values", "total", "combinations"]
        }
    )


def hold_changed_event() -> EventTypeDefinition:
    """Published when one or more dice are held or released."""
    return EventTypeDefinition(
        type="dice.hold_changed",
        description="Dice were held or released",
        module=MODULE,
        data_schema={
            "type": "object",
            "properties": {
                "indices": {
                    "type": "array",
                    "items": _INDEX_SCHEMA
                },
                "held": {"type": "boolean"},
                "by_value": {
                    "type": ["integer", "null"],
                    "description": "Face value for a select-all-of-value gesture"
                }
            },
            "required": ["indices", "held"]
        }
    )


def reset_event() -> EventTypeDefinition:
    """Published when the dice are reset between turns."""
    return EventTypeDefinition(
        type="dice.reset",
        description="Dice released (and optionally cleared) for a new turn",
        module=MODULE,
        data_schema={
            "type": "object",
            "properties": {
                "values": _VALUES_SCHEMA,
                "cleared": {"type": "boolean"}
            },
            "required": ["values", "cleared"]
        }
    )


def dice_event_types() -> List[EventTypeDefinition]:
    return [
        roll_started_event(),
        rolled_event(),
        hold_changed_event(),
        reset_event(),
    ]
