"""
Core data models for Yambo.

- Event: immutable record of something that happened to the dice
- EventTypeDefinition: registered event type with an optional payload schema
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any
import uuid


def generate_id(prefix: str) -> str:
    """
    Generate a unique ID with the given prefix.

    Examples:
        >>> generate_id('evt')
        'evt_a1b2c3d4e5f6'
    """
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Event:
    """
    An immutable record of a dice state change.

    Attributes:
        event_id: Unique identifier
        timestamp: When this event occurred
        event_type: Type of event (must be registered on the bus)
        actor_id: Who/what caused this event (player id, 'system')
        data: Event-specific payload

    Examples:
        Roll finished: type='dice.rolled',
                       data={'values': [2, 2, 2, 5, 5], 'total': 16,
                             'combinations': ['three_of_a_kind', 'full_house']}
    """
    event_id: str
    timestamp: datetime
    event_type: str
    actor_id: Optional[str]
    data: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def create(event_type: str, data: Dict[str, Any],
               actor_id: Optional[str] = None,
               event_id: str = None) -> 'Event':
        return Event(
            event_id=event_id or generate_id('evt'),
            timestamp=now(),
            event_type=event_type,
            actor_id=actor_id,
            data=data
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'event_id': self.event_id,
            'timestamp': self.timestamp.isoformat(),
            'event_type': self.event_type,
            'actor_id': self.actor_id,
            'data': self.data
        }


class EventTypeDefinition:
    """
    Defines an event type.

    Simple container for event type metadata.

    Attributes:
        type: Unique name for this event type
        description: Human-readable description
        module: Which module provides this type
        data_schema: Optional JSON Schema for event.data
    """

    def __init__(self, type: str, description: str, module: str,
                 data_schema: Dict[str, Any] = None):
        self.type = type
        self.description = description
        self.module = module
        self.data_schema = data_schema or {}

    def validate(self, data: Dict[str, Any]) -> bool:
        """
        Validate event data against the schema.

        Returns:
            True if valid

        Raises:
            jsonschema.ValidationError: If validation fails
        """
        import jsonschema
        jsonschema.validate(data, self.data_schema)
        return True

    def __repr__(self) -> str:
        return f"EventTypeDefinition(type={self.type!r}, module={self.module!r})"
