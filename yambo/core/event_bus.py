"""
Event bus for Yambo.

Provides pub/sub for dice state change events. Every accepted event is kept
in an in-memory history and broadcast to the listeners registered for its
type. Payloads are validated against the registered event type's schema.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

import jsonschema

from .models import Event, EventTypeDefinition
from .result import Result, ErrorCode

logger = logging.getLogger(__name__)


class EventBus:
    """
    Event bus for publishing and subscribing to dice events.

    Roll completions can arrive from timer threads, so registration,
    subscription and history access are serialized with a lock. Listeners
    run after the lock is released and may publish follow-up events from
    any thread.

    Attributes:
        listeners: Dict mapping event types to lists of callback functions
        event_types: Registered event type definitions by type name
        history_limit: Maximum number of events kept in history (None = unbounded)
    """

    def __init__(self, history_limit: Optional[int] = 500):
        self.listeners: Dict[str, List[Callable[[Event], None]]] = {}
        self.event_types: Dict[str, EventTypeDefinition] = {}
        self.history_limit = history_limit
        self._history: List[Event] = []
        self._lock = threading.Lock()

    def register_event_type(self, definition: EventTypeDefinition) -> Result:
        """
        Register an event type so events of that type can be published.

        Args:
            definition: Event type definition (name, module, payload schema)

        Returns:
            Result.ok(definition) or a failure if the type already exists
        """
        with self._lock:
            if definition.type in self.event_types:
                return Result.fail(
                    f"Event type {definition.type} already registered",
                    ErrorCode.EVENT_TYPE_ALREADY_REGISTERED
                )
            self.event_types[definition.type] = definition
        logger.debug(f"Registered event type {definition.type} ({definition.module})")
        return Result.ok(definition)

    def is_registered(self, event_type: str) -> bool:
        with self._lock:
            return event_type in self.event_types

    def subscribe(self, event_type: str, callback: Callable[[Event], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: Type of event to listen for (e.g., 'dice.rolled')
            callback: Function to call when event occurs.
                     Must accept Event as parameter.

        Examples:
            >>> def on_rolled(event: Event):
            ...     print(event.data['values'])
            >>>
            >>> bus.subscribe('dice.rolled', on_rolled)
        """
        with self._lock:
            callbacks = self.listeners.setdefault(event_type, [])
            if callback not in callbacks:
                callbacks.append(callback)

    def unsubscribe(self, event_type: str, callback: Callable[[Event], None]) -> None:
        with self._lock:
            if callback in self.listeners.get(event_type, []):
                self.listeners[event_type].remove(callback)

    def publish(self, event: Event) -> Result:
        """
        Publish an event to all subscribers and record it in history.

        Events are:
        1. Checked against their registered type and payload schema
        2. Appended to the in-memory history
        3. Broadcast to all registered listeners for that event type

        A listener raising an exception is logged and does not prevent the
        remaining listeners from being called.

        Args:
            event: Event to publish

        Returns:
            Result.ok(event) when accepted, otherwise a failed Result with
            EVENT_TYPE_NOT_REGISTERED or SCHEMA_VALIDATION_FAILED
        """
        with self._lock:
            definition = self.event_types.get(event.event_type)
            if definition is None:
                error_msg = f"Event type {event.event_type} not registered"
                logger.warning(f"Rejected event {event.event_id}: {error_msg}")
                return Result.fail(error_msg, ErrorCode.EVENT_TYPE_NOT_REGISTERED)

            try:
                definition.validate(event.data)
            except jsonschema.ValidationError as e:
                error_msg = f"Event data validation failed: {e.message}"
                logger.error(f"Rejected {event.event_type} event: {error_msg}")
                logger.error(f"   Data: {event.data}")
                return Result.fail(error_msg, ErrorCode.SCHEMA_VALIDATION_FAILED)

            self._history.append(event)
            if self.history_limit is not None and len(self._history) > self.history_limit:
                del self._history[:len(self._history) - self.history_limit]

            callbacks = list(self.listeners.get(event.event_type, []))

        for callback in callbacks:
            try:
                callback(event)
            except Exception:
                # Don't let one listener's error stop others
                logger.exception(f"Error in listener for {event.event_type}")

        return Result.ok(event)

    def get_history(self, event_type: Optional[str] = None, limit: Optional[int] = None) -> List[Event]:
        """
        Get published events, oldest first.

        Args:
            event_type: Only return events of this type
            limit: Only return the most recent N matching events
        """
        with self._lock:
            events = [e for e in self._history if event_type is None or e.event_type == event_type]
        if limit is not None:
            events = events[-limit:] if limit > 0 else []
        return events

    def clear_history(self) -> None:
        with self._lock:
            self._history.clear()

    def clear_listeners(self, event_type: str = None) -> None:
        """
        Clear listeners for a specific event type or all listeners.

        Args:
            event_type: Event type to clear listeners for.
                       If None, clears all listeners.
        """
        with self._lock:
            if event_type:
                if event_type in self.listeners:
                    self.listeners[event_type] = []
            else:
                self.listeners = {}

    def get_listener_count(self, event_type: str = None) -> int:
        """
        Get the number of listeners for an event type.

        Args:
            event_type: Event type to count listeners for.
                       If None, returns total listener count across all types.
        """
        with self._lock:
            if event_type:
                return len(self.listeners.get(event_type, []))
            return sum(len(listeners) for listeners in self.listeners.values())
