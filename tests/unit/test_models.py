"""
Unit tests for core models (Event, EventTypeDefinition) and Result.
"""

import jsonschema
import pytest
from yambo.core.models import Event, EventTypeDefinition, generate_id
from yambo.core.result import Result, ErrorCode


class TestGenerateId:
    """Test ID generation."""

    def test_generate_id_format(self):
        """Test that generated IDs have correct format."""
        event_id = generate_id('evt')
        assert event_id.startswith('evt_')
        assert len(event_id) == len('evt_') + 12

    def test_generate_id_unique(self):
        """Test that generated IDs are unique."""
        assert generate_id('test') != generate_id('test')


class TestEvent:
    """Test Event model."""

    def test_create_event(self):
        """Test creating an event."""
        event = Event.create('dice.rolled', {'values': [1, 2, 3, 4, 5]}, actor_id='player_1')

        assert event.event_id.startswith('evt_')
        assert event.event_type == 'dice.rolled'
        assert event.actor_id == 'player_1'
        assert event.data['values'] == [1, 2, 3, 4, 5]
        assert event.timestamp is not None

    def test_event_is_immutable(self):
        """Test that events can't be reassigned."""
        event = Event.create('dice.reset', {})
        with pytest.raises(AttributeError):
            event.event_type = 'other'

    def test_to_dict(self):
        """Test conversion to dictionary."""
        event = Event.create('dice.reset', {'cleared': True}, event_id='evt_fixed')
        data = event.to_dict()

        assert data['event_id'] == 'evt_fixed'
        assert data['event_type'] == 'dice.reset'
        assert data['actor_id'] is None
        assert data['data'] == {'cleared': True}
        assert isinstance(data['timestamp'], str)


class TestEventTypeDefinition:
    """Test event type schema validation."""

    def test_validate(self):
        """Test schema validation passes and fails."""
        definition = EventTypeDefinition(
            'test.face', 'Face', 'test',
            data_schema={"type": "object", "properties": {"face": {"type": "integer"}}, "required": ["face"]}
        )
        assert definition.validate({'face': 3})
        with pytest.raises(jsonschema.ValidationError):
            definition.validate({'face': 'three'})

    def test_no_schema_accepts_anything(self):
        """Test that a type without schema accepts any payload."""
        definition = EventTypeDefinition('test.any', 'Any', 'test')
        assert definition.data_schema == {}
        assert definition.validate({'whatever': [1, 2]})


class TestResult:
    """Test Result object."""

    def test_ok(self):
        """Test successful results."""
        result = Result.ok({'values': [6, 6, 6, 6, 6]})
        assert result.success
        assert result
        assert result.data == {'values': [6, 6, 6, 6, 6]}
        assert result.error is None

    def test_fail_with_enum(self):
        """Test failed results with an ErrorCode."""
        result = Result.fail("bad payload", ErrorCode.SCHEMA_VALIDATION_FAILED)
        assert not result
        assert result.error == "bad payload"
        assert result.error_code == 'schema_validation_failed'

    def test_fail_with_string(self):
        """Test failed results with a custom code."""
        assert Result.fail("nope", "CUSTOM").error_code == "CUSTOM"

    def test_error_code_str(self):
        """Test ErrorCode string form."""
        assert str(ErrorCode.EVENT_TYPE_NOT_REGISTERED) == 'event_type_not_registered'
