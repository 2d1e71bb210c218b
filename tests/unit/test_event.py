"""Unit tests for the base Event and EventBuilder."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from analytics_tracker.core.errors import InvalidArgumentError, TrackerError
from analytics_tracker.core.ids import now_ms
from analytics_tracker.events.base import Event, EventBuilder
from analytics_tracker.events.page_view import PageView
from analytics_tracker.payload.parameters import Parameter
from analytics_tracker.payload.tracker_payload import TrackerPayload

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestEventDefaults:
    def test_builder_returns_event_builder(self):
        assert isinstance(Event.builder(), EventBuilder)

    def test_default_build(self):
        before = now_ms()
        event = Event.builder().build()
        after = now_ms()

        assert event.get_context() == []
        assert event.get_subject() is None
        assert isinstance(event.get_event_id(), str)
        assert event.get_event_id() != ""
        assert before <= event.get_timestamp() <= after

    def test_default_event_ids_are_unique(self):
        ids = {Event.builder().build().get_event_id() for _ in range(50)}
        assert len(ids) == 50


# ---------------------------------------------------------------------------
# Fluent API
# ---------------------------------------------------------------------------


class TestBuilderFluent:
    def test_all_setters_return_self(self, contexts, subject):
        builder = Event.builder()
        assert builder.custom_context(contexts) is builder
        assert builder.timestamp(123) is builder
        assert builder.event_id("e-1") is builder
        assert builder.subject(subject) is builder

    def test_chained_build(self, contexts, subject):
        event = (
            Event.builder()
            .custom_context(contexts)
            .timestamp(1700000000000)
            .event_id("abc-123")
            .subject(subject)
            .build()
        )
        assert event.get_context() == contexts
        assert event.get_timestamp() == 1700000000000
        assert event.get_event_id() == "abc-123"
        assert event.get_subject() is subject

    def test_empty_context_accepted(self):
        event = Event.builder().custom_context([]).build()
        assert event.get_context() == []

    def test_timestamp_not_bounds_checked(self):
        assert Event.builder().timestamp(0).build().get_timestamp() == 0
        assert Event.builder().timestamp(-5).build().get_timestamp() == -5
        far = 99_999_999_999_999
        assert Event.builder().timestamp(far).build().get_timestamp() == far


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestBuilderValidation:
    def test_none_context_rejected(self):
        builder = Event.builder().custom_context(None)
        with pytest.raises(InvalidArgumentError, match="context cannot be None"):
            builder.build()

    def test_none_event_id_rejected(self):
        builder = Event.builder().event_id(None)
        with pytest.raises(InvalidArgumentError, match="event_id cannot be None"):
            builder.build()

    def test_empty_event_id_rejected(self):
        builder = Event.builder().event_id("")
        with pytest.raises(InvalidArgumentError, match="event_id cannot be empty"):
            builder.build()

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Event.builder().event_id("").build()
        assert issubclass(InvalidArgumentError, TrackerError)

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="analytics_tracker.events.base"):
            with pytest.raises(InvalidArgumentError):
                Event.builder().event_id("").build()
        assert "event_id cannot be empty" in caplog.text

    def test_direct_construction_enforces_event_id(self):
        with pytest.raises(InvalidArgumentError, match="event_id"):
            Event(event_id="")

    def test_direct_construction_rejects_none_context(self):
        with pytest.raises(InvalidArgumentError, match="context"):
            Event(context=None)

    def test_direct_construction_chains_validation_error(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            Event(timestamp="not-a-number")
        assert isinstance(excinfo.value.__cause__, ValidationError)

    def test_subclass_direct_construction_uses_same_error(self):
        with pytest.raises(InvalidArgumentError, match="page_url"):
            PageView(page_url="")


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


class TestEventImmutability:
    def test_get_context_returns_copy(self, contexts, page_context):
        event = Event.builder().custom_context(contexts).build()

        returned = event.get_context()
        returned.append(page_context)
        returned.clear()

        assert event.get_context() == contexts
        assert event.get_context() is not event.get_context()

    def test_staged_list_mutation_does_not_leak(self, contexts, page_context):
        staged = list(contexts)
        event = Event.builder().custom_context(staged).build()
        staged.append(page_context)
        assert len(event.get_context()) == 2

    def test_fields_are_frozen(self):
        event = Event.builder().event_id("e-1").build()
        with pytest.raises(ValidationError):
            event.event_id = "other"
        with pytest.raises(ValidationError):
            event.timestamp = 1

    def test_accessors_are_stable(self):
        event = Event.builder().build()
        assert event.get_event_id() == event.get_event_id()
        assert event.get_timestamp() == event.get_timestamp()


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------


class TestDefaultParams:
    def test_put_default_params(self):
        event = (
            Event.builder()
            .event_id("abc-123")
            .timestamp(1700000000000)
            .build()
        )
        payload = TrackerPayload()

        result = event.put_default_params(payload)

        assert result is payload
        assert payload[Parameter.EID] == "abc-123"
        assert payload["eid"] == "abc-123"
        assert payload["dtm"] == "1700000000000"

    def test_put_default_params_keeps_existing_entries(self):
        payload = TrackerPayload().add("e", "pv")
        Event.builder().event_id("x").timestamp(7).build().put_default_params(payload)
        assert payload.get_map() == {"e": "pv", "eid": "x", "dtm": "7"}

    def test_context_json_none_without_contexts(self):
        assert Event.builder().build().get_context_json() is None

    def test_context_json_envelope(self, contexts):
        event = Event.builder().custom_context(contexts).build()
        envelope = event.get_context_json().to_dict()
        assert envelope["schema"].startswith(
            "iglu:com.snowplowanalytics.snowplow/contexts/"
        )
        assert envelope["data"] == [ctx.to_dict() for ctx in contexts]

    def test_subject_params_skipped_without_subject(self):
        payload = Event.builder().build().put_subject_params(TrackerPayload())
        assert len(payload) == 0

    def test_subject_params(self, subject):
        event = Event.builder().subject(subject).build()
        payload = event.put_subject_params(TrackerPayload())
        assert payload["uid"] == "user-1"
        assert payload["res"] == "1920x1080"
        assert payload["p"] == "srv"


# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------


class TestEventHashing:
    def test_hash_with_contexts_and_subject(self, contexts, subject):
        event = (
            Event.builder()
            .custom_context(contexts)
            .subject(subject)
            .event_id("h-1")
            .build()
        )
        assert hash(event) == hash(event)

    def test_equal_events_hash_equal(self, contexts):
        first = Event.builder().custom_context(contexts).event_id("h-1").timestamp(1).build()
        second = Event.builder().custom_context(contexts).event_id("h-1").timestamp(1).build()
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_concrete_events_hashable(self, contexts):
        event = (
            PageView.builder()
            .page_url("https://example.com")
            .custom_context(contexts)
            .build()
        )
        assert event in {event}
