"""Self-describing (unstructured) event (``e=ue``).

The event body is an arbitrary :class:`SelfDescribingJson`; on the wire
it is wrapped in the unstruct-event envelope.
"""

from __future__ import annotations

from typing import Any

from analytics_tracker.events.base import Event, EventBuilder
from analytics_tracker.payload.parameters import (
    UNSTRUCT_EVENT_SCHEMA,
    EventType,
    Parameter,
)
from analytics_tracker.payload.self_describing import SelfDescribingJson
from analytics_tracker.payload.tracker_payload import TrackerPayload


class SelfDescribing(Event):
    event_data: SelfDescribingJson

    @classmethod
    def builder(cls) -> SelfDescribingBuilder:
        return SelfDescribingBuilder()

    def get_envelope(self) -> SelfDescribingJson:
        return SelfDescribingJson(schema=UNSTRUCT_EVENT_SCHEMA, data=self.event_data)

    def get_payload(self, base64_encoded: bool = True) -> TrackerPayload:
        payload = TrackerPayload()
        payload.add(Parameter.EVENT, EventType.UNSTRUCTURED.value)
        payload.add_json(
            self.get_envelope().to_dict(),
            base64_encoded,
            Parameter.UNSTRUCTURED_ENCODED,
            Parameter.UNSTRUCTURED,
        )
        self.put_context_params(payload, base64_encoded)
        self.put_subject_params(payload)
        return self.put_default_params(payload)


class SelfDescribingBuilder(EventBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._event_data: SelfDescribingJson | None = None

    def event_data(self, event_data: SelfDescribingJson) -> SelfDescribingBuilder:
        self._event_data = event_data
        return self

    def _validate(self) -> None:
        super()._validate()
        if self._event_data is None:
            self._reject("event_data cannot be None")

    def _event_kwargs(self) -> dict[str, Any]:
        kwargs = super()._event_kwargs()
        kwargs["event_data"] = self._event_data
        return kwargs

    def build(self) -> SelfDescribing:
        return self._build(SelfDescribing)
