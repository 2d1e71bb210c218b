"""Structured event (``e=se``): category/action/label/property/value."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from analytics_tracker.events.base import Event, EventBuilder
from analytics_tracker.payload.parameters import EventType, Parameter
from analytics_tracker.payload.tracker_payload import TrackerPayload


class Structured(Event):
    """Classic five-field custom event."""

    category: str = Field(min_length=1)
    action: str = Field(min_length=1)
    label: str | None = None
    property: str | None = None
    value: float | None = None

    @classmethod
    def builder(cls) -> StructuredBuilder:
        return StructuredBuilder()

    def get_payload(self, base64_encoded: bool = True) -> TrackerPayload:
        payload = TrackerPayload()
        payload.add(Parameter.EVENT, EventType.STRUCTURED.value)
        payload.add(Parameter.SE_CATEGORY, self.category)
        payload.add(Parameter.SE_ACTION, self.action)
        payload.add(Parameter.SE_LABEL, self.label)
        payload.add(Parameter.SE_PROPERTY, self.property)
        if self.value is not None:
            payload.add(Parameter.SE_VALUE, str(self.value))
        self.put_context_params(payload, base64_encoded)
        self.put_subject_params(payload)
        return self.put_default_params(payload)


class StructuredBuilder(EventBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._category: str | None = None
        self._action: str | None = None
        self._label: str | None = None
        self._property: str | None = None
        self._value: float | None = None

    def category(self, category: str) -> StructuredBuilder:
        self._category = category
        return self

    def action(self, action: str) -> StructuredBuilder:
        self._action = action
        return self

    def label(self, label: str | None) -> StructuredBuilder:
        self._label = label
        return self

    def property(self, prop: str | None) -> StructuredBuilder:
        self._property = prop
        return self

    def value(self, value: float | None) -> StructuredBuilder:
        self._value = value
        return self

    def _validate(self) -> None:
        super()._validate()
        if not self._category:
            self._reject("category cannot be empty")
        if not self._action:
            self._reject("action cannot be empty")

    def _event_kwargs(self) -> dict[str, Any]:
        kwargs = super()._event_kwargs()
        kwargs.update(
            category=self._category,
            action=self._action,
            label=self._label,
            property=self._property,
            value=self._value,
        )
        return kwargs

    def build(self) -> Structured:
        return self._build(Structured)
