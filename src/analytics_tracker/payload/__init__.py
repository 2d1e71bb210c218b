"""Outbound payload building blocks: parameter keys, documents, container."""

from __future__ import annotations

from analytics_tracker.payload.parameters import (
    CONTEXT_SCHEMA,
    UNSTRUCT_EVENT_SCHEMA,
    EventType,
    Parameter,
)
from analytics_tracker.payload.self_describing import SelfDescribingJson
from analytics_tracker.payload.tracker_payload import TrackerPayload

__all__ = [
    "CONTEXT_SCHEMA",
    "UNSTRUCT_EVENT_SCHEMA",
    "EventType",
    "Parameter",
    "SelfDescribingJson",
    "TrackerPayload",
]
