"""analytics-tracker: immutable, validated analytics events.

Events are assembled with fluent builders and handed to a transport
layer (not part of this package) as :class:`TrackerPayload` objects.
"""

from __future__ import annotations

from analytics_tracker.core.errors import (
    ConfigError,
    InvalidArgumentError,
    TrackerError,
)
from analytics_tracker.events import (
    Event,
    EventBuilder,
    PageView,
    SelfDescribing,
    Structured,
)
from analytics_tracker.payload import Parameter, SelfDescribingJson, TrackerPayload
from analytics_tracker.subject import Subject

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Event",
    "EventBuilder",
    "InvalidArgumentError",
    "PageView",
    "Parameter",
    "SelfDescribing",
    "SelfDescribingJson",
    "Structured",
    "Subject",
    "TrackerError",
    "TrackerPayload",
]
