"""Trackable events.

Public API
----------
::

    from analytics_tracker.events import (
        Event,
        EventBuilder,
        PageView,
        Structured,
        SelfDescribing,
    )
"""

from __future__ import annotations

from analytics_tracker.events.base import Event, EventBuilder
from analytics_tracker.events.page_view import PageView, PageViewBuilder
from analytics_tracker.events.self_describing import (
    SelfDescribing,
    SelfDescribingBuilder,
)
from analytics_tracker.events.structured import Structured, StructuredBuilder

__all__ = [
    # Base
    "Event",
    "EventBuilder",
    # Concrete events
    "PageView",
    "PageViewBuilder",
    "SelfDescribing",
    "SelfDescribingBuilder",
    "Structured",
    "StructuredBuilder",
]
