"""Base event model and its fluent builder.

Every tracked event carries four common elements:

- custom context: list of self-describing context documents (may be empty)
- timestamp: epoch milliseconds, the wall clock at build time by default
- event id: a unique id for the event, a fresh UUID v4 by default
- subject: the user/device/session descriptor, or ``None``

Events are immutable once built.  They are normally assembled through a
builder, which validates the required fields exactly once in ``build()``.

Usage::

    from analytics_tracker.events import Event

    event = (
        Event.builder()
        .custom_context([ctx])
        .timestamp(1700000000000)
        .event_id("abc-123")
        .build()
    )
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar

from pydantic import BaseModel, Field, ValidationError

from analytics_tracker.core.errors import InvalidArgumentError
from analytics_tracker.core.ids import new_event_id, now_ms
from analytics_tracker.payload.parameters import CONTEXT_SCHEMA, Parameter
from analytics_tracker.payload.self_describing import SelfDescribingJson
from analytics_tracker.payload.tracker_payload import TrackerPayload
from analytics_tracker.subject import Subject

logger = logging.getLogger(__name__)

_B = TypeVar("_B", bound="EventBuilder")
_E = TypeVar("_E", bound="Event")


# ---------------------------------------------------------------------------
# Event (base)
# ---------------------------------------------------------------------------


class Event(BaseModel):
    """Immutable base event.  Concrete event types extend it with fields.

    Build through :meth:`builder`.  Direct construction validates the same
    way and also raises :class:`InvalidArgumentError` on bad input.
    """

    context: tuple[SelfDescribingJson, ...] = ()
    timestamp: int = Field(default_factory=now_ms)
    event_id: str = Field(default_factory=new_event_id, min_length=1)
    subject: Subject | None = None

    model_config = {"frozen": True}

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            message = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            logger.warning("%s rejected: %s", type(self).__name__, message)
            raise InvalidArgumentError(message) from exc

    def __hash__(self) -> int:
        # Contexts and subject hold dicts; the id identifies the event
        return hash((type(self), self.event_id))

    @classmethod
    def builder(cls) -> EventBuilder:
        return EventBuilder()

    # -- accessors ----------------------------------------------------------

    def get_context(self) -> list[SelfDescribingJson]:
        """Return a fresh list of the custom contexts."""
        return list(self.context)

    def get_timestamp(self) -> int:
        return self.timestamp

    def get_event_id(self) -> str:
        return self.event_id

    def get_subject(self) -> Subject | None:
        return self.subject

    def get_context_json(self) -> SelfDescribingJson | None:
        """Wrap the custom contexts in the contexts envelope.

        Returns ``None`` when the event has no contexts.
        """
        if not self.context:
            return None
        return SelfDescribingJson(
            schema=CONTEXT_SCHEMA,
            data=[ctx.to_dict() for ctx in self.context],
        )

    # -- payload helpers for concrete events --------------------------------

    def put_default_params(self, payload: TrackerPayload) -> TrackerPayload:
        """Add the event id and timestamp to *payload* and return it."""
        payload.add(Parameter.EID, self.get_event_id())
        payload.add(Parameter.TIMESTAMP, str(self.get_timestamp()))
        return payload

    def put_context_params(
        self,
        payload: TrackerPayload,
        base64_encoded: bool,
    ) -> TrackerPayload:
        envelope = self.get_context_json()
        if envelope is not None:
            payload.add_json(
                envelope.to_dict(),
                base64_encoded,
                Parameter.CONTEXT_ENCODED,
                Parameter.CONTEXT,
            )
        return payload

    def put_subject_params(self, payload: TrackerPayload) -> TrackerPayload:
        if self.subject is not None:
            payload.add_map(self.subject.get_subject())
        return payload


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class EventBuilder:
    """Fluent builder for :class:`Event` and the base of concrete builders.

    Setters return the builder itself, typed as the concrete subclass, so
    chains keep access to subclass setters.
    """

    def __init__(self) -> None:
        self._context: Sequence[SelfDescribingJson] | None = []
        self._timestamp: int = now_ms()
        self._event_id: str | None = new_event_id()
        self._subject: Subject | None = None

    # -- common setters -----------------------------------------------------

    def custom_context(
        self: _B,
        context: Sequence[SelfDescribingJson] | None,
    ) -> _B:
        self._context = context
        return self

    def timestamp(self: _B, timestamp: int) -> _B:
        """Override the event timestamp (epoch milliseconds)."""
        self._timestamp = timestamp
        return self

    def event_id(self: _B, event_id: str | None) -> _B:
        self._event_id = event_id
        return self

    def subject(self: _B, subject: Subject | None) -> _B:
        self._subject = subject
        return self

    # -- build --------------------------------------------------------------

    def _validate(self) -> None:
        """Check required fields.  Subclasses extend and call super().

        Raises
        ------
        InvalidArgumentError
            If the context is ``None`` or the event id is ``None``/empty.
        """
        if self._context is None:
            self._reject("context cannot be None")
        if self._event_id is None:
            self._reject("event_id cannot be None")
        if not self._event_id:
            self._reject("event_id cannot be empty")

    def _reject(self, message: str) -> None:
        logger.warning("%s rejected: %s", type(self).__name__, message)
        raise InvalidArgumentError(message)

    def _event_kwargs(self) -> dict[str, Any]:
        return {
            "context": self._context,
            "timestamp": self._timestamp,
            "event_id": self._event_id,
            "subject": self._subject,
        }

    def _build(self, event_cls: type[_E]) -> _E:
        self._validate()
        event = event_cls(**self._event_kwargs())
        logger.debug(
            "Built %s event_id=%s contexts=%d",
            event_cls.__name__,
            event.event_id,
            len(event.context),
        )
        return event

    def build(self) -> Event:
        """Validate the staged fields and construct an immutable :class:`Event`."""
        return self._build(Event)
