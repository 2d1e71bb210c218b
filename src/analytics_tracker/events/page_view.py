"""Page view event (``e=pv``)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from analytics_tracker.events.base import Event, EventBuilder
from analytics_tracker.payload.parameters import EventType, Parameter
from analytics_tracker.payload.tracker_payload import TrackerPayload


class PageView(Event):
    """A page (or screen) was viewed."""

    page_url: str = Field(min_length=1)
    page_title: str | None = None
    referrer: str | None = None

    @classmethod
    def builder(cls) -> PageViewBuilder:
        return PageViewBuilder()

    def get_payload(self, base64_encoded: bool = True) -> TrackerPayload:
        payload = TrackerPayload()
        payload.add(Parameter.EVENT, EventType.PAGE_VIEW.value)
        payload.add(Parameter.PAGE_URL, self.page_url)
        payload.add(Parameter.PAGE_TITLE, self.page_title)
        payload.add(Parameter.PAGE_REFR, self.referrer)
        self.put_context_params(payload, base64_encoded)
        self.put_subject_params(payload)
        return self.put_default_params(payload)


class PageViewBuilder(EventBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._page_url: str | None = None
        self._page_title: str | None = None
        self._referrer: str | None = None

    def page_url(self, page_url: str) -> PageViewBuilder:
        self._page_url = page_url
        return self

    def page_title(self, page_title: str | None) -> PageViewBuilder:
        self._page_title = page_title
        return self

    def referrer(self, referrer: str | None) -> PageViewBuilder:
        self._referrer = referrer
        return self

    def _validate(self) -> None:
        super()._validate()
        if not self._page_url:
            self._reject("page_url cannot be empty")

    def _event_kwargs(self) -> dict[str, Any]:
        kwargs = super()._event_kwargs()
        kwargs.update(
            page_url=self._page_url,
            page_title=self._page_title,
            referrer=self._referrer,
        )
        return kwargs

    def build(self) -> PageView:
        return self._build(PageView)
