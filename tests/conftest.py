"""Shared fixtures for the analytics-tracker test suite."""

from __future__ import annotations

import pytest

from analytics_tracker.payload.self_describing import SelfDescribingJson
from analytics_tracker.subject import Subject

# ---------------------------------------------------------------------------
# Contexts
# ---------------------------------------------------------------------------


@pytest.fixture
def page_context() -> SelfDescribingJson:
    return SelfDescribingJson(
        schema="iglu:com.acme/page/jsonschema/1-0-0",
        data={"type": "article", "id": 42},
    )


@pytest.fixture
def device_context() -> SelfDescribingJson:
    return SelfDescribingJson(
        schema="iglu:com.acme/device/jsonschema/1-0-0",
        data={"os": "linux"},
    )


@pytest.fixture
def contexts(page_context, device_context) -> list[SelfDescribingJson]:
    return [page_context, device_context]


# ---------------------------------------------------------------------------
# Subject
# ---------------------------------------------------------------------------


@pytest.fixture
def subject() -> Subject:
    return Subject(
        user_id="user-1",
        screen_resolution=(1920, 1080),
        language="en",
    )
