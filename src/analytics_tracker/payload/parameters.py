"""Wire parameter keys and schema URIs of the tracker protocol.

These keys are a stable contract with whatever serialises a
:class:`~analytics_tracker.payload.tracker_payload.TrackerPayload` later.
"""

from __future__ import annotations

from enum import Enum


class Parameter(str, Enum):
    """Payload parameter keys."""

    # Common
    EVENT = "e"
    EID = "eid"
    TIMESTAMP = "dtm"

    # Contexts
    CONTEXT = "co"
    CONTEXT_ENCODED = "cx"

    # Subject
    UID = "uid"
    RESOLUTION = "res"
    VIEWPORT = "vp"
    COLOR_DEPTH = "cd"
    TIMEZONE = "tz"
    LANGUAGE = "lang"
    PLATFORM = "p"
    IP_ADDRESS = "ip"
    USERAGENT = "ua"
    DOMAIN_UID = "duid"
    NETWORK_UID = "tnuid"

    # Page view
    PAGE_URL = "url"
    PAGE_TITLE = "page"
    PAGE_REFR = "refr"

    # Structured event
    SE_CATEGORY = "se_ca"
    SE_ACTION = "se_ac"
    SE_LABEL = "se_la"
    SE_PROPERTY = "se_pr"
    SE_VALUE = "se_va"

    # Self-describing event
    UNSTRUCTURED = "ue_pr"
    UNSTRUCTURED_ENCODED = "ue_px"


class EventType(str, Enum):
    """Values written under :attr:`Parameter.EVENT`."""

    PAGE_VIEW = "pv"
    STRUCTURED = "se"
    UNSTRUCTURED = "ue"


UNSTRUCT_EVENT_SCHEMA = "iglu:com.snowplowanalytics.snowplow/unstruct_event/jsonschema/1-0-0"
CONTEXT_SCHEMA = "iglu:com.snowplowanalytics.snowplow/contexts/jsonschema/1-0-1"
