"""Key/value container handed to the serialisation layer."""

from __future__ import annotations

import base64
import json
import logging
from enum import Enum
from typing import Any, Iterator, Mapping

logger = logging.getLogger(__name__)


def _key(key: object) -> str:
    # Parameter members are str enums; store their plain value
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


class TrackerPayload:
    """String-valued payload for one outbound event.

    Empty values are dropped on insertion: the collector treats a missing
    parameter and an empty one the same way, so they are never written.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def add(self, key: str, value: str | None) -> TrackerPayload:
        """Store *value* under *key* unless it is ``None`` or empty."""
        if value is None or value == "":
            logger.debug("Skipping empty payload value for key=%s", key)
            return self
        self._data[_key(key)] = value
        return self

    def add_map(self, mapping: Mapping[str, str | None]) -> TrackerPayload:
        for key, value in mapping.items():
            self.add(key, value)
        return self

    def add_json(
        self,
        data: Mapping[str, Any] | None,
        base64_encoded: bool,
        encoded_key: str,
        plain_key: str,
    ) -> TrackerPayload:
        """Serialise *data* as compact JSON.

        Parameters
        ----------
        data:
            JSON-serialisable document; ``None`` is ignored.
        base64_encoded:
            Store URL-safe base64 under *encoded_key* when true, otherwise
            the raw JSON under *plain_key*.
        """
        if data is None:
            return self
        raw = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        if base64_encoded:
            encoded = base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")
            return self.add(encoded_key, encoded)
        return self.add(plain_key, raw)

    def get_map(self) -> dict[str, str]:
        """Return a copy of the stored parameters."""
        return dict(self._data)

    def __getitem__(self, key: str) -> str:
        return self._data[_key(key)]

    def __contains__(self, key: object) -> bool:
        return _key(key) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"TrackerPayload({self._data!r})"
