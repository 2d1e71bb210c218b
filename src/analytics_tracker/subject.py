"""Subject: the user, device and session an event is attributed to.

Unlike events, a subject is mutable; a tracker typically keeps one per
user and updates it as the session evolves.  Events only hold a
reference to it.
"""

from __future__ import annotations

from pydantic import BaseModel

from analytics_tracker.payload.parameters import Parameter


class Subject(BaseModel):
    """User / device / session attributes."""

    user_id: str | None = None
    screen_resolution: tuple[int, int] | None = None
    viewport: tuple[int, int] | None = None
    color_depth: int | None = None
    timezone: str | None = None
    language: str | None = None
    platform: str = "srv"
    ip_address: str | None = None
    useragent: str | None = None
    domain_user_id: str | None = None
    network_user_id: str | None = None

    model_config = {"validate_assignment": True}

    def get_subject(self) -> dict[str, str]:
        """Return the non-empty attributes keyed by wire parameter."""
        params: dict[str, str | None] = {
            Parameter.UID.value: self.user_id,
            Parameter.RESOLUTION.value: _dimensions(self.screen_resolution),
            Parameter.VIEWPORT.value: _dimensions(self.viewport),
            Parameter.COLOR_DEPTH.value: (
                str(self.color_depth) if self.color_depth is not None else None
            ),
            Parameter.TIMEZONE.value: self.timezone,
            Parameter.LANGUAGE.value: self.language,
            Parameter.PLATFORM.value: self.platform,
            Parameter.IP_ADDRESS.value: self.ip_address,
            Parameter.USERAGENT.value: self.useragent,
            Parameter.DOMAIN_UID.value: self.domain_user_id,
            Parameter.NETWORK_UID.value: self.network_user_id,
        }
        return {k: v for k, v in params.items() if v}


def _dimensions(value: tuple[int, int] | None) -> str | None:
    if value is None:
        return None
    width, height = value
    return f"{width}x{height}"
