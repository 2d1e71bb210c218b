"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

_LOG_FORMATS = ("json", "console")


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"


class Settings(BaseSettings):
    """Top-level tracker settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    # Stamped on log entries as tracker_namespace when set
    namespace: str = ""

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "TRACKER_", "env_nested_delimiter": "__"}

    def validate_logging(self) -> None:
        """Reject unknown log renderers before logging is configured."""
        from .errors import ConfigError

        if self.observability.log_format not in _LOG_FORMATS:
            raise ConfigError(
                f"Unknown log format {self.observability.log_format!r}; "
                f"expected one of {', '.join(_LOG_FORMATS)}."
            )


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            with open(path, "rb") as f:
                data = tomli.load(f)

    if overrides:
        data.update(overrides)

    return Settings(**data)


def configure_logging(settings: Settings, stream: IO[str] | None = None) -> None:
    """Apply the observability section of *settings* to structlog."""
    from analytics_tracker.observability.logger import setup_logging

    settings.validate_logging()
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
        namespace=settings.namespace,
        stream=stream,
    )
