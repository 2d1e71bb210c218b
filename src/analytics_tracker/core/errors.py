"""Custom exception hierarchy for the tracker library."""


class TrackerError(Exception):
    """Base exception for all tracker errors."""


# --- Configuration ---
class ConfigError(TrackerError):
    """Invalid or missing configuration."""


# --- Construction ---
class InvalidArgumentError(TrackerError, ValueError):
    """A required event field is missing or malformed at build time.

    Signals a programming error in the caller, not a transient condition.
    """
