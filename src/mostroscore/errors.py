"""Custom exceptions for clearer error handling across the app."""


class MostroScoreError(Exception):
    """Base exception for all app-specific errors."""


class ConfigError(MostroScoreError, ValueError):
    """Raised when environment or CLI configuration is invalid or missing."""


class EventSourceError(MostroScoreError):
    """Raised when an event file cannot be read."""


class MalformedEventError(MostroScoreError):
    """Raised when a record cannot be turned into an event."""
