"""Exceptions raised by the Telegram relay."""


class RelayError(Exception):
    """Base class for relay errors."""


class ResolutionError(RelayError):
    """A binary content reference could not be fetched."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ConfigError(RelayError):
    """Configuration is missing or invalid."""
