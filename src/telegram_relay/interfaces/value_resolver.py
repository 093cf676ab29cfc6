"""Abstract interface for per-event configuration values."""

from abc import ABC, abstractmethod


class ValueResolver(ABC):
    """Resolves named configuration values in the context of an event."""

    @abstractmethod
    def resolve(self, event, key: str) -> str | None:
        """Return the value of key for this event, or None if unset."""
        pass
