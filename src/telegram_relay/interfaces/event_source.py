"""Abstract interface for event sources."""

from abc import ABC, abstractmethod
from typing import Callable, Sequence


class EventSource(ABC):
    """Abstract interface for receiving batches of events."""

    @abstractmethod
    def on_events(self, callback: Callable[[Sequence], None]) -> None:
        """Register a callback for incoming event batches.

        The callback receives a sequence of Event objects.
        """
        pass

    @abstractmethod
    def connect(self) -> None:
        """Start receiving events."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Stop receiving events."""
        pass
