"""Event source fed by in-process PyPubSub messages."""

import logging
from typing import Callable, Sequence

from pubsub import pub

from ..core import Event
from ..interfaces import EventSource

logger = logging.getLogger(__name__)


class PubSubEventSource(EventSource):
    """Receives event batches published on a pubsub topic.

    Producers call ``pub.sendMessage(topic, events=[...])`` or
    :meth:`publish`.
    """

    def __init__(self, topic: str = "relay.events"):
        """
        Initialize the source.

        Args:
            topic: The pubsub topic to subscribe to.
        """
        self.topic = topic
        self._callbacks: list[Callable[[Sequence[Event]], None]] = []
        self._connected = False

    def on_events(self, callback: Callable[[Sequence[Event]], None]) -> None:
        """Register a callback for incoming event batches."""
        self._callbacks.append(callback)

    def connect(self) -> None:
        """Subscribe to the topic."""
        pub.subscribe(self._handle_events, self.topic)
        self._connected = True

    def disconnect(self) -> None:
        """Unsubscribe from the topic."""
        if self._connected:
            pub.unsubscribe(self._handle_events, self.topic)
            self._connected = False

    def is_connected(self) -> bool:
        """Check if currently subscribed."""
        return self._connected

    def publish(self, events: Sequence[Event]) -> None:
        """Publish a batch of events on the topic."""
        pub.sendMessage(self.topic, events=list(events))

    def _handle_events(self, events: Sequence[Event]) -> None:
        """
        Handle a batch delivered by pubsub.

        Args:
            events: The published events.
        """
        logger.debug(f"Received {len(events)} event(s) on {self.topic}")
        for callback in self._callbacks:
            callback(events)
