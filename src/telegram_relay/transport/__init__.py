"""Transports connecting the relay to the bot API and event producers."""

from .http_client import TelegramHttpClient
from .pubsub_source import PubSubEventSource

__all__ = ["TelegramHttpClient", "PubSubEventSource"]
