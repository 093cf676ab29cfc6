"""Abstract interfaces for the Telegram relay."""

from .bot_client import BotClient
from .content_fetcher import BinaryHandle, ContentFetcher
from .event_source import EventSource
from .value_resolver import ValueResolver

__all__ = ["BotClient", "BinaryHandle", "ContentFetcher", "EventSource", "ValueResolver"]
