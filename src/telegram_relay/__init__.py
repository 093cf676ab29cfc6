"""Relay notification events to a Telegram bot."""

from .config import Config, load_config
from .dispatcher import DispatchResult, EventDispatcher

__version__ = "0.1.0"

__all__ = ["Config", "load_config", "DispatchResult", "EventDispatcher"]
