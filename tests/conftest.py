"""Pytest configuration and fixtures."""

import io

import pytest

from telegram_relay.config import Config
from telegram_relay.core import MessageSender, PayloadResolver
from telegram_relay.dispatcher import EventDispatcher
from telegram_relay.errors import ResolutionError
from telegram_relay.interfaces import BinaryHandle, BotClient, ContentFetcher
from telegram_relay.providers import ConfigValueResolver


class FakeBotClient(BotClient):
    """In-memory bot client recording every call."""

    def __init__(self, response=None):
        self.calls = []
        self.response = response if response is not None else {"ok": True, "result": {}}

    def call(self, operation, params, files=None):
        self.calls.append((operation, dict(params), files))
        if callable(self.response):
            return self.response(operation, params)
        return self.response

    def operations(self):
        return [operation for operation, _, _ in self.calls]

    def texts(self):
        return [params["text"] for operation, params, _ in self.calls if operation == "sendMessage"]


class FakeFetcher(ContentFetcher):
    """Fetcher serving in-memory content, optionally failing for some URLs."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.handles = []

    def fetch(self, url):
        if url in self.failing:
            raise ResolutionError(url, "connection refused")
        handle = BinaryHandle(file=io.BytesIO(b"data:" + url.encode()), filename=url.rsplit("/", 1)[-1])
        self.handles.append(handle)
        return handle


@pytest.fixture
def config():
    """Config with credentials filled in (truncate policy)."""
    return Config(auth_token="123:abc", chat_id="42")


@pytest.fixture
def split_config():
    """Config with the split policy."""
    return Config(auth_token="123:abc", chat_id="42", long_message="split")


@pytest.fixture
def client():
    return FakeBotClient()


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def make_dispatcher(client, fetcher):
    """Build a dispatcher around the fake client and fetcher."""

    def _make(config, error_handler=None):
        values = ConfigValueResolver(config)
        return EventDispatcher(
            resolver=PayloadResolver(fetcher),
            sender=MessageSender(client, values),
            values=values,
            error_handler=error_handler,
        )

    return _make
