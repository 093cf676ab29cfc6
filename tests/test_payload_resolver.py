"""Tests for the PayloadResolver module."""

import pytest
from telegram_relay.core import Event, FieldKind, PayloadResolver
from telegram_relay.core.payload_resolver import BinaryPayload, TextPayload
from telegram_relay.errors import ResolutionError


class TestPayloadResolver:
    """Tests for PayloadResolver."""

    @pytest.fixture
    def resolver(self, fetcher):
        return PayloadResolver(fetcher)

    def test_text_present(self, resolver):
        """Text field resolves to a TextPayload with the raw value."""
        event = Event(id="e1", payload={"text": "  hello  "})
        payload = resolver.resolve(event, FieldKind.TEXT)

        assert payload == TextPayload(kind=FieldKind.TEXT, text="  hello  ")

    def test_text_absent(self, resolver):
        assert resolver.resolve(Event(id="e1"), FieldKind.TEXT) is None

    @pytest.mark.parametrize("value", ["", "   ", "\n\t", None])
    def test_blank_text_is_absent(self, resolver, value):
        """Blank or whitespace-only text is treated as absent."""
        event = Event(id="e1", payload={"text": value})
        assert resolver.resolve(event, FieldKind.TEXT) is None

    def test_non_string_text_converted(self, resolver):
        event = Event(id="e1", payload={"text": 42})
        assert resolver.resolve(event, FieldKind.TEXT).text == "42"

    def test_photo_fetched(self, resolver, fetcher):
        """Binary kinds fetch the URL into a handle."""
        event = Event(id="e1", payload={"photo": "https://example.com/cat.jpg"})
        payload = resolver.resolve(event, FieldKind.PHOTO)

        assert isinstance(payload, BinaryPayload)
        assert payload.kind is FieldKind.PHOTO
        assert payload.handle is fetcher.handles[0]
        assert payload.handle.filename == "cat.jpg"
        assert payload.caption is None

    def test_caption_attached(self, resolver):
        event = Event(id="e1", payload={"video": "https://example.com/a.mp4", "caption": "Look"})
        assert resolver.resolve(event, FieldKind.VIDEO).caption == "Look"

    def test_blank_caption_ignored(self, resolver):
        event = Event(id="e1", payload={"audio": "https://example.com/a.mp3", "caption": "  "})
        assert resolver.resolve(event, FieldKind.AUDIO).caption is None

    def test_empty_url_is_absent(self, resolver, fetcher):
        """An empty URL does not trigger a fetch."""
        event = Event(id="e1", payload={"document": ""})

        assert resolver.resolve(event, FieldKind.DOCUMENT) is None
        assert fetcher.handles == []

    def test_fetch_failure_raises(self, resolver, fetcher):
        """Fetch failures surface as ResolutionError."""
        fetcher.failing.add("https://example.com/missing.pdf")
        event = Event(id="e1", payload={"document": "https://example.com/missing.pdf"})

        with pytest.raises(ResolutionError, match="missing.pdf"):
            resolver.resolve(event, FieldKind.DOCUMENT)
