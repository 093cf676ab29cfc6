"""Payload resolver for extracting typed content from events."""

import logging
from dataclasses import dataclass
from typing import Union

from ..interfaces import BinaryHandle, ContentFetcher
from .event import Event, FieldKind

logger = logging.getLogger(__name__)

CAPTION_KEY = "caption"


@dataclass(frozen=True)
class TextPayload:
    """Plain text content for the text kind."""

    kind: FieldKind
    text: str


@dataclass(frozen=True)
class BinaryPayload:
    """Downloaded content for a photo/audio/document/video kind.

    The handle is owned by the caller and must be released after use.
    """

    kind: FieldKind
    handle: BinaryHandle
    caption: str | None = None


ResolvedPayload = Union[TextPayload, BinaryPayload]


def _present(value) -> str | None:
    """Return value as a string, or None if missing or blank."""
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    if not text.strip():
        return None
    return text


class PayloadResolver:
    """Extracts one field kind at a time from an event payload."""

    def __init__(self, fetcher: ContentFetcher):
        """
        Initialize the resolver.

        Args:
            fetcher: Downloads URL references into temporary handles.
        """
        self.fetcher = fetcher

    def resolve(self, event: Event, kind: FieldKind) -> ResolvedPayload | None:
        """
        Resolve a field kind from an event.

        Args:
            event: The inbound event.
            kind: Which field to extract.

        Returns:
            The resolved payload, or None if the field is absent or blank.

        Raises:
            ResolutionError: If a binary reference could not be fetched.
        """
        value = _present(event.get(kind.value))
        if value is None:
            return None

        if kind is FieldKind.TEXT:
            return TextPayload(kind=kind, text=value)

        logger.debug(f"[{event.id}] Fetching {kind.value} from {value}")
        handle = self.fetcher.fetch(value)
        return BinaryPayload(
            kind=kind,
            handle=handle,
            caption=_present(event.get(CAPTION_KEY)),
        )
