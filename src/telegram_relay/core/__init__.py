"""Core components for the Telegram relay."""

from .event import Event, FieldKind, SEND_OPERATIONS, TEXT_LIMIT, CAPTION_LIMIT
from .chunk_splitter import ChunkSplitter, split_text, truncate
from .payload_resolver import PayloadResolver, ResolvedPayload, TextPayload, BinaryPayload
from .message_sender import MessageSender, SendOutcome

__all__ = [
    "Event",
    "FieldKind",
    "SEND_OPERATIONS",
    "TEXT_LIMIT",
    "CAPTION_LIMIT",
    "ChunkSplitter",
    "split_text",
    "truncate",
    "PayloadResolver",
    "ResolvedPayload",
    "TextPayload",
    "BinaryPayload",
    "MessageSender",
    "SendOutcome",
]
