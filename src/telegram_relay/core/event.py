"""Event records and the field kinds they can carry."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


TEXT_LIMIT = 4096
CAPTION_LIMIT = 200


class FieldKind(Enum):
    """Content categories an event payload may populate.

    The value is both the payload key and the upload parameter name.
    """

    TEXT = "text"
    PHOTO = "photo"
    AUDIO = "audio"
    DOCUMENT = "document"
    VIDEO = "video"

    @property
    def is_binary(self) -> bool:
        return self is not FieldKind.TEXT


SEND_OPERATIONS: Mapping[FieldKind, str] = MappingProxyType({
    FieldKind.TEXT: "sendMessage",
    FieldKind.PHOTO: "sendPhoto",
    FieldKind.AUDIO: "sendAudio",
    FieldKind.DOCUMENT: "sendDocument",
    FieldKind.VIDEO: "sendVideo",
})


@dataclass(frozen=True)
class Event:
    """An inbound notification (immutable)."""

    id: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __init__(self, id: str, payload: Mapping[str, Any] | None = None):
        # Wrap payload so it cannot be mutated through the event
        object.__setattr__(self, "id", str(id))
        object.__setattr__(self, "payload", MappingProxyType(dict(payload or {})))

    def get(self, key: str, default: Any = None) -> Any:
        """Get a payload value by name."""
        return self.payload.get(key, default)
