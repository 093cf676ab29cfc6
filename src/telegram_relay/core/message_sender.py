"""Message sender performing one bot API call per send."""

import logging
from dataclasses import dataclass
from typing import Any, BinaryIO

import requests

from ..interfaces import BotClient, ValueResolver
from .event import Event, FieldKind, SEND_OPERATIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendOutcome:
    """Result of a single send. response holds the raw envelope."""

    ok: bool
    response: Any = None


class MessageSender:
    """Sends one message per call and interprets the response envelope."""

    def __init__(self, client: BotClient, values: ValueResolver):
        """
        Initialize the sender.

        Args:
            client: Client used to reach the bot API.
            values: Resolves the destination chat_id per event.
        """
        self.client = client
        self.values = values

    def send(
        self,
        event: Event,
        kind: FieldKind,
        params: dict[str, Any],
        files: dict[str, tuple[str, BinaryIO]] | None = None,
    ) -> SendOutcome:
        """
        Send a message of the given kind.

        The chat_id is always attached. No retry is attempted.

        Args:
            event: The event being relayed (context for chat_id).
            kind: Field kind selecting the API operation.
            params: Operation-specific parameters (text, caption, ...).
            files: Optional upload for binary kinds.

        Returns:
            SendOutcome; ok only when the envelope has ok == true.
        """
        operation = SEND_OPERATIONS[kind]
        params = {**params, "chat_id": self.values.resolve(event, "chat_id")}

        try:
            response = self.client.call(operation, params, files=files)
        except requests.RequestException as e:
            logger.error(f"[{event.id}] {operation} failed: {e}")
            return SendOutcome(ok=False, response={"ok": False, "description": str(e)})

        if isinstance(response, dict) and response.get("ok") is True:
            logger.debug(f"[{event.id}] {operation} ok")
            return SendOutcome(ok=True, response=response)

        logger.error(f"[{event.id}] {operation} rejected: {response!r}")
        return SendOutcome(ok=False, response=response)
