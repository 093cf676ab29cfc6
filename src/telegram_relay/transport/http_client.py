"""Telegram Bot API client over HTTP."""

import logging
from typing import Any, BinaryIO

import requests

from ..interfaces import BotClient

logger = logging.getLogger(__name__)


class TelegramHttpClient(BotClient):
    """Bot client posting to https://<host>/bot<token>/<method>."""

    def __init__(
        self,
        auth_token: str,
        api_url: str = "https://api.telegram.org",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ):
        """
        Initialize the client.

        Args:
            auth_token: Bot token.
            api_url: Base URL of the bot API.
            timeout: Seconds to wait for each call.
            session: Optional requests session to reuse connections.
        """
        self.auth_token = auth_token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def method_url(self, operation: str) -> str:
        """Build the endpoint URL for an API method."""
        return f"{self.api_url}/bot{self.auth_token}/{operation}"

    def call(
        self,
        operation: str,
        params: dict[str, Any],
        files: dict[str, tuple[str, BinaryIO]] | None = None,
    ) -> Any:
        """
        POST an API method and decode the response envelope.

        Non-2xx responses are not raised; the API reports failures in the
        envelope. A body that isn't JSON is wrapped as a failed envelope.

        Raises:
            requests.RequestException: On connection errors or timeouts.
        """
        logger.debug(f"POST {operation} ({', '.join(sorted(params))})")
        response = self.session.post(
            self.method_url(operation),
            data=params,
            files=files,
            timeout=self.timeout,
        )

        try:
            return response.json()
        except ValueError:
            return {
                "ok": False,
                "error_code": response.status_code,
                "description": response.text,
            }

    def list_chats(self) -> list[dict[str, Any]]:
        """
        List chats the bot has recently seen, via getUpdates.

        Returns:
            List of {"id": chat id, "text": title or full name}, one per chat.

        Raises:
            RuntimeError: If the API rejects the call.
        """
        envelope = self.call("getUpdates", {})
        if not isinstance(envelope, dict) or envelope.get("ok") is not True:
            raise RuntimeError(f"getUpdates failed: {envelope!r}")

        chats = []
        seen = set()
        for update in envelope.get("result", []):
            chat = (update.get("message") or update.get("channel_post") or {}).get("chat", {})
            chat_id = chat.get("id")
            if chat_id is None or chat_id in seen:
                continue
            seen.add(chat_id)

            name = f"{chat.get('first_name', '')} {chat.get('last_name', '')}".strip()
            chats.append({"id": chat_id, "text": chat.get("title") or name})

        return chats
