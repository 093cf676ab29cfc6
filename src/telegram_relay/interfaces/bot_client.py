"""Abstract interface for the remote bot API."""

from abc import ABC, abstractmethod
from typing import Any, BinaryIO


class BotClient(ABC):
    """Abstract interface for calling bot API methods."""

    @abstractmethod
    def call(
        self,
        operation: str,
        params: dict[str, Any],
        files: dict[str, tuple[str, BinaryIO]] | None = None,
    ) -> Any:
        """Invoke an API method once.

        Args:
            operation: The API method name (e.g. "sendMessage").
            params: Form parameters.
            files: Optional uploads keyed by parameter name, as
                (filename, file object) pairs.

        Returns:
            The decoded response envelope.
        """
        pass
