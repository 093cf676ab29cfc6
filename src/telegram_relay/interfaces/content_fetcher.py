"""Abstract interface for fetching binary content."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO


@dataclass
class BinaryHandle:
    """A temporary file holding downloaded content."""

    file: BinaryIO
    filename: str
    path: str | None = None

    def release(self) -> None:
        """Close and delete the temporary file. Safe to call twice."""
        if not self.file.closed:
            self.file.close()
        if self.path and os.path.exists(self.path):
            os.unlink(self.path)


class ContentFetcher(ABC):
    """Abstract interface for loading referenced content."""

    @abstractmethod
    def fetch(self, url: str) -> BinaryHandle:
        """Download url into a temporary handle.

        Raises:
            ResolutionError: If the content could not be fetched.
        """
        pass
