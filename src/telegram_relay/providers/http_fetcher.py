"""URL-backed content fetcher."""

import logging
import os
import tempfile
from urllib.parse import urlparse

import requests

from ..errors import ResolutionError
from ..interfaces import BinaryHandle, ContentFetcher

logger = logging.getLogger(__name__)


class HttpContentFetcher(ContentFetcher):
    """Downloads remote content into temporary files."""

    CHUNK_SIZE = 64 * 1024
    MAX_STEM = 64
    MAX_SUFFIX = 16

    def __init__(self, timeout: float = 60.0, session: requests.Session | None = None):
        """
        Initialize the fetcher.

        Args:
            timeout: Seconds to wait for the remote server.
            session: Optional requests session to reuse connections.
        """
        self.timeout = timeout
        self.session = session or requests.Session()

    @staticmethod
    def filename_for(url: str) -> str:
        """Derive an upload filename from the URL path."""
        name = os.path.basename(urlparse(url).path)
        return name or "file"

    def fetch(self, url: str) -> BinaryHandle:
        """
        Download url into a temporary file.

        Args:
            url: The content URL.

        Returns:
            BinaryHandle positioned at the start of the content.

        Raises:
            ResolutionError: On network errors, a non-2xx status, or a
                local I/O error creating or writing the temporary file.
        """
        filename = self.filename_for(url)
        stem, ext = os.path.splitext(filename)
        handle = None

        try:
            # Keep the temp file name well under the filesystem limit
            tmp = tempfile.NamedTemporaryFile(
                prefix=f"{stem[:self.MAX_STEM]}-",
                suffix=ext[:self.MAX_SUFFIX],
                delete=False,
            )
            handle = BinaryHandle(file=tmp, filename=filename, path=tmp.name)

            with self.session.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                for block in response.iter_content(chunk_size=self.CHUNK_SIZE):
                    tmp.write(block)
            tmp.flush()
        except (requests.RequestException, OSError) as e:
            if handle is not None:
                handle.release()
            raise ResolutionError(url, str(e)) from e

        tmp.seek(0)
        logger.debug(f"Fetched {url} ({os.path.getsize(tmp.name)} bytes)")
        return handle
