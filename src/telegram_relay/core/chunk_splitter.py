"""Chunk splitter for breaking long text into message-sized segments."""

import re
from dataclasses import dataclass, field


def truncate(text: str, limit: int) -> str:
    """Return the first ``limit`` characters of text."""
    return text[:limit]


@dataclass
class ChunkSplitter:
    """Splits text into chunks of at most max_length characters.

    Prefers breaking on word boundaries. A word longer than max_length is
    cut into max_length pieces.
    """

    max_length: int = 4096
    _pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.max_length < 1:
            raise ValueError(f"max_length must be >= 1, got {self.max_length}")

        n = self.max_length
        # Alternatives in priority order: an unbreakable word of exactly n,
        # the longest run ending at a word boundary or end of text, a hard cut.
        self._pattern = re.compile(
            rf"\w{{{n}}}|.{{1,{n}}}(?=\b|\Z)|.{{1,{n}}}",
            re.DOTALL,
        )

    def split(self, text: str) -> list[str]:
        """
        Split text into stripped, non-empty chunks.

        Args:
            text: The text to split.

        Returns:
            Ordered list of chunks, each <= max_length characters.
            Empty if the text is blank.
        """
        chunks = []
        pos = 0

        while pos < len(text):
            match = self._pattern.match(text, pos)
            piece = match.group(0)
            pos = match.end()

            piece = piece.strip()
            if piece:
                chunks.append(piece)

        return chunks


def split_text(text: str, max_length: int) -> list[str]:
    """Split text with a one-off ChunkSplitter."""
    return ChunkSplitter(max_length=max_length).split(text)
