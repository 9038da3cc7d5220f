"""Append-only text buffer with position bookmarks."""

from __future__ import annotations


class TextSink:
    """Growable character buffer that every writer operation goes through.

    Content is kept as a list of chunks and joined lazily; an insert
    flattens the buffer once so that bookmarks stay plain character offsets.
    """

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def append(self, text: str | None) -> None:
        if not text:
            return
        self._chunks.append(text)
        self._length += len(text)

    def append_line(self, text: str | None = "") -> None:
        self.append(text)
        self.append("\n")

    def append_char(self, c: str, count: int = 1) -> None:
        if len(c) != 1:
            raise ValueError(f"Expected a single character, got {c!r}")
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self.append(c * count)

    def bookmark(self) -> int:
        """Return the current end-of-buffer position."""
        return self._length

    def insert_at(self, bookmark: int, text: str) -> None:
        """Insert *text* at *bookmark*, shifting everything after it."""
        if bookmark < 0 or bookmark > self._length:
            raise IndexError(f"Bookmark {bookmark} outside buffer of length {self._length}")
        if not text:
            return
        flat = self.render()
        self._chunks = [flat[:bookmark], text, flat[bookmark:]]
        self._length += len(text)

    def last_char(self) -> str | None:
        for chunk in reversed(self._chunks):
            if chunk:
                return chunk[-1]
        return None

    def render(self) -> str:
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""
