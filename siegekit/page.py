"""A growable text buffer for page bodies."""

from __future__ import annotations

__all__ = ["Page"]

_INITIAL_SLACK = 24576


class Page:
    """Accumulates text, tracking its length and a reserved capacity."""

    def __init__(self, text: str = "") -> None:
        self._parts: list[str] = [text] if text else []
        self._length = len(text)
        self._size = self._length + _INITIAL_SLACK

    def concat(self, text: str, length: int | None = None) -> None:
        """Append the first ``length`` characters of text (all of it by default).

        Empty text or a negative length is ignored.
        """
        if not text:
            return
        if length is None:
            length = len(text)
        if length < 0:
            return
        if self._length + length > self._size:
            self._size += length + 1
        piece = text[:length]
        self._parts.append(piece)
        self._length += len(piece)

    def clear(self) -> None:
        """Drop the contents but keep the capacity."""
        self._parts.clear()
        self._length = 0

    def value(self) -> str:
        """Return the accumulated text."""
        joined = "".join(self._parts)
        self._parts = [joined] if joined else []
        return joined

    def size(self) -> int:
        """Return the reserved capacity."""
        return self._size

    def __len__(self) -> int:
        return self._length