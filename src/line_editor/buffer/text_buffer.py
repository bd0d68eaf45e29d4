"""Owned, capacity-bounded text buffer wrapping the line replacer."""

from __future__ import annotations

from typing import Tuple

from line_editor.runtime import telemetry

from . import splice
from .errors import BufferOverflowError
from .splice import LineSpan, ReplaceOutcome
from .validation import normalize_replacement

DEFAULT_CAPACITY = 1024


class TextBuffer:
    """Newline-delimited bytes plus the capacity they must respect.

    The logical length is ``len(buffer)``. Loaded content may fill the whole
    capacity; every replacement leaves room for the terminator slot.
    ``version`` increases with every successful replacement and ``dirty``
    stays set until the caller persists the content and calls ``mark_clean``.
    """

    def __init__(
        self,
        data: bytes | bytearray = b"",
        *,
        capacity: int = DEFAULT_CAPACITY,
        name: str = "buffer",
    ) -> None:
        splice.check_capacity(capacity)
        if len(data) > capacity:
            raise BufferOverflowError(size=len(data), capacity=capacity)
        self.name = name
        self.capacity = capacity
        self.version = 0
        self.dirty = False
        self._data = bytearray(data)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        capacity: int = DEFAULT_CAPACITY,
        encoding: str = "utf-8",
        name: str = "buffer",
    ) -> "TextBuffer":
        return cls(text.encode(encoding), capacity=capacity, name=name)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"TextBuffer(name={self.name!r}, size={len(self._data)}, "
            f"capacity={self.capacity}, version={self.version})"
        )

    @property
    def line_count(self) -> int:
        return splice.count_lines(self._data)

    @property
    def remaining(self) -> int:
        """Bytes a replacement can still add before it has to be truncated."""

        return max(0, self.capacity - splice.TERMINATOR_SLOTS - len(self._data))

    def span(self, line_index: int) -> LineSpan:
        return splice.find_line_span(self._data, line_index)

    def get_line(self, line_index: int) -> bytes:
        found = self.span(line_index)
        return bytes(self._data[found.start : found.end])

    def lines(self) -> Tuple[bytes, ...]:
        return tuple(bytes(self._data).split(splice.NEWLINE))

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def decode(self, encoding: str = "utf-8") -> str:
        return self._data.decode(encoding, errors="replace")

    def replace_line(
        self,
        line_index: int,
        replacement: str | bytes | bytearray,
        *,
        encoding: str = "utf-8",
    ) -> ReplaceOutcome:
        """Replace one line, truncating the new content if it would not fit.

        Raises the ``ReplaceError`` family on failure; the buffer is left
        unchanged in that case.
        """

        payload = normalize_replacement(replacement, encoding=encoding)
        with telemetry.span(
            "buffer::replace_line",
            component="buffer",
            metadata={"buffer": self.name, "line": line_index},
        ) as handle:
            outcome = splice.replace_line(
                self._data, self.capacity, line_index, payload
            )
            handle.add_metadata("delta", outcome.delta)

        self.version += 1
        self.dirty = True
        if outcome.truncated:
            telemetry.record_event(
                "line.truncated",
                level="warning",
                data={
                    "buffer": self.name,
                    "line": line_index,
                    "dropped": outcome.dropped,
                    "capacity": self.capacity,
                },
            )
        return outcome

    def mark_clean(self) -> None:
        self.dirty = False


__all__ = ["DEFAULT_CAPACITY", "TextBuffer"]
