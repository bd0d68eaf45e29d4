"""Error taxonomy shared by the buffer layer and its callers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class TextBufferError(RuntimeError):
    """Base class for every failure raised by ``line_editor.buffer``."""

    def __init__(self, message: str, *, line_index: int | None = None) -> None:
        super().__init__(message)
        self.line_index = line_index


class ReplaceError(TextBufferError):
    """Raised when a line replacement cannot be applied.

    The buffer is guaranteed to be untouched when any subclass is raised.
    """


class LineNotFoundError(ReplaceError):
    def __init__(self, line_index: int, line_count: int) -> None:
        super().__init__(
            f"Line {line_index} does not exist (buffer has {line_count} line(s))",
            line_index=line_index,
        )
        self.line_count = line_count


class InsufficientCapacityError(ReplaceError):
    def __init__(self, *, line_index: int, required: int, capacity: int) -> None:
        super().__init__(
            f"Buffer needs {required} byte(s) but capacity is {capacity}",
            line_index=line_index,
        )
        self.required = required
        self.capacity = capacity


class InvalidReplacementError(ReplaceError, ValueError):
    """Replacement text contains a line separator."""


class InvalidLineIndexError(TextBufferError, ValueError):
    """User supplied something that is not a non-negative line number."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid line number: {raw!r}")
        self.raw = raw


class BufferOverflowError(TextBufferError):
    """Content does not fit the buffer capacity."""

    def __init__(self, *, size: int, capacity: int, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or f"Content of {size} byte(s) exceeds capacity {capacity}"
        )
        self.size = size
        self.capacity = capacity


class FileTooLargeError(BufferOverflowError):
    def __init__(self, path: Path, *, size: int, capacity: int) -> None:
        super().__init__(
            size=size,
            capacity=capacity,
            message=f"{path} is larger than the {capacity} byte buffer limit",
        )
        self.path = path


__all__ = [
    "TextBufferError",
    "ReplaceError",
    "LineNotFoundError",
    "InsufficientCapacityError",
    "InvalidReplacementError",
    "InvalidLineIndexError",
    "BufferOverflowError",
    "FileTooLargeError",
]
