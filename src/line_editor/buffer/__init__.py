"""Capacity-bounded text buffer and the in-place line replacer."""

from .errors import (
    BufferOverflowError,
    FileTooLargeError,
    InsufficientCapacityError,
    InvalidLineIndexError,
    InvalidReplacementError,
    LineNotFoundError,
    ReplaceError,
    TextBufferError,
)
from .splice import (
    TERMINATOR_SLOTS,
    LineSpan,
    ReplaceOutcome,
    check_capacity,
    count_lines,
    find_line_span,
    replace_line,
)
from .text_buffer import DEFAULT_CAPACITY, TextBuffer
from .validation import normalize_replacement, parse_line_index

__all__ = [
    "DEFAULT_CAPACITY",
    "TextBuffer",
    "TERMINATOR_SLOTS",
    "LineSpan",
    "ReplaceOutcome",
    "check_capacity",
    "count_lines",
    "find_line_span",
    "replace_line",
    "normalize_replacement",
    "parse_line_index",
    "TextBufferError",
    "ReplaceError",
    "LineNotFoundError",
    "InsufficientCapacityError",
    "InvalidReplacementError",
    "InvalidLineIndexError",
    "BufferOverflowError",
    "FileTooLargeError",
]
