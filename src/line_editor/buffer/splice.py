"""In-place replacement of a single line inside a capacity-bounded byte buffer.

Lines are delimited by the single byte ``\\n``. A buffer holding ``k``
newlines has ``k + 1`` lines, so an empty buffer still has one (empty) line
and a trailing newline introduces a final empty line.

A buffer of capacity ``C`` may hold up to ``C`` bytes. Every replacement
reserves one slot for the end-of-text terminator, so after an edit the buffer
holds at most ``C - TERMINATOR_SLOTS`` bytes.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InsufficientCapacityError, LineNotFoundError

NEWLINE = b"\n"
TERMINATOR_SLOTS = 1


@dataclass(frozen=True, slots=True)
class LineSpan:
    """Half-open ``[start, end)`` range of one line, newline excluded."""

    index: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class ReplaceOutcome:
    """Result of a successful replacement.

    ``dropped`` is non-zero when the replacement had to be shortened to fit
    the capacity; callers should surface that as a warning.
    """

    line_index: int
    line_start: int
    old_length: int
    new_length: int
    dropped: int = 0

    @property
    def delta(self) -> int:
        return self.new_length - self.old_length

    @property
    def truncated(self) -> bool:
        return self.dropped > 0


def check_capacity(capacity: int) -> None:
    if capacity < TERMINATOR_SLOTS:
        raise ValueError(f"capacity must be at least {TERMINATOR_SLOTS}, got {capacity}")


def count_lines(buffer: bytes | bytearray) -> int:
    return buffer.count(NEWLINE) + 1


def find_line_span(buffer: bytes | bytearray, line_index: int) -> LineSpan:
    """Locate line ``line_index`` by counting newlines from the start."""

    if line_index < 0:
        raise LineNotFoundError(line_index, count_lines(buffer))

    start = 0
    for _ in range(line_index):
        newline = buffer.find(NEWLINE, start)
        if newline == -1:
            raise LineNotFoundError(line_index, count_lines(buffer))
        start = newline + 1

    end = buffer.find(NEWLINE, start)
    if end == -1:
        end = len(buffer)
    return LineSpan(index=line_index, start=start, end=end)


def replace_line(
    buffer: bytearray,
    capacity: int,
    line_index: int,
    replacement: bytes | bytearray,
) -> ReplaceOutcome:
    """Replace the content of one line of ``buffer`` in place.

    Parameters
    ----------
    buffer:
        Caller-owned byte container; mutated only on success.
    capacity:
        Maximum size of the buffer including the terminator slot.
    line_index:
        Zero-based ordinal of an existing line.
    replacement:
        New line content. Must not contain ``\\n`` (see
        ``validation.normalize_replacement``).

    Raises
    ------
    LineNotFoundError
        ``line_index`` is negative or not below the line count.
    InsufficientCapacityError
        Even an empty replacement would not fit next to the remaining lines.
    """

    check_capacity(capacity)

    span = find_line_span(buffer, line_index)
    head_len = span.start
    tail_len = len(buffer) - span.end
    fixed = head_len + tail_len + TERMINATOR_SLOTS
    if fixed > capacity:
        raise InsufficientCapacityError(
            line_index=line_index, required=fixed, capacity=capacity
        )

    available = capacity - fixed
    new_length = min(len(replacement), available)
    dropped = len(replacement) - new_length

    # Slice assignment moves the tail (overlap-safe) and writes the new bytes.
    buffer[span.start : span.end] = replacement[:new_length]

    return ReplaceOutcome(
        line_index=line_index,
        line_start=span.start,
        old_length=span.length,
        new_length=new_length,
        dropped=dropped,
    )


__all__ = [
    "TERMINATOR_SLOTS",
    "LineSpan",
    "ReplaceOutcome",
    "check_capacity",
    "count_lines",
    "find_line_span",
    "replace_line",
]
