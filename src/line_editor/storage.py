"""Load files into a ``TextBuffer`` and write them back."""

from __future__ import annotations

from pathlib import Path

from line_editor.buffer import FileTooLargeError, TextBuffer
from line_editor.runtime import telemetry


def load_buffer(path: str | Path, *, capacity: int) -> TextBuffer:
    """Read ``path`` into a new buffer.

    A file larger than ``capacity`` bytes is rejected with ``FileTooLargeError``
    rather than silently cut.
    """

    source = Path(path)
    with source.open("rb") as handle:
        data = handle.read(capacity + 1)
    if len(data) > capacity:
        raise FileTooLargeError(source, size=len(data), capacity=capacity)

    telemetry.record_event(
        "file.loaded",
        level="debug",
        data={"path": str(source), "size": len(data), "capacity": capacity},
    )
    return TextBuffer(data, capacity=capacity, name=source.name)


def save_buffer(path: str | Path, buffer: TextBuffer) -> int:
    """Overwrite ``path`` with the buffer's content; returns bytes written."""

    target = Path(path)
    content = buffer.to_bytes()
    with target.open("wb") as handle:
        handle.write(content)
    buffer.mark_clean()

    telemetry.record_event(
        "file.saved",
        level="debug",
        data={"path": str(target), "size": len(content), "version": buffer.version},
    )
    return len(content)


__all__ = ["load_buffer", "save_buffer"]
