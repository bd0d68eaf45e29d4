"""One read-edit-write cycle over a single file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from line_editor.buffer import ReplaceOutcome, TextBuffer
from line_editor.config import EditorSettings
from line_editor.runtime import telemetry

from .storage import load_buffer, save_buffer


class EditSession:
    """Ties a file path to the buffer loaded from it."""

    def __init__(
        self,
        path: str | Path,
        buffer: TextBuffer,
        settings: Optional[EditorSettings] = None,
    ) -> None:
        self.path = Path(path)
        self.buffer = buffer
        self.settings = settings or EditorSettings()
        self.logger = telemetry.get_logger("line_editor.session")

    @classmethod
    def open(
        cls, path: str | Path, settings: Optional[EditorSettings] = None
    ) -> "EditSession":
        resolved = settings or EditorSettings.from_env()
        buffer = load_buffer(path, capacity=resolved.capacity)
        return cls(path, buffer, resolved)

    @property
    def is_dirty(self) -> bool:
        return self.buffer.dirty

    def render(self) -> str:
        lines = [
            line.decode(self.settings.encoding, errors="replace")
            for line in self.buffer.lines()
        ]
        if not self.settings.show_line_numbers:
            return "\n".join(lines)
        width = len(str(len(lines) - 1))
        return "\n".join(
            f"{index:>{width}} | {line}" for index, line in enumerate(lines)
        )

    def apply(self, line_index: int, text: str | bytes) -> ReplaceOutcome:
        outcome = self.buffer.replace_line(
            line_index, text, encoding=self.settings.encoding
        )
        self.logger.info(
            f"replaced line {line_index} in {self.path} "
            f"({outcome.old_length} -> {outcome.new_length} bytes)"
        )
        return outcome

    def save(self) -> bool:
        """Write the buffer back when it changed; returns whether it wrote."""

        if not self.buffer.dirty:
            return False
        save_buffer(self.path, self.buffer)
        return True


__all__ = ["EditSession"]
