"""UI-agnostic controller that drives an ``EditSession`` from widget callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from line_editor.buffer import ReplaceOutcome, TextBufferError, parse_line_index
from line_editor.session import EditSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorUIHooks:
    """Callbacks invoked by the controller to update the host widgets."""

    update_contents: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class LineEditController:
    """Turns raw widget input into session edits and status messages.

    Buffer errors are reported through ``hooks.update_status`` and never
    propagate to the UI.
    """

    def __init__(self, session: EditSession, hooks: EditorUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._refresh()

    def submit(self, raw_line: str, text: str) -> Optional[ReplaceOutcome]:
        self._log("submit ->", line=raw_line, size=len(text))
        try:
            line_index = parse_line_index(raw_line)
            outcome = self.session.apply(line_index, text)
        except TextBufferError as exc:
            self.hooks.update_status(f"error: {exc}")
            self._log("submit <-", status="error", reason=exc)
            return None

        self._refresh()
        if outcome.truncated:
            status = f"line {line_index} replaced, truncated by {outcome.dropped} byte(s)"
        else:
            status = f"line {line_index} replaced"
        self.hooks.update_status(status)
        self._log("submit <-", status="ok", delta=outcome.delta, dropped=outcome.dropped)
        return outcome

    def save(self) -> bool:
        try:
            written = self.session.save()
        except OSError as exc:
            self.hooks.update_status(f"error: {exc}")
            self._log("save <-", status="error", reason=exc)
            return False
        self.hooks.update_status(
            f"saved {self.session.path}" if written else "no changes to save"
        )
        self._log("save <-", written=written)
        return written

    def _refresh(self) -> None:
        self.hooks.update_contents(self.session.render())

    def _log(self, label: str, **fields: object) -> None:
        details = " ".join(f"{key}={value}" for key, value in fields.items())
        self.hooks.log(f"{label} {details}".rstrip())


__all__ = ["EditorUIHooks", "LineEditController"]
