"""Textual app hosting a single-file line editing session."""

from __future__ import annotations

try:  # pragma: no cover - imported only when the TUI is launched
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package (line-editor[tui]) to use the TUI"
    ) from exc

from line_editor.runtime import telemetry
from line_editor.session import EditSession

from .controller import EditorUIHooks, LineEditController


class LineEditorApp(App[None]):
    """Shows the file, takes a line number and replacement, saves on demand."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#contents {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#line-input {
		width: 16;
	}

	#text-input {
		width: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+s", "save", "Save"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: EditSession) -> None:
        super().__init__()
        self._session = session
        self.controller: LineEditController | None = None
        self._contents: Static | None = None
        self._status: Static | None = None
        self._logger = telemetry.get_logger("line_editor.tui")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Vertical():
            self._contents = Static("", id="contents", markup=False)
            yield self._contents
            with Horizontal():
                yield Input(placeholder="line", id="line-input")
                yield Input(placeholder="replacement text", id="text-input")
        self._status = Static("", id="status-line", markup=False)
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        hooks = EditorUIHooks(
            update_contents=self._update_contents,
            update_status=self._update_status,
            log=self._logger.debug,
        )
        self.controller = LineEditController(self._session, hooks)
        self.title = f"line-editor: {self._session.path}"
        self.query_one("#line-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "line-input":
            self.query_one("#text-input", Input).focus()
            return
        if not self.controller:
            return
        line_input = self.query_one("#line-input", Input)
        outcome = self.controller.submit(line_input.value, event.value)
        if outcome is not None:
            event.input.value = ""
            line_input.value = ""
            line_input.focus()

    def action_save(self) -> None:
        if self.controller:
            self.controller.save()

    def _update_contents(self, text: str) -> None:
        if self._contents:
            self._contents.update(text)

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)


def run(session: EditSession) -> None:
    LineEditorApp(session).run()


__all__ = ["LineEditorApp", "run"]
