"""Textual front-end; ``controller`` is importable without Textual installed."""

from .controller import EditorUIHooks, LineEditController

__all__ = ["EditorUIHooks", "LineEditController"]
