"""Command-line entry point: show a file, replace one line, write it back."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from line_editor.buffer import ReplaceOutcome, TextBufferError, parse_line_index
from line_editor.config import EditorSettings
from line_editor.runtime import telemetry
from line_editor.session import EditSession

EXIT_OK = 0
EXIT_FAILED = 1

Prompt = Callable[[str], str]


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="line-editor",
        description="Replace a single line of a small text file in place.",
    )
    parser.add_argument("path", help="File to edit")
    parser.add_argument(
        "--line",
        help="Zero-based line number to replace (prompted for when omitted)",
    )
    parser.add_argument(
        "--text",
        help="Replacement text for the line (prompted for when omitted)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Buffer capacity in bytes, terminator included "
        "(default: $LINE_EDITOR_CAPACITY or 1024)",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding used for replacement text (default: utf-8)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the edited content instead of writing the file",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Open the Textual interface instead of prompting",
    )
    return parser.parse_args(argv)


def _report_outcome(outcome: ReplaceOutcome, err: TextIO) -> None:
    if outcome.truncated:
        print(
            f"warning: replacement truncated by {outcome.dropped} byte(s)",
            file=err,
        )


def run(
    argv: Optional[Sequence[str]] = None,
    *,
    prompt: Prompt = input,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Execute one read-edit-write cycle and return the process exit code."""

    out = out or sys.stdout
    err = err or sys.stderr
    args = _parse_args(argv)
    logger = telemetry.get_logger("line_editor.cli")

    try:
        settings = EditorSettings.from_env().with_overrides(
            capacity=args.capacity, encoding=args.encoding
        )
        session = EditSession.open(args.path, settings)
    except (OSError, ValueError, TextBufferError) as exc:
        print(f"error: {exc}", file=err)
        return EXIT_FAILED

    if args.tui:
        try:
            from line_editor.adapters.textual.app import run as run_tui
        except RuntimeError as exc:
            print(f"error: {exc}", file=err)
            return EXIT_FAILED
        run_tui(session)
        return EXIT_OK

    try:
        if args.line is None or args.text is None:
            print(f"Contents:\n{session.render()}\n", file=out)
        raw_line = args.line if args.line is not None else prompt("Line number: ")
        line_index = parse_line_index(raw_line)
        text = args.text if args.text is not None else prompt("Replacement: ")
        outcome = session.apply(line_index, text)
    except TextBufferError as exc:
        print(f"error: {exc}", file=err)
        logger.warning(f"edit rejected: {exc}")
        return EXIT_FAILED
    except EOFError:
        print("error: no input", file=err)
        return EXIT_FAILED

    _report_outcome(outcome, err)
    if args.dry_run:
        out.write(session.buffer.decode(settings.encoding))
        return EXIT_OK

    try:
        session.save()
    except OSError as exc:
        print(f"error: {exc}", file=err)
        return EXIT_FAILED
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> None:
    sys.exit(run(argv))


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
