"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .errors import InvalidLineIndexError, InvalidReplacementError

NEWLINE = b"\n"


def normalize_replacement(
    text: str | bytes | bytearray, *, encoding: str = "utf-8"
) -> bytes:
    """Return replacement bytes with at most one trailing newline removed.

    Line-oriented input (``input()``, ``readline``) often hands over the
    separator along with the text; anything beyond that single trailing byte
    is rejected.
    """

    if isinstance(text, str):
        try:
            data = text.encode(encoding)
        except (UnicodeEncodeError, LookupError) as exc:
            raise InvalidReplacementError(
                f"Replacement text cannot be encoded as {encoding}: {exc}"
            ) from exc
    else:
        data = bytes(text)
    if data.endswith(NEWLINE):
        data = data[:-1]
    if NEWLINE in data:
        raise InvalidReplacementError("Replacement text must be a single line")
    return data


def parse_line_index(raw: str) -> int:
    value = raw.strip()
    try:
        index = int(value)
    except ValueError:
        raise InvalidLineIndexError(raw) from None
    if index < 0:
        raise InvalidLineIndexError(raw)
    return index
