"""Editor settings resolved from ``LINE_EDITOR_*`` environment variables."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from line_editor.buffer import DEFAULT_CAPACITY, check_capacity

ENV_PREFIX = "LINE_EDITOR_"


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_flag(env: Mapping[str, str], key: str, fallback: bool) -> bool:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class EditorSettings:
    capacity: int = DEFAULT_CAPACITY
    encoding: str = "utf-8"
    show_line_numbers: bool = True

    def __post_init__(self) -> None:
        check_capacity(self.capacity)
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {self.encoding}") from exc

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        source = os.environ if env is None else env
        return cls(
            capacity=_env_int(source, "CAPACITY", DEFAULT_CAPACITY),
            encoding=source.get(f"{ENV_PREFIX}ENCODING", "utf-8"),
            show_line_numbers=_env_flag(source, "LINE_NUMBERS", True),
        )

    def with_overrides(
        self, *, capacity: Optional[int] = None, encoding: Optional[str] = None
    ) -> "EditorSettings":
        """Return a copy with any non-``None`` override applied."""

        changes: dict[str, object] = {}
        if capacity is not None:
            changes["capacity"] = capacity
        if encoding is not None:
            changes["encoding"] = encoding
        return replace(self, **changes) if changes else self


__all__ = ["EditorSettings"]
