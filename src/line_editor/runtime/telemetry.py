"""Telemetry helpers for the line editor, built on telelog.

Public surface:

``configure(...)`` -- adopt an explicit telelog config or a named preset
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LINE_EDITOR_"
_TRUTHY = {"1", "true", "yes", "on"}

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


@dataclass(frozen=True)
class TelemetrySettings:
    """Environment-driven defaults for the telelog configuration."""

    logger_name: str = "line_editor"
    level: str = "INFO"
    log_file: str = ""
    json: bool = False
    console: bool = True
    color: bool = True

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        def flag(name: str, default: bool) -> bool:
            raw = os.getenv(f"{ENV_PREFIX}{name}")
            return default if raw is None else raw.lower() in _TRUTHY

        return cls(
            logger_name=os.getenv(f"{ENV_PREFIX}LOGGER", cls.logger_name),
            level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", cls.level).upper(),
            log_file=os.getenv(f"{ENV_PREFIX}LOG_FILE", ""),
            json=flag("LOG_JSON", False),
            console=not flag("DISABLE_CONSOLE", False),
            color=not flag("NO_COLOR", False),
        )


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return repr(bytes(value))
    return str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _config_from_settings(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.color)
    if settings.json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    config.with_profiling(True)
    return config


def _config_from_preset(preset: str) -> Any:
    key = preset.lower()
    if key == "development":
        settings = TelemetrySettings(level="DEBUG")
    elif key == "production":
        settings = TelemetrySettings(
            console=False,
            log_file=os.getenv(f"{ENV_PREFIX}LOG_FILE") or "line_editor.log",
        )
    elif key == "quiet":
        settings = TelemetrySettings(level="ERROR", console=False)
    else:
        raise ValueError(f"Unknown preset '{preset}'.")
    return _config_from_settings(settings)


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    ``config`` and ``preset`` are mutually exclusive; with neither, settings
    are read from ``LINE_EDITOR_*`` environment variables.
    """

    global _CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _config_from_preset(preset)
    elif config is None:
        config = _config_from_settings(TelemetrySettings.from_env())

    _CONFIG = config
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    if _CONFIG is None:
        configure()
    logger_name = name or TelemetrySettings.from_env().logger_name
    logger = _LOGGERS.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _CONFIG)
        _LOGGERS[logger_name] = logger
    return logger


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, _pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` so callers can attach results."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            payload["component"] = self.component
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the wrapped block.

    ``component=True`` tracks the block under ``name``; a string tracks it
    under that component id. ``metadata`` is pushed as logger context for the
    duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log, name=name, component=component_name, metadata=dict(context)
    )
    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
