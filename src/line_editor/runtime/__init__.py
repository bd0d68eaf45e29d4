"""Runtime services (telemetry) shared across the line editor."""

from . import telemetry

__all__ = ["telemetry"]
