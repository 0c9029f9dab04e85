"""Runtime services shared across the package (telemetry)."""

from . import telemetry

__all__ = ["telemetry"]
