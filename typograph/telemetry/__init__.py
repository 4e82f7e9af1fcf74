"""Telemetry helpers.

This package emits stage-level run events for deterministic auditing.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
