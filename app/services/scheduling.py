"""Adapters between the Kivy clock and the plain callables used by services."""
from __future__ import annotations

from typing import Callable

from kivy.clock import Clock, ClockEvent


def clock_scheduler(callback: Callable[[], None], delay: float) -> ClockEvent:
    return Clock.schedule_once(lambda *_: callback(), delay)


def run_on_ui(fn: Callable[[], None]) -> None:
    """Run *fn* on the next frame of the UI thread."""

    Clock.schedule_once(lambda *_: fn())


__all__ = ["clock_scheduler", "run_on_ui"]
