"""Centralised runtime settings for the SpeakPlan shell.

The settings aggregate the few tunables shared by the screens and the
interaction controllers. Values can be overridden by environment variables so
builds for different stores or test devices do not require code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CALENDAR_URL = "https://calendar.google.com/calendar/r"


def _load_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_str(name: str, default: str) -> str:
    value = (os.environ.get(name) or "").strip()
    return value or default


@dataclass(frozen=True)
class AppSettings:
    """Holds runtime tunables for the main screen controllers."""

    tap_window: float = 3.0
    calendar_url: str = DEFAULT_CALENDAR_URL
    min_password_length: int = 6


def load_settings() -> AppSettings:
    """Load the settings considering environment overrides."""

    return AppSettings(
        tap_window=_load_float("SPEAKPLAN_TAP_WINDOW", 3.0),
        calendar_url=_load_str("SPEAKPLAN_CALENDAR_URL", DEFAULT_CALENDAR_URL),
        min_password_length=_load_int("SPEAKPLAN_MIN_PASSWORD", 6),
    )


settings = load_settings()


__all__ = ["AppSettings", "DEFAULT_CALENDAR_URL", "settings", "load_settings"]
