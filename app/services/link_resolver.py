"""Open the first external link the device can handle, in priority order."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol, Tuple, Union

_logger = logging.getLogger(__name__)

IOS_CALENDAR_SCHEMES = ("googlecalendar://", "calshow://")
ANDROID_CALENDAR_URIS = (
    "intent://calendar.google.com/calendar/r#Intent;package=com.google.android.calendar;scheme=https;end",
    "content://com.android.calendar/time/",
)


class Platform(Enum):
    IOS = "ios"
    ANDROID = "android"
    OTHER = "other"


def detect_platform(name: str) -> Platform:
    """Map a ``kivy.utils.platform`` value onto :class:`Platform`."""

    normalized = (name or "").strip().lower()
    if normalized == "ios":
        return Platform.IOS
    if normalized == "android":
        return Platform.ANDROID
    return Platform.OTHER


class UrlOpener(Protocol):
    def can_open(self, uri: str) -> bool: ...

    def open(self, uri: str) -> None: ...


@dataclass(frozen=True)
class Opened:
    uri: str


@dataclass(frozen=True)
class NoneAvailable:
    pass


ResolveResult = Union[Opened, NoneAvailable]


def build_calendar_candidates(platform: Platform, fallback_url: str) -> Tuple[str, ...]:
    """Return native calendar links for *platform* followed by the web fallback."""

    if platform is Platform.IOS:
        native: Tuple[str, ...] = IOS_CALENDAR_SCHEMES
    elif platform is Platform.ANDROID:
        native = ANDROID_CALENDAR_URIS
    else:
        native = ()
    return native + (fallback_url,)


class LinkResolver:
    """Check candidate URIs one by one and open the first openable one."""

    def __init__(self, opener: UrlOpener) -> None:
        self.opener = opener

    def resolve_and_open(self, candidates: Iterable[str]) -> ResolveResult:
        for uri in candidates:
            try:
                if not self.opener.can_open(uri):
                    continue
                self.opener.open(uri)
            except Exception as exc:
                _logger.debug("Link candidate %s failed: %s", uri, exc)
                continue
            _logger.info("Opened external link %s", uri)
            return Opened(uri)
        _logger.info("No external link candidate could be opened")
        return NoneAvailable()

    def open_calendar(self, platform: Platform, fallback_url: str) -> ResolveResult:
        return self.resolve_and_open(build_calendar_candidates(platform, fallback_url))


__all__ = [
    "ANDROID_CALENDAR_URIS",
    "IOS_CALENDAR_SCHEMES",
    "LinkResolver",
    "NoneAvailable",
    "Opened",
    "Platform",
    "ResolveResult",
    "UrlOpener",
    "build_calendar_candidates",
    "detect_platform",
]
