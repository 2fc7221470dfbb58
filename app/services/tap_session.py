"""Rapid-tap session gesture on the profile badge with automatic expiry."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional, Protocol

_logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[Callable[[], None], float], TimerHandle]


class TapState(Enum):
    IDLE = "idle"
    ARMED = "armed"


class TapSessionController:
    """Track taps on the profile badge.

    The first tap arms the badge, a second tap inside *window* seconds is the
    sign-out gesture: ``on_confirm`` fires once and the controller returns to
    idle straight away. Without a second tap the badge disarms itself when
    the window elapses.
    """

    def __init__(
        self,
        schedule: Scheduler,
        *,
        window: float = 3.0,
        on_confirm: Optional[Callable[[], None]] = None,
        on_change: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self.window = window
        self._schedule = schedule
        self._on_confirm = on_confirm or (lambda: None)
        self._on_change = on_change or (lambda _active: None)
        self.state = TapState.IDLE
        self.count = 0
        self._handle: Optional[TimerHandle] = None
        self._closed = False

    @property
    def active(self) -> bool:
        return self.state is TapState.ARMED

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def on_tap(self) -> None:
        if self._closed:
            return
        self.count += 1
        self._cancel_timer()
        if self.count > 1:
            # Reset before confirming: the controller is idle even if on_confirm raises.
            _logger.debug("Second tap inside %.1fs window, signing out", self.window)
            self._reset()
            self._on_confirm()
            return
        self._handle = self._schedule(self.expire, self.window)
        self._set_state(TapState.ARMED)

    def expire(self) -> None:
        """Expiry callback; a no-op once the controller is idle or torn down."""

        if self._closed:
            return
        self._handle = None
        self._reset()

    def teardown(self) -> None:
        """Cancel the pending timer and ignore every later event."""

        self._cancel_timer()
        self._closed = True

    def __enter__(self) -> "TapSessionController":
        return self

    def __exit__(self, *_exc: Any) -> None:
        self.teardown()

    def _reset(self) -> None:
        self.count = 0
        self._set_state(TapState.IDLE)

    def _set_state(self, state: TapState) -> None:
        if state is self.state:
            return
        self.state = state
        self._on_change(self.active)

    def _cancel_timer(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()


__all__ = ["Scheduler", "TapSessionController", "TapState", "TimerHandle"]
