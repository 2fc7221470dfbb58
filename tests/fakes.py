"""Hand-driven stand-ins for the Kivy clock and the platform URL bridge."""
from __future__ import annotations


class FakeEvent:
    def __init__(self, callback, due: float) -> None:
        self.callback = callback
        self.due = due
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeClock:
    """Replacement for ``Clock.schedule_once`` driven by :meth:`advance`."""

    def __init__(self) -> None:
        self.now = 0.0
        self.events: list[FakeEvent] = []

    def schedule(self, callback, delay: float) -> FakeEvent:
        event = FakeEvent(callback, self.now + delay)
        self.events.append(event)
        return event

    @property
    def pending(self) -> list[FakeEvent]:
        return [event for event in self.events if not event.cancelled]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for event in [event for event in self.events if event.due <= self.now]:
            self.events.remove(event)
            if not event.cancelled:
                event.callback()


class RecordingOpener:
    """URL bridge that answers from a table and records every call."""

    def __init__(self, openable=(), failing=(), failing_open=()) -> None:
        self.openable = set(openable)
        self.failing = set(failing)
        self.failing_open = set(failing_open)
        self.checked: list[str] = []
        self.opened: list[str] = []

    def can_open(self, uri: str) -> bool:
        self.checked.append(uri)
        if uri in self.failing:
            raise RuntimeError(f"can_open failed for {uri}")
        return uri in self.openable

    def open(self, uri: str) -> None:
        if uri in self.failing_open:
            raise RuntimeError(f"open failed for {uri}")
        self.opened.append(uri)
