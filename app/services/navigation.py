"""Route stack over a Kivy ``ScreenManager``."""
from __future__ import annotations

from typing import List

ROUTES = ("splash", "login", "signup", "main")


class UnknownRouteError(KeyError):
    """Raised when a route has no registered screen."""


class Navigator:
    """Push, replace and pop screens by name.

    *manager* only needs a writable ``current`` attribute, which keeps the
    stack usable without a window.
    """

    def __init__(self, manager, *, routes=ROUTES) -> None:
        self._manager = manager
        self._routes = tuple(routes)
        self._history: List[str] = []

    @property
    def current(self) -> str:
        return self._manager.current

    @property
    def history(self) -> List[str]:
        return list(self._history)

    def _check(self, route: str) -> None:
        if route not in self._routes:
            raise UnknownRouteError(route)

    def _show(self, route: str, direction: str) -> None:
        transition = getattr(self._manager, "transition", None)
        if transition is not None and hasattr(transition, "direction"):
            transition.direction = direction
        self._manager.current = route

    def navigate(self, route: str) -> None:
        self._check(route)
        self._history.append(self.current)
        self._show(route, "left")

    def replace(self, route: str) -> None:
        self._check(route)
        self._show(route, "left")

    def go_back(self) -> bool:
        if not self._history:
            return False
        self._show(self._history.pop(), "right")
        return True


__all__ = ["Navigator", "ROUTES", "UnknownRouteError"]
