from types import SimpleNamespace

import pytest

from app.services.navigation import Navigator, UnknownRouteError


def make_navigator(start="splash"):
    manager = SimpleNamespace(current=start, transition=SimpleNamespace(direction=None))
    return Navigator(manager), manager


def test_navigate_and_back():
    navigator, manager = make_navigator()

    navigator.navigate("login")
    navigator.navigate("signup")
    assert manager.current == "signup"
    assert manager.transition.direction == "left"
    assert navigator.history == ["splash", "login"]

    assert navigator.go_back()
    assert manager.current == "login"
    assert manager.transition.direction == "right"


def test_replace_does_not_grow_history():
    navigator, manager = make_navigator()
    navigator.navigate("signup")

    navigator.replace("login")

    assert manager.current == "login"
    assert navigator.history == ["splash"]
    navigator.go_back()
    assert manager.current == "splash"


def test_back_on_empty_history_is_noop():
    navigator, manager = make_navigator("main")
    assert not navigator.go_back()
    assert manager.current == "main"


def test_unknown_route():
    navigator, manager = make_navigator()
    with pytest.raises(UnknownRouteError):
        navigator.navigate("settings")
    assert manager.current == "splash"
    assert navigator.history == []


def test_manager_without_transition():
    manager = SimpleNamespace(current="splash")
    Navigator(manager).navigate("main")
    assert manager.current == "main"
