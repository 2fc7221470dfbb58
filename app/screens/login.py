from __future__ import annotations

import logging

from app.screens.base import RoutedScreen
from app.services.validation import validate_login

_logger = logging.getLogger(__name__)


class LoginScreen(RoutedScreen):
    def login(self) -> None:
        email = self.ids.email.text
        issues = validate_login(email, self.ids.password.text)
        if issues:
            self.show_dialog("Log in", issues[0].message)
            return
        # No account backend yet: any filled-in form gets through.
        _logger.info("Login form accepted")
        self.ids.password.text = ""
        self.go("main")

    def open_signup(self) -> None:
        self.go("signup")
