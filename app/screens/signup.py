from __future__ import annotations

import logging

from kivy.properties import StringProperty

from app.screens.base import RoutedScreen
from app.services.validation import password_mismatch, validate_signup

_logger = logging.getLogger(__name__)


class SignupScreen(RoutedScreen):
    mismatch_text = StringProperty("")

    def on_kv_post(self, base_widget):
        self.ids.password.bind(text=lambda *_: self.refresh_mismatch())
        self.ids.password_confirm.bind(text=lambda *_: self.refresh_mismatch())

    def refresh_mismatch(self) -> None:
        self.mismatch_text = password_mismatch(
            self.ids.password.text, self.ids.password_confirm.text
        )

    def sign_up(self) -> None:
        issues = validate_signup(
            self.ids.email.text,
            self.ids.password.text,
            self.ids.password_confirm.text,
            self.ids.nickname.text,
        )
        if issues:
            self.show_dialog("Sign up", issues[0].message)
            return
        _logger.info("Signup form accepted")
        for field_id in ("email", "password", "password_confirm", "nickname"):
            self.ids[field_id].text = ""
        self.show_dialog("Sign up", "Sign-up complete!")
        self.navigator.replace("login")
