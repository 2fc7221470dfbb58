from __future__ import annotations

import logging

from kivymd.app import MDApp
from kivymd.uix.button import MDFlatButton
from kivymd.uix.dialog import MDDialog
from kivymd.uix.screen import MDScreen

from app.services.navigation import Navigator

_logger = logging.getLogger(__name__)


class RoutedScreen(MDScreen):
    """Screen with access to the app-wide navigator and an alert helper."""

    @property
    def navigator(self) -> Navigator:
        return MDApp.get_running_app().navigator

    def go(self, route: str) -> None:
        _logger.info("Navigating %s -> %s", self.name, route)
        self.navigator.navigate(route)

    def go_back(self) -> None:
        self.navigator.go_back()

    def show_dialog(self, title: str, text: str) -> MDDialog:
        button = MDFlatButton(text="OK")
        dialog = MDDialog(title=title, text=text, buttons=[button])
        button.bind(on_release=lambda *_: dialog.dismiss())
        dialog.open()
        return dialog
