from __future__ import annotations

import logging
from typing import Optional

from kivy.animation import Animation
from kivy.properties import BooleanProperty
from kivy.utils import platform as kivy_platform
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDFlatButton, MDRaisedButton
from kivymd.uix.dialog import MDDialog
from kivymd.uix.list import TwoLineListItem

from app.screens.base import RoutedScreen
from app.services.file_intake import Accepted, FileIntake, describe_size, display_name
from app.services.link_resolver import LinkResolver, Opened, detect_platform
from app.services.picker import Cancelled, PickerError, PickerResult, open_audio_picker
from app.services.scheduling import clock_scheduler, run_on_ui
from app.services.tap_session import TapSessionController
from app.services.url_opener import default_url_opener
from app.settings import settings

_logger = logging.getLogger(__name__)


class MainScreen(RoutedScreen):
    profile_active = BooleanProperty(False)
    recording = BooleanProperty(False)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.platform = detect_platform(kivy_platform)
        self.resolver = LinkResolver(default_url_opener(self.platform))
        self.intake = FileIntake()
        self.tap_session: Optional[TapSessionController] = None
        self._review_dialog: Optional[MDDialog] = None

    def on_pre_enter(self, *args) -> None:
        super().on_pre_enter(*args)
        self.tap_session = TapSessionController(
            clock_scheduler,
            window=settings.tap_window,
            on_confirm=self._on_signed_out,
            on_change=self._on_profile_change,
        )

    def on_leave(self, *args) -> None:
        super().on_leave(*args)
        if self.tap_session:
            self.tap_session.teardown()
            self.tap_session = None
        self.profile_active = False
        if self.recording:
            self.toggle_recording()

    # --- profile badge ---

    def on_profile_tap(self) -> None:
        if self.tap_session:
            self.tap_session.on_tap()

    def _on_profile_change(self, active: bool) -> None:
        self.profile_active = active
        if active:
            _logger.info("Profile badge armed for %.1fs", settings.tap_window)

    def _on_signed_out(self) -> None:
        _logger.info("Profile sign-out gesture confirmed")
        self.show_dialog("Profile", "You have been signed out!")

    # --- recording ---

    def toggle_recording(self) -> None:
        button = self.ids.record_button
        self.recording = not self.recording
        Animation.cancel_all(button, "opacity")
        if self.recording:
            pulse = Animation(opacity=0.55, d=0.6, t="in_out_sine") + Animation(
                opacity=1, d=0.6, t="in_out_sine"
            )
            pulse.repeat = True
            pulse.start(button)
        else:
            Animation(opacity=1, d=0.2).start(button)

    # --- calendar ---

    def open_calendar(self) -> None:
        result = self.resolver.open_calendar(self.platform, settings.calendar_url)
        if isinstance(result, Opened):
            _logger.info("Calendar opened via %s", result.uri)
        else:
            _logger.info("No calendar link available on %s", self.platform.value)

    # --- file intake ---

    def select_files(self) -> None:
        try:
            open_audio_picker(
                self._on_picker_result,
                scheduler=run_on_ui,
                extensions=self.intake.allowed_extensions,
            )
        except PickerError as exc:
            _logger.warning("File picker unavailable: %s", exc)
            self.show_dialog("File selection error", "Something went wrong while picking files.")

    def _on_picker_result(self, result: PickerResult) -> None:
        if isinstance(result, Cancelled):
            return
        outcome = self.intake.submit(result.files)
        if not isinstance(outcome, Accepted):
            _logger.info("Rejected %d picked file(s)", len(result.files))
            self.show_dialog("Unsupported file", outcome.message)
            return
        _logger.info("Reviewing %d accepted file(s)", len(outcome.files))
        self._open_review()

    def _open_review(self) -> None:
        self._dismiss_review()
        content = MDBoxLayout(orientation="vertical", adaptive_height=True)
        for file in self.intake.batch:
            content.add_widget(
                TwoLineListItem(text=display_name(file), secondary_text=describe_size(file.size))
            )

        pick_again = MDRaisedButton(text="Pick again")
        send = MDFlatButton(text="Send", disabled=True)
        dialog = MDDialog(
            title="Selected files",
            type="custom",
            content_cls=content,
            buttons=[pick_again, send],
        )
        pick_again.bind(on_release=lambda *_: self._pick_again())
        dialog.bind(on_dismiss=lambda *_: setattr(self, "_review_dialog", None))
        self._review_dialog = dialog
        dialog.open()

    def _dismiss_review(self) -> None:
        if self._review_dialog:
            self._review_dialog.dismiss()
            self._review_dialog = None

    def _pick_again(self) -> None:
        self._dismiss_review()
        self.select_files()
