from __future__ import annotations

import logging

from kivy.core.window import Window
from kivy.lang import Builder
from kivy.uix.screenmanager import ScreenManager
from kivy.utils import platform

from kivymd.app import MDApp

from app.screens.login import LoginScreen  # noqa: F401
from app.screens.main import MainScreen  # noqa: F401
from app.screens.signup import SignupScreen  # noqa: F401
from app.screens.splash import SplashScreen  # noqa: F401
from app.services.navigation import Navigator

_logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# KV LAYOUT
# ---------------------------------------------------------------------------

KV = """
#:set brand_green (0.176, 0.525, 0.314, 1)
#:set light_green (0.322, 0.773, 0.478, 1)
#:set alert_red (0.906, 0.298, 0.235, 1)

ScreenManager:
    SplashScreen:
    LoginScreen:
    SignupScreen:
    MainScreen:

<SplashScreen>:
    name: "splash"
    md_bg_color: 0.71, 0.898, 0.659, 1
    MDBoxLayout:
        id: content
        orientation: "vertical"
        adaptive_height: True
        pos_hint: {"center_x": 0.5, "center_y": 0.5}
        padding: dp(32)
        spacing: dp(18)
        MDLabel:
            text: "SpeakPlan"
            halign: "center"
            font_style: "H3"
            theme_text_color: "Custom"
            text_color: brand_green
            size_hint_y: None
            height: self.texture_size[1]
        MDLabel:
            text: "Let's get your schedule in order"
            halign: "center"
            theme_text_color: "Secondary"
            size_hint_y: None
            height: self.texture_size[1]
        MDRaisedButton:
            text: "Start"
            pos_hint: {"center_x": 0.5}
            md_bg_color: light_green
            on_release: root.start()
        MDRaisedButton:
            text: "Log in"
            pos_hint: {"center_x": 0.5}
            md_bg_color: brand_green
            on_release: root.login()

<LoginScreen>:
    name: "login"
    MDBoxLayout:
        orientation: "vertical"
        MDTopAppBar:
            title: "Log in"
            left_action_items: [["arrow-left", lambda *_: root.go_back()]]
        MDBoxLayout:
            orientation: "vertical"
            padding: dp(24)
            spacing: dp(16)
            MDTextField:
                id: email
                hint_text: "Email"
            MDTextField:
                id: password
                hint_text: "Password"
                password: True
            MDRaisedButton:
                text: "Log in"
                pos_hint: {"center_x": 0.5}
                on_release: root.login()
            MDFlatButton:
                text: "Create an account"
                pos_hint: {"center_x": 0.5}
                on_release: root.open_signup()
            Widget:

<SignupScreen>:
    name: "signup"
    MDBoxLayout:
        orientation: "vertical"
        MDTopAppBar:
            title: "Sign up"
            left_action_items: [["arrow-left", lambda *_: root.go_back()]]
        MDBoxLayout:
            orientation: "vertical"
            padding: dp(24)
            spacing: dp(12)
            MDTextField:
                id: email
                hint_text: "Email"
            MDTextField:
                id: nickname
                hint_text: "Nickname"
            MDTextField:
                id: password
                hint_text: "Password"
                password: True
            MDTextField:
                id: password_confirm
                hint_text: "Confirm password"
                password: True
            MDLabel:
                text: root.mismatch_text
                theme_text_color: "Error"
                size_hint_y: None
                height: self.texture_size[1] if root.mismatch_text else 0
            MDRaisedButton:
                text: "Sign up"
                pos_hint: {"center_x": 0.5}
                on_release: root.sign_up()
            MDFlatButton:
                text: "Already have an account? Log in"
                pos_hint: {"center_x": 0.5}
                on_release: root.go("login")
            Widget:

<MainScreen>:
    name: "main"
    MDBoxLayout:
        orientation: "vertical"
        MDTopAppBar:
            title: "SpeakPlan"
            left_action_items: [["arrow-left", lambda *_: root.go_back()]]
            right_action_items: [["account-circle", lambda *_: root.on_profile_tap(), "Profile"]]
            md_bg_color: alert_red if root.profile_active else brand_green
        MDBoxLayout:
            orientation: "vertical"
            padding: dp(16)
            spacing: dp(18)
            MDBoxLayout:
                adaptive_height: True
                spacing: dp(20)
                pos_hint: {"center_x": 0.5}
                adaptive_width: True
                MDRaisedButton:
                    id: record_button
                    text: "ON AIR"
                    md_bg_color: alert_red if root.recording else light_green
                    on_release: root.toggle_recording()
                MDRaisedButton:
                    text: "Add audio"
                    md_bg_color: brand_green
                    on_release: root.select_files()
            MDCard:
                orientation: "vertical"
                padding: dp(16)
                spacing: dp(8)
                ripple_behavior: True
                on_release: root.open_calendar()
                MDLabel:
                    text: "Schedule preview"
                    font_style: "H6"
                    size_hint_y: None
                    height: self.texture_size[1]
                MDLabel:
                    text: "Tap to open your calendar app"
                    theme_text_color: "Secondary"
                    size_hint_y: None
                    height: self.texture_size[1]
                Widget:
            MDLabel:
                text: "The preview is static. Open the calendar app for the full schedule."
                halign: "center"
                theme_text_color: "Hint"
                size_hint_y: None
                height: self.texture_size[1] + dp(8)
"""


# ---------------------------------------------------------------------------
# APPLICATION
# ---------------------------------------------------------------------------

class SpeakPlanApp(MDApp):
    navigator: Navigator

    def build(self):
        self.title = "SpeakPlan"
        self.theme_cls.primary_palette = "Green"

        # Fixed window on desktop; leave the size alone on mobile.
        if platform not in ("android", "ios"):
            Window.size = (420, 760)

        sm: ScreenManager = Builder.load_string(KV)
        self.navigator = Navigator(sm)
        _logger.info("SpeakPlan started on %s", platform)
        return sm

    def on_stop(self) -> None:
        main_screen: MainScreen = self.root.get_screen("main")
        if main_screen.tap_session:
            main_screen.tap_session.teardown()
        _logger.info("SpeakPlan stopped")


def main() -> None:
    SpeakPlanApp().run()


if __name__ == "__main__":
    try:
        from android.permissions import Permission, request_permissions

        request_permissions([Permission.READ_EXTERNAL_STORAGE])
    except ImportError:
        pass

    main()
