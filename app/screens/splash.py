from __future__ import annotations

from kivy.animation import Animation

from app.screens.base import RoutedScreen


class SplashScreen(RoutedScreen):
    def on_pre_enter(self, *args) -> None:
        super().on_pre_enter(*args)
        content = self.ids.content
        content.opacity = 0
        Animation(opacity=1, d=0.8, t="out_quad").start(content)

    def start(self) -> None:
        self.go("main")

    def login(self) -> None:
        self.go("login")
