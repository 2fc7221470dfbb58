"""Platform bridges that answer "can this URI be opened?" and open it.

Native imports happen lazily inside each method so the module stays
importable on desktop where pyjnius and pyobjus are not installed. A failing
bridge raises; :class:`app.services.link_resolver.LinkResolver` treats that
the same as a negative answer.
"""
from __future__ import annotations

import logging
import webbrowser
from urllib.parse import urlparse

from app.services.link_resolver import Platform, UrlOpener

_logger = logging.getLogger(__name__)

WEB_SCHEMES = frozenset({"http", "https"})


class UrlOpenError(RuntimeError):
    """Raised when a platform bridge cannot hand the URI over."""


class AndroidUrlOpener:
    """Resolve links with ``Intent.resolveActivity`` through pyjnius."""

    def _intent(self, uri: str):
        from jnius import autoclass

        Intent = autoclass("android.content.Intent")
        if uri.startswith("intent:"):
            return Intent.parseUri(uri, Intent.URI_INTENT_SCHEME)
        Uri = autoclass("android.net.Uri")
        return Intent(Intent.ACTION_VIEW, Uri.parse(uri))

    def _activity(self):
        from jnius import autoclass

        return autoclass("org.kivy.android.PythonActivity").mActivity

    def can_open(self, uri: str) -> bool:
        activity = self._activity()
        intent = self._intent(uri)
        return intent.resolveActivity(activity.getPackageManager()) is not None

    def open(self, uri: str) -> None:
        from jnius import autoclass

        Intent = autoclass("android.content.Intent")
        intent = self._intent(uri)
        intent.addFlags(Intent.FLAG_ACTIVITY_NEW_TASK)
        self._activity().startActivity(intent)


class IosUrlOpener:
    """Ask ``UIApplication`` through pyobjus."""

    def _url(self, uri: str):
        from pyobjus import autoclass, objc_str
        from pyobjus.dylib_manager import INCLUDE, load_framework

        load_framework(INCLUDE.UIKit)
        url = autoclass("NSURL").URLWithString_(objc_str(uri))
        if url is None:
            raise UrlOpenError(f"malformed URI {uri!r}")
        return url

    def _application(self):
        from pyobjus import autoclass

        return autoclass("UIApplication").sharedApplication()

    def can_open(self, uri: str) -> bool:
        return bool(self._application().canOpenURL_(self._url(uri)))

    def open(self, uri: str) -> None:
        from pyobjus import autoclass

        # openURL: was deprecated in iOS 10.
        options = autoclass("NSDictionary").dictionary()
        self._application().openURL_options_completionHandler_(self._url(uri), options, None)


class WebBrowserUrlOpener:
    """Desktop fallback: only web URLs are openable, through ``webbrowser``."""

    def can_open(self, uri: str) -> bool:
        return urlparse(uri).scheme.lower() in WEB_SCHEMES

    def open(self, uri: str) -> None:
        if not webbrowser.open(uri):
            raise UrlOpenError(f"no browser accepted {uri!r}")


def default_url_opener(platform: Platform) -> UrlOpener:
    if platform is Platform.ANDROID:
        return AndroidUrlOpener()
    if platform is Platform.IOS:
        return IosUrlOpener()
    _logger.debug("Using web browser opener for platform %s", platform.value)
    return WebBrowserUrlOpener()


__all__ = [
    "AndroidUrlOpener",
    "IosUrlOpener",
    "UrlOpenError",
    "WebBrowserUrlOpener",
    "default_url_opener",
]
