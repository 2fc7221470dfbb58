"""Audio file picker on top of :mod:`plyer.filechooser`."""
from __future__ import annotations

import logging
import mimetypes
import os
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from app.services.file_intake import AUDIO_EXTENSIONS, PickedFile

_logger = logging.getLogger(__name__)


class PickerError(RuntimeError):
    """Raised when the platform picker could not be shown or read."""


@dataclass(frozen=True)
class Cancelled:
    pass


@dataclass(frozen=True)
class Selected:
    files: Tuple[PickedFile, ...]


PickerResult = Union[Cancelled, Selected]


def picked_file_from_path(path: str) -> PickedFile:
    try:
        size: Optional[int] = os.path.getsize(path)
    except OSError:
        size = None
    declared_type, _encoding = mimetypes.guess_type(path)
    return PickedFile(
        uri=path,
        name=os.path.basename(path) or None,
        size=size,
        declared_type=declared_type,
    )


def selection_to_result(selection: Optional[Sequence[Optional[str]]]) -> PickerResult:
    if not selection:
        return Cancelled()
    # plyer yields None for content URIs it could not map to a local path.
    paths = [str(path) for path in selection if path is not None]
    if len(paths) < len(selection):
        _logger.debug("Skipped %d unresolved picker entries", len(selection) - len(paths))
    return Selected(tuple(picked_file_from_path(path) for path in paths))



def audio_filters(extensions: Iterable[str] = AUDIO_EXTENSIONS) -> List[list]:
    patterns = [f"*{ext}" for ext in extensions]
    return [["Audio", *patterns]]


def open_audio_picker(
    on_result: Callable[[PickerResult], None],
    *,
    scheduler: Callable[[Callable[[], None]], None],
    extensions: Iterable[str] = AUDIO_EXTENSIONS,
) -> None:
    """Show the system picker; *on_result* runs through *scheduler*.

    On Android plyer reports the selection from the activity-result thread,
    so the result is always handed back via *scheduler* (the UI clock).
    """

    try:
        from plyer import filechooser

        filechooser.open_file(
            title="Select audio files",
            multiple=True,
            filters=audio_filters(extensions),
            on_selection=lambda selection: scheduler(
                lambda: on_result(selection_to_result(selection))
            ),
        )
    except Exception as exc:
        _logger.exception("File picker failed")
        raise PickerError(str(exc)) from exc


__all__ = [
    "Cancelled",
    "PickerError",
    "PickerResult",
    "Selected",
    "audio_filters",
    "open_audio_picker",
    "picked_file_from_path",
    "selection_to_result",
]
