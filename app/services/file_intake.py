"""Admission of picked audio files into the pending-upload batch."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

_logger = logging.getLogger(__name__)

AUDIO_MIME_TYPES = (
    "audio/mpeg",
    "audio/mp3",
    "audio/mp4",
    "audio/x-m4a",
    "audio/m4a",
    "audio/flac",
    "audio/x-flac",
)
AUDIO_EXTENSIONS = (".mp3", ".mp4", ".m4a", ".flac")


@dataclass(frozen=True)
class PickedFile:
    uri: str
    name: Optional[str] = None
    size: Optional[int] = None
    declared_type: Optional[str] = None


FileBatch = Tuple[PickedFile, ...]


@dataclass(frozen=True)
class Accepted:
    files: FileBatch


@dataclass(frozen=True)
class Rejected:
    message: str


IntakeResult = Union[Accepted, Rejected]


def _normalize_extensions(extensions: Iterable[str]) -> Tuple[str, ...]:
    normalized = []
    for ext in extensions:
        clean = ext.strip().lower()
        if not clean:
            continue
        normalized.append(clean if clean.startswith(".") else f".{clean}")
    return tuple(dict.fromkeys(normalized))


def rejection_message(extensions: Iterable[str]) -> str:
    formats = ", ".join(ext.lstrip(".") for ext in _normalize_extensions(extensions))
    return f"Only {formats} audio files can be selected."


def is_allowed(
    file: PickedFile,
    allowed_mime_types: Iterable[str] = AUDIO_MIME_TYPES,
    allowed_extensions: Iterable[str] = AUDIO_EXTENSIONS,
) -> bool:
    mime_types = {mime.lower() for mime in allowed_mime_types}
    mime_match = (file.declared_type or "").lower() in mime_types
    name = (file.name or "").lower()
    ext_match = any(name.endswith(ext) for ext in _normalize_extensions(allowed_extensions))
    return mime_match or ext_match


def validate(
    raw_files: Iterable[PickedFile],
    allowed_mime_types: Iterable[str] = AUDIO_MIME_TYPES,
    allowed_extensions: Iterable[str] = AUDIO_EXTENSIONS,
) -> IntakeResult:
    """Keep the files matching either allow-list, in picker order.

    A file passes when its declared MIME type OR its file name extension is
    allowed, so pickers that omit the MIME type still work. An empty result
    is a :class:`Rejected` carrying a message that names the formats.
    """

    mime_types = tuple(allowed_mime_types)
    extensions = _normalize_extensions(allowed_extensions)
    accepted = tuple(
        file for file in raw_files if is_allowed(file, mime_types, extensions)
    )
    if not accepted:
        return Rejected(rejection_message(extensions))
    return Accepted(accepted)


class FileIntake:
    """Hold the batch shown in the review dialog.

    Every accepted submission replaces the batch; a rejected one keeps it.
    """

    def __init__(
        self,
        allowed_mime_types: Iterable[str] = AUDIO_MIME_TYPES,
        allowed_extensions: Iterable[str] = AUDIO_EXTENSIONS,
    ) -> None:
        self.allowed_mime_types = tuple(allowed_mime_types)
        self.allowed_extensions = _normalize_extensions(allowed_extensions)
        self.batch: FileBatch = ()

    def submit(self, raw_files: Iterable[PickedFile]) -> IntakeResult:
        result = validate(raw_files, self.allowed_mime_types, self.allowed_extensions)
        if isinstance(result, Accepted):
            self.batch = result.files
            _logger.info("Accepted %d audio file(s)", len(result.files))
        else:
            _logger.info("Rejected file selection, batch kept at %d file(s)", len(self.batch))
        return result

    def clear(self) -> None:
        self.batch = ()


def display_name(file: PickedFile) -> str:
    return file.name or "Untitled"


def describe_size(size: Optional[int]) -> str:
    if not size:
        return "Size unknown"
    return f"{size / 1024:.1f} KB"


__all__ = [
    "AUDIO_EXTENSIONS",
    "AUDIO_MIME_TYPES",
    "Accepted",
    "FileBatch",
    "FileIntake",
    "IntakeResult",
    "PickedFile",
    "Rejected",
    "describe_size",
    "display_name",
    "is_allowed",
    "rejection_message",
    "validate",
]
