"""Audio player helpers: time formatting, bookmark validation, format checks.

Validation failures are returned as ``ValidationResult`` values carrying a
user-facing message; nothing here raises for bad input.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Protocol

BOOKMARK_NAME_MAX_LENGTH = 50
MIN_BOOKMARK_SPAN_SEC = 1

MSG_TIME_NOT_FINITE = "時間の値が不正です"
MSG_START_NEGATIVE = "開始時間は0以上である必要があります"
MSG_END_PAST_DURATION = "終了時間は音声ファイルの長さを超えることはできません"
MSG_END_NOT_AFTER_START = "終了時間は開始時間より後である必要があります"
MSG_SPAN_TOO_SHORT = "ブックマーク範囲は最低1秒以上である必要があります"
MSG_NAME_REQUIRED = "ブックマーク名を入力してください"
MSG_NAME_TOO_LONG = "ブックマーク名は50文字以下で入力してください"
MSG_NOT_AUDIO_FILE = "音声ファイル（MP3など）を選択してください。"

SUPPORTED_AUDIO_FORMATS = (
    "audio/mpeg",
    "audio/mp3",
    "audio/wav",
    "audio/ogg",
    "audio/aac",
    "audio/m4a",
)


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error_message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(False, message)

    def __bool__(self) -> bool:
        return self.is_valid


class MediaTransport(Protocol):
    """Playback collaborator owned by the client; only read and seeked here."""

    @property
    def current_time(self) -> float: ...

    @property
    def duration(self) -> float: ...

    def seek(self, seconds: float) -> None: ...


def format_time(seconds: float) -> str:
    """Render ``seconds`` as ``M:SS`` (minutes are not wrapped into hours).

    NaN, infinities and negative values render as ``0:00``.
    """
    if not math.isfinite(seconds) or seconds < 0:
        return "0:00"
    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{minutes}:{secs:02d}"


def validate_bookmark_range(start: float, end: float, duration: float) -> ValidationResult:
    # NaN and infinities slip through every comparison below
    if not all(math.isfinite(v) for v in (start, end, duration)):
        return ValidationResult.fail(MSG_TIME_NOT_FINITE)
    if start < 0:
        return ValidationResult.fail(MSG_START_NEGATIVE)
    if end > duration:
        return ValidationResult.fail(MSG_END_PAST_DURATION)
    if start >= end:
        return ValidationResult.fail(MSG_END_NOT_AFTER_START)
    if end - start < MIN_BOOKMARK_SPAN_SEC:
        return ValidationResult.fail(MSG_SPAN_TOO_SHORT)
    return ValidationResult.ok()


def validate_bookmark_name(name: str) -> ValidationResult:
    trimmed = (name or "").strip()
    if not trimmed:
        return ValidationResult.fail(MSG_NAME_REQUIRED)
    if len(trimmed) > BOOKMARK_NAME_MAX_LENGTH:
        return ValidationResult.fail(MSG_NAME_TOO_LONG)
    return ValidationResult.ok()


def is_supported_audio_format(mime_type: str) -> bool:
    return any(mime_type.startswith(fmt) for fmt in SUPPORTED_AUDIO_FORMATS)


def accepts_audio_file(mime_type: Optional[str]) -> ValidationResult:
    """File selection rule: any declared ``audio/*`` type is accepted."""
    if mime_type and mime_type.startswith("audio/"):
        return ValidationResult.ok()
    return ValidationResult.fail(MSG_NOT_AUDIO_FILE)


__all__ = [
    "ValidationResult",
    "MediaTransport",
    "format_time",
    "validate_bookmark_range",
    "validate_bookmark_name",
    "is_supported_audio_format",
    "accepts_audio_file",
    "SUPPORTED_AUDIO_FORMATS",
    "BOOKMARK_NAME_MAX_LENGTH",
]
