"""Domain layer exports."""

from media_events.domain.audio_content import AUDIO_MSGTYPE, AudioMessageEventContent
from media_events.domain.audio_info import MAX_SAFE_INT, AudioInfo
from media_events.domain.encrypted_file import EncryptedFile, JsonWebKey
from media_events.domain.media_source import (
    AnyMediaSource,
    EncryptedMediaSource,
    MediaSource,
    MediaSourceKind,
    PlainMediaSource,
)

__all__ = [
    "AUDIO_MSGTYPE",
    "MAX_SAFE_INT",
    "AnyMediaSource",
    "AudioInfo",
    "AudioMessageEventContent",
    "EncryptedFile",
    "EncryptedMediaSource",
    "JsonWebKey",
    "MediaSource",
    "MediaSourceKind",
    "PlainMediaSource",
]
