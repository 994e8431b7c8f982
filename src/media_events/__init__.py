from media_events.config import AppConfig, CodecConfig, LoggingConfig, load_config
from media_events.domain import (
    AUDIO_MSGTYPE,
    MAX_SAFE_INT,
    AudioInfo,
    AudioMessageEventContent,
    EncryptedFile,
    EncryptedMediaSource,
    JsonWebKey,
    MediaSource,
    MediaSourceKind,
    PlainMediaSource,
)
from media_events.exceptions import (
    ContentDecodeError,
    MalformedFieldError,
    MissingRequiredFieldError,
)
from media_events.json_codec import JsonContentCodec
from media_events.logging import setup_logging

__all__ = [
    "setup_logging",
    "load_config",
    "AppConfig",
    "CodecConfig",
    "LoggingConfig",
    "AUDIO_MSGTYPE",
    "MAX_SAFE_INT",
    "AudioInfo",
    "AudioMessageEventContent",
    "EncryptedFile",
    "EncryptedMediaSource",
    "JsonWebKey",
    "MediaSource",
    "MediaSourceKind",
    "PlainMediaSource",
    "ContentDecodeError",
    "MalformedFieldError",
    "MissingRequiredFieldError",
    "JsonContentCodec",
]
