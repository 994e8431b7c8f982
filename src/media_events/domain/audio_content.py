"""Content of an `m.audio` room message."""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    StrictStr,
    ValidationError,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticCustomError

from media_events.domain.audio_info import AudioInfo
from media_events.domain.encrypted_file import EncryptedFile
from media_events.domain.media_source import (
    SOURCE_KEYS,
    AnyMediaSource,
    MediaSource,
    MediaSourceKind,
)
from media_events.exceptions import (
    ContentDecodeError,
    MalformedFieldError,
    MissingRequiredFieldError,
)

AUDIO_MSGTYPE = "m.audio"


class AudioMessageEventContent(BaseModel):
    """
    The payload of an audio message.

    Wire format:
        {"msgtype": "m.audio", "body": ..., "url" | "file": ..., "info"?: {...}}

    The media source is flattened into the object and `info` is omitted when
    absent. Unknown keys are ignored when decoding.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    msgtype: Literal["m.audio"] = AUDIO_MSGTYPE
    body: StrictStr
    source: AnyMediaSource
    info: AudioInfo | None = None

    @classmethod
    def new(cls, body: str, source: MediaSource) -> "AudioMessageEventContent":
        """Creates content with the given body and source and no info."""
        return cls(body=body, source=source)

    @classmethod
    def plain(cls, body: str, url: str) -> "AudioMessageEventContent":
        """Creates unencrypted content pointing at `url`."""
        return cls.new(body, MediaSource.plain(url))

    @classmethod
    def encrypted(cls, body: str, file: EncryptedFile) -> "AudioMessageEventContent":
        """Creates encrypted content described by `file`."""
        return cls.new(body, MediaSource.encrypted(file))

    def with_info(self, info: AudioInfo | None) -> "AudioMessageEventContent":
        """Returns a copy of this content with `info` replaced."""
        return self.model_copy(update={"info": info})

    @property
    def is_encrypted(self) -> bool:
        """Whether the media is referenced through an encrypted file."""
        return self.source.kind is MediaSourceKind.ENCRYPTED

    @model_validator(mode="before")
    @classmethod
    def _unflatten_source(cls, data: Any) -> Any:
        """
        Rebuilds the nested source from a flat wire object.

        Values built in Python pass a `MediaSource` as `source` and are left
        alone. Anything else is treated as a wire object: a `source` key there
        is an unknown field and is discarded.
        """
        if not isinstance(data, Mapping):
            return data
        if isinstance(data.get("source"), MediaSource):
            return data

        if "msgtype" not in data:
            raise PydanticCustomError(
                "missing_field",
                "Field '{field}' is required",
                {"field": "msgtype"},
            )

        fields = {key: value for key, value in data.items() if key not in SOURCE_KEYS}
        fields["source"] = {key: data[key] for key in SOURCE_KEYS if key in data}
        return fields

    @model_serializer(mode="wrap")
    def _flatten_source(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        dumped = handler(self)
        wire = {"msgtype": dumped["msgtype"], "body": dumped["body"]}
        wire.update(dumped["source"])
        if dumped.get("info") is not None:
            wire["info"] = dumped["info"]
        return wire

    def to_wire(self) -> dict[str, Any]:
        """Returns the JSON-compatible wire object."""
        return self.model_dump(mode="json")

    @classmethod
    def from_wire(cls, data: Any) -> "AudioMessageEventContent":
        """
        Decodes content from a wire object.

        Args:
            data: The parsed JSON object.

        Returns:
            The decoded content.

        Raises:
            MissingRequiredFieldError: If `msgtype`, `body` or both source keys are absent.
            MalformedFieldError: If a present field has the wrong shape.
            ContentDecodeError: If `data` is not a JSON object.
        """
        if not isinstance(data, Mapping):
            raise ContentDecodeError(
                f"expected a JSON object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise _translate_error(e) from e


def _wire_path(loc: tuple[str | int, ...]) -> str:
    """Maps a pydantic error location onto the flat wire layout."""
    parts = list(loc)
    if parts and parts[0] == "source":
        # ("source", <variant tag>, "file", ...) -> ("file", ...)
        parts = parts[2:] if len(parts) > 1 else []
    return ".".join(str(part) for part in parts)


def _translate_error(error: ValidationError) -> ContentDecodeError:
    """Converts the first pydantic error into a decode error."""
    first = error.errors()[0]
    ctx = first.get("ctx") or {}

    if first["type"] == "missing_field":
        return MissingRequiredFieldError(ctx["field"], cause=error)

    field = _wire_path(first["loc"])
    if first["type"] == "missing":
        return MissingRequiredFieldError(field, cause=error)
    return MalformedFieldError(field, first["msg"], cause=error)
