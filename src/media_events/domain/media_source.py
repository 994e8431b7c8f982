"""Media source: a plain URL or an encrypted file, flattened into its parent."""

from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Discriminator, StrictStr, Tag

from media_events.domain.encrypted_file import EncryptedFile


class MediaSourceKind(str, Enum):
    """Which variant a media source holds."""

    PLAIN = "plain"
    ENCRYPTED = "encrypted"


SOURCE_KEYS = ("url", "file")


class MediaSource(BaseModel):
    """
    Where the media of a message can be fetched from.

    Exactly one of the concrete subclasses is ever instantiated. On the wire
    the variant has no tag of its own: its fields are merged into the
    enclosing object and the variant is recovered from which key is present.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    def __init__(self, **data: Any):
        if type(self) is MediaSource:
            raise TypeError(
                "MediaSource holds no variant; use MediaSource.plain() or MediaSource.encrypted()"
            )
        super().__init__(**data)

    @classmethod
    def plain(cls, url: str) -> "PlainMediaSource":
        """Creates an unencrypted source pointing at `url`."""
        return PlainMediaSource(url=url)

    @classmethod
    def encrypted(cls, file: EncryptedFile) -> "EncryptedMediaSource":
        """Creates an encrypted source described by `file`."""
        return EncryptedMediaSource(file=file)

    @property
    def kind(self) -> MediaSourceKind:
        """Which variant this source holds."""
        raise NotImplementedError

    def to_fields(self) -> dict[str, Any]:
        """Returns the wire fields to merge into the enclosing object."""
        return self.model_dump(mode="json")


class PlainMediaSource(MediaSource):
    """Unencrypted media, addressed by URI."""

    url: StrictStr

    @property
    def kind(self) -> MediaSourceKind:
        return MediaSourceKind.PLAIN


class EncryptedMediaSource(MediaSource):
    """Encrypted media, described by an `EncryptedFile`."""

    file: EncryptedFile

    @property
    def kind(self) -> MediaSourceKind:
        return MediaSourceKind.ENCRYPTED


def source_kind(value: Any) -> str | None:
    """
    Picks the source variant for a value.

    Wire objects are discriminated by key presence: a non-null `file` selects
    the encrypted variant even when `url` is also set, otherwise a non-null
    `url` selects the plain variant.

    Returns:
        The variant tag, or None when neither key is present or the value is
        a source of an unrecognized type.
    """
    if isinstance(value, (PlainMediaSource, EncryptedMediaSource)):
        return value.kind.value
    if not isinstance(value, dict):
        return None
    if value.get("file") is not None:
        return MediaSourceKind.ENCRYPTED.value
    if value.get("url") is not None:
        return MediaSourceKind.PLAIN.value
    return None


AnyMediaSource = Annotated[
    Union[
        Annotated[PlainMediaSource, Tag(MediaSourceKind.PLAIN.value)],
        Annotated[EncryptedMediaSource, Tag(MediaSourceKind.ENCRYPTED.value)],
    ],
    Discriminator(
        source_kind,
        custom_error_type="missing_field",
        custom_error_message="Neither 'url' nor 'file' is present",
        custom_error_context={"field": "url"},
    ),
]
