"""Abstract interface for content encoding and decoding."""

from abc import ABC, abstractmethod

from media_events.domain import AudioMessageEventContent


class ContentCodec(ABC):
    """Abstract base class for converting content to and from raw bytes."""

    @abstractmethod
    def encode(self, content: AudioMessageEventContent) -> bytes:
        """
        Encodes content into its wire representation.

        Args:
            content: The content to encode.

        Returns:
            The encoded bytes.
        """

    @abstractmethod
    def decode(self, raw: bytes | str) -> AudioMessageEventContent:
        """
        Decodes content from its wire representation.

        Args:
            raw: The encoded content.

        Returns:
            The decoded content.

        Raises:
            ContentDecodeError: If the input is not valid content.
        """
