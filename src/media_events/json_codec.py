"""JSON implementation of the ContentCodec interface."""

import json
import logging

from media_events.domain import AudioMessageEventContent
from media_events.exceptions import ContentDecodeError
from media_events.interfaces import ContentCodec

logger = logging.getLogger(__name__)


class JsonContentCodec(ContentCodec):
    """Encodes content as UTF-8 JSON."""

    def __init__(self, indent: int | None = None):
        self._indent = indent

    def encode(self, content: AudioMessageEventContent) -> bytes:
        if self._indent is None:
            text = json.dumps(content.to_wire(), separators=(",", ":"))
        else:
            text = json.dumps(content.to_wire(), indent=self._indent)
        return text.encode("utf-8")

    def decode(self, raw: bytes | str) -> AudioMessageEventContent:
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("Invalid JSON content", extra={"error": str(e)})
            raise ContentDecodeError("invalid JSON", cause=e) from e

        try:
            content = AudioMessageEventContent.from_wire(data)
        except ContentDecodeError as e:
            logger.warning(
                "Invalid message content",
                extra={"field": e.field, "reason": e.reason},
            )
            raise

        logger.debug(
            "Content decoded",
            extra={"msgtype": content.msgtype, "source": content.source.kind.value},
        )
        return content
