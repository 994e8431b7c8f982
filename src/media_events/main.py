"""
Media Events CLI.

Reads audio message content as JSON on stdin and writes the normalized wire
object on stdout.
"""

import logging
import sys

from media_events.config import load_config
from media_events.exceptions import ContentDecodeError
from media_events.json_codec import JsonContentCodec
from media_events.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Decodes stdin and re-encodes it to stdout."""
    config = load_config()
    setup_logging(config.logging.level, stream=sys.stderr)
    codec = JsonContentCodec(indent=config.codec.indent)

    raw = sys.stdin.buffer.read()
    try:
        content = codec.decode(raw)
    except ContentDecodeError:
        logger.exception("Content could not be decoded")
        return 1

    sys.stdout.buffer.write(codec.encode(content) + b"\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
