from media_events.interfaces.content_codec import ContentCodec

__all__ = [
    "ContentCodec",
]
