"""Custom exceptions for decoding message content."""


class ContentDecodeError(Exception):
    """Raised when a wire object cannot be decoded into message content."""

    def __init__(
        self,
        reason: str,
        field: str | None = None,
        cause: Exception | None = None,
    ):
        self.reason = reason
        self.field = field
        self.cause = cause
        if field:
            super().__init__(f"Failed to decode content field '{field}': {reason}")
        else:
            super().__init__(f"Failed to decode content: {reason}")


class MissingRequiredFieldError(ContentDecodeError):
    """Raised when a required field is absent from the wire object."""

    def __init__(self, field: str, cause: Exception | None = None):
        super().__init__("missing required field", field=field, cause=cause)


class MalformedFieldError(ContentDecodeError):
    """Raised when a present field has the wrong shape or value."""

    def __init__(self, field: str, reason: str, cause: Exception | None = None):
        super().__init__(reason, field=field, cause=cause)
