"""Metadata about an audio clip."""

from datetime import timedelta
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictStr,
    field_serializer,
    field_validator,
    model_serializer,
)
from pydantic_core import PydanticCustomError

# Largest integer the protocol allows on the wire (2**53 - 1).
MAX_SAFE_INT = 9007199254740991

WireUInt = Annotated[int, Field(strict=True, ge=0, le=MAX_SAFE_INT)]


class AudioInfo(BaseModel):
    """
    Optional metadata about an audio clip.

    Every field is independent of the others and absent by default. Absent
    fields are left out of the wire object entirely.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    duration: timedelta | None = None
    mimetype: StrictStr | None = None
    size: WireUInt | None = None

    @field_validator("duration", mode="before")
    @classmethod
    def _duration_from_ms(cls, value: Any) -> Any:
        """Accepts a timedelta, or an integer count of milliseconds."""
        if value is None or isinstance(value, timedelta):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise PydanticCustomError(
                "duration_type",
                "Duration must be an integer number of milliseconds",
            )
        if value < 0 or value > MAX_SAFE_INT:
            raise PydanticCustomError(
                "duration_range",
                "Duration must be between 0 and {max} milliseconds",
                {"max": MAX_SAFE_INT},
            )
        return timedelta(milliseconds=value)

    @field_validator("duration")
    @classmethod
    def _duration_not_negative(cls, value: timedelta | None) -> timedelta | None:
        """Checks the range and drops precision the wire cannot carry."""
        if value is None:
            return value
        if value < timedelta(0):
            raise PydanticCustomError("duration_range", "Duration must not be negative")
        if value > timedelta(milliseconds=MAX_SAFE_INT):
            raise PydanticCustomError(
                "duration_range",
                "Duration must be at most {max} milliseconds",
                {"max": MAX_SAFE_INT},
            )
        return timedelta(milliseconds=value // timedelta(milliseconds=1))

    @field_serializer("duration")
    def _duration_to_ms(self, value: timedelta | None) -> int | None:
        if value is None:
            return None
        return value // timedelta(milliseconds=1)

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}
