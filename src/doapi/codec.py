"""JSON wire codec shared by every request and response.

The API renders timestamps as ``2020-01-02T03:04:05Z``: UTC, whole seconds,
literal ``Z``. Only that exact shape is accepted; fractional seconds and
numeric offsets are rejected rather than silently normalised.
"""

import re
from datetime import UTC, datetime
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, PlainSerializer, PlainValidator, ValidationError
from pydantic_core import PydanticSerializationError

from .exceptions import DecodeError, EncodeError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
_TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", re.ASCII)

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_timestamp(value: str) -> datetime:
    """Parse an API timestamp into an aware UTC datetime.

    Raises:
        ValueError: If ``value`` is not exactly ``YYYY-MM-DDTHH:MM:SSZ``.
    """
    if not _TIMESTAMP_PATTERN.fullmatch(value):
        raise ValueError(
            f"timestamp {value!r} does not match format {TIMESTAMP_FORMAT!r}"
        )
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=UTC)


def format_timestamp(value: datetime) -> str:
    """Render a datetime in the API's timestamp format.

    Naive datetimes are taken to be UTC; aware ones are converted to UTC.
    Sub-second precision is dropped.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(TIMESTAMP_FORMAT)


def _validate_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, str):
        return parse_timestamp(value)
    raise ValueError(f"expected a timestamp string, got {type(value).__name__}")


Timestamp = Annotated[
    datetime,
    PlainValidator(_validate_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]
"""A datetime field carried on the wire in `TIMESTAMP_FORMAT`."""


def encode_body(body: BaseModel) -> bytes:
    """Serialize a request body to JSON bytes using wire field names.

    Raises:
        EncodeError: If the body is not a pydantic model or fails to serialize.
    """
    if not isinstance(body, BaseModel):
        raise EncodeError(type(body), "request bodies must be pydantic models")
    try:
        return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    except PydanticSerializationError as e:
        raise EncodeError(type(body), str(e)) from e


def decode_body(model: type[ModelT], content: bytes) -> ModelT:
    """Decode a JSON body into ``model``.

    Raises:
        DecodeError: If the content is not valid JSON or does not match ``model``.
    """
    try:
        return model.model_validate_json(content)
    except ValidationError as e:
        raise DecodeError(model, f"{e.error_count()} validation error(s)") from e
