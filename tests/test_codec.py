"""Tests for the JSON wire codec."""

import json
from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import BaseModel, ValidationError

from conftest import action_json, image_json
from doapi.codec import (
    Timestamp,
    decode_body,
    encode_body,
    format_timestamp,
    parse_timestamp,
)
from doapi.exceptions import DecodeError, EncodeError
from doapi.resources import FloatingIPAction, Image, ImageResponse


class Stamped(BaseModel):
    at: Timestamp


def test_timestamp_round_trip():
    instant = parse_timestamp("2020-01-02T03:04:05Z")

    assert instant == datetime(2020, 1, 2, 3, 4, 5, tzinfo=UTC)
    assert format_timestamp(instant) == "2020-01-02T03:04:05Z"


@pytest.mark.parametrize(
    "value",
    [
        "2020-01-02T03:04:05.123Z",
        "2020-01-02T03:04:05+00:00",
        "2020-01-02T03:04:05+02:00",
        "2020-01-02T03:04:05",
        "2020-01-02 03:04:05Z",
        "2020-1-2T3:4:5Z",
        "２０２０-01-02T03:04:05Z",
        "",
    ],
)
def test_parse_timestamp_rejects_other_iso8601_shapes(value: str):
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_format_timestamp_converts_to_utc():
    plus_two = timezone(timedelta(hours=2))
    assert format_timestamp(datetime(2020, 1, 2, 5, 4, 5, tzinfo=plus_two)) == (
        "2020-01-02T03:04:05Z"
    )
    assert format_timestamp(datetime(2020, 1, 2, 3, 4, 5, 999)) == "2020-01-02T03:04:05Z"


def test_timestamp_field_round_trip_through_json():
    model = Stamped.model_validate_json('{"at": "2020-01-02T03:04:05Z"}')

    assert model.at == datetime(2020, 1, 2, 3, 4, 5, tzinfo=UTC)
    assert json.loads(model.model_dump_json()) == {"at": "2020-01-02T03:04:05Z"}


def test_timestamp_field_rejects_numbers():
    with pytest.raises(ValidationError):
        Stamped.model_validate({"at": 1577934245})


def test_fractional_size_is_accepted():
    image = Image.model_validate(image_json(size_gigabytes=20.5))

    assert image.size_gigabytes == 20.5


def test_field_names_follow_static_aliases():
    image = Image.model_validate(image_json(public=True))

    assert image.is_public is True
    assert image.min_disk_size == 20
    assert image.created_at == datetime(2014, 11, 4, 22, 23, 2, tzinfo=UTC)


def test_region_and_region_slug_are_distinct_fields():
    action = FloatingIPAction.model_validate(action_json(region_slug="sfo2"))

    assert action.region.slug == "nyc3"
    assert action.region.name == "New York 3"
    assert action.region_slug == "sfo2"


def test_decode_body_returns_model():
    content = json.dumps({"image": image_json()}).encode()

    assert decode_body(ImageResponse, content).image.id == 7555620


def test_decode_body_wraps_validation_error():
    with pytest.raises(DecodeError) as exc_info:
        decode_body(ImageResponse, b"{not json")

    assert exc_info.value.target_type is ImageResponse
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_encode_body_uses_wire_names_and_drops_none():
    image = Image.model_validate(image_json())

    encoded = json.loads(encode_body(image))

    assert encoded["public"] is False
    assert "is_public" not in encoded
    assert "slug" not in encoded
    assert encoded["created_at"] == "2014-11-04T22:23:02Z"


def test_encode_body_rejects_non_models():
    with pytest.raises(EncodeError) as exc_info:
        encode_body({"name": "plain dict"})  # type: ignore[arg-type]

    assert exc_info.value.target_type is dict
