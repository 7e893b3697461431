"""
Tests for the binary and JSON encodings.
"""

import json
import math
import struct

import pytest

from geopoint.core import codec
from geopoint.core.errors import DecodeError, InvalidPayloadError, TruncatedInputError
from geopoint.models.point import new_point


class TestBinaryCodec:
    """Tests for the 16-byte binary encoding."""

    def test_layout(self) -> None:
        """Test two little-endian doubles, latitude first."""
        point = new_point(40.7486, -73.9864)

        data = codec.encode_binary(point)

        assert len(data) == codec.BINARY_SIZE == 16
        assert data == struct.pack("<dd", 40.7486, -73.9864)

    def test_decode_bit_exact(self) -> None:
        """Test that decoding reproduces the exact doubles."""
        point = new_point(0.1 + 0.2, -1e-300)

        decoded = codec.decode_binary(codec.encode_binary(point))

        assert decoded == point
        assert decoded.latitude.hex() == point.latitude.hex()

    def test_non_finite_values(self) -> None:
        """Test that NaN and infinities pass through unchanged."""
        decoded = codec.decode_binary(struct.pack("<dd", math.nan, math.inf))

        assert math.isnan(decoded.latitude)
        assert decoded.longitude == math.inf

    def test_truncated(self) -> None:
        """Test that short input raises TruncatedInputError."""
        with pytest.raises(TruncatedInputError) as exc_info:
            codec.decode_binary(b"\x00" * 15)

        error = exc_info.value
        assert isinstance(error, DecodeError)
        assert error.error_code == "TRUNCATED_INPUT"
        assert error.status_code == 422
        assert error.details["expected_bytes"] == 16
        assert error.details["received_bytes"] == 15
        assert error.details["encoding"] == "binary"

    def test_empty(self) -> None:
        """Test that empty input is truncated input."""
        with pytest.raises(TruncatedInputError):
            codec.decode_binary(b"")

    def test_trailing_bytes_ignored(self) -> None:
        """Test that bytes after the first 16 are ignored."""
        data = struct.pack("<dd", 1.5, -2.5) + b"extra"

        assert codec.decode_binary(data) == new_point(1.5, -2.5)

    def test_accepts_bytearray(self) -> None:
        """Test decoding from a mutable buffer."""
        assert codec.decode_binary(bytearray(struct.pack("<dd", 1.0, 2.0))) == new_point(1.0, 2.0)


class TestJSONCodec:
    """Tests for the JSON encoding."""

    def test_encode(self) -> None:
        """Test compact output with lat then lng."""
        assert codec.encode_json(new_point(40.7486, -73.9864)) == '{"lat":40.7486,"lng":-73.9864}'

    def test_encode_integral_values(self) -> None:
        """Test that whole numbers are written as floats."""
        assert json.loads(codec.encode_json(new_point(1, -2))) == {"lat": 1.0, "lng": -2.0}

    def test_decode(self) -> None:
        """Test decoding a well-formed payload."""
        assert codec.decode_json('{"lat":40.7486,"lng":-73.9864}') == new_point(40.7486, -73.9864)

    def test_decode_bytes_and_whitespace(self) -> None:
        """Test decoding bytes with arbitrary spacing and key order."""
        point = codec.decode_json(b'{ "lng" : -73.9864 , "lat" : 40.7486 }')
        assert point == new_point(40.7486, -73.9864)

    def test_decode_integers(self) -> None:
        """Test that integer JSON numbers are accepted."""
        assert codec.decode_json('{"lat": 1, "lng": -2}') == new_point(1.0, -2.0)

    def test_decode_ignores_unknown_keys(self) -> None:
        """Test that extra keys are ignored."""
        assert codec.decode_json('{"lat": 1.5, "lng": 2.5, "alt": 10}') == new_point(1.5, 2.5)

    def test_round_trip(self) -> None:
        """Test that encoded text decodes to the same point."""
        point = new_point(-33.8688, 151.2093)
        assert codec.decode_json(codec.encode_json(point)) == point

    @pytest.mark.parametrize(
        "payload",
        [
            "not json",
            "[1, 2]",
            '{"lat": "40.5", "lng": 1}',
            '{"lat": true, "lng": 1}',
            '{"lat": null, "lng": 1}',
            '{"lng": -73.9864}',
        ],
    )
    def test_invalid_payload(self, payload: str) -> None:
        """Test that malformed payloads raise InvalidPayloadError."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            codec.decode_json(payload, lenient=False)

        error = exc_info.value
        assert error.error_code == "INVALID_PAYLOAD"
        assert error.status_code == 422
        assert error.details["encoding"] == "json"
        assert error.details["errors"]

    def test_missing_key_reports_field(self) -> None:
        """Test that a missing key is named in the error details."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            codec.decode_json('{"lng": -73.9864}', lenient=False)

        fields = [error["field"] for error in exc_info.value.details["errors"]]
        assert fields == ["lat"]

    def test_lenient_missing_key_defaults_to_zero(self) -> None:
        """Test that lenient decoding fills a missing axis with 0.0."""
        assert codec.decode_json('{"lng": -73.9864}', lenient=True) == new_point(0.0, -73.9864)

    def test_lenient_still_rejects_wrong_types(self) -> None:
        """Test that lenient decoding still requires numbers."""
        with pytest.raises(InvalidPayloadError):
            codec.decode_json('{"lat": "north", "lng": 1}', lenient=True)

    def test_lenient_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the default mode comes from settings."""
        monkeypatch.setattr(codec.settings, "lenient_json_decode", True)
        assert codec.decode_json("{}") == new_point(0.0, 0.0)

        monkeypatch.setattr(codec.settings, "lenient_json_decode", False)
        with pytest.raises(InvalidPayloadError):
            codec.decode_json("{}")
