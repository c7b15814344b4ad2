"""Tests for pydantic models.

Tests validate:
1. Upstream envelope parses realistic payloads
2. Unmodeled upstream fields are dropped
3. Malformed envelopes are rejected
4. Optional fields handled correctly
"""

import pytest
from pydantic import ValidationError

from bilibili_parts.models.types import (
    ErrorResponse,
    PagelistEnvelope,
    PartsResponse,
    PublicPart,
    UpstreamPart,
)


class TestPagelistEnvelope:
    """Test PagelistEnvelope model."""

    def test_valid_envelope(self, envelope_payload):
        """Realistic payload parses with parts in order."""
        envelope = PagelistEnvelope.model_validate(envelope_payload)
        assert envelope.code == 0
        assert envelope.ttl == 1
        assert [p.page for p in envelope.data] == [1, 2]

    def test_error_envelope_with_null_data(self):
        """Error envelopes carry null data."""
        envelope = PagelistEnvelope.model_validate_json(
            '{"code": -404, "message": "啥都木有", "ttl": 1, "data": null}'
        )
        assert envelope.code == -404
        assert envelope.message == "啥都木有"
        assert envelope.data is None

    def test_missing_optional_fields(self):
        """message, ttl and data are optional."""
        envelope = PagelistEnvelope.model_validate({"code": -400})
        assert envelope.message == ""
        assert envelope.ttl == 0
        assert envelope.data is None

    def test_missing_code_rejected(self):
        with pytest.raises(ValidationError):
            PagelistEnvelope.model_validate({"message": "0", "data": []})

    def test_invalid_json_rejected(self):
        with pytest.raises(ValidationError):
            PagelistEnvelope.model_validate_json("<html>busy</html>")

    def test_wrong_data_type_rejected(self):
        with pytest.raises(ValidationError):
            PagelistEnvelope.model_validate({"code": 0, "data": "nope"})


class TestUpstreamPart:
    """Test UpstreamPart model."""

    def test_extra_fields_dropped(self):
        part = UpstreamPart.model_validate(
            {"cid": 1, "page": 1, "part": "A", "duration": 100, "from": "vupload", "vid": ""}
        )
        assert part.model_dump() == {"cid": 1, "page": 1, "part": "A", "duration": 100}

    def test_missing_fields_default_to_zero_values(self):
        """A part without title or duration still parses."""
        part = UpstreamPart.model_validate({"cid": 7, "page": 1})
        assert part.part == ""
        assert part.duration == 0


class TestPublicModels:
    """Test public response models."""

    def test_parts_response_shape(self):
        response = PartsResponse(parts=[PublicPart(cid=1, page=1, title="A", duration=100)])
        assert response.model_dump() == {
            "parts": [{"cid": 1, "page": 1, "title": "A", "duration": 100}]
        }

    def test_error_response_optional_codes(self):
        error = ErrorResponse(error="boom")
        assert error.model_dump(exclude_none=True) == {"error": "boom"}
