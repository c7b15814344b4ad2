"""Shared pytest fixtures for bilibili_parts tests."""

import pytest

from bilibili_parts.models.types import PagelistEnvelope


@pytest.fixture
def envelope_payload() -> dict:
    """Realistic upstream pagelist payload with two parts."""
    return {
        "code": 0,
        "message": "0",
        "ttl": 1,
        "data": [
            {
                "cid": 279786,
                "page": 1,
                "from": "vupload",
                "part": "Opening",
                "duration": 217,
                "vid": "",
                "weblink": "",
                "dimension": {"width": 1920, "height": 1080, "rotate": 0},
            },
            {
                "cid": 279787,
                "page": 2,
                "from": "vupload",
                "part": "Main",
                "duration": 1305,
                "vid": "",
                "weblink": "",
                "dimension": {"width": 1920, "height": 1080, "rotate": 0},
            },
        ],
    }


@pytest.fixture
def envelope(envelope_payload: dict) -> PagelistEnvelope:
    """Parsed upstream envelope with two parts."""
    return PagelistEnvelope.model_validate(envelope_payload)
