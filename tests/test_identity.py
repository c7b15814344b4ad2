"""Tests for BV id extraction.

Invariants:
1. Any input containing a BV id substring yields exactly that id
2. First match wins
3. Inputs without a BV id yield None
4. No trimming or case folding
"""

import pytest

from bilibili_parts.core.identity import extract_bvid

BVID = "BV1xx411c7mD"


class TestExtractBvid:
    """Tests for extract_bvid."""

    def test_raw_id(self):
        """A bare BV id is returned unchanged."""
        assert extract_bvid(BVID) == BVID

    @pytest.mark.parametrize(
        "raw",
        [
            f"https://www.bilibili.com/video/{BVID}",
            f"https://www.bilibili.com/video/{BVID}/",
            f"https://www.bilibili.com/video/{BVID}/?p=3&spm_id_from=333.788",
            f"https://m.bilibili.com/video/{BVID}",
            f"https://www.bilibili.com/list/watchlater?bvid={BVID}",
            f"【Title】 https://www.bilibili.com/video/{BVID} share",
            f"www.bilibili.com/video/{BVID}",
            "https://www.bilibili.com/video/%42V1xx411c7mD",
            "https://www.bilibili.com/video/BV1xx411c%37mD/",
        ],
    )
    def test_id_inside_url_or_text(self, raw):
        """Id is found in paths (percent-encoded too), query strings and share text."""
        assert extract_bvid(raw) == BVID

    def test_first_match_wins(self):
        """With several ids, the first one is returned."""
        raw = "BV1aaaaaaaaa BV1bbbbbbbbb"
        assert extract_bvid(raw) == "BV1aaaaaaaaa"

    def test_longer_token_yields_first_ten_chars(self):
        """Only ten characters after the prefix belong to the id."""
        assert extract_bvid(BVID + "XYZ") == BVID

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "av170001",
            "BV1xx411c7m",  # 9 chars
            "bv1xx411c7mD",  # lowercase prefix
            "BV1xx411-7mD",
            "https://www.bilibili.com/video/av170001",
            "http://[::1",  # unparseable URL
        ],
    )
    def test_no_id_returns_none(self, raw):
        """Inputs without a valid id return None."""
        assert extract_bvid(raw) is None

    def test_no_trimming(self):
        """Surrounding whitespace does not prevent extraction nor leak into the id."""
        assert extract_bvid(f"  {BVID}\n") == BVID

