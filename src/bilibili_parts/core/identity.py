"""Identity utilities for Bilibili video IDs.

A BV id is the literal prefix "BV" followed by exactly 10 ASCII
alphanumerics, case-sensitive (e.g. "BV1xx411c7mD").
"""

import re
from urllib.parse import unquote, urlsplit

BVID_PATTERN = re.compile(r"BV[0-9A-Za-z]{10}")


def extract_bvid(raw: str) -> str | None:
    """Extract the first BV id from arbitrary input.

    Searches the raw string first. If nothing matches, parses the input
    as a URL and searches each percent-decoded path segment in order.
    No trimming or case folding is applied.

    Args:
        raw: Raw BV id, full video URL, or any text.

    Returns:
        The BV id, or None if the input contains none.

    Examples:
        >>> extract_bvid("BV1xx411c7mD")
        'BV1xx411c7mD'
        >>> extract_bvid("https://www.bilibili.com/video/BV1xx411c7mD/?p=2")
        'BV1xx411c7mD'
        >>> extract_bvid("https://www.bilibili.com/video/%42V1xx411c7mD")
        'BV1xx411c7mD'
        >>> extract_bvid("av170001") is None
        True
    """
    match = BVID_PATTERN.search(raw)
    if match:
        return match.group(0)

    try:
        path = unquote(urlsplit(raw).path)
    except ValueError:
        # Unparseable URL (e.g. unbalanced IPv6 brackets)
        return None

    for segment in path.split("/"):
        match = BVID_PATTERN.search(segment)
        if match:
            return match.group(0)

    return None
