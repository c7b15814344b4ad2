"""Translation of upstream pagelist entries to the public schema.

- Order is preserved (page order as returned upstream)
- Only cid, page, title and duration survive
- An empty list is a not-found condition, never an empty success
"""

from bilibili_parts.errors import PartsNotFound
from bilibili_parts.models.types import PagelistEnvelope, PartsResponse, PublicPart, UpstreamPart


def to_public_part(part: UpstreamPart) -> PublicPart:
    return PublicPart(
        cid=part.cid,
        page=part.page,
        title=part.part,
        duration=part.duration,
    )


def to_public_parts(envelope: PagelistEnvelope) -> list[PublicPart]:
    """Map every upstream part to a PublicPart.

    Args:
        envelope: Upstream envelope; null data counts as empty.

    Returns:
        Public parts in upstream order.
    """
    return [to_public_part(part) for part in envelope.data or []]


def build_parts_response(envelope: PagelistEnvelope) -> PartsResponse:
    """Build the success body.

    Raises:
        PartsNotFound: If the envelope lists no parts.
    """
    parts = to_public_parts(envelope)
    if not parts:
        raise PartsNotFound()
    return PartsResponse(parts=parts)
