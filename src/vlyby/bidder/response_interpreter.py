"""Maps bidding endpoint responses onto canonical bids."""

from typing import Any, Optional

from ..logging import bidder_logger
from ..models.bid_record import CanonicalBid
from ..utils.constants import RESPONSE_MEDIA_TYPE


class ResponseInterpreter:
    """
    Interprets the bidding endpoint's response body.

    The body is a list of raw bids; each maps 1:1 onto a CanonicalBid.
    """

    def __init__(self, media_type: str = RESPONSE_MEDIA_TYPE):
        self.media_type = media_type
        self.logger = bidder_logger()

    def interpret(self, body: Optional[list[dict[str, Any]]]) -> list[CanonicalBid]:
        """
        Interpret a response body.

        Args:
            body: Raw bids returned by the endpoint (may be empty or None)

        Returns:
            Canonical bids, empty when the endpoint returned nothing
        """
        if not body:
            return []

        bids = [self._to_canonical(raw) for raw in body if isinstance(raw, dict)]
        self.logger.debug("Bid response interpreted", bids=len(bids))
        return bids

    def _to_canonical(self, raw: dict[str, Any]) -> CanonicalBid:
        return CanonicalBid(
            request_id=raw.get('bidId'),
            placement_id=raw.get('placementId'),
            pub_id=raw.get('pubId'),
            cpm=raw.get('cpm'),
            width=raw.get('width'),
            height=raw.get('height'),
            currency=raw.get('currency'),
            ttl=raw.get('ttl'),
            ad=raw.get('ad'),
            creative_id=raw.get('creativeId'),
            deal_id=raw.get('dealId'),
            media_type=self.media_type,
            net_revenue=True,
        )


def interpret_response(server_response: Optional[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Interpret a host runtime response envelope (``{'body': [...]}``).

    Returns bids in host runtime dict shape.
    """
    body = (server_response or {}).get('body')
    return [bid.to_dict() for bid in ResponseInterpreter().interpret(body)]
