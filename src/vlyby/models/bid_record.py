"""Canonical bid records exchanged with the bidding and analytics endpoints."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class BidRequestRecord:
    """
    One bid event as reported in analytics telemetry.

    Built once per bid candidate and appended to exactly one bucket.
    Prices are display strings truncated to four characters.
    """

    bidder: str
    auction_id: str = ""
    ad_unit_code: str = ""
    transaction_id: str = ""
    bid_size: tuple[str, ...] = ("",)
    bid_type: tuple[str, ...] = ("",)
    time_ms: int = 0
    cur: str = ""
    price: str = ""
    cur_native: str = ""
    price_native: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the telemetry wire format."""
        return {
            "bidder": self.bidder,
            "auction_id": self.auction_id,
            "ad_unit_code": self.ad_unit_code,
            "transaction_id": self.transaction_id,
            "bid_size": list(self.bid_size),
            "bid_type": list(self.bid_type),
            "time_ms": self.time_ms,
            "cur": self.cur,
            "price": self.price,
            "cur_native": self.cur_native,
            "price_native": self.price_native,
        }


@dataclass(frozen=True)
class SlotRecord:
    """Per-slot entry of an outbound bid request."""

    sizes: tuple[str, ...]
    bid_id: str = ""
    bidder_request_id: str = ""
    pub_id: str = ""
    placement_id: str = ""
    ad_unit_code: str = ""
    auction_id: str = ""
    transaction_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "sizes": list(self.sizes),
            "bidId": self.bid_id,
            "bidderRequestId": self.bidder_request_id,
            "pubId": self.pub_id,
            "placementId": self.placement_id,
            "adUnitCode": self.ad_unit_code,
            "auctionId": self.auction_id,
            "transactionId": self.transaction_id,
        }


@dataclass(frozen=True)
class CanonicalBid:
    """
    A bid returned by the bidding endpoint, in host runtime shape.

    Pricing is always reported net of fees, and every bid is a banner.
    """

    request_id: Optional[str]
    cpm: Optional[float] = None
    currency: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    ttl: Optional[int] = None
    ad: Optional[str] = None
    creative_id: Optional[str] = None
    deal_id: Optional[str] = None
    placement_id: Optional[str] = None
    pub_id: Optional[str] = None
    media_type: str = "banner"
    net_revenue: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "requestId": self.request_id,
            "placementId": self.placement_id,
            "pubId": self.pub_id,
            "cpm": self.cpm,
            "mediaType": self.media_type,
            "width": self.width,
            "height": self.height,
            "currency": self.currency,
            "netRevenue": self.net_revenue,
            "ttl": self.ttl,
            "ad": self.ad,
            "creativeId": self.creative_id,
            "dealId": self.deal_id,
        }
