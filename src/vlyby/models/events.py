"""
Auction lifecycle events.

The host runtime emits loosely-shaped ``(eventType, args)`` pairs. Each
supported kind is parsed into its own frozen dataclass carrying only the
fields valid for that kind, so handlers never probe for missing keys.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from .ad_unit import AdUnit


class EventType(str, Enum):
    """Host runtime event names handled by the analytics adapter."""

    AUCTION_INIT = "auctionInit"
    AUCTION_END = "auctionEnd"
    BID_REQUESTED = "bidRequested"
    BID_RESPONSE = "bidResponse"
    NO_BID = "noBid"
    BID_TIMEOUT = "bidTimeout"
    BID_WON = "bidWon"


@dataclass(frozen=True)
class BidEventData:
    """
    Bid fields shared by no-bid, bid-response, timeout and won events.

    Sizes arrive either as ``sizes`` (list of pairs, on requests), as
    ``width``/``height`` (on responses) or as a ``size`` string ("300x250").
    """

    bidder: str = ""
    ad_unit_code: str = ""
    auction_id: str = ""
    transaction_id: str = ""

    sizes: Optional[list[Any]] = None
    size: str = ""
    width: Optional[Any] = None
    height: Optional[Any] = None

    media_types: Optional[dict[str, Any]] = None
    media_type: str = ""

    cpm: Optional[Any] = None
    currency: str = ""
    original_cpm: Optional[Any] = None
    original_currency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "BidEventData":
        """Create from a host runtime bid object; non-dict input yields an empty bid."""
        data = data if isinstance(data, dict) else {}
        sizes = data.get("sizes")
        media_types = data.get("mediaTypes")
        return cls(
            bidder=data.get("bidder") or "",
            ad_unit_code=data.get("adUnitCode") or "",
            auction_id=data.get("auctionId") or "",
            transaction_id=data.get("transactionId") or "",
            sizes=list(sizes) if isinstance(sizes, (list, tuple)) else None,
            size=data.get("size") or "",
            width=data.get("width"),
            height=data.get("height"),
            media_types=dict(media_types) if isinstance(media_types, dict) else None,
            media_type=data.get("mediaType") or "",
            cpm=data.get("cpm"),
            currency=data.get("currency") or "",
            original_cpm=data.get("originalCpm"),
            original_currency=data.get("originalCurrency"),
        )


@dataclass(frozen=True)
class AuctionInit:
    """Start of an auction: clock origin, timeout and participating ad units."""

    event_type: ClassVar[EventType] = EventType.AUCTION_INIT

    auction_id: str = ""
    timestamp: Optional[float] = None
    timeout: Optional[int] = None
    ad_units: tuple[AdUnit, ...] = ()


@dataclass(frozen=True)
class BidRequested:
    event_type: ClassVar[EventType] = EventType.BID_REQUESTED

    bidder_request: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BidResponse:
    event_type: ClassVar[EventType] = EventType.BID_RESPONSE

    bid: BidEventData = field(default_factory=BidEventData)


@dataclass(frozen=True)
class NoBid:
    event_type: ClassVar[EventType] = EventType.NO_BID

    bid: BidEventData = field(default_factory=BidEventData)


@dataclass(frozen=True)
class BidTimeout:
    event_type: ClassVar[EventType] = EventType.BID_TIMEOUT

    bids: tuple[BidEventData, ...] = ()


@dataclass(frozen=True)
class BidWon:
    event_type: ClassVar[EventType] = EventType.BID_WON

    bid: BidEventData = field(default_factory=BidEventData)


@dataclass(frozen=True)
class AuctionEnd:
    """End of an auction; ``data`` is echoed verbatim in the terminal marker."""

    event_type: ClassVar[EventType] = EventType.AUCTION_END

    data: Any = None


AuctionEvent = Union[
    AuctionInit, BidRequested, BidResponse, NoBid, BidTimeout, BidWon, AuctionEnd
]


def _parse_auction_init(args: Any) -> AuctionInit:
    args = args if isinstance(args, dict) else {}
    ad_units = args.get("adUnits") or []
    return AuctionInit(
        auction_id=args.get("auctionId") or "",
        timestamp=args.get("timestamp"),
        timeout=args.get("timeout"),
        ad_units=tuple(AdUnit.from_dict(u) for u in ad_units if isinstance(u, dict)),
    )


def _parse_bid_timeout(args: Any) -> BidTimeout:
    bids = args if isinstance(args, (list, tuple)) else []
    return BidTimeout(
        bids=tuple(BidEventData.from_dict(b) for b in bids if isinstance(b, dict))
    )


_PARSERS = {
    EventType.AUCTION_INIT: _parse_auction_init,
    EventType.BID_REQUESTED: lambda args: BidRequested(
        bidder_request=dict(args) if isinstance(args, dict) else {}
    ),
    EventType.BID_RESPONSE: lambda args: BidResponse(bid=BidEventData.from_dict(args)),
    EventType.NO_BID: lambda args: NoBid(bid=BidEventData.from_dict(args)),
    EventType.BID_TIMEOUT: _parse_bid_timeout,
    EventType.BID_WON: lambda args: BidWon(bid=BidEventData.from_dict(args)),
    EventType.AUCTION_END: lambda args: AuctionEnd(data=args),
}


def parse_event(event_type: Optional[str], args: Any = None) -> Optional[AuctionEvent]:
    """
    Parse a raw host runtime event.

    Args:
        event_type: Host event name (e.g. "bidWon")
        args: Event payload as delivered by the host

    Returns:
        The typed event, or None for an empty or unsupported event name
    """
    if not event_type:
        return None
    try:
        kind = EventType(event_type)
    except ValueError:
        return None
    return _PARSERS[kind](args)
