"""Vlyby models and data types."""

from .ad_unit import AdUnit, MediaType, SlotRequest
from .bid_record import BidRequestRecord, CanonicalBid, SlotRecord
from .events import (
    AuctionEnd,
    AuctionEvent,
    AuctionInit,
    BidEventData,
    BidRequested,
    BidResponse,
    BidTimeout,
    BidWon,
    EventType,
    NoBid,
    parse_event,
)

__all__ = [
    "AdUnit",
    "MediaType",
    "SlotRequest",
    "BidRequestRecord",
    "CanonicalBid",
    "SlotRecord",
    "AuctionEvent",
    "AuctionInit",
    "AuctionEnd",
    "BidEventData",
    "BidRequested",
    "BidResponse",
    "BidTimeout",
    "BidWon",
    "NoBid",
    "EventType",
    "parse_event",
]
