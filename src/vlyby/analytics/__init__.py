"""Vlyby analytics adapter: event aggregation and telemetry transport."""

from .aggregator import (
    AggregatorSession,
    AggregatorState,
    AuctionBucket,
    BucketKind,
    EventAggregator,
    InitOptions,
    build_auction_end_payload,
    build_won_payload,
)
from .records import build_bid_record, resolve_bid_sizes, resolve_bid_types
from .transport import HttpTransport, InMemoryTransport, SentPayload, Transport

__all__ = [
    "AggregatorSession",
    "AggregatorState",
    "AuctionBucket",
    "BucketKind",
    "EventAggregator",
    "InitOptions",
    "build_auction_end_payload",
    "build_won_payload",
    "build_bid_record",
    "resolve_bid_sizes",
    "resolve_bid_types",
    "HttpTransport",
    "InMemoryTransport",
    "SentPayload",
    "Transport",
]
