"""
Auction event aggregator for the Vlyby analytics adapter.

Collects host runtime lifecycle events into one bucket per event kind and
emits consolidated telemetry at two points: immediately on a won bid, and
on auction end.

Buckets are never cleared by auction end. A page running several auctions
accumulates records across all of them until the session is reset
explicitly with ``EventAggregator.reset()``.
"""

import json
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..config.adapter_config import AdapterConfig, get_adapter_config
from ..logging import analytics_logger, set_auction_id
from ..models.bid_record import BidRequestRecord
from ..models.events import (
    AuctionEnd,
    AuctionEvent,
    AuctionInit,
    BidEventData,
    BidRequested,
    BidResponse,
    BidTimeout,
    BidWon,
    NoBid,
    parse_event,
)
from ..utils.constants import AUCTION_END_MARKER
from ..utils.sizes import summarize_sizes
from .records import build_bid_record
from .transport import HttpTransport, Transport


class AggregatorState(str, Enum):
    """Lifecycle of an aggregator session."""

    UNINITIALIZED = "uninitialized"  # No auction-init seen yet
    INITIALIZED = "initialized"      # Clock origin captured
    COLLECTING = "collecting"        # At least one bid event recorded
    FINALIZED = "finalized"          # Auction-end emitted


class BucketKind(str, Enum):
    """Event kinds that own a bucket; the value is the bucket's status tag."""

    NO_BID = "noBid"
    BID_RESPONSE = "bidResponse"
    BID_TIMEOUT = "bidTimeout"
    BID_WON = "bidWon"


@dataclass
class AuctionBucket:
    """Ordered records of one event kind."""

    kind: BucketKind
    events: list[BidRequestRecord] = field(default_factory=list)
    status: str = ""

    def append(self, record: Optional[BidRequestRecord]) -> None:
        if record is not None:
            self.events.append(record)

    def refresh(self) -> None:
        """Mark the bucket as populated by its event kind."""
        self.status = self.kind.value

    def snapshot(self) -> dict[str, Any]:
        """Wire form; an untouched bucket is an empty object."""
        if not self.status:
            return {}
        return {
            "status": self.status,
            "bids": [record.to_dict() for record in self.events],
        }


@dataclass
class InitOptions:
    """
    Options echoed on every telemetry payload.

    Identifiers come from analytics enable time; the timeout and ad unit
    summaries are captured at auction-init.
    """

    pub_id: str = ""
    site_id: str = ""
    placement_id: str = ""
    request_id: str = ""
    c_timeout: Optional[int] = None
    ad_unit_size: list[str] = field(default_factory=list)
    ad_unit_type: list[str] = field(default_factory=list)

    @classmethod
    def from_options(cls, options: Optional[dict[str, Any]]) -> "InitOptions":
        """Create from the ``options`` object passed at enable time."""
        options = options or {}
        return cls(
            pub_id=str(options.get("pubId") or ""),
            site_id=str(options.get("siteId") or ""),
            placement_id=str(options.get("placementId") or ""),
            request_id=str(options.get("requestId") or ""),
        )

    def clear_auction_summary(self) -> None:
        self.c_timeout = None
        self.ad_unit_size = []
        self.ad_unit_type = []

    def to_payload(self) -> dict[str, Any]:
        return {
            "pubId": self.pub_id,
            "siteId": self.site_id,
            "placementId": self.placement_id,
            "requestId": self.request_id,
            "ad_unit_size": self.ad_unit_size or [""],
            "ad_unit_type": self.ad_unit_type or [""],
            "c_timeout": self.c_timeout or 0,
        }


def _new_buckets() -> dict[BucketKind, AuctionBucket]:
    return {kind: AuctionBucket(kind=kind) for kind in BucketKind}


@dataclass
class AggregatorSession:
    """
    All mutable aggregation state for one page session.

    Owned by the caller and handed to an EventAggregator.
    """

    options: InitOptions = field(default_factory=InitOptions)
    buckets: dict[BucketKind, AuctionBucket] = field(default_factory=_new_buckets)
    clock_origin: Optional[float] = None
    state: AggregatorState = AggregatorState.UNINITIALIZED

    def bucket(self, kind: BucketKind) -> AuctionBucket:
        return self.buckets[kind]

    def elapsed_ms(self, now_ms: float) -> int:
        """Milliseconds since auction-init; 0 before any auction-init."""
        if self.clock_origin is None:
            return 0
        return int(now_ms - self.clock_origin)

    def reset(self) -> None:
        """
        Start a fresh session.

        Buckets, clock origin and auction summaries are dropped; the
        enable-time identifiers are kept.
        """
        self.buckets = _new_buckets()
        self.clock_origin = None
        self.state = AggregatorState.UNINITIALIZED
        self.options.clear_auction_summary()


def build_won_payload(session: AggregatorSession) -> dict[str, Any]:
    """Telemetry body sent immediately after a won bid."""
    return {
        **session.options.to_payload(),
        "events": [session.bucket(BucketKind.BID_WON).snapshot()],
    }


def build_auction_end_payload(session: AggregatorSession, data: Any = None) -> dict[str, Any]:
    """Telemetry body sent on auction end: every bucket plus the terminal marker."""
    return {
        **session.options.to_payload(),
        "events": [
            session.bucket(BucketKind.NO_BID).snapshot(),
            session.bucket(BucketKind.BID_RESPONSE).snapshot(),
            session.bucket(BucketKind.BID_TIMEOUT).snapshot(),
            session.bucket(BucketKind.BID_WON).snapshot(),
            {"status": AUCTION_END_MARKER, "data": data},
        ],
    }


def _epoch_ms() -> float:
    return time.time() * 1000


class EventAggregator:
    """
    Stateful pipeline from lifecycle events to telemetry.

    Events are delivered serially by the host runtime; no handler blocks,
    and sends go through the injected transport without waiting for a
    response.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        session: AggregatorSession | None = None,
        clock: Callable[[], float] | None = None,
        config: AdapterConfig | None = None,
    ):
        """
        Initialize the aggregator.

        Args:
            transport: Where telemetry bodies are sent (HTTP by default)
            session: Session state to mutate (a fresh one by default)
            clock: Returns the current time in epoch milliseconds
            config: Adapter configuration (analytics endpoint)
        """
        config = config or get_adapter_config()
        self.url = config.analytics_endpoint
        self.transport = transport or HttpTransport(config=config)
        self.session = session or AggregatorSession()
        self.clock = clock or _epoch_ms
        self.logger = analytics_logger()

        self._handlers: dict[type, Callable[[Any], None]] = {
            AuctionInit: self._handle_auction_init,
            BidRequested: self._handle_bid_requested,
            NoBid: self._handle_no_bid,
            BidResponse: self._handle_bid_response,
            BidTimeout: self._handle_bid_timeout,
            BidWon: self._handle_bid_won,
            AuctionEnd: self._handle_auction_end,
        }

    @property
    def state(self) -> AggregatorState:
        return self.session.state

    def enable(self, options: Optional[dict[str, Any]] = None) -> None:
        """Capture enable-time options, replacing any previous ones."""
        self.session.options = InitOptions.from_options(options)
        self.logger.info(
            "Analytics enabled",
            pub_id=self.session.options.pub_id,
            site_id=self.session.options.site_id,
        )

    def reset(self) -> None:
        """Drop all accumulated auction state."""
        self.session.reset()
        self.logger.info("Aggregator session reset")

    def track(self, event_type: Optional[str], args: Any = None) -> None:
        """
        Handle a raw host runtime event.

        Events with an empty or unknown name are ignored.
        """
        event = parse_event(event_type, args)
        if event is None:
            self.logger.debug("Event ignored", event_type=event_type)
            return
        self.handle(event)

    def handle(self, event: AuctionEvent) -> None:
        """Handle a typed lifecycle event."""
        self._handlers[type(event)](event)

    def _handle_auction_init(self, event: AuctionInit) -> None:
        now = self.clock()
        options = self.session.options
        options.c_timeout = event.timeout
        options.ad_unit_size = [summarize_sizes(u) for u in event.ad_units]
        options.ad_unit_type = [",".join(u.media_type_names) for u in event.ad_units]

        self.session.clock_origin = event.timestamp if event.timestamp is not None else now
        self.session.state = AggregatorState.INITIALIZED

        set_auction_id(event.auction_id)
        self.logger.debug(
            "Auction initialized",
            ad_units=len(event.ad_units),
            timeout=event.timeout,
        )

    def _handle_bid_requested(self, event: BidRequested) -> None:
        pass

    def _handle_no_bid(self, event: NoBid) -> None:
        self._record(BucketKind.NO_BID, [event.bid])

    def _handle_bid_response(self, event: BidResponse) -> None:
        self._record(BucketKind.BID_RESPONSE, [event.bid])

    def _handle_bid_timeout(self, event: BidTimeout) -> None:
        self._record(BucketKind.BID_TIMEOUT, list(event.bids))

    def _handle_bid_won(self, event: BidWon) -> None:
        self._record(BucketKind.BID_WON, [event.bid])
        self._emit(build_won_payload(self.session))

    def _handle_auction_end(self, event: AuctionEnd) -> None:
        self._emit(build_auction_end_payload(self.session, event.data))
        self.session.state = AggregatorState.FINALIZED

    def _record(self, kind: BucketKind, bids: list[BidEventData]) -> None:
        bucket = self.session.bucket(kind)
        elapsed = self.session.elapsed_ms(self.clock())
        for bid in bids:
            record = build_bid_record(bid, elapsed)
            if record is None:
                self.logger.debug("Bid without bidder skipped", bucket=kind.value)
            bucket.append(record)
        bucket.refresh()

        if self.session.state == AggregatorState.INITIALIZED:
            self.session.state = AggregatorState.COLLECTING

    def _emit(self, payload: dict[str, Any]) -> None:
        body = json.dumps(payload, default=str)
        self.transport.send(self.url, body)
        self.logger.info(
            "Telemetry emitted",
            events=len(payload["events"]),
            bytes=len(body),
        )
