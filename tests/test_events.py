"""Tests for event parsing and telemetry record derivation."""

from src.vlyby.analytics.records import (
    build_bid_record,
    resolve_bid_sizes,
    resolve_bid_types,
)
from src.vlyby.models.events import (
    AuctionEnd,
    AuctionInit,
    BidEventData,
    BidRequested,
    BidTimeout,
    BidWon,
    EventType,
    NoBid,
    parse_event,
)


class TestParseEvent:
    """Test suite for parse_event."""

    def test_unknown_event(self):
        assert parse_event("setTargeting", {}) is None

    def test_empty_event_name(self):
        assert parse_event("", {"bidder": "a"}) is None
        assert parse_event(None) is None

    def test_auction_init(self):
        event = parse_event("auctionInit", {
            "auctionId": "a-1",
            "timestamp": 1600000000000,
            "timeout": 1500,
            "adUnits": [{"code": "div-1", "sizes": [[300, 250]]}, "junk"],
        })

        assert isinstance(event, AuctionInit)
        assert event.event_type == EventType.AUCTION_INIT
        assert event.timestamp == 1600000000000
        assert event.timeout == 1500
        assert [u.code for u in event.ad_units] == ["div-1"]

    def test_bid_events(self):
        assert isinstance(parse_event("noBid", {"bidder": "a"}), NoBid)
        assert isinstance(parse_event("bidWon", {"bidder": "a"}), BidWon)
        assert isinstance(parse_event("bidRequested", None), BidRequested)

    def test_bid_timeout_list(self):
        event = parse_event("bidTimeout", [{"bidder": "a"}, {"bidder": "b"}])

        assert isinstance(event, BidTimeout)
        assert [b.bidder for b in event.bids] == ["a", "b"]

    def test_bid_timeout_with_non_list_args(self):
        event = parse_event("bidTimeout", {"bidder": "a"})
        assert event.bids == ()

    def test_bid_timeout_drops_non_object_entries(self):
        event = parse_event("bidTimeout", [{"bidder": "a"}, "junk", ["b"]])
        assert [b.bidder for b in event.bids] == ["a"]

    def test_bid_event_from_non_object(self):
        """Lists and strings parse to an empty bid."""
        assert parse_event("noBid", ["x"]).bid == BidEventData()
        assert parse_event("bidWon", "x").bid == BidEventData()

    def test_auction_end_keeps_args(self):
        event = parse_event("auctionEnd", {"auctionId": "a-1"})

        assert isinstance(event, AuctionEnd)
        assert event.data == {"auctionId": "a-1"}

    def test_bid_event_data_from_dict(self):
        data = BidEventData.from_dict({
            "bidder": "vlyby",
            "adUnitCode": "div-1",
            "width": 300,
            "height": 250,
            "mediaType": "banner",
            "cpm": 1.5,
            "originalCpm": 1.7,
            "originalCurrency": "EUR",
        })

        assert data.bidder == "vlyby"
        assert data.sizes is None
        assert data.media_types is None
        assert data.original_currency == "EUR"


class TestRecordDerivation:
    """Tests for the per-field fallback chains."""

    def test_sizes_from_sizes_list(self):
        bid = BidEventData(sizes=[[300, 250], [728, 90]])
        assert resolve_bid_sizes(bid) == ("300,250", "728,90")

    def test_sizes_from_width_and_height(self):
        bid = BidEventData(width=300, height=250, size="300x250")
        assert resolve_bid_sizes(bid) == ("300,250",)

    def test_sizes_from_size_string(self):
        bid = BidEventData(size="300x250")
        assert resolve_bid_sizes(bid) == ("300x250",)

    def test_sizes_default(self):
        assert resolve_bid_sizes(BidEventData()) == ("",)

    def test_types_from_media_types(self):
        bid = BidEventData(media_types={"banner": {}, "video": {}}, media_type="video")
        assert resolve_bid_types(bid) == ("banner", "video")

    def test_types_from_media_type(self):
        assert resolve_bid_types(BidEventData(media_type="video")) == ("video",)

    def test_types_default(self):
        assert resolve_bid_types(BidEventData()) == ("",)

    def test_record_requires_bidder(self):
        assert build_bid_record(BidEventData(), 10) is None

    def test_currency_fallbacks(self):
        """cur prefers originalCurrency, then currency."""
        record = build_bid_record(BidEventData(bidder="a", currency="USD", cpm=5), 0)

        assert record.cur == "USD"
        assert record.cur_native == ""
        assert record.price == "5"
        assert record.price_native == ""

    def test_record_to_dict(self):
        record = build_bid_record(
            BidEventData(bidder="a", auction_id="x", width=320, height=50, media_type="banner"),
            42,
        )

        assert record.to_dict() == {
            "bidder": "a",
            "auction_id": "x",
            "ad_unit_code": "",
            "transaction_id": "",
            "bid_size": ["320,50"],
            "bid_type": ["banner"],
            "time_ms": 42,
            "cur": "",
            "price": "",
            "cur_native": "",
            "price_native": "",
        }
