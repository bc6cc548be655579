"""
Derivation of telemetry records from bid events.

Each field has one explicit fallback chain; a bid event missing every
source for a field yields that field's empty default.
"""

from typing import Any, Optional

from ..models.bid_record import BidRequestRecord
from ..models.events import BidEventData
from ..utils.constants import TELEMETRY_SIZE_SEPARATOR
from ..utils.formatting import number_to_string, truncate_price

EMPTY_LIST_FIELD: tuple[str, ...] = ("",)


def _stringify(value: Any) -> str:
    """Render a size entry; nested lists join with commas (``[300, 250]`` -> "300,250")."""
    if isinstance(value, (list, tuple)):
        return TELEMETRY_SIZE_SEPARATOR.join(_stringify(v) for v in value)
    return number_to_string(value)


def resolve_bid_sizes(bid: BidEventData) -> tuple[str, ...]:
    """
    Resolve the sizes a bid was made for.

    Order: ``sizes`` list, then ``width``/``height``, then the ``size``
    string, then ``("",)``.
    """
    if bid.sizes is not None:
        return tuple(_stringify(s) for s in bid.sizes)
    if bid.width and bid.height:
        return (
            f"{number_to_string(bid.width)}{TELEMETRY_SIZE_SEPARATOR}"
            f"{number_to_string(bid.height)}",
        )
    if bid.size:
        return (bid.size,)
    return EMPTY_LIST_FIELD


def resolve_bid_types(bid: BidEventData) -> tuple[str, ...]:
    """
    Resolve the media types of a bid.

    Order: keys of ``mediaTypes``, then ``mediaType``, then ``("",)``.
    """
    if bid.media_types:
        return tuple(bid.media_types.keys())
    if bid.media_type:
        return (bid.media_type,)
    return EMPTY_LIST_FIELD


def build_bid_record(bid: BidEventData, elapsed_ms: int) -> Optional[BidRequestRecord]:
    """
    Build the telemetry record of a bid event.

    Returns None for events without a bidder code.
    """
    if not bid.bidder:
        return None

    if bid.original_currency is not None:
        currency = bid.original_currency
    else:
        currency = bid.currency or ""

    return BidRequestRecord(
        bidder=bid.bidder,
        auction_id=bid.auction_id,
        ad_unit_code=bid.ad_unit_code,
        transaction_id=bid.transaction_id or "",
        bid_size=resolve_bid_sizes(bid),
        bid_type=resolve_bid_types(bid),
        time_ms=elapsed_ms,
        cur=currency,
        price=truncate_price(bid.cpm),
        cur_native=bid.original_currency or "",
        price_native=truncate_price(bid.original_cpm),
    )
