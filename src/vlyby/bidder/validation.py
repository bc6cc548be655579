"""Bid parameter validation called by the host runtime before building requests."""

from typing import Any

from ..logging import bidder_logger
from ..utils.constants import BIDDER_CODE

REQUIRED_PARAMS: tuple[str, ...] = ('pubId', 'placementId')


def is_bid_request_valid(bid: dict[str, Any]) -> bool:
    """
    Check that a bid carries the required ``pubId`` and ``placementId`` params.

    Invalid bids are logged and dropped by the host runtime.
    """
    params = bid.get('params')
    is_valid = isinstance(params, dict) and all(params.get(p) for p in REQUIRED_PARAMS)

    if not is_valid:
        bidder_logger().error(
            "placementId and pubId parameters are required. Bid aborted.",
            bidder=BIDDER_CODE,
            ad_unit_code=bid.get('adUnitCode', ''),
        )
    return is_valid
