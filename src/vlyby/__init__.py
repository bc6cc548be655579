"""
Vlyby header-bidding adapter core.

Builds bid requests for the Vlyby bidding endpoint, interprets its
responses, and aggregates auction lifecycle events into analytics
telemetry.
"""

from .analytics import AggregatorSession, EventAggregator, InMemoryTransport
from .bidder import RequestBuilder, ResponseInterpreter, is_bid_request_valid
from .models import AdUnit, CanonicalBid, EventType, SlotRequest
from .privacy import ConsentStatus, resolve_status
from .utils import resolve_sizes

__version__ = '1.0.0'

__all__ = [
    'AggregatorSession',
    'EventAggregator',
    'InMemoryTransport',
    'RequestBuilder',
    'ResponseInterpreter',
    'is_bid_request_valid',
    'AdUnit',
    'CanonicalBid',
    'EventType',
    'SlotRequest',
    'ConsentStatus',
    'resolve_status',
    'resolve_sizes',
]
