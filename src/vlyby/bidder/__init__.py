"""Vlyby bid adapter: request building, response interpretation, validation."""

from .request_builder import (
    BidderRequestContext,
    EnvironmentSignals,
    RequestBuilder,
    ServerRequest,
    build_slot_record,
)
from .response_interpreter import ResponseInterpreter, interpret_response
from .validation import is_bid_request_valid

__all__ = [
    "BidderRequestContext",
    "EnvironmentSignals",
    "RequestBuilder",
    "ServerRequest",
    "build_slot_record",
    "ResponseInterpreter",
    "interpret_response",
    "is_bid_request_valid",
]
