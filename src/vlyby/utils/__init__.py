"""Vlyby utilities."""

from .constants import BIDDER_CODE, SUPPORTED_MEDIA_TYPES
from .formatting import number_to_string, truncate_price
from .sizes import resolve_sizes, summarize_sizes

__all__ = [
    'BIDDER_CODE',
    'SUPPORTED_MEDIA_TYPES',
    'number_to_string',
    'truncate_price',
    'resolve_sizes',
    'summarize_sizes',
]
