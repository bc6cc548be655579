"""Ad unit and slot request models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class MediaType(str, Enum):
    """Media types an ad unit can declare."""
    BANNER = 'banner'
    VIDEO = 'video'
    NATIVE = 'native'


@dataclass
class AdUnit:
    """
    A placement on the page, as described by the host runtime.

    ``sizes`` is kept exactly as supplied: a single ``[w, h]`` pair, a list
    of pairs, or a list of ``"WxH"`` strings. ``media_types`` maps a media
    type name to its per-type config (``{'banner': {'sizes': [...]}}``).
    """

    code: str = ''
    sizes: list[Any] = field(default_factory=list)
    media_types: dict[str, dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AdUnit":
        """Create from a host runtime ad unit / bid request dict."""
        sizes = data.get('sizes')
        media_types = data.get('mediaTypes')
        return cls(
            code=data.get('code') or data.get('adUnitCode') or '',
            sizes=list(sizes) if isinstance(sizes, (list, tuple)) else [],
            media_types=dict(media_types) if isinstance(media_types, dict) else {},
        )

    @property
    def media_type_names(self) -> list[str]:
        """Declared media type names, in declaration order."""
        return list(self.media_types.keys())

    def media_type_sizes(self, media_type: str, key: str = 'sizes') -> Optional[list[Any]]:
        """Return a per-media-type size list, or None when not a list."""
        config = self.media_types.get(media_type)
        if not isinstance(config, dict):
            return None
        value = config.get(key)
        return value if isinstance(value, list) else None


@dataclass
class SlotRequest:
    """
    One validated bid request for a single ad slot.

    Identifiers default to empty strings; the host runtime validates the
    required ``pubId``/``placementId`` params before building requests.
    """

    ad_unit: AdUnit
    bid_id: str = ''
    bidder_request_id: str = ''
    ad_unit_code: str = ''
    auction_id: str = ''
    transaction_id: str = ''
    params: dict[str, Any] = field(default_factory=dict)
    schain: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SlotRequest":
        """Create from a host runtime bid request dict."""
        params = data.get('params')
        return cls(
            ad_unit=AdUnit.from_dict(data),
            bid_id=_id_param(data, 'bidId'),
            bidder_request_id=_id_param(data, 'bidderRequestId'),
            ad_unit_code=_id_param(data, 'adUnitCode'),
            auction_id=_id_param(data, 'auctionId'),
            transaction_id=_id_param(data, 'transactionId'),
            params=dict(params) if isinstance(params, dict) else {},
            schain=data.get('schain') or None,
        )

    @property
    def pub_id(self) -> str:
        return _id_param(self.params, 'pubId')

    @property
    def placement_id(self) -> str:
        return _id_param(self.params, 'placementId')


def _id_param(data: dict[str, Any], key: str) -> str:
    """Read an identifier, falling back to an empty string."""
    value = data.get(key)
    return str(value) if value else ''
