"""
Request Builder for the Vlyby bid adapter.

Turns the host runtime's validated slot requests into one outbound bid
request enriched with page and environment signals. Building is a pure
transform; sending the request is left to the caller.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..config.adapter_config import AdapterConfig, get_adapter_config
from ..logging import bidder_logger
from ..models.ad_unit import SlotRequest
from ..models.bid_record import SlotRecord
from ..privacy.consent_models import GdprConsent
from ..utils.constants import REQUEST_METHOD, REQUEST_SIZE_SEPARATOR
from ..utils.formatting import number_to_string
from ..utils.sizes import resolve_sizes


@dataclass
class EnvironmentSignals:
    """
    Page and device signals observed by the host.

    ``downlink`` is the estimated network bandwidth in Mbit/s, None when the
    browser does not expose it.
    """

    page_referrer: str = ''
    host: str = ''
    downlink: Optional[float] = None
    device_width: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EnvironmentSignals":
        downlink = data.get('downlink')
        device_width = data.get('deviceWidth')
        return cls(
            page_referrer=data.get('pageReferrer') or '',
            host=data.get('host') or '',
            downlink=downlink if isinstance(downlink, (int, float)) else None,
            device_width=device_width if isinstance(device_width, int) else 0,
        )

    @property
    def network_bandwidth(self) -> str:
        """Bandwidth estimate as a string, empty when unknown or negative."""
        if self.downlink is None or isinstance(self.downlink, bool) or self.downlink < 0:
            return ''
        return number_to_string(self.downlink)


@dataclass
class BidderRequestContext:
    """Auction-wide context the host passes alongside the slot requests."""

    referrer: str = ''
    gdpr_consent: Optional[GdprConsent] = None

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "BidderRequestContext":
        """Create from the host runtime ``bidderRequest`` object."""
        if not data:
            return cls()
        referer_info = data.get('refererInfo') or {}
        gdpr = data.get('gdprConsent')
        return cls(
            referrer=referer_info.get('referer') or '',
            gdpr_consent=GdprConsent.from_dict(gdpr) if isinstance(gdpr, dict) else None,
        )


@dataclass
class ServerRequest:
    """An outbound request ready to hand to a transport."""

    method: str
    url: str
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def data(self) -> str:
        """JSON body."""
        return json.dumps(self.payload)


def build_slot_record(slot: SlotRequest) -> SlotRecord:
    """Build the per-slot entry of the outbound request."""
    return SlotRecord(
        sizes=tuple(resolve_sizes(slot.ad_unit, REQUEST_SIZE_SEPARATOR)),
        bid_id=slot.bid_id,
        bidder_request_id=slot.bidder_request_id,
        pub_id=slot.pub_id,
        placement_id=slot.placement_id,
        ad_unit_code=slot.ad_unit_code,
        auction_id=slot.auction_id,
        transaction_id=slot.transaction_id,
    )


class RequestBuilder:
    """
    Builds outbound bid requests.

    One payload is produced per auction, holding one record per slot.
    """

    def __init__(self, config: AdapterConfig | None = None):
        """
        Initialize the builder.

        Args:
            config: Adapter configuration (endpoint and version tag).
                   Defaults to the global adapter configuration.
        """
        self.config = config or get_adapter_config()
        self.logger = bidder_logger()

    def build(
        self,
        slot_requests: list[Union[SlotRequest, dict[str, Any]]],
        bidder_request: Union[BidderRequestContext, dict[str, Any], None] = None,
        environment: Union[EnvironmentSignals, dict[str, Any], None] = None,
    ) -> ServerRequest:
        """
        Build the bid request for a set of validated slots.

        Args:
            slot_requests: Validated slot requests, as SlotRequest or host dicts
            bidder_request: Referrer and consent context
            environment: Page and device signals

        Returns:
            ServerRequest with the JSON payload
        """
        slots = [
            s if isinstance(s, SlotRequest) else SlotRequest.from_dict(s)
            for s in slot_requests
        ]
        context = self._as_context(bidder_request)
        env = self._as_environment(environment)

        payload: dict[str, Any] = {
            'referrer': context.referrer,
            'pageReferrer': env.page_referrer,
            'host': env.host,
            'networkBandwidth': env.network_bandwidth,
            'data': [build_slot_record(s).to_dict() for s in slots],
            'deviceWidth': env.device_width,
            'hb_version': self.config.hb_version,
        }

        if slots and slots[0].schain:
            payload['schain'] = slots[0].schain

        if context.gdpr_consent is not None:
            payload['gdpr_iab'] = context.gdpr_consent.to_payload().to_dict()

        self.logger.debug(
            "Bid request built",
            slots=len(slots),
            has_schain='schain' in payload,
            has_consent='gdpr_iab' in payload,
        )
        return ServerRequest(
            method=REQUEST_METHOD,
            url=self.config.bid_endpoint,
            payload=payload,
        )

    def _as_context(self, bidder_request) -> BidderRequestContext:
        if isinstance(bidder_request, BidderRequestContext):
            return bidder_request
        return BidderRequestContext.from_dict(bidder_request)

    def _as_environment(self, environment) -> EnvironmentSignals:
        if isinstance(environment, EnvironmentSignals):
            return environment
        return EnvironmentSignals.from_dict(environment or {})
