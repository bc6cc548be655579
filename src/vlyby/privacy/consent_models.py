"""
Consent signal models for the bid request.

Supports the GDPR consent object handed over by the host runtime's
consent management module, for both TCF v1 and TCF v2 CMPs.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from ..logging import privacy_logger


class ConsentStatus(IntEnum):
    """GDPR status code reported to the bidding endpoint."""
    DOES_NOT_APPLY = 0          # GDPR does not apply to this user
    APPLIES_PUBLISHER_ONLY = 1  # Consent scoped to this publisher / service
    APPLIES_GLOBALLY = 2        # Global (cross-site) consent
    CMP_UNAVAILABLE = 3         # No CMP found or CMP error


def is_global_consent(vendor_data: Optional[dict[str, Any]], api_version: Any) -> bool:
    """
    Check whether CMP vendor data carries a global consent scope.

    TCF v1 CMPs flag it with ``hasGlobalScope`` or ``hasGlobalConsent``;
    TCF v2 CMPs flag service-specific consent with ``isServiceSpecific``.
    Any other API version is never global.
    """
    if vendor_data is None:
        return False
    if api_version == 1:
        return bool(
            vendor_data.get('hasGlobalScope') or vendor_data.get('hasGlobalConsent')
        )
    if api_version == 2:
        return not vendor_data.get('isServiceSpecific')
    return False


def resolve_status(
    gdpr_applies: Optional[bool],
    vendor_data: Optional[dict[str, Any]] = None,
    api_version: Any = None,
) -> ConsentStatus:
    """
    Resolve the consent status code.

    Decision table:
        gdpr_applies is None       -> CMP_UNAVAILABLE
        gdpr_applies is False      -> DOES_NOT_APPLY
        True, global vendor scope  -> APPLIES_GLOBALLY
        True, otherwise            -> APPLIES_PUBLISHER_ONLY

    Never raises, even when all consent data is missing.
    """
    if not isinstance(gdpr_applies, bool):
        return ConsentStatus.CMP_UNAVAILABLE
    if not gdpr_applies:
        return ConsentStatus.DOES_NOT_APPLY
    if is_global_consent(vendor_data, api_version):
        return ConsentStatus.APPLIES_GLOBALLY
    return ConsentStatus.APPLIES_PUBLISHER_ONLY


@dataclass
class GdprConsent:
    """
    GDPR consent context supplied by the host runtime.

    ``gdpr_applies`` stays None when the CMP did not answer; ``consent_string``
    stays None when the CMP returned something other than a string.
    """
    gdpr_applies: Optional[bool] = None
    consent_string: Optional[str] = None
    vendor_data: Optional[dict[str, Any]] = None
    api_version: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GdprConsent":
        """Create from the host runtime ``gdprConsent`` object."""
        gdpr_applies = data.get('gdprApplies')
        consent_string = data.get('consentString')
        vendor_data = data.get('vendorData')
        return cls(
            gdpr_applies=gdpr_applies if isinstance(gdpr_applies, bool) else None,
            consent_string=consent_string if isinstance(consent_string, str) else None,
            vendor_data=vendor_data if isinstance(vendor_data, dict) else None,
            api_version=data.get('apiVersion'),
        )

    @property
    def status(self) -> ConsentStatus:
        return resolve_status(self.gdpr_applies, self.vendor_data, self.api_version)

    def to_payload(self) -> "ConsentPayload":
        """Build the ``gdpr_iab`` object sent with bid requests."""
        payload = ConsentPayload(
            consent=self.consent_string or '',
            status=self.status,
            api_version=self.api_version,
        )
        privacy_logger().debug(
            "Consent resolved",
            status=payload.status.name,
            api_version=self.api_version,
            has_consent_string=bool(payload.consent),
        )
        return payload


@dataclass
class ConsentPayload:
    """The ``gdpr_iab`` section of an outbound bid request."""
    consent: str = ''
    status: ConsentStatus = ConsentStatus.CMP_UNAVAILABLE
    api_version: Any = None

    def to_dict(self) -> dict[str, Any]:
        payload = {'consent': self.consent, 'status': int(self.status)}
        if self.api_version is not None:
            payload['apiVersion'] = self.api_version
        return payload
