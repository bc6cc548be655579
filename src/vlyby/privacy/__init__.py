"""
Vlyby Privacy Module - GDPR consent status resolution.

Maps the host runtime's CMP data onto the status code sent to the bidding endpoint.
"""

from src.vlyby.privacy.consent_models import (
    ConsentPayload,
    ConsentStatus,
    GdprConsent,
    is_global_consent,
    resolve_status,
)

__all__ = [
    'ConsentPayload',
    'ConsentStatus',
    'GdprConsent',
    'is_global_consent',
    'resolve_status',
]
