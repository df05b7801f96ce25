"""
Contracts (data models).

This folder defines the request/response shapes for the Party backend:
- the REST bridge envelope and the bridge client interface
- per-endpoint request bodies and partially populated response schemas
- the normalized Outcome kinds produced from a backend response

Why this exists:
- Both the mock and the real HTTP bridge return the same envelope
- Handlers read typed fields instead of poking into ad-hoc dicts
- A response that does not fit its schema degrades to "field absent"
"""

from .base import RequestModel, ResponseSchema
from .bridge import BridgeResponse, HttpVerb, RestBridge, TransportFault
from .billing import BillingTerm, BillingTermsPage, BillingTermsQuery
from .outcomes import (
    BackendNotImplemented,
    ConflictMode,
    DuplicateConflict,
    Forbidden,
    GenericFailure,
    MergedRedirect,
    NotFound,
    Outcome,
    OutcomeKind,
    Success,
    TransportFailure,
    ValidationFailure,
)
from .parties import (
    CreateCommercialAccountRequest,
    CreatedAccount,
    DuplicateCandidate,
    DuplicateCheckRequest,
    DuplicateCheckResult,
    ErrorBody,
    PartyRecord,
    PartySearchPage,
    PartySearchRequest,
)

__all__ = [
    "RequestModel", "ResponseSchema",
    "BridgeResponse", "HttpVerb", "RestBridge", "TransportFault",
    "BillingTerm", "BillingTermsPage", "BillingTermsQuery",
    "BackendNotImplemented", "ConflictMode", "DuplicateConflict", "Forbidden",
    "GenericFailure", "MergedRedirect", "NotFound", "Outcome", "OutcomeKind",
    "Success", "TransportFailure", "ValidationFailure",
    "CreateCommercialAccountRequest", "CreatedAccount", "DuplicateCandidate",
    "DuplicateCheckRequest", "DuplicateCheckResult", "ErrorBody", "PartyRecord",
    "PartySearchPage", "PartySearchRequest",
]
