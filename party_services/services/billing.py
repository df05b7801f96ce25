"""
Billing terms listing.

Forms need a billing-terms picker even while the Billing backend is missing:
- 501 from the backend -> the standard four-term catalog
- any other failure (including transport faults) -> NET30 only, with an
  informational message
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from party_services.error_handler import error_handler
from party_services.integrations.contracts.billing import BillingTerm, BillingTermsPage, BillingTermsQuery
from party_services.integrations.contracts.bridge import HttpVerb, RestBridge
from party_services.integrations.contracts.outcomes import BackendNotImplemented, Success, TransportFailure
from party_services.integrations.policy.bridge_call import call_backend
from party_services.messages import MessageCollector
from party_services.services.base import as_bool

logger = logging.getLogger(__name__)

BILLING_TERMS_ENDPOINT = "/v1/billing/terms"
UNAVAILABLE_MESSAGE = "Unable to load billing terms"

_STANDARD_TERMS = (
    ("NET30", "Net 30 Days"),
    ("NET60", "Net 60 Days"),
    ("COD", "Cash on Delivery"),
    ("PREPAY", "Prepayment Required"),
)


def _term(code: str, description: str) -> Dict[str, Any]:
    return BillingTerm(billing_terms_id=code, code=code, description=description, active=True).to_record()


def standard_catalog() -> List[Dict[str, Any]]:
    return [_term(code, description) for code, description in _STANDARD_TERMS]


def minimal_catalog() -> List[Dict[str, Any]]:
    return [_term(*_STANDARD_TERMS[0])]


def list_billing_terms(bridge: RestBridge, request: Mapping[str, Any], messages: MessageCollector) -> Dict[str, Any]:
    active_only = request.get("activeOnly")
    query = BillingTermsQuery(active_only=True if active_only is None else as_bool(active_only))

    outcome = call_backend(bridge, HttpVerb.GET, BILLING_TERMS_ENDPOINT, query_params=query.to_query_params())

    if isinstance(outcome, Success):
        items = [term.to_record() for term in BillingTermsPage.from_body(outcome.body).items]
    elif isinstance(outcome, BackendNotImplemented):
        logger.info("Billing terms not implemented by backend; using standard catalog")
        items = standard_catalog()
    else:
        if isinstance(outcome, TransportFailure):
            error_handler.handle_transport_fault(outcome, "listBillingTerms")
        else:
            logger.warning("Billing terms unavailable (%s); using minimal catalog", outcome.kind.value)
        items = minimal_catalog()
        messages.add_message(UNAVAILABLE_MESSAGE)
    return {"items": items}
