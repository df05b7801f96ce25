"""
Party fetch, search and duplicate check.

Each handler issues at most one backend call and always leaves its collection
fields (results, candidates) in a defined state, even on failure.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping
from urllib.parse import quote

from pydantic import ValidationError

from party_services.error_handler import error_handler
from party_services.integrations.contracts.bridge import HttpVerb, RestBridge
from party_services.integrations.contracts.outcomes import (
    BackendNotImplemented,
    ConflictMode,
    Forbidden,
    MergedRedirect,
    NotFound,
    Success,
    TransportFailure,
    failure_message,
)
from party_services.integrations.contracts.parties import (
    DuplicateCheckRequest,
    DuplicateCheckResult,
    PartyRecord,
    PartySearchPage,
    PartySearchRequest,
)
from party_services.integrations.policy.bridge_call import call_backend
from party_services.messages import MessageCollector
from party_services.services.base import as_bool, build_request, pick, present

logger = logging.getLogger(__name__)

PARTY_ENDPOINT = "/v1/crm/accounts/parties/{party_id}"
SEARCH_ENDPOINT = "/v1/crm/accounts/parties/search"
DUPLICATE_CHECK_ENDPOINT = "/v1/crm/accounts/parties/duplicate-check"

SEARCH_CRITERIA = ("name", "email", "phone", "taxId")
PLACEHOLDER_LEGAL_NAME = "Mock Commercial Account (Backend 501)"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def placeholder_party(party_id: str) -> Dict[str, Any]:
    """Stand-in record returned while the fetch endpoint answers 501."""
    return PartyRecord(
        party_id=party_id,
        legal_name=PLACEHOLDER_LEGAL_NAME,
        party_type="ORGANIZATION",
        status="ACTIVE",
        created_at=_utc_timestamp(),
    ).to_record()


def get_party(bridge: RestBridge, request: Mapping[str, Any], messages: MessageCollector) -> Dict[str, Any]:
    output: Dict[str, Any] = {"party": None}

    party_id = request.get("partyId")
    if not present(party_id):
        messages.add_error("partyId is required")
        return output
    party_id = str(party_id).strip()

    outcome = call_backend(
        bridge,
        HttpVerb.GET,
        PARTY_ENDPOINT.format(party_id=quote(party_id, safe="")),
        conflict=ConflictMode.MERGE,
    )

    if isinstance(outcome, Success):
        output["party"] = outcome.body
    elif isinstance(outcome, MergedRedirect):
        output["errorCode"] = outcome.error_code
        output["mergedToPartyId"] = outcome.merged_to_party_id
    elif isinstance(outcome, NotFound):
        output["errorCode"] = "NOT_FOUND"
    elif isinstance(outcome, Forbidden):
        output["errorCode"] = "FORBIDDEN"
    elif isinstance(outcome, BackendNotImplemented):
        logger.info("Party fetch not implemented by backend; returning placeholder for %s", party_id)
        output["party"] = placeholder_party(party_id)
    elif isinstance(outcome, TransportFailure):
        error_handler.handle_transport_fault(outcome, "getParty", messages)
    else:
        message = failure_message(outcome)
        messages.add_error(f"Unable to retrieve party: {message or 'Unknown error'}")
    return output


def search_parties(bridge: RestBridge, request: Mapping[str, Any], messages: MessageCollector) -> Dict[str, Any]:
    output: Dict[str, Any] = {"results": [], "totalCount": 0}

    # no browse-all: at least one criterion must narrow the search
    if not any(present(request.get(name)) for name in SEARCH_CRITERIA):
        messages.add_error("At least one search criterion is required")
        return output

    data: Dict[str, Any] = {
        "pageNumber": request.get("pageNumber") or 1,
        "pageSize": request.get("pageSize") or 20,
        "sortField": request.get("sortField") or "legalName",
        "sortOrder": request.get("sortOrder") or "ASC",
    }
    data.update(pick(request, "name", "email", "phone", "taxId", "partyType", "status"))
    if as_bool(request.get("includeMerged")):
        data["includeMerged"] = True

    search = build_request(PartySearchRequest, data, messages)
    if search is None:
        return output

    outcome = call_backend(bridge, HttpVerb.POST, SEARCH_ENDPOINT, body=search.to_payload())

    if isinstance(outcome, Success):
        page = PartySearchPage.from_body(outcome.body)
        output.update(
            results=list(page.results),
            totalCount=page.total_count,
            pageNumber=page.page_number,
            pageSize=page.page_size,
        )
    elif isinstance(outcome, BackendNotImplemented):
        messages.add_message("Backend search not yet implemented (501)")
    elif isinstance(outcome, TransportFailure):
        error_handler.handle_transport_fault(outcome, "searchParties", messages)
    else:
        message = failure_message(outcome)
        messages.add_error(f"Search failed: {message or 'Unknown error'}")
    return output


def check_duplicate_parties(
    bridge: RestBridge,
    request: Mapping[str, Any],
    messages: MessageCollector,
) -> Dict[str, Any]:
    """Advisory duplicate check: never blocks and never reports an error."""
    output: Dict[str, Any] = {"candidates": []}

    try:
        check = DuplicateCheckRequest.model_validate(pick(request, "legalName", "taxId", "externalIdentifiers"))
    except ValidationError as exc:
        logger.warning("Duplicate check skipped, request fields are not usable: %s", exc)
        return output

    outcome = call_backend(bridge, HttpVerb.POST, DUPLICATE_CHECK_ENDPOINT, body=check.to_payload())

    if isinstance(outcome, Success):
        output["candidates"] = list(DuplicateCheckResult.from_body(outcome.body).candidates)
    elif isinstance(outcome, TransportFailure):
        error_handler.handle_transport_fault(outcome, "checkDuplicateParties")
    else:
        logger.warning("Duplicate check degraded to no candidates (%s)", outcome.kind.value)
    return output
