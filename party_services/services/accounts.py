"""
Commercial account creation.

The workflow runs BUILDING -> CALLING -> RESOLVING and stops in one of the
terminal states:

- CREATED: backend accepted the account; partyId / createdAt / createdBy are set
- NEEDS_REVIEW: backend found possible duplicates; the caller shows them and may
  re-submit with duplicateOverride, a justification and the reviewed ids
- REJECTED: local validation, backend validation, permission or other failure
- DEGRADED: backend endpoint not implemented yet (501); no record is created

Nothing is raised to the caller: every failure ends up in the message sink.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from party_services.error_handler import error_handler
from party_services.integrations.contracts.bridge import HttpVerb, RestBridge
from party_services.integrations.contracts.outcomes import (
    BackendNotImplemented,
    DuplicateConflict,
    Forbidden,
    GenericFailure,
    Outcome,
    Success,
    TransportFailure,
    ValidationFailure,
    failure_message,
)
from party_services.integrations.contracts.parties import CreateCommercialAccountRequest, CreatedAccount
from party_services.integrations.policy.bridge_call import call_backend
from party_services.messages import MessageCollector
from party_services.services.base import as_bool, build_request, present

logger = logging.getLogger(__name__)

CREATE_ACCOUNT_ENDPOINT = "/v1/crm/accounts/parties"

REQUIRED_FIELDS = ("legalName", "defaultBillingTermsId")

DUPLICATE_REVIEW_MESSAGE = "Potential duplicate accounts found. Please review and provide justification to proceed."
ACCESS_DENIED_MESSAGE = "Access denied: You don't have permission to create commercial accounts"
PLACEHOLDER_MESSAGE = "Backend service not yet implemented (501). This is a placeholder implementation."


class AccountCreationState(str, Enum):
    BUILDING = "BUILDING"
    CALLING = "CALLING"
    RESOLVING = "RESOLVING"
    CREATED = "CREATED"
    NEEDS_REVIEW = "NEEDS_REVIEW"
    REJECTED = "REJECTED"
    DEGRADED = "DEGRADED"


def split_candidate_ids(raw: Any) -> List[str]:
    """Split the comma-delimited candidate id list exactly as entered.

    Segments are neither trimmed nor filtered; blank ones are passed on to the
    backend and only reported in the log.
    """
    ids = [str(part) for part in raw] if isinstance(raw, (list, tuple)) else str(raw).split(",")
    if any(not part.strip() for part in ids):
        logger.warning("duplicateCandidatePartyIds contains blank segments: %r", raw)
    return ids


class AccountCreationWorkflow:
    """One commercial-account creation attempt. Not reusable across requests."""

    def __init__(self, bridge: RestBridge, messages: MessageCollector) -> None:
        self.bridge = bridge
        self.messages = messages
        self.state = AccountCreationState.BUILDING
        self.output: Dict[str, Any] = {}

    def run(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        payload = self.build_payload(request)
        if payload is None:
            self._transition(AccountCreationState.REJECTED)
            return self.output

        self._transition(AccountCreationState.CALLING)
        outcome = call_backend(self.bridge, HttpVerb.POST, CREATE_ACCOUNT_ENDPOINT, body=payload)

        self._transition(AccountCreationState.RESOLVING)
        self._transition(self.apply(outcome))
        return self.output

    def build_payload(self, request: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        missing = [name for name in REQUIRED_FIELDS if not present(request.get(name))]
        for name in missing:
            self.messages.add_error(f"{name}: is required")
        if missing:
            return None

        data: Dict[str, Any] = {
            "legal_name": request["legalName"],
            "default_billing_terms_id": request["defaultBillingTermsId"],
        }
        if present(request.get("dbaName")):
            data["dba_name"] = request["dbaName"]
        if present(request.get("taxId")):
            data["tax_id"] = request["taxId"]

        id_type = request.get("externalIdentifierType")
        id_value = request.get("externalIdentifierValue")
        if present(id_type) and present(id_value):
            data["external_identifiers"] = {str(id_type): str(id_value)}

        if as_bool(request.get("duplicateOverride")):
            data["duplicate_override"] = True
            data["duplicate_override_justification"] = request.get("duplicateOverrideJustification")
            if present(request.get("duplicateCandidatePartyIds")):
                data["duplicate_candidate_party_ids"] = split_candidate_ids(request["duplicateCandidatePartyIds"])

        model = build_request(CreateCommercialAccountRequest, data, self.messages)
        return model.to_payload() if model is not None else None

    def apply(self, outcome: Outcome) -> AccountCreationState:
        if isinstance(outcome, Success):
            created = CreatedAccount.from_body(outcome.body)
            self.output.update(
                partyId=created.party_id,
                createdAt=created.created_at,
                createdBy=created.created_by,
            )
            return AccountCreationState.CREATED

        if isinstance(outcome, DuplicateConflict):
            self.output["duplicateCandidates"] = list(outcome.candidates)
            self.messages.add_error(DUPLICATE_REVIEW_MESSAGE)
            return AccountCreationState.NEEDS_REVIEW

        if isinstance(outcome, ValidationFailure):
            for line in outcome.error_lines():
                self.messages.add_error(line)
            return AccountCreationState.REJECTED

        if isinstance(outcome, Forbidden):
            self.messages.add_error(ACCESS_DENIED_MESSAGE)
            return AccountCreationState.REJECTED

        if isinstance(outcome, BackendNotImplemented):
            self.messages.add_message(PLACEHOLDER_MESSAGE)
            return AccountCreationState.DEGRADED

        if isinstance(outcome, TransportFailure):
            error_handler.handle_transport_fault(outcome, "createCommercialAccount", self.messages)
            return AccountCreationState.REJECTED

        # GenericFailure, and NotFound / MergedRedirect which this endpoint does not define
        correlation_id = outcome.correlation_id if isinstance(outcome, GenericFailure) else None
        message = failure_message(outcome)
        if correlation_id:
            self.output["correlationId"] = correlation_id
        self.messages.add_error(f"Unable to create account: {message or 'Unknown error'}")
        return AccountCreationState.REJECTED

    def _transition(self, state: AccountCreationState) -> None:
        logger.debug("Account creation: %s -> %s", self.state.value, state.value)
        self.state = state


def create_commercial_account(
    bridge: RestBridge,
    request: Mapping[str, Any],
    messages: MessageCollector,
) -> Dict[str, Any]:
    workflow = AccountCreationWorkflow(bridge, messages)
    output = workflow.run(request)
    logger.info("createCommercialAccount finished in state %s", workflow.state.value)
    return output
