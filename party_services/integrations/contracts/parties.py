"""
Party endpoint contracts.

Request bodies and response schemas for /v1/crm/accounts/parties*:
- account creation (with optional external identifiers and duplicate override)
- party fetch
- party search
- duplicate check
- the error body shared by every endpoint
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from .base import RequestModel, ResponseSchema, keep_valid_items


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class CreateCommercialAccountRequest(RequestModel):
    legal_name: str
    default_billing_terms_id: str
    dba_name: Optional[str] = None
    tax_id: Optional[str] = None
    external_identifiers: Optional[Dict[str, str]] = None
    duplicate_override: Optional[bool] = None
    duplicate_override_justification: Optional[str] = None
    duplicate_candidate_party_ids: Optional[List[str]] = None


class PartySearchRequest(RequestModel):
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)
    sort_field: str = "legalName"
    sort_order: str = "ASC"
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    tax_id: Optional[str] = None
    party_type: Optional[str] = None
    status: Optional[str] = None
    include_merged: Optional[bool] = None


class DuplicateCheckRequest(RequestModel):
    legal_name: Optional[str] = None
    tax_id: Optional[str] = None
    external_identifiers: Optional[Dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class DuplicateCandidate(ResponseSchema):
    party_id: Optional[str] = None
    legal_name: Optional[str] = None
    tax_id: Optional[str] = None
    match_score: Optional[float] = None
    match_reasons: Optional[List[str]] = None


class CreatedAccount(ResponseSchema):
    party_id: Optional[str] = None
    created_at: Optional[str] = None
    created_by: Optional[str] = None


class PartyRecord(ResponseSchema):
    party_id: Optional[str] = None
    legal_name: Optional[str] = None
    party_type: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


class PartySearchPage(ResponseSchema):
    results: List[Dict[str, Any]] = Field(default_factory=list)
    total_count: int = 0
    page_number: int = 1
    page_size: int = 20

    @field_validator("results", mode="before")
    @classmethod
    def _skip_malformed_results(cls, value: Any) -> Any:
        return keep_valid_items(value, Dict[str, Any], "PartySearchPage.results")


class DuplicateCheckResult(ResponseSchema):
    candidates: List[Dict[str, Any]] = Field(default_factory=list)

    @field_validator("candidates", mode="before")
    @classmethod
    def _skip_malformed_candidates(cls, value: Any) -> Any:
        return keep_valid_items(value, Dict[str, Any], "DuplicateCheckResult.candidates")


class ErrorBody(ResponseSchema):
    """Fields the backend may put in any non-2xx body."""

    message: Optional[str] = None
    correlation_id: Optional[str] = None
    field_errors: Optional[Dict[str, Any]] = None
    duplicate_candidates: Optional[List[Any]] = None
    error_code: Optional[str] = None
    merged_to_party_id: Optional[str] = None
