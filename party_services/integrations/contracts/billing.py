"""Billing terms contracts (/v1/billing/terms)."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import Field, field_validator

from .base import RequestModel, ResponseSchema, keep_valid_items


class BillingTermsQuery(RequestModel):
    active_only: bool = True

    def to_query_params(self) -> Dict[str, Any]:
        return self.to_payload()


class BillingTerm(ResponseSchema):
    billing_terms_id: str
    code: str
    description: str = ""
    active: bool = True


class BillingTermsPage(ResponseSchema):
    items: List[BillingTerm] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _skip_malformed_items(cls, value: Any) -> Any:
        return keep_valid_items(value, BillingTerm, "BillingTermsPage.items")
