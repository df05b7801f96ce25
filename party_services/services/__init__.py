"""
Party service handlers.

Each handler translates one request context into at most one backend call and
writes the result into a fresh output dict plus user messages.
"""

from .accounts import AccountCreationState, AccountCreationWorkflow, create_commercial_account
from .billing import list_billing_terms
from .parties import check_duplicate_parties, get_party, search_parties

__all__ = [
    "AccountCreationState",
    "AccountCreationWorkflow",
    "check_duplicate_parties",
    "create_commercial_account",
    "get_party",
    "list_billing_terms",
    "search_parties",
]
