"""
Outcome kinds.

An Outcome is the normalized, domain-level reading of one backend response.
Exactly one kind is produced per response; each kind carries only the fields
relevant to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional


class OutcomeKind(str, Enum):
    SUCCESS = "SUCCESS"
    DUPLICATE_CONFLICT = "DUPLICATE_CONFLICT"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"
    FORBIDDEN = "FORBIDDEN"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    MERGED_REDIRECT = "MERGED_REDIRECT"
    NOT_FOUND = "NOT_FOUND"
    GENERIC_FAILURE = "GENERIC_FAILURE"
    TRANSPORT_FAULT = "TRANSPORT_FAULT"


class ConflictMode(str, Enum):
    """How a 409 is read: duplicate candidates on create, merged party on fetch."""

    DUPLICATE = "DUPLICATE"
    MERGE = "MERGE"


@dataclass(frozen=True)
class Outcome:
    kind: ClassVar[OutcomeKind]


@dataclass(frozen=True)
class Success(Outcome):
    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS

    status_code: int = 200
    body: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DuplicateConflict(Outcome):
    kind: ClassVar[OutcomeKind] = OutcomeKind.DUPLICATE_CONFLICT

    candidates: List[Dict[str, Any]] = field(default_factory=list)
    message: Optional[str] = None


@dataclass(frozen=True)
class MergedRedirect(Outcome):
    kind: ClassVar[OutcomeKind] = OutcomeKind.MERGED_REDIRECT

    error_code: str = "PARTY_MERGED"
    merged_to_party_id: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class ValidationFailure(Outcome):
    kind: ClassVar[OutcomeKind] = OutcomeKind.VALIDATION_FAILURE

    field_errors: Dict[str, str] = field(default_factory=dict)
    message: Optional[str] = None

    def error_lines(self) -> List[str]:
        """One line per field error, or the single message when there are none."""
        if self.field_errors:
            return [f"{name}: {text}" for name, text in self.field_errors.items()]
        return [self.message or "Validation error occurred"]


@dataclass(frozen=True)
class Forbidden(Outcome):
    kind: ClassVar[OutcomeKind] = OutcomeKind.FORBIDDEN

    message: Optional[str] = None


@dataclass(frozen=True)
class NotFound(Outcome):
    kind: ClassVar[OutcomeKind] = OutcomeKind.NOT_FOUND

    message: Optional[str] = None


@dataclass(frozen=True)
class BackendNotImplemented(Outcome):
    kind: ClassVar[OutcomeKind] = OutcomeKind.NOT_IMPLEMENTED

    message: Optional[str] = None


@dataclass(frozen=True)
class GenericFailure(Outcome):
    kind: ClassVar[OutcomeKind] = OutcomeKind.GENERIC_FAILURE

    status_code: int = 500
    message: Optional[str] = None
    correlation_id: Optional[str] = None


@dataclass(frozen=True)
class TransportFailure(Outcome):
    kind: ClassVar[OutcomeKind] = OutcomeKind.TRANSPORT_FAULT

    detail: str = ""
    endpoint: Optional[str] = None


def failure_message(outcome: Outcome) -> Optional[str]:
    """Backend-supplied message of a non-success outcome, if it sent one."""
    return getattr(outcome, "message", None) or None
