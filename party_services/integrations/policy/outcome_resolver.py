"""
Outcome resolver.

Maps a backend status code + body + headers to exactly one Outcome. The
function is pure and total: any integer status resolves, unknown codes fall
back to GenericFailure, and malformed bodies only make fields absent.

501 is an expected answer from a backend that is still being built, so it is
a first-class outcome (BackendNotImplemented) and callers choose their own
fallback.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from party_services.integrations.contracts.outcomes import (
    BackendNotImplemented,
    ConflictMode,
    DuplicateConflict,
    Forbidden,
    GenericFailure,
    MergedRedirect,
    NotFound,
    Outcome,
    Success,
    ValidationFailure,
)
from party_services.integrations.contracts.parties import DuplicateCandidate, ErrorBody

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-Id"
SUCCESS_CODES = frozenset({200, 201})


def resolve(
    status_code: int,
    body: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, Any]] = None,
    *,
    conflict: ConflictMode = ConflictMode.DUPLICATE,
) -> Outcome:
    if status_code in SUCCESS_CODES:
        return Success(status_code=status_code, body=dict(body) if isinstance(body, Mapping) else {})

    error = ErrorBody.from_body(body)
    message = error.message or None

    if status_code == 409:
        if conflict is ConflictMode.MERGE:
            return MergedRedirect(
                error_code=error.error_code or "PARTY_MERGED",
                merged_to_party_id=error.merged_to_party_id,
                message=message,
            )
        return DuplicateConflict(candidates=_candidates(error.duplicate_candidates), message=message)

    if status_code == 400:
        field_errors = {str(name): str(text) for name, text in (error.field_errors or {}).items()}
        if field_errors:
            return ValidationFailure(field_errors=field_errors, message=message)
        return ValidationFailure(message=message)

    if status_code == 403:
        return Forbidden(message=message)

    if status_code == 404:
        return NotFound(message=message)

    if status_code == 501:
        return BackendNotImplemented(message=message)

    return GenericFailure(
        status_code=status_code,
        message=message,
        correlation_id=_header(headers, CORRELATION_ID_HEADER) or error.correlation_id,
    )


def _candidates(raw: Optional[List[Any]]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for item in raw or []:
        if not isinstance(item, Mapping):
            logger.warning("Skipping non-object duplicate candidate: %r", item)
            continue
        out.append(DuplicateCandidate.from_body(item).to_record())
    return out


def _header(headers: Optional[Mapping[str, Any]], name: str) -> Optional[str]:
    if not isinstance(headers, Mapping):
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if str(key).lower() == wanted and value is not None and str(value).strip():
            return str(value)
    return None
