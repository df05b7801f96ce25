"""
Fallible call boundary.

Wraps the single outbound bridge call of an operation. Transport faults (and
anything else the bridge raises) become a TransportFailure outcome; every
response is handed to the outcome resolver. Nothing is retried here.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from party_services.integrations.contracts.bridge import HttpVerb, RestBridge, TransportFault
from party_services.integrations.contracts.outcomes import ConflictMode, Outcome, TransportFailure
from party_services.integrations.policy.outcome_resolver import resolve

logger = logging.getLogger(__name__)


def call_backend(
    bridge: RestBridge,
    verb: HttpVerb,
    endpoint: str,
    *,
    body: Optional[Mapping[str, Any]] = None,
    query_params: Optional[Mapping[str, Any]] = None,
    conflict: ConflictMode = ConflictMode.DUPLICATE,
) -> Outcome:
    logger.info("Calling backend: %s %s", verb.value, endpoint)
    logger.debug("Request body: %s query: %s", body, query_params)
    try:
        if verb is HttpVerb.GET:
            response = bridge.get(endpoint, query_params=query_params)
        else:
            response = bridge.post(endpoint, body=body, query_params=query_params)
    except TransportFault as exc:
        logger.error("Transport fault calling %s %s: %s", verb.value, endpoint, exc)
        return TransportFailure(detail=str(exc), endpoint=endpoint)
    except Exception as exc:
        logger.exception("Unexpected error calling %s %s", verb.value, endpoint)
        return TransportFailure(detail=str(exc) or type(exc).__name__, endpoint=endpoint)

    outcome = resolve(response.status_code, response.body, response.headers, conflict=conflict)
    logger.info("Backend %s %s answered %s -> %s", verb.value, endpoint, response.status_code, outcome.kind.value)
    return outcome
