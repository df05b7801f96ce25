"""
Mock REST bridge.

Purpose:
- In-memory stand-in for the Party / Billing backend
- Does NOT make network calls
- Answers 501 for every endpoint by default, which is what the backend does
  while its endpoints are still placeholders

Usage:
- Selected in services/registry.py when bridge.mode is "mock"
- Tests script specific answers with respond(...) / fail(...)

Swap:
Replace with clients/real_http/rest_bridge.py once the backend is reachable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from party_services.integrations.contracts.bridge import BridgeResponse, RestBridge, TransportFault

logger = logging.getLogger(__name__)


@dataclass
class RecordedCall:
    method: str
    endpoint: str
    body: Optional[Dict[str, Any]] = None
    query_params: Optional[Dict[str, Any]] = None


@dataclass
class MockRestBridge(RestBridge):
    default_status: int = 501
    calls: List[RecordedCall] = field(default_factory=list)
    _routes: Dict[Tuple[str, str], Any] = field(default_factory=dict, repr=False)

    def respond(
        self,
        method: str,
        endpoint: str,
        status_code: int,
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> "MockRestBridge":
        self._routes[(method.upper(), endpoint)] = BridgeResponse(
            status_code=status_code,
            body=body,
            headers=headers or {},
        )
        return self

    def fail(self, method: str, endpoint: str, message: str = "Connection refused") -> "MockRestBridge":
        self._routes[(method.upper(), endpoint)] = TransportFault(message, endpoint=endpoint)
        return self

    def get(self, endpoint: str, query_params: Optional[Mapping[str, Any]] = None) -> BridgeResponse:
        return self._answer("GET", endpoint, query_params=query_params)

    def post(
        self,
        endpoint: str,
        body: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> BridgeResponse:
        return self._answer("POST", endpoint, body=body, query_params=query_params)

    def _answer(
        self,
        method: str,
        endpoint: str,
        body: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> BridgeResponse:
        self.calls.append(
            RecordedCall(
                method=method,
                endpoint=endpoint,
                body=dict(body) if body is not None else None,
                query_params=dict(query_params) if query_params is not None else None,
            )
        )
        answer = self._routes.get((method, endpoint))
        if isinstance(answer, TransportFault):
            logger.info("[MOCK] %s %s -> transport fault", method, endpoint)
            raise answer
        if answer is None:
            logger.info("[MOCK] %s %s -> %s (default)", method, endpoint, self.default_status)
            return BridgeResponse(
                status_code=self.default_status,
                body={"message": f"{method} {endpoint} is not implemented"},
            )
        logger.info("[MOCK] %s %s -> %s", method, endpoint, answer.status_code)
        return answer
