"""
Real REST bridge client.

Purpose:
- Sends bridge calls to the Party / Billing backend over HTTP
- Returns every answer as a BridgeResponse, whatever the status code
  (the outcome resolver decides what a 409 or a 501 means)

Implementation notes:
- Uses a synchronous httpx.Client; one call per operation, no retries
- Connection errors, timeouts and other httpx failures raise TransportFault
- A non-JSON body is surfaced as {"message": <text>}
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

import httpx

from party_services.integrations.contracts.bridge import BridgeResponse, RestBridge, TransportFault

logger = logging.getLogger(__name__)


class HttpxRestBridge(RestBridge):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_seconds: float = 15.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("PARTY_BRIDGE_BASE_URL", "")).rstrip("/")
        self.api_key = api_key or ""
        self.timeout_seconds = timeout_seconds
        self._client = client or httpx.Client(timeout=timeout_seconds)
        if not self.base_url:
            logger.warning("Party bridge base URL is not set.")

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def get(self, endpoint: str, query_params: Optional[Mapping[str, Any]] = None) -> BridgeResponse:
        return self._send("GET", endpoint, query_params=query_params)

    def post(
        self,
        endpoint: str,
        body: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> BridgeResponse:
        return self._send("POST", endpoint, body=body, query_params=query_params)

    def close(self) -> None:
        self._client.close()

    def _send(
        self,
        method: str,
        endpoint: str,
        body: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> BridgeResponse:
        if not self.base_url:
            raise TransportFault("Party bridge base URL is not configured.", endpoint=endpoint)

        url = f"{self.base_url}{endpoint}"
        try:
            response = self._client.request(
                method,
                url,
                params=dict(query_params) if query_params else None,
                json=dict(body) if body is not None else None,
                headers=self._headers(),
            )
        except httpx.HTTPError as exc:
            raise TransportFault(f"{type(exc).__name__}: {exc}", endpoint=endpoint) from exc

        logger.info("Bridge %s %s -> %s", method, endpoint, response.status_code)
        return BridgeResponse(
            status_code=response.status_code,
            body=self._decode_body(response),
            headers=dict(response.headers),
        )

    @staticmethod
    def _decode_body(response: httpx.Response) -> Optional[Dict[str, Any]]:
        if not response.content:
            return None
        try:
            data = response.json()
        except ValueError:
            text = response.text.strip()
            return {"message": text} if text else None
        if isinstance(data, dict):
            return data
        logger.warning("Bridge response body is not an object: %s", type(data).__name__)
        return {"data": data}
