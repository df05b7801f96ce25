"""
REST bridge contract.

Every backend call goes through a bridge client with two verbs (GET, POST).
A call either returns a BridgeResponse - whatever the status code - or raises
TransportFault when no response could be obtained at all.

These contracts must be used by both:
- clients/mocks/rest_bridge.py (in-memory backend for development/testing)
- clients/real_http/rest_bridge.py (httpx client for the real backend)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field


class HttpVerb(str, Enum):
    GET = "GET"
    POST = "POST"


class TransportFault(Exception):
    """The bridge could not produce a response (connection error, timeout, ...)."""

    def __init__(self, message: str, *, endpoint: Optional[str] = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint


class BridgeResponse(BaseModel):
    """Response envelope. Consumed once by the outcome resolver, never retained."""

    status_code: int
    body: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = Field(default_factory=dict)


class RestBridge(ABC):
    """Every bridge client must implement this interface."""

    @abstractmethod
    def get(self, endpoint: str, query_params: Optional[Mapping[str, Any]] = None) -> BridgeResponse:
        """Issue a GET against ``endpoint``."""

    @abstractmethod
    def post(
        self,
        endpoint: str,
        body: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> BridgeResponse:
        """Issue a POST with a JSON body against ``endpoint``."""
