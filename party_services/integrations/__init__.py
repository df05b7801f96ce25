"""
Integrations layer.

All code used to communicate with the Party / Billing backend:
- contracts/: bridge envelope, request/response schemas, Outcome kinds
- clients/: mock and real HTTP bridge clients
- policy/: outcome resolution and the fallible call boundary

Key rule:
- Service handlers MUST NOT call the bridge directly; they go through
  policy.call_backend so every answer becomes an Outcome.
"""

from .contracts.bridge import BridgeResponse, HttpVerb, RestBridge, TransportFault
from .policy import call_backend, resolve

__all__ = [
    "BridgeResponse",
    "HttpVerb",
    "RestBridge",
    "TransportFault",
    "call_backend",
    "resolve",
]
