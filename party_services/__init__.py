"""
Party services.

Business-process layer between the workflow engine and the Party (account /
customer) backend. Every backend call goes through a REST bridge client under
party_services/integrations/clients.

Key rule:
- Service handlers MUST NOT talk HTTP directly.
- Handlers call the bridge through integrations/policy/bridge_call.py, which
  turns the response into an Outcome.
- We use the MOCK bridge during development and swap to the REAL_HTTP bridge
  when the backend is reachable.

Switching implementations:
- The selection of mock vs real bridge happens in ONE place
  (party_services/services/registry.py).
"""

from .messages import MessageCollector
from .services.registry import (
    SERVICE_REGISTRY,
    ServiceResult,
    ServiceRunner,
    UnknownServiceError,
    get_service,
)

__all__ = [
    "MessageCollector",
    "SERVICE_REGISTRY",
    "ServiceResult",
    "ServiceRunner",
    "UnknownServiceError",
    "get_service",
]
