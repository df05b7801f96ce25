"""
Response policy.

Turns raw bridge responses into Outcomes:
- outcome_resolver.resolve: status + body + headers -> Outcome (pure)
- bridge_call.call_backend: the one fallible call per operation
"""

from .bridge_call import call_backend
from .outcome_resolver import CORRELATION_ID_HEADER, resolve

__all__ = ["CORRELATION_ID_HEADER", "call_backend", "resolve"]
