"""
Real HTTP bridge clients.

These clients communicate with the Party / Billing backend over HTTP and must
implement the same interface as the mock clients.
"""

from .rest_bridge import HttpxRestBridge

__all__ = ["HttpxRestBridge"]
