"""
Mock bridge clients.

These clients return fake (but realistic) responses without calling any
external API. Mock clients follow the SAME interface as the real HTTP bridge.
"""

from .rest_bridge import MockRestBridge, RecordedCall

__all__ = ["MockRestBridge", "RecordedCall"]
