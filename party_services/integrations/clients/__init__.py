"""
Bridge clients.

- mocks/: in-memory backend used during development and in tests
- real_http/: httpx client for the real backend

Both implement contracts.bridge.RestBridge.
"""
