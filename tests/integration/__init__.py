"""Integration tests for components working together as a system.

Coverage:
    - Relay endpoint through the real FastAPI app
    - Conversation client posting to the app over ASGITransport

The generation API is replaced by a recording mock; no API key needed.
"""
