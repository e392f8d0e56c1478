"""Test package for Lexora Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: Relay endpoint and client round trips over ASGI

The generation API is always mocked with httpx.MockTransport.
Leverages pytest with pytest-check for soft assertions.
"""
