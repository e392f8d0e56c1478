"""Unit tests for individual components in isolation.

Coverage:
    - relay/: Configuration and upstream client
    - client/: Conversation state machine and relay transport
    - ui/: Bot reply formatting
"""
