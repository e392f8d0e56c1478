"""Lexora Chat - a chat UI relaying prompts to a generative-language API.

Combines FastAPI for the relay endpoint, httpx for outbound calls,
NiceGUI for the chat page, and Pydantic for data validation.

Components:
    - api: HTTP relay endpoint
    - relay: Upstream generation API client and configuration
    - client: Conversation state and cancellable relay calls
    - ui: Web interface for chat interactions
    - models: Request/response schemas
"""

__version__ = "0.1.0"
