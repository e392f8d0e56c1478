"""NiceGUI interface - thin visualization layer for the conversation.

Responsibilities:
    - Message list with formatted bot replies
    - Input box with send and stop controls
    - File picker that records the chosen file name
    - Quick-prompt buttons and per-reply regenerate

All state lives in the conversation client. This package only renders it.
"""
