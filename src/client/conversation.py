"""Conversation state and the submit/cancel/regenerate cycle.

The client owns every piece of UI state. Only user actions and relay
outcomes mutate it, and listeners are told after each change so a view
can re-render.
"""

import logging
from collections.abc import Callable

from pydantic import BaseModel, Field

from src.client.transport import (
    CancellationToken,
    RelayFailure,
    RelaySuccess,
    RelayTransport,
)
from src.models.schemas import Message, Sender

logger = logging.getLogger(__name__)

SUGGESTIONS = ("Help me write", "Get Advice", "Code", "Summarize Text", "Brainstorm")


class ConversationState(BaseModel):
    """Messages plus the transient flags shown by the UI.

    Attributes:
        messages: Chronological message list.
        is_loading: A relay call is in flight.
        is_generating: A reply is being generated (drives the stop button).
        last_error: Error text from the last failed call.
        pending_file: Name of the file selected for the next submission.
        draft_input: Current contents of the input box.
        next_id: Id given to the next appended message.
    """

    messages: list[Message] = Field(default_factory=list)
    is_loading: bool = False
    is_generating: bool = False
    last_error: str | None = None
    pending_file: str | None = None
    draft_input: str = ""
    next_id: int = Field(default=1, ge=1)

    def append(self, text: str, sender: Sender, file: str | None = None) -> Message:
        message = Message(id=self.next_id, text=text, sender=sender, file=file)
        self.next_id += 1
        self.messages.append(message)
        return message


class ConversationClient:
    """Drives one conversation against a relay transport.

    At most one call is in flight. A submission made while loading is
    dropped, not queued.
    """

    def __init__(
        self,
        transport: RelayTransport,
        state: ConversationState | None = None,
    ) -> None:
        self._transport = transport
        self.state = state or ConversationState()
        self._token: CancellationToken | None = None
        self._listeners: list[Callable[[], None]] = []

    def on_change(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()

    async def submit(self, text: str, pending_file: str | None = None) -> bool:
        """Append a user message, relay the conversation, record the outcome.

        Args:
            text: User input. Blank text is allowed when a file is attached.
            pending_file: File name to attach. Defaults to the state's
                pending file.

        Returns:
            False if the submission was ignored, True once the call settled.
        """
        file = pending_file or self.state.pending_file
        text = text.strip()
        if (not text and not file) or self.state.is_loading:
            return False

        self.state.append(text or f"Uploaded file: {file}", Sender.USER, file)
        self.state.last_error = None
        self.state.is_loading = True
        self.state.is_generating = True
        token = CancellationToken()
        self._token = token
        history = list(self.state.messages)
        self._notify()

        try:
            outcome = await self._transport.send(history, token)
            if token.cancelled:
                logger.info("Relay request cancelled")
            elif isinstance(outcome, RelaySuccess):
                self.state.append(outcome.result, Sender.BOT)
            elif isinstance(outcome, RelayFailure):
                logger.error(f"Relay request failed: {outcome.error}")
                self.state.last_error = outcome.error
        finally:
            # A stale call must not reset flags owned by a newer submission.
            if self._token is token:
                self.state.is_loading = False
                self.state.is_generating = False
                self.state.pending_file = None
                self._token = None
            self._notify()
        return True

    def cancel(self) -> bool:
        """Signal the in-flight call and release the UI immediately.

        Returns:
            True if a call was cancelled.
        """
        token = self._token
        if token is None or token.cancelled:
            return False
        token.cancel()
        self.state.is_loading = False
        self.state.is_generating = False
        self._notify()
        return True

    async def regenerate(self, message_id: int) -> bool:
        """Resubmit the message preceding the one with ``message_id``.

        Assumes user and bot messages alternate, so the preceding message
        is the prompt that produced the reply.
        """
        messages = self.state.messages
        index = next(
            (i for i, message in enumerate(messages) if message.id == message_id), None
        )
        if index is None or index == 0:
            return False
        return await self.submit(messages[index - 1].text)

    def set_draft(self, text: str) -> None:
        self.state.draft_input = text
        self._notify()

    def apply_suggestion(self, label: str) -> None:
        """Fill the input box with a quick-prompt label."""
        self.set_draft(label)

    def attach_file(self, name: str | None) -> None:
        self.state.pending_file = name
        self._notify()

    async def submit_draft(self) -> bool:
        """Submit the input box contents and clear it."""
        text = self.state.draft_input
        self.state.draft_input = ""
        return await self.submit(text)
