from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who authored a chat message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single message in the conversation.

    Attributes:
        id: Session-unique identifier assigned by the conversation counter.
        text: The message text.
        sender: Author of the message (user or bot).
        file: Name of a locally selected file, if one was attached.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    sender: Sender
    file: str | None = None


class RelayRequest(BaseModel):
    """Request payload for the relay endpoint.

    The last message is the prompt; earlier history travels along unused.
    """

    messages: list[Message] = Field(..., min_length=1)

    @property
    def prompt(self) -> str:
        return self.messages[-1].text


class RelayResult(BaseModel):
    """Successful relay response."""

    result: str


class RelayErrorResponse(BaseModel):
    """Failed relay response, always sent with status 500."""

    error: str


class Part(BaseModel):
    text: str


class Content(BaseModel):
    parts: list[Part] = Field(..., min_length=1)


class Candidate(BaseModel):
    content: Content


class GenerateContentRequest(BaseModel):
    """Upstream request body: a single prompt wrapped in contents/parts."""

    contents: list[Content]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GenerateContentRequest":
        return cls(contents=[Content(parts=[Part(text=prompt)])])


class GenerateContentResponse(BaseModel):
    """Upstream response body. Only the first candidate is used."""

    candidates: list[Candidate] = Field(..., min_length=1)

    @property
    def text(self) -> str:
        return self.candidates[0].content.parts[0].text
