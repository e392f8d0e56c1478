"""Integration tests for the conversation client talking to the relay.

The client's HTTP transport is pointed at the FastAPI app through
ASGITransport; the upstream is the recording mock from conftest.
"""

import httpx
import pytest_check as check
from fastapi import FastAPI
from httpx import ASGITransport

from src.client.config import ClientConfig
from src.client.conversation import ConversationClient
from src.client.transport import HttpRelayTransport
from src.models.schemas import Sender
from tests.conftest import RecordingUpstream, gemini_reply


def make_conversation(app: FastAPI) -> ConversationClient:
    transport = HttpRelayTransport(
        ClientConfig(api_base_url="http://test", timeout=5.0),
        transport=ASGITransport(app=app),
    )
    return ConversationClient(transport)


class TestConversationRoundTrip:
    async def test_submit_ends_with_user_then_bot(self, app: FastAPI) -> None:
        conversation = make_conversation(app)

        await conversation.submit("Hello")

        tail = [(m.sender, m.text) for m in conversation.state.messages[-2:]]
        assert tail == [(Sender.USER, "Hello"), (Sender.BOT, "Hi there")]
        assert conversation.state.last_error is None

    async def test_second_turn_forwards_latest_prompt(
        self, app: FastAPI, upstream: RecordingUpstream
    ) -> None:
        conversation = make_conversation(app)
        upstream.respond = lambda request: httpx.Response(
            200, json=gemini_reply(f"reply {len(upstream.requests)}")
        )

        await conversation.submit("first")
        await conversation.submit("second")

        check.equal(
            [m.text for m in conversation.state.messages],
            ["first", "reply 1", "second", "reply 2"],
        )
        check.is_in(b'"second"', upstream.requests[1].content)
        check.is_false(b'"first"' in upstream.requests[1].content)

    async def test_relay_failure_surfaces_error(
        self, app: FastAPI, upstream: RecordingUpstream
    ) -> None:
        upstream.respond = lambda request: httpx.Response(500)
        conversation = make_conversation(app)

        await conversation.submit("Hello")

        check.equal(len(conversation.state.messages), 1)
        check.is_not_none(conversation.state.last_error)
        check.is_in("Internal Server Error", conversation.state.last_error)
        check.is_false(conversation.state.is_loading)
