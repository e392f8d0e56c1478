"""Unit tests for the browser-local file picker helpers."""

import pytest

from src.client.conversation import ConversationClient
from src.client.transport import RelaySuccess
from src.ui.file_picker import FILE_NAME_JS, clear_input_js, picked_file_name
from tests.unit.test_conversation import ScriptedTransport


class TestPickedFileName:
    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            ("report.pdf", "report.pdf"),
            (["report.pdf"], "report.pdf"),
            (None, None),
            ("", None),
            ([], None),
            ([None], None),
            ({"name": "report.pdf"}, None),
        ],
    )
    def test_normalizes_event_args(self, args: object, expected: str | None) -> None:
        assert picked_file_name(args) == expected


class TestBrowserScripts:
    def test_change_handler_emits_name_only(self) -> None:
        """The browser sends back the file's name, never the File object."""
        assert "files[0]?.name" in FILE_NAME_JS
        assert "emit(" in FILE_NAME_JS

    def test_clear_targets_element(self) -> None:
        assert clear_input_js(42) == 'getHtmlElement(42).value = ""'


class TestPickerFlow:
    async def test_picked_name_is_attached_then_cleared(self) -> None:
        transport = ScriptedTransport(RelaySuccess(result="Got it"))
        client = ConversationClient(transport)

        client.attach_file(picked_file_name(["notes.txt"]))
        await client.submit("")

        sent = transport.calls[0][-1]
        assert sent.file == "notes.txt"
        assert sent.text == "Uploaded file: notes.txt"
        assert client.state.pending_file is None
