"""NiceGUI chat interface backed by the conversation client."""

from nicegui import events, ui

from src.client.config import get_client_config
from src.client.conversation import SUGGESTIONS, ConversationClient
from src.client.transport import HttpRelayTransport
from src.models.schemas import Message, Sender
from src.ui.file_picker import FILE_NAME_JS, clear_input_js, picked_file_name
from src.ui.formatting import render_bot_html

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #09090b; min-height: 100vh; }

    .app-container {
        background: rgba(255, 255, 255, 0.05);
        backdrop-filter: blur(16px);
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.3);
    }

    .brand {
        background: linear-gradient(90deg, #2563eb 0%, #60a5fa 50%, #1e40af 100%);
        -webkit-background-clip: text;
        color: transparent;
    }

    .message-user { background: #3b82f6; color: white; border-radius: 8px; }
    .message-bot { background: #18181b; color: white; border-radius: 8px; }

    .input-box {
        background: #18181b;
        border: 1px solid #3f3f46;
        border-radius: 12px;
    }
    .input-box:focus-within { border-color: #3b82f6; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    conversation = ConversationClient(HttpRelayTransport(get_client_config()))
    state = conversation.state

    messages_container: ui.column
    error_label: ui.label
    file_label: ui.label
    input_field: ui.textarea
    send_btn: ui.button
    stop_btn: ui.button
    file_input: ui.element
    picker_has_file = False

    def render_message(message: Message) -> None:
        if message.sender is Sender.USER:
            with ui.row().classes("w-full justify-end"):
                with ui.element("div").classes("max-w-lg px-3 py-2 message-user"):
                    ui.label(message.text).classes("text-sm")
                    if message.file:
                        with ui.row().classes("items-center gap-1"):
                            ui.icon("attach_file").classes("text-xs")
                            ui.label(message.file).classes("text-xs text-white/80")
            return

        with ui.element("div").classes("w-full px-3 py-2 message-bot"):
            ui.html(render_bot_html(message.text), sanitize=False).classes("text-sm")
            with ui.row().classes("w-full justify-end"):
                ui.button(
                    icon="refresh",
                    on_click=lambda m=message: conversation.regenerate(m.id),
                ).props("flat round dense color=white").tooltip("Regenerate response")

    def refresh() -> None:
        nonlocal picker_has_file
        messages_container.clear()
        with messages_container:
            if not state.messages:
                ui.label("No messages yet. Start a conversation!").classes(
                    "w-full text-center text-sm text-gray-500"
                )
            for message in state.messages:
                render_message(message)

        error_label.set_text(state.last_error or "")
        error_label.set_visibility(state.last_error is not None)
        file_label.set_text(f"Attached: {state.pending_file}" if state.pending_file else "")
        if picker_has_file and state.pending_file is None:
            file_input.client.run_javascript(clear_input_js(file_input.id))
            picker_has_file = False
        send_btn.set_enabled(not state.is_loading)
        if state.is_loading:
            send_btn.props("loading")
        else:
            send_btn.props(remove="loading")
        stop_btn.set_visibility(state.is_generating)

    async def send_message() -> None:
        conversation.set_draft(input_field.value or "")
        input_field.value = ""
        await conversation.submit_draft()

    def handle_file_change(e: events.GenericEventArguments) -> None:
        # The browser emits only the name; contents are never sent.
        nonlocal picker_has_file
        name = picked_file_name(e.args)
        picker_has_file = name is not None
        conversation.attach_file(name)

    def apply_suggestion(label: str) -> None:
        conversation.apply_suggestion(label)
        input_field.value = state.draft_input

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-5xl mx-auto gap-6"),
    ):
        with ui.row().classes("w-full justify-center items-baseline gap-2"):
            ui.label("How can").classes("text-3xl text-gray-300")
            ui.label("LEXORA").classes("text-4xl font-bold brand")
            ui.label("assist you today?").classes("text-3xl text-gray-300")

        with ui.column().classes("w-full app-container p-4 gap-4"):
            with ui.scroll_area().classes("w-full h-[50vh]"):
                messages_container = ui.column().classes("w-full gap-4 p-2")

            error_label = ui.label().classes(
                "w-full bg-red-500 text-white text-center p-2 rounded"
            )

            with ui.row().classes("w-full gap-3 items-end border-t border-gray-700 pt-4"):
                file_input = (
                    ui.element("input")
                    .props("type=file")
                    .classes("w-40 text-xs text-gray-400")
                    .on("change", handle_file_change, js_handler=FILE_NAME_JS)
                )
                with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                    input_field = (
                        ui.textarea(placeholder="Ask Question...")
                        .props("autogrow borderless dense rows=1 dark")
                        .classes("w-full")
                        .on("keydown.enter.prevent", send_message)
                    )
                    file_label = ui.label().classes("text-xs text-gray-400")
                send_btn = ui.button(icon="send", on_click=send_message).props(
                    "round unelevated color=primary"
                )
                stop_btn = ui.button(icon="stop", on_click=conversation.cancel).props(
                    "round unelevated color=negative"
                )

            with ui.row().classes("w-full justify-center gap-2"):
                for label in SUGGESTIONS:
                    ui.button(label, on_click=lambda l=label: apply_suggestion(l)).props(
                        "outline rounded color=grey-5 no-caps"
                    )

    conversation.on_change(refresh)
    refresh()


def main() -> None:
    ui.run(title="Lexora", port=8080, reload=False)


if __name__ == "__main__":
    main()
