import pytest
from pydantic import ValidationError

from flowwire.channels.whatsapp.schemas import (
    ButtonAction,
    ButtonReply,
    ReplyButton,
    build_send_payload,
    button_message,
    image_message,
    serialize_messages,
    text_message,
)


def test_serialize_text_and_image() -> None:
    assert serialize_messages([text_message("hello"), image_message("https://img.test/a.png")]) == [
        {"type": "text", "text": {"body": "hello"}},
        {"type": "image", "image": {"link": "https://img.test/a.png"}},
    ]


def test_button_message_with_header_and_body() -> None:
    message = button_message(
        [("a", "Yes")], body="Continue?", header_image="https://img.test/h.png"
    )
    assert serialize_messages([message])[0] == {
        "type": "interactive",
        "interactive": {
            "type": "button",
            "header": {"type": "image", "image": {"link": "https://img.test/h.png"}},
            "body": {"text": "Continue?"},
            "action": {"buttons": [{"type": "reply", "reply": {"id": "a", "title": "Yes"}}]},
        },
    }


def test_button_message_omits_empty_body() -> None:
    message = button_message([("a", "Yes")], body="")
    assert message.interactive.body is None


def test_button_title_limit_enforced() -> None:
    with pytest.raises(ValidationError):
        ButtonReply(id="a", title="x" * 21)


def test_button_count_limit_enforced() -> None:
    buttons = [ReplyButton(reply=ButtonReply(id=str(n), title=str(n))) for n in range(4)]
    with pytest.raises(ValidationError):
        ButtonAction(buttons=buttons)


def test_build_send_payload_envelope() -> None:
    payload = build_send_payload("15551234567", text_message("hi"))
    assert payload == {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": "15551234567",
        "type": "text",
        "text": {"body": "hi"},
    }
