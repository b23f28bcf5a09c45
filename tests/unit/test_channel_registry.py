"""Tests for the converter abstraction layer."""

from flowwire.channels.base import MessageConverter
from flowwire.channels.registry import (
    _reset,
    all_converters,
    get_converter,
    register_converter,
    register_default_converters,
)
from flowwire.channels.whatsapp.adapter import WhatsAppConverter
from flowwire.flow.bubbles import parse_last_message
from flowwire.flow.inputs import parse_input_request


class MockConverter:
    @property
    def channel_type(self) -> str:
        return "mock"

    def convert(self, input_request, last_message=None, system_messages=None):
        return [input_request.type]

    def serialize(self, messages):
        return [{"kind": message} for message in messages]


def test_whatsapp_converter_is_message_converter() -> None:
    converter = WhatsAppConverter()
    assert isinstance(converter, MessageConverter)
    assert converter.channel_type == "whatsapp"


def test_whatsapp_converter_convert_and_serialize() -> None:
    converter = WhatsAppConverter(group_size=1)
    messages = converter.convert(
        parse_input_request(
            {
                "type": "choice input",
                "items": [{"id": "a", "content": "Yes"}, {"id": "b", "content": "No"}],
            }
        ),
        parse_last_message(
            {
                "type": "text",
                "content": {
                    "type": "richText",
                    "richText": [{"type": "p", "children": [{"text": "Sure?"}]}],
                },
            }
        ),
    )
    assert [m["interactive"]["body"]["text"] for m in converter.serialize(messages)] == [
        "Sure?",
        "...",
    ]


def test_default_converters_registered() -> None:
    assert isinstance(get_converter("whatsapp"), WhatsAppConverter)


def test_register_default_keeps_existing() -> None:
    custom = WhatsAppConverter(group_size=2)
    register_converter(custom)
    register_default_converters()
    assert get_converter("whatsapp") is custom


def test_registry_register_and_get() -> None:
    _reset()
    converter = MockConverter()
    register_converter(converter)
    assert get_converter("mock") is converter
    assert get_converter("nonexistent") is None
    assert "mock" in all_converters()
    _reset()


def test_registry_reset_clears() -> None:
    _reset()
    register_converter(MockConverter())
    assert len(all_converters()) == 1
    _reset()
    assert len(all_converters()) == 0
