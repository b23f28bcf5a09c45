"""WhatsApp channel converter implementation."""

from __future__ import annotations

from typing import Any

from flowwire.channels.whatsapp.convert import convert_input_to_whatsapp_messages
from flowwire.channels.whatsapp.schemas import WhatsAppSendingMessage, serialize_messages
from flowwire.flow.bubbles import LastMessage, RichTextRenderer
from flowwire.flow.inputs import InputRequest
from flowwire.flow.system_messages import SystemMessages


class WhatsAppConverter:
    def __init__(
        self,
        *,
        group_size: int | None = None,
        render_rich_text: RichTextRenderer | None = None,
    ) -> None:
        self.group_size = group_size
        self.render_rich_text = render_rich_text

    @property
    def channel_type(self) -> str:
        return "whatsapp"

    def convert(
        self,
        input_request: InputRequest,
        last_message: LastMessage | None = None,
        system_messages: SystemMessages | None = None,
    ) -> list[WhatsAppSendingMessage]:
        return convert_input_to_whatsapp_messages(
            input_request,
            last_message,
            system_messages,
            group_size=self.group_size,
            render_rich_text=self.render_rich_text,
        )

    def serialize(self, messages: list[WhatsAppSendingMessage]) -> list[dict[str, Any]]:
        return serialize_messages(messages)
