"""Outgoing WhatsApp Cloud API message shapes."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from flowwire.config import WHATSAPP_MAX_BUTTON_TITLE_CHARS, WHATSAPP_MAX_BUTTONS


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TextBody(_WireModel):
    body: str


class MediaLink(_WireModel):
    link: str


class WhatsAppTextMessage(_WireModel):
    type: Literal["text"] = "text"
    text: TextBody


class WhatsAppImageMessage(_WireModel):
    type: Literal["image"] = "image"
    image: MediaLink


class ImageHeader(_WireModel):
    type: Literal["image"] = "image"
    image: MediaLink


class InteractiveBody(_WireModel):
    text: str


class ButtonReply(_WireModel):
    id: str
    title: str = Field(max_length=WHATSAPP_MAX_BUTTON_TITLE_CHARS)


class ReplyButton(_WireModel):
    type: Literal["reply"] = "reply"
    reply: ButtonReply


class ButtonAction(_WireModel):
    buttons: list[ReplyButton] = Field(max_length=WHATSAPP_MAX_BUTTONS)


class InteractiveButton(_WireModel):
    type: Literal["button"] = "button"
    header: ImageHeader | None = None
    body: InteractiveBody | None = None
    action: ButtonAction


class WhatsAppInteractiveMessage(_WireModel):
    type: Literal["interactive"] = "interactive"
    interactive: InteractiveButton


WhatsAppSendingMessage = Union[
    WhatsAppTextMessage,
    WhatsAppImageMessage,
    WhatsAppInteractiveMessage,
]


def text_message(body: str) -> WhatsAppTextMessage:
    return WhatsAppTextMessage(text=TextBody(body=body))


def image_message(link: str) -> WhatsAppImageMessage:
    return WhatsAppImageMessage(image=MediaLink(link=link))


def button_message(
    buttons: list[tuple[str, str]],
    *,
    body: str | None = None,
    header_image: str | None = None,
) -> WhatsAppInteractiveMessage:
    """Build an interactive reply-button message from ``(id, title)`` pairs."""
    return WhatsAppInteractiveMessage(
        interactive=InteractiveButton(
            header=ImageHeader(image=MediaLink(link=header_image)) if header_image else None,
            body=InteractiveBody(text=body) if body else None,
            action=ButtonAction(
                buttons=[
                    ReplyButton(reply=ButtonReply(id=button_id, title=title))
                    for button_id, title in buttons
                ]
            ),
        )
    )


def serialize_messages(messages: list[WhatsAppSendingMessage]) -> list[dict[str, Any]]:
    """Dump messages to Cloud API JSON, leaving out absent header/body fields."""
    return [message.model_dump(mode="json", exclude_none=True) for message in messages]


def build_send_payload(recipient: str, message: WhatsAppSendingMessage) -> dict[str, Any]:
    return {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": recipient,
        **message.model_dump(mode="json", exclude_none=True),
    }
