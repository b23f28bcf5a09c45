"""Bubble message models: what the flow last showed the user."""

from __future__ import annotations

from typing import Annotated, Any, Callable, Literal, Union

from pydantic import Field, TypeAdapter

from flowwire.flow.base import FlowModel, validate_payload

RichTextRenderer = Callable[[list[dict[str, Any]], str], str]


class RichTextContent(FlowModel):
    type: Literal["richText"]
    rich_text: list[dict[str, Any]] | None = None


class MarkdownContent(FlowModel):
    type: Literal["markdown"]
    markdown: str = ""


class TextBubbleMessage(FlowModel):
    id: str | None = None
    type: Literal["text"]
    content: Annotated[Union[RichTextContent, MarkdownContent], Field(discriminator="type")]


class MediaBubbleMessage(FlowModel):
    id: str | None = None
    type: Literal["image", "video", "embed", "audio"]
    content: dict[str, Any] | None = None


LastMessage = Annotated[
    Union[TextBubbleMessage, MediaBubbleMessage],
    Field(discriminator="type"),
]

_last_message_adapter: TypeAdapter[LastMessage] = TypeAdapter(LastMessage)


def parse_last_message(payload: object | None) -> LastMessage | None:
    if payload is None:
        return None
    return validate_payload(_last_message_adapter, payload, "last message")


def extract_question_text(
    last_message: LastMessage | None,
    render_rich_text: RichTextRenderer,
) -> str | None:
    """Render the question shown right before the input, if it was a rich text bubble."""
    if not isinstance(last_message, TextBubbleMessage):
        return None
    if not isinstance(last_message.content, RichTextContent):
        return None
    return render_rich_text(last_message.content.rich_text or [], "whatsapp")
