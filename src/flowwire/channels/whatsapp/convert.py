"""Render flow engine input requests as WhatsApp messages."""

from __future__ import annotations

import logging
from typing import assert_never

from flowwire.channels.utils import ELLIPSIS_MARKER, group_by_size, truncate_label
from flowwire.channels.whatsapp.schemas import (
    WhatsAppSendingMessage,
    button_message,
    image_message,
    text_message,
)
from flowwire.config import WHATSAPP_MAX_BUTTONS, WHATSAPP_MAX_BUTTON_TITLE_CHARS, get_settings
from flowwire.flow.bubbles import LastMessage, RichTextRenderer, extract_question_text
from flowwire.flow.inputs import (
    DEFAULT_CHOICE_INPUT_OPTIONS,
    DEFAULT_PICTURE_CHOICE_OPTIONS,
    CardsInput,
    ChoiceInput,
    InputRequest,
    NativeReplyInput,
    PictureChoiceInput,
    input_block_type,
)
from flowwire.flow.system_messages import SystemMessages, resolve_system_messages
from flowwire.richtext import convert_rich_text_to_markdown

logger = logging.getLogger(__name__)

BODY_PLACEHOLDER = "..."


def convert_input_to_whatsapp_messages(
    input_request: InputRequest,
    last_message: LastMessage | None = None,
    system_messages: SystemMessages | None = None,
    *,
    group_size: int | None = None,
    render_rich_text: RichTextRenderer | None = None,
) -> list[WhatsAppSendingMessage]:
    """Build the follow-up messages that let a WhatsApp user answer ``input_request``.

    Inputs the user answers by typing (text, number, date, ...) need no follow-up
    and produce an empty list. Choice-like inputs become numbered text lists or
    reply-button messages within the Cloud API limits.
    """
    settings = get_settings()
    # the configured limit is only honoured within what the channel accepts
    label_limit = min(
        max(settings.whatsapp_label_max_chars, len(ELLIPSIS_MARKER) + 1),
        WHATSAPP_MAX_BUTTON_TITLE_CHARS,
    )
    renderer = render_rich_text or convert_rich_text_to_markdown

    match input_request:
        case NativeReplyInput():
            messages: list[WhatsAppSendingMessage] = []
        case PictureChoiceInput():
            messages = _picture_choice_messages(input_request, system_messages, label_limit)
        case ChoiceInput():
            question = extract_question_text(last_message, renderer)
            size = settings.whatsapp_interactive_group_size if group_size is None else group_size
            size = min(size, WHATSAPP_MAX_BUTTONS)
            messages = _choice_messages(input_request, question, size, label_limit)
        case CardsInput():
            messages = _cards_messages(input_request, label_limit)
        case _:
            assert_never(input_request)

    logger.debug(
        "Converted %s into %d whatsapp message(s)",
        input_block_type(input_request).name,
        len(messages),
    )
    return messages


def _picture_choice_messages(
    input_request: PictureChoiceInput,
    system_messages: SystemMessages | None,
    label_limit: int,
) -> list[WhatsAppSendingMessage]:
    options = input_request.options or DEFAULT_PICTURE_CHOICE_OPTIONS
    messages: list[WhatsAppSendingMessage] = []
    if options.is_multiple_choice:
        for idx, item in enumerate(input_request.items):
            if item.picture_src:
                messages.append(image_message(item.picture_src))
            body = combine_title_and_description(item.title, item.description)
            messages.append(text_message(f"{idx + 1}. {body}"))
        return messages

    select_label = resolve_system_messages(system_messages).whats_app_picture_choice_select_label
    select_label = truncate_label(select_label or "", label_limit)
    for item in input_request.items:
        messages.append(
            button_message(
                [(item.id, select_label)],
                body=combine_title_and_description(item.title, item.description) or None,
                header_image=item.picture_src,
            )
        )
    return messages


def _choice_messages(
    input_request: ChoiceInput,
    question: str | None,
    group_size: int,
    label_limit: int,
) -> list[WhatsAppSendingMessage]:
    options = input_request.options or DEFAULT_CHOICE_INPUT_OPTIONS
    if options.is_multiple_choice:
        # every item is listed so the numbering matches what the user types back
        numbered = "\n".join(
            f"{idx + 1}. {item.content or ''}" for idx, item in enumerate(input_request.items)
        )
        body = f"{question}\n\n{numbered}" if question else numbered
        return [text_message(body)]

    answerable = [item for item in input_request.items if item.content is not None]
    messages: list[WhatsAppSendingMessage] = []
    for idx, group in enumerate(group_by_size(answerable, group_size)):
        messages.append(
            button_message(
                [(item.id, truncate_label(item.content or "", label_limit)) for item in group],
                body=(question or BODY_PLACEHOLDER) if idx == 0 else BODY_PLACEHOLDER,
            )
        )
    return messages


def _cards_messages(input_request: CardsInput, label_limit: int) -> list[WhatsAppSendingMessage]:
    messages: list[WhatsAppSendingMessage] = []
    for card in input_request.items:
        messages.append(
            button_message(
                [
                    (path.id, truncate_label(path.text or "", label_limit))
                    for path in card.paths[:WHATSAPP_MAX_BUTTONS]
                ],
                body=combine_title_and_description(card.title, card.description) or None,
                header_image=card.image_url,
            )
        )
    return messages


def combine_title_and_description(title: str | None, description: str | None) -> str:
    """Join a bold title and a description with a blank line, skipping missing parts."""
    text = ""
    if title:
        text += f"*{title}*"
    if description:
        if title:
            text += "\n\n"
        text += description
    return text
