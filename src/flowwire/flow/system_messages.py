"""Overridable system labels and their built-in defaults."""

from __future__ import annotations

from pydantic import TypeAdapter

from flowwire.config import get_settings
from flowwire.flow.base import FlowModel, validate_payload


class SystemMessages(FlowModel):
    whats_app_picture_choice_select_label: str | None = None


_system_messages_adapter: TypeAdapter[SystemMessages] = TypeAdapter(SystemMessages)


def default_system_messages() -> SystemMessages:
    settings = get_settings()
    return SystemMessages(
        whats_app_picture_choice_select_label=settings.whatsapp_picture_choice_select_label,
    )


def resolve_system_messages(overrides: SystemMessages | None) -> SystemMessages:
    """Merge the non-null fields of ``overrides`` over the complete defaults."""
    defaults = default_system_messages()
    if overrides is None:
        return defaults
    return defaults.model_copy(update=overrides.model_dump(exclude_none=True))


def parse_system_messages(payload: object | None) -> SystemMessages | None:
    if payload is None:
        return None
    return validate_payload(_system_messages_adapter, payload, "system messages")
