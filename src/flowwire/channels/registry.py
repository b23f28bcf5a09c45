"""Converter registry: maps channel_type strings to converter instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flowwire.channels.base import MessageConverter

_converters: dict[str, MessageConverter] = {}


def register_converter(converter: MessageConverter) -> None:
    """Register a channel converter instance."""
    _converters[converter.channel_type] = converter


def get_converter(channel_type: str) -> MessageConverter | None:
    """Look up a registered converter by channel type."""
    return _converters.get(channel_type)


def all_converters() -> dict[str, MessageConverter]:
    """Return a copy of the current converter map."""
    return dict(_converters)


def register_default_converters() -> None:
    """Register built-in converters, keeping any already registered for a channel."""
    from flowwire.channels.whatsapp.adapter import WhatsAppConverter

    if "whatsapp" not in _converters:
        register_converter(WhatsAppConverter())


def _reset() -> None:
    """Clear all registered converters (for testing)."""
    _converters.clear()
