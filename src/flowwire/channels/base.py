"""Converter protocol for multi-channel support."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from flowwire.flow.bubbles import LastMessage
from flowwire.flow.inputs import InputRequest
from flowwire.flow.system_messages import SystemMessages


@runtime_checkable
class MessageConverter(Protocol):
    """Protocol that all channel converters must implement."""

    @property
    def channel_type(self) -> str:
        """Unique identifier for this channel (e.g. 'whatsapp')."""
        ...

    def convert(
        self,
        input_request: InputRequest,
        last_message: LastMessage | None = None,
        system_messages: SystemMessages | None = None,
    ) -> list[Any]:
        """Render an input request as channel-native messages."""
        ...

    def serialize(self, messages: list[Any]) -> list[dict[str, Any]]:
        """Dump converted messages to the provider's JSON shape."""
        ...
