"""Shared pydantic base for flow engine payload models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from flowwire.errors import PayloadError


class FlowModel(BaseModel):
    """Immutable model accepting both camelCase wire names and snake_case names."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def validate_payload(adapter: TypeAdapter[Any], payload: object, what: str) -> Any:
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise PayloadError(f"invalid {what}: {exc}") from exc
