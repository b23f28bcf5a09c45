"""Input request models: what kind of answer the flow is asking the user for."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter

from flowwire.flow.base import FlowModel, validate_payload


class InputBlockType(str, Enum):
    TEXT = "text input"
    NUMBER = "number input"
    EMAIL = "email input"
    URL = "url input"
    DATE = "date input"
    TIME = "time input"
    PHONE = "phone number input"
    CHOICE = "choice input"
    PICTURE_CHOICE = "picture choice input"
    PAYMENT = "payment input"
    RATING = "rating input"
    FILE = "file input"
    CARDS = "cards input"


class ChoiceItem(FlowModel):
    id: str
    content: str | None = None


class ChoiceInputOptions(FlowModel):
    is_multiple_choice: bool = False


class ChoiceInput(FlowModel):
    id: str | None = None
    type: Literal["choice input"]
    items: list[ChoiceItem] = Field(default_factory=list)
    options: ChoiceInputOptions | None = None


class PictureChoiceItem(FlowModel):
    id: str
    title: str | None = None
    description: str | None = None
    picture_src: str | None = None


class PictureChoiceOptions(FlowModel):
    is_multiple_choice: bool = False


class PictureChoiceInput(FlowModel):
    id: str | None = None
    type: Literal["picture choice input"]
    items: list[PictureChoiceItem] = Field(default_factory=list)
    options: PictureChoiceOptions | None = None


class CardPath(FlowModel):
    id: str
    text: str | None = None


class Card(FlowModel):
    id: str | None = None
    image_url: str | None = None
    title: str | None = None
    description: str | None = None
    paths: list[CardPath] = Field(default_factory=list)


class CardsInput(FlowModel):
    id: str | None = None
    type: Literal["cards input"]
    items: list[Card] = Field(default_factory=list)


class NativeReplyInput(FlowModel):
    """Inputs answered through the channel's own reply box; options stay opaque."""

    id: str | None = None
    type: Literal[
        "text input",
        "number input",
        "email input",
        "url input",
        "date input",
        "time input",
        "phone number input",
        "payment input",
        "rating input",
        "file input",
    ]
    options: dict[str, Any] | None = None


InputRequest = Annotated[
    Union[ChoiceInput, PictureChoiceInput, CardsInput, NativeReplyInput],
    Field(discriminator="type"),
]

DEFAULT_CHOICE_INPUT_OPTIONS = ChoiceInputOptions()
DEFAULT_PICTURE_CHOICE_OPTIONS = PictureChoiceOptions()

_input_request_adapter: TypeAdapter[InputRequest] = TypeAdapter(InputRequest)


def parse_input_request(payload: object) -> InputRequest:
    """Validate a raw ``input`` payload from the flow engine."""
    return validate_payload(_input_request_adapter, payload, "input request")


def input_block_type(input_request: InputRequest) -> InputBlockType:
    return InputBlockType(input_request.type)
