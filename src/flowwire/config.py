"""Application configuration contract."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from flowwire.errors import ConfigError

# Cloud API hard limits for interactive button messages.
WHATSAPP_MAX_BUTTONS = 3
WHATSAPP_MAX_BUTTON_TITLE_CHARS = 20


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="APP_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")

    whatsapp_interactive_group_size: int = Field(
        alias="WHATSAPP_INTERACTIVE_GROUP_SIZE", default=3
    )
    whatsapp_label_max_chars: int = Field(
        alias="WHATSAPP_LABEL_MAX_CHARS", default=WHATSAPP_MAX_BUTTON_TITLE_CHARS
    )
    whatsapp_picture_choice_select_label: str = Field(
        alias="WHATSAPP_PICTURE_CHOICE_SELECT_LABEL", default="Select"
    )


def validate_settings(settings: Settings) -> None:
    problems: list[str] = []
    group_size = settings.whatsapp_interactive_group_size
    if not 1 <= group_size <= WHATSAPP_MAX_BUTTONS:
        problems.append(f"WHATSAPP_INTERACTIVE_GROUP_SIZE(1..{WHATSAPP_MAX_BUTTONS})")

    # at least one character plus the ".." marker
    label_max = settings.whatsapp_label_max_chars
    if not 3 <= label_max <= WHATSAPP_MAX_BUTTON_TITLE_CHARS:
        problems.append(f"WHATSAPP_LABEL_MAX_CHARS(3..{WHATSAPP_MAX_BUTTON_TITLE_CHARS})")

    select_label = settings.whatsapp_picture_choice_select_label
    if not select_label.strip():
        problems.append("WHATSAPP_PICTURE_CHOICE_SELECT_LABEL(non-empty value)")
    elif len(select_label) > WHATSAPP_MAX_BUTTON_TITLE_CHARS:
        problems.append(
            f"WHATSAPP_PICTURE_CHOICE_SELECT_LABEL(at most {WHATSAPP_MAX_BUTTON_TITLE_CHARS} chars)"
        )

    if problems:
        raise ConfigError(f"invalid configuration: {', '.join(problems)}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
