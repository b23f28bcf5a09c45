import logging

import pytest

from flowwire.channels.registry import _reset as _reset_converters
from flowwire.channels.registry import register_default_converters
from flowwire.config import get_settings
from flowwire.logging import clear_context

_ENV_KEYS = (
    "APP_ENV",
    "LOG_LEVEL",
    "WHATSAPP_INTERACTIVE_GROUP_SIZE",
    "WHATSAPP_LABEL_MAX_CHARS",
    "WHATSAPP_PICTURE_CHOICE_SELECT_LABEL",
)


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch):
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    _reset_converters()
    register_default_converters()
    yield
    clear_context()
    get_settings.cache_clear()
    _reset_converters()
    root.handlers[:] = handlers
    root.setLevel(level)
