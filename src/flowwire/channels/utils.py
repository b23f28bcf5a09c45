"""Shared utilities for channel message builders."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from flowwire.config import WHATSAPP_MAX_BUTTON_TITLE_CHARS

T = TypeVar("T")

ELLIPSIS_MARKER = ".."


def group_by_size(items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into consecutive groups of ``size`` elements.

    Args:
        items: The ordered elements to group.
        size: Maximum number of elements per group, must be positive.

    Returns:
        Groups in input order; only the last one may be shorter than ``size``.
    """
    if size <= 0:
        raise ValueError(f"group size must be positive, got {size}")
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


def truncate_label(text: str, limit: int = WHATSAPP_MAX_BUTTON_TITLE_CHARS) -> str:
    """Cut ``text`` to exactly ``limit`` characters, ending in "..", when too long."""
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS_MARKER)] + ELLIPSIS_MARKER
