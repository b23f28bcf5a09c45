"""Rich text (editor node tree) to markdown rendering.

Nodes are plain dicts as produced by the flow editor: elements carry a
``type`` and ``children``; leaves carry ``text`` plus boolean marks
(``bold``, ``italic``, ``strikethrough``, ``code``). WhatsApp only
understands its own markdown dialect, hence the two flavours.
"""

from __future__ import annotations

from typing import Any

_MARKERS: dict[str, tuple[tuple[str, str], ...]] = {
    # applied innermost first
    "common": (("code", "`"), ("strikethrough", "~~"), ("italic", "_"), ("bold", "**")),
    "whatsapp": (("code", "```"), ("strikethrough", "~"), ("italic", "_"), ("bold", "*")),
}

_LIST_TYPES = {"ul", "ol"}
_LIST_ITEM_TYPES = {"li", "lic"}


def convert_rich_text_to_markdown(
    rich_text: list[dict[str, Any]], flavour: str = "common"
) -> str:
    if flavour not in _MARKERS:
        raise ValueError(f"unknown markdown flavour: {flavour}")
    lines: list[str] = []
    for node in rich_text:
        lines.extend(_render_block(node, flavour))
    return "\n".join(lines)


def _render_block(node: dict[str, Any], flavour: str) -> list[str]:
    node_type = node.get("type")
    if node_type in _LIST_TYPES:
        return _render_list(node, flavour)
    return [_render_inline(node.get("children") or [], flavour)]


def _render_list(node: dict[str, Any], flavour: str) -> list[str]:
    ordered = node.get("type") == "ol"
    lines: list[str] = []
    position = 0
    for child in node.get("children") or []:
        if child.get("type") in _LIST_TYPES:
            lines.extend("  " + line for line in _render_list(child, flavour))
            continue
        position += 1
        bullet = f"{position}." if ordered else "-"
        nested: list[str] = []
        inline_children: list[dict[str, Any]] = []
        for grandchild in child.get("children") or []:
            if grandchild.get("type") in _LIST_TYPES:
                nested.extend("  " + line for line in _render_list(grandchild, flavour))
            elif grandchild.get("type") in _LIST_ITEM_TYPES:
                inline_children.extend(grandchild.get("children") or [])
            else:
                inline_children.append(grandchild)
        lines.append(f"{bullet} {_render_inline(inline_children, flavour)}")
        lines.extend(nested)
    return lines


def _render_inline(children: list[dict[str, Any]], flavour: str) -> str:
    parts: list[str] = []
    for child in children:
        if "text" in child:
            parts.append(_render_leaf(child, flavour))
        elif child.get("type") == "a":
            parts.append(_render_link(child, flavour))
        else:
            # variables and other inline wrappers render their children
            parts.append(_render_inline(child.get("children") or [], flavour))
    return "".join(parts)


def _render_link(node: dict[str, Any], flavour: str) -> str:
    label = _render_inline(node.get("children") or [], flavour)
    url = str(node.get("url") or "")
    if not url:
        return label
    if flavour == "whatsapp":
        # WhatsApp has no link syntax; it autolinks bare URLs
        return url if not label or label == url else f"{label} ({url})"
    return f"[{label or url}]({url})"


def _render_leaf(leaf: dict[str, Any], flavour: str) -> str:
    text = str(leaf.get("text") or "")
    core = text.strip()
    if not core:
        return text
    # markers must hug the text or chat clients ignore them
    leading = text[: len(text) - len(text.lstrip())]
    trailing = text[len(text.rstrip()) :]
    for mark, marker in _MARKERS[flavour]:
        if leaf.get(mark):
            core = f"{marker}{core}{marker}"
    return f"{leading}{core}{trailing}"
