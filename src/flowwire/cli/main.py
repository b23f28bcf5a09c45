"""Click CLI group: convert and settings commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from flowwire.channels.registry import all_converters, get_converter, register_default_converters
from flowwire.config import get_settings, validate_settings
from flowwire.errors import FlowwireError, PayloadError
from flowwire.flow.bubbles import parse_last_message
from flowwire.flow.inputs import parse_input_request
from flowwire.flow.system_messages import parse_system_messages
from flowwire.logging import bind_context, clear_context, configure_logging


def _read_json(path: Path | None) -> Any:
    if path is None:
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PayloadError(f"{path}: not valid JSON ({exc})") from exc


def split_chat_response(data: Any) -> tuple[Any, Any]:
    """Accept either a bare input request or a whole chat response.

    A chat response carries ``input`` plus the ``messages`` shown before it;
    the last of those is the question the input answers.
    """
    if isinstance(data, dict) and "input" in data:
        shown = data.get("messages") or []
        return data["input"], (shown[-1] if shown else None)
    return data, None


@click.group()
def cli() -> None:
    """flowwire: render flow input requests as channel messages."""
    settings = get_settings()
    configure_logging(settings.log_level)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--last-message",
    "last_message_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON bubble shown right before the input (overrides the chat response's).",
)
@click.option(
    "--system-messages",
    "system_messages_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON object overriding system labels.",
)
@click.option("--channel", default="whatsapp", show_default=True, help="Target channel type.")
@click.option("--compact", is_flag=True, help="Print JSON on a single line.")
def convert(
    input_file: Path,
    last_message_file: Path | None,
    system_messages_file: Path | None,
    channel: str,
    compact: bool,
) -> None:
    """Convert INPUT_FILE (input request or chat response JSON) to channel messages."""
    register_default_converters()
    converter = get_converter(channel)
    if converter is None:
        known = ", ".join(sorted(all_converters()))
        raise click.BadParameter(
            f"unknown channel {channel!r} (known: {known})", param_hint="--channel"
        )

    clear_context()
    bind_context(channel=channel, source=input_file.name)

    try:
        validate_settings(get_settings())
        raw_input, raw_last_message = split_chat_response(_read_json(input_file))
        if last_message_file is not None:
            raw_last_message = _read_json(last_message_file)
        messages = converter.convert(
            parse_input_request(raw_input),
            parse_last_message(raw_last_message),
            parse_system_messages(_read_json(system_messages_file)),
        )
    except FlowwireError as exc:
        raise click.ClickException(str(exc)) from exc

    payload = converter.serialize(messages)
    click.echo(json.dumps(payload, ensure_ascii=False, indent=None if compact else 2))


@cli.command()
def settings() -> None:
    """Print the effective configuration as JSON."""
    current = get_settings()
    try:
        validate_settings(current)
    except FlowwireError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(current.model_dump(by_alias=True), indent=2, sort_keys=True))
