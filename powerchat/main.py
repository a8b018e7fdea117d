"""powerchat entry point: build, inspect and store chat messages from the shell."""

from __future__ import annotations

import click

from powerchat.config import Settings, load_settings
from powerchat.core.errors import PowerChatError
from powerchat.core.message import Message
from powerchat.markup.builder import parse_markup
from powerchat.storage.store import MessageStore
from powerchat.transports.console import ConsoleTarget
from powerchat.utils.logging import setup_logging


def build_message(settings: Settings, text: str, markup: bool) -> Message:
    alt_char = settings.message.alternate_colour_char
    if markup:
        return parse_markup(text, alt_char=alt_char)
    return Message(text, alt_char=alt_char)


def _store(settings: Settings) -> MessageStore:
    return MessageStore(settings.get_store_path(), alt_char=settings.message.alternate_colour_char)


@click.group()
@click.option("--config", "config_path", default=None, help="Path to config YAML file")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """Build interactive JSON chat messages."""
    settings = load_settings(config_path)
    if log_level:
        settings.log_level = log_level
    setup_logging(level=settings.log_level, json_output=settings.log_json)
    ctx.obj = settings


@cli.command()
@click.argument("text")
@click.option("--markup", is_flag=True, help="Parse [kind:payload] tags in TEXT")
@click.option("--plain", is_flag=True, help="Print legacy colour-coded text instead of JSON")
@click.pass_obj
def render(settings: Settings, text: str, markup: bool, plain: bool) -> None:
    """Print the chat payload for TEXT."""
    try:
        message = build_message(settings, text, markup)
        click.echo(message.plain_content() if plain else message.to_json())
    except PowerChatError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("text")
@click.option("--markup", is_flag=True, help="Parse [kind:payload] tags in TEXT")
@click.option("--plain-target", is_flag=True, help="Deliver as if the client lacked JSON chat")
@click.pass_obj
def send(settings: Settings, text: str, markup: bool, plain_target: bool) -> None:
    """Deliver TEXT to the console target."""
    rich = settings.message.rich_chat and not plain_target
    try:
        build_message(settings, text, markup).send(ConsoleTarget(rich=rich))
    except PowerChatError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("key")
@click.argument("text")
@click.option("--markup", is_flag=True, help="Parse [kind:payload] tags in TEXT")
@click.pass_obj
def save(settings: Settings, key: str, text: str, markup: bool) -> None:
    """Store TEXT under KEY."""
    try:
        message = build_message(settings, text, markup)
        # Serialize once so invalid events are rejected before they are stored
        message.to_json()
    except PowerChatError as e:
        raise click.ClickException(str(e)) from e
    _store(settings).put(key, message)
    click.echo(f"Saved {key} ({len(message)} snippets)")


@cli.command()
@click.argument("key")
@click.option("--plain", is_flag=True, help="Print legacy colour-coded text instead of JSON")
@click.pass_obj
def show(settings: Settings, key: str, plain: bool) -> None:
    """Print the stored message KEY."""
    try:
        message = _store(settings).get(key)
        click.echo(message.plain_content() if plain else message.to_json())
    except KeyError:
        raise click.ClickException(f"No message stored under {key!r}") from None
    except PowerChatError as e:
        raise click.ClickException(str(e)) from e


@cli.command(name="list")
@click.pass_obj
def list_keys(settings: Settings) -> None:
    """List stored message keys."""
    try:
        keys = _store(settings).keys()
    except PowerChatError as e:
        raise click.ClickException(str(e)) from e
    for key in keys:
        click.echo(key)


@cli.command()
@click.argument("key")
@click.pass_obj
def remove(settings: Settings, key: str) -> None:
    """Delete the stored message KEY."""
    try:
        removed = _store(settings).remove(key)
    except PowerChatError as e:
        raise click.ClickException(str(e)) from e
    if not removed:
        raise click.ClickException(f"No message stored under {key!r}")
    click.echo(f"Removed {key}")


if __name__ == "__main__":
    cli()
