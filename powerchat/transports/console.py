"""Console target that echoes messages to a terminal stream."""

from __future__ import annotations

from typing import TextIO

import click

from powerchat.transports.base import ChatTarget


class ConsoleTarget(ChatTarget):
    def __init__(self, rich: bool = True, stream: TextIO | None = None) -> None:
        self._rich = rich
        self._stream = stream

    @property
    def supports_rich_chat(self) -> bool:
        return self._rich

    def deliver_text(self, text: str) -> None:
        click.echo(text, file=self._stream)

    def deliver_rich(self, payload: str) -> None:
        click.echo(payload, file=self._stream)
