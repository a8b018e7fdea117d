"""A very simple markup syntax for interactive messages.

Tags of the form ``[kind:payload]`` decorate the text written before them::

    Hello world[txt:&6Hover text!]. &3Click to run a command[cmd:say Hello world!]

``kind`` is one of ``txt`` (hover text), ``file``, ``url``, ``cmd`` (run a
command) or ``scmd`` (suggest a command), matched case-insensitively.
"""

from __future__ import annotations

import re
from typing import Callable

from powerchat.core.colours import translate_alternate_colour_codes
from powerchat.core.message import Message
from powerchat.core.session import MessageSession
from powerchat.utils.logging import get_logger

log = get_logger(__name__)

MARKUP_PATTERN = re.compile(r"\[(txt|file|url|scmd|cmd):(.+?)\]", re.IGNORECASE)

_DISPATCH: dict[str, Callable[[MessageSession, str], MessageSession]] = {
    "txt": MessageSession.tooltip,
    "file": MessageSession.file,
    "url": MessageSession.link,
    "cmd": MessageSession.perform,
    "scmd": MessageSession.suggest,
}


class MarkupBuilder:
    def __init__(self, alt_char: str = "&") -> None:
        self._alt_char = alt_char
        self._raw: list[str] = []

    def with_text(self, raw: str) -> MarkupBuilder:
        self._raw.append(raw)
        return self

    @property
    def raw(self) -> str:
        return "".join(self._raw)

    def build(self) -> Message:
        """Convert the accumulated markup into a new message.

        Raises NullStateError when a tag has no text before it to decorate.
        """
        raw = self.raw
        session = MessageSession(Message(alt_char=self._alt_char))

        position = 0
        for match in MARKUP_PATTERN.finditer(raw):
            if match.start() > position:
                session.then(raw[position:match.start()])

            kind = match.group(1).lower()
            payload = translate_alternate_colour_codes(self._alt_char, match.group(2))
            log.debug("markup_tag", kind=kind, position=match.start())
            _DISPATCH[kind](session, payload)
            position = match.end()

        if position < len(raw):
            session.then(raw[position:])
        return session.build()


def parse_markup(text: str, alt_char: str = "&") -> Message:
    return MarkupBuilder(alt_char).with_text(text).build()
