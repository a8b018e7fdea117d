"""Cursor-style builder over a message."""

from __future__ import annotations

from typing import Any

from powerchat.core.colours import ColorToken
from powerchat.core.errors import NullStateError
from powerchat.core.group import Group
from powerchat.core.message import Message
from powerchat.core.resources import Achievement, Item, Qualifier, ResourceResolver, Statistic


class MessageSession:
    """Keeps a "current group" so decorations can be chained without handles.

    Each :meth:`then` makes the snippets it added the current group; the
    decoration methods apply to that group and return the session.
    """

    def __init__(self, message: Message | None = None) -> None:
        self._message = message if message is not None else Message()
        self._current: Group | None = None

    @property
    def message(self) -> Message:
        return self._message

    @property
    def current_group(self) -> Group:
        if self._current is None:
            raise NullStateError("No snippets have been added to decorate yet")
        return self._current

    def then(self, content: Any) -> MessageSession:
        group = self._message.then(content)
        if len(group):
            self._current = group
        return self

    def group(self, count: int | None = None) -> MessageSession:
        self._current = self._message.group(count)
        return self

    def build(self) -> Message:
        return self._message

    def to_json(self) -> str:
        return self._message.to_json()

    def edit(self, content: str) -> MessageSession:
        self.current_group.edit(content)
        return self

    def colour(self, *tokens: ColorToken) -> MessageSession:
        self.current_group.colour(*tokens)
        return self

    def file(self, relative_path: str) -> MessageSession:
        self.current_group.file(relative_path)
        return self

    def link(self, url: str) -> MessageSession:
        self.current_group.link(url)
        return self

    def suggest(self, command: str) -> MessageSession:
        self.current_group.suggest(command)
        return self

    def perform(self, command: str) -> MessageSession:
        self.current_group.perform(command)
        return self

    def tooltip(self, *content: str | Message) -> MessageSession:
        self.current_group.tooltip(*content)
        return self

    def achievement_tooltip(
        self, achievement: str | Achievement, *, resolver: ResourceResolver | None = None
    ) -> MessageSession:
        self.current_group.achievement_tooltip(achievement, resolver=resolver)
        return self

    def statistic_tooltip(
        self,
        statistic: str | Statistic,
        qualifier: Qualifier | None = None,
        *,
        resolver: ResourceResolver | None = None,
    ) -> MessageSession:
        self.current_group.statistic_tooltip(statistic, qualifier, resolver=resolver)
        return self

    def item_tooltip(
        self, item: str | Item, *, resolver: ResourceResolver | None = None
    ) -> MessageSession:
        self.current_group.item_tooltip(item, resolver=resolver)
        return self
