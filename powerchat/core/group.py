"""Range views over a message's snippets for bulk decoration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from powerchat.core.colours import ColorToken
from powerchat.core.errors import InvalidArgumentError
from powerchat.core.events import ClickAction, EventCategory, HoverAction
from powerchat.core.resources import (
    Achievement,
    Item,
    Qualifier,
    ResourceResolver,
    Statistic,
    require_resolver,
    statistic_resource_key,
)
from powerchat.core.snippet import Snippet

if TYPE_CHECKING:
    from powerchat.core.message import Message


class Group:
    """A half-open range ``[start, end)`` of snippets in a :class:`Message`.

    The group does not own its snippets. Every decoration is applied to each
    snippet in the range. A group is only meaningful until the message's
    snippet list changes below ``end``.
    """

    def __init__(self, message: Message, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(message):
            raise InvalidArgumentError(
                f"Group range [{start}, {end}) is outside a message of {len(message)} snippets"
            )
        self._message = message
        self._start = start
        self._end = end

    @classmethod
    def trailing(cls, message: Message, count: int) -> Group:
        """Group the last ``count`` snippets of ``message``."""
        end = len(message)
        return cls(message, end - count, end)

    def __repr__(self) -> str:
        return f"Group(start={self._start}, end={self._end})"

    def __len__(self) -> int:
        return self._end - self._start

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def snippets(self) -> list[Snippet]:
        return [self._message.snippet(i) for i in range(self._start, self._end)]

    @property
    def text(self) -> str:
        return "".join(snippet.text for snippet in self.snippets)

    def exit(self) -> Message:
        return self._message

    def then(self, content: Any) -> Group:
        return self._message.then(content)

    # -- decorations -------------------------------------------------------

    def edit(self, content: str) -> Group:
        """Replace the text of every snippet in the range with ``content``."""
        for snippet in self.snippets:
            snippet.text = content
        return self._touched()

    def colour(self, *tokens: ColorToken) -> Group:
        for snippet in self.snippets:
            snippet.add_styles(*tokens)
        return self._touched()

    def file(self, relative_path: str) -> Group:
        return self._add_event(EventCategory.CLICK, ClickAction.OPEN_FILE, relative_path)

    def link(self, url: str) -> Group:
        return self._add_event(EventCategory.CLICK, ClickAction.OPEN_URL, url)

    def suggest(self, command: str) -> Group:
        return self._add_event(EventCategory.CLICK, ClickAction.SUGGEST_COMMAND, command)

    def perform(self, command: str) -> Group:
        return self._add_event(EventCategory.CLICK, ClickAction.RUN_COMMAND, command)

    def tooltip(self, *content: str | Message) -> Group:
        """Show hover text built from strings and/or other messages.

        Messages contribute only their plain text; styling and events are
        dropped. Multiple items are joined with newlines.
        """
        if not content:
            raise InvalidArgumentError("Content cannot be empty")
        text = "\n".join(item if isinstance(item, str) else item.text for item in content)
        if not text:
            raise InvalidArgumentError("Content cannot be empty")
        return self._add_event(EventCategory.HOVER, HoverAction.SHOW_TEXT, text)

    def achievement_tooltip(
        self,
        achievement: str | Achievement,
        *,
        resolver: ResourceResolver | None = None,
    ) -> Group:
        if isinstance(achievement, Achievement):
            achievement = require_resolver(resolver, "achievement").resolve_named_resource(
                "achievement", achievement.key
            )
        return self._add_event(
            EventCategory.HOVER, HoverAction.SHOW_ACHIEVEMENT, f"achievement.{achievement}"
        )

    def statistic_tooltip(
        self,
        statistic: str | Statistic,
        qualifier: Qualifier | None = None,
        *,
        resolver: ResourceResolver | None = None,
    ) -> Group:
        """Show a statistic; plain strings are taken as already-resolved names."""
        if isinstance(statistic, Statistic):
            key = statistic_resource_key(statistic, qualifier)
            statistic = require_resolver(resolver, "statistic").resolve_named_resource(
                "statistic", key
            )
        return self._add_event(EventCategory.HOVER, HoverAction.SHOW_ACHIEVEMENT, statistic)

    def item_tooltip(
        self,
        item: str | Item,
        *,
        resolver: ResourceResolver | None = None,
    ) -> Group:
        if isinstance(item, Item):
            item = require_resolver(resolver, "item").resolve_named_resource("item", item.key)
        return self._add_event(EventCategory.HOVER, HoverAction.SHOW_ITEM, item)

    # -- internals ---------------------------------------------------------

    def _add_event(self, category: str, action: str, value: str) -> Group:
        for snippet in self.snippets:
            snippet.add_event(category, action, value)
        return self._touched()

    def _touched(self) -> Group:
        self._message._invalidate()
        return self
