"""Interactive chat messages and their JSON wire format."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from powerchat.core.colours import (
    COLOUR_PATTERN,
    ColorToken,
    translate_alternate_colour_codes,
)
from powerchat.core.errors import InvalidArgumentError, PowerChatError
from powerchat.core.group import Group
from powerchat.core.jsonwriter import JsonWriter, load_pairs
from powerchat.core.snippet import Snippet
from powerchat.utils.logging import get_logger

if TYPE_CHECKING:
    from powerchat.transports.base import ChatTarget

log = get_logger(__name__)

SERIALIZED_SNIPPETS = "snippets"


class Message:
    """An ordered sequence of snippets, serialized to chat JSON on demand.

    ``then`` splits legacy colour-coded text into snippets and returns the
    :class:`Group` of snippets it added, so decorations are chained on that
    handle explicitly::

        Message().then("&aClick me").link("https://example.com").exit().then(" or not")
    """

    def __init__(self, text: str | None = None, *, alt_char: str = "&") -> None:
        self._snippets: list[Snippet] = []
        self._alt_char = alt_char
        self._json: str | None = None
        if text:
            self.then(text)

    def __repr__(self) -> str:
        return f"Message(snippets={self._snippets!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self._snippets == other._snippets

    def __len__(self) -> int:
        return len(self._snippets)

    def __iter__(self) -> Iterator[Snippet]:
        return iter(list(self._snippets))

    @property
    def alt_char(self) -> str:
        return self._alt_char

    # -- construction ------------------------------------------------------

    def then(self, content: Any) -> Group:
        """Append ``content`` and return the group of snippets it produced.

        Colour codes (``§c`` or the alternate ``&c`` form) split the text into
        runs. Each run becomes a snippet carrying every style seen so far in
        this call; a reset code clears them. Empty content adds nothing and
        yields an empty group.
        """
        if isinstance(content, Snippet):
            return self.add_snippet(content)

        text = translate_alternate_colour_codes(self._alt_char, str(content))
        start = len(self._snippets)
        if not text:
            return Group(self, start, start)

        styles: list[ColorToken] = []
        last_end = 0
        for match in COLOUR_PATTERN.finditer(text):
            if match.start() > last_end:
                self._snippets.append(Snippet(text[last_end:match.start()], styles))
            token = ColorToken.by_code(match.group(1))
            if token is ColorToken.RESET:
                styles.clear()
            else:
                styles.append(token)
            last_end = match.end()
        if last_end < len(text):
            self._snippets.append(Snippet(text[last_end:], styles))

        self._invalidate()
        return Group(self, start, len(self._snippets))

    def add_snippet(self, snippet: Snippet) -> Group:
        """Append a copy of ``snippet`` as-is, without parsing colour codes."""
        self._snippets.append(snippet.copy())
        self._invalidate()
        return Group.trailing(self, 1)

    def group(self, count: int | None = None) -> Group:
        """Group the last ``count`` snippets, or all of them."""
        return Group.trailing(self, len(self._snippets) if count is None else count)

    def clear(self) -> None:
        self._snippets.clear()
        self._invalidate()

    # -- access ------------------------------------------------------------

    def snippet(self, index: int) -> Snippet:
        return self._snippets[index]

    @property
    def snippets(self) -> list[Snippet]:
        return list(self._snippets)

    @property
    def text(self) -> str:
        """Concatenated text without any styling."""
        return "".join(snippet.text for snippet in self._snippets)

    def plain_content(self) -> str:
        """Legacy colour-coded text, for clients without JSON chat.

        Legacy styles carry over from one run to the next, so a snippet only
        writes the tokens it adds to the previous snippet's styles. Anything
        else starts again from a reset code.
        """
        parts: list[str] = []
        previous: tuple[ColorToken, ...] = ()
        for snippet in self._snippets:
            styles = snippet.styles
            if styles[: len(previous)] == previous:
                added = styles[len(previous):]
            else:
                parts.append(str(ColorToken.RESET))
                added = styles
            parts.extend(str(token) for token in added)
            parts.append(snippet.text)
            previous = styles
        return "".join(parts)

    # -- wire format -------------------------------------------------------

    def to_json(self) -> str:
        if self._json is None:
            try:
                with JsonWriter() as writer:
                    self.write_json(writer)
            except PowerChatError:
                self._json = None
                raise
            self._json = writer.getvalue()
            log.debug("message_serialized", snippets=len(self._snippets), payload=self._json)
        return self._json

    def write_json(self, writer: JsonWriter) -> JsonWriter:
        if len(self._snippets) == 1:
            return self._snippets[0].write_json(writer)
        writer.begin_object().name("text").value("").name("extra").begin_array()
        for snippet in self._snippets:
            snippet.write_json(writer)
        return writer.end_array().end_object()

    @classmethod
    def from_json(cls, payload: str, *, alt_char: str = "&") -> Message:
        """Parse the chat JSON wire format back into a message."""
        root = load_pairs(payload)
        if not isinstance(root, list) or (root and not isinstance(root[0], tuple)):
            raise InvalidArgumentError("Chat JSON must be an object")

        message = cls(alt_char=alt_char)
        extra = [value for key, value in root if key == "extra"]
        if not extra:
            message.add_snippet(Snippet.from_pairs(root))
            return message

        head = Snippet.from_pairs([(k, v) for k, v in root if k != "extra"])
        # The wrapper object written for multi-snippet messages carries no content
        if head.text or head.styles or head.events:
            message.add_snippet(head)
        if not isinstance(extra[-1], list):
            raise InvalidArgumentError("Chat JSON extra must be an array")
        for item in extra[-1]:
            if not isinstance(item, list):
                raise InvalidArgumentError("Chat JSON extra entries must be objects")
            message.add_snippet(Snippet.from_pairs(item))
        return message

    def _invalidate(self) -> None:
        self._json = None

    # -- delivery ----------------------------------------------------------

    def send(self, *targets: ChatTarget) -> Message:
        """Deliver to each target, as JSON where the target supports it."""
        for target in targets:
            if target.supports_rich_chat:
                target.deliver_rich(self.to_json())
                log.debug("message_sent", target=type(target).__name__, rich=True)
            else:
                target.deliver_text(self.plain_content())
                log.debug("message_sent", target=type(target).__name__, rich=False)
        return self

    # -- value semantics ---------------------------------------------------

    def copy(self) -> Message:
        cloned = Message(alt_char=self._alt_char)
        cloned._snippets = [snippet.copy() for snippet in self._snippets]
        return cloned

    def to_record(self) -> dict[str, Any]:
        return {SERIALIZED_SNIPPETS: [snippet.to_record() for snippet in self._snippets]}

    @classmethod
    def from_record(cls, record: dict[str, Any], *, alt_char: str = "&") -> Message:
        if SERIALIZED_SNIPPETS not in record:
            raise InvalidArgumentError("Failed to deserialize Message from provided data")
        message = cls(alt_char=alt_char)
        message._snippets = [Snippet.from_record(s) for s in record[SERIALIZED_SNIPPETS] or []]
        return message
