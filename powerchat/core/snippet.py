"""A single styled run of text and the events attached to it."""

from __future__ import annotations

from typing import Any

from powerchat.core.colours import ColorToken
from powerchat.core.errors import InvalidArgumentError
from powerchat.core.events import ActionEvent
from powerchat.core.jsonwriter import JsonWriter

SERIALIZED_TEXT = "text"
SERIALIZED_COLOURS = "colours"
SERIALIZED_ACTION_EVENTS = "actionEvents"


class Snippet:
    """One contiguous run of text with its own style list and event list."""

    def __init__(
        self,
        text: str = "",
        styles: list[ColorToken] | None = None,
        events: list[ActionEvent] | None = None,
    ) -> None:
        self.text = text
        self._styles: list[ColorToken] = list(styles or [])
        self._events: list[ActionEvent] = [e.copy() for e in events or []]

    def __repr__(self) -> str:
        return f"Snippet(text={self.text!r}, styles={self._styles!r}, events={self._events!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snippet):
            return NotImplemented
        return (
            self.text == other.text
            and self._styles == other._styles
            and self._events == other._events
        )

    @property
    def styles(self) -> tuple[ColorToken, ...]:
        return tuple(self._styles)

    @property
    def events(self) -> tuple[ActionEvent, ...]:
        return tuple(self._events)

    def add_styles(self, *tokens: ColorToken) -> Snippet:
        self._styles.extend(tokens)
        return self

    def event(self, category: str, action: str) -> ActionEvent | None:
        """Return the event with this category and action, if any."""
        for existing in self._events:
            if existing.matches(category, action):
                return existing
        return None

    def add_event(self, category: str, action: str, value: str) -> Snippet:
        """Attach an event, merging into an existing one of the same kind.

        A second event with the same category and action replaces the first,
        with both values joined by a newline. The merged event moves to the
        end of the event list.
        """
        event = ActionEvent(category).with_name(action).with_data(value)
        existing = self.event(event.category, event.action)
        if existing is None:
            self._events.append(event)
            return self

        self._events.remove(existing)
        self._events.append(event.with_data(f"{existing.value}\n{event.value}"))
        return self

    def add_events(self, *events: ActionEvent) -> Snippet:
        for event in events:
            self.add_event(event.category, event.action, event.value)
        return self

    # -- wire format -------------------------------------------------------

    def serialize(self) -> list[tuple[str, Any]]:
        """Ordered key/value pairs of this snippet's JSON object.

        A ``color`` pair is emitted for every hue token in the style list, so
        keys may repeat; the client keeps the last one.
        """
        pairs: list[tuple[str, Any]] = [("text", self.text)]
        for token in self._styles:
            if token.is_format:
                pairs.append((token.protocol_name, True))
            else:
                pairs.append(("color", token.protocol_name))
        for event in self._events:
            pairs.append(event.serialize())
        return pairs

    def to_dict(self) -> dict[str, Any]:
        return dict(self.serialize())

    def write_json(self, writer: JsonWriter) -> JsonWriter:
        return writer.pairs(self.serialize())

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, Any]]) -> Snippet:
        """Rebuild a snippet from a parsed JSON object."""
        snippet = cls()
        for key, value in pairs:
            if key == "text":
                snippet.text = str(value)
            elif key == "color":
                token = ColorToken.by_name(str(value))
                if token is None:
                    raise InvalidArgumentError(f"Unknown colour: {value!r}")
                snippet.add_styles(token)
            elif key.endswith("Event") and isinstance(value, list):
                body = dict(value)
                snippet.add_event(key[: -len("Event")], body.get("action", ""), body.get("value", ""))
            elif value is True:
                token = ColorToken.by_name(key)
                if token is not None and token.is_format:
                    snippet.add_styles(token)
        return snippet

    # -- value semantics ---------------------------------------------------

    def copy(self) -> Snippet:
        return Snippet(self.text, self._styles, self._events)

    def to_record(self) -> dict[str, Any]:
        return {
            SERIALIZED_TEXT: self.text,
            SERIALIZED_COLOURS: [token.name for token in self._styles],
            SERIALIZED_ACTION_EVENTS: [event.to_record() for event in self._events],
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Snippet:
        if SERIALIZED_TEXT not in record:
            raise InvalidArgumentError("Failed to deserialize Snippet from provided data")
        styles: list[ColorToken] = []
        for name in record.get(SERIALIZED_COLOURS) or []:
            token = ColorToken.by_name(str(name))
            if token is None:
                raise InvalidArgumentError(f"Unknown colour: {name!r}")
            styles.append(token)
        events = [ActionEvent.from_record(e) for e in record.get(SERIALIZED_ACTION_EVENTS) or []]
        return cls(str(record[SERIALIZED_TEXT]), styles, events)
