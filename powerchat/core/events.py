"""Click and hover events attached to snippets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from powerchat.core.errors import InvalidArgumentError, ValidationError
from powerchat.core.jsonwriter import JsonWriter


class EventCategory(str, Enum):
    CLICK = "click"
    HOVER = "hover"


class ClickAction(str, Enum):
    OPEN_FILE = "open_file"
    OPEN_URL = "open_url"
    SUGGEST_COMMAND = "suggest_command"
    RUN_COMMAND = "run_command"


class HoverAction(str, Enum):
    SHOW_TEXT = "show_text"
    SHOW_ACHIEVEMENT = "show_achievement"
    SHOW_ITEM = "show_item"


@dataclass
class ActionEvent:
    """One click or hover behaviour.

    ``action`` and ``value`` may start out empty; they are only required to be
    present once the event is serialized.
    """

    category: str
    action: str = ""
    value: str = ""

    def __post_init__(self) -> None:
        # Accept the enum members as well as their raw strings
        self.category = str(getattr(self.category, "value", self.category))
        self.action = str(getattr(self.action, "value", self.action))

    @property
    def key(self) -> str:
        return f"{self.category}Event"

    def with_name(self, action: str) -> ActionEvent:
        self.action = str(getattr(action, "value", action))
        return self

    def with_data(self, value: str) -> ActionEvent:
        self.value = value
        return self

    def matches(self, category: str, action: str) -> bool:
        return self.category == category and self.action == action

    def serialize(self) -> tuple[str, dict[str, str]]:
        if not self.action:
            raise ValidationError("Action name cannot be empty!")
        if not self.value:
            raise ValidationError("Action data cannot be empty!")
        return self.key, {"action": self.action, "value": self.value}

    def write_json(self, writer: JsonWriter) -> JsonWriter:
        key, body = self.serialize()
        writer.name(key)
        writer.begin_object()
        writer.name("action").value(body["action"])
        writer.name("value").value(body["value"])
        return writer.end_object()

    def copy(self) -> ActionEvent:
        return ActionEvent(self.category, self.action, self.value)

    def to_record(self) -> dict[str, str]:
        return {"type": self.category, "name": self.action, "data": self.value}

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> ActionEvent:
        if "type" not in record:
            raise InvalidArgumentError("Failed to deserialize ActionEvent from provided data")
        return cls(
            str(record["type"]),
            str(record.get("name") or ""),
            str(record.get("data") or ""),
        )
