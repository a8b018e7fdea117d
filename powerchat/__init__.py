"""powerchat - interactive JSON chat messages built from styled snippets."""

from powerchat.core.colours import ColorToken
from powerchat.core.errors import (
    IllegalParameterError,
    InvalidArgumentError,
    NullStateError,
    PowerChatError,
    SerializationError,
    ValidationError,
)
from powerchat.core.events import ActionEvent
from powerchat.core.group import Group
from powerchat.core.message import Message
from powerchat.core.session import MessageSession
from powerchat.core.snippet import Snippet
from powerchat.markup.builder import MarkupBuilder, parse_markup

__version__ = "0.1.0"

__all__ = [
    "ActionEvent",
    "ColorToken",
    "Group",
    "IllegalParameterError",
    "InvalidArgumentError",
    "MarkupBuilder",
    "Message",
    "MessageSession",
    "NullStateError",
    "PowerChatError",
    "SerializationError",
    "Snippet",
    "ValidationError",
    "parse_markup",
]
