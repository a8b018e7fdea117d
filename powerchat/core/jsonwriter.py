"""Compact streaming JSON writer that keeps key order and repeated keys.

The chat wire format emits one ``color`` key per hue token, so a snippet
object can legitimately repeat a key. ``dict`` based encoding would collapse
those, hence this small writer in the style of a pull-style JSON emitter.
"""

from __future__ import annotations

import io
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, TextIO

from powerchat.core.errors import InvalidArgumentError, SerializationError


class _Scope(Enum):
    DOCUMENT = "document"
    OBJECT = "object"
    ARRAY = "array"


@dataclass
class _Frame:
    scope: _Scope
    count: int = 0
    pending_name: str | None = None


def _encode_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


class JsonWriter:
    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else io.StringIO()
        self._stack: list[_Frame] = [_Frame(_Scope.DOCUMENT)]
        self._closed = False

    def __enter__(self) -> JsonWriter:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        if exc_type is None:
            self.close()
        else:
            # Don't mask the original error with an incomplete-document one
            self._closed = True

    @property
    def complete(self) -> bool:
        return len(self._stack) == 1 and self._stack[0].count == 1

    def getvalue(self) -> str:
        """Return the written text when writing to the default buffer."""
        if not isinstance(self._out, io.StringIO):
            raise SerializationError("Writer is not backed by an in-memory buffer")
        return self._out.getvalue()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if not self.complete:
            raise SerializationError("Incomplete JSON document")

    # -- structure ---------------------------------------------------------

    def begin_object(self) -> JsonWriter:
        self._before_value()
        self._stack.append(_Frame(_Scope.OBJECT))
        self._out.write("{")
        return self

    def end_object(self) -> JsonWriter:
        self._end(_Scope.OBJECT, "}")
        return self

    def begin_array(self) -> JsonWriter:
        self._before_value()
        self._stack.append(_Frame(_Scope.ARRAY))
        self._out.write("[")
        return self

    def end_array(self) -> JsonWriter:
        self._end(_Scope.ARRAY, "]")
        return self

    def name(self, name: str) -> JsonWriter:
        self._check_open()
        frame = self._stack[-1]
        if frame.scope is not _Scope.OBJECT or frame.pending_name is not None:
            raise SerializationError(f"Unexpected name {name!r}")
        if frame.count:
            self._out.write(",")
        frame.count += 1
        frame.pending_name = name
        self._out.write(_encode_string(name))
        self._out.write(":")
        return self

    def value(self, value: str | bool | int | float | None) -> JsonWriter:
        self._before_value()
        if isinstance(value, str):
            self._out.write(_encode_string(value))
        else:
            self._out.write(json.dumps(value))
        return self

    def pairs(self, pairs: list[tuple[str, Any]]) -> JsonWriter:
        """Write an object from ordered ``(key, value)`` pairs.

        Values may be scalars, nested pair lists, or plain dicts.
        """
        self.begin_object()
        for key, value in pairs:
            self.name(key)
            self._write_any(value)
        return self.end_object()

    # -- internals ---------------------------------------------------------

    def _write_any(self, value: Any) -> None:
        if isinstance(value, dict):
            self.pairs(list(value.items()))
        elif isinstance(value, list) and all(
            isinstance(item, tuple) and len(item) == 2 for item in value
        ) and value:
            self.pairs(value)
        elif isinstance(value, (list, tuple)):
            self.begin_array()
            for item in value:
                self._write_any(item)
            self.end_array()
        else:
            self.value(value)

    def _check_open(self) -> None:
        if self._closed:
            raise SerializationError("Writer is closed")

    def _before_value(self) -> None:
        self._check_open()
        frame = self._stack[-1]
        if frame.scope is _Scope.OBJECT:
            if frame.pending_name is None:
                raise SerializationError("Object values need a name first")
            frame.pending_name = None
        elif frame.scope is _Scope.ARRAY:
            if frame.count:
                self._out.write(",")
            frame.count += 1
        else:
            if frame.count:
                raise SerializationError("JSON must have only one top-level value")
            frame.count += 1

    def _end(self, scope: _Scope, closer: str) -> None:
        self._check_open()
        frame = self._stack[-1]
        if frame.scope is not scope or frame.pending_name is not None:
            raise SerializationError(f"Cannot close {scope.value} here")
        self._stack.pop()
        self._out.write(closer)


def load_pairs(payload: str) -> Any:
    """Parse JSON, keeping every object as a list of ``(key, value)`` pairs."""
    try:
        return json.loads(payload, object_pairs_hook=list)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"Malformed JSON payload: {e}") from e
