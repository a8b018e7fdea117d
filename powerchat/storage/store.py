"""Persistent key-value message store with a YAML backend."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

from powerchat.core.errors import InvalidArgumentError
from powerchat.core.message import Message
from powerchat.utils.logging import get_logger

log = get_logger(__name__)


class MessageStore:
    """Messages saved under string keys in a single YAML file.

    The file is read on every access and rewritten on every change; the store
    keeps no state of its own besides the path.
    """

    def __init__(self, path: Path, alt_char: str = "&") -> None:
        self._path = Path(path)
        self._alt_char = alt_char

    @property
    def path(self) -> Path:
        return self._path

    def __contains__(self, key: str) -> bool:
        return key in self._load()

    def keys(self) -> list[str]:
        return sorted(self._load())

    def get(self, key: str) -> Message:
        data = self._load()
        if key not in data:
            raise KeyError(key)
        return Message.from_record(data[key], alt_char=self._alt_char)

    def put(self, key: str, message: Message) -> None:
        data = self._load()
        data[key] = message.to_record()
        self._save(data)
        log.info("message_store_saved", key=key, snippets=len(message))

    def remove(self, key: str) -> bool:
        data = self._load()
        if key not in data:
            return False
        del data[key]
        self._save(data)
        log.info("message_store_removed", key=key)
        return True

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Message store {self._path} is not a mapping")
        return data

    def _save(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self._path.name, dir=str(self._path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, allow_unicode=True, sort_keys=True)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
