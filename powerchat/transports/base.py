"""Abstract chat target."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ChatTarget(ABC):
    """Something a message can be delivered to.

    Targets that understand JSON chat receive the serialized payload; the
    rest get the legacy colour-coded text.
    """

    @property
    @abstractmethod
    def supports_rich_chat(self) -> bool: ...

    @abstractmethod
    def deliver_text(self, text: str) -> None: ...

    @abstractmethod
    def deliver_rich(self, payload: str) -> None: ...
