"""Persistence for messages."""

from .store import MessageStore

__all__ = ["MessageStore"]
