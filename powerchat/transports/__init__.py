"""Delivery targets for finished messages."""

from .base import ChatTarget
from .console import ConsoleTarget

__all__ = ["ChatTarget", "ConsoleTarget"]
