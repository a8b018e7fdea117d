"""Exception types raised by the message model."""

from __future__ import annotations


class PowerChatError(Exception):
    """Base class for every error raised by powerchat."""


class ValidationError(PowerChatError, ValueError):
    """A required field was empty when the message was serialized."""


class InvalidArgumentError(PowerChatError, ValueError):
    """An argument was empty or otherwise unusable."""


class NullStateError(PowerChatError, RuntimeError):
    """A decoration was requested before any snippet group existed."""


class IllegalParameterError(PowerChatError, ValueError):
    """A statistic was given the wrong kind of qualifier."""


class SerializationError(PowerChatError, RuntimeError):
    """The JSON writer was driven into an invalid state."""
