"""Legacy colour codes and their protocol names."""

from __future__ import annotations

import re
from enum import Enum

COLOUR_CHAR = "§"
_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRr"

COLOUR_PATTERN = re.compile(COLOUR_CHAR + "([0-9A-FK-OR])", re.IGNORECASE)


class ColorToken(Enum):
    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"
    MAGIC = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @property
    def code(self) -> str:
        return self.value

    @property
    def is_format(self) -> bool:
        return self in _FORMATS

    @property
    def is_colour(self) -> bool:
        return not self.is_format and self is not ColorToken.RESET

    @property
    def protocol_name(self) -> str:
        return _PROTOCOL_NAMES.get(self, self.name.lower())

    def __str__(self) -> str:
        return COLOUR_CHAR + self.value

    @classmethod
    def by_code(cls, code: str) -> ColorToken | None:
        """Look up a token by its code character, ignoring case."""
        try:
            return cls(code.lower())
        except ValueError:
            return None

    @classmethod
    def by_name(cls, name: str) -> ColorToken | None:
        """Look up a token by identifier (``UNDERLINE``) or protocol name (``underlined``)."""
        key = name.strip()
        member = cls.__members__.get(key.upper())
        if member is not None:
            return member
        for token in cls:
            if token.protocol_name == key.lower():
                return token
        return None


_FORMATS = frozenset({
    ColorToken.MAGIC,
    ColorToken.BOLD,
    ColorToken.STRIKETHROUGH,
    ColorToken.UNDERLINE,
    ColorToken.ITALIC,
})

# The client spells these two differently from their legacy identifiers
_PROTOCOL_NAMES = {
    ColorToken.MAGIC: "obfuscated",
    ColorToken.UNDERLINE: "underlined",
}


def translate_alternate_colour_codes(alt_char: str, text: str) -> str:
    """Replace ``alt_char`` + code pairs with the legacy sentinel form."""
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == alt_char and chars[i + 1] in _CODES:
            chars[i] = COLOUR_CHAR
            chars[i + 1] = chars[i + 1].lower()
    return "".join(chars)


def strip_colour(text: str) -> str:
    return COLOUR_PATTERN.sub("", text)
