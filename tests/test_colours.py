"""Tests for colour tokens and legacy colour codes."""

from powerchat.core.colours import ColorToken, strip_colour, translate_alternate_colour_codes


class TestColorToken:
    def test_protocol_names(self):
        assert ColorToken.BOLD.protocol_name == "bold"
        assert ColorToken.DARK_PURPLE.protocol_name == "dark_purple"
        assert ColorToken.STRIKETHROUGH.protocol_name == "strikethrough"

    def test_renamed_styles(self):
        assert ColorToken.MAGIC.protocol_name == "obfuscated"
        assert ColorToken.UNDERLINE.protocol_name == "underlined"

    def test_format_flags(self):
        formats = {t for t in ColorToken if t.is_format}
        assert formats == {
            ColorToken.MAGIC,
            ColorToken.BOLD,
            ColorToken.STRIKETHROUGH,
            ColorToken.UNDERLINE,
            ColorToken.ITALIC,
        }
        assert not ColorToken.RESET.is_format
        assert not ColorToken.RESET.is_colour
        assert sum(1 for t in ColorToken if t.is_colour) == 16

    def test_str_is_legacy_code(self):
        assert str(ColorToken.RED) == "§c"
        assert str(ColorToken.RESET) == "§r"

    def test_by_code(self):
        assert ColorToken.by_code("c") is ColorToken.RED
        assert ColorToken.by_code("C") is ColorToken.RED
        assert ColorToken.by_code("z") is None

    def test_by_name(self):
        assert ColorToken.by_name("underlined") is ColorToken.UNDERLINE
        assert ColorToken.by_name("UNDERLINE") is ColorToken.UNDERLINE
        assert ColorToken.by_name("dark_red") is ColorToken.DARK_RED
        assert ColorToken.by_name("obfuscated") is ColorToken.MAGIC
        assert ColorToken.by_name("mauve") is None


class TestTranslate:
    def test_translates_valid_codes(self):
        assert translate_alternate_colour_codes("&", "&cHi") == "§cHi"

    def test_lowercases_code(self):
        assert translate_alternate_colour_codes("&", "&CHi") == "§cHi"

    def test_ignores_invalid_codes(self):
        assert translate_alternate_colour_codes("&", "salt & pepper &z") == "salt & pepper &z"

    def test_double_marker(self):
        assert translate_alternate_colour_codes("&", "&&aok") == "&§aok"

    def test_trailing_marker(self):
        assert translate_alternate_colour_codes("&", "end&") == "end&"

    def test_custom_marker(self):
        assert translate_alternate_colour_codes("~", "~l&lbold") == "§l&lbold"

    def test_strip_colour(self):
        assert strip_colour("§cHi§r there§L!") == "Hi there!"
