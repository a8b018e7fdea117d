"""Tests for the inline markup parser."""

import pytest

from powerchat.core.colours import ColorToken
from powerchat.core.errors import NullStateError
from powerchat.markup.builder import MarkupBuilder, parse_markup


class TestParseMarkup:
    def test_no_tags(self):
        message = parse_markup("Just &atext")
        assert [s.text for s in message] == ["Just ", "text"]
        assert all(s.events == () for s in message)

    def test_tag_decorates_preceding_text(self):
        message = parse_markup("Hello[txt:Tip text]")
        assert len(message) == 1
        assert message.to_json() == (
            '{"text":"Hello","hoverEvent":{"action":"show_text","value":"Tip text"}}'
        )

    @pytest.mark.parametrize(
        "kind, category, action",
        [
            ("txt", "hover", "show_text"),
            ("file", "click", "open_file"),
            ("url", "click", "open_url"),
            ("cmd", "click", "run_command"),
            ("scmd", "click", "suggest_command"),
        ],
    )
    def test_tag_kinds(self, kind, category, action):
        message = parse_markup(f"go[{kind}:payload]")
        assert message.snippet(0).event(category, action).value == "payload"

    def test_kind_is_case_insensitive(self):
        message = parse_markup("go[URL:https://example.com]")
        assert message.snippet(0).event("click", "open_url").value == "https://example.com"

    def test_trailing_text(self):
        message = parse_markup("Hello [url:https://example.com] world")
        assert [s.text for s in message] == ["Hello ", " world"]
        assert message.snippet(0).event("click", "open_url") is not None
        assert message.snippet(1).events == ()

    def test_text_between_tags_not_skipped(self):
        message = parse_markup("a[txt:x]b[txt:y]")
        assert [s.text for s in message] == ["a", "b"]
        assert message.snippet(1).event("hover", "show_text").value == "y"

    def test_consecutive_tags_share_text(self):
        message = parse_markup("Click[cmd:say hi][txt:Runs say]")
        snippet = message.snippet(0)
        assert snippet.event("click", "run_command").value == "say hi"
        assert snippet.event("hover", "show_text").value == "Runs say"

    def test_tag_covers_all_coloured_runs(self):
        message = parse_markup("&6Gold &lbold[cmd:/gold]")
        assert len(message) == 2
        assert message.snippet(1).styles == (ColorToken.GOLD, ColorToken.BOLD)
        assert all(s.event("click", "run_command") for s in message)

    def test_payload_colour_codes_translated(self):
        message = parse_markup("Hover[txt:&6Gold tip]")
        assert message.snippet(0).event("hover", "show_text").value == "§6Gold tip"

    def test_empty_payload_is_not_a_tag(self):
        message = parse_markup("a[txt:]")
        assert message.text == "a[txt:]"

    def test_unknown_kind_is_text(self):
        message = parse_markup("a[img:cat.png]")
        assert message.text == "a[img:cat.png]"

    def test_tag_without_text(self):
        with pytest.raises(NullStateError):
            parse_markup("[txt:nothing to hover]")

    def test_custom_alternate_char(self):
        message = parse_markup("~cRed[txt:~ltip]", alt_char="~")
        assert message.snippet(0).styles == (ColorToken.RED,)
        assert message.snippet(0).event("hover", "show_text").value == "§ltip"


class TestMarkupBuilder:
    def test_accumulates_text(self):
        builder = MarkupBuilder().with_text("Hello").with_text("[txt:there]")
        assert builder.raw == "Hello[txt:there]"
        message = builder.build()
        assert message.snippet(0).event("hover", "show_text").value == "there"

    def test_build_returns_fresh_messages(self):
        builder = MarkupBuilder().with_text("x")
        assert builder.build() is not builder.build()
