"""Tests for snippets."""

import pytest

from powerchat.core.colours import ColorToken
from powerchat.core.errors import InvalidArgumentError, ValidationError
from powerchat.core.events import ActionEvent
from powerchat.core.snippet import Snippet


class TestStyles:
    def test_add_styles_keeps_duplicates_and_order(self):
        snippet = Snippet("x").add_styles(ColorToken.RED, ColorToken.BOLD, ColorToken.RED)
        assert snippet.styles == (ColorToken.RED, ColorToken.BOLD, ColorToken.RED)

    def test_styles_are_read_only_view(self):
        snippet = Snippet("x", [ColorToken.RED])
        assert isinstance(snippet.styles, tuple)

    def test_constructor_copies_style_list(self):
        styles = [ColorToken.RED]
        snippet = Snippet("x", styles)
        styles.append(ColorToken.BLUE)
        assert snippet.styles == (ColorToken.RED,)


class TestEvents:
    def test_add_event(self):
        snippet = Snippet("x").add_event("click", "open_url", "https://a.io")
        assert snippet.events == (ActionEvent("click", "open_url", "https://a.io"),)

    def test_same_kind_merges_with_newline(self):
        snippet = Snippet("x")
        snippet.add_event("hover", "show_text", "first")
        snippet.add_event("hover", "show_text", "second")
        assert snippet.events == (ActionEvent("hover", "show_text", "first\nsecond"),)

    def test_merged_event_replaces_old_entry(self):
        snippet = Snippet("x")
        snippet.add_event("click", "open_url", "a")
        snippet.add_event("hover", "show_text", "tip")
        snippet.add_event("click", "open_url", "b")
        assert snippet.events == (
            ActionEvent("hover", "show_text", "tip"),
            ActionEvent("click", "open_url", "a\nb"),
        )

    def test_different_actions_kept_apart(self):
        snippet = Snippet("x")
        snippet.add_event("click", "open_url", "a")
        snippet.add_event("click", "run_command", "/b")
        assert len(snippet.events) == 2

    def test_add_events(self):
        snippet = Snippet("x").add_events(
            ActionEvent("hover", "show_text", "a"),
            ActionEvent("hover", "show_text", "b"),
        )
        assert snippet.event("hover", "show_text").value == "a\nb"

    def test_event_lookup_missing(self):
        assert Snippet("x").event("click", "open_url") is None


class TestSerialize:
    def test_plain_text(self):
        assert Snippet("Hello").serialize() == [("text", "Hello")]

    def test_styles_and_colour(self):
        snippet = Snippet("x", [ColorToken.BOLD, ColorToken.RED, ColorToken.UNDERLINE])
        assert snippet.serialize() == [
            ("text", "x"),
            ("bold", True),
            ("color", "red"),
            ("underlined", True),
        ]

    def test_every_colour_emitted(self):
        snippet = Snippet("x", [ColorToken.RED, ColorToken.BLUE])
        assert snippet.serialize() == [("text", "x"), ("color", "red"), ("color", "blue")]
        assert snippet.to_dict()["color"] == "blue"

    def test_events_follow_styles(self):
        snippet = Snippet("x", [ColorToken.GOLD]).add_event("click", "run_command", "/spawn")
        assert snippet.serialize() == [
            ("text", "x"),
            ("color", "gold"),
            ("clickEvent", {"action": "run_command", "value": "/spawn"}),
        ]

    def test_empty_event_value_fails(self):
        snippet = Snippet("x").add_event("click", "open_url", "")
        with pytest.raises(ValidationError):
            snippet.serialize()

    def test_from_pairs(self):
        pairs = [
            ("text", "x"),
            ("italic", True),
            ("color", "aqua"),
            ("hoverEvent", [("action", "show_text"), ("value", "tip")]),
        ]
        snippet = Snippet.from_pairs(pairs)
        assert snippet == Snippet(
            "x",
            [ColorToken.ITALIC, ColorToken.AQUA],
            [ActionEvent("hover", "show_text", "tip")],
        )

    def test_from_pairs_unknown_colour(self):
        with pytest.raises(InvalidArgumentError):
            Snippet.from_pairs([("text", "x"), ("color", "mauve")])


class TestValueSemantics:
    def test_copy_is_deep(self):
        original = Snippet("x", [ColorToken.RED]).add_event("hover", "show_text", "a")
        cloned = original.copy()
        cloned.add_styles(ColorToken.BOLD)
        cloned.add_event("hover", "show_text", "b")
        cloned.text = "y"
        assert original.text == "x"
        assert original.styles == (ColorToken.RED,)
        assert original.event("hover", "show_text").value == "a"

    def test_record_round_trip(self):
        snippet = Snippet("x", [ColorToken.MAGIC, ColorToken.GREEN]).add_event(
            "click", "suggest_command", "/help"
        )
        record = snippet.to_record()
        assert record == {
            "text": "x",
            "colours": ["MAGIC", "GREEN"],
            "actionEvents": [{"type": "click", "name": "suggest_command", "data": "/help"}],
        }
        assert Snippet.from_record(record) == snippet

    def test_record_without_text(self):
        with pytest.raises(InvalidArgumentError):
            Snippet.from_record({"colours": []})
