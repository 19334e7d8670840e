"""Tests for rule tables and substitution table construction."""

import pytest

from safe_filename import (
    FULLWIDTH_TABLE,
    NOT_ALLOWED_CHARS,
    NOT_ALLOWED_NAMES,
    NOT_ALLOWED_NAMES_WIN11,
    InvalidReplaceCharError,
    ReplaceChar,
    ReplaceMethod,
)
from safe_filename.rules.models import parse_glyph, resolve_char
from safe_filename.rules.tables import CONTROL_CHARS


class TestRuleTables:
    """Tests for the static character and name sets."""

    def test_forbidden_character_count(self):
        assert len(NOT_ALLOWED_CHARS) == 41
        assert all(chr(code) in NOT_ALLOWED_CHARS for code in range(32))
        assert set('\\/:*?"<>|') <= NOT_ALLOWED_CHARS

    def test_reserved_name_sets(self):
        assert len(NOT_ALLOWED_NAMES_WIN11) == 28
        assert len(NOT_ALLOWED_NAMES) == 30
        assert set(NOT_ALLOWED_NAMES) - set(NOT_ALLOWED_NAMES_WIN11) == {"COM0", "LPT0"}
        assert "COM¹" in NOT_ALLOWED_NAMES_WIN11

    def test_fullwidth_table_is_read_only(self):
        with pytest.raises(TypeError):
            FULLWIDTH_TABLE["?"] = "!"


class TestConstructTable:
    """Tests for compiling replace methods."""

    @pytest.mark.parametrize(
        "method",
        [
            ReplaceMethod.fullwidth("!"),
            ReplaceMethod.replace("!"),
            ReplaceMethod.remove(),
            ReplaceMethod.fullwidth(ReplaceChar.SPACE),
        ],
    )
    def test_every_forbidden_char_is_mapped(self, method):
        assert set(method.compile().table) == NOT_ALLOWED_CHARS

    def test_replace_maps_everything_to_glyph(self):
        table = ReplaceMethod.replace("!").construct_table()
        assert set(table.values()) == {"!"}

    def test_fullwidth_maps_punctuation_individually(self):
        table = ReplaceMethod.fullwidth("!").construct_table()
        assert table["\\"] == "⧵"
        assert table["/"] == "／"
        assert table[":"] == "："
        assert table["*"] == "＊"
        assert table["?"] == "？"
        assert table['"'] == "＂"
        assert table["<"] == "＜"
        assert table[">"] == "＞"
        assert table["|"] == "∣"
        assert all(table[control] == "!" for control in CONTROL_CHARS)

    def test_remove_maps_to_null(self):
        table = ReplaceMethod.remove().construct_table()
        assert set(table.values()) == {"\0"}
        assert table == ReplaceMethod.replace("\0").construct_table()

    def test_compiled_table_is_immutable(self):
        compiled = ReplaceMethod.replace().compile()
        with pytest.raises(TypeError):
            compiled.table["a"] = "b"

    def test_translate_drops_removed_characters(self):
        compiled = ReplaceMethod.remove().compile()
        assert "".join(compiled.translate("a?b\tc")) == "abc"


class TestGlyphs:
    """Tests for resolving replacement glyphs."""

    def test_presets(self):
        assert resolve_char(ReplaceChar.SPACE) == " "
        assert resolve_char(ReplaceChar.DOUBLE_QUESTION_MARK) == "⁇"
        assert resolve_char(ReplaceChar.WHITE_QUESTION_MARK) == "❔"
        assert resolve_char(ReplaceChar.RED_QUESTION_MARK) == "❓"
        assert resolve_char(ReplaceChar.UNDERSCORE) == "_"

    def test_arbitrary_character(self):
        assert resolve_char("한") == "한"

    @pytest.mark.parametrize("value", ["", "ab", None])
    def test_invalid_glyph(self, value):
        with pytest.raises(InvalidReplaceCharError):
            resolve_char(value)

    def test_parse_preset_names(self):
        assert parse_glyph("underscore") is ReplaceChar.UNDERSCORE
        assert parse_glyph("red-question-mark") is ReplaceChar.RED_QUESTION_MARK
        assert parse_glyph("!") == "!"

    def test_parse_unknown_word(self):
        with pytest.raises(InvalidReplaceCharError):
            parse_glyph("tilde")
