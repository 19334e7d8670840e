"""Tests for configuration resolution."""

import pytest

from safe_filename import DotHandlingPolicy, ReplaceChar, ReplaceMethod
from safe_filename.config import SanitizerConfig, load_config, resolve_config
from safe_filename.errors import ConfigError, PolicyConfigurationError
from safe_filename.rules.models import DotAction, MethodKind


class TestSanitizerConfig:
    """Tests for building policies from configuration values."""

    def test_defaults(self):
        config = SanitizerConfig()
        assert config.build_method() == ReplaceMethod.fullwidth(ReplaceChar.UNDERSCORE)
        assert config.build_dot_policy() == DotHandlingPolicy.replace_with_method()
        assert config.strict is True

    def test_literal_glyph(self):
        config = SanitizerConfig(method="replace", replace_char="!")
        assert config.build_method() == ReplaceMethod.replace("!")

    def test_remove_method(self):
        assert SanitizerConfig(method="remove").build_method() == ReplaceMethod.remove()

    def test_invalid_glyph_rejected(self):
        with pytest.raises(ValueError):
            SanitizerConfig(replace_char="not-a-preset")

    def test_dot_replace_requires_char(self):
        config = SanitizerConfig(dot_policy="replace")
        with pytest.raises(PolicyConfigurationError):
            config.build_dot_policy()

    def test_dot_replace_with_preset(self):
        config = SanitizerConfig(dot_policy="replace", dot_replace_char="white_question_mark")
        assert config.build_dot_policy() == DotHandlingPolicy.replace(ReplaceChar.WHITE_QUESTION_MARK)

    def test_keep_dots(self):
        assert SanitizerConfig(dot_policy="keep").build_dot_policy() == DotHandlingPolicy.not_correct()

    def test_apply_overrides_ignores_none(self):
        config = SanitizerConfig(method="replace").apply_overrides(method=None, dot_policy=DotAction.REMOVE)
        assert config.method is MethodKind.REPLACE
        assert config.dot_policy is DotAction.REMOVE

    def test_apply_overrides_validates(self):
        with pytest.raises(ConfigError):
            SanitizerConfig().apply_overrides(replace_char="xyz")


class TestResolveConfig:
    """Tests for the configuration source precedence."""

    def test_no_sources_gives_defaults(self):
        source = resolve_config()
        assert source.config is None
        assert source.error is None
        assert load_config() == SanitizerConfig()

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('method = "replace"\nreplace_char = "!"\n', encoding="utf-8")
        source = resolve_config(path)
        assert source.path == path
        assert source.config.build_method() == ReplaceMethod.replace("!")

    def test_sanitizer_table(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[sanitizer]\ndot_policy = "remove"\nstrict = false\n', encoding="utf-8")
        config = load_config(path)
        assert config.dot_policy is DotAction.REMOVE
        assert config.strict is False

    def test_default_path(self, isolated_config):
        isolated_config[0].write_text('method = "remove"\n', encoding="utf-8")
        assert load_config().method is MethodKind.REMOVE

    def test_file_takes_precedence_over_env(self, isolated_config, monkeypatch):
        isolated_config[0].write_text('method = "remove"\n', encoding="utf-8")
        monkeypatch.setenv("SAFE_FILENAME_METHOD", "replace")
        assert load_config().method is MethodKind.REMOVE

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("SAFE_FILENAME_METHOD", "replace")
        monkeypatch.setenv("SAFE_FILENAME_REPLACE_CHAR", "red_question_mark")
        monkeypatch.setenv("SAFE_FILENAME_STRICT", "false")
        config = load_config()
        assert config.build_method() == ReplaceMethod.replace(ReplaceChar.RED_QUESTION_MARK)
        assert config.strict is False

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('method = "shout"\n', encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)
