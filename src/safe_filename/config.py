"""Configuration helpers for the safe-filename sanitizer."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError, PolicyConfigurationError
from .rules.models import DotAction, DotHandlingPolicy, Glyph, MethodKind, ReplaceMethod, parse_glyph


class SanitizerConfig(BaseModel):
    """Default policies applied when sanitizing names."""

    method: MethodKind = Field(MethodKind.FULLWIDTH, description="How disallowed characters are rewritten")
    replace_char: str = Field("underscore", description="Preset name or single replacement character")
    dot_policy: DotAction = Field(DotAction.REPLACE_WITH_METHOD, description="How trailing dots are handled")
    dot_replace_char: Optional[str] = Field(
        None, description="Glyph for trailing dots when dot_policy is 'replace'"
    )
    strict: bool = Field(True, description="Also reserve COM0/LPT0 and 'NUL.ext' style names")

    @field_validator("replace_char", "dot_replace_char")
    @classmethod
    def _check_glyph(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                parse_glyph(value)
            except PolicyConfigurationError as exc:
                raise ValueError(str(exc)) from exc
        return value

    @property
    def glyph(self) -> Glyph:
        return parse_glyph(self.replace_char)

    def build_method(self) -> ReplaceMethod:
        if self.method is MethodKind.FULLWIDTH:
            return ReplaceMethod.fullwidth(self.glyph)
        if self.method is MethodKind.REPLACE:
            return ReplaceMethod.replace(self.glyph)
        return ReplaceMethod.remove()

    def build_dot_policy(self) -> DotHandlingPolicy:
        if self.dot_policy is DotAction.REPLACE:
            if self.dot_replace_char is None:
                raise PolicyConfigurationError("dot_policy 'replace' requires dot_replace_char")
            return DotHandlingPolicy.replace(parse_glyph(self.dot_replace_char))
        if self.dot_policy is DotAction.REMOVE:
            return DotHandlingPolicy.remove()
        if self.dot_policy is DotAction.NOT_CORRECT:
            return DotHandlingPolicy.not_correct()
        return DotHandlingPolicy.replace_with_method()

    def apply_overrides(
        self,
        *,
        method: Optional[MethodKind] = None,
        replace_char: Optional[str] = None,
        dot_policy: Optional[DotAction] = None,
        dot_replace_char: Optional[str] = None,
        strict: Optional[bool] = None,
    ) -> "SanitizerConfig":
        """Return a copy with every explicitly given option replacing the stored value."""

        updates = {
            "method": method,
            "replace_char": replace_char,
            "dot_policy": dot_policy,
            "dot_replace_char": dot_replace_char,
            "strict": strict,
        }
        data = self.model_dump()
        data.update({key: value for key, value in updates.items() if value is not None})
        try:
            return SanitizerConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid option: {exc}") from exc


ENV_PREFIX = "SAFE_FILENAME"
ENV_KEYS = ("METHOD", "REPLACE_CHAR", "DOT_POLICY", "DOT_REPLACE_CHAR", "STRICT")
DEFAULT_CONFIG_PATHS = (
    Path.cwd() / "safe-filename.toml",
    Path.home() / ".config" / "safe-filename" / "config.toml",
)


@dataclasses.dataclass
class ConfigSource:
    """Result of attempting to resolve configuration data."""

    config: Optional[SanitizerConfig]
    path: Optional[Path]
    error: Optional[Exception]


def _load_from_env() -> dict[str, object]:
    """Return a dictionary with configuration values extracted from environment variables."""

    env_data: dict[str, object] = {}
    for key in ENV_KEYS:
        value = os.getenv(f"{ENV_PREFIX}_{key}")
        if value:
            env_data[key.lower()] = value
    return env_data


def _load_toml(path: Path) -> Optional[dict]:
    if not path.exists():
        return None

    try:  # Python 3.11+
        import tomllib  # type: ignore
    except ModuleNotFoundError:  # pragma: no cover - Python <3.11 fallback
        import tomli as tomllib  # type: ignore

    with path.open("rb") as handle:
        data = tomllib.load(handle)
    # Settings may live at the top level or under a [sanitizer] table.
    return data.get("sanitizer", data)


def resolve_config(explicit_path: Optional[Path] = None) -> ConfigSource:
    """Discover configuration using the first available source.

    The priority order is:
    1. Explicit path provided via CLI argument.
    2. Default configuration files in the working directory or the user's config directory.
    3. Environment variables with the `SAFE_FILENAME_` prefix.
    """

    errors: list[Exception] = []
    sources: list[tuple[Optional[Path], Optional[dict]]] = []

    if explicit_path:
        try:
            data = _load_toml(explicit_path)
        except Exception as exc:
            errors.append(exc)
        else:
            if data is None:
                errors.append(FileNotFoundError(f"Configuration file {explicit_path} does not exist"))
            else:
                sources.append((explicit_path, data))

    if not sources and not errors:
        for path in DEFAULT_CONFIG_PATHS:
            try:
                data = _load_toml(path)
            except Exception as exc:  # pragma: no cover
                errors.append(exc)
                continue
            if data is not None:
                sources.append((path, data))
                break

    if not sources and not errors:
        env_data = _load_from_env()
        if env_data:
            sources.append((None, env_data))

    for path, data in sources:
        try:
            config = SanitizerConfig.model_validate(data)
            return ConfigSource(config=config, path=path, error=None)
        except ValidationError as exc:
            errors.append(exc)

    error = errors[0] if errors else None
    return ConfigSource(config=None, path=None, error=error)


def load_config(config_path: Optional[Path] = None) -> SanitizerConfig:
    """Resolve configuration from precedence order, falling back to built-in defaults."""

    source = resolve_config(config_path)
    if source.error is not None:
        raise ConfigError(f"Could not load configuration: {source.error}", source=config_path)
    if source.config is None:
        return SanitizerConfig()
    return source.config.model_copy(deep=True)
