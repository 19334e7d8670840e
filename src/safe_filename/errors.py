"""Exceptions raised by the safe-filename engine and its configuration layer."""


class SafeFilenameError(Exception):
    """Base exception for safe-filename errors."""


class PolicyConfigurationError(SafeFilenameError, ValueError):
    """A replacement or trailing-dot policy cannot be applied as configured."""


class SpaceDotReplacementError(PolicyConfigurationError):
    """A trailing dot was asked to be replaced by a space."""

    def __init__(self) -> None:
        super().__init__("Cannot replace to space. Use DotHandlingPolicy.remove() instead.")


class InvalidReplaceCharError(PolicyConfigurationError):
    """A replacement glyph is not exactly one character."""

    def __init__(self, value: object):
        super().__init__(f"Replacement glyph must be a single character, got {value!r}")
        self.value = value


class ConfigError(SafeFilenameError):
    """Configuration could not be loaded or validated."""

    def __init__(self, message: str, source: object | None = None):
        super().__init__(message)
        self.source = source
