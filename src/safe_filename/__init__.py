"""Turn arbitrary strings into file names that Windows, macOS and Linux accept."""

from safe_filename.errors import (
    ConfigError,
    InvalidReplaceCharError,
    PolicyConfigurationError,
    SafeFilenameError,
    SpaceDotReplacementError,
)
from safe_filename.naming.checks import is_reserved, is_safe
from safe_filename.naming.sanitizer import sanitize, simple_sanitize
from safe_filename.rules.models import (
    DotAction,
    DotHandlingPolicy,
    MethodKind,
    ReplaceChar,
    ReplaceMethod,
    parse_glyph,
    resolve_char,
)
from safe_filename.rules.substitution import SubstitutionTable, construct_table
from safe_filename.rules.tables import (
    FULLWIDTH_DOT,
    FULLWIDTH_TABLE,
    NOT_ALLOWED_CHARS,
    NOT_ALLOWED_CHARS_ORDERED,
    NOT_ALLOWED_NAMES,
    NOT_ALLOWED_NAMES_WIN11,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DotAction",
    "DotHandlingPolicy",
    "FULLWIDTH_DOT",
    "FULLWIDTH_TABLE",
    "InvalidReplaceCharError",
    "MethodKind",
    "NOT_ALLOWED_CHARS",
    "NOT_ALLOWED_CHARS_ORDERED",
    "NOT_ALLOWED_NAMES",
    "NOT_ALLOWED_NAMES_WIN11",
    "PolicyConfigurationError",
    "ReplaceChar",
    "ReplaceMethod",
    "SafeFilenameError",
    "SpaceDotReplacementError",
    "SubstitutionTable",
    "construct_table",
    "is_reserved",
    "is_safe",
    "parse_glyph",
    "resolve_char",
    "sanitize",
    "simple_sanitize",
]
