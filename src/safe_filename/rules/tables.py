"""Characters and device names that Windows, macOS and Linux refuse in a file name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Windows 11 no longer reserves COM0 and LPT0.
NOT_ALLOWED_NAMES_WIN11: tuple[str, ...] = (
    "CON", "PRN", "AUX", "NUL",
    "COM1", "COM¹", "COM2", "COM²", "COM3", "COM³", "COM4", "COM5", "COM6", "COM7", "COM8", "COM9",
    "LPT1", "LPT¹", "LPT2", "LPT²", "LPT3", "LPT³", "LPT4", "LPT5", "LPT6", "LPT7", "LPT8", "LPT9",
)
NOT_ALLOWED_NAMES: tuple[str, ...] = NOT_ALLOWED_NAMES_WIN11 + ("COM0", "LPT0")

CONTROL_CHARS: tuple[str, ...] = tuple(chr(code) for code in range(32))
PUNCTUATION_CHARS = '\\/:*?"<>|'
NOT_ALLOWED_CHARS_ORDERED: tuple[str, ...] = CONTROL_CHARS + tuple(PUNCTUATION_CHARS)
NOT_ALLOWED_CHARS: frozenset[str] = frozenset(NOT_ALLOWED_CHARS_ORDERED)

FULLWIDTH_TABLE: Mapping[str, str] = MappingProxyType(
    dict(zip(PUNCTUATION_CHARS, "⧵／：＊？＂＜＞∣"))
)
FULLWIDTH_DOT = "．"

# Null marks a character that the sanitizer drops instead of replacing.
REMOVE_SENTINEL = "\0"
