"""Rewrite arbitrary strings into names that every major filesystem accepts."""

from __future__ import annotations

import logging
from typing import Optional, Union

from safe_filename.errors import SpaceDotReplacementError
from safe_filename.naming.checks import is_reserved
from safe_filename.rules.models import DotAction, DotHandlingPolicy, ReplaceMethod, resolve_char
from safe_filename.rules.substitution import SubstitutionTable

logger = logging.getLogger(__name__)


def sanitize(
    name: str,
    replace_method: Union[SubstitutionTable, ReplaceMethod],
    dot_handling_policy: DotHandlingPolicy,
) -> str:
    """Return a version of ``name`` that is safe to create on Windows, macOS and Linux.

    ``replace_method`` is ideally a table compiled once with
    ``ReplaceMethod.compile()``; a bare ``ReplaceMethod`` is compiled on each
    call.

    Raises:
        SpaceDotReplacementError: ``dot_handling_policy`` asks to replace a
            trailing dot with a space.
    """

    if isinstance(replace_method, ReplaceMethod):
        replace_method = replace_method.compile()
    table = replace_method
    method = table.method

    if dot_handling_policy.action is DotAction.REPLACE:
        dot_char: Optional[str] = resolve_char(dot_handling_policy.replace_char)
        if dot_char == " ":
            raise SpaceDotReplacementError()
    elif dot_handling_policy.action is DotAction.REPLACE_WITH_METHOD:
        dot_char = method.dot_char()
    else:
        dot_char = None

    name_chars = table.translate(name)
    _strip_spaces(name_chars)

    if name_chars and name_chars[-1] == ".":
        action = dot_handling_policy.action
        if action is DotAction.REMOVE or (action is not DotAction.NOT_CORRECT and dot_char is None):
            _remove_trailing_dots(name_chars)
        elif action is not DotAction.NOT_CORRECT:
            _replace_trailing_dot(name_chars, dot_char, table)

    guard_char = method.guard_char()

    if is_reserved("".join(name_chars), strict=True):
        logger.debug("Name %r is reserved, prefixing %r", name, guard_char)
        name_chars.insert(0, guard_char)

    if not name_chars:
        logger.debug("Name %r is empty after sanitizing, using %r", name, guard_char)
        name_chars.append(guard_char)

    return "".join(name_chars)


def simple_sanitize(name: str, use_fullwidth: bool = True) -> str:
    """Sanitize ``name`` with the most broadly useful settings.

    With ``use_fullwidth`` disallowed punctuation becomes its fullwidth
    look-alike; otherwise every disallowed character becomes ``_``.
    """

    if use_fullwidth:
        method = ReplaceMethod.fullwidth()
    else:
        method = ReplaceMethod.replace()
    return sanitize(name, method.compile(), DotHandlingPolicy.replace_with_method())


def _strip_spaces(name_chars: list[str]) -> None:
    start = 0
    while start < len(name_chars) and name_chars[start] == " ":
        start += 1
    end = len(name_chars)
    while end > start and name_chars[end - 1] == " ":
        end -= 1
    name_chars[:] = name_chars[start:end]


def _remove_trailing_dots(name_chars: list[str]) -> None:
    # Spaces exposed by the removal ("a ." -> "a ") are trailing too.
    while name_chars and name_chars[-1] in (".", " "):
        name_chars.pop()


def _replace_trailing_dot(name_chars: list[str], char: str, table: SubstitutionTable) -> None:
    # Never insert a character the table itself would rewrite.
    if char in table or char == ".":
        logger.debug("Dot glyph %r is not allowed, removing trailing dots", char)
        _remove_trailing_dots(name_chars)
        return
    name_chars[-1] = char
