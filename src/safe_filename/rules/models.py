"""Value types describing how unsafe characters and trailing dots are rewritten."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from safe_filename.errors import InvalidReplaceCharError
from safe_filename.rules.tables import FULLWIDTH_DOT, REMOVE_SENTINEL

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from safe_filename.rules.substitution import SubstitutionTable


class ReplaceChar(str, Enum):
    """Commonly used replacement glyphs.

    Any other single character may be used wherever a ``ReplaceChar`` is
    accepted.
    """

    SPACE = " "
    DOUBLE_QUESTION_MARK = "⁇"
    WHITE_QUESTION_MARK = "❔"
    RED_QUESTION_MARK = "❓"
    UNDERSCORE = "_"


Glyph = Union[ReplaceChar, str]


def resolve_char(glyph: Glyph) -> str:
    """Return the single character a glyph stands for."""

    if isinstance(glyph, ReplaceChar):
        return glyph.value
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise InvalidReplaceCharError(glyph)
    return glyph


def parse_glyph(value: str) -> Glyph:
    """Interpret ``value`` as a preset name (``"underscore"``) or a literal character."""

    key = value.strip().upper().replace("-", "_") if len(value) > 1 else ""
    if key in ReplaceChar.__members__:
        return ReplaceChar[key]
    return resolve_char(value)


class MethodKind(str, Enum):
    FULLWIDTH = "fullwidth"
    REPLACE = "replace"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True)
class ReplaceMethod:
    """How characters that are not allowed in a name get rewritten.

    ``fullwidth`` swaps the reserved punctuation for look-alike fullwidth
    glyphs (``?`` becomes ``？``) and control characters for ``replace_char``.
    ``replace`` maps every disallowed character to ``replace_char``.
    ``remove`` deletes them.
    """

    kind: MethodKind
    replace_char: Optional[Glyph] = None

    @classmethod
    def fullwidth(cls, replace_char: Glyph = ReplaceChar.UNDERSCORE) -> "ReplaceMethod":
        return cls(MethodKind.FULLWIDTH, replace_char)

    @classmethod
    def replace(cls, replace_char: Glyph = ReplaceChar.UNDERSCORE) -> "ReplaceMethod":
        return cls(MethodKind.REPLACE, replace_char)

    @classmethod
    def remove(cls) -> "ReplaceMethod":
        return cls(MethodKind.REMOVE)

    @property
    def char(self) -> str:
        """Character every control character maps to."""

        if self.kind is MethodKind.REMOVE:
            return REMOVE_SENTINEL
        return resolve_char(self.replace_char)

    @property
    def is_space(self) -> bool:
        return self.kind is not MethodKind.REMOVE and self.char == " "

    def dot_char(self) -> Optional[str]:
        """Glyph used for a trailing dot, or ``None`` when dots should be removed."""

        if self.kind is MethodKind.FULLWIDTH:
            return FULLWIDTH_DOT
        if self.kind is MethodKind.REMOVE or self.is_space:
            return None
        return self.char

    def guard_char(self) -> str:
        """Glyph prepended to reserved names and used for otherwise empty names."""

        if self.kind is MethodKind.REMOVE:
            return ReplaceChar.UNDERSCORE.value
        char = self.char
        # A leading dot or space would itself be rewritten by Windows.
        if char in (".", " "):
            return ReplaceChar.UNDERSCORE.value
        return char

    def construct_table(self) -> dict[str, str]:
        from safe_filename.rules.substitution import construct_table

        return construct_table(self)

    def compile(self) -> "SubstitutionTable":
        from safe_filename.rules.substitution import SubstitutionTable

        return SubstitutionTable.from_method(self)


class DotAction(str, Enum):
    REMOVE = "remove"
    REPLACE = "replace"
    REPLACE_WITH_METHOD = "method"
    NOT_CORRECT = "keep"


@dataclass(frozen=True, slots=True)
class DotHandlingPolicy:
    """What happens to dots left at the end of a name.

    ``remove`` strips them, ``replace`` swaps the last one for a glyph,
    ``replace_with_method`` uses whatever glyph the active ``ReplaceMethod``
    would use, and ``not_correct`` leaves them alone.
    """

    action: DotAction
    replace_char: Optional[Glyph] = None

    @classmethod
    def remove(cls) -> "DotHandlingPolicy":
        return cls(DotAction.REMOVE)

    @classmethod
    def replace(cls, replace_char: Glyph) -> "DotHandlingPolicy":
        return cls(DotAction.REPLACE, replace_char)

    @classmethod
    def replace_with_method(cls) -> "DotHandlingPolicy":
        return cls(DotAction.REPLACE_WITH_METHOD)

    @classmethod
    def not_correct(cls) -> "DotHandlingPolicy":
        return cls(DotAction.NOT_CORRECT)
