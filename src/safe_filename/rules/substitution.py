"""Compile a ``ReplaceMethod`` into a lookup table of character substitutions."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from safe_filename.rules.models import MethodKind, ReplaceMethod
from safe_filename.rules.tables import CONTROL_CHARS, FULLWIDTH_TABLE, PUNCTUATION_CHARS


def construct_table(method: ReplaceMethod) -> dict[str, str]:
    """Map every disallowed character to its replacement under ``method``.

    Characters mapped to ``"\\0"`` are dropped by the sanitizer.
    """

    if method.kind is MethodKind.REMOVE:
        return construct_table(ReplaceMethod.replace("\0"))

    char = method.char
    table = {control: char for control in CONTROL_CHARS}
    if method.kind is MethodKind.FULLWIDTH:
        table.update(FULLWIDTH_TABLE)
    else:
        table.update((original, char) for original in PUNCTUATION_CHARS)
    return table


@dataclass(frozen=True, slots=True)
class SubstitutionTable:
    """A ``ReplaceMethod`` together with its compiled character table.

    Build one with ``ReplaceMethod.compile()`` and reuse it across names.
    """

    method: ReplaceMethod
    table: Mapping[str, str]

    @classmethod
    def from_method(cls, method: ReplaceMethod) -> "SubstitutionTable":
        return cls(method=method, table=MappingProxyType(construct_table(method)))

    def __contains__(self, char: object) -> bool:
        return char in self.table

    def get(self, char: str) -> Optional[str]:
        return self.table.get(char)

    def translate(self, name: str) -> list[str]:
        """Return the characters of ``name`` with substitutions applied and removals dropped."""

        replaced = (self.table.get(char, char) for char in name)
        return [char for char in replaced if char != "\0"]
