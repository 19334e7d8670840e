"""Sanitize batches of names and report what changed."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from safe_filename.naming.checks import is_safe
from safe_filename.naming.sanitizer import sanitize
from safe_filename.rules.models import DotHandlingPolicy, ReplaceMethod
from safe_filename.rules.substitution import SubstitutionTable

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NameOutcome:
    """A single name before and after sanitizing."""

    original: str
    sanitized: str
    was_safe: bool

    @property
    def changed(self) -> bool:
        return self.original != self.sanitized


@dataclass(slots=True)
class BatchResult:
    """Report produced after sanitizing a batch of names."""

    processed: int = 0
    changed: int = 0
    outcomes: list[NameOutcome] = field(default_factory=list)

    @property
    def unchanged(self) -> int:
        return self.processed - self.changed


class SanitizeService:
    """Apply one compiled policy to many names."""

    def __init__(
        self,
        method: ReplaceMethod,
        dot_policy: DotHandlingPolicy,
        *,
        strict: bool = True,
    ) -> None:
        self.table: SubstitutionTable = method.compile()
        self.dot_policy = dot_policy
        self.strict = strict

    def sanitize(self, name: str) -> NameOutcome:
        sanitized = sanitize(name, self.table, self.dot_policy)
        return NameOutcome(
            original=name,
            sanitized=sanitized,
            was_safe=is_safe(name, only_check_creatable=False, strict=self.strict),
        )

    def sanitize_many(self, names: Iterable[str]) -> BatchResult:
        """Sanitize every name in ``names``, preserving order."""

        result = BatchResult()
        for name in names:
            outcome = self.sanitize(name)
            result.processed += 1
            if outcome.changed:
                result.changed += 1
            result.outcomes.append(outcome)
        logger.debug("Sanitized %d names, %d changed", result.processed, result.changed)
        return result
