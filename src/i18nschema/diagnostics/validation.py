"""Non-fatal key warnings collected while merging locales.

A merge pass never stops at the first discrepancy: every missing key,
surplus key and undeclared interpolation key is recorded, and the pass
carries on. Fatal shape errors are exceptions instead (see errors.py).

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from i18nschema.enums import WarningKind

from .codes import Diagnostic
from .templates import ErrorTemplate

if TYPE_CHECKING:
    from collections.abc import Iterator

    from i18nschema.syntax.ast import InterpolateKey
    from i18nschema.syntax.keys import Key, KeyPath

__all__ = [
    "KeyWarning",
    "WarningCollector",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeyWarning:
    """One discrepancy between a locale and the schema.

    Attributes:
        kind: What kind of discrepancy this is
        locale: Top-level locale the warning is attributed to
        key_path: Snapshot of the key path at emission time
        interpolation_key: Offending interpolation key
            (UNDECLARED_INTERPOLATION_KEY only)
    """

    kind: WarningKind
    locale: Key
    key_path: KeyPath
    interpolation_key: InterpolateKey | None = None

    def to_diagnostic(self) -> Diagnostic:
        """Build the structured diagnostic for this warning."""
        locale = self.locale.name
        key_path = str(self.key_path)
        match self.kind:
            case WarningKind.MISSING_KEY:
                return ErrorTemplate.missing_key(locale, key_path)
            case WarningKind.SURPLUS_KEY:
                return ErrorTemplate.surplus_key(locale, key_path)
            case WarningKind.UNDECLARED_INTERPOLATION_KEY:
                return ErrorTemplate.undeclared_interpolation_key(
                    locale, key_path, str(self.interpolation_key)
                )

    def __str__(self) -> str:
        return self.to_diagnostic().message


@dataclass(slots=True)
class WarningCollector:
    """Append-only sink for key warnings, owned by the caller of a merge pass.

    Every emitted warning is kept in order and, unless ``suppress_logging``
    is set, also logged at WARNING level.

    Attributes:
        suppress_logging: Collect silently (the warnings are still returned)
    """

    suppress_logging: bool = False
    _warnings: list[KeyWarning] = field(default_factory=list, init=False, repr=False)

    def emit(self, warning: KeyWarning) -> None:
        """Record a warning.

        Args:
            warning: Warning to record
        """
        self._warnings.append(warning)
        if not self.suppress_logging:
            logger.warning("%s", warning)

    def __len__(self) -> int:
        return len(self._warnings)

    def __iter__(self) -> Iterator[KeyWarning]:
        return iter(self._warnings)

    @property
    def warnings(self) -> tuple[KeyWarning, ...]:
        """All warnings emitted so far, in emission order."""
        return tuple(self._warnings)

    def of_kind(self, kind: WarningKind) -> tuple[KeyWarning, ...]:
        """Warnings of one kind, in emission order."""
        return tuple(w for w in self._warnings if w.kind == kind)
