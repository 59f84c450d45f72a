"""Diagnostic model: structured findings about a fragment sequence."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a selector.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        position: Index of the offending fragment, if applicable.
        operand: Index of the selector inside a combination, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    position: int | None = None
    operand: int | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.operand is not None and self.position is not None:
            location = f" [selector={self.operand} fragment={self.position}]"
        elif self.position is not None:
            location = f" [fragment={self.position}]"
        elif self.operand is not None:
            location = f" [selector={self.operand}]"
        return f"{self.severity.value}{location}: {self.message}"
