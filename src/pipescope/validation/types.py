"""PipeScope validation types.

This module defines the issue/result models shared by every validator
and the Validator protocol that the runner dispatches over.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from pipescope.enums import Severity

if TYPE_CHECKING:
    from collections.abc import Sequence


class ValidationIssue(BaseModel):
    """A single problem found in a configuration document.

    Issues are immutable once created. Two issues with the same message,
    line and column are considered duplicates by the runner.

    Attributes:
        message: Human-readable description of the problem.
        severity: ERROR blocks validity, WARNING is informational.
        line: 1-indexed start line in the original text.
        column: 1-indexed start column in the original text.
        end_line: 1-indexed end line, when the span is known.
        end_column: 1-indexed exclusive end column, when the span is known.
        path: Key path to the offending field (e.g. service/pipelines/traces).
    """

    model_config = ConfigDict(frozen=True)

    message: str
    severity: Severity = Severity.ERROR
    line: int = Field(default=1, ge=1)
    column: int = Field(default=1, ge=1)
    end_line: int | None = None
    end_column: int | None = None
    path: tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    @property
    def identity(self) -> tuple[str, int, int]:
        """Deduplication key."""
        return (self.message, self.line, self.column)


class ValidationResult(BaseModel):
    """Outcome of running a set of validators.

    Attributes:
        valid: True iff no issue has ERROR severity.
        errors: Deduplicated issues of every severity, in report order.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool = True
    errors: list[ValidationIssue] = Field(default_factory=list)

    @classmethod
    def from_issues(cls, issues: Sequence[ValidationIssue]) -> ValidationResult:
        """Build a result, deriving validity from issue severities."""
        return cls(
            valid=not any(issue.is_error for issue in issues),
            errors=list(issues),
        )

    def by_severity(self, severity: Severity) -> list[ValidationIssue]:
        return [issue for issue in self.errors if issue.severity == severity]

    @property
    def error_count(self) -> int:
        return len(self.by_severity(Severity.ERROR))

    @property
    def warning_count(self) -> int:
        return len(self.by_severity(Severity.WARNING))


@runtime_checkable
class Validator(Protocol):
    """Protocol for a single structural check.

    A validator receives the raw text (for positions) and the parsed
    document (for semantics) and returns zero or more issues. It must not
    mutate the document. Raising is tolerated by the runner but the
    validator's issues are then lost.
    """

    name: str
    """Unique validator name, used by the registry and in logs."""

    def validate(self, raw_text: str, document: Any) -> list[ValidationIssue]:
        """Check a document.

        Args:
            raw_text: The configuration exactly as the user wrote it.
            document: The parsed form of raw_text.

        Returns:
            Issues found, possibly empty.
        """
        ...


class BaseValidator(ABC):
    """Base class for built-in validators.

    Subclasses set `name` and implement `validate`. The `issue` helper
    resolves the source position of a key path.
    """

    name: ClassVar[str] = "base"

    @abstractmethod
    def validate(self, raw_text: str, document: Any) -> list[ValidationIssue]:
        """Check a document and return issues."""
        ...

    def issue(
        self,
        message: str,
        raw_text: str,
        path: Sequence[str],
        target: str | None = None,
        severity: Severity = Severity.ERROR,
    ) -> ValidationIssue:
        """Create an issue positioned at `path` (or at `target` below it)."""
        from pipescope.validation.position import create_validation_error

        return create_validation_error(message, raw_text, path, target, severity)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
