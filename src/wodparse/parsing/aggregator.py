"""Per-parse issue collector with de-duplication and an error ceiling."""

from collections import Counter
from typing import Iterable

from pydantic import BaseModel, Field

from .errors import ParsingErrorCode, ParsingIssue, ParsingSeverity

CONTEXT_KEY_LENGTH = 50


class IssueSummary(BaseModel):
    """Counts of collected issues."""

    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    errors_by_code: dict[ParsingErrorCode, int] = Field(default_factory=dict)
    warnings_by_code: dict[ParsingErrorCode, int] = Field(default_factory=dict)
    error_limit_reached: bool = False

    @property
    def total(self) -> int:
        return self.error_count + self.warning_count + self.info_count

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0


class IssueAggregator:
    """Collects issues for one parse call.

    A second issue with the same code on the same line (or, for issues without
    a line, the same leading context) is dropped. Once ``max_errors`` errors are
    held, further errors are dropped while warnings and info keep flowing.
    """

    def __init__(self, max_errors: int = 20) -> None:
        self.max_errors = max_errors
        self._issues: list[ParsingIssue] = []
        self._seen: set[tuple] = set()
        self._error_count = 0
        self._limit_reached = False

    @staticmethod
    def _key(issue: ParsingIssue) -> tuple:
        if issue.line_number is not None:
            return (issue.code, "line", issue.line_number)
        return (issue.code, "context", (issue.context or "")[:CONTEXT_KEY_LENGTH])

    def add(self, issue: ParsingIssue | None) -> bool:
        """Add an issue. Returns False if it was a duplicate or over the limit."""
        if issue is None:
            return False
        key = self._key(issue)
        if key in self._seen:
            return False
        self._seen.add(key)

        if issue.severity == ParsingSeverity.ERROR:
            if self._error_count >= self.max_errors:
                self._limit_reached = True
                return False
            self._error_count += 1

        self._issues.append(issue)
        return True

    def add_all(self, issues: Iterable[ParsingIssue | None]) -> int:
        """Add several issues, returning how many were accepted."""
        return sum(1 for issue in issues if self.add(issue))

    def _by_severity(self, severity: ParsingSeverity) -> list[ParsingIssue]:
        return [i for i in self._issues if i.severity == severity]

    @property
    def errors(self) -> list[ParsingIssue]:
        return self._by_severity(ParsingSeverity.ERROR)

    @property
    def warnings(self) -> list[ParsingIssue]:
        return self._by_severity(ParsingSeverity.WARNING)

    @property
    def info(self) -> list[ParsingIssue]:
        return self._by_severity(ParsingSeverity.INFO)

    @property
    def error_count(self) -> int:
        return self._error_count

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def has_errors(self) -> bool:
        return self._error_count > 0

    @property
    def error_limit_reached(self) -> bool:
        return self._limit_reached

    def sorted_issues(self) -> list[ParsingIssue]:
        """All issues, errors first; insertion order kept within a severity."""
        return sorted(self._issues, key=lambda i: i.severity.rank)

    def summary(self) -> IssueSummary:
        errors = self.errors
        warnings = self.warnings
        return IssueSummary(
            error_count=len(errors),
            warning_count=len(warnings),
            info_count=len(self.info),
            errors_by_code=dict(Counter(i.code for i in errors)),
            warnings_by_code=dict(Counter(i.code for i in warnings)),
            error_limit_reached=self._limit_reached,
        )

    def clear(self) -> None:
        self._issues.clear()
        self._seen.clear()
        self._error_count = 0
        self._limit_reached = False

    def __len__(self) -> int:
        return len(self._issues)
