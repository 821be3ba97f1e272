from dataclasses import dataclass, replace

from linter_pylint.editor.ranges import Range


@dataclass(frozen=True)
class RawIssue:
    """An issue exactly as parsed from one line of analyzer output."""

    line: int | None
    column: int | None
    type: str
    message: str
    range: Range
    rule_id: str | None = None
    file_path: str | None = None

    def with_range(self, range: Range) -> 'RawIssue':
        return replace(self, range=range)


@dataclass(frozen=True)
class Diagnostic:
    """A single issue, anchored to the live buffer and ready for display."""

    severity: str
    message: str
    file_path: str | None
    range: Range
    rule_id: str | None = None

    @classmethod
    def from_issue(cls, issue: RawIssue) -> 'Diagnostic':
        return cls(
            severity=issue.type,
            message=issue.message,
            file_path=issue.file_path,
            range=issue.range,
            rule_id=issue.rule_id,
        )

    def to_dict(self) -> dict:
        return {
            'severity': self.severity,
            'message': self.message,
            'file_path': self.file_path,
            'range': self.range.to_list(),
            'rule_id': self.rule_id,
        }

    def __str__(self) -> str:
        # 1-based, as editors and terminals display positions
        start = self.range.start
        return (
            f'{self.file_path}:{start.line + 1}:{start.column + 1}: '
            f'{self.severity}: {self.message}'
        )
