"""Conversion of analyzer output into diagnostics anchored to the live buffer."""

import re
from typing import Iterable

from linter_pylint.config import INFO_CATEGORY
from linter_pylint.editor.buffer import TextEditor
from linter_pylint.editor.ranges import range_from_line_number
from linter_pylint.utils.logger import linter_pylint_logger as logger

from .base import Diagnostic, RawIssue
from .parse import LINE_PATTERN, parse


def is_reportable(issue: RawIssue, editor: TextEditor) -> bool:
    """Whether `issue` still points at existing text in the buffer."""
    start = issue.range.start
    # Never show an issue without a location
    if start.line is None:
        logger.debug(f'Dropping issue without a location: {issue.message}')
        return False
    # The buffer may have changed since linting started; the next lint picks
    # up whatever can no longer be annotated
    try:
        line_length = editor.get_buffer().line_length_for_row(start.line)
    except IndexError:
        logger.debug(f'Dropping issue on missing line {start.line}: {issue.message}')
        return False
    return start.column <= line_length


def remap_range(issue: RawIssue, editor: TextEditor) -> RawIssue:
    """Re-derive the range of single-line issues from the buffer content.

    Multi-line issues, and single-line issues whose positive end column lies
    before the start column, keep the range the tool reported.
    """
    start, end = issue.range.start, issue.range.end
    if start.line == end.line and (start.column <= end.column or end.column <= 0):
        return issue.with_range(
            range_from_line_number(editor, start.line, start.column)
        )
    return issue


def filter_issues(issues: Iterable[RawIssue], editor: TextEditor) -> list[RawIssue]:
    return [
        issue
        for issue in issues
        if issue.type != INFO_CATEGORY and is_reportable(issue, editor)
    ]


def extract_diagnostics(
    stdout: str,
    editor: TextEditor,
    file_path: str | None = None,
    pattern: str | re.Pattern = LINE_PATTERN,
) -> list[Diagnostic]:
    """Parse `stdout`, drop stale or informational issues and remap the rest.

    Diagnostics come back in the order their lines appear in `stdout`.
    """
    issues = parse(stdout, pattern, file_path=file_path)
    kept = filter_issues(issues, editor)
    if len(kept) != len(issues):
        logger.debug(f'Dropped {len(issues) - len(kept)} of {len(issues)} issues')
    diagnostics = []
    for issue in kept:
        try:
            issue = remap_range(issue, editor)
        except ValueError as e:
            # Buffer changed between filtering and remapping
            logger.debug(f'Dropping issue that no longer fits the buffer: {e}')
            continue
        diagnostics.append(Diagnostic.from_issue(issue))
    return diagnostics
