"""Parsing of line-oriented analyzer output into raw issues."""

import re

from linter_pylint.editor.ranges import Position, Range

from .base import RawIssue

# One issue per output line: <line>,<col>,<type>,<rule id>:<message>
# The message template is passed to pylint wrapped in single quotes, which it
# echoes back around each line.
LINE_PATTERN = (
    r"(?P<quote>')?"
    r'(?P<line>\d+),(?P<col>\d+),(?P<type>\w+),(?P<rule_id>\w\d+):'
    r"(?P<message>.*?)(?(quote)')\r?$"
)

REQUIRED_GROUPS = ('type', 'message')


def compile_line_pattern(pattern: str | re.Pattern) -> re.Pattern:
    """Compile `pattern` and check it captures the groups every issue needs."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    missing = [group for group in REQUIRED_GROUPS if group not in regex.groupindex]
    if missing:
        raise ValueError(
            f'Line pattern is missing the named group(s): {", ".join(missing)}'
        )
    return regex


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _reduce(value: int | None, base: int) -> int | None:
    if value is None:
        return None
    return max(value - base, 0)


def parse(
    data: str,
    pattern: str | re.Pattern = LINE_PATTERN,
    file_path: str | None = None,
    base_line: int = 1,
    base_column: int = 1,
) -> list[RawIssue]:
    """Apply `pattern` to every line of `data`.

    Args:
        data: Captured output of the analyzer.
        pattern: Regex with named groups `type` and `message`, and usually
            `line` and `col`. Optional groups `line_end`, `col_end`, `rule_id`
            and `file` are used when present.
        file_path: Path attached to issues whose line has no `file` group.
        base_line: Number the tool gives the first line. Subtracted from lines.
        base_column: Subtracted from columns.

    Returns:
        One RawIssue per matching line, in output order. The range start line
        is None when the line number is missing or not a number.
    """
    regex = compile_line_pattern(pattern)
    issues = []
    for output_line in data.split('\n'):
        match = regex.search(output_line)
        if match is None:
            continue
        groups = match.groupdict()

        line = _to_int(groups.get('line'))
        column = _to_int(groups.get('col'))
        start_line = _reduce(line, base_line)
        start_column = _reduce(column, base_column) or 0

        end_line = _reduce(_to_int(groups.get('line_end')), base_line)
        end_column = _reduce(_to_int(groups.get('col_end')), base_column)

        issues.append(
            RawIssue(
                line=line,
                column=column,
                type=groups['type'],
                message=groups['message'],
                rule_id=groups.get('rule_id'),
                file_path=groups.get('file') or file_path,
                range=Range(
                    Position(start_line, start_column),
                    Position(
                        start_line if end_line is None else end_line,
                        start_column if end_column is None else end_column,
                    ),
                ),
            )
        )
    return issues
