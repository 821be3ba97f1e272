from dataclasses import dataclass

from .buffer import TextEditor
from .syntax import token_end_column


@dataclass(frozen=True)
class Position:
    """Zero-based (line, column) coordinate. `line` is None when unknown."""

    line: int | None
    column: int

    def to_list(self) -> list:
        return [self.line, self.column]


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    @classmethod
    def from_points(cls, start: tuple, end: tuple) -> 'Range':
        return cls(Position(*start), Position(*end))

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def to_list(self) -> list:
        return [self.start.to_list(), self.end.to_list()]


def range_from_line_number(
    editor: TextEditor, line: int, column: int | None = None
) -> Range:
    """Expand a single point of the buffer into the range of the token there.

    Without a column, the range covers the line from its first non-whitespace
    character to its end. With a column, the range starts at the column and
    ends where the syntax token at that column ends, or at the end of the line
    if that token spans several lines.

    Raises:
        ValueError: If the line does not exist or the column is past its end.
    """
    buffer = editor.get_buffer()
    try:
        line_text = buffer.line_for_row(line)
    except IndexError as e:
        raise ValueError(str(e)) from None
    line_length = len(line_text)

    if column is None:
        indentation = line_length - len(line_text.lstrip())
        return Range(Position(line, indentation), Position(line, line_length))

    if column < 0 or column > line_length:
        raise ValueError(
            f'Column {column} is outside of line {line} (length {line_length}).'
        )

    end_column = None
    if column < line_length:
        end_column = token_end_column(editor.get_syntax_tree(), line_text, line, column)
    return Range(Position(line, column), Position(line, end_column or line_length))
