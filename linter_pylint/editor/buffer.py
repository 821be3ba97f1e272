import os
import re
from typing import NamedTuple

from tree_sitter import Tree

from linter_pylint.config import PYTHON_FILE_EXTENSIONS, PYTHON_GRAMMAR_SCOPE

from .syntax import parse_lines

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


class BufferState(NamedTuple):
    text: str
    lines: tuple[str, ...]
    version: int


class TextBuffer:
    """In-memory text of an open file, addressed by zero-based rows.

    Text, lines and version live in one immutable BufferState that is swapped
    as a whole, so readers on other threads never see a mix of two edits.
    """

    def __init__(self, text: str = ''):
        self._state = BufferState(text, tuple(_LINE_BREAK.split(text)), 0)

    def set_text(self, text: str) -> None:
        self._state = BufferState(
            text, tuple(_LINE_BREAK.split(text)), self._state.version + 1
        )

    def get_state(self) -> BufferState:
        return self._state

    @property
    def version(self) -> int:
        return self._state.version

    def get_text(self) -> str:
        return self._state.text

    def get_lines(self) -> list[str]:
        return list(self._state.lines)

    def get_line_count(self) -> int:
        return len(self._state.lines)

    def line_for_row(self, row: int) -> str:
        """Return the text of `row`; raise IndexError if it does not exist."""
        lines = self._state.lines
        if row is None or row < 0 or row >= len(lines):
            raise IndexError(f'Row {row} is outside of the buffer (0-{len(lines) - 1}).')
        return lines[row]

    def line_length_for_row(self, row: int) -> int:
        return len(self.line_for_row(row))


class TextEditor:
    """An open file: its path plus the live, possibly unsaved, buffer."""

    def __init__(self, path: str, text: str | None = None):
        self._path = os.path.abspath(path)
        if text is None:
            with open(self._path, 'r', encoding='utf-8') as f:
                text = f.read()
        self._buffer = TextBuffer(text)
        self._syntax_tree: tuple[int, Tree] | None = None

    def get_path(self) -> str:
        return self._path

    def get_text(self) -> str:
        return self._buffer.get_text()

    def set_text(self, text: str) -> None:
        self._buffer.set_text(text)

    def get_buffer(self) -> TextBuffer:
        return self._buffer

    def get_grammar_scope(self) -> str | None:
        if self._path.endswith(PYTHON_FILE_EXTENSIONS):
            return PYTHON_GRAMMAR_SCOPE
        return None

    def get_syntax_tree(self) -> Tree:
        """Syntax tree of the current buffer text, reparsed after each change."""
        state = self._buffer.get_state()
        if self._syntax_tree is None or self._syntax_tree[0] != state.version:
            tree = parse_lines(
                list(state.lines),
                self.get_grammar_scope() or PYTHON_GRAMMAR_SCOPE,
            )
            self._syntax_tree = (state.version, tree)
        return self._syntax_tree[1]
