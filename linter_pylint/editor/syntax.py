"""Syntax trees for editor text, built with tree-sitter."""

import importlib

from tree_sitter import Language, Node, Parser, Tree

from linter_pylint.config import PYTHON_GRAMMAR_SCOPE

GRAMMAR_LANGUAGES = {
    PYTHON_GRAMMAR_SCOPE: 'python',
}

# Cache of loaded languages
_language_cache: dict[str, Language] = {}


def get_parser(grammar_scope: str) -> Parser:
    """Get a Parser object for the given grammar scope."""
    language = GRAMMAR_LANGUAGES.get(grammar_scope)
    if language is None:
        raise ValueError(f'Grammar scope {grammar_scope} is not supported.')

    if language not in _language_cache:
        module_name = f'tree_sitter_{language}'
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            raise ValueError(
                f'Language {language} is not supported. Please install {module_name} package.'
            )
        _language_cache[language] = Language(module.language())

    return Parser(_language_cache[language])


def parse_lines(lines: list[str], grammar_scope: str) -> Tree:
    # Rows of the tree match buffer rows only if lines are joined with '\n'
    source = '\n'.join(lines).encode('utf-8')
    return get_parser(grammar_scope).parse(source)


def _byte_column(line_text: str, column: int) -> int:
    return len(line_text[:column].encode('utf-8'))


def _char_column(line_text: str, byte_column: int) -> int:
    return len(line_text.encode('utf-8')[:byte_column].decode('utf-8', errors='ignore'))


def token_at(tree: Tree, row: int, start_byte: int, end_byte: int) -> Node:
    """Smallest node of `tree` spanning the given columns of `row`."""
    return tree.root_node.descendant_for_point_range((row, start_byte), (row, end_byte))


def token_end_column(tree: Tree, line_text: str, row: int, column: int) -> int | None:
    """Character column where the token at (row, column) ends.

    Returns None when the token does not lie on `row` or does not extend
    past `column`.
    """
    # Span the character at `column` so a token starting there wins over one ending there
    end = min(column + 1, len(line_text))
    node = token_at(tree, row, _byte_column(line_text, column), _byte_column(line_text, end))
    if node is None:
        return None
    start_row, _ = node.start_point
    end_row, end_byte_column = node.end_point
    if start_row != row or end_row != row:
        return None
    end_column = _char_column(line_text, end_byte_column)
    if end_column <= column:
        return None
    return end_column
