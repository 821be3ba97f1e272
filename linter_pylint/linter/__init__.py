"""Running pylint and turning its output into diagnostics."""

from .base import Diagnostic, RawIssue
from .command import LintCommand, build_command
from .errors import filter_whitelisted_errors
from .extractor import extract_diagnostics
from .parse import LINE_PATTERN, parse
from .provider import PylintLinter

__all__ = [
    'Diagnostic',
    'LINE_PATTERN',
    'LintCommand',
    'PylintLinter',
    'RawIssue',
    'build_command',
    'extract_diagnostics',
    'filter_whitelisted_errors',
    'parse',
]
