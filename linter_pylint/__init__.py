"""Pylint diagnostics for editor buffers.

Runs the external pylint analyzer on the in-memory text of an editor and
turns its output into diagnostics anchored to the live buffer.
"""

from .editor import Project, TextEditor
from .exceptions import (
    ProcessLaunchError,
    SettingsError,
    ToolError,
    ToolInvocationError,
    UnknownSettingError,
)
from .linter import Diagnostic, PylintLinter
from .package import LinterPylintPackage
from .settings import Settings, SettingsStore

_GLOBAL_PACKAGE = LinterPylintPackage()

__all__ = [
    'Diagnostic',
    'LinterPylintPackage',
    'ProcessLaunchError',
    'Project',
    'PylintLinter',
    'Settings',
    'SettingsError',
    'SettingsStore',
    'TextEditor',
    'ToolError',
    'ToolInvocationError',
    'UnknownSettingError',
    'activate',
    'deactivate',
    'provide_linter',
]


def activate() -> None:
    _GLOBAL_PACKAGE.activate()


def deactivate() -> None:
    _GLOBAL_PACKAGE.deactivate()


def provide_linter() -> PylintLinter:
    return _GLOBAL_PACKAGE.provide_linter()
