"""Turns settings and the file being linted into a pylint invocation."""

import os
from dataclasses import dataclass, field
from typing import Mapping

from linter_pylint.config import (
    FILE_DIR_PLACEHOLDER,
    MESSAGE_FORMAT_PLACEHOLDERS,
    PINNED_LOCALE,
    PROJECT_DIR_PLACEHOLDER,
    PYTHONPATH_ENV_VAR,
)
from linter_pylint.settings import Settings


@dataclass(frozen=True)
class LintCommand:
    executable: str
    args: tuple[str, ...]
    cwd: str
    env: Mapping[str, str] = field(default_factory=dict)

    def with_target(self, path: str) -> 'LintCommand':
        """Copy of this command that lints `path`."""
        return LintCommand(self.executable, (*self.args, path), self.cwd, self.env)


def substitute_placeholders(template: str, file_dir: str, project_dir: str) -> str:
    return template.replace(FILE_DIR_PLACEHOLDER, file_dir).replace(
        PROJECT_DIR_PLACEHOLDER, project_dir
    )


def build_message_format(message_format: str) -> str:
    """Translate `%m`, `%i` and `%s` into pylint's `{msg}` style fields."""
    for placeholder, field_name in MESSAGE_FORMAT_PLACEHOLDERS.items():
        message_format = message_format.replace(placeholder, f'{{{field_name}}}')
    return message_format


def build_args(settings: Settings, file_dir: str, project_dir: str) -> list[str]:
    message_format = build_message_format(settings.message_format)
    args = [
        f"--msg-template='{{line}},{{column}},{{category}},{{msg_id}}:{message_format}'",
        '--reports=n',
        '--output-format=text',
    ]
    if settings.rc_file:
        rc_file = substitute_placeholders(settings.rc_file, file_dir, project_dir)
        args.append(f'--rcfile={rc_file}')
    return args


def build_environment(
    base: Mapping[str, str], file_dir: str, project_dir: str, python_path: str = ''
) -> dict[str, str]:
    """Return a new environment for pylint, leaving `base` untouched.

    PYTHONPATH is the base value followed by the file directory, the project
    directory and the substituted `python_path` setting, skipping empty parts.
    """
    env = dict(base)
    env[PYTHONPATH_ENV_VAR] = os.pathsep.join(
        part
        for part in (
            base.get(PYTHONPATH_ENV_VAR),
            file_dir,
            project_dir,
            substitute_placeholders(python_path, file_dir, project_dir),
        )
        if part
    )
    env['LANG'] = PINNED_LOCALE
    return env


def build_command(
    file_path: str,
    project_dir: str,
    settings: Settings,
    base_env: Mapping[str, str],
) -> LintCommand:
    file_dir = os.path.dirname(file_path)
    return LintCommand(
        executable=settings.executable.replace(PROJECT_DIR_PLACEHOLDER, project_dir),
        args=tuple(build_args(settings, file_dir, project_dir)),
        cwd=substitute_placeholders(settings.working_directory, file_dir, project_dir),
        env=build_environment(base_env, file_dir, project_dir, settings.python_path),
    )
