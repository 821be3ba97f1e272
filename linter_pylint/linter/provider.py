import asyncio
import os
from typing import Mapping

from linter_pylint.config import LINTER_NAME, PYTHON_GRAMMAR_SCOPE
from linter_pylint.editor.buffer import TextEditor
from linter_pylint.editor.project import Project, get_project_dir
from linter_pylint.exceptions import ToolInvocationError
from linter_pylint.settings import SettingsStore
from linter_pylint.utils.logger import linter_pylint_logger as logger
from linter_pylint.utils.shell import exec_cmd, with_temp_file

from .base import Diagnostic
from .command import LintCommand, build_command
from .errors import filter_whitelisted_errors
from .extractor import extract_diagnostics


class PylintLinter:
    """Lints Python editors with pylint, one file per invocation.

    Every call to `lint` works from its own settings snapshot and temporary
    file, so calls for different editors may run concurrently.
    """

    name = LINTER_NAME
    grammar_scopes = [PYTHON_GRAMMAR_SCOPE]
    scope = 'file'
    lint_on_fly = True

    def __init__(
        self,
        settings_store: SettingsStore,
        project: Project | None = None,
        base_env: Mapping[str, str] | None = None,
    ):
        """Initialize the linter.

        Args:
            settings_store: Where the user settings are read from at lint time.
            project: Open project roots used to resolve `%p`. If None, `%p` is the file's directory.
            base_env: Environment pylint runs with. If None, uses this process' environment.
        """
        self._settings_store = settings_store
        self._project = project
        self._base_env = base_env

    def build_command(self, editor: TextEditor) -> LintCommand:
        file_path = editor.get_path()
        base_env = os.environ if self._base_env is None else self._base_env
        return build_command(
            file_path,
            get_project_dir(self._project, file_path),
            self._settings_store.snapshot(),
            base_env,
        )

    def lint(self, editor: TextEditor) -> list[Diagnostic]:
        """Run pylint on the editor's current text and return its diagnostics.

        Raises:
            ProcessLaunchError: If pylint could not be started.
            ToolInvocationError: If pylint wrote anything but known-benign lines to stderr.
        """
        file_path = editor.get_path()
        command = self.build_command(editor)

        def run(temp_path: str) -> list[Diagnostic]:
            invocation = command.with_target(temp_path)
            result = exec_cmd(
                invocation.executable,
                invocation.args,
                env=invocation.env,
                cwd=invocation.cwd,
            )
            errors = filter_whitelisted_errors(result.stderr)
            if errors:
                raise ToolInvocationError(errors)
            return extract_diagnostics(result.stdout, editor, file_path=file_path)

        diagnostics = with_temp_file(
            os.path.basename(file_path), editor.get_text(), run
        )
        logger.debug(f'{len(diagnostics)} diagnostics for {file_path}')
        return diagnostics

    async def lint_async(self, editor: TextEditor) -> list[Diagnostic]:
        return await asyncio.to_thread(self.lint, editor)
