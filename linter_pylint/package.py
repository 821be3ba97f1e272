from pathlib import Path
from typing import Optional

from linter_pylint.config import (
    DEFAULT_SETTINGS,
    PROJECT_DIR_PLACEHOLDER,
    SETTING_EXECUTABLE,
    default_settings_dir,
)
from linter_pylint.editor.project import Project
from linter_pylint.linter.provider import PylintLinter
from linter_pylint.settings import CompositeSubscription, SettingsStore
from linter_pylint.utils.logger import linter_pylint_logger as logger
from linter_pylint.utils.shell import check_tool_installed


class LinterPylintPackage:
    """Lifecycle of the linter inside a host: activate, provide, deactivate."""

    def __init__(
        self,
        settings_store: Optional[SettingsStore] = None,
        project: Optional[Project] = None,
        settings_dir: Optional[Path] = None,
    ):
        """Initialize the package.

        Args:
            settings_store: Store to read settings from. If None, one is opened on first use
            project: Open project roots, passed on to the linter.
            settings_dir: Directory of that store. If None, the directory shared with the CLI
        """
        self._settings_store = settings_store
        self._owns_settings_store = settings_store is None
        self._settings_dir = settings_dir
        self.project = project
        self._subscriptions: CompositeSubscription | None = None
        self._linter: PylintLinter | None = None

    @property
    def settings_store(self) -> SettingsStore:
        if self._settings_store is None:
            self._settings_store = SettingsStore(
                self._settings_dir or default_settings_dir()
            )
        return self._settings_store

    @property
    def active(self) -> bool:
        return self._subscriptions is not None

    def activate(self) -> None:
        if self.active:
            return
        self._subscriptions = CompositeSubscription()
        for key in DEFAULT_SETTINGS:
            self._subscriptions.add(
                self.settings_store.observe(key, self._on_setting_change(key))
            )

        executable = self.settings_store.get(SETTING_EXECUTABLE)
        if PROJECT_DIR_PLACEHOLDER not in executable and not check_tool_installed(executable):
            logger.warning(
                f'`{executable}` is not installed or not runnable. '
                f'Install pylint or set {SETTING_EXECUTABLE}.'
            )

    def _on_setting_change(self, key: str):
        def callback(value: str):
            logger.debug(f'{key} = {value!r}')

        return callback

    def deactivate(self) -> None:
        if self._subscriptions is not None:
            self._subscriptions.dispose()
            self._subscriptions = None
        if self._owns_settings_store and self._settings_store is not None:
            self._settings_store.close()
            self._settings_store = None
            self._linter = None

    def provide_linter(self) -> PylintLinter:
        if self._linter is None:
            self._linter = PylintLinter(self.settings_store, project=self.project)
        return self._linter
