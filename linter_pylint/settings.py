"""User settings with disk-based storage and change observation."""

import os
import shutil
import tempfile
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from diskcache import Cache

from linter_pylint.config import (
    DEFAULT_SETTINGS,
    SETTING_EXECUTABLE,
    SETTING_MESSAGE_FORMAT,
    SETTING_PYTHON_PATH,
    SETTING_RC_FILE,
    SETTING_WORKING_DIRECTORY,
)
from linter_pylint.exceptions import SettingsError, UnknownSettingError
from linter_pylint.utils.logger import linter_pylint_logger as logger

Observer = Callable[[str], None]


@dataclass(frozen=True)
class Settings:
    """Immutable view of the settings a single lint invocation runs with."""

    executable: str = DEFAULT_SETTINGS[SETTING_EXECUTABLE]
    rc_file: str = DEFAULT_SETTINGS[SETTING_RC_FILE]
    message_format: str = DEFAULT_SETTINGS[SETTING_MESSAGE_FORMAT]
    python_path: str = DEFAULT_SETTINGS[SETTING_PYTHON_PATH]
    working_directory: str = DEFAULT_SETTINGS[SETTING_WORKING_DIRECTORY]


class Subscription:
    """Handle returned by `SettingsStore.observe`."""

    def __init__(self, dispose_callback: Callable[[], None]):
        self._dispose_callback = dispose_callback
        self.disposed = False

    def dispose(self):
        if not self.disposed:
            self.disposed = True
            self._dispose_callback()


class CompositeSubscription:
    """Disposes a group of subscriptions at once."""

    def __init__(self):
        self._subscriptions: list[Subscription] = []
        self.disposed = False

    def add(self, subscription: Subscription):
        if self.disposed:
            subscription.dispose()
        else:
            self._subscriptions.append(subscription)

    def dispose(self):
        self.disposed = True
        while self._subscriptions:
            self._subscriptions.pop().dispose()


def normalize_working_directory(value: str) -> str:
    # A working directory is a single path, never a path list
    return value.replace(os.pathsep, '')


class SettingsStore:
    """Holds the current setting values and notifies observers on change."""

    def __init__(self, settings_dir: Optional[Path] = None):
        """Initialize the store.

        Args:
            settings_dir: Directory the values are persisted in. If None, uses a temp directory
        """
        self._temp_dir = None
        if settings_dir is None:
            settings_dir = self._temp_dir = tempfile.mkdtemp(prefix='linter_pylint_settings_')
        self.settings_dir = Path(settings_dir)
        self.cache = Cache(str(self.settings_dir))
        self._observers: dict[str, list[Observer]] = {}
        self._lock = threading.Lock()

    def _validate_key(self, key: str):
        if key not in DEFAULT_SETTINGS:
            raise UnknownSettingError(key, DEFAULT_SETTINGS)

    def get(self, key: str) -> str:
        self._validate_key(key)
        value = self.cache.get(key, DEFAULT_SETTINGS[key])
        if key == SETTING_WORKING_DIRECTORY:
            value = normalize_working_directory(value)
        return value

    def set(self, key: str, value: str):
        self._validate_key(key)
        if not isinstance(value, str):
            raise SettingsError(key, value, 'Setting values must be strings.')
        self.cache.set(key, value)
        self._notify(key)

    def unset(self, key: str):
        """Restore the default value of a setting."""
        self._validate_key(key)
        self.cache.delete(key)
        self._notify(key)

    def items(self) -> dict[str, str]:
        return {key: self.get(key) for key in DEFAULT_SETTINGS}

    def observe(self, key: str, callback: Observer) -> Subscription:
        """Call `callback` with the current value now and on every change."""
        self._validate_key(key)
        with self._lock:
            self._observers.setdefault(key, []).append(callback)
        callback(self.get(key))

        def remove():
            with self._lock:
                self._observers[key].remove(callback)

        return Subscription(remove)

    def _notify(self, key: str):
        value = self.get(key)
        logger.debug(f'Setting {key} changed to {value!r}')
        with self._lock:
            observers = list(self._observers.get(key, []))
        for callback in observers:
            callback(value)

    def close(self):
        """Close the underlying cache, removing it if it lives in a temp directory."""
        self.cache.close()
        if self._temp_dir is not None:
            shutil.rmtree(self._temp_dir, ignore_errors=True)
            self._temp_dir = None

    def snapshot(self) -> Settings:
        return Settings(
            executable=self.get(SETTING_EXECUTABLE),
            rc_file=self.get(SETTING_RC_FILE),
            message_format=self.get(SETTING_MESSAGE_FORMAT),
            python_path=self.get(SETTING_PYTHON_PATH),
            working_directory=self.get(SETTING_WORKING_DIRECTORY),
        )
