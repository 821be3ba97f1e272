import os
import re

PACKAGE_NAME = 'linter-pylint'
LINTER_NAME = 'Pylint'

PYTHON_GRAMMAR_SCOPE = 'source.python'
PYTHON_FILE_EXTENSIONS = ('.py', '.pyi')

# Setting keys as exposed to the user, and their defaults
SETTING_EXECUTABLE = f'{PACKAGE_NAME}.executable'
SETTING_RC_FILE = f'{PACKAGE_NAME}.rcFile'
SETTING_MESSAGE_FORMAT = f'{PACKAGE_NAME}.messageFormat'
SETTING_PYTHON_PATH = f'{PACKAGE_NAME}.pythonPath'
SETTING_WORKING_DIRECTORY = f'{PACKAGE_NAME}.workingDirectory'

DEFAULT_SETTINGS = {
    SETTING_EXECUTABLE: 'pylint',
    SETTING_RC_FILE: '',
    SETTING_MESSAGE_FORMAT: '%i %m',
    SETTING_PYTHON_PATH: '',
    SETTING_WORKING_DIRECTORY: '%p',
}

SETTINGS_DIR_ENV_VAR = 'LINTER_PYLINT_SETTINGS_DIR'

# Template placeholders
FILE_DIR_PLACEHOLDER = '%f'
PROJECT_DIR_PLACEHOLDER = '%p'
MESSAGE_FORMAT_PLACEHOLDERS = {
    '%m': 'msg',
    '%i': 'msg_id',
    '%s': 'symbol',
}

PYTHONPATH_ENV_VAR = 'PYTHONPATH'
PINNED_LOCALE = 'en_US.UTF-8'

INFO_CATEGORY = 'info'

# Known-benign lines pylint writes to stderr
ERROR_WHITELIST = (re.compile(r'^No config file found, using default configuration$'),)


def default_settings_dir() -> str:
    """Directory the CLI and the package share their settings in."""
    return os.getenv(SETTINGS_DIR_ENV_VAR) or os.path.join(
        os.path.expanduser('~'), '.linter-pylint'
    )
