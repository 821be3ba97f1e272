class ToolError(Exception):
    """Raised when a lint invocation encounters an error."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)

    def __str__(self):
        return self.message


class ProcessLaunchError(ToolError):
    """Raised when the analyzer process cannot be started."""

    def __init__(self, executable: str, reason: str):
        self.executable = executable
        self.reason = reason
        self.message = f'Failed to run `{executable}`: {reason}'
        super().__init__(self.message)


class ToolInvocationError(ToolError):
    """Raised when the analyzer reports errors on stderr."""


class SettingsError(ToolError):
    """Raised when a setting key or value is invalid."""

    def __init__(self, key, value=None, hint=None):
        self.key = key
        self.value = value
        self.message = (
            f'Invalid setting `{key}`: {value!r}. {hint}'
            if hint
            else f'Invalid setting `{key}`: {value!r}.'
        )
        super().__init__(self.message)


class UnknownSettingError(SettingsError):
    """Raised when a setting key does not exist."""

    def __init__(self, key, known_keys=()):
        self.key = key
        self.value = None
        self.message = f'Unknown setting `{key}`.'
        if known_keys:
            self.message += f' Known settings are: {", ".join(known_keys)}'
