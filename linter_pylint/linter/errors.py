import os
import re
from typing import Iterable

from linter_pylint.config import ERROR_WHITELIST


def filter_whitelisted_errors(
    stderr: str, whitelist: Iterable[re.Pattern] = ERROR_WHITELIST
) -> str:
    """Remove blank lines and known-benign lines from `stderr`.

    Whatever remains is a genuine error report; an empty result means the
    invocation succeeded.
    """
    whitelist = tuple(whitelist)
    lines = [line for line in stderr.splitlines() if line]
    kept = [
        line
        for line in lines
        if not any(error_regex.search(line) for error_regex in whitelist)
    ]
    return os.linesep.join(kept)
