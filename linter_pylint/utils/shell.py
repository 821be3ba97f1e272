import os
import shutil
import subprocess
import tempfile
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Mapping, Sequence, TypeVar

from linter_pylint.exceptions import ProcessLaunchError
from linter_pylint.utils.logger import linter_pylint_logger as logger

T = TypeVar('T')


@dataclass(frozen=True)
class ExecResult:
    """Captured outcome of a finished process."""

    returncode: int
    stdout: str
    stderr: str


@contextmanager
def temp_file(file_name: str, file_text: str) -> Iterator[str]:
    """Write `file_text` to a temporary file named `file_name`.

    The file lives in its own temporary directory, so the base name matches
    the original file. The directory is removed when the context exits,
    whether or not the body raised.
    """
    temp_dir = tempfile.mkdtemp(prefix='linter_pylint_')
    try:
        temp_path = Path(temp_dir) / file_name
        with open(temp_path, 'w', encoding='utf-8', newline='') as f:
            f.write(file_text)
        yield str(temp_path)
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)


def with_temp_file(file_name: str, file_text: str, callback: Callable[[str], T]) -> T:
    """Run `callback` with the path of a temporary copy of `file_text`."""
    with temp_file(file_name, file_text) as temp_path:
        return callback(temp_path)


def exec_cmd(
    executable: str,
    args: Sequence[str],
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    timeout: float | None = None,  # seconds
) -> ExecResult:
    """Run a command without a shell and capture both output streams.

    Args:
        executable: The program to run.
        args: Arguments passed to the program.
        env: Environment of the child process. Inherits ours when None.
        cwd: Working directory of the child process.
        timeout: Maximum time to wait for the command. Waits forever when None.

    Returns:
        An ExecResult. A non-zero exit code or output on stderr is not an error.

    Raises:
        ProcessLaunchError: If the process could not be started.
        TimeoutError: If a timeout was given and expired.
    """
    cmd = [executable, *args]
    logger.debug(f'Running {cmd} in {cwd}')
    start_time = time.time()

    try:
        process = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding='utf-8',
            errors='replace',
            env=dict(env) if env is not None else None,
            cwd=cwd,
        )
    except OSError as e:
        raise ProcessLaunchError(executable, str(e)) from e

    try:
        stdout, stderr = process.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        process.kill()
        process.communicate()
        elapsed_time = time.time() - start_time
        raise TimeoutError(
            f"Command '{executable}' timed out after {elapsed_time:.2f} seconds"
        )

    logger.debug(f'`{executable}` exited with code {process.returncode}')
    return ExecResult(
        returncode=process.returncode or 0,
        stdout=stdout or '',
        stderr=stderr or '',
    )


def check_tool_installed(tool_name: str) -> bool:
    """Check if a tool is installed."""
    try:
        subprocess.run(
            [tool_name, '--version'],
            check=True,
            cwd=os.getcwd(),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        return True
    except (subprocess.CalledProcessError, OSError):
        return False
