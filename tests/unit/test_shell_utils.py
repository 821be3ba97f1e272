import os
import subprocess
import sys
from unittest.mock import MagicMock, patch

import pytest

from linter_pylint.exceptions import ProcessLaunchError
from linter_pylint.utils.shell import (
    check_tool_installed,
    exec_cmd,
    temp_file,
    with_temp_file,
)


def test_exec_cmd_captures_both_streams():
    """Test that stdout and stderr are captured separately."""
    result = exec_cmd(
        sys.executable,
        ['-c', 'import sys; print("out"); print("err", file=sys.stderr)'],
    )

    assert result.returncode == 0
    assert result.stdout.strip() == 'out'
    assert result.stderr.strip() == 'err'


def test_exec_cmd_nonzero_exit_is_not_an_error():
    result = exec_cmd(sys.executable, ['-c', 'import sys; sys.exit(16)'])
    assert result.returncode == 16


def test_exec_cmd_uses_env_and_cwd(tmp_path):
    result = exec_cmd(
        sys.executable,
        ['-c', 'import os; print(os.environ["MARKER"]); print(os.getcwd())'],
        env={**os.environ, 'MARKER': 'set'},
        cwd=str(tmp_path),
    )
    marker, cwd = result.stdout.splitlines()
    assert marker == 'set'
    assert os.path.samefile(cwd, tmp_path)


def test_exec_cmd_missing_executable():
    """Test that a launch failure raises ProcessLaunchError."""
    with pytest.raises(ProcessLaunchError) as exc_info:
        exec_cmd('definitely-not-a-real-pylint', ['--version'])
    assert exc_info.value.executable == 'definitely-not-a-real-pylint'
    assert 'definitely-not-a-real-pylint' in str(exc_info.value)


@patch('subprocess.Popen')
def test_exec_cmd_timeout(mock_popen):
    """Test that a TimeoutError is raised if a timeout was given and expires."""
    mock_process = MagicMock()
    mock_process.communicate.side_effect = [
        subprocess.TimeoutExpired(cmd='pylint', timeout=1),
        ('', ''),
    ]
    mock_popen.return_value = mock_process

    with pytest.raises(TimeoutError, match="Command 'pylint' timed out"):
        exec_cmd('pylint', [], timeout=1)
    mock_process.kill.assert_called_once()


def test_temp_file_keeps_base_name_and_cleans_up():
    with temp_file('module.py', 'x = 1\n') as temp_path:
        assert os.path.basename(temp_path) == 'module.py'
        with open(temp_path) as f:
            assert f.read() == 'x = 1\n'
    assert not os.path.exists(temp_path)
    assert not os.path.exists(os.path.dirname(temp_path))


def test_temp_file_cleans_up_on_error():
    with pytest.raises(RuntimeError):
        with temp_file('module.py', '') as temp_path:
            raise RuntimeError('boom')
    assert not os.path.exists(temp_path)


def test_with_temp_file_returns_callback_value():
    assert with_temp_file('a.py', 'abc', lambda path: open(path).read()) == 'abc'


def test_with_temp_file_propagates_callback_error():
    def callback(path):
        raise ValueError(path)

    with pytest.raises(ValueError):
        with_temp_file('a.py', 'abc', callback)


def test_check_tool_installed():
    assert check_tool_installed(sys.executable)
    assert not check_tool_installed('definitely-not-a-real-pylint')
