import json
import os
import stat
import sys
from pathlib import Path

import pytest

from linter_pylint.editor import TextEditor
from linter_pylint.settings import SettingsStore

# Stands in for pylint: records how it was called, then replays canned output
FAKE_PYLINT = """#!{python}
import json
import os
import sys

target = sys.argv[-1]
with open(os.environ['FAKE_PYLINT_RECORD'], 'w') as f:
    json.dump(
        {{
            'args': sys.argv[1:],
            'cwd': os.getcwd(),
            'pythonpath': os.environ.get('PYTHONPATH'),
            'lang': os.environ.get('LANG'),
            'target': target,
            'target_text': open(target).read(),
        }},
        f,
    )
sys.stdout.write(os.environ.get('FAKE_PYLINT_STDOUT', ''))
sys.stderr.write(os.environ.get('FAKE_PYLINT_STDERR', ''))
sys.exit(int(os.environ.get('FAKE_PYLINT_EXIT', '0')))
"""


class FakePylint:
    def __init__(self, directory: Path):
        self.path = directory / 'fake_pylint'
        self.path.write_text(FAKE_PYLINT.format(python=sys.executable))
        self.path.chmod(self.path.stat().st_mode | stat.S_IEXEC)
        self.record_path = directory / 'fake_pylint_record.json'

    def env(self, stdout: str = '', stderr: str = '', exit_code: int = 0) -> dict:
        env = dict(os.environ)
        env.pop('PYTHONPATH', None)
        env.update(
            FAKE_PYLINT_RECORD=str(self.record_path),
            FAKE_PYLINT_STDOUT=stdout,
            FAKE_PYLINT_STDERR=stderr,
            FAKE_PYLINT_EXIT=str(exit_code),
        )
        return env

    def record(self) -> dict:
        return json.loads(self.record_path.read_text())


@pytest.fixture
def fake_pylint(tmp_path):
    tool_dir = tmp_path / 'tool'
    tool_dir.mkdir()
    return FakePylint(tool_dir)


@pytest.fixture
def settings_store(tmp_path):
    return SettingsStore(tmp_path / 'settings')


@pytest.fixture
def python_editor(tmp_path):
    """An editor on a file inside a project, with unsaved changes."""
    project_dir = tmp_path / 'project'
    package_dir = project_dir / 'pkg'
    package_dir.mkdir(parents=True)
    file_path = package_dir / 'mod.py'
    file_path.write_text('saved on disk\n')
    return TextEditor(str(file_path), 'import os\nx = foo(1)\n')
