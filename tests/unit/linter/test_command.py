import os

from linter_pylint.linter.command import (
    LintCommand,
    build_args,
    build_command,
    build_environment,
    build_message_format,
    substitute_placeholders,
)
from linter_pylint.settings import Settings


def test_substitute_placeholders():
    result = substitute_placeholders('%p/src:%f/lib', '/proj/pkg', '/proj')
    assert result == '/proj/src:/proj/pkg/lib'
    assert '%p' not in result and '%f' not in result


def test_substitute_placeholders_replaces_every_occurrence():
    assert substitute_placeholders('%f %f %p %p', 'F', 'P') == 'F F P P'


def test_build_message_format():
    assert build_message_format('%i %m') == '{msg_id} {msg}'
    assert build_message_format('%m (%s) %m') == '{msg} ({symbol}) {msg}'
    assert build_message_format('plain') == 'plain'


def test_build_args_defaults():
    args = build_args(Settings(), '/proj/pkg', '/proj')
    assert args == [
        "--msg-template='{line},{column},{category},{msg_id}:{msg_id} {msg}'",
        '--reports=n',
        '--output-format=text',
    ]


def test_build_args_with_rc_file():
    args = build_args(Settings(rc_file='%p/.pylintrc'), '/proj/pkg', '/proj')
    assert args[-1] == '--rcfile=/proj/.pylintrc'


def test_build_environment():
    base = {'PYTHONPATH': '/base', 'HOME': '/home/me', 'LANG': 'C'}
    env = build_environment(base, '/proj/pkg', '/proj', '%p/src')

    assert env['PYTHONPATH'] == os.pathsep.join(
        ['/base', '/proj/pkg', '/proj', '/proj/src']
    )
    assert env['LANG'] == 'en_US.UTF-8'
    assert env['HOME'] == '/home/me'
    # The base mapping is left untouched
    assert base == {'PYTHONPATH': '/base', 'HOME': '/home/me', 'LANG': 'C'}


def test_build_environment_skips_empty_parts():
    env = build_environment({}, '/proj/pkg', '/proj', '')
    assert env['PYTHONPATH'] == os.pathsep.join(['/proj/pkg', '/proj'])


def test_build_command():
    settings = Settings(
        executable='%p/venv/bin/pylint',
        working_directory='%f',
        python_path='%f/vendor',
    )
    command = build_command('/proj/pkg/mod.py', '/proj', settings, {})

    assert command.executable == '/proj/venv/bin/pylint'
    assert command.cwd == '/proj/pkg'
    assert command.env['PYTHONPATH'].endswith('/proj/pkg/vendor')
    assert command.args == tuple(build_args(settings, '/proj/pkg', '/proj'))


def test_with_target_appends_path():
    command = LintCommand('pylint', ('--reports=n',), '/proj', {'LANG': 'C'})
    target = command.with_target('/tmp/x/mod.py')

    assert target.args == ('--reports=n', '/tmp/x/mod.py')
    assert command.args == ('--reports=n',)
