import json
import sys

import click

from linter_pylint.config import (
    DEFAULT_SETTINGS,
    SETTINGS_DIR_ENV_VAR,
    default_settings_dir,
)
from linter_pylint.editor import Project, TextEditor
from linter_pylint.exceptions import ToolError
from linter_pylint.linter import PylintLinter
from linter_pylint.settings import SettingsStore


@click.group()
@click.option(
    '--settings-dir',
    envvar=SETTINGS_DIR_ENV_VAR,
    type=click.Path(file_okay=False),
    help='Directory the settings are stored in. Defaults to ~/.linter-pylint.',
)
@click.pass_context
def cli(ctx, settings_dir):
    """linter-pylint: pylint diagnostics for a single file."""
    ctx.obj = SettingsStore(settings_dir or default_settings_dir())


@cli.command()
@click.argument('filepath', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--project-root',
    '-p',
    multiple=True,
    type=click.Path(exists=True, file_okay=False),
    help='Project root directory. May be given more than once.',
)
@click.option('--json', 'as_json', is_flag=True, help='Print diagnostics as JSON.')
@click.pass_obj
def lint(settings_store, filepath, project_root, as_json):
    """Lint FILEPATH and print its diagnostics."""
    editor = TextEditor(filepath)
    project = Project()
    for root in project_root:
        project.add_path(root)
    linter = PylintLinter(settings_store, project=project)
    try:
        diagnostics = linter.lint(editor)
    except ToolError as e:
        click.echo(f'ERROR:\n{e.message}', err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([d.to_dict() for d in diagnostics], indent=2))
    else:
        for diagnostic in diagnostics:
            click.echo(str(diagnostic))


@cli.group()
def config():
    """Show or change settings."""


def _setting_key(name: str) -> str:
    # Allow `executable` as a shorthand for `linter-pylint.executable`
    for key in DEFAULT_SETTINGS:
        if name in (key, key.split('.', 1)[1]):
            return key
    return name


@config.command()
@click.pass_obj
def show(settings_store):
    """Print every setting and its current value."""
    for key, value in settings_store.items().items():
        click.echo(f'{key} = {value!r}')


@config.command(name='set')
@click.argument('key')
@click.argument('value')
@click.pass_obj
def set_(settings_store, key, value):
    """Set KEY to VALUE."""
    try:
        settings_store.set(_setting_key(key), value)
    except ToolError as e:
        raise click.BadParameter(e.message, param_hint='KEY')


@config.command()
@click.argument('key')
@click.pass_obj
def unset(settings_store, key):
    """Restore the default value of KEY."""
    try:
        settings_store.unset(_setting_key(key))
    except ToolError as e:
        raise click.BadParameter(e.message, param_hint='KEY')


if __name__ == '__main__':
    cli()
