import os

from linter_pylint.editor import Project, get_project_dir


def test_relativize_path_picks_deepest_root(tmp_path):
    outer = tmp_path / 'outer'
    inner = outer / 'inner'
    project = Project([str(outer), str(inner)])

    root, relative = project.relativize_path(str(inner / 'pkg' / 'mod.py'))

    assert root == str(inner)
    assert relative == os.path.join('pkg', 'mod.py')


def test_relativize_path_outside_project(tmp_path):
    project = Project([str(tmp_path / 'project')])
    path = str(tmp_path / 'projectile' / 'mod.py')
    assert project.relativize_path(path) == (None, path)


def test_project_dir_from_project(tmp_path):
    project = Project([str(tmp_path)])
    assert get_project_dir(project, str(tmp_path / 'a' / 'mod.py')) == str(tmp_path)


def test_project_dir_falls_back_to_file_dir(tmp_path):
    file_path = str(tmp_path / 'a' / 'mod.py')
    assert get_project_dir(Project(), file_path) == str(tmp_path / 'a')
    assert get_project_dir(None, file_path) == str(tmp_path / 'a')


def test_add_path(tmp_path):
    project = Project()
    project.add_path(str(tmp_path / 'project'))
    assert get_project_dir(project, str(tmp_path / 'project' / 'mod.py')) == str(
        tmp_path / 'project'
    )
