import os
from typing import Iterable


class Project:
    """The set of root directories the host has open."""

    def __init__(self, root_paths: Iterable[str] = ()):
        self.root_paths = [os.path.abspath(path) for path in root_paths]

    def add_path(self, path: str) -> None:
        self.root_paths.append(os.path.abspath(path))

    def relativize_path(self, path: str) -> tuple[str | None, str]:
        """Split `path` into the deepest root containing it and the remainder.

        Returns (None, path) when no root contains the path.
        """
        path = os.path.abspath(path)
        containing = [
            root
            for root in self.root_paths
            if path == root or path.startswith(root.rstrip(os.sep) + os.sep)
        ]
        if not containing:
            return None, path
        root = max(containing, key=len)
        return root, os.path.relpath(path, root)


def get_project_dir(project: Project | None, file_path: str) -> str:
    """Project root containing `file_path`, or the file's own directory."""
    project_dir = project.relativize_path(file_path)[0] if project else None
    if project_dir is None:
        return os.path.dirname(file_path)
    return project_dir
