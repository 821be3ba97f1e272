from .buffer import TextBuffer, TextEditor
from .project import Project, get_project_dir
from .ranges import Position, Range, range_from_line_number

__all__ = [
    'Position',
    'Project',
    'Range',
    'TextBuffer',
    'TextEditor',
    'get_project_dir',
    'range_from_line_number',
]
