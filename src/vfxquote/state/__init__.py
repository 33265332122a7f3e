"""Project state management for VFX Quote."""

from .interchange import export_scenes, export_to_file, import_from_file, import_scenes
from .manager import ProjectStore
from .models import ProjectDocument
from .project_state import ProjectState

__all__ = [
    "ProjectDocument",
    "ProjectState",
    "ProjectStore",
    "export_scenes",
    "export_to_file",
    "import_from_file",
    "import_scenes",
]
