"""CLI commands for VFX Quote."""

from .config_cmd import config
from .init_cmd import init
from .quote import quote
from .report import report
from .scene import scene_app
from .transfer import export_scenes, import_scenes

__all__ = [
    "config",
    "export_scenes",
    "import_scenes",
    "init",
    "quote",
    "report",
    "scene_app",
]
