"""Project file manager."""

import logging
from datetime import datetime
from pathlib import Path

from ..models.project import Project
from ..models.shot import ShotConfiguration
from .models import ProjectDocument
from .project_state import ProjectState

logger = logging.getLogger(__name__)


class ProjectStore:
    """Loads and saves the project file edited by the CLI.

    The file holds a ``ProjectDocument`` as JSON: the project's scene
    list plus the active scene.
    """

    def __init__(
        self,
        path: Path | str = "vfx_project.json",
        *,
        defaults: ShotConfiguration | None = None,
    ) -> None:
        self.path = Path(path)
        self.defaults = defaults or ShotConfiguration()

    def exists(self) -> bool:
        """Check if the project file exists on disk."""
        return self.path.exists()

    def create(self, name: str = "Untitled Project", currency: str = "MMK") -> ProjectState:
        """Create a fresh project with a single default scene and save it."""
        document = ProjectDocument(project=Project(name=name, currency=currency))
        state = ProjectState(document, defaults=self.defaults)
        self.save(state)
        logger.info("Created project %r at %s", name, self.path)
        return state

    def load(self) -> ProjectState:
        """Load the project file.

        Raises:
            FileNotFoundError: If the project file does not exist.
        """
        document = ProjectDocument.model_validate_json(self.path.read_text(encoding="utf-8"))
        return ProjectState(document, defaults=self.defaults)

    def load_or_create(self) -> ProjectState:
        """Load the project file, creating it when missing."""
        if self.exists():
            return self.load()
        return self.create()

    def save(self, state: ProjectState) -> Path:
        """Persist the project to disk.

        Updates the ``updated_at`` timestamp before writing.
        """
        state.document.updated_at = datetime.now()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(state.document.model_dump_json(indent=2), encoding="utf-8")
        return self.path
