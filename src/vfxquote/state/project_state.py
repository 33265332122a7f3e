"""Current-project state container with explicit mutation entry points."""

import logging
from collections.abc import Iterable
from typing import Any

from ..errors import SceneError
from ..models.project import Project, Scene
from ..models.shot import ShotConfiguration
from .models import ProjectDocument

logger = logging.getLogger(__name__)


class ProjectState:
    """Holds one project and the active scene.

    All scene-list edits go through this class. A project always keeps
    at least one scene: a fresh state starts with "Scene 1" and deleting
    the last remaining scene is refused.

    Args:
        document: Existing project document to edit. A new one is created
            when omitted.
        defaults: Shot configuration used for newly added scenes.
    """

    def __init__(
        self,
        document: ProjectDocument | None = None,
        *,
        defaults: ShotConfiguration | None = None,
    ) -> None:
        self.document = document or ProjectDocument()
        self.defaults = defaults or ShotConfiguration()
        if not self.document.project.scenes:
            self.add_scene()
        if self.document.project.get_scene(self.document.active_scene_id or "") is None:
            self.document.active_scene_id = self.scenes[0].id

    @property
    def project(self) -> Project:
        return self.document.project

    @property
    def scenes(self) -> list[Scene]:
        return self.document.project.scenes

    @property
    def active_scene(self) -> Scene:
        """The scene currently being edited."""
        return self.get(self.document.active_scene_id or "")

    def get(self, scene_id: str) -> Scene:
        """Return the scene with the given id.

        Raises:
            SceneError: If no scene has that id.
        """
        scene = self.project.get_scene(scene_id)
        if scene is None:
            raise SceneError(f"No scene with id '{scene_id}'")
        return scene

    def resolve(self, ref: str) -> Scene:
        """Find a scene by exact id, unique id prefix, or exact name.

        Raises:
            SceneError: If nothing matches or the reference is ambiguous.
        """
        scene = self.project.get_scene(ref)
        if scene is not None:
            return scene

        matches = [s for s in self.scenes if s.id.startswith(ref)] if ref else []
        if not matches:
            matches = [s for s in self.scenes if s.name == ref]
        if len(matches) == 1:
            return matches[0]
        if matches:
            raise SceneError(f"Scene reference '{ref}' is ambiguous")
        raise SceneError(f"No scene matches '{ref}'")

    def add_scene(
        self,
        name: str | None = None,
        description: str = "",
        data: ShotConfiguration | None = None,
    ) -> Scene:
        """Append a new scene and make it active.

        Returns:
            The newly created scene.
        """
        scene = Scene(
            name=(name or "").strip() or self._next_default_name(),
            description=description,
            data=data or self.defaults,
        )
        self.scenes.append(scene)
        self.document.active_scene_id = scene.id
        logger.debug("Added scene %s (%s)", scene.id, scene.name)
        return scene

    def delete_scene(self, scene_id: str) -> Scene:
        """Remove a scene from the project.

        If the active scene is removed, its predecessor becomes active.

        Raises:
            SceneError: If the scene is unknown or is the last one left.
        """
        index = self.project.index_of(scene_id)
        if index is None:
            raise SceneError(f"No scene with id '{scene_id}'")
        if len(self.scenes) == 1:
            raise SceneError("A project must keep at least one scene")

        removed = self.scenes.pop(index)
        if self.document.active_scene_id == removed.id:
            self.document.active_scene_id = self.scenes[max(index - 1, 0)].id
        logger.debug("Deleted scene %s (%s)", removed.id, removed.name)
        return removed

    def rename_scene(self, scene_id: str, name: str) -> Scene:
        """Change a scene's display name."""
        name = name.strip()
        if not name:
            raise SceneError("Scene name cannot be empty")
        scene = self.get(scene_id)
        scene.name = name
        return scene

    def describe_scene(self, scene_id: str, description: str) -> Scene:
        """Replace a scene's free-text description."""
        scene = self.get(scene_id)
        scene.description = description
        return scene

    def update_scene(self, scene_id: str, **changes: Any) -> Scene:
        """Replace a scene's shot configuration with an edited copy.

        Raises:
            SceneError: If the scene is unknown.
            pydantic.ValidationError: If a changed field is invalid.
        """
        scene = self.get(scene_id)
        scene.data = scene.data.with_changes(**changes)
        return scene

    def set_active(self, scene_id: str) -> Scene:
        """Switch the scene being edited."""
        scene = self.get(scene_id)
        self.document.active_scene_id = scene.id
        return scene

    def replace_scenes(self, scenes: Iterable[Scene]) -> None:
        """Replace the whole scene list, e.g. after an import.

        Raises:
            SceneError: If the new list is empty.
        """
        new_scenes = list(scenes)
        if not new_scenes:
            raise SceneError("A project must keep at least one scene")
        self.project.scenes = new_scenes
        self.document.active_scene_id = new_scenes[0].id
        logger.info("Replaced scene list with %d scenes", len(new_scenes))

    def _next_default_name(self) -> str:
        taken = {scene.name for scene in self.scenes}
        number = len(self.scenes) + 1
        while f"Scene {number}" in taken:
            number += 1
        return f"Scene {number}"
