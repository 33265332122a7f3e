"""Scene and project models for VFX Quote."""

import uuid

from pydantic import BaseModel, Field

from .shot import ShotConfiguration


def new_scene_id() -> str:
    """Return a fresh, stable scene identifier."""
    return uuid.uuid4().hex


class Scene(BaseModel):
    """A named, described container for one shot's configuration."""

    id: str = Field(default_factory=new_scene_id, min_length=1, description="Stable scene identifier")
    name: str = Field(..., min_length=1, max_length=120, description="Display name")
    description: str = Field(default="", description="Free-text notes for the scene")
    data: ShotConfiguration = Field(default_factory=ShotConfiguration)


class Project(BaseModel):
    """An ordered sequence of scenes priced independently."""

    name: str = Field(default="Untitled Project", min_length=1)
    currency: str = Field(default="MMK", description="Display currency symbol")
    scenes: list[Scene] = Field(default_factory=list)

    def get_scene(self, scene_id: str) -> Scene | None:
        """Get a scene by its identifier.

        Args:
            scene_id: Identifier of the scene to retrieve

        Returns:
            Scene if found, None otherwise
        """
        for scene in self.scenes:
            if scene.id == scene_id:
                return scene
        return None

    def index_of(self, scene_id: str) -> int | None:
        """Return the position of a scene in the project, or None."""
        for index, scene in enumerate(self.scenes):
            if scene.id == scene_id:
                return index
        return None
