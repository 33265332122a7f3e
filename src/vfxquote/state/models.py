"""State models for the project file."""

from datetime import datetime

from pydantic import BaseModel, Field

from ..models.project import Project


class ProjectDocument(BaseModel):
    """Everything persisted in a project file.

    Holds the project itself plus the scene the user is currently
    editing, so consecutive commands pick up where the last one left off.
    """

    project: Project = Field(default_factory=Project)
    active_scene_id: str | None = Field(
        default=None, description="Identifier of the scene being edited"
    )
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
