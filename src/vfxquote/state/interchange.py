"""Scene list import/export.

The interchange format is a JSON array of scene records::

    [{"id": "...", "name": "...", "description": "...", "data": {...}}]

where ``data`` holds every ``ShotConfiguration`` field by name. Export
followed by import reproduces the scene list exactly.
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..errors import InterchangeError
from ..models.project import Scene

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "name", "data")

_SCENE_LIST = TypeAdapter(list[Scene])


def export_scenes(scenes: Iterable[Scene]) -> str:
    """Serialize scenes to the interchange format."""
    return _SCENE_LIST.dump_json(list(scenes), indent=2).decode("utf-8")


def import_scenes(text: str) -> list[Scene]:
    """Parse scenes from the interchange format.

    Raises:
        InterchangeError: If the payload is not valid JSON, not an array,
            empty, or holds a record with missing or invalid fields.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InterchangeError(f"Invalid file: not valid JSON ({exc.msg}, line {exc.lineno})") from exc

    if not isinstance(payload, list):
        raise InterchangeError("Invalid file format: expected an array of scenes")
    if not payload:
        raise InterchangeError("Invalid file format: the scene list is empty")

    scenes: list[Scene] = []
    for position, record in enumerate(payload, start=1):
        if not isinstance(record, dict):
            raise InterchangeError(f"Scene #{position} is not an object")
        missing = [key for key in REQUIRED_FIELDS if key not in record]
        if missing:
            raise InterchangeError(
                f"Scene #{position} is missing required field(s): {', '.join(missing)}"
            )
        try:
            scenes.append(Scene.model_validate(record))
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise InterchangeError(
                f"Scene #{position} ('{record.get('name')}') is invalid at {location}: {first['msg']}"
            ) from exc

    seen: set[str] = set()
    for scene in scenes:
        if scene.id in seen:
            raise InterchangeError(f"Duplicate scene id '{scene.id}'")
        seen.add(scene.id)

    logger.debug("Imported %d scenes", len(scenes))
    return scenes


def export_to_file(scenes: Iterable[Scene], path: Path | str) -> Path:
    """Write scenes to a file in the interchange format.

    Returns:
        Path to the written file.
    """
    path = Path(path)
    path.write_text(export_scenes(scenes), encoding="utf-8")
    logger.info("Exported scenes to %s", path)
    return path


def import_from_file(path: Path | str) -> list[Scene]:
    """Read scenes from a file in the interchange format.

    Raises:
        InterchangeError: If the file cannot be read, is not UTF-8 text,
            or holds a malformed payload.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InterchangeError(f"Invalid file: {path} is not UTF-8 text") from exc
    except OSError as exc:
        raise InterchangeError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    return import_scenes(text)
