"""Single-slot persistence for the current adventure."""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, ValidationError

from .adventure import Adventure

logger = logging.getLogger(__name__)

DEFAULT_SAVE_FILE = Path("saved_adventure.json")


class StorageError(Exception):
    """Raised when the adventure store cannot be written or read."""


class StoredAdventure(BaseModel):
    """On-disk shape of a saved adventure."""

    location: str
    characters: list[str]
    objective: str
    challenges: list[str]


class AdventureStore:
    """Reads and writes one adventure to a single JSON file."""

    def __init__(self, path: Path | str = DEFAULT_SAVE_FILE):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, adventure: Adventure) -> None:
        """Write the adventure, replacing any previous save.

        The file is written next to the target and renamed into place, so a
        failed write never leaves a half-written store behind.

        Raises:
            StorageError: If the file cannot be written
        """
        document = StoredAdventure(**adventure.to_dict()).model_dump_json(indent=2)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(document, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Could not save adventure to {self.path}: {e}") from e
        logger.info("Saved adventure to %s", self.path)

    def load(self) -> Adventure:
        """Read the saved adventure.

        Raises:
            StorageError: If nothing was saved yet or the data is malformed
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise StorageError("No saved adventure found.") from e
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        try:
            stored = StoredAdventure.model_validate_json(text)
            adventure = Adventure.from_dict(stored.model_dump())
        except (ValidationError, ValueError) as e:
            raise StorageError(f"Saved adventure in {self.path} is malformed.") from e

        logger.info("Loaded adventure from %s", self.path)
        return adventure
