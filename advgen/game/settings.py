"""Adventure settings: the difficulty/genre/length triple driving generation."""

from dataclasses import dataclass, replace
from enum import Enum


class CyclingEnum(Enum):
    """Enum whose members can be advanced in declaration order, wrapping."""

    def next(self):
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]


class Difficulty(CyclingEnum):
    """How hard the adventure should be."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Genre(CyclingEnum):
    """Adventure genre."""

    FANTASY = "Fantasy"
    SCIFI = "SciFi"
    HORROR = "Horror"


class Length(CyclingEnum):
    """Adventure length; decides how many characters and challenges appear."""

    SHORT = "Short"
    MEDIUM = "Medium"
    LONG = "Long"


COUNT_BY_LENGTH = {
    Length.SHORT: 2,
    Length.MEDIUM: 3,
    Length.LONG: 4,
}

SETTING_FIELDS = ("difficulty", "genre", "length")


@dataclass
class AdventureSettings:
    """The settings used to generate the next adventure."""

    difficulty: Difficulty = Difficulty.MEDIUM
    genre: Genre = Genre.FANTASY
    length: Length = Length.MEDIUM

    def cycle(self, field_name: str) -> None:
        """Advance one field to its next value, wrapping after the last.

        Args:
            field_name: One of "difficulty", "genre" or "length"

        Raises:
            KeyError: If the field name is not a setting
        """
        if field_name not in SETTING_FIELDS:
            raise KeyError(field_name)
        setattr(self, field_name, getattr(self, field_name).next())

    @property
    def count(self) -> int:
        """Number of characters and challenges for the current length."""
        return COUNT_BY_LENGTH[self.length]

    def snapshot(self) -> "AdventureSettings":
        """Return an independent copy for use as generator input."""
        return replace(self)

    def as_labels(self) -> dict[str, str]:
        """Plain labels as sent across the generator boundary."""
        return {
            "genre": self.genre.value,
            "difficulty": self.difficulty.value,
            "length": self.length.value,
        }
