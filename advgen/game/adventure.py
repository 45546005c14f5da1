"""The generated adventure record."""

from dataclasses import dataclass
from typing import Any

MIN_ENTRIES = 2
MAX_ENTRIES = 4


@dataclass(frozen=True)
class Adventure:
    """A generated adventure.

    Instances are immutable. Each list field holds between two and four
    non-empty entries, in the order they were generated.
    """

    location: str
    characters: tuple[str, ...]
    objective: str
    challenges: tuple[str, ...]

    def __post_init__(self):
        # Accept any sequence but store tuples
        object.__setattr__(self, "characters", tuple(self.characters))
        object.__setattr__(self, "challenges", tuple(self.challenges))

        if not self.location.strip():
            raise ValueError("Adventure location must not be empty")
        if not self.objective.strip():
            raise ValueError("Adventure objective must not be empty")
        for name in ("characters", "challenges"):
            entries = getattr(self, name)
            if not MIN_ENTRIES <= len(entries) <= MAX_ENTRIES:
                raise ValueError(
                    f"Adventure {name} must have {MIN_ENTRIES}-{MAX_ENTRIES} entries, got {len(entries)}"
                )
            if any(not entry.strip() for entry in entries):
                raise ValueError(f"Adventure {name} must not contain empty entries")

    def render(self) -> str:
        """Render the adventure as display text."""
        lines = [f"Location: {self.location}", "", "Characters:"]
        lines.extend(f"- {character}" for character in self.characters)
        lines.extend(["", f"Objective: {self.objective}", "", "Challenges:"])
        lines.extend(f"- {challenge}" for challenge in self.challenges)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "location": self.location,
            "characters": list(self.characters),
            "objective": self.objective,
            "challenges": list(self.challenges),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Adventure":
        """Build an adventure from its stored dictionary form.

        Raises:
            KeyError: If a field is missing
            ValueError: If the data breaks the adventure invariants
        """
        return cls(
            location=data["location"],
            characters=tuple(data["characters"]),
            objective=data["objective"],
            challenges=tuple(data["challenges"]),
        )
