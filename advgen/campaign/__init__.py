"""Adventure generation module."""

from .generator import (
    AIAdventureGenerator,
    AdventureGenerator,
    GenerationFailure,
    RandomAdventureGenerator,
)

__all__ = [
    "AIAdventureGenerator",
    "AdventureGenerator",
    "GenerationFailure",
    "RandomAdventureGenerator",
]
