"""Game data module: settings, adventures, session state and storage."""

from .adventure import Adventure
from .session_state import SessionState
from .settings import AdventureSettings, Difficulty, Genre, Length
from .storage import AdventureStore, StorageError

__all__ = [
    "Adventure", "SessionState",
    "AdventureSettings", "Difficulty", "Genre", "Length",
    "AdventureStore", "StorageError",
]
