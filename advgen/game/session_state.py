"""Session state - the settings and the one adventure a session owns."""

from dataclasses import dataclass, field

from .adventure import Adventure
from .settings import AdventureSettings
from .storage import AdventureStore


@dataclass
class SessionState:
    """State owned by a single interactive session."""

    settings: AdventureSettings = field(default_factory=AdventureSettings)
    current_adventure: Adventure | None = None

    def set_current_adventure(self, adventure: Adventure) -> None:
        """Replace the current adventure."""
        self.current_adventure = adventure

    def save_adventure(self, store: AdventureStore) -> bool:
        """Save the current adventure.

        Returns:
            False if there was nothing to save

        Raises:
            StorageError: If writing fails
        """
        if self.current_adventure is None:
            return False
        store.save(self.current_adventure)
        return True

    def load_adventure(self, store: AdventureStore) -> Adventure:
        """Replace the current adventure with the saved one.

        The current adventure is left untouched if loading fails.

        Raises:
            StorageError: If there is no valid saved adventure
        """
        adventure = store.load()
        self.current_adventure = adventure
        return adventure
