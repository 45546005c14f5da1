"""The terminal surface the session controller draws on and reads keys from."""

from typing import Literal, Protocol

from .frames import Frame

Severity = Literal["information", "warning", "error"]


class TerminalSurface(Protocol):
    """Rendering and input primitives used by the session controller.

    The surface owns the terminal for its whole lifetime: it switches to
    full-screen raw mode when it starts and restores the terminal when it
    stops, whichever way the session ends.
    """

    def draw(self, frame: Frame) -> None:
        """Replace what is on screen with ``frame``."""
        ...

    async def poll_key(self, timeout: float) -> str | None:
        """Wait at most ``timeout`` seconds for a key.

        Returns:
            The key name ("g", "up", "enter", "escape", ...) or None
        """
        ...

    def notify(
        self,
        message: str,
        *,
        title: str = "",
        severity: Severity = "information",
    ) -> None:
        """Show a transient message to the user."""
        ...
