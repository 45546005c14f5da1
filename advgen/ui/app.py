"""Main Textual application for the Random Adventure Generator."""

import asyncio
import contextlib
import logging
import signal

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import ContentSwitcher, Label, Static

from ..campaign.generator import AdventureGenerator
from ..config import UIConfig
from ..game.session_state import SessionState
from ..game.storage import AdventureStore
from .controller import SessionController
from .frames import APP_TITLE, AdventureFrame, Frame, MenuFrame, ProgressFrame

logger = logging.getLogger(__name__)

QUIT_KEY = "q"


class AdventureApp(App):
    """Full-screen terminal surface hosting one session.

    Textual switches the terminal to application mode when the app starts
    and restores it when the app stops, including when the session worker
    fails or a termination signal arrives. The session itself runs as a
    worker and only talks to the app through ``draw``, ``poll_key`` and
    ``notify``.
    """

    TITLE = APP_TITLE
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
        padding: 1;
    }

    #title {
        width: 100%;
        height: 3;
        content-align: center middle;
        text-style: bold;
        color: $accent;
    }

    #views {
        height: 1fr;
    }

    #adventure-view {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #adventure-view.placeholder {
        color: $text-muted;
    }

    #progress-view {
        height: 1fr;
        align: center middle;
    }

    #spinner-line {
        width: 100%;
        content-align: center middle;
        color: $warning;
        margin-bottom: 1;
    }

    #loading-line {
        width: 100%;
        content-align: center middle;
        color: $accent-lighten-2;
    }

    #menu-view {
        height: 1fr;
        border: round $primary;
        padding: 1 2;
    }

    #controls {
        width: 100%;
        height: 3;
        content-align: center middle;
        color: $warning;
    }
    """

    def __init__(
        self,
        generator: AdventureGenerator,
        store: AdventureStore,
        state: SessionState | None = None,
        ui_config: UIConfig | None = None,
    ):
        """Initialize the application.

        Args:
            generator: Produces adventures from settings
            store: Where save/load reads and writes
            state: Session state to start from
            ui_config: Polling and progress timing
        """
        super().__init__()
        self._keys: asyncio.Queue[str] = asyncio.Queue()
        self.last_frame: Frame | None = None
        self.controller = SessionController(
            self,
            generator=generator,
            store=store,
            state=state,
            ui_config=ui_config,
        )

    def compose(self) -> ComposeResult:
        """Compose the fixed widget tree frames are drawn into."""
        yield Label(APP_TITLE, id="title")
        with ContentSwitcher(initial="adventure-view", id="views"):
            yield Static(id="adventure-view")
            with Vertical(id="progress-view"):
                yield Static(id="spinner-line")
                yield Static(id="loading-line")
            yield Static(id="menu-view")
        yield Static(id="controls")

    def on_mount(self) -> None:
        """Start the session once the terminal is ours."""
        self._install_signal_handlers()
        self.run_worker(self._run_session(), name="session", exit_on_error=True)

    async def _run_session(self) -> None:
        try:
            await self.controller.run()
        except Exception:
            logger.exception("Session loop failed")
            raise
        self.exit(return_code=0)

    def _install_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for name in ("SIGTERM", "SIGHUP"):
            signum = getattr(signal, name, None)
            if signum is None:
                continue
            # Not supported on Windows event loops
            with contextlib.suppress(NotImplementedError, RuntimeError):
                loop.add_signal_handler(signum, self._handle_signal, signum)

    def _handle_signal(self, signum: int) -> None:
        logger.warning("Received signal %d, shutting down", signum)
        self.exit(return_code=128 + signum)

    # Terminal surface

    def draw(self, frame: Frame) -> None:
        """Show a frame, skipping the redraw if nothing changed."""
        if frame == self.last_frame:
            return
        self.last_frame = frame

        self.query_one("#title", Label).update(frame.title)
        views = self.query_one("#views", ContentSwitcher)
        controls = self.query_one("#controls", Static)

        if isinstance(frame, AdventureFrame):
            panel = self.query_one("#adventure-view", Static)
            panel.border_title = frame.panel_title
            panel.set_class(frame.is_placeholder, "placeholder")
            panel.update(Text(frame.body))
            controls.update(self._controls_text(frame.controls))
            views.current = "adventure-view"
        elif isinstance(frame, ProgressFrame):
            self.query_one("#spinner-line", Static).update(Text(f"{frame.status} {frame.spinner}"))
            loading_line = self.query_one("#loading-line", Static)
            loading_line.display = frame.loading_text is not None
            loading_line.update(Text(f'"{frame.loading_text}"' if frame.loading_text else ""))
            controls.update("")
            views.current = "progress-view"
        elif isinstance(frame, MenuFrame):
            menu = self.query_one("#menu-view", Static)
            menu.border_title = frame.panel_title
            menu.update(self._menu_text(frame))
            controls.update(Text(frame.hint, style="dim"))
            views.current = "menu-view"

    async def poll_key(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for the next key press."""
        try:
            return await asyncio.wait_for(self._keys.get(), timeout)
        except asyncio.TimeoutError:
            return None

    def on_key(self, event: events.Key) -> None:
        """Queue every key press for the session loop."""
        self._keys.put_nowait(event.key)

    async def action_quit(self) -> None:
        """Route the built-in quit binding through the session loop."""
        self._keys.put_nowait(QUIT_KEY)

    @staticmethod
    def _controls_text(controls: tuple[tuple[str, str], ...]) -> Text:
        parts: list = ["Press "]
        for index, (key, label) in enumerate(controls):
            if index:
                parts.append(", ")
            parts.extend([(key, "bold"), f" to {label}"])
        return Text.assemble(*parts)

    @staticmethod
    def _menu_text(frame: MenuFrame) -> Text:
        text = Text()
        for index, row in enumerate(frame.rows):
            if index:
                text.append("\n")
            if index == frame.selected:
                text.append(frame.marker + row.text, style="bold yellow")
            else:
                text.append(" " * len(frame.marker) + row.text)
        return text


def run_app(
    generator: AdventureGenerator,
    store: AdventureStore,
    ui_config: UIConfig | None = None,
) -> int:
    """Run the application and return its exit code."""
    app = AdventureApp(generator=generator, store=store, ui_config=ui_config)
    app.run()
    return app.return_code or 0
