"""Session controller: the interactive loop behind the terminal UI."""

import asyncio
import logging
from enum import Enum

from ..campaign.generator import AdventureGenerator, GenerationFailure
from ..config import UIConfig
from ..game.session_state import SessionState
from ..game.storage import AdventureStore, StorageError
from .frames import AdventureFrame, MenuFrame, MenuRow, ProgressFrame
from .surface import TerminalSurface

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "No adventure generated yet. Press 'g' to generate a new adventure"


class Action(Enum):
    """Top-level actions available from the idle screen."""

    GENERATE = "generate"
    CUSTOMIZE = "customize"
    SAVE = "save"
    LOAD = "load"
    QUIT = "quit"


KEY_ACTIONS = {
    "g": Action.GENERATE,
    "c": Action.CUSTOMIZE,
    "s": Action.SAVE,
    "l": Action.LOAD,
    "q": Action.QUIT,
}

CONTROLS = (
    ("g", "generate"),
    ("c", "customize"),
    ("s", "save"),
    ("l", "load"),
    ("q", "quit"),
)

# Settings menu rows; the last row leaves the menu
MENU_OPTIONS = (
    ("Difficulty", "difficulty"),
    ("Genre", "genre"),
    ("Length", "length"),
    ("Save and Exit", None),
)


def resolve_action(key: str | None) -> Action | None:
    """Map an idle-screen key to its action, or None for unbound keys."""
    if key is None:
        return None
    return KEY_ACTIONS.get(key)


class SessionController:
    """Drives one interactive session until the user quits.

    The controller never touches the terminal directly; everything goes
    through the surface. Errors from the surface propagate and end the
    session. Generation and storage errors are reported and the session
    carries on.
    """

    def __init__(
        self,
        surface: TerminalSurface,
        generator: AdventureGenerator,
        store: AdventureStore,
        state: SessionState | None = None,
        ui_config: UIConfig | None = None,
    ):
        self.surface = surface
        self.generator = generator
        self.store = store
        self.state = state or SessionState()
        self.ui_config = ui_config or UIConfig()
        self.generating = False

    async def run(self) -> None:
        """Run the idle loop until the quit key is pressed."""
        logger.info("Session started")
        while True:
            self.surface.draw(self.idle_frame())
            key = await self.surface.poll_key(self.ui_config.poll_interval)
            action = resolve_action(key)
            if action is None:
                continue
            if action is Action.QUIT:
                break
            await self.dispatch(action)
        logger.info("Session ended")

    async def dispatch(self, action: Action) -> None:
        """Carry out one non-quit action and return to idle."""
        logger.debug("Dispatching %s", action.value)
        if action is Action.GENERATE:
            await self.generate()
        elif action is Action.CUSTOMIZE:
            await self.customize()
        elif action is Action.SAVE:
            self.save()
        elif action is Action.LOAD:
            self.load()

    def idle_frame(self) -> AdventureFrame:
        adventure = self.state.current_adventure
        if adventure is None:
            return AdventureFrame(body=PLACEHOLDER_TEXT, is_placeholder=True, controls=CONTROLS)
        return AdventureFrame(body=adventure.render(), controls=CONTROLS)

    async def generate(self) -> None:
        """Generate a new adventure while animating the progress screen.

        The generation task races a fast spinner ticker and a slow loading
        text ticker. Ticks only redraw; the race ends when generation does.
        Keys pressed meanwhile stay queued on the surface.
        """
        glyphs = self.ui_config.spinner_glyphs
        texts = self.ui_config.loading_texts
        spinner_index = 0
        text_index = 0

        def progress_frame() -> ProgressFrame:
            return ProgressFrame(
                spinner=glyphs[spinner_index],
                loading_text=texts[text_index] if texts else None,
            )

        settings = self.state.settings.snapshot()
        logger.info("Generating adventure: %s", settings.as_labels())

        self.generating = True
        generation = asyncio.create_task(self.generator.generate(settings))
        tickers: dict[asyncio.Task, str] = {}
        try:
            self.surface.draw(progress_frame())
            tickers[self._tick(self.ui_config.spinner_interval)] = "spinner"
            if texts:
                tickers[self._tick(self.ui_config.loading_text_interval)] = "loading_text"

            while True:
                done, _ = await asyncio.wait(
                    {generation, *tickers},
                    return_when=asyncio.FIRST_COMPLETED,
                )
                if generation in done:
                    break
                for ticker in done:
                    kind = tickers.pop(ticker)
                    if kind == "spinner":
                        spinner_index = (spinner_index + 1) % len(glyphs)
                        tickers[self._tick(self.ui_config.spinner_interval)] = kind
                    else:
                        text_index = (text_index + 1) % len(texts)
                        tickers[self._tick(self.ui_config.loading_text_interval)] = kind
                self.surface.draw(progress_frame())
        finally:
            self.generating = False
            for ticker in tickers:
                ticker.cancel()
            # Only reached with a pending generation if this coroutine was cancelled
            if not generation.done():
                generation.cancel()

        try:
            adventure = generation.result()
        except GenerationFailure as e:
            logger.warning("Generation failed: %s", e)
            self.surface.notify(str(e), title="Generation failed", severity="error")
            return

        self.state.set_current_adventure(adventure)
        logger.info("Generated adventure at %s", adventure.location)

    @staticmethod
    def _tick(interval: float) -> asyncio.Task:
        return asyncio.create_task(asyncio.sleep(interval))

    def menu_frame(self, selected: int) -> MenuFrame:
        settings = self.state.settings
        rows = tuple(
            MenuRow(label, getattr(settings, name).value if name else None)
            for label, name in MENU_OPTIONS
        )
        return MenuFrame(rows=rows, selected=selected)

    async def customize(self) -> None:
        """Run the settings menu until the exit row or escape is chosen."""
        selected = 0
        last = len(MENU_OPTIONS) - 1
        while True:
            self.surface.draw(self.menu_frame(selected))
            key = await self.surface.poll_key(self.ui_config.poll_interval)
            if key == "up":
                selected = max(selected - 1, 0)
            elif key == "down":
                selected = min(selected + 1, last)
            elif key == "enter":
                field_name = MENU_OPTIONS[selected][1]
                if field_name is None:
                    break
                self.state.settings.cycle(field_name)
                logger.debug("Settings now %s", self.state.settings.as_labels())
            elif key == "escape":
                break

    def save(self) -> None:
        try:
            saved = self.state.save_adventure(self.store)
        except StorageError as e:
            logger.warning("Save failed: %s", e)
            self.surface.notify(str(e), title="Save failed", severity="error")
            return

        if saved:
            self.surface.notify(f"Adventure saved to {self.store.path}.", title="Save")
        else:
            self.surface.notify("Nothing to save.", title="Save", severity="warning")

    def load(self) -> None:
        try:
            self.state.load_adventure(self.store)
        except StorageError as e:
            logger.warning("Load failed: %s", e)
            self.surface.notify(str(e), title="Load failed", severity="error")
            return

        self.surface.notify("Adventure loaded.", title="Load")
