"""Tests for the Textual terminal surface."""

import asyncio
import os
import random
import signal
import sys

import pytest
from rich.text import Text
from textual.widgets import ContentSwitcher
from textual.worker import WorkerFailed

from advgen.campaign.generator import RandomAdventureGenerator
from advgen.ui.app import AdventureApp
from advgen.ui.controller import CONTROLS
from advgen.ui.frames import (
    APP_TITLE,
    AdventureFrame,
    MenuFrame,
    MenuRow,
    ProgressFrame,
)


class GatedGenerator:
    def __init__(self, adventure):
        self.adventure = adventure
        self.gate = asyncio.Event()

    async def generate(self, settings):
        await self.gate.wait()
        return self.adventure


class BrokenGenerator:
    async def generate(self, settings):
        raise RuntimeError("table lookup exploded")


async def wait_until(predicate, timeout: float = 2.0) -> bool:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            return False
        await asyncio.sleep(0.01)
    return True


class TestFrames:
    """Tests for the declarative frames."""

    def test_menu_row_text(self):
        assert MenuRow("Genre", "SciFi").text == "Genre: SciFi"
        assert MenuRow("Save and Exit").text == "Save and Exit"

    def test_menu_selection_bounds(self):
        rows = (MenuRow("A"), MenuRow("B"))
        with pytest.raises(ValueError):
            MenuFrame(rows=rows, selected=2)

    def test_frames_compare_by_value(self):
        assert ProgressFrame(spinner="|") == ProgressFrame(spinner="|")
        assert ProgressFrame(spinner="|") != ProgressFrame(spinner="/")

    def test_default_titles(self):
        assert AdventureFrame(body="x").title == APP_TITLE
        assert MenuFrame(rows=(MenuRow("A"),), selected=0).title == "Customize Adventure Settings"


class TestAdventureAppText:
    """Tests for the Rich text helpers."""

    def test_controls_text(self):
        text = AdventureApp._controls_text(CONTROLS)
        assert text.plain == (
            "Press g to generate, c to customize, s to save, l to load, q to quit"
        )

    def test_menu_text_marks_selection(self):
        frame = MenuFrame(rows=(MenuRow("Difficulty", "Easy"), MenuRow("Save and Exit")), selected=1)
        text = AdventureApp._menu_text(frame)
        assert isinstance(text, Text)
        assert text.plain == "  Difficulty: Easy\n> Save and Exit"


class TestAdventureApp:
    """Tests driving the app with Textual's pilot."""

    @pytest.mark.asyncio
    async def test_starts_on_placeholder_and_quits(self, store, fast_ui):
        app = AdventureApp(RandomAdventureGenerator(random.Random(1)), store, ui_config=fast_ui)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert await wait_until(lambda: app.last_frame is not None)
            assert isinstance(app.last_frame, AdventureFrame)
            assert app.last_frame.is_placeholder
            assert app.query_one("#views", ContentSwitcher).current == "adventure-view"

            await pilot.press("q")
        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_generate_key(self, store, fast_ui):
        app = AdventureApp(RandomAdventureGenerator(random.Random(2)), store, ui_config=fast_ui)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("g")
            assert await wait_until(lambda: app.controller.state.current_adventure is not None)
            adventure = app.controller.state.current_adventure
            assert await wait_until(
                lambda: isinstance(app.last_frame, AdventureFrame)
                and app.last_frame.body == adventure.render()
            )
            await pilot.press("q")
        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_progress_view_while_generating(self, store, fast_ui, sample_adventure):
        generator = GatedGenerator(sample_adventure)
        app = AdventureApp(generator, store, ui_config=fast_ui)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("g")
            assert await wait_until(lambda: isinstance(app.last_frame, ProgressFrame))
            assert app.query_one("#views", ContentSwitcher).current == "progress-view"

            # Quit is held back until the adventure arrives
            await pilot.press("q")
            await pilot.pause(0.05)
            assert app.controller.generating
            assert app.return_code is None

            generator.gate.set()
            assert await wait_until(lambda: app.controller.state.current_adventure is not None)
        assert app.controller.state.current_adventure == sample_adventure
        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_customize_menu(self, store, fast_ui):
        app = AdventureApp(RandomAdventureGenerator(random.Random(3)), store, ui_config=fast_ui)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("c")
            assert await wait_until(lambda: isinstance(app.last_frame, MenuFrame))
            assert app.query_one("#views", ContentSwitcher).current == "menu-view"

            await pilot.press("down", "enter")
            assert await wait_until(lambda: app.controller.state.settings.genre.value == "SciFi")
            await pilot.press("down", "down", "enter")
            assert await wait_until(lambda: isinstance(app.last_frame, AdventureFrame))
            await pilot.press("q")
        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_session_crash_exits_with_error_code(self, store, fast_ui):
        app = AdventureApp(BrokenGenerator(), store, ui_config=fast_ui)
        with pytest.raises(WorkerFailed):
            async with app.run_test() as pilot:
                await pilot.pause()
                await pilot.press("g")
                await wait_until(lambda: app.return_code is not None)
        assert app.return_code == 1

    @pytest.mark.asyncio
    @pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX signals")
    async def test_sigterm_exits_with_signal_code(self, store, fast_ui):
        app = AdventureApp(RandomAdventureGenerator(random.Random(4)), store, ui_config=fast_ui)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert await wait_until(lambda: app.last_frame is not None)
            os.kill(os.getpid(), signal.SIGTERM)
            assert await wait_until(lambda: app.return_code is not None)
        assert app.return_code == 128 + signal.SIGTERM
