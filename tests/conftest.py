import pytest

from advgen.config import UIConfig
from advgen.game.adventure import Adventure
from advgen.game.storage import AdventureStore


@pytest.fixture
def sample_adventure():
    return Adventure(
        location="The sunken elven city of Ael'thara",
        characters=("Elara, a half-elf ranger", "Brother Tomas", "Grizzle the goblin"),
        objective="Recover the stolen Crown of Embers",
        challenges=("Goblin raiding party", "Enchanted maze of thorns", "Cursed treasure"),
    )


@pytest.fixture
def store(tmp_path):
    return AdventureStore(tmp_path / "saved_adventure.json")


@pytest.fixture
def fast_ui():
    """UI timings short enough for tests."""
    return UIConfig(
        poll_interval=0.01,
        spinner_interval=0.01,
        loading_text_interval=0.03,
        loading_texts=["first", "second", "third"],
    )
