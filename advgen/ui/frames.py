"""Declarative descriptions of what the screen should show.

The session controller builds one of these per redraw and hands it to the
terminal surface, which owns the actual widgets.
"""

from dataclasses import dataclass

APP_TITLE = "Random Adventure Generator"


@dataclass(frozen=True)
class AdventureFrame:
    """Idle screen: the current adventure (or a placeholder) and the controls."""

    body: str
    is_placeholder: bool = False
    title: str = APP_TITLE
    panel_title: str = "Current Adventure"
    controls: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class ProgressFrame:
    """Shown while an adventure is being generated."""

    spinner: str
    status: str = "Generating adventure..."
    loading_text: str | None = None
    title: str = APP_TITLE


@dataclass(frozen=True)
class MenuRow:
    label: str
    value: str | None = None

    @property
    def text(self) -> str:
        return f"{self.label}: {self.value}" if self.value is not None else self.label


@dataclass(frozen=True)
class MenuFrame:
    """The settings menu with one row selected."""

    rows: tuple[MenuRow, ...]
    selected: int
    title: str = "Customize Adventure Settings"
    panel_title: str = "Options"
    hint: str = "Use Up/Down arrows to navigate, Enter to select, esc to exit"
    marker: str = "> "

    def __post_init__(self):
        if not 0 <= self.selected < len(self.rows):
            raise ValueError(f"Selected row {self.selected} out of range")


Frame = AdventureFrame | ProgressFrame | MenuFrame
