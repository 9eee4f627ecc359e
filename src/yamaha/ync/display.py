"""Console rendering of receiver snapshots.

Uses rich when the optional ``cli`` extra is installed
(``pip install yamaha-ync[cli]``) and plain ``repr()`` output otherwise.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .dataclasses import PlayInfo, ReceiverState

NONE = "-"

Rows = list[tuple[str, object]]


def _fmt(value: object) -> str:
    if value is None:
        return NONE
    if isinstance(value, bool):
        return "On" if value else "Off"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _sections(state: ReceiverState, play_info: PlayInfo | None) -> dict[str, Rows]:
    """Group the snapshot fields by the receiver menu they belong to."""
    sections: dict[str, Rows] = {
        "General": [
            ("Power", state.power),
            ("Input", state.input.selected),
            ("Input Title", state.input.title or None),
        ],
        "Volume": [
            ("Level", f"{state.volume.current:g} %"),
            ("Mute", state.volume.muted),
            ("Subwoofer Trim", state.volume.subwoofer_trim or None),
            ("Display Scale", state.volume.display_scale or None),
        ],
        "Surround": [
            ("Program", state.surround.program),
            ("Straight", state.surround.straight),
            ("Enhancer", state.surround.enhancer),
        ],
        "Sound": [
            ("Direct", state.sound.direct),
            ("Extra Bass", state.sound.extra_bass),
            ("Adaptive DRC", state.sound.adaptive_drc),
        ],
    }
    if play_info is not None and play_info.available:
        sections["Now Playing"] = [
            ("Playing", play_info.playing),
            ("Artist", play_info.artist),
            ("Album", play_info.album),
            ("Track", play_info.track),
        ]
    return sections


def print_state(state: ReceiverState | None, play_info: PlayInfo | None = None) -> None:
    """Print *state* and *play_info* grouped by section."""
    try:
        from rich.console import Console
        from rich.table import Table
    except ImportError:
        print(repr(state))
        if play_info is not None:
            print(repr(play_info))
        return

    console = Console()
    if state is None:
        console.print("No state received")
        return

    table = Table(
        title=f"[bold]Receiver[/bold]  -  {_fmt(state.input.selected)}",
        show_header=False,
        padding=(0, 2),
    )
    table.add_column("Setting", min_width=24)
    table.add_column("Value", style="bright_white")

    for title, rows in _sections(state, play_info).items():
        table.add_row(f"[bold cyan]{title}[/bold cyan]", "", end_section=True)
        for label, value in rows:
            table.add_row(f"  {label}", _fmt(value))

    console.print(table)
