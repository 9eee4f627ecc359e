"""Data classes for the YNC protocol."""

from typing import Any

import attr

from .enums import InputId, SurroundProgramId


@attr.s(slots=True, frozen=True)
class VolumeState:
    current: float = attr.ib()
    muted: bool = attr.ib()
    subwoofer_trim: str = attr.ib()
    display_scale: str = attr.ib()


@attr.s(slots=True, frozen=True)
class InputState:
    selected: InputId | str = attr.ib()
    title: str = attr.ib()


@attr.s(slots=True, frozen=True)
class SurroundState:
    program: SurroundProgramId | str = attr.ib()
    straight: bool = attr.ib()
    enhancer: bool = attr.ib()


@attr.s(slots=True, frozen=True)
class SoundState:
    direct: bool = attr.ib()
    extra_bass: bool = attr.ib()
    adaptive_drc: bool = attr.ib()


@attr.s(slots=True, frozen=True)
class ReceiverState:
    """Snapshot of a Basic_Status query.

    Instances are never modified; a new status query produces a new
    snapshot which replaces the previous one as a whole.
    """

    power: bool = attr.ib()
    volume: VolumeState = attr.ib()
    input: InputState = attr.ib()
    surround: SurroundState = attr.ib()
    sound: SoundState = attr.ib()

    def to_dict(self) -> dict[str, Any]:
        return attr.asdict(self)


@attr.s(slots=True, frozen=True)
class PlayInfo:
    """Transport status and now playing metadata of a media zone."""

    available: bool = attr.ib(default=False)
    playing: bool = attr.ib(default=False)
    artist: str | None = attr.ib(default=None)
    album: str | None = attr.ib(default=None)
    track: str | None = attr.ib(default=None)

    @staticmethod
    def unavailable() -> "PlayInfo":
        return PlayInfo()

    def to_dict(self) -> dict[str, Any]:
        return {
            "available": self.available,
            "playing": self.playing,
            "artist": self.artist,
            "album": self.album,
            "track": self.track,
        }
