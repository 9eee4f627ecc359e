"""Enumerations and lookup tables for the YNC protocol."""

from enum import StrEnum

from .exceptions import InvalidEnumValue, UnknownInputZone


class YncEnum(StrEnum):
    """String enum whose values are the literal protocol tokens."""

    @classmethod
    def from_str(cls, value: str):
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumValue(cls.__name__, value) from None

    @classmethod
    def parse(cls, value: str):
        """Return the member for *value*, or *value* itself if unknown."""
        try:
            return cls(value)
        except ValueError:
            return value


class Command(YncEnum):
    GET = "GET"
    PUT = "PUT"


class Zone(YncEnum):
    MAIN_ZONE = "Main_Zone"
    TUNER = "Tuner"
    AIRPLAY = "AirPlay"
    SPOTIFY = "Spotify"
    IPOD_USB = "iPod_USB"
    USB = "USB"
    NET_RADIO = "NET_RADIO"
    SERVER = "SERVER"
    JUKE = "Juke"
    SYSTEM = "System"


class InputId(YncEnum):
    HDMI1 = "HDMI1"
    HDMI2 = "HDMI2"
    HDMI3 = "HDMI3"
    HDMI4 = "HDMI4"
    HDMI5 = "HDMI5"
    HDMI6 = "HDMI6"
    HDMI7 = "HDMI7"
    HDMI8 = "HDMI8"
    AV1 = "AV1"
    AV2 = "AV2"
    AV3 = "AV3"
    AV4 = "AV4"
    AV5 = "AV5"
    AV6 = "AV6"
    AUDIO1 = "AUDIO1"
    AUDIO2 = "AUDIO2"
    AUDIO3 = "AUDIO3"
    TUNER = "TUNER"
    AIRPLAY = "AirPlay"
    SPOTIFY = "Spotify"
    IPOD_USB = "IPOD_USB"
    USB = "USB"
    NET_RADIO = "NET_RADIO"
    SERVER = "SERVER"
    JUKE = "JUKE"


class SurroundProgramId(YncEnum):
    HALL_IN_MUNICH = "Hall in Munich"
    HALL_IN_VIENNA = "Hall in Vienna"
    HALL_IN_AMSTERDAM = "Hall in Amsterdam"
    CHURCH_IN_FREIBURG = "Church in Freiburg"
    CHURCH_IN_ROYAUMONT = "Church in Royaumont"
    CHAMBER = "Chamber"
    VILLAGE_VANGUARD = "Village Vanguard"
    WAREHOUSE_LOFT = "Warehouse Loft"
    CELLAR_CLUB = "Cellar Club"
    THE_ROXY_THEATRE = "The Roxy Theatre"
    THE_BOTTOM_LINE = "The Bottom Line"
    SPORTS = "Sports"
    ACTION_GAME = "Action Game"
    ROLEPLAYING_GAME = "Roleplaying Game"
    MUSIC_VIDEO = "Music Video"
    RECITAL_OPERA = "Recital/Opera"
    STANDARD = "Standard"
    SPECTACLE = "Spectacle"
    SCI_FI = "Sci-Fi"
    ADVENTURE = "Adventure"
    DRAMA = "Drama"
    MONO_MOVIE = "Mono Movie"
    STEREO_2CH = "2ch Stereo"
    STEREO_7CH = "7ch Stereo"
    STEREO_9CH = "9ch Stereo"
    STRAIGHT_ENHANCER = "Straight Enhancer"
    ENHANCER_7CH = "7ch Enhancer"
    SURROUND_DECODER = "Surround Decoder"


class Playback(YncEnum):
    PLAY = "Play"
    PAUSE = "Pause"
    STOP = "Stop"
    SKIP_FWD = "Skip Fwd"
    SKIP_REV = "Skip Rev"


INPUT_ZONES: dict[InputId, Zone] = {
    InputId.HDMI1: Zone.MAIN_ZONE,
    InputId.HDMI2: Zone.MAIN_ZONE,
    InputId.HDMI3: Zone.MAIN_ZONE,
    InputId.HDMI4: Zone.MAIN_ZONE,
    InputId.HDMI5: Zone.MAIN_ZONE,
    InputId.HDMI6: Zone.MAIN_ZONE,
    InputId.HDMI7: Zone.MAIN_ZONE,
    InputId.HDMI8: Zone.MAIN_ZONE,
    InputId.AV1: Zone.MAIN_ZONE,
    InputId.AV2: Zone.MAIN_ZONE,
    InputId.AV3: Zone.MAIN_ZONE,
    InputId.AV4: Zone.MAIN_ZONE,
    InputId.AV5: Zone.MAIN_ZONE,
    InputId.AV6: Zone.MAIN_ZONE,
    InputId.AUDIO1: Zone.MAIN_ZONE,
    InputId.AUDIO2: Zone.MAIN_ZONE,
    InputId.AUDIO3: Zone.MAIN_ZONE,
    InputId.TUNER: Zone.TUNER,
    InputId.AIRPLAY: Zone.AIRPLAY,
    InputId.SPOTIFY: Zone.SPOTIFY,
    InputId.IPOD_USB: Zone.IPOD_USB,
    InputId.USB: Zone.USB,
    InputId.NET_RADIO: Zone.NET_RADIO,
    InputId.SERVER: Zone.SERVER,
    InputId.JUKE: Zone.JUKE,
}

PLAY_INFO_ZONES = frozenset(
    {
        Zone.USB,
        Zone.IPOD_USB,
        Zone.SPOTIFY,
        Zone.NET_RADIO,
        Zone.SERVER,
        Zone.JUKE,
        Zone.TUNER,
        Zone.AIRPLAY,
    }
)


def zone_for_input(value: InputId | str | None) -> Zone:
    """Return the protocol zone that owns the given input."""
    zone = INPUT_ZONES.get(value)  # type: ignore[arg-type]
    if zone is None:
        raise UnknownInputZone(value)
    return zone
