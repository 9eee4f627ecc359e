"""Request encoding and response decoding for the YNC protocol.

Every exchange is a single XML document. Requests look like::

    <YAMAHA_AV cmd="PUT"><Main_Zone><Power_Control><Power>On</Power>
    </Power_Control></Main_Zone></YAMAHA_AV>

and responses mirror the request with the value nodes populated and a
return code in the ``RC`` attribute of the root element.
"""

import html
import logging
import re
from typing import Any

import attr
from defusedxml import DefusedXmlException, ElementTree

from .dataclasses import InputState, PlayInfo, ReceiverState, SoundState, SurroundState, VolumeState
from .enums import Command, InputId, Playback, SurroundProgramId, Zone
from .exceptions import InvalidLine, ProtocolParseError, ProtocolRejected
from .volume import device_units_to_percent, percent_to_device_units

_LOGGER = logging.getLogger(__name__)

ROOT_TAG = "YAMAHA_AV"
GET_PARAM = "GetParam"

BASIC_STATUS_GET = f"<Basic_Status>{GET_PARAM}</Basic_Status>"
PLAY_INFO_GET = f"<Play_Info>{GET_PARAM}</Play_Info>"

# Alternative tag names for the same metadata across media zones.
ARTIST_OPTIONS = ("Artist", "Program_Type")
ALBUM_OPTIONS = ("Album", "Radio_Text_A")
TRACK_OPTIONS = ("Song", "Track", "Radio_Text_B")


@attr.s(slots=True, frozen=True)
class Request:
    """A command envelope, optionally scoped to a zone."""

    cmd: Command = attr.ib()
    zone: Zone | None = attr.ib()
    body: str = attr.ib()

    def to_xml(self) -> str:
        payload = self.body
        if self.zone is not None:
            payload = f"<{self.zone}>{payload}</{self.zone}>"
        return f'<{ROOT_TAG} cmd="{self.cmd}">{payload}</{ROOT_TAG}>'


def _on_off(value: bool) -> str:
    return "On" if value else "Off"


def encode_power(power: bool) -> str:
    state = "On" if power else "Standby"
    return f"<Power_Control><Power>{state}</Power></Power_Control>"


def encode_volume(percent: float) -> str:
    units = percent_to_device_units(percent)
    return f"<Volume><Lvl><Val>{units}</Val><Exp>1</Exp><Unit>dB</Unit></Lvl></Volume>"


def encode_mute(muted: bool) -> str:
    return f"<Volume><Mute>{_on_off(muted)}</Mute></Volume>"


def encode_input(value: InputId | str) -> str:
    value = InputId.from_str(value)
    return f"<Input><Input_Sel>{value}</Input_Sel></Input>"


def encode_surround_program(value: SurroundProgramId | str) -> str:
    value = SurroundProgramId.from_str(value)
    return (
        "<Surround><Program_Sel><Current><Straight>Off</Straight>"
        f"<Sound_Program>{value}</Sound_Program>"
        "</Current></Program_Sel></Surround>"
    )


def encode_surround_straight(straight: bool) -> str:
    return (
        "<Surround><Program_Sel><Current>"
        f"<Straight>{_on_off(straight)}</Straight>"
        "</Current></Program_Sel></Surround>"
    )


def encode_surround_enhancer(enhancer: bool) -> str:
    return (
        "<Surround><Program_Sel><Current>"
        f"<Enhancer>{_on_off(enhancer)}</Enhancer>"
        "</Current></Program_Sel></Surround>"
    )


def encode_sound_direct(direct: bool) -> str:
    return f"<Sound_Video><Direct><Mode>{_on_off(direct)}</Mode></Direct></Sound_Video>"


def encode_sound_extra_bass(extra_bass: bool) -> str:
    state = "Auto" if extra_bass else "Off"
    return f"<Sound_Video><Extra_Bass>{state}</Extra_Bass></Sound_Video>"


def encode_sound_adaptive_drc(adaptive_drc: bool) -> str:
    return f"<Sound_Video><Adaptive_DRC>{_on_off(adaptive_drc)}</Adaptive_DRC></Sound_Video>"


def encode_playback(action: Playback | str) -> str:
    action = Playback.from_str(action)
    return f"<Play_Control><Playback>{action}</Playback></Play_Control>"


def encode_line(line: int) -> str:
    if line < 1:
        raise InvalidLine(line)
    return f"<List_Control><Direct_Sel>Line_{line}</Direct_Sel></List_Control>"


def _fromstring(data: str) -> Any:
    try:
        return ElementTree.fromstring(data)
    except ElementTree.ParseError:
        _LOGGER.debug("Device provided corrupt xml, trying with ampersand replacement")
        data = re.sub(r"&(?![A-Za-z]+[0-9]*;|#[0-9]+;|#x[0-9a-fA-F]+;)", r"&amp;", data)
        return ElementTree.fromstring(data)


def parse_response(data: str, request: str | None = None) -> Any:
    """Parse a response document and check its return code.

    Raises ProtocolParseError for anything that is not a YNC document and
    ProtocolRejected when the receiver reports a non-zero return code.
    """
    try:
        root = _fromstring(data)
    except (ElementTree.ParseError, DefusedXmlException) as exception:
        raise ProtocolParseError(f"Invalid xml in response: {data!r}") from exception

    if root.tag != ROOT_TAG:
        raise ProtocolParseError(f"Unexpected root element {root.tag!r}")

    rc = root.get("RC")
    if rc is not None and rc != "0":
        _LOGGER.debug("Request %s rejected with RC=%s", request, rc)
        raise ProtocolRejected(rc, request)
    return root


def _find(element: Any, path: str) -> Any:
    node = element.find(path)
    if node is None:
        raise ProtocolParseError(f"Missing node {path!r}")
    return node


def _text(element: Any, path: str) -> str:
    return (_find(element, path).text or "").strip()


def _first_text(element: Any, names: tuple[str, ...]) -> str | None:
    for name in names:
        node = element.find(name)
        if node is not None and node.text is not None:
            # net radio and tuner metadata arrive entity escaped
            return html.unescape(node.text).strip()
    return None


def parse_state(data: str, zone: Zone = Zone.MAIN_ZONE) -> ReceiverState:
    """Decode a Basic_Status response into a ReceiverState."""
    root = parse_response(data)
    status = _find(root, f"{zone}/Basic_Status")

    level = _text(status, "Volume/Lvl/Val")
    try:
        units = int(level)
    except ValueError as exception:
        raise ProtocolParseError(f"Invalid volume level {level!r}") from exception

    return ReceiverState(
        power=_text(status, "Power_Control/Power") == "On",
        volume=VolumeState(
            current=device_units_to_percent(units),
            muted=_text(status, "Volume/Mute") == "On",
            subwoofer_trim=_text(status, "Volume/Subwoofer_Trim/Val"),
            display_scale=_text(status, "Volume/Lvl/Unit"),
        ),
        input=InputState(
            selected=InputId.parse(_text(status, "Input/Input_Sel")),
            title=_text(status, "Input/Input_Sel_Item_Info/Title"),
        ),
        surround=SurroundState(
            program=SurroundProgramId.parse(
                _text(status, "Surround/Program_Sel/Current/Sound_Program")
            ),
            straight=_text(status, "Surround/Program_Sel/Current/Straight") == "On",
            enhancer=_text(status, "Surround/Program_Sel/Current/Enhancer") == "On",
        ),
        sound=SoundState(
            direct=_text(status, "Sound_Video/Pure_Direct/Mode") == "On",
            extra_bass=_text(status, "Sound_Video/Extra_Bass") != "Off",
            adaptive_drc=_text(status, "Sound_Video/Adaptive_DRC") != "Off",
        ),
    )


def parse_play_info(data: str, zone: Zone) -> PlayInfo:
    """Decode a Play_Info response of a media zone."""
    root = parse_response(data)
    play_info = _find(root, f"{zone}/Play_Info")
    meta_info = _find(play_info, "Meta_Info")

    if zone == Zone.TUNER:
        # tuner documents carry no Playback_Info, a tuned station is playing
        playing = True
    else:
        playing = _text(play_info, "Playback_Info") == "Play"

    return PlayInfo(
        available=_text(play_info, "Feature_Availability") == "Ready",
        playing=playing,
        artist=_first_text(meta_info, ARTIST_OPTIONS),
        album=_first_text(meta_info, ALBUM_OPTIONS),
        track=_first_text(meta_info, TRACK_OPTIONS),
    )
