"""Client for the YNC XML control protocol of networked AV receivers."""

from .dataclasses import (
    InputState,
    PlayInfo,
    ReceiverState,
    SoundState,
    SurroundState,
    VolumeState,
)
from .enums import (
    INPUT_ZONES,
    PLAY_INFO_ZONES,
    Command,
    InputId,
    Playback,
    SurroundProgramId,
    YncEnum,
    Zone,
    zone_for_input,
)
from .exceptions import (
    InvalidEnumValue,
    InvalidLine,
    NotStartedException,
    ProtocolParseError,
    ProtocolRejected,
    TransportFailure,
    UnknownInputZone,
    YncException,
)
from .protocol import Request, parse_play_info, parse_response, parse_state
from .volume import (
    VOLUME_MAX,
    VOLUME_OFFSET,
    VOLUME_STEP,
    device_units_to_percent,
    percent_to_device_units,
)

__all__ = [
    "INPUT_ZONES",
    "PLAY_INFO_ZONES",
    "VOLUME_MAX",
    "VOLUME_OFFSET",
    "VOLUME_STEP",
    "Command",
    "InputId",
    "InputState",
    "InvalidEnumValue",
    "InvalidLine",
    "NotStartedException",
    "PlayInfo",
    "Playback",
    "ProtocolParseError",
    "ProtocolRejected",
    "ReceiverState",
    "Request",
    "SoundState",
    "SurroundProgramId",
    "SurroundState",
    "TransportFailure",
    "UnknownInputZone",
    "VolumeState",
    "YncEnum",
    "YncException",
    "Zone",
    "device_units_to_percent",
    "parse_play_info",
    "parse_response",
    "parse_state",
    "percent_to_device_units",
    "zone_for_input",
]
