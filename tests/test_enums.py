"""Tests for the protocol enumerations and the input to zone table."""

import pytest

from yamaha.ync import (
    INPUT_ZONES,
    PLAY_INFO_ZONES,
    InputId,
    InvalidEnumValue,
    SurroundProgramId,
    UnknownInputZone,
    Zone,
    zone_for_input,
)


def test_input_zones_cover_every_input():
    assert set(INPUT_ZONES) == set(InputId)


@pytest.mark.parametrize(
    "value, expected",
    [
        (InputId.HDMI1, Zone.MAIN_ZONE),
        (InputId.AV6, Zone.MAIN_ZONE),
        (InputId.AUDIO2, Zone.MAIN_ZONE),
        (InputId.TUNER, Zone.TUNER),
        (InputId.AIRPLAY, Zone.AIRPLAY),
        (InputId.SPOTIFY, Zone.SPOTIFY),
        (InputId.IPOD_USB, Zone.IPOD_USB),
        (InputId.USB, Zone.USB),
        (InputId.NET_RADIO, Zone.NET_RADIO),
        (InputId.SERVER, Zone.SERVER),
        (InputId.JUKE, Zone.JUKE),
    ],
)
def test_zone_for_input(value, expected):
    assert zone_for_input(value) == expected


def test_zone_for_input_accepts_raw_token():
    assert zone_for_input("NET_RADIO") is Zone.NET_RADIO


@pytest.mark.parametrize("value", ["HDMI9", "", None])
def test_zone_for_input_unknown(value):
    with pytest.raises(UnknownInputZone):
        zone_for_input(value)


def test_play_info_zones():
    assert PLAY_INFO_ZONES == {
        Zone.USB,
        Zone.IPOD_USB,
        Zone.SPOTIFY,
        Zone.NET_RADIO,
        Zone.SERVER,
        Zone.JUKE,
        Zone.TUNER,
        Zone.AIRPLAY,
    }
    assert Zone.MAIN_ZONE not in PLAY_INFO_ZONES
    assert Zone.SYSTEM not in PLAY_INFO_ZONES


def test_zone_tokens():
    assert str(Zone.MAIN_ZONE) == "Main_Zone"
    assert str(Zone.IPOD_USB) == "iPod_USB"


def test_from_str_valid():
    assert SurroundProgramId.from_str("Hall in Munich") is SurroundProgramId.HALL_IN_MUNICH


def test_from_str_invalid():
    with pytest.raises(InvalidEnumValue) as excinfo:
        InputId.from_str("INVALID_X")
    assert excinfo.value.enum_name == "InputId"
    assert excinfo.value.value == "INVALID_X"


def test_invalid_enum_value_is_value_error():
    with pytest.raises(ValueError):
        SurroundProgramId.from_str("Nonexistent Hall")


def test_parse_keeps_unknown_values():
    assert InputId.parse("USB") is InputId.USB
    assert InputId.parse("PHONO") == "PHONO"
