"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from yamaha.ync import Zone
from yamaha.ync.client import Client
from yamaha.ync.receiver import Receiver

PUT_OK = '<YAMAHA_AV rsp="PUT" RC="0"></YAMAHA_AV>'


def build_status(
    power="On",
    level="-300",
    mute="Off",
    subwoofer_trim="0",
    unit="dB",
    input_sel="HDMI1",
    title="HDMI1",
    program="Standard",
    straight="Off",
    enhancer="Off",
    direct="Off",
    extra_bass="Off",
    adaptive_drc="Off",
    rc="0",
) -> str:
    """Return a Basic_Status response document."""
    return (
        f'<YAMAHA_AV rsp="GET" RC="{rc}"><Main_Zone><Basic_Status>'
        f"<Power_Control><Power>{power}</Power><Sleep>Off</Sleep></Power_Control>"
        f"<Volume><Lvl><Val>{level}</Val><Exp>1</Exp><Unit>{unit}</Unit></Lvl>"
        f"<Mute>{mute}</Mute>"
        f"<Subwoofer_Trim><Val>{subwoofer_trim}</Val><Exp>1</Exp><Unit>dB</Unit></Subwoofer_Trim>"
        "</Volume>"
        f"<Input><Input_Sel>{input_sel}</Input_Sel>"
        f"<Input_Sel_Item_Info><Param>{input_sel}</Param><RW>RW</RW><Title>{title}</Title>"
        "<Icon><On>/YamahaRemoteControl/Icons/icon004.png</On><Off></Off></Icon>"
        "<Src_Name></Src_Name><Src_Number>1</Src_Number></Input_Sel_Item_Info></Input>"
        "<Surround><Program_Sel><Current>"
        f"<Straight>{straight}</Straight><Enhancer>{enhancer}</Enhancer>"
        f"<Sound_Program>{program}</Sound_Program>"
        "</Current></Program_Sel><_3D_Cinema_DSP>Auto</_3D_Cinema_DSP></Surround>"
        "<Sound_Video><Tone><Bass><Val>0</Val><Exp>1</Exp><Unit>dB</Unit></Bass></Tone>"
        f"<Pure_Direct><Mode>{direct}</Mode></Pure_Direct>"
        f"<Extra_Bass>{extra_bass}</Extra_Bass>"
        f"<Adaptive_DRC>{adaptive_drc}</Adaptive_DRC>"
        "</Sound_Video>"
        "</Basic_Status></Main_Zone></YAMAHA_AV>"
    )


def build_play_info(
    zone=Zone.USB,
    availability="Ready",
    playback="Play",
    meta="<Artist>Artist</Artist><Album>Album</Album><Song>Song</Song>",
) -> str:
    """Return a Play_Info response document for *zone*."""
    return (
        f'<YAMAHA_AV rsp="GET" RC="0"><{zone}><Play_Info>'
        f"<Feature_Availability>{availability}</Feature_Availability>"
        f"<Playback_Info>{playback}</Playback_Info>"
        f"<Meta_Info>{meta}</Meta_Info>"
        f"</Play_Info></{zone}></YAMAHA_AV>"
    )


@pytest.fixture
def make_receiver():
    """Factory fixture to create a Receiver with a mocked Client."""

    def _make_receiver(*responses: str, zone=Zone.MAIN_ZONE):
        client = MagicMock(spec=Client)
        if responses:
            client.send = AsyncMock(side_effect=list(responses))
        else:
            client.send = AsyncMock(return_value=PUT_OK)
        return Receiver(client, zone)

    return _make_receiver


@pytest.fixture
def status_xml():
    return build_status


@pytest.fixture
def play_info_xml():
    return build_play_info
