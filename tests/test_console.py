"""Tests for console.py: argument parsing, helpers, and CLI dispatch."""

import argparse
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from yamaha.ync import InputId, InvalidEnumValue, SurroundProgramId
from yamaha.ync.console import (
    auto_input,
    auto_surround_program,
    main,
    parser,
    run_state,
)

# --- Helper functions ---


def test_auto_input_valid():
    assert auto_input("NET_RADIO") is InputId.NET_RADIO


def test_auto_input_invalid():
    with pytest.raises(InvalidEnumValue):
        auto_input("NONEXISTENT")


def test_auto_surround_program_valid():
    assert auto_surround_program("2ch Stereo") is SurroundProgramId.STEREO_2CH


# --- Argument parsing ---


def test_parse_state_minimal():
    args = parser.parse_args(["state", "--host", "192.168.1.1"])
    assert args.subcommand == "state"
    assert args.host == "192.168.1.1"
    assert args.port == 80
    assert args.volume is None
    assert args.input is None
    assert args.surround_program is None
    assert args.mute is None
    assert args.monitor is False
    assert args.interval == 10.0
    assert args.power_on is None
    assert args.power_off is None


def test_parse_state_full():
    args = parser.parse_args(
        [
            "state",
            "--host",
            "10.0.0.1",
            "--port",
            "8080",
            "--volume",
            "42.5",
            "--input",
            "HDMI2",
            "--surround-program",
            "Sci-Fi",
            "--mute",
            "--monitor",
            "--interval",
            "30",
            "--power-on",
        ]
    )
    assert args.port == 8080
    assert args.volume == 42.5
    assert args.input is InputId.HDMI2
    assert args.surround_program is SurroundProgramId.SCI_FI
    assert args.mute is True
    assert args.monitor is True
    assert args.interval == 30.0
    assert args.power_on is True


def test_parse_state_no_mute():
    """--no-mute sets mute to False (not None)."""
    args = parser.parse_args(["state", "--host", "h", "--no-mute"])
    assert args.mute is False


def test_parse_state_invalid_input():
    with pytest.raises(SystemExit):
        parser.parse_args(["state", "--host", "h", "--input", "HDMI9"])


def test_parse_server_defaults():
    args = parser.parse_args(["server"])
    assert args.subcommand == "server"
    assert args.host == "localhost"
    assert args.port == 8080


# --- main() dispatch ---


@patch("yamaha.ync.console.asyncio.run")
def test_main_dispatches_state(mock_run):
    with patch.object(
        parser, "parse_args", return_value=argparse.Namespace(subcommand="state", verbose=False)
    ):
        main()
    mock_run.assert_called_once()
    mock_run.call_args.args[0].close()


@patch("yamaha.ync.console.asyncio.run")
def test_main_dispatches_server(mock_run):
    with patch.object(
        parser, "parse_args", return_value=argparse.Namespace(subcommand="server", verbose=False)
    ):
        main()
    mock_run.assert_called_once()
    mock_run.call_args.args[0].close()


def test_main_no_subcommand():
    """No subcommand → no asyncio.run called."""
    with (
        patch("yamaha.ync.console.asyncio.run") as mock_run,
        patch.object(
            parser,
            "parse_args",
            return_value=argparse.Namespace(subcommand=None, verbose=False),
        ),
    ):
        main()
    mock_run.assert_not_called()


# --- run_state ---


def _state_args(**kwargs) -> argparse.Namespace:
    values = dict(
        host="h",
        port=80,
        volume=None,
        input=None,
        surround_program=None,
        mute=None,
        monitor=False,
        interval=10.0,
        power_on=None,
        power_off=None,
    )
    values.update(kwargs)
    return argparse.Namespace(**values)


@pytest.fixture
def mock_receiver():
    receiver = MagicMock()
    receiver.get_state = AsyncMock()
    receiver.get_play_info = AsyncMock()
    receiver.set_power = AsyncMock()
    receiver.set_volume = AsyncMock()
    receiver.set_muted = AsyncMock()
    receiver.set_input = AsyncMock()
    receiver.set_surround_program = AsyncMock()
    return receiver


@pytest.fixture
def patched(mock_receiver):
    with (
        patch("yamaha.ync.console.Client", return_value=MagicMock()),
        patch("yamaha.ync.console.ClientContext") as mock_ctx,
        patch("yamaha.ync.console.Receiver", return_value=mock_receiver),
        patch("yamaha.ync.console.print_state") as mock_print,
    ):
        mock_ctx.return_value.__aenter__ = AsyncMock()
        mock_ctx.return_value.__aexit__ = AsyncMock(return_value=False)
        yield mock_print


async def test_run_state_basic(mock_receiver, patched):
    """run_state() queries and prints the state without writing."""
    await run_state(_state_args())

    assert mock_receiver.get_state.await_count == 2
    patched.assert_called_once_with(
        mock_receiver.get_state.return_value, mock_receiver.get_play_info.return_value
    )
    mock_receiver.set_power.assert_not_awaited()
    mock_receiver.set_volume.assert_not_awaited()
    mock_receiver.set_muted.assert_not_awaited()
    mock_receiver.set_input.assert_not_awaited()


async def test_run_state_with_writes(mock_receiver, patched):
    """run_state() applies the requested settings."""
    await run_state(
        _state_args(
            volume=42.0,
            input=InputId.AV1,
            surround_program=SurroundProgramId.DRAMA,
            mute=False,
        )
    )

    mock_receiver.set_volume.assert_awaited_once_with(42.0)
    mock_receiver.set_input.assert_awaited_once_with(InputId.AV1)
    mock_receiver.set_surround_program.assert_awaited_once_with(SurroundProgramId.DRAMA)
    mock_receiver.set_muted.assert_awaited_once_with(False)


async def test_run_state_power(mock_receiver, patched):
    await run_state(_state_args(power_on=True))
    mock_receiver.set_power.assert_awaited_once_with(True)

    mock_receiver.set_power.reset_mock()
    await run_state(_state_args(power_off=True))
    mock_receiver.set_power.assert_awaited_once_with(False)
