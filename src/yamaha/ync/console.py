import argparse
import asyncio
import logging
import sys

from . import InputId, SurroundProgramId
from .client import Client, ClientContext
from .display import print_state
from .dummy import DummyServer
from .monitor import DEFAULT_UPDATE_INTERVAL, Monitor, StateReconciled
from .receiver import Receiver

_LOGGER = logging.getLogger(__name__)


def auto_input(x: str) -> InputId:
    return InputId.from_str(x)


def auto_surround_program(x: str) -> SurroundProgramId:
    return SurroundProgramId.from_str(x)


parser = argparse.ArgumentParser(description="Communicate with YNC receivers.")
parser.add_argument("--verbose", action="store_true")

subparsers = parser.add_subparsers(dest="subcommand")

parser_state = subparsers.add_parser("state")
parser_state.add_argument("--host", required=True)
parser_state.add_argument("--port", default=80, type=int)
parser_state.add_argument("--volume", type=float)
parser_state.add_argument("--input", type=auto_input)
parser_state.add_argument("--surround-program", type=auto_surround_program)
parser_state.add_argument("--mute", action=argparse.BooleanOptionalAction)
parser_state.add_argument("--monitor", action="store_true")
parser_state.add_argument("--interval", default=DEFAULT_UPDATE_INTERVAL, type=float)
parser_state.add_argument("--power-on", action=argparse.BooleanOptionalAction)
parser_state.add_argument("--power-off", action=argparse.BooleanOptionalAction)

parser_server = subparsers.add_parser("server")
parser_server.add_argument("--host", default="localhost")
parser_server.add_argument("--port", default=8080, type=int)


async def run_state(args: argparse.Namespace) -> None:
    async with ClientContext(Client(args.host, args.port)) as client:
        receiver = Receiver(client)
        await receiver.get_state()

        if args.power_on:
            await receiver.set_power(True)

        if args.volume is not None:
            await receiver.set_volume(args.volume)

        if args.mute is not None:
            await receiver.set_muted(args.mute)

        if args.input is not None:
            await receiver.set_input(args.input)

        if args.surround_program is not None:
            await receiver.set_surround_program(args.surround_program)

        if args.power_off:
            await receiver.set_power(False)

        state = await receiver.get_state()
        play_info = await receiver.get_play_info()
        print_state(state, play_info)

        if args.monitor:
            monitor = Monitor(receiver, args.interval)

            def _print(event):
                if isinstance(event, StateReconciled):
                    print_state(event.state)
                else:
                    print(event)

            with monitor.listen(_print):
                async with monitor:
                    while True:
                        await monitor.wait_changed()


async def run_server(args: argparse.Namespace) -> None:
    async with DummyServer(args.host, args.port):
        while True:
            await asyncio.sleep(delay=1)


def main() -> None:
    args = parser.parse_args()

    if args.verbose:
        root = logging.getLogger()
        root.setLevel(logging.DEBUG)

        channel = logging.StreamHandler(sys.stdout)
        channel.setLevel(logging.DEBUG)
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        channel.setFormatter(formatter)
        root.addHandler(channel)

    if args.subcommand == "state":
        asyncio.run(run_state(args))
    elif args.subcommand == "server":
        asyncio.run(run_server(args))


if __name__ == "__main__":
    main()
