"""Dummy server for development and testing.

Provides a simulated receiver serving the YNC control endpoint over HTTP
with in-memory state. Useful for integration testing and development
without physical hardware.
"""

import html
import logging
from collections.abc import Callable
from typing import Any

from aiohttp import web
from defusedxml import ElementTree

from .client import CONTROL_PATH
from .enums import PLAY_INFO_ZONES, Command, InputId, Playback, SurroundProgramId, Zone
from .protocol import ROOT_TAG

_LOGGER = logging.getLogger(__name__)

RC_OK = "0"
RC_REJECTED = "3"

Handler = Callable[[Zone | None, Any], str]


class RequestRejected(Exception):
    pass


def _on_off(value: bool) -> str:
    return "On" if value else "Off"


class DummyServer:
    """Simulated receiver for testing and development.

    Answers Basic_Status and Play_Info queries and applies the write
    commands sent by Receiver to its in-memory state. Requests without a
    handler are answered with a non-zero return code.

    Args:
        host: Bind address for the HTTP server.
        port: Port number, 0 picks a free port.
    """

    def __init__(self, host: str = "localhost", port: int = 80) -> None:
        self._host = host
        self._port = port
        self._runner: web.AppRunner | None = None
        self._handlers: dict[tuple[Command, str], Handler] = dict()

        self.power = True
        self.volume = -300
        self.muted = False
        self.subwoofer_trim = "0"
        self.input: InputId = InputId.HDMI1
        self.surround_program: SurroundProgramId = SurroundProgramId.STANDARD
        self.straight = False
        self.enhancer = False
        self.direct = False
        self.extra_bass = "Off"
        self.adaptive_drc = "Off"
        self.playback: Playback = Playback.STOP
        self.line: int | None = None
        self.artist = "Miles Davis"
        self.album = "Kind of Blue"
        self.track = "So What"

        self.app = web.Application()
        self.app.router.add_post(CONTROL_PATH, self.handle)

        self.register_handler(Command.GET, "Basic_Status", self.get_basic_status)
        self.register_handler(Command.GET, "Play_Info", self.get_play_info)
        self.register_handler(Command.PUT, "Power_Control", self.put_power_control)
        self.register_handler(Command.PUT, "Volume", self.put_volume)
        self.register_handler(Command.PUT, "Input", self.put_input)
        self.register_handler(Command.PUT, "Surround", self.put_surround)
        self.register_handler(Command.PUT, "Sound_Video", self.put_sound_video)
        self.register_handler(Command.PUT, "Play_Control", self.put_play_control)
        self.register_handler(Command.PUT, "List_Control", self.put_list_control)

    @property
    def port(self) -> int:
        """Return the bound port, resolving port 0 once started."""
        if self._runner is not None and self._runner.addresses:
            return self._runner.addresses[0][1]
        return self._port

    def register_handler(self, cmd: Command, tag: str, handler: Handler) -> None:
        self._handlers[(cmd, tag)] = handler

    async def start(self) -> None:
        self._runner = web.AppRunner(self.app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self._host, self._port)
        await site.start()
        _LOGGER.info("Dummy receiver listening on %s:%d", self._host, self.port)

    async def stop(self) -> None:
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None

    async def __aenter__(self) -> "DummyServer":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.text()
        return web.Response(text=self.process_request(body), content_type="text/xml")

    def process_request(self, body: str) -> str:
        """Return the response document for a request document."""
        try:
            root = ElementTree.fromstring(body)
            cmd = Command.from_str(root.get("cmd", ""))
            scope = root[0]
        except (ElementTree.ParseError, ValueError, IndexError):
            _LOGGER.debug("Malformed request %s", body)
            return f'<{ROOT_TAG} RC="{RC_REJECTED}"></{ROOT_TAG}>'

        zone: Zone | None
        if scope.tag == "Volume":
            zone, element = None, scope
        else:
            zone = Zone.parse(scope.tag)
            element = scope[0] if len(scope) else None

        handler = self._handlers.get((cmd, element.tag)) if element is not None else None
        if handler is None:
            _LOGGER.debug("No handler for %s", body)
            return f'<{ROOT_TAG} rsp="{cmd}" RC="{RC_REJECTED}"></{ROOT_TAG}>'

        try:
            payload = handler(zone, element)
        except RequestRejected:
            return f'<{ROOT_TAG} rsp="{cmd}" RC="{RC_REJECTED}"></{ROOT_TAG}>'

        if zone is not None:
            payload = f"<{zone}>{payload}</{zone}>"
        return f'<{ROOT_TAG} rsp="{cmd}" RC="{RC_OK}">{payload}</{ROOT_TAG}>'

    def get_basic_status(self, zone: Zone | None, element: Any) -> str:
        if zone != Zone.MAIN_ZONE:
            raise RequestRejected()
        return (
            "<Basic_Status>"
            f"<Power_Control><Power>{'On' if self.power else 'Standby'}</Power></Power_Control>"
            "<Volume>"
            f"<Lvl><Val>{self.volume}</Val><Exp>1</Exp><Unit>dB</Unit></Lvl>"
            f"<Mute>{_on_off(self.muted)}</Mute>"
            f"<Subwoofer_Trim><Val>{self.subwoofer_trim}</Val><Exp>1</Exp><Unit>dB</Unit>"
            "</Subwoofer_Trim>"
            "</Volume>"
            "<Input>"
            f"<Input_Sel>{self.input}</Input_Sel>"
            f"<Input_Sel_Item_Info><Param>{self.input}</Param><RW>RW</RW>"
            f"<Title>{self.input}</Title></Input_Sel_Item_Info>"
            "</Input>"
            "<Surround><Program_Sel><Current>"
            f"<Straight>{_on_off(self.straight)}</Straight>"
            f"<Enhancer>{_on_off(self.enhancer)}</Enhancer>"
            f"<Sound_Program>{html.escape(self.surround_program)}</Sound_Program>"
            "</Current></Program_Sel></Surround>"
            "<Sound_Video>"
            f"<Pure_Direct><Mode>{_on_off(self.direct)}</Mode></Pure_Direct>"
            f"<Extra_Bass>{self.extra_bass}</Extra_Bass>"
            f"<Adaptive_DRC>{self.adaptive_drc}</Adaptive_DRC>"
            "</Sound_Video>"
            "</Basic_Status>"
        )

    def get_play_info(self, zone: Zone | None, element: Any) -> str:
        if zone not in PLAY_INFO_ZONES:
            raise RequestRejected()
        return (
            "<Play_Info>"
            "<Feature_Availability>Ready</Feature_Availability>"
            f"<Playback_Info>{self.playback}</Playback_Info>"
            "<Meta_Info>"
            f"<Artist>{html.escape(self.artist)}</Artist>"
            f"<Album>{html.escape(self.album)}</Album>"
            f"<Song>{html.escape(self.track)}</Song>"
            "</Meta_Info>"
            "</Play_Info>"
        )

    def put_power_control(self, zone: Zone | None, element: Any) -> str:
        power = element.findtext("Power")
        if power not in ("On", "Standby"):
            raise RequestRejected()
        self.power = power == "On"
        return "<Power_Control><Power></Power></Power_Control>"

    def put_volume(self, zone: Zone | None, element: Any) -> str:
        level = element.findtext("Lvl/Val")
        if level is not None:
            self.volume = int(level)
        mute = element.findtext("Mute")
        if mute is not None:
            self.muted = mute == "On"
        return "<Volume></Volume>"

    def put_input(self, zone: Zone | None, element: Any) -> str:
        try:
            self.input = InputId(element.findtext("Input_Sel"))
        except ValueError:
            raise RequestRejected() from None
        return "<Input><Input_Sel></Input_Sel></Input>"

    def put_surround(self, zone: Zone | None, element: Any) -> str:
        current = element.find("Program_Sel/Current")
        if current is None:
            raise RequestRejected()
        straight = current.findtext("Straight")
        if straight is not None:
            self.straight = straight == "On"
        enhancer = current.findtext("Enhancer")
        if enhancer is not None:
            self.enhancer = enhancer == "On"
        program = current.findtext("Sound_Program")
        if program is not None:
            try:
                self.surround_program = SurroundProgramId(program)
            except ValueError:
                raise RequestRejected() from None
        return "<Surround></Surround>"

    def put_sound_video(self, zone: Zone | None, element: Any) -> str:
        direct = element.findtext("Direct/Mode")
        if direct is not None:
            self.direct = direct == "On"
        extra_bass = element.findtext("Extra_Bass")
        if extra_bass is not None:
            self.extra_bass = extra_bass
        adaptive_drc = element.findtext("Adaptive_DRC")
        if adaptive_drc is not None:
            self.adaptive_drc = adaptive_drc
        return "<Sound_Video></Sound_Video>"

    def put_play_control(self, zone: Zone | None, element: Any) -> str:
        if zone not in PLAY_INFO_ZONES:
            raise RequestRejected()
        try:
            action = Playback(element.findtext("Playback"))
        except ValueError:
            raise RequestRejected() from None
        if action in (Playback.PLAY, Playback.PAUSE, Playback.STOP):
            self.playback = action
        return "<Play_Control><Playback></Playback></Play_Control>"

    def put_list_control(self, zone: Zone | None, element: Any) -> str:
        selection = element.findtext("Direct_Sel") or ""
        prefix, _, line = selection.partition("_")
        if prefix != "Line" or not line.isdigit():
            raise RequestRejected()
        self.line = int(line)
        return "<List_Control></List_Control>"
