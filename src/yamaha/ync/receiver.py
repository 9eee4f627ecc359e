"""Receiver control facade.

Provides the Receiver class which keeps the last known ReceiverState of a
receiver and exposes the write and query operations of the protocol.
Zone scoped operations derive their zone from the currently selected
input, querying the receiver first when no state is cached yet.
"""

import asyncio
import logging
from typing import Any

from .client import Transport
from .dataclasses import PlayInfo, ReceiverState
from .enums import (
    PLAY_INFO_ZONES,
    Command,
    InputId,
    Playback,
    SurroundProgramId,
    Zone,
    zone_for_input,
)
from .exceptions import UnknownInputZone
from .protocol import (
    BASIC_STATUS_GET,
    PLAY_INFO_GET,
    Request,
    encode_input,
    encode_line,
    encode_mute,
    encode_playback,
    encode_power,
    encode_sound_adaptive_drc,
    encode_sound_direct,
    encode_sound_extra_bass,
    encode_surround_enhancer,
    encode_surround_program,
    encode_surround_straight,
    encode_volume,
    parse_play_info,
    parse_response,
    parse_state,
)

_LOGGER = logging.getLogger(__name__)


class Receiver:
    """Stateful client for one receiver.

    The cached state is replaced as a whole after each successful status
    query and kept unchanged when a query fails. No lock guards it: a poll
    and a command issued concurrently may both refresh it, the last one to
    complete wins.

    Usage::

        async with ClientContext(Client("192.168.1.20")) as client:
            receiver = Receiver(client)
            await receiver.set_input(InputId.HDMI1)
            state = await receiver.get_state()

    Args:
        transport: Anything with an async ``send(body) -> str``.
        zone: Zone whose Basic_Status describes the receiver.
    """

    def __init__(self, transport: Transport, zone: Zone = Zone.MAIN_ZONE) -> None:
        self._transport = transport
        self._zone = zone
        self._state: ReceiverState | None = None
        self._pending: asyncio.Future[ReceiverState] | None = None
        self._waiters = 0

    def __repr__(self) -> str:
        return f"Receiver ({self.to_dict()})"

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def zone(self) -> Zone:
        return self._zone

    @property
    def state(self) -> ReceiverState | None:
        """Return the last known state, or None if never queried."""
        return self._state

    def to_dict(self) -> dict[str, Any]:
        return {
            "zone": self._zone,
            "state": self._state.to_dict() if self._state is not None else None,
        }

    async def _request(self, cmd: Command, zone: Zone | None, body: str) -> str:
        return await self._transport.send(Request(cmd, zone, body).to_xml())

    async def _get(self, zone: Zone, body: str) -> str:
        return await self._request(Command.GET, zone, body)

    async def _put(self, zone: Zone | None, body: str) -> None:
        response = await self._request(Command.PUT, zone, body)
        parse_response(response, body)

    async def get_zone(self) -> Zone:
        """Return the zone of the currently selected input.

        Resolves from the cached state when there is one, otherwise queries
        the receiver state first.
        """
        state = self._state
        if state is None:
            state = await self.get_state()
        try:
            return zone_for_input(state.input.selected)
        except UnknownInputZone:
            _LOGGER.error("No zone known for input %s", state.input.selected)
            raise

    async def get_state(self) -> ReceiverState:
        """Query Basic_Status and replace the cached state.

        Callers arriving while a status query is in flight share its result
        instead of issuing another request. The request is cancelled once
        every caller waiting on it has been cancelled.
        """
        if self._pending is None or self._pending.done():
            self._pending = asyncio.ensure_future(self._update_state())
            self._waiters = 0
        pending = self._pending
        self._waiters += 1
        try:
            return await asyncio.shield(pending)
        finally:
            if pending is self._pending:
                self._waiters -= 1
                if self._waiters == 0 and not pending.done():
                    _LOGGER.debug("Cancelling status query without waiters")
                    pending.cancel()
                    self._pending = None

    async def _update_state(self) -> ReceiverState:
        response = await self._get(self._zone, BASIC_STATUS_GET)
        state = parse_state(response, self._zone)
        self._state = state
        return state

    async def get_play_info(self) -> PlayInfo:
        """Query now playing info of the current media zone.

        Returns an unavailable PlayInfo without a request when the current
        input does not belong to a media zone.
        """
        zone = await self.get_zone()
        if zone not in PLAY_INFO_ZONES:
            return PlayInfo.unavailable()
        response = await self._get(zone, PLAY_INFO_GET)
        return parse_play_info(response, zone)

    async def set_power(self, power: bool) -> None:
        await self._put(await self.get_zone(), encode_power(power))

    async def set_volume(self, percent: float) -> None:
        """Set volume as a 0-100 percentage."""
        await self._put(None, encode_volume(percent))

    async def set_muted(self, muted: bool) -> None:
        await self._put(None, encode_mute(muted))

    async def set_input(self, value: InputId | str) -> None:
        """Select an input. Raises InvalidEnumValue for unknown inputs."""
        body = encode_input(value)
        await self._put(await self.get_zone(), body)

    async def set_surround_program(self, value: SurroundProgramId | str) -> None:
        """Select a DSP program, turning straight decoding off."""
        body = encode_surround_program(value)
        await self._put(await self.get_zone(), body)

    async def set_surround_straight(self, straight: bool) -> None:
        await self._put(await self.get_zone(), encode_surround_straight(straight))

    async def set_surround_enhancer(self, enhancer: bool) -> None:
        await self._put(await self.get_zone(), encode_surround_enhancer(enhancer))

    async def set_sound_direct(self, direct: bool) -> None:
        await self._put(await self.get_zone(), encode_sound_direct(direct))

    async def set_sound_extra_bass(self, extra_bass: bool) -> None:
        await self._put(await self.get_zone(), encode_sound_extra_bass(extra_bass))

    async def set_sound_adaptive_drc(self, adaptive_drc: bool) -> None:
        await self._put(await self.get_zone(), encode_sound_adaptive_drc(adaptive_drc))

    async def select_line(self, line: int) -> None:
        """Select entry ``line`` of the current list (1 based)."""
        body = encode_line(line)
        await self._put(await self.get_zone(), body)

    async def playback(self, action: Playback | str) -> None:
        body = encode_playback(action)
        await self._put(await self.get_zone(), body)

    async def play(self) -> None:
        await self.playback(Playback.PLAY)

    async def pause(self) -> None:
        await self.playback(Playback.PAUSE)

    async def stop(self) -> None:
        await self.playback(Playback.STOP)

    async def next(self) -> None:
        await self.playback(Playback.SKIP_FWD)

    async def previous(self) -> None:
        await self.playback(Playback.SKIP_REV)
