"""Polling monitor keeping a local mirror of a receiver in sync.

The Monitor periodically queries the receiver state and now playing info,
reconciles them into a capability dictionary and notifies listeners of
availability changes. The delay before the next cycle depends on the
outcome of the current one: a receiver that cannot be reached is polled
every ``UNAVAILABLE_UPDATE_INTERVAL`` seconds only.
"""

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable
from contextlib import contextmanager
from enum import Enum
from typing import Any

import attr

from .dataclasses import PlayInfo, ReceiverState
from .exceptions import TransportFailure, YncException
from .receiver import Receiver

_LOGGER = logging.getLogger(__name__)

DEFAULT_UPDATE_INTERVAL = 10.0
MINIMUM_UPDATE_INTERVAL = 5.0
UNAVAILABLE_UPDATE_INTERVAL = 60.0


class MonitorPhase(Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    POLLING = "polling"
    RECONCILED = "reconciled"
    FAILED = "failed"


@attr.s(frozen=True)
class AvailabilityChanged:
    available: bool = attr.ib()


@attr.s(frozen=True)
class StateReconciled:
    state: ReceiverState = attr.ib()


@attr.s(frozen=True)
class PlayInfoReconciled:
    play_info: PlayInfo = attr.ib()


@attr.s(frozen=True)
class PowerOff:
    pass


MonitorEvent = AvailabilityChanged | StateReconciled | PlayInfoReconciled | PowerOff


class Monitor:
    """Self rescheduling poll loop for a Receiver.

    Only one poll cycle is ever outstanding: the next cycle is scheduled
    after both queries of the current one have settled.

    Usage::

        monitor = Monitor(receiver, interval=10)
        monitor.add_listener(print)
        async with monitor:
            await asyncio.sleep(3600)

    Args:
        receiver: Receiver to poll.
        interval: Poll interval in seconds while the receiver is
            available. Values below ``MINIMUM_UPDATE_INTERVAL`` are raised.
        sleep: Coroutine function used to wait between cycles.
    """

    def __init__(
        self,
        receiver: Receiver,
        interval: float = DEFAULT_UPDATE_INTERVAL,
        *,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._receiver = receiver
        self._interval = interval
        self._sleep = sleep
        self._available = True
        self._phase = MonitorPhase.IDLE
        self._capabilities: dict[str, Any] = dict()
        self._listen: set[Callable[[MonitorEvent], Any]] = set()
        self._task: asyncio.Task | None = None
        self._changed: asyncio.Event = asyncio.Event()

    async def __aenter__(self) -> "Monitor":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    @property
    def receiver(self) -> Receiver:
        return self._receiver

    @property
    def available(self) -> bool:
        return self._available

    @property
    def phase(self) -> MonitorPhase:
        return self._phase

    @property
    def capabilities(self) -> dict[str, Any]:
        return dict(self._capabilities)

    @property
    def update_interval(self) -> float:
        """Return the delay in seconds before the next poll cycle."""
        if not self._available:
            return UNAVAILABLE_UPDATE_INTERVAL
        return max(self._interval, MINIMUM_UPDATE_INTERVAL)

    def add_listener(self, listener: Callable[[MonitorEvent], Any]) -> None:
        self._listen.add(listener)

    def remove_listener(self, listener: Callable[[MonitorEvent], Any]) -> None:
        self._listen.remove(listener)

    @contextmanager
    def listen(self, listener: Callable[[MonitorEvent], Any]):
        self.add_listener(listener)
        yield self
        self.remove_listener(listener)

    def _emit(self, event: MonitorEvent) -> None:
        for listener in list(self._listen):
            try:
                listener(event)
            except Exception:
                _LOGGER.exception("Listener failed handling %s", event)

    async def wait_changed(self) -> None:
        """Wait until a poll cycle has completed.

        Cycles completed since the previous call are reported once: the
        call returns immediately and clears the pending change, so the next
        call blocks until another cycle completes.
        """
        await self._changed.wait()
        self._changed.clear()

    async def start(self) -> None:
        """Schedule the poll loop as a background task."""
        if self._task is not None:
            raise YncException("Already started")
        self._task = asyncio.create_task(self.run())

    async def stop(self) -> None:
        """Cancel the poll loop, including the requests of an in-flight cycle."""
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        self._phase = MonitorPhase.IDLE

    async def run(self) -> None:
        delay = self.update_interval
        while True:
            self._phase = MonitorPhase.SCHEDULED
            _LOGGER.debug("Next update in %s seconds", delay)
            await self._sleep(delay)
            delay = await self.poll()

    async def poll(self) -> float:
        """Run one poll cycle and return the delay before the next one."""
        self._phase = MonitorPhase.POLLING
        state, play_info = await asyncio.gather(
            self._receiver.get_state(),
            self._receiver.get_play_info(),
            return_exceptions=True,
        )
        for result in (state, play_info):
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result

        if isinstance(state, TransportFailure):
            _LOGGER.debug("Monitor failed updating device values: %s", state)
            self._set_unavailable()
            self._phase = MonitorPhase.FAILED
        elif isinstance(state, Exception):
            _LOGGER.error("Monitor received invalid device values: %s", state)
            self._phase = MonitorPhase.FAILED
        else:
            self._set_available()
            self._reconcile_state(state)
            self._phase = MonitorPhase.RECONCILED

        if isinstance(play_info, Exception):
            _LOGGER.debug("Monitor failed updating play info: %s", play_info)
        else:
            self._reconcile_play_info(play_info)

        self._changed.set()
        return self.update_interval

    def _set_available(self) -> None:
        if self._available:
            return
        _LOGGER.info("Receiver available")
        self._available = True
        self._emit(AvailabilityChanged(True))

    def _set_unavailable(self) -> None:
        if not self._available:
            return
        _LOGGER.info("Receiver unavailable")
        self._available = False
        self._capabilities["onoff"] = False
        self._emit(AvailabilityChanged(False))
        self._emit(PowerOff())

    def _reconcile_state(self, state: ReceiverState) -> None:
        self._capabilities.update(
            {
                "onoff": state.power,
                "volume_set": state.volume.current / 100,
                "volume_mute": state.volume.muted,
                "input_selected": state.input.selected,
                "surround_program": state.surround.program,
                "surround_straight": state.surround.straight,
                "surround_enhancer": state.surround.enhancer,
                "sound_direct": state.sound.direct,
                "sound_extra_bass": state.sound.extra_bass,
                "sound_adaptive_drc": state.sound.adaptive_drc,
            }
        )
        _LOGGER.debug("Monitor updated device values")
        self._emit(StateReconciled(state))

    def _reconcile_play_info(self, play_info: PlayInfo) -> None:
        self._capabilities.update(
            {
                "speaker_playing": play_info.playing,
                "speaker_artist": play_info.artist,
                "speaker_album": play_info.album,
                "speaker_track": play_info.track,
            }
        )
        self._emit(PlayInfoReconciled(play_info))
