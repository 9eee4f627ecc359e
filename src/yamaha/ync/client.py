"""Async HTTP transport for the YNC protocol.

Provides the Transport protocol used by the Receiver and Client, the
aiohttp implementation posting request documents to the receiver's
control endpoint. Use ClientContext as an async context manager to handle
the session lifecycle.
"""

import logging
from typing import Protocol

import aiohttp

from .exceptions import NotStartedException, TransportFailure, YncException

_LOGGER = logging.getLogger(__name__)
_REQUEST_TIMEOUT = 10.0

CONTROL_PATH = "/YamahaRemoteControl/ctrl"


class Transport(Protocol):
    async def send(self, body: str) -> str: ...


class Client:
    """HTTP client for a single receiver.

    Args:
        host: Hostname or IP address of the receiver.
        port: HTTP port (default 80).
        session: Optional shared aiohttp session. When given, the client
            never closes it.
        timeout: Total timeout in seconds for one exchange.
    """

    def __init__(
        self,
        host: str,
        port: int = 80,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float = _REQUEST_TIMEOUT,
    ) -> None:
        self._host = host
        self._port = port
        self._session = session
        self._owns_session = False
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def url(self) -> str:
        return f"http://{self._host}:{self._port}{CONTROL_PATH}"

    @property
    def started(self) -> bool:
        return self._session is not None

    async def start(self) -> None:
        """Create the HTTP session unless one was supplied."""
        if self._owns_session:
            raise YncException("Already started")
        if self._session is None:
            _LOGGER.debug("Opening session for %s", self.url)
            self._session = aiohttp.ClientSession()
            self._owns_session = True

    async def stop(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None:
            try:
                await self._session.close()
            finally:
                self._session = None
                self._owns_session = False

    async def send(self, body: str) -> str:
        """POST one request document and return the response document."""
        if self._session is None:
            raise NotStartedException()

        _LOGGER.debug("Requesting %s", body)
        try:
            async with self._session.post(
                self.url,
                data=body,
                headers={"Content-Type": "text/xml"},
                timeout=self._timeout,
            ) as response:
                response.raise_for_status()
                text = await response.text()
        except aiohttp.ClientError as exception:
            raise TransportFailure(f"Request to {self.url} failed: {exception}") from exception
        except TimeoutError as exception:
            raise TransportFailure(f"Request to {self.url} timed out") from exception

        _LOGGER.debug("Response %s", text)
        return text


class ClientContext:
    """Async context manager that starts and stops a Client.

    Usage::

        async with ClientContext(Client("192.168.1.20")) as client:
            receiver = Receiver(client)
            await receiver.get_state()
    """

    def __init__(self, client: Client):
        self._client = client

    async def __aenter__(self) -> Client:
        await self._client.start()
        return self._client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._client.stop()
