"""A minimal IPv4 TCP/UDP socket client."""

from __future__ import annotations

import enum
import socket
from types import TracebackType

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_DEFAULT_READ_SIZE = 0x1000


class SocketType(enum.IntEnum):
    """Transport protocol used by a :class:`SocketClient`."""

    TCP = 0
    UDP = 1


def close_socket(sock: socket.socket | None) -> None:
    """Close ``sock``, ignoring errors from an already broken socket."""
    if sock is None:
        return
    try:
        sock.close()
    except OSError:
        pass


class SocketClient:
    """Connect to an IPv4 address and exchange raw bytes or strings.

    Failures never raise: a failed connection leaves the client
    disconnected, writes on a disconnected client do nothing and failed
    reads return empty data.
    """

    def __init__(self, socket_type: SocketType = SocketType.TCP) -> None:
        self._type = SocketType(socket_type)
        self._socket: socket.socket | None = None
        self._connected = False

    def connect(self, address: str, port: int) -> None:
        """Connect to the dotted IPv4 ``address`` on ``port``."""
        self.disconnect()
        kind = socket.SOCK_STREAM if self._type is SocketType.TCP else socket.SOCK_DGRAM
        try:
            self._socket = socket.socket(socket.AF_INET, kind)
        except OSError:
            self._socket = None
            return

        try:
            host = socket.inet_ntoa(socket.inet_aton(address))
            self._socket.connect((host, port))
        except (OSError, ValueError, OverflowError, TypeError):
            self._connected = False
            return
        self._connected = True

    def disconnect(self) -> None:
        """Close the connection, if any."""
        if self._socket is not None:
            close_socket(self._socket)
            self._socket = None
        self._connected = False

    def is_connected(self) -> bool:
        """Return whether the last :meth:`connect` succeeded."""
        return self._connected

    def read_bytes(self, size: int = _DEFAULT_READ_SIZE) -> bytes:
        """Receive up to ``size`` bytes; empty on error or without a socket."""
        if self._socket is None:
            return b""
        try:
            return self._socket.recv(size)
        except OSError:
            return b""

    def read_string(self, size: int = _DEFAULT_READ_SIZE) -> str:
        """Receive up to ``size`` bytes and decode them as UTF-8."""
        return self.read_bytes(size).decode(_ENCODING, _ERRORS)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Send ``data`` if connected."""
        if not self._connected or self._socket is None:
            return
        try:
            self._socket.sendall(data)
        except OSError:
            pass

    def write_string(self, string: str) -> None:
        """Send ``string`` encoded as UTF-8 if connected."""
        self.write_bytes(string.encode(_ENCODING, _ERRORS))

    def __enter__(self) -> SocketClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.disconnect()