"""A TCP server that hands each client to a worker thread."""

from __future__ import annotations

import socket
import sys
import threading
from typing import Callable

from .socket_client import close_socket
from .thread_pool import ThreadPool

ReadCallback = Callable[[socket.socket, bytes], bytes]
CloseCallback = Callable[[socket.socket], object]

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_CLIENT_TIMEOUT = 0.1


def _set_reuse(sock: socket.socket) -> None:
    if sys.platform == "win32":
        options = ["SO_REUSEADDR", "SO_EXCLUSIVEADDRUSE"]
    elif hasattr(socket, "SO_REUSEPORT"):
        options = ["SO_REUSEPORT"]
    else:
        options = ["SO_REUSEADDR"]
    for name in options:
        option = getattr(socket, name, None)
        if option is None:
            continue
        try:
            sock.setsockopt(socket.SOL_SOCKET, option, 1)
        except OSError:
            pass


class SocketServer:
    """Listen on an IPv4 TCP port and serve clients through callbacks.

    Construction never raises: if binding or listening fails the error
    number is kept in :attr:`error` and the server is inactive.
    """

    def __init__(
        self,
        port: int,
        buffer_size: int = 1024,
        max_client_count: int = 5,
        local_only: bool = True,
    ) -> None:
        self._buffer_size = buffer_size
        self._max_client_count = max_client_count
        self._local_only = local_only
        self._thread_pool = ThreadPool(max_client_count)
        self._error: int | None = None
        self._socket: socket.socket | None = None

        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError:
            return
        _set_reuse(sock)

        host = "127.0.0.1" if local_only else ""
        try:
            sock.bind((host, port))
            sock.listen(max_client_count)
        except (OSError, OverflowError) as error:
            self._error = getattr(error, "errno", None) or -1
            close_socket(sock)
            return

        self._socket = sock

    def accept(
        self,
        callback: ReadCallback,
        close_callback: CloseCallback | None = None,
        keep_alive: bool = False,
    ) -> None:
        """Wait for one client and serve it on a worker thread.

        ``callback`` receives the client socket and the bytes read once the
        client pauses; a non-empty return value is sent back. Without
        ``keep_alive`` the connection ends after the first exchange.
        ``close_callback`` is called with the client socket before it is
        closed.
        """
        if self._socket is None:
            return
        try:
            client, _ = self._socket.accept()
        except OSError:
            return

        def serve(should_stop: threading.Event) -> None:
            self._handle_client(client, keep_alive, should_stop, callback)
            if close_callback is not None:
                close_callback(client)
            close_socket(client)

        self._thread_pool.enqueue(serve)

    def send(self, sock: socket.socket, data: bytes | bytearray | str) -> None:
        """Send ``data`` to ``sock``; strings are encoded as UTF-8."""
        if isinstance(data, str):
            data = data.encode(_ENCODING, _ERRORS)
        try:
            sock.sendall(data)
        except OSError:
            pass

    def shutdown(self) -> None:
        """Stop the workers and close the listening socket."""
        self._thread_pool.stop()
        close_socket(self._socket)
        self._socket = None

    @property
    def error(self) -> int | None:
        """The error number from binding or listening, or ``None``."""
        return self._error

    def is_listening(self) -> bool:
        """Return whether binding and listening succeeded."""
        return self._error is None

    def is_active(self) -> bool:
        """Return whether the listening socket is open."""
        return self._socket is not None

    def _handle_client(
        self,
        client: socket.socket,
        keep_alive: bool,
        should_stop: threading.Event,
        callback: ReadCallback,
    ) -> None:
        data = bytearray()
        try:
            client.settimeout(_CLIENT_TIMEOUT)
        except OSError:
            return

        while not should_stop.is_set():
            timed_out = False
            chunk = b""
            try:
                chunk = client.recv(self._buffer_size)
            except socket.timeout:
                timed_out = True
            except OSError:
                pass

            if chunk:
                data.extend(chunk)
                continue

            if data:
                reply = callback(client, bytes(data))
                if reply:
                    self.send(client, reply)
                data.clear()
                if not keep_alive:
                    break

            if timed_out:
                continue

            close_socket(client)
            break