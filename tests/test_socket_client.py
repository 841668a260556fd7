import socket

import pytest

from wolvlib.socket_client import SocketClient, SocketType, close_socket


@pytest.fixture
def tcp_server():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    server.settimeout(5)
    yield server
    server.close()


@pytest.fixture
def udp_server():
    server = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    server.bind(("127.0.0.1", 0))
    server.settimeout(5)
    yield server
    server.close()


def _closed_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_socket_type_values():
    assert SocketType(0) is SocketType.TCP
    assert SocketType(1) is SocketType.UDP


def test_new_client_is_not_connected():
    client = SocketClient()
    assert client.is_connected() is False
    assert client.read_bytes() == b""
    assert client.read_string() == ""


def test_connect_and_exchange_bytes(tcp_server):
    port = tcp_server.getsockname()[1]
    with SocketClient(SocketType.TCP) as client:
        client.connect("127.0.0.1", port)
        assert client.is_connected()
        conn, _ = tcp_server.accept()
        with conn:
            conn.settimeout(5)
            client.write_bytes(b"\x01\x02\x03")
            assert conn.recv(16) == b"\x01\x02\x03"
            conn.sendall(b"hello")
            assert client.read_bytes() == b"hello"


def test_exchange_strings(tcp_server):
    port = tcp_server.getsockname()[1]
    client = SocketClient()
    client.connect("127.0.0.1", port)
    conn, _ = tcp_server.accept()
    with conn:
        conn.settimeout(5)
        client.write_string("Hello World")
        assert conn.recv(64) == b"Hello World"
        conn.sendall("grüße".encode("utf-8"))
        assert client.read_string() == "grüße"
    client.disconnect()


def test_read_respects_size(tcp_server):
    port = tcp_server.getsockname()[1]
    client = SocketClient()
    client.connect("127.0.0.1", port)
    conn, _ = tcp_server.accept()
    with conn:
        conn.sendall(b"abcdef")
        first = client.read_bytes(2)
        assert first == b"ab"
    client.disconnect()


def test_connect_to_closed_port_fails():
    client = SocketClient()
    client.connect("127.0.0.1", _closed_port())
    assert client.is_connected() is False
    client.disconnect()


def test_connect_with_invalid_address_fails():
    client = SocketClient()
    client.connect("not-an-address", 80)
    assert client.is_connected() is False


def test_disconnect_clears_connection(tcp_server):
    port = tcp_server.getsockname()[1]
    client = SocketClient()
    client.connect("127.0.0.1", port)
    assert client.is_connected()
    client.disconnect()
    assert client.is_connected() is False
    assert client.read_bytes() == b""


def test_context_manager_disconnects(tcp_server):
    port = tcp_server.getsockname()[1]
    with SocketClient() as client:
        client.connect("127.0.0.1", port)
        assert client.is_connected()
    assert client.is_connected() is False


def test_udp_client_sends_datagram(udp_server):
    port = udp_server.getsockname()[1]
    with SocketClient(SocketType.UDP) as client:
        client.connect("127.0.0.1", port)
        assert client.is_connected()
        client.write_string("datagram")
        data, _ = udp_server.recvfrom(64)
        assert data == b"datagram"


def test_close_socket_closes_handle():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    close_socket(sock)
    assert sock.fileno() == -1
    close_socket(sock)
    close_socket(None)
    assert sock.fileno() == -1