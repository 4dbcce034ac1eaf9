import socket
import struct

import pytest

from labworks.protocol import (
    MAX_NAME,
    ProtocolError,
    Request,
    receive_message,
    receive_request,
    recv_exact,
    send_message,
    send_request,
)


@pytest.fixture
def pair_of_sockets():
    left, right = socket.socketpair()
    yield left, right
    left.close()
    right.close()


def test_message_wire_bytes(pair_of_sockets):
    left, right = pair_of_sockets
    send_message(left, "ab")
    left.shutdown(socket.SHUT_WR)
    data = recv_exact(right, 10)
    assert data == struct.pack("<Q", 2) + b"ab"


def test_message_round_trip(pair_of_sockets):
    left, right = pair_of_sockets
    send_message(left, "replaces: 4")
    send_message(left, "")
    assert receive_message(right) == "replaces: 4"
    assert receive_message(right) == ""


def test_request_wire_bytes(pair_of_sockets):
    left, right = pair_of_sockets
    send_request(left, Request(["a.txt"], "FF", "#@"))
    left.shutdown(socket.SHUT_WR)
    expected = struct.pack("<Q", 1) + b"FF" + b"#@" + struct.pack("<Q", 5) + b"a.txt"
    assert recv_exact(right, len(expected)) == expected


def test_request_round_trip(pair_of_sockets):
    left, right = pair_of_sockets
    request = Request(["one.txt", "two.txt"], "ab", "cd")
    send_request(left, request)
    assert receive_request(right) == request


def test_request_defaults():
    request = Request(["x"])
    assert (request.target, request.pair) == ("FF", "#@")
    assert request.filenames == ("x",)


def test_empty_request_reads_only_the_count(pair_of_sockets):
    left, right = pair_of_sockets
    send_request(left, Request([], "FF", "#@"))
    received = receive_request(right)
    assert received.filenames == ()
    assert recv_exact(right, 4) == b"FF#@"


def test_too_long_filename_is_rejected(pair_of_sockets):
    left, right = pair_of_sockets
    send_request(left, Request(["x" * (MAX_NAME + 1)]))
    with pytest.raises(ProtocolError):
        receive_request(right)


def test_filename_at_limit_is_accepted(pair_of_sockets):
    left, right = pair_of_sockets
    name = "y" * MAX_NAME
    send_request(left, Request([name]))
    assert receive_request(right).filenames == (name,)


def test_bad_pair_length_is_rejected(pair_of_sockets):
    left, _ = pair_of_sockets
    with pytest.raises(ValueError):
        send_request(left, Request(["a"], "FFF", "#@"))


def test_recv_exact_on_truncated_stream(pair_of_sockets):
    left, right = pair_of_sockets
    left.sendall(b"abc")
    left.shutdown(socket.SHUT_WR)
    with pytest.raises(ProtocolError):
        recv_exact(right, 5)


def test_truncated_message_raises(pair_of_sockets):
    left, right = pair_of_sockets
    left.sendall(struct.pack("<Q", 10) + b"short")
    left.shutdown(socket.SHUT_WR)
    with pytest.raises(ProtocolError):
        receive_message(right)