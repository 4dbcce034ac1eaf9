"""Wire format shared by the file-processing client and server.

A request is the number of files, the two-byte target pair, the two-byte
replacement pair, then each file name as a length followed by its bytes.
Each answer is a length followed by the message bytes. Lengths are unsigned
64-bit little-endian integers.
"""

from __future__ import annotations

import socket
import struct
from collections.abc import Sequence
from dataclasses import dataclass

HOST = "127.0.0.1"
PORT = 5000
MAX_NAME = 256
PAIR_SIZE = 2
DEFAULT_TARGET = "FF"
DEFAULT_PAIR = "#@"

_LENGTH = struct.Struct("<Q")
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class ProtocolError(ConnectionError):
    """Raised when the peer sends a malformed or truncated message."""


@dataclass(frozen=True)
class Request:
    """Files to process and the pair replacement to apply to them."""

    filenames: Sequence[str]
    target: str = DEFAULT_TARGET
    pair: str = DEFAULT_PAIR

    def __post_init__(self):
        object.__setattr__(self, "filenames", tuple(self.filenames))


def _encode(text: str) -> bytes:
    return text.encode(_ENCODING, _ERRORS)


def _decode(data: bytes) -> str:
    return data.decode(_ENCODING, _ERRORS)


def _encode_pair(name: str, value: str) -> bytes:
    data = _encode(value)
    if len(data) != PAIR_SIZE:
        raise ValueError(f"{name} must be exactly {PAIR_SIZE} bytes, got {value!r}")
    return data


def recv_exact(sock: socket.socket, size: int) -> bytes:
    """Read exactly ``size`` bytes; raise ProtocolError if the stream ends first."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = sock.recv(remaining)
        if not chunk:
            raise ProtocolError(f"connection closed with {remaining} of {size} bytes unread")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _recv_length(sock: socket.socket) -> int:
    (length,) = _LENGTH.unpack(recv_exact(sock, _LENGTH.size))
    return length


def _frame(data: bytes) -> bytes:
    return _LENGTH.pack(len(data)) + data


def send_request(sock: socket.socket, request: Request) -> None:
    """Send a request to the server."""
    parts = [
        _LENGTH.pack(len(request.filenames)),
        _encode_pair("target", request.target),
        _encode_pair("pair", request.pair),
    ]
    parts.extend(_frame(_encode(name)) for name in request.filenames)
    sock.sendall(b"".join(parts))


def receive_request(sock: socket.socket) -> Request:
    """Read a request; a request with no files carries no pairs either."""
    count = _recv_length(sock)
    if count == 0:
        return Request((), "", "")
    target = _decode(recv_exact(sock, PAIR_SIZE))
    pair = _decode(recv_exact(sock, PAIR_SIZE))
    filenames = []
    for _ in range(count):
        length = _recv_length(sock)
        if length > MAX_NAME:
            raise ProtocolError(f"filename is too long ({length} > {MAX_NAME} bytes)")
        filenames.append(_decode(recv_exact(sock, length)))
    return Request(filenames, target, pair)


def send_message(sock: socket.socket, text: str) -> None:
    """Send one length-prefixed text message."""
    sock.sendall(_frame(_encode(text)))


def receive_message(sock: socket.socket) -> str:
    """Read one length-prefixed text message."""
    return _decode(recv_exact(sock, _recv_length(sock)))