"""File-name exchange between a client and a processing server over a named pipe.

Each frame is a 32-bit little-endian length, the message bytes and a NUL byte.
The end of the stream, or an empty message, ends a conversation turn.
"""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable, Iterator, Sequence
from typing import BinaryIO

from .batch import spawn_processors
from .server import PROCESSOR_COMMAND

FIFO_PATH = "/tmp/my_fifo"

_LENGTH = struct.Struct("<i")
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def write_frames(stream: BinaryIO, messages: Iterable[str]) -> None:
    """Write each message as one frame."""
    for message in messages:
        data = message.encode(_ENCODING, _ERRORS)
        stream.write(_LENGTH.pack(len(data)) + data + b"\0")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_frames(stream: BinaryIO) -> Iterator[str]:
    """Yield messages until the stream ends or an empty message arrives."""
    while True:
        header = _read_exact(stream, _LENGTH.size)
        if not header:
            return
        if len(header) < _LENGTH.size:
            raise ValueError("truncated frame header")
        (length,) = _LENGTH.unpack(header)
        if length < 0:
            raise ValueError(f"negative frame length {length}")
        body = _read_exact(stream, length + 1)
        if len(body) < length + 1:
            raise ValueError("truncated frame body")
        message = body[:length].split(b"\0", 1)[0].decode(_ENCODING, _ERRORS)
        if not message:
            return
        yield message


def _ensure_fifo(path) -> None:
    try:
        os.mkfifo(path, 0o666)
    except FileExistsError:
        pass


def client_exchange(fifo_path, filenames: Sequence[str]) -> list[str]:
    """Send file names through the pipe, then collect the server's replies."""
    _ensure_fifo(fifo_path)
    with open(fifo_path, "wb") as out:
        write_frames(out, filenames)
    results = []
    with open(fifo_path, "rb") as inp:
        for message in read_frames(inp):
            print(f"message from server: {message}")
            results.append(message)
    return results


def server_exchange(fifo_path, command: Sequence[str] = PROCESSOR_COMMAND) -> list[str]:
    """Receive file names, process each one in turn and reply with its outcome."""
    _ensure_fifo(fifo_path)
    filenames = []
    with open(fifo_path, "rb") as inp:
        for message in read_frames(inp):
            print(f"message from client: {message}")
            filenames.append(message)
    results = []
    with open(fifo_path, "wb") as out:
        for name in filenames:
            (status,) = spawn_processors([name], command)
            result = f"child's {status}"
            write_frames(out, [result])
            out.flush()
            results.append(result)
    return results