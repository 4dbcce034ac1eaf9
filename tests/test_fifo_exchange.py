import io
import os
import stat
import sys
from concurrent.futures import ThreadPoolExecutor

import pytest

from labworks.fifo_exchange import (
    client_exchange,
    read_frames,
    server_exchange,
    write_frames,
)


def test_write_frames_wire_format():
    buffer = io.BytesIO()
    write_frames(buffer, ["ab"])
    assert buffer.getvalue() == b"\x02\x00\x00\x00ab\x00"


def test_round_trip():
    messages = ["first.txt", "second file.txt", "тест.txt"]
    buffer = io.BytesIO()
    write_frames(buffer, messages)
    buffer.seek(0)
    assert list(read_frames(buffer)) == messages


def test_empty_message_ends_reading():
    buffer = io.BytesIO()
    write_frames(buffer, ["a", "", "b"])
    buffer.seek(0)
    assert list(read_frames(buffer)) == ["a"]


def test_empty_stream_yields_nothing():
    assert list(read_frames(io.BytesIO())) == []


def test_truncated_body_raises():
    with pytest.raises(ValueError):
        list(read_frames(io.BytesIO(b"\x05\x00\x00\x00ab")))


def test_truncated_header_raises():
    with pytest.raises(ValueError):
        list(read_frames(io.BytesIO(b"\x05\x00")))


def test_client_and_server_exchange(tmp_path):
    fifo = tmp_path / "fifo"
    command = (sys.executable, "-c", "import sys; sys.exit(3)")
    with ThreadPoolExecutor(max_workers=1) as pool:
        server = pool.submit(server_exchange, fifo, command)
        client_results = client_exchange(fifo, ["one.txt", "two.txt"])
        server_results = server.result(timeout=60)
    assert client_results == ["child's return status: 3"] * 2
    assert server_results == client_results
    assert stat.S_ISFIFO(os.stat(fifo).st_mode)