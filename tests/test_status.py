import errno
import os

import pytest

from labworks.status import error_message, result_message, status_message


def test_error_message_format():
    message = error_message(errno.ENOENT)
    assert message == f"error {errno.ENOENT}: {os.strerror(errno.ENOENT)}\n"


@pytest.mark.parametrize("code", [0, 3, 255])
def test_status_message_exit(code):
    assert status_message(code << 8) == f"return status: {code}"


def test_status_message_signal():
    assert status_message(9) == "killed by signal: 9"


def test_status_message_core_dump():
    message = status_message(11 | 0x80)
    assert message == "killed by signal: 11 (dumped core)"


def test_status_message_stopped():
    assert status_message((19 << 8) | 0x7F) == "stopped by signal: 19"


def test_status_message_continued():
    assert status_message(0xFFFF) == "continued"


@pytest.mark.parametrize("code", [0, 5, 42])
def test_result_message_exit(code):
    assert result_message(code << 8) == f"replaces: {code}"


def test_result_message_signal_matches_status_message():
    assert result_message(15) == status_message(15)
    assert result_message(15).startswith("killed by signal: 15")