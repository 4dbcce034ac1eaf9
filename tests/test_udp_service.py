import socket
import sys
import threading
from pathlib import Path

import pytest

from labworks.textops import replace_digits
from labworks.udp_service import handle_request, main, request, serve_udp


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_handle_request_passes_file_then_symbol(tmp_path):
    target = tmp_path / "data.txt"
    script = (
        "import sys, pathlib; "
        "pathlib.Path(sys.argv[1] + '.args').write_text(' '.join(sys.argv[1:])); "
        "sys.exit(9)"
    )
    assert handle_request("*", str(target), (sys.executable, "-c", script)) == 9
    assert Path(f"{target}.args").read_text() == f"{target} *"


def test_handle_request_missing_program():
    with pytest.raises(FileNotFoundError):
        handle_request("*", "file.txt", ("/nonexistent/missing-program",))


def test_child_replaces_digits(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("a1b22c")
    text, count = replace_digits("a1b22c", "*")
    assert main(["child", str(source), "*"]) == count
    assert Path(f"{source}-with-*.txt").read_text() == text


def test_child_missing_file(tmp_path):
    assert main(["child", str(tmp_path / "absent.txt"), "*"]) == -1


def test_request_rejects_long_symbol():
    with pytest.raises(ValueError):
        request("127.0.0.1", 1, "ab", ["x.txt"])


def test_main_request_rejects_long_symbol(capsys):
    assert main(["request", "ab", "file.txt"]) == -1
    assert "first arg must be a char" in capsys.readouterr().out


def test_serve_and_request_round_trip():
    port = _free_port()
    ready = threading.Event()
    messages = []

    def log(text):
        messages.append(text)
        if text == "=== SERVER STARTED ===":
            ready.set()

    command = (sys.executable, "-c", "import sys; sys.exit(4)")
    server = threading.Thread(
        target=serve_udp, args=("127.0.0.1", port, command, log), daemon=True
    )
    server.start()
    assert ready.wait(10)
    assert request("127.0.0.1", port, "#", ["a.txt", "b.txt"]) == [4, 4]
    assert "Replacement char received [#]" in messages
    assert "File name received [a.txt]" in messages
    assert "File name received [b.txt]" in messages