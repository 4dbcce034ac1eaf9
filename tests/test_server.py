import signal
import socket
import sys
import threading
import time

from labworks.client import ClientOptions, run
from labworks.protocol import Request, receive_message, send_request
from labworks.server import handle_connection, run_processor, serve


def _stub(code):
    return [sys.executable, "-c", code]


EXIT_SEVEN = _stub("import sys; sys.exit(7)")


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_run_processor_reports_exit_status():
    assert run_processor("file.txt", "FF", "#@", EXIT_SEVEN) == "replaces: 7"


def test_run_processor_passes_arguments(tmp_path):
    target = tmp_path / "args.txt"
    command = _stub(
        "import sys, pathlib; pathlib.Path(sys.argv[1]).write_text(sys.argv[2] + sys.argv[3])"
    )
    result = run_processor(str(target), "ab", "cd", command)
    assert target.read_text() == "abcd"
    assert result == "replaces: 0"


def test_run_processor_reports_signal():
    command = _stub("import os, signal; os.kill(os.getpid(), signal.SIGKILL)")
    assert run_processor("f", "FF", "#@", command) == f"killed by signal: {int(signal.SIGKILL)}"


def test_handle_connection_answers_each_file():
    left, right = socket.socketpair()
    with left, right:
        send_request(left, Request(["a.txt", "b.txt"], "FF", "#@"))
        log = []
        handled = handle_connection(right, EXIT_SEVEN, log.append)
        assert handled == 2
        assert [receive_message(left), receive_message(left)] == ["replaces: 7"] * 2
        assert "processing 'a.txt'..." in log
        assert "[+] received: b.txt" in log


def test_handle_connection_with_no_files():
    left, right = socket.socketpair()
    with left, right:
        send_request(left, Request([], "FF", "#@"))
        assert handle_connection(right, EXIT_SEVEN, None) == 0


def test_serve_answers_a_client():
    port = _free_port()
    log = []
    thread = threading.Thread(
        target=serve, args=("127.0.0.1", port, EXIT_SEVEN, log.append), daemon=True
    )
    thread.start()
    options = ClientOptions(("x.txt", "y.txt"), "FF", "#@")
    results = None
    for _ in range(100):
        try:
            results = run(options, "127.0.0.1", port)
            break
        except ConnectionRefusedError:
            time.sleep(0.05)
    assert results == ["replaces: 7", "replaces: 7"]
    assert "[+] server started" in log