"""TCP server that runs the pair-replacing processor on the files a client names."""

from __future__ import annotations

import argparse
import os
import socket
import sys
from collections.abc import Callable, Sequence

from .applog import write_timestamped
from .protocol import PORT, receive_request, send_message
from .status import result_message

ACTION_LOG = "./server-action.log"
BACKLOG = 10

PROCESSOR_COMMAND = (
    sys.executable,
    "-c",
    "import sys; from labworks.processor import main; sys.exit(main())",
)

Log = Callable[[str], object]


def _emit(log: Log | None, text: str) -> None:
    if log is not None:
        log(text)


def run_processor(filename: str, target: str, pair: str,
                  command: Sequence[str] = PROCESSOR_COMMAND) -> str:
    """Run the processor on one file, wait for it, and describe how it ended."""
    argv = [*command, filename, target, pair]
    pid = os.posix_spawnp(argv[0], argv, os.environ)
    _, status = os.waitpid(pid, 0)
    return result_message(status)


def handle_connection(conn: socket.socket, command: Sequence[str] = PROCESSOR_COMMAND,
                      log: Log | None = None) -> int:
    """Serve one client request; return the number of files processed."""
    _emit(log, "reading from client...")
    request = receive_request(conn)
    for name in request.filenames:
        _emit(log, f"[+] received: {name}")
    for name in request.filenames:
        _emit(log, f"processing '{name}'...")
        message = run_processor(name, request.target, request.pair, command)
        _emit(log, "[+] processed successful")
        send_message(conn, message)
        _emit(log, "[+] result sent to client")
    return len(request.filenames)


def serve(host: str, port: int, command: Sequence[str] = PROCESSOR_COMMAND,
          log: Log | None = None) -> None:
    """Accept clients forever, handling one connection at a time."""
    _emit(log, "[+] server started")
    with socket.create_server((host, port), backlog=BACKLOG) as listener:
        _emit(log, "[+] socket created")
        _emit(log, "[+] listening started")
        while True:
            conn, _ = listener.accept()
            with conn:
                _emit(log, "[+] connection accepted")
                try:
                    handle_connection(conn, command, log)
                except OSError as exc:
                    _emit(log, f"[-] connection failed: {exc}")


def _detach() -> None:
    os.umask(0)
    os.setsid()
    devnull = os.open(os.devnull, os.O_RDWR)
    for fd in (0, 1, 2):
        os.dup2(devnull, fd)
    if devnull > 2:
        os.close(devnull)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="server", description=__doc__)
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    parser.add_argument("--log", default=ACTION_LOG, help="action log file")
    parser.add_argument("--foreground", action="store_true",
                        help="do not detach from the terminal")
    args = parser.parse_args(argv)

    log_path = os.path.abspath(args.log)

    def log(text: str) -> None:
        write_timestamped(log_path, text)

    if not args.foreground:
        if os.fork() > 0:
            return 0
        _detach()
    serve(args.host, args.port, PROCESSOR_COMMAND, log)
    return 0