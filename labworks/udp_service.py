"""UDP service that replaces every digit in the named files with a given character."""

from __future__ import annotations

import argparse
import os
import socket
import struct
import sys
from collections.abc import Callable, Sequence

from .applog import TaggedLog
from .processor import run_transform
from .textops import replace_digits

BUF_SIZE = 128
PORT = 50002
LOG_FILE = "log.txt"
SERVER_HOST = "::"
CLIENT_HOST = "::1"

CHILD_COMMAND = (
    sys.executable,
    "-c",
    "import sys; from labworks.udp_service import main; "
    "sys.exit(main(['child', *sys.argv[1:]]))",
)

_RESPONSE = struct.Struct("<i")
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

Log = Callable[[str], object]


def _emit(log: Log | None, text: str) -> None:
    if log is not None:
        log(text)


def _decode(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode(_ENCODING, _ERRORS)


def _address(host: str, port: int, passive: bool = False):
    flags = socket.AI_PASSIVE if passive else 0
    family, _, _, _, address = socket.getaddrinfo(
        host, port, type=socket.SOCK_DGRAM, flags=flags
    )[0]
    return family, address


def handle_request(symbol: str, filename: str, command: Sequence[str] = CHILD_COMMAND) -> int:
    """Run the digit-replacing child on one file and return its exit code."""
    argv = [*command, filename, symbol]
    pid = os.posix_spawnp(argv[0], argv, os.environ)
    _, status = os.waitpid(pid, 0)
    return os.WEXITSTATUS(status)


def serve_udp(host: str = SERVER_HOST, port: int = PORT,
              command: Sequence[str] = CHILD_COMMAND, log: Log | None = None) -> None:
    """Answer requests forever: a character datagram, then a file-name datagram."""
    family, address = _address(host, port, passive=True)
    with socket.socket(family, socket.SOCK_DGRAM) as sock:
        sock.bind(address)
        _emit(log, "=== SERVER STARTED ===")
        while True:
            raw_symbol, _ = sock.recvfrom(2)
            symbol = _decode(raw_symbol)[:1]
            _emit(log, f"Replacement char received [{symbol}]")
            raw_name, client = sock.recvfrom(BUF_SIZE)
            filename = _decode(raw_name)
            _emit(log, f"File name received [{filename}]")
            _emit(log, f"Server received {len(raw_name)} bytes from ({client[0]}, {client[1]})")
            response = handle_request(symbol, filename, command)
            sock.sendto(_RESPONSE.pack(response), client)


def request(host: str = CLIENT_HOST, port: int = PORT, symbol: str = "#",
            filenames: Sequence[str] = ()) -> list[int]:
    """Ask the server to process each file; return the replacement count for each."""
    encoded = symbol.encode(_ENCODING)
    if len(symbol) != 1 or len(encoded) != 1:
        raise ValueError("first arg must be a char")
    family, address = _address(host, port)
    responses = []
    with socket.socket(family, socket.SOCK_DGRAM) as sock:
        for name in filenames:
            sock.sendto(encoded + b"\0", address)
            sock.sendto(name.encode(_ENCODING, _ERRORS), address)
            data, _ = sock.recvfrom(_RESPONSE.size)
            if len(data) != _RESPONSE.size:
                raise ValueError(f"malformed response of {len(data)} bytes")
            (response,) = _RESPONSE.unpack(data)
            print(f"response: {response}")
            responses.append(response)
    return responses


def _run_child(filename: str, symbol: str) -> int:
    if len(symbol) != 1:
        print("second arg must be a char")
        return -1
    try:
        return run_transform(
            filename,
            lambda text: replace_digits(text, symbol),
            f"{filename}-with-{symbol}.txt",
        )
    except OSError as exc:
        print(f"error: {exc}")
        return -1


def _detach() -> None:
    os.umask(0)
    os.setsid()
    devnull = os.open(os.devnull, os.O_RDWR)
    for fd in (0, 1, 2):
        os.dup2(devnull, fd)
    if devnull > 2:
        os.close(devnull)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="udp_service", description=__doc__)
    commands = parser.add_subparsers(dest="action", required=True)

    serve_parser = commands.add_parser("serve", help="run the server")
    serve_parser.add_argument("--host", default=SERVER_HOST)
    serve_parser.add_argument("--port", type=int, default=PORT)
    serve_parser.add_argument("--log", default=LOG_FILE)
    serve_parser.add_argument("--foreground", action="store_true")

    request_parser = commands.add_parser("request", help="send files to the server")
    request_parser.add_argument("symbol")
    request_parser.add_argument("files", nargs="+")
    request_parser.add_argument("--host", default=CLIENT_HOST)
    request_parser.add_argument("--port", type=int, default=PORT)

    child_parser = commands.add_parser("child", help="process one file")
    child_parser.add_argument("file")
    child_parser.add_argument("symbol")

    args = parser.parse_args(argv)

    if args.action == "child":
        return _run_child(args.file, args.symbol)

    if args.action == "request":
        try:
            request(args.host, args.port, args.symbol, args.files)
        except ValueError as exc:
            print(exc)
            return -1
        except OSError as exc:
            print(f"error: {exc}")
            return -1
        return 0

    log = TaggedLog(os.path.abspath(args.log), "<== {label}", "==> {label}")
    if not args.foreground:
        if os.fork() > 0:
            return 0
        _detach()
    serve_udp(args.host, args.port, CHILD_COMMAND, log.info)
    return 0