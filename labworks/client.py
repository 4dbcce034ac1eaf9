"""Client that asks the processing server to replace a character pair in files."""

from __future__ import annotations

import getopt
import socket
import sys
from dataclasses import dataclass

from .protocol import (
    DEFAULT_PAIR,
    DEFAULT_TARGET,
    HOST,
    PAIR_SIZE,
    PORT,
    Request,
    receive_message,
    send_request,
)

MAX_FILES = 16

HELP = (
    "Usage: client [OPTION]... -f [FILE]...\n\n"
    "\t-t    target chars pair\n"
    "\t-p    chars pair to replace\n"
    "\t-f    file to process\n"
    "\t-h    print this message\n"
)


class UsageError(Exception):
    """Raised when the command line cannot be used; ``status`` is the exit status."""

    def __init__(self, message: str = "", status: int = -1):
        super().__init__(message)
        self.status = status


@dataclass(frozen=True)
class ClientOptions:
    """What the client asks the server to do."""

    filenames: tuple[str, ...]
    target: str = DEFAULT_TARGET
    pair: str = DEFAULT_PAIR


def _is_pair(value: str) -> bool:
    return len(value.encode("utf-8")) == PAIR_SIZE


def parse_args(argv=None) -> ClientOptions:
    """Parse ``-t PAIR -p PAIR -f FILE...``; at most MAX_FILES files are taken."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raise UsageError("", status=-1)
    try:
        opts, _ = getopt.gnu_getopt(args, "t:p:f:h")
    except getopt.GetoptError as exc:
        raise UsageError(str(exc), status=0) from exc

    target = None
    pair = None
    filenames: list[str] = []
    for opt, value in opts:
        if len(filenames) == MAX_FILES:
            break
        if opt == "-t":
            if target is not None:
                raise UsageError("duplicate key '-t'")
            target = value
        elif opt == "-p":
            if pair is not None:
                raise UsageError("duplicate key '-p'")
            pair = value
        elif opt == "-f":
            filenames.append(value)
        else:
            raise UsageError("", status=0)

    target = DEFAULT_TARGET if target is None else target
    pair = DEFAULT_PAIR if pair is None else pair
    if not (_is_pair(target) and _is_pair(pair)):
        raise UsageError("wrong keys")
    return ClientOptions(tuple(filenames), target, pair)


def run(options: ClientOptions, host: str = HOST, port: int = PORT) -> list[str]:
    """Send the files to the server and return its answer for each one."""
    print("connecting to server...")
    with socket.create_connection((host, port)) as sock:
        print("[+] connected successfully")
        for name in options.filenames:
            print(f"sending file '{name}' to server...")
        send_request(sock, Request(options.filenames, options.target, options.pair))
        print("[+] files sent")
        results = []
        for _ in options.filenames:
            print("reading data from server...")
            message = receive_message(sock)
            print(f"[+] received: {message}")
            results.append(message)
    return results


def main(argv=None) -> int:
    try:
        options = parse_args(argv)
    except UsageError as exc:
        if str(exc):
            print(exc)
        print(HELP, end="")
        return exc.status
    try:
        run(options)
    except (OSError, ValueError) as exc:
        print(f"[error] {exc}")
        return -1
    return 0