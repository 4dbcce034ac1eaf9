"""Run the pair replacement over many files at once, in threads or in child processes."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .server import PROCESSOR_COMMAND
from .status import status_message
from .textops import replace_pair

BUF_SIZE = 128
PAIR = "FF"
NEW_PAIR = "#@"
OUTPUT_PREFIX = "output"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _process_one(index: int, path, old_pair: str, new_pair: str, output_dir) -> int:
    data = Path(path).read_bytes()[:BUF_SIZE]
    text, count = replace_pair(data.decode(_ENCODING, _ERRORS), old_pair, new_pair)
    output = Path(output_dir) / f"{OUTPUT_PREFIX}-{index}.txt"
    output.write_bytes(text.encode(_ENCODING, _ERRORS))
    return count


def process_concurrently(paths: Iterable, old_pair: str = PAIR, new_pair: str = NEW_PAIR,
                         output_dir=".") -> list[int]:
    """Replace pairs in every file on its own thread; return the counts in input order.

    Only the first BUF_SIZE bytes of each file are processed. The result for
    the file at position ``i`` is written to ``output-<i>.txt`` in ``output_dir``.
    """
    replace_pair("", old_pair, new_pair)
    paths = list(paths)
    if not paths:
        return []
    with ThreadPoolExecutor(max_workers=len(paths)) as pool:
        futures = [
            pool.submit(_process_one, index, path, old_pair, new_pair, output_dir)
            for index, path in enumerate(paths)
        ]
        return [future.result() for future in futures]


def _reap(pids: Iterable[int]) -> list[int]:
    statuses = []
    for pid in pids:
        _, status = os.waitpid(pid, 0)
        statuses.append(status)
    return statuses


def spawn_processors(paths: Iterable, command: Sequence[str] = PROCESSOR_COMMAND) -> list[str]:
    """Start one processor per file, all at once, then describe how each one ended."""
    pids: list[int] = []
    try:
        for path in paths:
            argv = [*command, str(path), PAIR, NEW_PAIR]
            pids.append(os.posix_spawnp(argv[0], argv, os.environ))
    except BaseException:
        _reap(pids)
        raise
    return [status_message(status) for status in _reap(pids)]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="batch", description=__doc__)
    parser.add_argument("files", nargs="*", help="files to process")
    parser.add_argument("--processes", action="store_true",
                        help="run a separate processor program for each file")
    parser.add_argument("--output-dir", default=".", help="where threaded results go")
    args = parser.parse_args(argv)
    try:
        if args.processes:
            for message in spawn_processors(args.files):
                print(f"child's {message}")
        else:
            counts = process_concurrently(args.files, output_dir=args.output_dir)
            for index, count in enumerate(counts):
                print(f"thread[{index}] returns {count}")
    except OSError as exc:
        print(f"[error] {exc}")
        return -1
    return 0