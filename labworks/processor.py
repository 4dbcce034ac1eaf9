"""Apply a text transform to a file's contents and write the result beside it.

The command's exit status is the number of replacements made, so a parent
process can read the result from the child's wait status.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path

from .applog import write_timestamped
from .textops import replace_pair

BUF_SIZE = 128
OUTPUT_PREFIX = "processed"
ERROR_LOG = "error.log"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

Transform = Callable[[str], "tuple[str, int]"]


class FileTooLargeError(ValueError):
    """Raised when an input file does not fit the processing buffer."""

    def __init__(self, path, limit: int):
        super().__init__(f"too large file: {path} (limit {limit - 1} bytes)")
        self.path = path
        self.limit = limit


def run_transform(path, transform: Transform, output_path, limit: int | None = None) -> int:
    """Read ``path``, transform its text, write it to ``output_path``; return the change count.

    With a ``limit``, a file of ``limit`` bytes or more is rejected.
    """
    data = Path(path).read_bytes()
    if limit is not None and len(data) >= limit:
        raise FileTooLargeError(path, limit)
    text, changes = transform(data.decode(_ENCODING, _ERRORS))
    Path(output_path).write_bytes(text.encode(_ENCODING, _ERRORS))
    return changes


def process_file(path, target: str, pair: str) -> int:
    """Replace ``target`` pairs with ``pair`` into ``processed-<name>`` next to the file."""
    source = Path(path)
    output = source.with_name(f"{OUTPUT_PREFIX}-{source.name}")
    return run_transform(
        source,
        lambda text: replace_pair(text, target, pair),
        output,
        BUF_SIZE,
    )


def _pair(value: str) -> str:
    if len(value) != 2:
        raise argparse.ArgumentTypeError(f"expected exactly two characters, got {value!r}")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    """Parse ``FILE TARGET PAIR``; both pairs must be two characters long."""
    parser = argparse.ArgumentParser(
        prog="processor",
        description="Replace a pair of characters in a file.",
    )
    parser.add_argument("file", help="file to process")
    parser.add_argument("target", type=_pair, help="pair of characters to find")
    parser.add_argument("pair", type=_pair, help="pair of characters to put in its place")
    return parser.parse_args(argv)


def _fail(message: str, shown: str) -> int:
    write_timestamped(ERROR_LOG, message)
    print(shown)
    return -1


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        return process_file(args.file, args.target, args.pair)
    except FileTooLargeError:
        message = "too large file"
        return _fail(message, f"[error] {message}")
    except OSError as exc:
        message = exc.strerror or str(exc)
        return _fail(message, f"[error {exc.errno}] {message}")