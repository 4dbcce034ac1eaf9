"""Group a file's lines by their first non-space letter and report the largest group."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from pathlib import Path

# Reading stops at the first line that does not fit this buffer.
LINE_SIZE = 1024

_USAGE = "Использование: <имя программы> <имя файла>"


def _first_letter(line: str) -> str:
    stripped = line.lstrip(" ")
    return stripped[:1].lower()


def group_by_first_letter(lines: Iterable[str]) -> dict[str, list[str]]:
    """Map each lower-cased first non-space character to the lines starting with it.

    Lines that are empty or all spaces are grouped under ``""``.
    """
    groups: dict[str, list[str]] = {}
    for line in lines:
        groups.setdefault(_first_letter(line), []).append(line)
    return groups


def largest_group(groups: Mapping[str, list[str]]) -> tuple[str, list[str]]:
    """Return the biggest group; ties go to the smallest key."""
    if not groups:
        raise ValueError("no groups to choose from")
    best_key = None
    for key in sorted(groups):
        if best_key is None or len(groups[key]) > len(groups[best_key]):
            best_key = key
    return best_key, groups[best_key]


def _read_lines(path) -> Iterable[str]:
    with open(path, encoding="utf-8", newline="\n") as handle:
        for raw in handle:
            line = raw[:-1] if raw.endswith("\n") else raw
            if len(line) >= LINE_SIZE:
                return
            yield line


def read_groups(path) -> dict[str, list[str]]:
    """Read a text file and group its lines by first letter."""
    return group_by_first_letter(_read_lines(path))


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            print(_USAGE)
            raise ValueError("Неверные аргументы!")
        _, lines = largest_group(read_groups(args[0]))
        print("Файл считан")
        target = input("Способ вывода (имя файла или 0 для вывода на экран): ").strip()
        if target == "0":
            for line in lines:
                print(line)
            print()
        else:
            Path(target).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
            print(f"Вывод сохранён в файл {target}")
    except (OSError, ValueError) as exc:
        print(exc)
        return 1
    return 0