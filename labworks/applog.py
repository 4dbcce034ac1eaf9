"""Append-only text logs used by the servers and file processors."""

import enum
from datetime import datetime
from pathlib import Path

_TAGGED_LIMIT = 118
_LINE_LIMIT = 299


class Level(enum.IntEnum):
    """Severity of a tagged log entry; the name is the label written."""

    INFO = 0
    ERROR = 1


def _append(path, text: str) -> None:
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(text)


class TaggedLog:
    """A log file whose entries start with a per-level marker.

    A marker is a template in which ``{label}`` stands for the level name,
    for example ``"> {label}"`` or ``"!! {label} !!"``.
    """

    def __init__(self, path, info_marker: str, error_marker: str):
        self.path = Path(path)
        self._markers = {Level.INFO: info_marker, Level.ERROR: error_marker}

    def format(self, level, text: str) -> str:
        """Build one entry, cut to the entry size limit."""
        level = Level(level)
        tag = self._markers[level].format(label=level.name)
        return f"{tag}: {text}\n"[:_TAGGED_LIMIT]

    def _write(self, level: Level, text: str) -> str:
        entry = self.format(level, text)
        _append(self.path, entry)
        return entry

    def info(self, text: str) -> str:
        """Append an informational entry and return it."""
        return self._write(Level.INFO, text)

    def error(self, text: str) -> str:
        """Append an error entry and return it."""
        return self._write(Level.ERROR, text)


def append_line(path, message: str) -> str:
    """Append ``message`` and a newline, cut to the line size limit."""
    line = f"{message}\n"[:_LINE_LIMIT]
    _append(path, line)
    return line


def format_timestamped(content: str, when: datetime | None = None) -> str:
    """Build a ``[ctime]: content`` entry."""
    moment = when if when is not None else datetime.now()
    return f"[{moment.ctime()}]: {content}\n"


def write_timestamped(path, content: str, when: datetime | None = None) -> str:
    """Append a timestamped entry to ``path`` and return it."""
    entry = format_timestamped(content, when)
    _append(path, entry)
    return entry