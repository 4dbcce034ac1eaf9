"""Book records: interactive entry, a compact binary file format and lookup by title."""

from __future__ import annotations

import struct
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

BOOKS_COUNT = 32

# Each record is [pages][title length][title bytes], integers as 32-bit little-endian.
_HEADER = struct.Struct("<ii")

_COUNT_PROMPT = "\nКоличество книг для ввода (0 - стоп): "
_TITLE_PROMPT = "\n[Ввод информации о книге]\nЗаголовок: "
_PAGES_PROMPT = "Кол-во страниц: "
_SAVED_NOTICE = "[Информация сохранена]"
_USAGE = "\nИспользование: <имя программы> <имя файла> [<название книги>]\n"


@dataclass
class Book:
    """A book title and its page count."""

    title: str
    pages: int


def encode_books(books: Iterable[Book]) -> bytes:
    """Serialise books into the binary record format."""
    chunks = []
    for book in books:
        title = book.title.encode("utf-8")
        chunks.append(_HEADER.pack(book.pages, len(title)))
        chunks.append(title)
    return b"".join(chunks)


def _iter_books(data: bytes) -> Iterator[Book]:
    offset = 0
    while offset < len(data):
        if offset + _HEADER.size > len(data):
            raise ValueError(f"truncated book header at offset {offset}")
        pages, length = _HEADER.unpack_from(data, offset)
        offset += _HEADER.size
        if length < 0 or offset + length > len(data):
            raise ValueError(f"truncated book title at offset {offset}")
        title = data[offset:offset + length].decode("utf-8")
        offset += length
        yield Book(title, pages)


def decode_books(data: bytes) -> list[Book]:
    """Parse every record from binary data; raise ValueError on truncation."""
    return list(_iter_books(bytes(data)))


def save_books(path, books: Iterable[Book]) -> Path:
    """Write books to ``<path>.bin`` and return the path written."""
    target = Path(f"{path}.bin")
    target.write_bytes(encode_books(books))
    return target


def find_book(path, title: str) -> Book | None:
    """Return the first book with the given title in a book file, or None."""
    data = Path(path).read_bytes()
    for book in _iter_books(data):
        if book.title == title:
            return book
    return None


def _first_word(text: str) -> str:
    words = text.split()
    return words[0] if words else ""


def _as_int(text: str) -> int | None:
    try:
        return int(_first_word(text))
    except ValueError:
        return None


def read_books(ask: Callable[[str], str], limit: int = BOOKS_COUNT) -> list[Book]:
    """Collect books by asking questions until a non-positive count or ``limit`` books."""
    books: list[Book] = []
    while len(books) < limit:
        count = _as_int(ask(_COUNT_PROMPT)) or 0
        if count <= 0:
            break
        for _ in range(count):
            title = _first_word(ask(_TITLE_PROMPT))
            pages = _as_int(ask(_PAGES_PROMPT)) or 0
            books.append(Book(title, pages))
            print(_SAVED_NOTICE)
            if len(books) == limit:
                break
    return books


def format_book(book: Book) -> str:
    """Render a book as the information block shown to the user."""
    return (
        "\n"
        "/**\n"
        " * [Информация о книге]\n"
        f" * Заголовок: {book.title}\n"
        f" * Кол-во страниц: {book.pages}\n"
        " */\n"
    )


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1:
        save_books(args[0], read_books(input))
        return 0
    if len(args) == 2:
        filename, title = args
        try:
            book = find_book(filename, title)
        except (OSError, ValueError) as exc:
            print(f"Ошибка чтения файла: {exc}")
            return 1
        if book is None:
            print(f"Книга не найдена: {title}")
            return 1
        print(format_book(book), end="")
        return 0
    print("Неверное число аргументов!")
    print(_USAGE, end="")
    return 1