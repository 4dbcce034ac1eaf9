import struct

import pytest

from labworks.books import (
    Book,
    decode_books,
    encode_books,
    find_book,
    format_book,
    main,
    read_books,
    save_books,
)


def _scripted(answers):
    replies = iter(answers)
    return lambda prompt: next(replies)


def test_encode_single_book_layout():
    assert encode_books([Book("ab", 5)]) == struct.pack("<ii", 5, 2) + b"ab"


def test_round_trip_keeps_order_and_values():
    books = [Book("Dune", 412), Book("Война", 1225), Book("", 0)]
    assert decode_books(encode_books(books)) == books


def test_encode_empty_is_empty():
    assert encode_books([]) == b""
    assert decode_books(b"") == []


def test_decode_truncated_header_raises():
    data = encode_books([Book("abc", 3)])
    with pytest.raises(ValueError):
        decode_books(data + b"\x01\x00")


def test_decode_truncated_title_raises():
    data = encode_books([Book("abcdef", 3)])
    with pytest.raises(ValueError):
        decode_books(data[:-2])


def test_save_books_appends_bin_suffix(tmp_path):
    books = [Book("One", 10), Book("Two", 20)]
    written = save_books(tmp_path / "library", books)
    assert written.name == "library.bin"
    assert decode_books(written.read_bytes()) == books


def test_find_book_returns_first_match(tmp_path):
    written = save_books(tmp_path / "lib", [Book("A", 1), Book("B", 2), Book("B", 3)])
    assert find_book(written, "B") == Book("B", 2)


def test_find_book_missing_title_returns_none(tmp_path):
    written = save_books(tmp_path / "lib", [Book("A", 1)])
    assert find_book(written, "Z") is None


def test_read_books_collects_until_zero():
    ask = _scripted(["2", "Alpha", "10", "Beta", "20", "0"])
    assert read_books(ask) == [Book("Alpha", 10), Book("Beta", 20)]


def test_read_books_stops_at_limit():
    ask = _scripted(["5", "A", "1", "B", "2", "C", "3"])
    assert read_books(ask, limit=2) == [Book("A", 1), Book("B", 2)]


def test_read_books_non_numeric_count_stops():
    assert read_books(_scripted(["many"])) == []


def test_read_books_takes_first_word_of_title():
    ask = _scripted(["1", "Short title", "7", "0"])
    assert read_books(ask) == [Book("Short", 7)]


def test_format_book_contains_fields():
    text = format_book(Book("Dune", 412))
    assert " * Заголовок: Dune\n" in text
    assert " * Кол-во страниц: 412\n" in text
    assert text.startswith("\n/**\n")


def test_main_finds_book(tmp_path, capsys):
    written = save_books(tmp_path / "lib", [Book("Dune", 412)])
    assert main([str(written), "Dune"]) == 0
    assert "Dune" in capsys.readouterr().out


def test_main_missing_book_fails(tmp_path):
    written = save_books(tmp_path / "lib", [Book("Dune", 412)])
    assert main([str(written), "Other"]) == 1


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "Неверное число аргументов!" in capsys.readouterr().out


def test_main_saves_entered_books(tmp_path, monkeypatch):
    replies = iter(["1", "Solo", "99", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    assert main([str(tmp_path / "out")]) == 0
    assert decode_books((tmp_path / "out.bin").read_bytes()) == [Book("Solo", 99)]