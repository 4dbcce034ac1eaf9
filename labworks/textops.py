"""Character-level text transforms applied to file contents by the processors.

Every transform returns the new text together with the number of changes made.
"""

_DIGITS = frozenset("0123456789")


def _check_pair(name: str, pair: str) -> None:
    if len(pair) != 2:
        raise ValueError(f"{name} must be exactly two characters, got {pair!r}")


def _check_symbol(symbol: str) -> None:
    if len(symbol) != 1:
        raise ValueError(f"symbol must be a single character, got {symbol!r}")


def replace_pair(text: str, old_pair: str, new_pair: str) -> tuple[str, int]:
    """Replace every non-overlapping occurrence of a two-character pair, left to right."""
    _check_pair("old_pair", old_pair)
    _check_pair("new_pair", new_pair)
    return text.replace(old_pair, new_pair), text.count(old_pair)


def collapse_repeats(text: str, count: int) -> tuple[str, int]:
    """Blank out a character equal to its predecessor, at most ``count`` times.

    Scanning starts at the third character; after a replacement the next
    character is skipped.
    """
    chars = list(text)
    replaced = 0
    index = 2
    while index < len(chars) and replaced < count:
        if chars[index - 1] == chars[index]:
            chars[index] = " "
            replaced += 1
            index += 2
        else:
            index += 1
    return "".join(chars), replaced


def replace_digits(text: str, symbol: str) -> tuple[str, int]:
    """Replace every ASCII digit with ``symbol``."""
    _check_symbol(symbol)
    replaced = sum(1 for ch in text if ch in _DIGITS)
    return "".join(symbol if ch in _DIGITS else ch for ch in text), replaced


def blank_digits(text: str, count: int) -> tuple[str, int]:
    """Replace ASCII digits with spaces, stopping once ``count`` have been replaced."""
    chars = list(text)
    replaced = 0
    for index, ch in enumerate(chars):
        if ch in _DIGITS:
            chars[index] = " "
            replaced += 1
        if replaced == count:
            break
    return "".join(chars), replaced


def mark_line_ends(text: str, symbol: str) -> tuple[str, int]:
    """Overwrite the last character of every non-empty line with ``symbol``."""
    _check_symbol(symbol)
    chars = list(text)
    marked = 0
    for index, ch in enumerate(chars):
        if index > 0 and ch == "\n" and chars[index - 1] != "\n":
            chars[index - 1] = symbol
            marked += 1
    return "".join(chars), marked