"""Count bubble-sort comparisons for best, worst and random key orders."""

import argparse
import random

AMOUNTS = (8, 32, 64, 88, 108)
HEADERS = ("num", "Te1", "Te2", "T1", "T2", "Te1 / T1", "Te2 / T2")

_BORDER = " | "
_COL_WIDTH = 8


def bubble_sort(keys):
    """Return a sorted copy of ``keys`` and the number of comparisons made."""
    items = list(keys)
    size = len(items)
    comparisons = 0
    for _ in range(size - 1):
        swapped = False
        for x in range(size - 1):
            comparisons += 1
            if items[x + 1] < items[x]:
                items[x], items[x + 1] = items[x + 1], items[x]
                swapped = True
        if not swapped:
            break
    return items, comparisons


def random_keys(amount: int, rng: random.Random | None = None) -> list[int]:
    """A random permutation of ``1..amount``."""
    rng = rng if rng is not None else random.Random()
    return rng.sample(range(1, amount + 1), amount)


def best_keys(amount: int) -> list[int]:
    """Keys already in ascending order."""
    return list(range(amount))


def worst_keys(amount: int) -> list[int]:
    """Keys in descending order."""
    return list(range(amount, 0, -1))


def measure(amount: int, rng: random.Random | None = None) -> tuple[int, int, int, int]:
    """Return ``(amount, best, worst, average)`` comparison counts."""
    _, average = bubble_sort(random_keys(amount, rng))
    _, best = bubble_sort(best_keys(amount))
    _, worst = bubble_sort(worst_keys(amount))
    return amount, best, worst, average


def _row(cells) -> str:
    return _BORDER.join(f"{cell:>{_COL_WIDTH}}" for cell in cells)


def render_table(measurements) -> str:
    """Render measurements as the comparison table."""
    width = _COL_WIDTH * len(HEADERS) + len(_BORDER) * (len(HEADERS) - 1)
    lines = [_row(HEADERS), "-" * width]
    for amount, best, worst, average in measurements:
        lines.append(_row((amount, best, best, worst, worst, average, average)))
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "amounts", nargs="*", type=int, default=list(AMOUNTS),
        help="numbers of keys to measure",
    )
    args = parser.parse_args(argv)
    rng = random.Random()
    print(render_table(measure(amount, rng) for amount in args.amounts), end="")
    return 0