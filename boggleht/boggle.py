"""Boggle-style board generation and straight-line word search."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence, Set

from .mt19937 import MT19937

Board = list[list[str]]

# Scrabble tile frequencies for A through Z.
_LETTER_FREQUENCIES = (9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)
LETTERS = "".join(
    chr(ord("A") + index) * count for index, count in enumerate(_LETTER_FREQUENCIES)
)

# Directions searched from each cell: right, down and down-right.
DIRECTIONS = ((0, 1), (1, 0), (1, 1))

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def gen_board(size: int, seed: int) -> Board:
    """Return a ``size`` by ``size`` board of letters drawn with Scrabble frequencies."""
    generator = MT19937(seed)
    return [[LETTERS[generator() % len(LETTERS)] for _ in range(size)] for _ in range(size)]


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render the board with each letter right-aligned in a two-character column."""
    return "".join("".join(f"{cell:>2}" for cell in row) + "\n" for row in board)


def print_board(board: Sequence[Sequence[str]]) -> None:
    """Write the board to standard output."""
    print(format_board(board), end="")


def parse_dict(path: str) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words and return ``(words, prefixes)``.

    The prefixes are every proper, non-empty prefix of every word plus the
    empty string. Raises ValueError if the file cannot be opened.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            text = stream.read()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words: set[str] = set()
    prefixes: set[str] = {""}
    for word in text.split():
        words.add(word)
        prefixes.update(word[:i] for i in range(1, len(word)))
    return words, prefixes


def _longest_word_along(
    dictionary: Set[str],
    prefixes: Set[str],
    board: Sequence[Sequence[str]],
    row: int,
    col: int,
    d_row: int,
    d_col: int,
) -> str | None:
    """Walk from (row, col) in one direction while the letters form a prefix.

    Returns the longest dictionary word met on the way, or None.
    """
    rows = len(board)
    cols = len(board[0]) if rows else 0
    word = ""
    best = None
    while row < rows and col < cols:
        word += board[row][col]
        if word in dictionary:
            best = word
        if word not in prefixes:
            break
        row += d_row
        col += d_col
    return best


def boggle(
    dictionary: Set[str], prefixes: Set[str], board: Sequence[Sequence[str]]
) -> set[str]:
    """Find words read right, down or diagonally down-right from any cell.

    From each cell and direction only the longest matching word is kept.
    """
    found: set[str] = set()
    size = len(board)
    for row in range(size):
        for col in range(size):
            for d_row, d_col in DIRECTIONS:
                word = _longest_word_along(dictionary, prefixes, board, row, col, d_row, d_col)
                if word is not None:
                    found.add(word)
    return found


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a board, search it against a dictionary file and list the words."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = _atoi(args[0])
    seed = _atoi(args[1])
    board = gen_board(size, seed)
    print_board(board)
    try:
        dictionary, prefixes = parse_dict(args[2])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    found = boggle(dictionary, prefixes, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())