"""Case-insensitive string hash over base-36 chunks of up to six characters."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Sequence

from .mt19937 import MT19937

_log = logging.getLogger(__name__)

_MASK64 = 0xFFFFFFFFFFFFFFFF
CHUNK_SIZE = 6
CHUNK_COUNT = 5
MAX_KEY_LENGTH = CHUNK_SIZE * CHUNK_COUNT
DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)


def letter_digit_to_number(letter: str) -> int:
    """Map a-z (any case) to 0-25 and 0-9 to 26-35; anything else to 0."""
    c = letter.lower()
    if "a" <= c <= "z":
        return ord(c) - ord("a")
    if "0" <= c <= "9":
        return 26 + ord(c) - ord("0")
    return 0


def chunk_value(chunk: str) -> int:
    """Base-36 value of a chunk of at most six characters, left-padded with 'a'."""
    if len(chunk) > CHUNK_SIZE:
        raise ValueError(f"chunk longer than {CHUNK_SIZE} characters: {chunk!r}")
    value = 0
    for ch in chunk.rjust(CHUNK_SIZE, "a"):
        value = value * 36 + letter_digit_to_number(ch)
    return value


class StringHash:
    """Hash a string as a weighted sum of its base-36 chunk values.

    With ``debug`` true the fixed weights are used so results repeat;
    otherwise the weights are drawn from a clock-seeded generator.
    """

    def __init__(self, debug: bool = True) -> None:
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def __call__(self, key: str) -> int:
        if len(key) > MAX_KEY_LENGTH:
            raise ValueError(f"key longer than {MAX_KEY_LENGTH} characters")
        chunks = [key[max(0, end - CHUNK_SIZE):end] for end in range(len(key), 0, -CHUNK_SIZE)]
        w = [0] * CHUNK_COUNT
        for offset, chunk in enumerate(chunks):
            w[CHUNK_COUNT - 1 - offset] = chunk_value(chunk)
        for i, value in enumerate(w):
            _log.debug("w[%d] = %d", i, value)
        return sum(wv * rv for wv, rv in zip(w, self.r_values)) & _MASK64

    def generate_r_values(self) -> None:
        """Replace the weights with values from a clock-seeded generator."""
        generator = MT19937(time.time_ns() & 0xFFFFFFFF)
        self.r_values = [generator() for _ in range(CHUNK_COUNT)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the debug-weight hash of the string given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())