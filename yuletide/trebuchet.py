"""Trebuchet calibration values from the first and last digit of each line."""

from __future__ import annotations

import string
from collections.abc import Iterator

from yuletide.calories import _run_cli

_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _combine(digits: list[int]) -> int | None:
    if not digits:
        return None
    return digits[0] * 10 + digits[-1]


def digit_value(line: str) -> int | None:
    """Two-digit value of the first and last digit, or None without digits."""
    return _combine([int(ch) for ch in line if ch in string.digits])


def _spelled_digits(line: str) -> Iterator[int]:
    for index, ch in enumerate(line):
        if ch in string.digits:
            yield int(ch)
            continue
        for word, value in _WORDS.items():
            if line.startswith(word, index):
                yield value
                break


def spelled_value(line: str) -> int | None:
    """Like digit_value, but spelled-out digits (possibly overlapping) count too."""
    return _combine(list(_spelled_digits(line)))


def part_one(text: str) -> int:
    """Sum of the numeric calibration values."""
    return sum(v for v in map(digit_value, text.splitlines()) if v is not None)


def part_two(text: str) -> int:
    """Sum of the calibration values counting spelled-out digits."""
    return sum(v for v in map(spelled_value, text.splitlines()) if v is not None)


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "Sum trebuchet calibration values.", part_one, part_two)