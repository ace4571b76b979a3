"""Circular number mixing used to decrypt grove coordinates."""

from __future__ import annotations

from yuletide.calories import _run_cli

GROVE_OFFSETS = (1000, 2000, 3000)


def parse_numbers(text: str) -> list[int]:
    """Parse one integer per non-blank line."""
    return [int(line) for line in text.split()]


def mix(numbers: list[int]) -> list[int]:
    """Move every number, in original order, by its value around the circle."""
    count = len(numbers)
    if count < 2:
        return list(numbers)
    order = list(range(count))
    for original, value in enumerate(numbers):
        position = order.index(original)
        order.pop(position)
        order.insert((position + value) % (count - 1), original)
    return [numbers[index] for index in order]


def grove_sum(numbers: list[int]) -> int:
    """Sum of the values 1000, 2000 and 3000 places after zero once mixed."""
    mixed = mix(numbers)
    try:
        zero = mixed.index(0)
    except ValueError:
        raise ValueError("the sequence contains no zero") from None
    return sum(mixed[(zero + offset) % len(mixed)] for offset in GROVE_OFFSETS)


def main(argv: list[str] | None = None) -> int:
    return _run_cli(
        argv,
        "Mix an encrypted file and find grove coordinates.",
        lambda text: grove_sum(parse_numbers(text)),
    )