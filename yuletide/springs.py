"""Counting the arrangements of damaged springs that fit a condition record."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache

from yuletide.calories import _run_cli

_SYMBOLS = frozenset(".#?")
UNFOLD_COPIES = 5


def _check_pattern(pattern: str) -> None:
    bad = set(pattern) - _SYMBOLS
    if bad:
        raise ValueError(f"unexpected spring symbols: {''.join(sorted(bad))!r}")


def _check_groups(groups: Sequence[int]) -> tuple[int, ...]:
    result = tuple(groups)
    if any(size < 1 for size in result):
        raise ValueError("damaged group sizes must be positive")
    return result


def parse_record(line: str) -> tuple[str, tuple[int, ...]]:
    """Split a line such as ``???.### 1,1,3`` into its pattern and group sizes."""
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(f"malformed record: {line!r}")
    pattern, sizes = parts
    _check_pattern(pattern)
    try:
        groups = tuple(int(size) for size in sizes.split(",") if size)
    except ValueError:
        raise ValueError(f"malformed group sizes: {sizes!r}") from None
    return pattern, _check_groups(groups)


def unfold(pattern: str, groups: Sequence[int]) -> tuple[str, tuple[int, ...]]:
    """Five copies of the pattern joined by ``?`` and five copies of the groups."""
    return "?".join([pattern] * UNFOLD_COPIES), tuple(groups) * UNFOLD_COPIES


def count_arrangements(pattern: str, groups: Sequence[int]) -> int:
    """Number of ways to place the damaged groups, in order, consistent with
    the known working (``.``) and damaged (``#``) springs."""
    _check_pattern(pattern)
    sizes = _check_groups(groups)
    length = len(pattern)

    @cache
    def fit(position: int, group: int) -> int:
        if group == len(sizes):
            return 0 if "#" in pattern[position:] else 1
        size = sizes[group]
        total = 0
        for start in range(position, length - size + 1):
            if start > position and pattern[start - 1] == "#":
                break
            end = start + size
            if "." in pattern[start:end]:
                continue
            if end < length and pattern[end] == "#":
                continue
            total += fit(end + 1, group + 1)
        return total

    return fit(0, 0)


def _records(text: str) -> list[tuple[str, tuple[int, ...]]]:
    return [parse_record(line) for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    """Sum of the arrangement counts of every record."""
    return sum(count_arrangements(p, g) for p, g in _records(text))


def part_two(text: str) -> int:
    """Sum of the arrangement counts of every unfolded record."""
    return sum(count_arrangements(*unfold(p, g)) for p, g in _records(text))


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "Count damaged spring arrangements.", part_one, part_two)