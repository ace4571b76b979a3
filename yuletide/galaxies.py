"""Distances between galaxies in an expanding universe."""

from __future__ import annotations

from collections.abc import Iterable
from functools import partial
from itertools import accumulate, combinations

from yuletide.calories import _run_cli

PART_ONE_EXPANSION = 2
PART_TWO_EXPANSION = 1000000


def _positions(empty: list[bool], expansion: int) -> list[int]:
    growth = [(expansion - 1) if flag else 0 for flag in empty]
    return [index + extra for index, extra in enumerate(accumulate(growth, initial=0))][:len(empty)]


def find_galaxies(lines: Iterable[str] | str, expansion: int = PART_ONE_EXPANSION) -> list[tuple[int, int]]:
    """Return (row, column) of each '#' after every empty row and column is
    replaced by ``expansion`` copies of itself."""
    if expansion < 1:
        raise ValueError("expansion must be at least 1")
    if isinstance(lines, str):
        lines = lines.splitlines()
    rows = [line.rstrip("\r\n") for line in lines if line.strip()]
    width = max((len(row) for row in rows), default=0)
    padded = [row.ljust(width, ".") for row in rows]

    empty_rows = ["#" not in row for row in padded]
    empty_cols = ["#" not in column for column in zip(*padded)] if padded else []
    row_at = _positions(empty_rows, expansion)
    col_at = _positions(empty_cols, expansion)

    return [
        (row_at[r], col_at[c])
        for r, row in enumerate(padded)
        for c, ch in enumerate(row)
        if ch == "#"
    ]


def distance_sum(lines: Iterable[str] | str, expansion: int = PART_ONE_EXPANSION) -> int:
    """Sum of Manhattan distances over every pair of galaxies."""
    galaxies = find_galaxies(lines, expansion)
    return sum(abs(r1 - r2) + abs(c1 - c2) for (r1, c1), (r2, c2) in combinations(galaxies, 2))


def main(argv: list[str] | None = None) -> int:
    return _run_cli(
        argv,
        "Sum distances between expanded galaxies.",
        partial(distance_sum, expansion=PART_ONE_EXPANSION),
        partial(distance_sum, expansion=PART_TWO_EXPANSION),
    )