"""Least heat loss for a crucible driven across a city of heat-losing blocks."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Sequence

Grid = tuple[tuple[int, ...], ...]

_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def parse_grid(text: str) -> Grid:
    """Heat loss of every city block; rows of digits, all the same width."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if rows and len({len(row) for row in rows}) != 1:
        raise ValueError("city rows differ in width")
    for row in rows:
        if not row.isdigit():
            raise ValueError(f"city row holds a non-digit: {row!r}")
    return tuple(tuple(int(ch) for ch in row) for row in rows)


def min_heat_loss(grid: Sequence[Sequence[int]], min_run: int, max_run: int) -> int:
    """Least heat lost going from the top-left block to the bottom-right one.

    The crucible moves at most ``max_run`` blocks in a straight line, must move
    at least ``min_run`` blocks before it turns or stops, and never reverses.
    The starting block's heat loss is not counted."""
    if min_run < 1 or max_run < min_run:
        raise ValueError("runs must satisfy 1 <= min_run <= max_run")
    height = len(grid)
    if height == 0 or len(grid[0]) == 0:
        raise ValueError("the city is empty")
    width = len(grid[0])
    target = (height - 1, width - 1)
    if target == (0, 0):
        return 0

    # State: (heat, row, col, heading index or -1, blocks moved in that heading).
    queue: list[tuple[int, int, int, int, int]] = [(0, 0, 0, -1, 0)]
    best: dict[tuple[int, int, int, int], int] = {(0, 0, -1, 0): 0}
    while queue:
        heat, row, col, heading, run = heapq.heappop(queue)
        if best.get((row, col, heading, run), heat) < heat:
            continue
        if (row, col) == target and run >= min_run:
            return heat
        for index, (dr, dc) in enumerate(_STEPS):
            if heading != -1:
                back = _STEPS[heading]
                if (dr, dc) == (-back[0], -back[1]):
                    continue
                if index == heading:
                    if run >= max_run:
                        continue
                    new_run = run + 1
                else:
                    if run < min_run:
                        continue
                    new_run = 1
            else:
                new_run = 1
            nr, nc = row + dr, col + dc
            if not (0 <= nr < height and 0 <= nc < width):
                continue
            new_heat = heat + grid[nr][nc]
            key = (nr, nc, index, new_run)
            if new_heat < best.get(key, new_heat + 1):
                best[key] = new_heat
                heapq.heappush(queue, (new_heat, nr, nc, index, new_run))
    raise ValueError("the crucible cannot reach the factory")


def part_one(text: str) -> int:
    """Least heat loss for a crucible that moves at most three blocks straight."""
    return min_heat_loss(parse_grid(text), 1, 3)


def part_two(text: str) -> int:
    """Least heat loss for an ultra crucible: four to ten blocks per run."""
    return min_heat_loss(parse_grid(text), 4, 10)


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yuletide-crucible", description="Find the least heat loss across the city."
    )
    parser.add_argument("input", nargs="?", default="-", help="puzzle input (default: stdin)")
    args = parser.parse_args(argv)
    text = _read(args.input)
    print(part_one(text))
    print(part_two(text))
    return 0