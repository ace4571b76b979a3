"""Light beams bouncing through a contraption of mirrors and splitters."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence
from enum import Enum

Grid = tuple[str, ...]
Position = tuple[int, int]

_SYMBOLS = frozenset(".|-/\\")


class Direction(Enum):
    """A heading; its value is the (row, column) step it takes."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


_SLASH = {
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.RIGHT: Direction.UP,
}

_BACKSLASH = {
    Direction.UP: Direction.LEFT,
    Direction.DOWN: Direction.RIGHT,
    Direction.LEFT: Direction.UP,
    Direction.RIGHT: Direction.DOWN,
}


def parse_grid(text: str) -> Grid:
    """Rows of the contraption; every row must be the same width."""
    rows = tuple(line.strip() for line in text.splitlines() if line.strip())
    if rows and len({len(row) for row in rows}) != 1:
        raise ValueError("contraption rows differ in width")
    bad = set("".join(rows)) - _SYMBOLS
    if bad:
        raise ValueError(f"unexpected contraption symbols: {''.join(sorted(bad))!r}")
    return rows


def deflect(tile: str, direction: Direction) -> tuple[Direction, ...]:
    """Directions a beam leaves ``tile`` in after arriving heading ``direction``."""
    if tile == ".":
        return (direction,)
    if tile == "-":
        if direction.vertical:
            return (Direction.LEFT, Direction.RIGHT)
        return (direction,)
    if tile == "|":
        if direction.vertical:
            return (direction,)
        return (Direction.UP, Direction.DOWN)
    if tile == "/":
        return (_SLASH[direction],)
    if tile == "\\":
        return (_BACKSLASH[direction],)
    raise ValueError(f"unknown tile: {tile!r}")


def energized(
    grid: Sequence[str], row: int, col: int, direction: Direction
) -> frozenset[Position]:
    """Tiles a beam entering (row, col) heading ``direction`` passes through.

    The tile the beam enters acts on it like any other."""
    height = len(grid)
    width = len(grid[0]) if height else 0
    if not (0 <= row < height and 0 <= col < width):
        raise ValueError(f"start ({row}, {col}) lies outside the grid")

    seen: set[tuple[int, int, Direction]] = set()
    queue = deque([(row, col, direction)])
    while queue:
        state = queue.popleft()
        if state in seen:
            continue
        seen.add(state)
        r, c, heading = state
        for out in deflect(grid[r][c], heading):
            dr, dc = out.value
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width:
                queue.append((nr, nc, out))
    return frozenset((r, c) for r, c, _ in seen)


def _edge_starts(grid: Sequence[str]):
    height = len(grid)
    width = len(grid[0]) if height else 0
    for r in range(height):
        yield r, 0, Direction.RIGHT
        yield r, width - 1, Direction.LEFT
    for c in range(width):
        yield height - 1, c, Direction.UP
        yield 0, c, Direction.DOWN


def part_one(text: str) -> int:
    """Tiles energized by a beam entering the top-left corner heading right."""
    grid = parse_grid(text)
    if not grid:
        return 0
    return len(energized(grid, 0, 0, Direction.RIGHT))


def part_two(text: str) -> int:
    """Most tiles energized by any beam entering from an edge."""
    grid = parse_grid(text)
    return max(
        (len(energized(grid, r, c, d)) for r, c, d in _edge_starts(grid)),
        default=0,
    )


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yuletide-beams", description="Count tiles energized by a light beam."
    )
    parser.add_argument("input", nargs="?", default="-", help="puzzle input (default: stdin)")
    args = parser.parse_args(argv)
    text = _read(args.input)
    print(part_one(text))
    print(part_two(text))
    return 0