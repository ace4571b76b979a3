"""Rolling round rocks across a platform and measuring the load on its north side."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

Grid = tuple[str, ...]

SPIN_CYCLES = 1_000_000_000
_SYMBOLS = frozenset(".#O")


def parse_grid(text: str) -> Grid:
    """Rows of the platform; every row must be the same width."""
    rows = tuple(line.strip() for line in text.splitlines() if line.strip())
    if rows and len({len(row) for row in rows}) != 1:
        raise ValueError("platform rows differ in width")
    bad = set("".join(rows)) - _SYMBOLS
    if bad:
        raise ValueError(f"unexpected platform symbols: {''.join(sorted(bad))!r}")
    return rows


def _roll(line: str, to_start: bool) -> str:
    return "#".join(
        "".join(sorted(segment, reverse=to_start)) for segment in line.split("#")
    )


def _transpose(grid: Sequence[str]) -> Grid:
    return tuple("".join(column) for column in zip(*grid))


def _tilt_rows(grid: Sequence[str], to_start: bool) -> Grid:
    return tuple(_roll(row, to_start) for row in grid)


def _tilt_columns(grid: Sequence[str], to_start: bool) -> Grid:
    return _transpose(_tilt_rows(_transpose(grid), to_start))


def tilt_north(grid: Sequence[str]) -> Grid:
    """Roll every round rock as far north as it will go."""
    return _tilt_columns(grid, True)


def spin_cycle(grid: Sequence[str]) -> Grid:
    """Tilt north, then west, then south, then east."""
    grid = _tilt_columns(grid, True)
    grid = _tilt_rows(grid, True)
    grid = _tilt_columns(grid, False)
    return _tilt_rows(grid, False)


def north_load(grid: Sequence[str]) -> int:
    """Each round rock weighs its distance from the south edge, counting from one."""
    height = len(grid)
    return sum((height - row) * line.count("O") for row, line in enumerate(grid))


def _spin_many(grid: Grid, cycles: int) -> Grid:
    seen = {grid: 0}
    history = [grid]
    for done in range(1, cycles + 1):
        grid = spin_cycle(grid)
        if grid in seen:
            start = seen[grid]
            period = done - start
            return history[start + (cycles - start) % period]
        seen[grid] = done
        history.append(grid)
    return grid


def part_one(text: str) -> int:
    """North load after a single tilt to the north."""
    return north_load(tilt_north(parse_grid(text)))


def part_two(text: str, cycles: int = SPIN_CYCLES) -> int:
    """North load after the given number of spin cycles."""
    if cycles < 0:
        raise ValueError("cycle count must not be negative")
    return north_load(_spin_many(parse_grid(text), cycles))


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yuletide-rocks", description="Tilt a platform of rocks and weigh its load."
    )
    parser.add_argument("input", nargs="?", default="-", help="puzzle input (default: stdin)")
    args = parser.parse_args(argv)
    text = _read(args.input)
    print(part_one(text))
    print(part_two(text))
    return 0