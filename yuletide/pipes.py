"""Following a loop of pipes to the tile farthest from the start."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

Position = tuple[int, int]

# Offsets (row, column) that each pipe shape connects.
PIPES: dict[str, tuple[Position, Position]] = {
    "|": ((-1, 0), (1, 0)),
    "-": ((0, -1), (0, 1)),
    "L": ((-1, 0), (0, 1)),
    "J": ((-1, 0), (0, -1)),
    "7": ((1, 0), (0, -1)),
    "F": ((1, 0), (0, 1)),
}

# Neighbours of the start, scanned clockwise, with the tiles that connect back.
_START_CHECKS: tuple[tuple[Position, str], ...] = (
    ((-1, 0), "|7F"),
    ((0, 1), "-J7"),
    ((1, 0), "|LJ"),
    ((0, -1), "-FL"),
)


def parse_maze(text: str) -> tuple[list[str], Position]:
    """Return the maze rows and the (row, column) of the start tile ``S``."""
    maze = [line.rstrip("\r\n") for line in text.splitlines() if line.strip()]
    for row, line in enumerate(maze):
        col = line.find("S")
        if col != -1:
            return maze, (row, col)
    raise ValueError("the maze has no start tile")


def _tile(maze: Sequence[str], position: Position) -> str:
    row, col = position
    if 0 <= row < len(maze) and 0 <= col < len(maze[row]):
        return maze[row][col]
    return "."


def start_exits(maze: Sequence[str], start: Position) -> list[Position]:
    """Neighbouring tiles whose pipes connect to the start, clockwise from up."""
    row, col = start
    exits = []
    for (dr, dc), accepted in _START_CHECKS:
        neighbour = (row + dr, col + dc)
        if _tile(maze, neighbour) in accepted:
            exits.append(neighbour)
    return exits


def step(maze: Sequence[str], current: Position, previous: Position) -> Position:
    """The tile reached by leaving ``current`` through the end not used to enter."""
    tile = _tile(maze, current)
    try:
        ends = PIPES[tile]
    except KeyError:
        raise ValueError(f"no pipe at {current}: {tile!r}") from None
    came_from = (previous[0] - current[0], previous[1] - current[1])
    if came_from not in ends:
        raise ValueError(f"pipe at {current} does not connect to {previous}")
    dr, dc = ends[1] if ends[0] == came_from else ends[0]
    return current[0] + dr, current[1] + dc


def farthest_distance(text: str) -> int:
    """Steps from the start to the point of the loop farthest from it."""
    maze, start = parse_maze(text)
    exits = start_exits(maze, start)
    if len(exits) < 2:
        raise ValueError("no loop leaves the start tile")
    first, second = exits[0], exits[1]
    first_prev = second_prev = start
    steps = 1
    limit = sum(len(line) for line in maze)
    while first != second:
        if steps > limit:
            raise ValueError("the paths from the start never meet")
        first, first_prev = step(maze, first, first_prev), first
        second, second_prev = step(maze, second, second_prev), second
        steps += 1
    return steps


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yuletide-pipes", description="Find the farthest point of a pipe loop."
    )
    parser.add_argument("input", nargs="?", default="-", help="puzzle input (default: stdin)")
    args = parser.parse_args(argv)
    print(farthest_distance(_read(args.input)))
    return 0