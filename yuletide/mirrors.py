"""Lines of reflection in patterns of ash and rocks."""

from __future__ import annotations

from collections.abc import Sequence

from yuletide.calories import _blocks, _run_cli

ROW_WEIGHT = 100


def parse_patterns(text: str) -> list[list[str]]:
    """Split the input into patterns separated by blank lines."""
    return list(_blocks(text))


def find_row_mirror(pattern: Sequence[str], skip: int | None = None) -> int | None:
    """Number of rows above the first horizontal mirror line, ignoring ``skip``."""
    rows = list(pattern)
    for line in range(1, len(rows)):
        if line == skip:
            continue
        reach = min(line, len(rows) - line)
        if all(rows[line + k] == rows[line - 1 - k] for k in range(reach)):
            return line
    return None


def _columns(pattern: Sequence[str]) -> list[str]:
    return ["".join(column) for column in zip(*pattern)]


def find_column_mirror(pattern: Sequence[str], skip: int | None = None) -> int | None:
    """Number of columns left of the first vertical mirror line, ignoring ``skip``."""
    return find_row_mirror(_columns(pattern), skip)


def reflection_score(pattern: Sequence[str]) -> int:
    """100 per row above a horizontal mirror plus columns left of a vertical one."""
    rows = find_row_mirror(pattern) or 0
    columns = find_column_mirror(pattern) or 0
    return ROW_WEIGHT * rows + columns


def smudged_score(pattern: Sequence[str]) -> int:
    """Score of the new mirror line found after fixing a single smudge."""
    original_row = find_row_mirror(pattern)
    original_column = find_column_mirror(pattern)
    grid = [list(row) for row in pattern]
    for row in grid:
        for index, tile in enumerate(row):
            row[index] = "#" if tile == "." else "."
            candidate = ["".join(cells) for cells in grid]
            found = find_row_mirror(candidate, original_row)
            if found is not None:
                return ROW_WEIGHT * found
            found = find_column_mirror(candidate, original_column)
            if found is not None:
                return found
            row[index] = tile
    return 0


def part_one(text: str) -> int:
    return sum(reflection_score(p) for p in parse_patterns(text))


def part_two(text: str) -> int:
    return sum(smudged_score(p) for p in parse_patterns(text))


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "Find lines of reflection in patterns.", part_one, part_two)