"""Area of a lagoon dug along a closed trench."""

from __future__ import annotations

from dataclasses import dataclass

from yuletide.calories import _run_cli

_OFFSETS = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}
_HEX_DIRECTIONS = {"0": "R", "1": "D", "2": "L", "3": "U"}


@dataclass(frozen=True)
class Instruction:
    """Dig ``distance`` metres in ``direction`` (one of U, D, L, R)."""

    direction: str
    distance: int

    def __post_init__(self) -> None:
        if self.direction not in _OFFSETS:
            raise ValueError(f"unknown direction: {self.direction!r}")
        if self.distance < 0:
            raise ValueError("distance must not be negative")


def _fields(text: str) -> list[list[str]]:
    return [line.split() for line in text.splitlines() if line.strip()]


def parse_plain(text: str) -> list[Instruction]:
    """Read direction and distance from the first two fields of each line."""
    instructions = []
    for parts in _fields(text):
        if len(parts) < 2:
            raise ValueError(f"malformed line: {' '.join(parts)!r}")
        instructions.append(Instruction(parts[0], int(parts[1])))
    return instructions


def parse_hex(text: str) -> list[Instruction]:
    """Read each instruction from its colour code: five hex digits of distance
    and a final digit giving the direction."""
    instructions = []
    for parts in _fields(text):
        code = parts[-1].strip("()#")
        if len(code) != 6 or code[5] not in _HEX_DIRECTIONS:
            raise ValueError(f"malformed colour code: {parts[-1]!r}")
        instructions.append(Instruction(_HEX_DIRECTIONS[code[5]], int(code[:5], 16)))
    return instructions


def lagoon_area(instructions: list[Instruction]) -> int:
    """Cubic metres held by the trench and everything it encloses."""
    row = col = 0
    twice_area = 0
    perimeter = 0
    for ins in instructions:
        dr, dc = _OFFSETS[ins.direction]
        new_row, new_col = row + dr * ins.distance, col + dc * ins.distance
        twice_area += row * new_col - col * new_row
        perimeter += ins.distance
        row, col = new_row, new_col
    if (row, col) != (0, 0):
        raise ValueError("the trench does not return to its start")
    return (abs(twice_area) + perimeter) // 2 + 1


def part_one(text: str) -> int:
    return lagoon_area(parse_plain(text))


def part_two(text: str) -> int:
    return lagoon_area(parse_hex(text))


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "Measure the lagoon dug from a dig plan.", part_one, part_two)